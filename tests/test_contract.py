import pytest

from controlled_mint.contract import ControlledMint, Opcode
from controlled_mint.schemas import SchemaAlkaneId, SchemaControlledMintInitializationParameters
from controlled_mint.token import AlkaneId, AlkaneTransfer, Context, ContractError

MYSELF = AlkaneId(block=4, tx=100)
OWNER = AlkaneId(block=2, tx=5)
STRANGER = AlkaneId(block=2, tx=6)
PARAMS = SchemaControlledMintInitializationParameters("Taco", "TACO", 1000, 5000)


def _to_inputs(opcode, payload=b""):
    chunks = [payload[i : i + 16].ljust(16, b"\0") for i in range(0, len(payload), 16)]
    return [int(opcode)] + [int.from_bytes(chunk, "little") for chunk in chunks]


def _context(caller, inputs, incoming=None):
    return Context(myself=MYSELF, caller=caller, inputs=inputs, incoming_alkanes=list(incoming or []))


def _initialized():
    contract = ControlledMint()
    contract.initialize(_context(OWNER, _to_inputs(Opcode.INITIALIZE, PARAMS.encode())))
    return contract


def test_initialize_mints_premine_and_sets_owner():
    contract = ControlledMint()
    incoming = [AlkaneTransfer(id=STRANGER, value=1)]
    response = contract.initialize(
        _context(OWNER, _to_inputs(Opcode.INITIALIZE, PARAMS.encode()), incoming)
    )
    assert response.alkanes == incoming + [AlkaneTransfer(id=MYSELF, value=PARAMS.premine)]
    assert contract.total_supply() == PARAMS.premine
    assert contract.get_consts() == PARAMS
    assert contract.get_owner(_context(STRANGER, [105])).data == SchemaAlkaneId(2, 5).encode()


def test_initialize_twice_fails():
    contract = _initialized()
    with pytest.raises(ContractError, match="Contract already initialized"):
        contract.initialize(_context(OWNER, _to_inputs(Opcode.INITIALIZE, PARAMS.encode())))
    assert contract.total_supply() == PARAMS.premine


def test_initialize_bad_parameters_changes_nothing():
    contract = ControlledMint()
    with pytest.raises(ContractError, match="Failed to decode initialization parameters"):
        contract.initialize(_context(OWNER, [0]))
    assert contract.get_owner(_context(OWNER, [105])).data == b""
    assert contract.total_supply() == 0


def test_mint_exact_by_owner():
    contract = _initialized()
    response = contract.mint_exact(_context(OWNER, [106, 50]), 50)
    assert response.alkanes == [AlkaneTransfer(id=MYSELF, value=50)]
    assert contract.total_supply() == PARAMS.premine + 50


def test_mint_exact_by_stranger_fails():
    contract = _initialized()
    with pytest.raises(ContractError, match="Caller is not the owner"):
        contract.mint_exact(_context(STRANGER, [106, 50]), 50)
    assert contract.total_supply() == PARAMS.premine


def test_mint_exact_before_initialize_fails():
    with pytest.raises(ContractError, match="Failed to decode owner"):
        ControlledMint().mint_exact(_context(OWNER, [106, 1]), 1)


def test_change_owner():
    contract = _initialized()
    new_owner = SchemaAlkaneId(block=2, tx=6)
    contract.change_owner(_context(OWNER, _to_inputs(Opcode.CHANGE_OWNER, new_owner.encode())))
    with pytest.raises(ContractError, match="Caller is not the owner"):
        contract.mint_exact(_context(OWNER, [106, 1]), 1)
    contract.mint_exact(_context(STRANGER, [106, 1]), 1)
    assert contract.total_supply() == PARAMS.premine + 1


def test_change_owner_without_params_fails():
    contract = _initialized()
    with pytest.raises(ContractError, match="serialization failure of params"):
        contract.change_owner(_context(OWNER, [108]))


def test_renounce_ownership():
    contract = _initialized()
    contract.renounce_ownership(_context(OWNER, [107]))
    owner = SchemaAlkaneId.decode(contract.get_owner(_context(OWNER, [105])).data)
    assert owner == SchemaAlkaneId(block=2, tx=0)
    with pytest.raises(ContractError, match="Caller is not the owner"):
        contract.mint_exact(_context(OWNER, [106, 1]), 1)


def test_dispatch_getters():
    contract = _initialized()
    assert contract.dispatch(_context(STRANGER, [99])).data == b"Taco"
    assert contract.dispatch(_context(STRANGER, [100])).data == b"TACO"
    supply = contract.dispatch(_context(STRANGER, [101])).data
    assert int.from_bytes(supply, "little") == PARAMS.premine
    cap = contract.dispatch(_context(STRANGER, [102])).data
    assert int.from_bytes(cap, "little") == PARAMS.cap


def test_dispatch_mint_exact():
    contract = _initialized()
    response = contract.dispatch(_context(OWNER, [106, 7]))
    assert response.alkanes == [AlkaneTransfer(id=MYSELF, value=7)]


def test_dispatch_mint_exact_missing_amount():
    with pytest.raises(ContractError, match="missing amount"):
        _initialized().dispatch(_context(OWNER, [106]))


def test_dispatch_mint_tokens_refused():
    with pytest.raises(ContractError, match="Taqueria is unmintable"):
        _initialized().dispatch(_context(OWNER, [77]))


def test_dispatch_unknown_opcode():
    with pytest.raises(ContractError, match="unrecognized opcode"):
        _initialized().dispatch(_context(OWNER, [55]))


def test_dispatch_without_inputs():
    with pytest.raises(ContractError, match="missing opcode"):
        ControlledMint().dispatch(_context(OWNER, []))