"""The canonical mintable token interface and the runtime pieces it uses."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from .schemas import U128_MAX, DecodeError, SchemaControlledMintInitializationParameters


class ContractError(Exception):
    """Raised when a contract call fails."""


@dataclass(frozen=True)
class AlkaneId:
    """Identifier of an alkane: the block and transaction that created it."""

    block: int
    tx: int


@dataclass(frozen=True)
class AlkaneTransfer:
    """An amount of one alkane moving out of a call."""

    id: AlkaneId
    value: int


@dataclass
class CallResponse:
    """What a contract call returns: outgoing alkanes and a data payload."""

    alkanes: list[AlkaneTransfer] = field(default_factory=list)
    data: bytes = b""

    @classmethod
    def forward(cls, incoming: Iterable[AlkaneTransfer]) -> CallResponse:
        """Build a response that hands every incoming alkane back."""
        return cls(alkanes=list(incoming))


@dataclass
class Context:
    """The call context: who is running, who called, and with what."""

    myself: AlkaneId
    caller: AlkaneId
    inputs: list[int] = field(default_factory=list)
    incoming_alkanes: list[AlkaneTransfer] = field(default_factory=list)


def _key(key: str | bytes) -> bytes:
    return key.encode("utf-8") if isinstance(key, str) else bytes(key)


class Storage:
    """Byte-keyed contract storage; missing keys read as empty."""

    def __init__(self, values: Mapping[str | bytes, bytes] | None = None) -> None:
        self._values: dict[bytes, bytes] = {
            _key(k): bytes(v) for k, v in (values or {}).items()
        }

    def get(self, key: str | bytes) -> bytes:
        return self._values.get(_key(key), b"")

    def set(self, key: str | bytes, value: bytes) -> None:
        self._values[_key(key)] = bytes(value)

    def get_u128(self, key: str | bytes) -> int:
        return int.from_bytes(self.get(key)[:16].ljust(16, b"\0"), "little")

    def set_u128(self, key: str | bytes, value: int) -> None:
        if not 0 <= value <= U128_MAX:
            raise ValueError(f"value does not fit in 128 bits: {value}")
        self.set(key, value.to_bytes(16, "little"))


_UNSET_CONSTS = SchemaControlledMintInitializationParameters(
    token_name="UNSET", token_symbol="UNSET", premine=0, cap=U128_MAX
)


class MintableToken:
    """Default behaviour of a token: supply, mint counter, metadata getters."""

    CONSTS_KEY = b"/consts"
    TOTAL_SUPPLY_KEY = b"/totalsupply"
    MINTED_KEY = b"/minted"
    TX_HASHES_KEY = b"/tx-hashes/"

    #: Whether the public mint opcode is open; tokens of this kind are not.
    mintable = False

    def __init__(self, storage: Storage | None = None) -> None:
        self.storage = storage if storage is not None else Storage()

    def get_consts(self) -> SchemaControlledMintInitializationParameters:
        """Stored constants, or placeholder values when none are stored."""
        try:
            return SchemaControlledMintInitializationParameters.decode(
                self.storage.get(self.CONSTS_KEY)
            )
        except DecodeError:
            return _UNSET_CONSTS

    def name(self) -> str:
        return self.get_consts().token_name

    def symbol(self) -> str:
        return self.get_consts().token_symbol

    def total_supply(self) -> int:
        return self.storage.get_u128(self.TOTAL_SUPPLY_KEY)

    def set_total_supply(self, value: int) -> None:
        self.storage.set_u128(self.TOTAL_SUPPLY_KEY, value)

    def increase_total_supply(self, value: int) -> None:
        new_supply = self.total_supply() + value
        if new_supply > U128_MAX:
            raise ContractError("total supply overflow")
        self.set_total_supply(new_supply)

    def mint(self, context: Context, value: int) -> AlkaneTransfer:
        self.increase_total_supply(value)
        return AlkaneTransfer(id=context.myself, value=value)

    def minted(self) -> int:
        return self.storage.get_u128(self.MINTED_KEY)

    def set_minted(self, value: int) -> None:
        self.storage.set_u128(self.MINTED_KEY, value)

    def increment_mint(self) -> None:
        new_count = self.minted() + 1
        if new_count > U128_MAX:
            raise ContractError("mint counter overflow")
        self.set_minted(new_count)

    def value_per_mint(self) -> int:
        return 0

    def cap(self) -> int:
        return self.get_consts().cap

    def has_tx_hash(self, txid: bytes) -> bool:
        return self.storage.get(self.TX_HASHES_KEY + bytes(txid))[:1] == b"\x01"

    def add_tx_hash(self, txid: bytes) -> None:
        self.storage.set(self.TX_HASHES_KEY + bytes(txid), b"\x01")

    def mint_tokens(self, context: Context) -> CallResponse:
        """Public mint: refused unless the token is mintable."""
        if not self.mintable:
            raise ContractError("Taqueria is unmintable")
        self.increment_mint()
        response = CallResponse.forward(context.incoming_alkanes)
        response.alkanes.append(self.mint(context, self.value_per_mint()))
        return response

    def _respond(self, context: Context, data: bytes) -> CallResponse:
        response = CallResponse.forward(context.incoming_alkanes)
        response.data = data
        return response

    def get_name(self, context: Context) -> CallResponse:
        return self._respond(context, self.name().encode("utf-8"))

    def get_symbol(self, context: Context) -> CallResponse:
        return self._respond(context, self.symbol().encode("utf-8"))

    def get_total_supply(self, context: Context) -> CallResponse:
        return self._respond(context, self.total_supply().to_bytes(16, "little"))

    def get_cap(self, context: Context) -> CallResponse:
        return self._respond(context, self.cap().to_bytes(16, "little"))

    def get_minted(self, context: Context) -> CallResponse:
        return self._respond(context, self.minted().to_bytes(16, "little"))

    def get_value_per_mint(self, context: Context) -> CallResponse:
        return self._respond(context, self.value_per_mint().to_bytes(16, "little"))

    def get_data(self, context: Context) -> CallResponse:
        return CallResponse.forward(context.incoming_alkanes)