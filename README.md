# controlled_mint

This package models a mintable token contract that an owner controls.
Whoever initializes the contract becomes its owner. Only the owner can mint
more tokens, hand ownership to another id, or renounce ownership. The public
mint opcode is refused.

State lives in a key/value `Storage` object. Call parameters arrive as a list
of integers. The first integer is the opcode. The rest are 128-bit values
that are decoded with a little-endian, length-prefixed (Borsh-style) schema
codec.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `controlled_mint.schemas`
  - `SchemaAlkaneId` holds a `u32` block and a `u64` tx.
  - `SchemaControlledMintInitializationParameters` holds `token_name`,
    `token_symbol`, `premine` and `cap`.
  - Both have `encode()`, `decode(data)` and `read(stream)`.
  - A truncated buffer or invalid UTF-8 raises `DecodeError`, which is a
    subclass of `ValueError`.
  - An out-of-range field raises `ValueError` when the object is constructed.
- `controlled_mint.utils`
  - `get_byte_array_from_inputs(inputs)` skips the opcode and concatenates the
    remaining inputs as 16 little-endian bytes each. Empty inputs raise
    `ValueError`.
  - `decode_from_inputs(inputs, schema)` decodes a schema from those bytes.
  - `decode_from_bytes(data, schema)` decodes a schema from raw bytes.
  - `u128_to_string(value)` keeps the non-zero little-endian bytes of a value
    and decodes them as UTF-8.
- `controlled_mint.token`
  - The runtime types: `AlkaneId`, `AlkaneTransfer`, `CallResponse` (with
    `CallResponse.forward(incoming)`), `Context`, `Storage` and `ContractError`.
  - The `MintableToken` base class. It provides name, symbol, total supply,
    cap, the minted counter, value per mint (always 0) and a registry of seen
    transaction hashes.
  - When no constants are stored, name and symbol read as `"UNSET"` and the
    cap reads as the largest 128-bit value.
  - Growing the supply or the counter past 128 bits raises `ContractError`.
- `controlled_mint.contract`
  - `ControlledMint`, a subclass of `MintableToken`.
  - Its `Opcode` enum.
  - `ControlledMint.dispatch(context)`, which runs the call selected by
    `context.inputs[0]`.

## Opcodes

| Opcode | Name               | Result                                          |
|--------|--------------------|-------------------------------------------------|
| 0      | Initialize         | stores owner and parameters, mints the premine  |
| 77     | MintTokens         | raises `ContractError` (the token is not mintable) |
| 99     | GetName            | token name (UTF-8)                              |
| 100    | GetSymbol          | token symbol (UTF-8)                            |
| 101    | GetTotalSupply     | u128, little-endian                             |
| 102    | GetCap             | u128, little-endian                             |
| 103    | GetMinted          | u128, little-endian                             |
| 104    | GetValuePerMint    | u128, little-endian (always 0)                  |
| 105    | GetOwner           | encoded `SchemaAlkaneId`                        |
| 106    | MintExact          | owner only; mints `inputs[1]` tokens            |
| 107    | RenounceOwnership  | owner only; sets the owner to 2:0               |
| 108    | ChangeOwner        | owner only; the new owner is decoded from the inputs |
| 1000   | GetData            | empty data                                      |

Every response forwards the incoming alkanes. A mint appends one extra
`AlkaneTransfer` of the contract's own id.

## Example

```python
from controlled_mint.contract import ControlledMint, Opcode
from controlled_mint.schemas import SchemaControlledMintInitializationParameters
from controlled_mint.token import AlkaneId, Context, Storage

params = SchemaControlledMintInitializationParameters(
    token_name="Example", token_symbol="EXM", premine=1000, cap=10**9
)
payload = params.encode()
payload += b"\x00" * (-len(payload) % 16)
inputs = [Opcode.INITIALIZE] + [
    int.from_bytes(payload[i:i + 16], "little") for i in range(0, len(payload), 16)
]

contract = ControlledMint(Storage())
owner = AlkaneId(block=2, tx=1)
me = AlkaneId(block=2, tx=42)

response = contract.dispatch(Context(caller=owner, myself=me, inputs=inputs))
print(response.alkanes)  # one transfer of 1000 units of token 2:42

supply = contract.dispatch(
    Context(caller=owner, myself=me, inputs=[Opcode.GET_TOTAL_SUPPLY])
)
print(int.from_bytes(supply.data, "little"))  # 1000
```

`ContractError` is raised in each of these cases:

- initializing a second time;
- calling an owner-only opcode from any id other than the owner's;
- sending an unknown opcode;
- sending no inputs.

## What this package does not do

- It is an in-memory model of the contract's logic only.
  - `Storage` is a plain dictionary and is not persisted anywhere.
  - No runtime executes the contract.
  - Nothing is built into a deployable artefact.
- Minting does not check the stored `cap`. `MintExact` and the premine are
  limited only by the 128-bit supply overflow check.