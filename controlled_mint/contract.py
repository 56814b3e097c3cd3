"""The controlled mint contract: an owner-controlled mintable token."""

from __future__ import annotations

from collections.abc import Callable
from enum import IntEnum

from .schemas import DecodeError, SchemaAlkaneId, SchemaControlledMintInitializationParameters
from .token import CallResponse, Context, ContractError, MintableToken
from .utils import decode_from_inputs


class Opcode(IntEnum):
    """Opcodes accepted by the contract as the first input."""

    INITIALIZE = 0
    MINT_TOKENS = 77
    GET_NAME = 99
    GET_SYMBOL = 100
    GET_TOTAL_SUPPLY = 101
    GET_CAP = 102
    GET_MINTED = 103
    GET_VALUE_PER_MINT = 104
    GET_OWNER = 105
    MINT_EXACT = 106
    RENOUNCE_OWNERSHIP = 107
    CHANGE_OWNER = 108
    GET_DATA = 1000


# Ownership is handed to DIESEL so later owner checks still decode.
_RENOUNCED_OWNER = SchemaAlkaneId(block=2, tx=0)


class ControlledMint(MintableToken):
    """A token whose supply is minted only by its owner."""

    OWNER_KEY = b"/owner"
    INITIALIZED_KEY = b"/initialized"

    def _owner_id(self) -> SchemaAlkaneId:
        try:
            return SchemaAlkaneId.decode(self.storage.get(self.OWNER_KEY))
        except DecodeError as exc:
            raise ContractError(
                "CONTROLLED MINT: Failed to decode owner at get_owner_id"
            ) from exc

    def _assert_owner(self, context: Context) -> None:
        owner = self._owner_id()
        if (context.caller.block, context.caller.tx) != (owner.block, owner.tx):
            raise ContractError("CONTROLLED MINT: Caller is not the owner")

    def initialize(self, context: Context) -> CallResponse:
        """Store the constants, make the caller owner and mint the premine."""
        if self.storage.get(self.INITIALIZED_KEY):
            raise ContractError("Contract already initialized")
        response = CallResponse.forward(context.incoming_alkanes)
        try:
            consts = decode_from_inputs(
                context.inputs, SchemaControlledMintInitializationParameters
            )
        except DecodeError as exc:
            raise ContractError(
                "CONTROLLED MINT: Failed to decode initialization parameters"
            ) from exc
        try:
            owner = SchemaAlkaneId(block=context.caller.block, tx=context.caller.tx)
        except ValueError as exc:
            raise ContractError("CONTROLLED MINT: caller id is out of range") from exc

        transfer = self.mint(context, consts.premine)
        self.storage.set(self.INITIALIZED_KEY, b"\x01")
        self.storage.set(self.OWNER_KEY, owner.encode())
        self.storage.set(self.CONSTS_KEY, consts.encode())
        response.alkanes.append(transfer)
        return response

    def get_owner(self, context: Context) -> CallResponse:
        """Return the encoded owner id as response data."""
        response = CallResponse.forward(context.incoming_alkanes)
        response.data = self.storage.get(self.OWNER_KEY)
        return response

    def mint_exact(self, context: Context, amount: int) -> CallResponse:
        """Mint ``amount`` tokens to the owner."""
        self._assert_owner(context)
        response = CallResponse.forward(context.incoming_alkanes)
        response.alkanes.append(self.mint(context, amount))
        return response

    def change_owner(self, context: Context) -> CallResponse:
        """Hand ownership to the alkane id encoded in the inputs."""
        self._assert_owner(context)
        response = CallResponse.forward(context.incoming_alkanes)
        try:
            new_owner = decode_from_inputs(context.inputs, SchemaAlkaneId)
        except DecodeError as exc:
            raise ContractError(
                "CONTROLLED MINT: failed to change owner because of serialization "
                "failure of params"
            ) from exc
        self.storage.set(self.OWNER_KEY, new_owner.encode())
        return response

    def renounce_ownership(self, context: Context) -> CallResponse:
        """Give up ownership for good."""
        self._assert_owner(context)
        response = CallResponse.forward(context.incoming_alkanes)
        self.storage.set(self.OWNER_KEY, _RENOUNCED_OWNER.encode())
        return response

    def dispatch(self, context: Context) -> CallResponse:
        """Run the call selected by the opcode in the first input."""
        if not context.inputs:
            raise ContractError("missing opcode")
        try:
            opcode = Opcode(context.inputs[0])
        except ValueError:
            raise ContractError(f"unrecognized opcode {context.inputs[0]}") from None

        if opcode is Opcode.MINT_EXACT:
            if len(context.inputs) < 2:
                raise ContractError("missing amount for MintExact")
            return self.mint_exact(context, context.inputs[1])

        handlers: dict[Opcode, Callable[[Context], CallResponse]] = {
            Opcode.INITIALIZE: self.initialize,
            Opcode.MINT_TOKENS: self.mint_tokens,
            Opcode.GET_NAME: self.get_name,
            Opcode.GET_SYMBOL: self.get_symbol,
            Opcode.GET_TOTAL_SUPPLY: self.get_total_supply,
            Opcode.GET_CAP: self.get_cap,
            Opcode.GET_MINTED: self.get_minted,
            Opcode.GET_VALUE_PER_MINT: self.get_value_per_mint,
            Opcode.GET_OWNER: self.get_owner,
            Opcode.RENOUNCE_OWNERSHIP: self.renounce_ownership,
            Opcode.CHANGE_OWNER: self.change_owner,
            Opcode.GET_DATA: self.get_data,
        }
        return handlers[opcode](context)