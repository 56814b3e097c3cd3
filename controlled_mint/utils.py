"""Helpers for turning contract inputs into bytes and schemas."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, TypeVar

from .schemas import DecodeError

T = TypeVar("T", covariant=True)


class _Decodable(Protocol[T]):
    __name__: str

    def decode(self, data: bytes) -> T: ...


def u128_to_string(value: int) -> str:
    """Interpret the non-zero little-endian bytes of a 128-bit value as UTF-8."""
    raw = bytes(b for b in value.to_bytes(16, "little") if b)
    return raw.decode("utf-8")


def get_byte_array_from_inputs(inputs: Sequence[int]) -> bytes:
    """Concatenate every input after the opcode as 16 little-endian bytes.

    The given sequence is left untouched.
    """
    if not inputs:
        raise ValueError("inputs are empty: there is no opcode to skip")
    return b"".join(value.to_bytes(16, "little") for value in inputs[1:])


def decode_from_inputs(inputs: Sequence[int], schema: _Decodable[T]) -> T:
    """Decode ``schema`` from the inputs that follow the opcode."""
    return decode_from_bytes(get_byte_array_from_inputs(inputs), schema)


def decode_from_bytes(data: bytes, schema: _Decodable[T]) -> T:
    """Decode ``schema`` from raw bytes."""
    try:
        return schema.decode(bytes(data))
    except DecodeError as exc:
        raise DecodeError(f"CONTROLLED MINT: failed to decode {schema.__name__}") from exc