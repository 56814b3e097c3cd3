"""Binary schemas stored and exchanged by the controlled mint contract.

Values use the little-endian, length-prefixed layout: fixed-width unsigned
integers are written little-endian, strings as a ``u32`` byte length
followed by UTF-8 bytes.
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import BinaryIO

U32_MAX = (1 << 32) - 1
U64_MAX = (1 << 64) - 1
U128_MAX = (1 << 128) - 1


class DecodeError(ValueError):
    """Raised when bytes cannot be decoded into a schema."""


def _check_uint(name: str, value: int, bits: int) -> None:
    if not isinstance(value, int) or not 0 <= value < (1 << bits):
        raise ValueError(f"{name} must be an unsigned {bits}-bit integer, got {value!r}")


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise DecodeError(f"unexpected end of input: wanted {size} bytes, got {len(data)}")
    return data


def _read_uint(stream: BinaryIO, size: int) -> int:
    return int.from_bytes(_read_exact(stream, size), "little")


def _read_string(stream: BinaryIO) -> str:
    length = _read_uint(stream, 4)
    raw = _read_exact(stream, length)
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeError("string is not valid UTF-8") from exc


def _encode_string(value: str) -> bytes:
    raw = value.encode("utf-8")
    if len(raw) > U32_MAX:
        raise ValueError("string is too long to encode")
    return len(raw).to_bytes(4, "little") + raw


@dataclass(frozen=True)
class SchemaAlkaneId:
    """An alkane identifier as stored by the contract: ``u32`` block, ``u64`` tx."""

    block: int
    tx: int

    def __post_init__(self) -> None:
        _check_uint("block", self.block, 32)
        _check_uint("tx", self.tx, 64)

    def encode(self) -> bytes:
        return self.block.to_bytes(4, "little") + self.tx.to_bytes(8, "little")

    @classmethod
    def read(cls, stream: BinaryIO) -> SchemaAlkaneId:
        block = _read_uint(stream, 4)
        tx = _read_uint(stream, 8)
        return cls(block=block, tx=tx)

    @classmethod
    def decode(cls, data: bytes) -> SchemaAlkaneId:
        return cls.read(io.BytesIO(bytes(data)))


@dataclass(frozen=True)
class SchemaControlledMintInitializationParameters:
    """Constants a controlled mint token is initialised with."""

    token_name: str
    token_symbol: str
    premine: int
    cap: int

    def __post_init__(self) -> None:
        _check_uint("premine", self.premine, 128)
        _check_uint("cap", self.cap, 128)

    def encode(self) -> bytes:
        return b"".join(
            (
                _encode_string(self.token_name),
                _encode_string(self.token_symbol),
                self.premine.to_bytes(16, "little"),
                self.cap.to_bytes(16, "little"),
            )
        )

    @classmethod
    def read(cls, stream: BinaryIO) -> SchemaControlledMintInitializationParameters:
        token_name = _read_string(stream)
        token_symbol = _read_string(stream)
        premine = _read_uint(stream, 16)
        cap = _read_uint(stream, 16)
        return cls(token_name=token_name, token_symbol=token_symbol, premine=premine, cap=cap)

    @classmethod
    def decode(cls, data: bytes) -> SchemaControlledMintInitializationParameters:
        return cls.read(io.BytesIO(bytes(data)))