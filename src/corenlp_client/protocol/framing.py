"""Length-prefixed response framing

Both backends receive the same wire format: one protobuf record preceded by
its length as a base-128 varint (what the engine's ``writeDelimitedTo``
produces). Bytes after the record are ignored.
"""

import gzip
import zlib
from typing import Tuple

from google.protobuf.message import DecodeError as ProtobufDecodeError
from google.protobuf.message import Message

from ..core.exceptions import DecodeError, FramingError, MissingDocumentError


MAX_VARINT_BYTES = 10
GZIP_MAGIC = b"\x1f\x8b"


def decode_varint(buffer: bytes, pos: int = 0) -> Tuple[int, int]:
    """
    Read an unsigned base-128 varint

    Args:
        buffer: Bytes to read from
        pos: Offset of the first varint byte

    Returns:
        Tuple of (value, offset just past the varint)

    Raises:
        FramingError: If the buffer ends before the last byte or the varint
            is wider than 10 bytes
    """
    value = 0
    shift = 0
    for i in range(MAX_VARINT_BYTES):
        if pos + i >= len(buffer):
            raise FramingError("unexpected end of buffer while reading length prefix")
        byte = buffer[pos + i]
        value |= (byte & 0x7F) << shift
        if not byte & 0x80:
            return value, pos + i + 1
        shift += 7
    raise FramingError(f"length prefix exceeds {MAX_VARINT_BYTES} bytes")


def encode_varint(value: int) -> bytes:
    """Encode an unsigned integer as a base-128 varint"""
    if value < 0:
        raise ValueError("varint value must be non-negative")
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def read_delimited(buffer: bytes) -> Tuple[bytes, int]:
    """
    Split one length-prefixed record off the start of a buffer

    Returns:
        Tuple of (record bytes, number of bytes consumed)

    Raises:
        FramingError: If the prefix is malformed or fewer bytes than announced
            remain
    """
    length, start = decode_varint(buffer)
    end = start + length
    if end > len(buffer):
        raise FramingError(
            f"record announces {length} bytes but only {len(buffer) - start} remain"
        )
    return bytes(buffer[start:end]), end


def encode_delimited(payload: bytes) -> bytes:
    """Prefix a record with its varint length"""
    return encode_varint(len(payload)) + payload


def maybe_decompress(data: bytes) -> bytes:
    """Gunzip ``data`` when it starts with the gzip magic bytes"""
    if not data.startswith(GZIP_MAGIC):
        return data
    try:
        return gzip.decompress(data)
    except (OSError, EOFError, zlib.error) as e:
        raise DecodeError("corrupt gzip stream") from e


def decode_document(buffer: bytes, document: Message) -> None:
    """
    Decode a length-prefixed record into ``document`` in place

    The document is cleared before being populated.

    Raises:
        MissingDocumentError: If document is None
        FramingError: If the length prefix is malformed or the record is short
        DecodeError: If the record does not parse as the document's schema
    """
    if document is None:
        raise MissingDocumentError()

    payload, _ = read_delimited(buffer)
    try:
        document.ParseFromString(payload)
    except ProtobufDecodeError as e:
        raise DecodeError(f"cannot decode {type(document).__name__}") from e
