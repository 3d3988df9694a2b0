"""Textual encodings for integer results, such as those of `mod_pow`.

Supports binary and decimal digits, base64 of the big-endian bytes, a list of byte values and the hex of an ASN.1 DER
INTEGER. Every encoding can be parsed back to the original integer.

Typical usage example:

    convert_output(24, "base2")
    parse_output("AAAAGA==", "base64")
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import base64
import binascii

from pyasn1 import error
from pyasn1.codec.der import decoder
from pyasn1.codec.der import encoder
from pyasn1.type import univ

from primetools.errors import InvalidArgument

OUTPUT_FORMATS: tuple[str, ...] = ("base2", "base10", "base64", "byte[]", "der")
INVALID_FORMAT: str = "Invalid format"


def bytes_to_integer(msg: bytes) -> int:
    """Converts a byte string to an integer, big-endian.

    Args:
        msg: The bytes (AKA Octet String) to convert.

    Returns:
        The representative integer.
    """
    return int.from_bytes(msg, byteorder="big", signed=False)


def integer_to_bytes(msg: int, fixedlen: int) -> bytes:
    """Converts an integer to a big-endian, fixed-length byte representation.

    Args:
        msg: The integer to unmarshal.
        fixedlen: The target length of the byte string.

    Returns:
        The representative bytes. (AKA Octet String)
    """
    return msg.to_bytes(fixedlen, byteorder="big", signed=False)


def b64_enc(msg: int, msg_size: int) -> str:
    """Encodes an integer into a base64 string.

    Args:
        msg: The message to encode.
        msg_size: The size of the encoded message in bytes.

    Returns:
        A base64 encoded string.
    """
    return base64.b64encode(integer_to_bytes(msg, msg_size)).decode("ascii")


def b64_dec(msg: str) -> int:
    """Decodes a base64 encoded string into an int."""
    return bytes_to_integer(base64.b64decode(msg.encode("ascii"), validate=True))


def _byte_len(value: int) -> int:
    return (value.bit_length() + 7) // 8


def convert_output(value: int, output_format: str) -> str:
    """Render a non-negative integer in the requested format.

    Fixed widths follow the 64-bit results this is usually fed with; wider values grow to whole bytes instead of being
    truncated.

    Args:
        value: The integer to render. Must be >= 0.
        output_format: One of `OUTPUT_FORMATS`:
            base2 - binary digits, zero-padded to at least 64.
            base10 - decimal digits.
            base64 - base64 of the big-endian bytes, at least 4 bytes wide.
            byte[] - the big-endian byte values separated by spaces, at least 8 of them.
            der - hex of the DER encoded ASN.1 INTEGER.

    Returns:
        The rendered value, or `INVALID_FORMAT` if `output_format` is not recognized.

    Raises:
        InvalidArgument: If `value` is negative.
    """
    if value < 0:
        raise InvalidArgument("value must be >= 0")
    match output_format:
        case "base2":
            return format(value, f"0{max(64, _byte_len(value) * 8)}b")
        case "base10":
            return str(value)
        case "base64":
            return b64_enc(value, max(4, _byte_len(value)))
        case "byte[]":
            return " ".join(str(b) for b in integer_to_bytes(value, max(8, _byte_len(value))))
        case "der":
            return encoder.encode(univ.Integer(value)).hex()
    return INVALID_FORMAT


def parse_output(text: str, output_format: str) -> int:
    """Parse text produced by `convert_output()` back into the integer.

    Args:
        text: The rendered value.
        output_format: One of `OUTPUT_FORMATS`.

    Returns:
        The decoded integer.

    Raises:
        InvalidArgument: If `output_format` is unknown or `text` is malformed for it.
    """
    try:
        match output_format:
            case "base2":
                return int(text, 2)
            case "base10":
                return int(text)
            case "base64":
                return b64_dec(text)
            case "byte[]":
                return bytes_to_integer(bytes(int(b) for b in text.split()))
            case "der":
                decoded, rest = decoder.decode(bytes.fromhex(text), asn1Spec=univ.Integer())
                if rest:
                    raise InvalidArgument("Trailing data after DER INTEGER.")
                return int(decoded)
    except (ValueError, binascii.Error, error.PyAsn1Error) as exc:
        raise InvalidArgument(f"Malformed {output_format} value: {text!r}") from exc
    raise InvalidArgument(f"Unknown output format: {output_format}")
