"""Conversion between raw binary strings and their hexadecimal text encoding.

Binary data is carried in `str` values: bytes are mapped to text with the
configured codec and the `surrogateescape` error handler by default (see
`stringy.settings.Settings`), so any byte sequence survives a hex -> bin -> hex
round trip.
"""

__docformat__ = 'google'

__all__ = [
    'bin_to_hex',
    'hex_to_bin',
    'convert_base',
    'CONVERTERS'
]

from typing import Callable, Dict, Tuple, Union
from loguru import logger
from stringy.entities import Base
from stringy.exceptions import MalformedHexError, SameBaseError
from stringy.patterns import HEX_PATTERN
from stringy.settings import Settings, get_settings

def bin_to_hex(value: Union[str, bytes], settings: Settings = None) -> str:
    """
    Encode binary data as lowercase hexadecimal digit pairs.

    Args:
        value: Raw bytes, or a string that is encoded with the configured codec first
        settings: Codec settings (defaults to `stringy.settings.get_settings`)

    Example:
        >>> bin_to_hex('abc')
        '616263'
        >>> bin_to_hex(b'\\xde\\xad')
        'dead'
    """
    settings = settings or get_settings()
    data = value if isinstance(value, bytes) else value.encode(settings.encoding, settings.errors)
    return data.hex()

def hex_to_bin(value: str, settings: Settings = None) -> str:
    """
    Decode a hexadecimal string back to binary data.

    Args:
        value: Even-length string of hexadecimal digits (either case)
        settings: Codec settings (defaults to `stringy.settings.get_settings`)

    Raises:
        MalformedHexError: If the input has odd length or contains non-hex characters

    Example:
        >>> hex_to_bin('616263')
        'abc'
    """
    if HEX_PATTERN.fullmatch(value) is None:
        raise MalformedHexError(value)

    settings = settings or get_settings()
    return bytes.fromhex(value).decode(settings.encoding, settings.errors)

CONVERTERS: Dict[Tuple[Base, Base], Callable[..., str]] = {
    (Base.BIN, Base.HEX): bin_to_hex,
    (Base.HEX, Base.BIN): hex_to_bin
}
"""Converter functions keyed by (source base, target base).

Used in `stringy.bases.convert_base`."""

def convert_base(value: str, from_base, to_base, settings: Settings = None) -> str:
    """
    Convert a string between binary and hexadecimal encodings.

    Args:
        value: String in the source encoding
        from_base: Source `Base` or its string value
        to_base: Target `Base` or its string value
        settings: Codec settings (defaults to `stringy.settings.get_settings`)

    Raises:
        InvalidBaseError: If either base is not recognized
        SameBaseError: If both bases are the same
        MalformedHexError: If hexadecimal input is malformed

    Example:
        >>> convert_base('hi', 'bin', 'hex')
        '6869'
        >>> convert_base('6869', Base.HEX, Base.BIN)
        'hi'
    """
    source = Base.resolve(from_base)
    target = Base.resolve(to_base)
    if source is target:
        raise SameBaseError(source.value)

    logger.debug("Converting {} characters from {} to {}", len(value), source.value, target.value)
    converter = CONVERTERS[(source, target)]
    return converter(value, settings)
