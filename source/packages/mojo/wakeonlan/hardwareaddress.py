"""
.. module:: hardwareaddress
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains the :class:`HardwareAddress` class and the helper functions that parse
               hardware addresses from raw bytes or from delimited hex strings.

.. moduleauthor:: Myron Walker <myron.walker@gmail.com>
"""

__author__ = "Myron Walker"
__copyright__ = "Copyright 2023, Myron W Walker"
__credits__ = []
__version__ = "1.0.0"
__maintainer__ = "Myron Walker"
__email__ = "myron.walker@gmail.com"
__status__ = "Development" # Prototype, Development or Production
__license__ = "MIT"

from typing import Iterable, Union

from mojo.errors.exceptions import SemanticError

from mojo.wakeonlan.constants import HEX_BYTE_CHARSET, MAC_SIZE
from mojo.wakeonlan.exceptions import InvalidHexError, InvalidLengthError

BytesLike = Union[bytes, bytearray, memoryview]
TextLike = Union[str, bytes, bytearray, memoryview]


class HardwareAddress:
    """
        An immutable six byte hardware (MAC) address.  Every combination of six byte values
        is a valid address, including the all zero and the all 0xFF patterns.
    """

    def __init__(self, raw: Union[BytesLike, Iterable[int]]):
        """
            Constructs a :class:`HardwareAddress` from exactly six bytes.

            :param raw: The six address bytes.

            :raises InvalidLengthError: When `raw` is not exactly six bytes long.
            :raises SemanticError: When `raw` is not a bytes-like object or an iterable of ints.
        """
        raw = coerce_address_bytes(raw)
        if len(raw) != MAC_SIZE:
            errmsg = f"Invalid hardware address length, expected={MAC_SIZE} actual={len(raw)}"
            raise InvalidLengthError(errmsg, MAC_SIZE, len(raw))

        self._raw = raw
        return

    @classmethod
    def from_bytes(cls, data: Union[BytesLike, Iterable[int]]) -> "HardwareAddress":
        return parse_from_bytes(data)

    @classmethod
    def from_string(cls, text: TextLike, delimiter: TextLike = ":") -> "HardwareAddress":
        return parse_from_string(text, delimiter)

    @property
    def raw(self) -> bytes:
        return self._raw

    def to_string(self, delimiter: str = ":") -> str:
        """
            Renders the address as upper case hex pairs joined by `delimiter`.
        """
        return delimiter.join("%02X" % bval for bval in self._raw)

    def __bytes__(self) -> bytes:
        return self._raw

    def __len__(self) -> int:
        return len(self._raw)

    def __eq__(self, other) -> bool:
        if not isinstance(other, HardwareAddress):
            return NotImplemented
        return self._raw == other._raw

    def __hash__(self) -> int:
        return hash(self._raw)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"HardwareAddress('{self.to_string()}')"


def decode_text(value: TextLike, name: str) -> str:
    """
        Converts a read-only text view into a `str`.  Bytes-like views are decoded as ASCII,
        characters that cannot be decoded are replaced so they fail hex validation later.
    """
    if isinstance(value, str):
        return value

    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode("ascii", errors="replace")

    errmsg = f"The '{name}' parameter must be a str or a bytes-like object. type={type(value).__name__}"
    raise SemanticError(errmsg)


def coerce_address_bytes(data: Union[BytesLike, Iterable[int]]) -> bytes:
    """
        Converts a bytes-like object or an iterable of ints into `bytes` without guessing at
        malformed input.

        :raises SemanticError: When `data` is a str, an int or cannot be converted.
    """
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)

    if isinstance(data, (str, int)):
        # bytes(int) would create a zero filled buffer and bytes(str) needs an encoding
        errmsg = f"Hardware address bytes must be a bytes-like object or an iterable of ints. type={type(data).__name__}"
        raise SemanticError(errmsg)

    try:
        raw = bytes(data)
    except (TypeError, ValueError) as conv_err:
        errmsg = f"Unable to convert {data!r} to hardware address bytes."
        raise SemanticError(errmsg) from conv_err

    return raw


def parse_from_bytes(data: Union[BytesLike, Iterable[int]]) -> HardwareAddress:
    """
        Creates a :class:`HardwareAddress` from a sequence of bytes.  The byte values are not
        checked, only the length.

        :param data: A bytes-like object or an iterable of integers in the range 0-255.

        :returns: The hardware address made of exactly the bytes provided.

        :raises InvalidLengthError: When the sequence is not exactly six bytes long.
    """
    return HardwareAddress(data)


def parse_from_string(text: TextLike, delimiter: TextLike = ":") -> HardwareAddress:
    """
        Creates a :class:`HardwareAddress` from a string of hex pairs joined by `delimiter`,
        for example '01:02:03:04:05:06' or '01-02-03-04-05-06'.  Hex digits are case insensitive.

        :param text: The address text as a `str` or a bytes-like view.
        :param delimiter: The separator between the hex pairs.

        :returns: The parsed hardware address.

        :raises InvalidLengthError: When the text does not split into exactly six tokens.
        :raises InvalidHexError: When a token is not a two digit hexadecimal value.
    """
    text = decode_text(text, "text")
    delimiter = decode_text(delimiter, "delimiter")

    if len(delimiter) == 0:
        raise SemanticError("The hardware address delimiter must not be empty.")

    tokens = text.split(delimiter)
    if len(tokens) != MAC_SIZE:
        errmsg = f"Invalid hardware address token count, expected={MAC_SIZE} actual={len(tokens)} text={text!r}"
        raise InvalidLengthError(errmsg, MAC_SIZE, len(tokens))

    raw = bytearray()
    for tidx, token in enumerate(tokens):
        # int(x, 16) tolerates signs, whitespace and underscores so check the charset explicitly
        if len(token) != 2 or any(tc not in HEX_BYTE_CHARSET for tc in token):
            errmsg = f"Invalid hex byte in hardware address. token={token!r} index={tidx}"
            raise InvalidHexError(errmsg, token, tidx)
        raw.append(int(token, 16))

    return HardwareAddress(bytes(raw))
