"""
.. module:: magicpacket
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains the :class:`MagicPacket` class which builds the Wake-on-LAN payload.

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

from typing import Iterable, Optional, Tuple, Union

from mojo.errors.exceptions import SemanticError

from mojo.wakeonlan.constants import (
    DEFAULT_DESTINATION_ENDPOINT,
    DEFAULT_SOURCE_ENDPOINT,
    MAC_PER_MAGIC,
    MAGIC_HEADER,
    MAGIC_PACKET_SIZE
)
from mojo.wakeonlan.hardwareaddress import (
    BytesLike,
    HardwareAddress,
    TextLike,
    parse_from_bytes,
    parse_from_string
)


class MagicPacket:
    """
        The 102 byte Wake-on-LAN magic packet.

        [FF FF FF FF FF FF] + [mac] * 16
    """

    def __init__(self, address: HardwareAddress):
        if not isinstance(address, HardwareAddress):
            errmsg = f"A MagicPacket must be built from a HardwareAddress. type={type(address).__name__}"
            raise SemanticError(errmsg)

        self._address = address
        self._payload = MAGIC_HEADER + (address.raw * MAC_PER_MAGIC)
        assert len(self._payload) == MAGIC_PACKET_SIZE, "Magic packet payload has the wrong size."
        return

    @classmethod
    def from_bytes(cls, data: Union[BytesLike, Iterable[int]]) -> "MagicPacket":
        """
            Creates a magic packet from the raw bytes of a hardware address.
        """
        return cls(parse_from_bytes(data))

    @classmethod
    def from_string(cls, text: TextLike, delimiter: TextLike = ":") -> "MagicPacket":
        """
            Creates a magic packet from a delimited hardware address string such as
            '00:01:02:03:04:05'.
        """
        return cls(parse_from_string(text, delimiter))

    @property
    def address(self) -> HardwareAddress:
        return self._address

    @property
    def payload(self) -> bytes:
        return self._payload

    def into_inner(self) -> bytes:
        return self._payload

    def send(self):
        """
            Broadcasts the magic packet from 0.0.0.0:0 to 255.255.255.255:9.
        """
        from mojo.wakeonlan.transmitter import send_default
        send_default(self)
        return

    def send_to(self, source: Tuple[str, int] = DEFAULT_SOURCE_ENDPOINT,
                destination: Tuple[str, int] = DEFAULT_DESTINATION_ENDPOINT, broadcast: Optional[bool] = None):
        """
            Sends the magic packet from the `source` endpoint to the `destination` endpoint.
        """
        from mojo.wakeonlan.transmitter import send_to
        send_to(self, source, destination, broadcast=broadcast)
        return

    def __bytes__(self) -> bytes:
        return self._payload

    def __len__(self) -> int:
        return len(self._payload)

    def __eq__(self, other) -> bool:
        if not isinstance(other, MagicPacket):
            return NotImplemented
        return self._payload == other._payload

    def __hash__(self) -> int:
        return hash(self._payload)

    def __repr__(self) -> str:
        return f"MagicPacket(address='{self._address}')"


def build(address: HardwareAddress) -> MagicPacket:
    """
        Builds the magic packet for `address`.  The result is always 102 bytes, six 0xFF bytes
        followed by sixteen copies of the address.
    """
    return MagicPacket(address)
