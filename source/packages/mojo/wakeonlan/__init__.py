"""
.. module:: wakeonlan
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: The wakeonlan package contains modules for building Wake-on-LAN magic packets and
               broadcasting them to wake up network attached devices.

               .. code-block:: python

                   from mojo.wakeonlan import MagicPacket

                   wol = MagicPacket.from_string("01:02:03:04:05:06", ":")
                   wol.send()

.. moduleauthor:: Myron Walker <myron.walker@gmail.com>
"""

__author__ = "Myron Walker"
__copyright__ = "Copyright 2023, Myron W Walker"
__credits__ = []

from mojo.wakeonlan.exceptions import (
    AddressParseError,
    InvalidHexError,
    InvalidLengthError,
    NetworkError,
    WakeOnLanError
)
from mojo.wakeonlan.hardwareaddress import HardwareAddress, parse_from_bytes, parse_from_string
from mojo.wakeonlan.magicpacket import MagicPacket, build
from mojo.wakeonlan.transmitter import send_default, send_on_interface, send_to
