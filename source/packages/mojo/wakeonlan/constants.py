"""
.. module:: constants
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains the constants that describe the Wake-on-LAN magic packet layout and
               the default socket endpoints used when sending it.

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

import re

MAC_SIZE = 6
MAC_PER_MAGIC = 16

MAGIC_HEADER = b'\xff' * MAC_SIZE
MAGIC_PACKET_SIZE = len(MAGIC_HEADER) + (MAC_SIZE * MAC_PER_MAGIC)

DEFAULT_WOL_PORT = 9

ANY_ADDRESS = "0.0.0.0"
LIMITED_BROADCAST_ADDRESS = "255.255.255.255"

DEFAULT_SOURCE_ENDPOINT = (ANY_ADDRESS, 0)
DEFAULT_DESTINATION_ENDPOINT = (LIMITED_BROADCAST_ADDRESS, DEFAULT_WOL_PORT)

CLI_MAC_DELIMITERS = (":", "-", "/")

HEX_BYTE_CHARSET = "0123456789abcdefABCDEF"

REGEX_IPV4_COMPONENTS = re.compile(r"^([0-9]+)\.([0-9]+)\.([0-9]+)\.([0-9]+)\Z")
