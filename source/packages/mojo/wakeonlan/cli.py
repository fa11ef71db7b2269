"""
.. module:: cli
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Minimal command line entry point that wakes a device by hardware address.

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

from typing import List, Optional

import argparse
import logging
import sys

from mojo.wakeonlan.constants import CLI_MAC_DELIMITERS
from mojo.wakeonlan.exceptions import AddressParseError, NetworkError
from mojo.wakeonlan.magicpacket import MagicPacket
from mojo.wakeonlan.transmitter import send_default

EXIT_SUCCESS = 0
EXIT_SEND_FAILURE = 1
EXIT_BAD_ADDRESS = 2


def detect_delimiter(mac_address: str) -> Optional[str]:
    """
        Returns the first supported delimiter character found in `mac_address` or None.
    """
    for mch in mac_address:
        if mch in CLI_MAC_DELIMITERS:
            return mch
    return None


def main(argv: Optional[List[str]] = None) -> int:

    logging.basicConfig(level=logging.WARNING)

    parser = argparse.ArgumentParser(
        prog="mojo-wake",
        description="Wake a device by broadcasting a Wake-on-LAN magic packet."
    )
    parser.add_argument(
        "mac_address",
        help="MAC address to send the packet to. Should be in format AA:BB:CC:DD:EE:FF, "
             "AA-BB-CC-DD-EE-FF or AA/BB/CC/DD/EE/FF."
    )

    args = parser.parse_args(argv)
    mac_address = args.mac_address

    sep = detect_delimiter(mac_address)
    if sep is None:
        print("Invalid MAC address format. Please use one of the separators: [{}]".format(
            ", ".join(CLI_MAC_DELIMITERS)), file=sys.stderr)
        return EXIT_BAD_ADDRESS

    try:
        packet = MagicPacket.from_string(mac_address, sep)
    except AddressParseError as perr:
        print(f"Invalid MAC address '{mac_address}': {perr}", file=sys.stderr)
        return EXIT_BAD_ADDRESS

    try:
        send_default(packet)
    except NetworkError as nerr:
        print(f"Failed to send the magic packet. {nerr}", file=sys.stderr)
        return EXIT_SEND_FAILURE

    print("Sent the magic packet.")

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
