"""
.. module:: interfaces
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains helper functions for looking up the IPv4 and broadcast addresses of
               local network interfaces.

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

from typing import Dict, Union

import netifaces


def get_ipv4_address(ifname: str) -> Union[str, None]:
    """
        Get the first IPv4 address associated with the specified interface name.

        :param ifname: The interface name to lookup the IP address for.

        :returns: The IPv4 address associated with the specified interface name or None
    """
    addr = None

    address_info = netifaces.ifaddresses(ifname)
    if address_info is not None and netifaces.AF_INET in address_info:
        addr_info = address_info[netifaces.AF_INET][0]
        addr = addr_info.get("addr")

    return addr

def get_ipv4_broadcast_address(ifname: str) -> Union[str, None]:
    """
        Get the IPv4 broadcast address of the first IPv4 network on the specified interface.

        :param ifname: The interface name to lookup the broadcast address for.

        :returns: The broadcast address for the interface or None if the interface has no
                  IPv4 broadcast address, like a loopback or point-to-point interface.
    """
    addr = None

    address_info = netifaces.ifaddresses(ifname)
    if address_info is not None and netifaces.AF_INET in address_info:
        addr_info = address_info[netifaces.AF_INET][0]
        addr = addr_info.get("broadcast")

    return addr

def get_ipv4_broadcast_address_table() -> Dict[str, str]:
    """
        Creates a lookup table of interface names to IPv4 broadcast addresses.  Interfaces
        without a broadcast address are left out.

        :returns: The table of interface names to broadcast addresses.
    """
    results = {}

    iface_name_list = [ iface for iface in netifaces.interfaces() ]
    for ifname in iface_name_list:
        try:
            bcast_addr = get_ipv4_broadcast_address(ifname)
        except ValueError:
            # The interface went away between listing and lookup
            continue

        if bcast_addr is not None:
            results[ifname] = bcast_addr

    return results
