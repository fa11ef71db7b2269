"""
.. module:: resolution
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains helper functions for checking the ip addresses and endpoints that
               magic packets are sent from and to.

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

from typing import Tuple

from mojo.errors.exceptions import SemanticError

from mojo.wakeonlan.constants import LIMITED_BROADCAST_ADDRESS, REGEX_IPV4_COMPONENTS
from mojo.wakeonlan.interfaces import get_ipv4_broadcast_address_table


def is_ipv4_address(candidate: str) -> bool:
    """
        Checks to see if 'candidate' is an ipv4 address.

        :param candidate: A string that is to be checked to see if it is a valid IPv4 address.

        :returns: A boolean indicating if an IP address is an IPv4 address
    """
    is_ipv4 = False

    # The regex will ensure that all the component characters are integer characters
    # and that we have the correct number of components.
    mobj = REGEX_IPV4_COMPONENTS.match(candidate)
    if mobj is not None:
        addr_components = [ v for v in mobj.groups() ]
        if len(addr_components) == 4:
            is_ipv4 = True
            for nc in addr_components:
                cval = int(nc)
                if cval < 0 or cval > 255:
                    is_ipv4 = False
                    break

    return is_ipv4


def is_ipv6_literal(candidate: str) -> bool:
    """
        Checks to see if 'candidate' looks like an IPv6 address literal.  Host names and IPv4
        addresses never contain a ':'.
    """
    return ':' in candidate


def is_broadcast_address(host: str) -> bool:
    """
        Checks to see if 'host' is a broadcast class address.  The limited broadcast address,
        IPv4 addresses ending in .255 and the broadcast addresses of the local interfaces are
        all treated as broadcast addresses.

        :param host: The destination host to check.

        :returns: A boolean indicating if the socket should be put into broadcast mode
                  in order to send to the host.
    """
    if host == LIMITED_BROADCAST_ADDRESS:
        return True

    if not is_ipv4_address(host):
        return False

    if int(host.split(".")[-1]) == 255:
        return True

    local_broadcasts = get_ipv4_broadcast_address_table().values()

    return host in local_broadcasts


def check_ipv4_endpoint(endpoint: Tuple[str, int], name: str) -> Tuple[str, int]:
    """
        Checks that 'endpoint' is a (host, port) pair that can be used with an IPv4 UDP socket.

        :param endpoint: The endpoint to check.
        :param name: The name of the endpoint used in error messages, 'source' or 'destination'.

        :returns: The endpoint as a (host, port) tuple.

        :raises SemanticError: When the endpoint is malformed or is an IPv6 endpoint.
    """
    try:
        host, port = endpoint
    except (TypeError, ValueError) as unpack_err:
        errmsg = f"The {name} endpoint must be a (host, port) pair. endpoint={endpoint!r}"
        raise SemanticError(errmsg) from unpack_err

    if not isinstance(host, str):
        errmsg = f"The {name} endpoint host must be a str. host={host!r}"
        raise SemanticError(errmsg)

    if isinstance(port, bool) or not isinstance(port, int) or port < 0 or port > 65535:
        errmsg = f"The {name} endpoint port must be an integer between 0 and 65535. port={port!r}"
        raise SemanticError(errmsg)

    if is_ipv6_literal(host):
        errmsg = f"IPv6 {name} endpoints are not supported for wake-on-lan. host={host}"
        raise SemanticError(errmsg)

    return (host, port)
