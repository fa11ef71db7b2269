"""
.. module:: transmitter
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains the functions that send Wake-on-LAN magic packets over UDP.

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

from typing import Optional, Tuple

import logging
import socket

from mojo.errors.exceptions import SemanticError

from mojo.wakeonlan.constants import (
    DEFAULT_DESTINATION_ENDPOINT,
    DEFAULT_SOURCE_ENDPOINT,
    DEFAULT_WOL_PORT
)
from mojo.wakeonlan.exceptions import NetworkError
from mojo.wakeonlan.interfaces import get_ipv4_address, get_ipv4_broadcast_address
from mojo.wakeonlan.magicpacket import MagicPacket
from mojo.wakeonlan.resolution import check_ipv4_endpoint, is_broadcast_address


logger = logging.getLogger()


def send_default(packet: MagicPacket):
    """
        Broadcasts the magic packet from the default source endpoint 0.0.0.0:0 to the limited
        broadcast address 255.255.255.255 on port 9.

        :param packet: The magic packet to send.

        :raises NetworkError: When the socket cannot be bound, put in broadcast mode or when
                              the send fails.
    """
    send_to(packet, DEFAULT_SOURCE_ENDPOINT, DEFAULT_DESTINATION_ENDPOINT, broadcast=True)
    return


def send_to(packet: MagicPacket, source: Tuple[str, int], destination: Tuple[str, int], broadcast: Optional[bool] = None):
    """
        Sends the magic packet from the `source` endpoint to the `destination` endpoint.  The
        socket is put into broadcast mode when the destination is a broadcast class address,
        unicast destinations are sent to as they are so packets can be relayed by a gateway.

        :param packet: The magic packet to send.
        :param source: The (host, port) endpoint to bind the sending socket to.
        :param destination: The (host, port) endpoint to send the packet to.
        :param broadcast: Forces broadcast mode on or off.  When None, broadcast mode is
                          enabled only for broadcast class destinations.

        :raises NetworkError: When the socket cannot be bound, put in broadcast mode or when
                              the send fails.
        :raises SemanticError: When the packet or the endpoints are not usable for an IPv4 send.
    """

    if not isinstance(packet, MagicPacket):
        errmsg = f"Only MagicPacket objects can be sent. type={type(packet).__name__}"
        raise SemanticError(errmsg)

    source = check_ipv4_endpoint(source, "source")
    destination = check_ipv4_endpoint(destination, "destination")

    if broadcast is None:
        broadcast = is_broadcast_address(destination[0])

    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError as os_err:
        errmsg = f"Unable to create a UDP socket for sending the magic packet. {os_err}"
        raise NetworkError(errmsg, "socket", source, os_err) from os_err

    try:
        try:
            sock.bind(source)
        except OSError as os_err:
            errmsg = f"Unable to bind the magic packet socket. source={source} {os_err}"
            raise NetworkError(errmsg, "bind", source, os_err) from os_err

        logger.debug("Bound magic packet socket to %s:%d", *sock.getsockname())

        if broadcast:
            try:
                sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
            except OSError as os_err:
                errmsg = f"Unable to enable broadcast on the magic packet socket. {os_err}"
                raise NetworkError(errmsg, "broadcast", source, os_err) from os_err

        try:
            sent = sock.sendto(packet.payload, destination)
        except OSError as os_err:
            errmsg = f"Unable to send the magic packet. destination={destination} {os_err}"
            raise NetworkError(errmsg, "send", destination, os_err) from os_err

        logger.debug("Sent %d byte magic packet for %s to %s:%d (broadcast=%s)",
                     sent, packet.address, destination[0], destination[1], broadcast)

    finally:
        sock.close()

    return


def send_on_interface(packet: MagicPacket, ifname: str, port: int = DEFAULT_WOL_PORT):
    """
        Sends the magic packet to the directed broadcast address of the network attached to
        the local interface `ifname`.  The socket is bound to the IPv4 address of the interface
        so the packet leaves through that interface.

        :param packet: The magic packet to send.
        :param ifname: The name of the local interface to send through.
        :param port: The destination port.

        :raises NetworkError: When the interface is unknown, has no IPv4 broadcast address or
                              when the send fails.
    """

    try:
        if_addr = get_ipv4_address(ifname)
        bcast_addr = get_ipv4_broadcast_address(ifname)
    except ValueError as lookup_err:
        errmsg = f"Unable to lookup the addresses of interface '{ifname}'. {lookup_err}"
        raise NetworkError(errmsg, "bind", None, None) from lookup_err

    if if_addr is None or bcast_addr is None:
        errmsg = f"The interface '{ifname}' does not have an IPv4 broadcast address."
        raise NetworkError(errmsg, "bind", None, None)

    send_to(packet, (if_addr, 0), (bcast_addr, port), broadcast=True)

    return
