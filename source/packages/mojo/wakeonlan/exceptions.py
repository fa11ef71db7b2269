"""
.. module:: exceptions
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains exceptions that can be raised when parsing hardware addresses or when
               sending Wake-on-LAN magic packets.

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


class WakeOnLanError(RuntimeError):
    """
        This error is the base error for all the errors raised by the wake-on-lan package.
    """


class AddressParseError(WakeOnLanError):
    """
        This error is the base error for hardware address parsing failures.
    """


class InvalidLengthError(AddressParseError):
    """
        This error is raised when a hardware address has the wrong number of bytes or tokens.
    """
    def __init__(self, message, expected: int, actual: int, *args, **kwargs):
        super().__init__(message, *args, **kwargs)
        self.expected = expected
        self.actual = actual
        return


class InvalidHexError(AddressParseError):
    """
        This error is raised when a token of a hardware address string is not a two digit
        hexadecimal byte value.
    """
    def __init__(self, message, token: str, index: int, *args, **kwargs):
        super().__init__(message, *args, **kwargs)
        self.token = token
        self.index = index
        return


class NetworkError(WakeOnLanError):
    """
        This error is raised when the socket layer fails while creating the socket, binding, enabling broadcast
        or sending a magic packet.  The original :class:`OSError` is available as `os_error`
        and is chained as the cause.
    """
    def __init__(self, message, operation: str, endpoint: Optional[Tuple[str, int]], os_error: Optional[OSError], *args, **kwargs):
        super().__init__(message, *args, **kwargs)
        self.operation = operation
        self.endpoint = endpoint
        self.os_error = os_error
        return
