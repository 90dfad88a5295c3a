"""
unifi-block - MAC Address Validation

Purely syntactic checks on station hardware addresses. Nothing here resolves
or contacts anything, and addresses are never normalized.
"""

import string

from ..shared.constants import (
    MAC_ADDRESS_SEGMENT_MAX,
    MAC_ADDRESS_SEGMENTS,
    MAC_ADDRESS_SEPARATOR,
)
from .exceptions import InvalidAddressError

_HEX_DIGITS = frozenset(string.hexdigits)


def validate_mac_address(address: str) -> None:
    """Validate MAC address syntax.

    A valid address splits on ``:`` into exactly six segments, each a
    non-empty run of hex digits with a value that fits in one byte.
    Single digit segments (``A:B:C:D:E:F``) are accepted.

    Args:
        address: Address string exactly as configured

    Raises:
        InvalidAddressError: If the address is malformed
    """
    segments = address.split(MAC_ADDRESS_SEPARATOR)
    if len(segments) != MAC_ADDRESS_SEGMENTS:
        raise InvalidAddressError(
            address,
            f"expected {MAC_ADDRESS_SEGMENTS} segments, found {len(segments)}",
        )

    for segment in segments:
        # int(x, 16) also accepts signs, whitespace, underscores and 0x.
        # A leading "+" is rejected too, although some hex byte parsers allow it.
        if not segment or not _HEX_DIGITS.issuperset(segment):
            raise InvalidAddressError(address, f"segment '{segment}' is not hexadecimal")
        if int(segment, 16) > MAC_ADDRESS_SEGMENT_MAX:
            raise InvalidAddressError(address, f"segment '{segment}' does not fit in a byte")


def is_valid_mac_address(address: str) -> bool:
    """Return True if ``address`` passes ``validate_mac_address``."""
    try:
        validate_mac_address(address)
    except InvalidAddressError:
        return False
    return True
