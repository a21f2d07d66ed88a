"""
Exception classes for the DDNS agent.

Hierarchy:
    DDNSError (Base)
    ├─ ConfigError          - Static configuration is unusable
    │  ├─ MalformedLength   - Zone ID text is not 32 characters
    │  └─ InvalidHexDigit   - Zone ID text contains a non-hex byte
    ├─ IpFetchError         - Public IP provider unreachable / HTTP error
    ├─ IpParseError         - Public IP provider returned something that is not IPv4
    └─ DnsProviderError     - Cloudflare API call failed
"""


class DDNSError(Exception):
    """Base exception for all DDNS agent errors."""


class ConfigError(DDNSError):
    """Configuration error (missing token, empty zone list, bad zone ID)."""


class MalformedLength(ConfigError):
    """Zone ID hex string is not exactly 32 characters long."""


class InvalidHexDigit(ConfigError):
    """
    Zone ID hex string contains an invalid two-character group.

    Attributes:
        position: 0-based byte index of the offending group
        value: the offending two characters
    """

    def __init__(self, position: int, value: str):
        self.position = position
        self.value = value
        super().__init__(f"Invalid hex byte at position {position}: {value}")


class IpFetchError(DDNSError):
    """The public IP provider could not be reached or answered with an error."""


class IpParseError(DDNSError):
    """The public IP provider answered with text that is not an IPv4 address."""


class DnsProviderError(DDNSError):
    """A Cloudflare DNS API call failed (network, HTTP status, or payload)."""
