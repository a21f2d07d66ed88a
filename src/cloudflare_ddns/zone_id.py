# --- Standard library imports ---
import re
import string
from dataclasses import dataclass

# --- Project imports ---
from .exceptions import MalformedLength, InvalidHexDigit


ZONE_ID_BYTES = 16
ZONE_ID_HEX_LENGTH = ZONE_ID_BYTES * 2

_HEX_DIGITS = frozenset(string.hexdigits)
_SEPARATORS = re.compile(r"[\s,]+")


@dataclass(frozen=True)
class ZoneId:
    """
    Cloudflare zone ID, stored as its 16 raw bytes.

    The text form is always 32 lowercase hex characters, so
    `ZoneId.parse(z.render()) == z` for every valid zone ID.
    """

    raw: bytes

    def __post_init__(self):
        if len(self.raw) != ZONE_ID_BYTES:
            raise MalformedLength(
                f"Zone ID must be {ZONE_ID_BYTES} bytes, got {len(self.raw)}"
            )

    @classmethod
    def parse(cls, hex_string: str) -> "ZoneId":
        """
        Parse the 32-character hex form used by the Cloudflare API.

        Raises:
            MalformedLength: If the input is not exactly 32 characters
            InvalidHexDigit: For the first byte (two characters) that is not hex
        """
        if len(hex_string) != ZONE_ID_HEX_LENGTH:
            raise MalformedLength("Hex string must be 32 characters long")

        raw = bytearray(ZONE_ID_BYTES)
        for i in range(ZONE_ID_BYTES):
            # Each byte is encoded as two hex characters
            hex_byte = hex_string[i * 2:i * 2 + 2]
            if not set(hex_byte) <= _HEX_DIGITS:
                raise InvalidHexDigit(i, hex_byte)
            raw[i] = int(hex_byte, 16)

        return cls(bytes(raw))

    @classmethod
    def from_bytes(cls, raw: bytes) -> "ZoneId":
        return cls(bytes(raw))

    @classmethod
    def parse_many(cls, text: str) -> list["ZoneId"]:
        """Parse a comma and/or whitespace separated list of zone IDs."""
        return [cls.parse(token) for token in _SEPARATORS.split(text.strip()) if token]

    def render(self) -> str:
        return self.raw.hex()

    def __str__(self) -> str:
        return self.render()
