# --- Standard library imports ---
from dataclasses import dataclass, field
from typing import Any

# --- Project imports ---
from .exceptions import DnsProviderError


# Wire keys this model knows about; anything else rides along in `extra`
_KNOWN_KEYS = (
    "id", "type", "name", "content", "proxied", "proxiable", "ttl", "locked",
    "tags", "created_on", "modified_on", "zone_id", "zone_name",
)


@dataclass
class DnsRecord:
    """
    One Cloudflare DNS record as returned by `GET /zones/{zone}/dns_records`.

    Only `content`, `record_type`, `locked` and `id` drive decisions. The rest
    is metadata that must survive the trip back to Cloudflare untouched.
    """

    id: str
    record_type: str = ""
    name: str = ""
    content: str = ""
    proxied: bool = False
    proxiable: bool = False
    ttl: int = 1
    locked: bool = False
    tags: list = field(default_factory=list)
    created_on: str | None = None
    modified_on: str | None = None
    zone_id: str | None = None
    zone_name: str | None = None
    extra: dict = field(default_factory=dict)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "DnsRecord":
        """
        Build a record from a Cloudflare `result` entry.

        Raises:
            DnsProviderError: If the entry is not an object or carries no `id`
        """
        if not isinstance(data, dict) or not data.get("id"):
            raise DnsProviderError(f"DNS record without an id: {data!r}")

        return cls(
            id=data["id"],
            record_type=data.get("type", ""),
            name=data.get("name", ""),
            content=data.get("content", ""),
            proxied=data.get("proxied", False),
            proxiable=data.get("proxiable", False),
            ttl=data.get("ttl", 1),
            locked=data.get("locked", False),
            tags=list(data.get("tags") or []),
            created_on=data.get("created_on"),
            modified_on=data.get("modified_on"),
            zone_id=data.get("zone_id"),
            zone_name=data.get("zone_name"),
            extra={k: v for k, v in data.items() if k not in _KNOWN_KEYS},
        )

    def to_api(self) -> dict[str, Any]:
        """Serialize back to the Cloudflare wire shape (PATCH body)."""
        payload = dict(self.extra)
        payload.update({
            "id": self.id,
            "type": self.record_type,
            "name": self.name,
            "content": self.content,
            "proxied": self.proxied,
            "proxiable": self.proxiable,
            "ttl": self.ttl,
            "locked": self.locked,
            "tags": list(self.tags),
        })
        # Optional metadata is only sent back when Cloudflare gave it to us
        for key in ("created_on", "modified_on", "zone_id", "zone_name"):
            value = getattr(self, key)
            if value is not None:
                payload[key] = value
        return payload
