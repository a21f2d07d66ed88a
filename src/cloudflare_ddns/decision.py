# --- Standard library imports ---
from enum import Enum, auto
from ipaddress import IPv4Address

# --- Project imports ---
from .logger import get_logger
from .records import DnsRecord
from .ip_watcher import parse_ipv4
from .exceptions import IpParseError


logger = get_logger("decision")

MANAGED_RECORD_TYPE = "A"


class RecordAction(Enum):
    """Outcome of evaluating one DNS record against the public IP."""
    UPDATED = auto()
    NOOP = auto()
    ERROR = auto()

    def __str__(self) -> str:
        return self.name


def maybe_update_dns_record(record: DnsRecord, current_ip: IPv4Address) -> RecordAction:
    """
    Decide what to do with a single record, mutating it only when it needs an update.

    Checks, first match wins:
        1. Not an "A" record          → NOOP
        2. Locked on Cloudflare       → NOOP (with a warning)
        3. Content is not IPv4        → ERROR
        4. Content already current_ip → NOOP
        5. Otherwise content is rewritten to current_ip → UPDATED

    The record is left exactly as it came in on every path except UPDATED.
    """
    if record.record_type != MANAGED_RECORD_TYPE:
        return RecordAction.NOOP

    if record.locked:
        logger.warning(f"Skipping record {record.id} because it is locked")
        return RecordAction.NOOP

    try:
        record_ip = parse_ipv4(record.content)
    except IpParseError:
        return RecordAction.ERROR

    if record_ip == current_ip:
        return RecordAction.NOOP

    record.content = str(current_ip)
    return RecordAction.UPDATED
