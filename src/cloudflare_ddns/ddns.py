# --- Standard library imports ---
from dataclasses import dataclass
from ipaddress import IPv4Address
from typing import Iterable, Optional

# --- Project imports ---
from .telemetry import tlog
from .logger import get_logger
from .zone_id import ZoneId
from .cloudflare import CloudflareClient
from .ip_watcher import IPChangeWatcher
from .exceptions import DnsProviderError
from .decision import RecordAction, maybe_update_dns_record


logger = get_logger("ddns")


@dataclass
class CycleReport:
    """Tally of one polling cycle, mainly for logging and tests."""
    changed: bool
    public_ip: Optional[IPv4Address] = None
    updated: int = 0
    noop: int = 0
    errors: int = 0
    zone_failures: int = 0
    push_failures: int = 0


def perform_dynamic_dns(
        ip_watcher: IPChangeWatcher,
        zones_to_monitor: Iterable[ZoneId],
        cf_client: CloudflareClient,
    ) -> CycleReport:
    """
    Run one polling cycle: refresh the public IP and, if it changed,
    bring every "A" record of every zone in line with it.

    Failure isolation:
        - IP refresh failure  → raised, nothing touched, nothing committed
        - Zone listing failure → logged, next zone
        - Record push failure  → logged, next record
        - Unparsable record    → logged, next record

    The new IP is committed once all zones have been walked, even when some
    of them failed, so a broken record is not retried until the IP moves again.

    Raises:
        IpFetchError, IpParseError: From the watcher refresh
    """
    ip_watcher.refresh()
    public_ip = ip_watcher.current_ip

    if not ip_watcher.did_public_ip_change():
        tlog(logger, "🟢", "DDNS", "NO-OP", primary=f"ip={public_ip}")
        return CycleReport(changed=False, public_ip=public_ip)

    report = CycleReport(changed=True, public_ip=public_ip)

    for zone_id in zones_to_monitor:
        logger.info(f"Processing zone {zone_id}")

        try:
            records = cf_client.list_dns_records(zone_id)
        except DnsProviderError as e:
            logger.error(f"Could not fetch records for zone {zone_id}: {e}")
            report.zone_failures += 1
            continue

        for record in records:
            action = maybe_update_dns_record(record, public_ip)

            if action is RecordAction.UPDATED:
                try:
                    cf_client.update_dns_record(zone_id, record)
                except DnsProviderError as e:
                    logger.error(f"Could not update record {record.id} in zone {zone_id}: {e}")
                    report.push_failures += 1
                    continue
                logger.info(f"Zone {zone_id} record {record.name or record.id} updated → {public_ip}")
                report.updated += 1

            elif action is RecordAction.NOOP:
                logger.debug(f"Noop for record {record.id} in zone {zone_id}")
                report.noop += 1

            else:
                logger.error(
                    f"Error evaluating record {record.id} in zone {zone_id}: "
                    f"content {record.content!r} is not an IPv4 address"
                )
                report.errors += 1

    ip_watcher.commit()

    failures = report.errors + report.zone_failures + report.push_failures
    tlog(
        logger,
        "🟡" if failures else "🟢",
        "DDNS",
        "SYNCED",
        primary=f"ip={public_ip}",
        meta=(
            f"updated={report.updated} noop={report.noop} errors={report.errors} "
            f"zone_failures={report.zone_failures} push_failures={report.push_failures}"
        ),
    )
    return report
