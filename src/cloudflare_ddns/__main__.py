# --- Standard library imports ---
import sys
import time
from typing import Optional

# --- Project imports ---
from .config import Config
from .zone_id import ZoneId
from .logger import get_logger, setup_logging
from .cloudflare import CloudflareClient
from .ip_watcher import IPChangeWatcher
from .ddns import perform_dynamic_dns
from .exceptions import ConfigError, DDNSError
from .scheduling_policy import SchedulingPolicy


def main_loop(
        policy: SchedulingPolicy,
        ip_watcher: IPChangeWatcher,
        zones: list[ZoneId],
        cf_client: CloudflareClient,
        max_cycles: Optional[int] = None,
    ) -> None:
    """
    Supervisor loop: one DDNS cycle per scheduling interval, forever.

    A failing cycle (IP lookup down, unexpected bug) is logged and the loop
    carries on; the next cycle is the retry.

    Args:
        policy: SchedulingPolicy controlling the loop timing.
        ip_watcher: Watcher shared by all cycles of this process.
        zones: Zones to keep in sync, processed in this order.
        cf_client: Authenticated Cloudflare client.
        max_cycles: Stop after this many cycles (None = run forever).
    """

    logger = get_logger("main_loop")
    cycles = 0

    while max_cycles is None or cycles < max_cycles:
        start = time.monotonic()
        logger.info("Beginning dynamic DNS check")

        try:
            perform_dynamic_dns(ip_watcher, zones, cf_client)
            logger.info("Dynamic DNS check is done")
        except Exception as e:
            logger.exception(f"Unhandled exception during run cycle: {e}")

        cycles += 1
        if max_cycles is not None and cycles >= max_cycles:
            break

        remaining = policy.next_sleep(time.monotonic() - start)
        logger.info(f"💤 Sleeping ... {remaining:.2f} s\n")
        time.sleep(remaining)


def load_zones(raw: str) -> list[ZoneId]:
    """
    Raises:
        ConfigError: If the list is empty or any zone ID is malformed
    """
    zones = ZoneId.parse_many(raw)
    if not zones:
        raise ConfigError("CLOUDFLARE_ZONE_IDS must name at least one zone")
    return zones


def main() -> int:
    """
    Entry point: configure logging, validate config, then run the supervisor loop.
    """

    setup_logging(level=Config.LOG_LEVEL)
    logger = get_logger("main")
    logger.info("🚀 Starting Cloudflare Dynamic DNS agent")
    logger.debug(f"Python version: {sys.version}")

    try:
        zones = load_zones(Config.ZONE_IDS)
        cf_client = CloudflareClient(Config.CLOUDFLARE_API_TOKEN)
        ip_watcher = IPChangeWatcher(Config.PUBLIC_IP_URL)
    except DDNSError as e:
        logger.critical(f"Startup failed: {e}")
        return 1

    logger.info(f"Monitoring {len(zones)} zone(s); public IP {ip_watcher.current_ip}")

    main_loop(SchedulingPolicy(), ip_watcher, zones, cf_client)
    return 0


if __name__ == "__main__":
    sys.exit(main())
