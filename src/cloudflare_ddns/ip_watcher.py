# --- Standard library imports ---
from enum import Enum, auto
from ipaddress import IPv4Address
from typing import Callable, Optional

# --- Third-party imports ---
import requests

# --- Project imports ---
from .config import Config
from .logger import get_logger
from .exceptions import IpFetchError, IpParseError


# Define the logger once for the entire module
logger = get_logger("ip_watcher")


def fetch_public_ip_text(service_url: str, timeout: float = Config.API_TIMEOUT) -> str:
    """
    Ask a plain-text "what is my IP" service for our public address.

    Args:
        service_url: Endpoint answering with the caller's IPv4 in the body
                     (e.g. https://checkip.amazonaws.com).
        timeout: Seconds before giving up.

    Returns:
        The raw response body, untrimmed.

    Raises:
        IpFetchError: On connection errors, timeouts, or non-2xx responses.
    """
    try:
        resp = requests.get(service_url, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as e:
        raise IpFetchError(
            f"Public IP lookup failed via {service_url} ({e.__class__.__name__})"
        ) from e

    return resp.text


def parse_ipv4(text: str) -> IPv4Address:
    """
    Strict dotted-quad parse ("1.2.3.4"). No whitespace, no shorthand forms.

    Raises:
        IpParseError: If `text` is not an IPv4 literal.
    """
    try:
        return IPv4Address(text)
    except ValueError as e:
        raise IpParseError(f"Not an IPv4 address: {text!r}") from e


class WatcherState(Enum):
    """
    • UNCONFIRMED: nothing committed yet, every check reports a change
    • CONFIRMED:   a previous IP has been committed at least once
    """
    UNCONFIRMED = auto()
    CONFIRMED = auto()

    def __str__(self) -> str:
        return self.name


class IPChangeWatcher:
    """
    Tracks the public IP across polling cycles.

    `current_ip` is refreshed from the IP provider every cycle, while
    `previous_ip` only moves on an explicit `commit()`, i.e. once the
    caller has pushed the new address out to DNS.
    """

    def __init__(
            self,
            service_url: str,
            fetch: Callable[[str], str] = fetch_public_ip_text,
        ):
        """
        Performs the first lookup immediately.

        Raises:
            IpFetchError: If the provider cannot be reached.
            IpParseError: If the provider's answer is not an IPv4 address.
        """
        self.logger = logger
        self.service_url = service_url
        self._fetch = fetch
        self._previous_ip: Optional[IPv4Address] = None
        self._current_ip: IPv4Address = self._load_current_ip()

    @property
    def current_ip(self) -> IPv4Address:
        return self._current_ip

    @property
    def previous_ip(self) -> Optional[IPv4Address]:
        return self._previous_ip

    @property
    def state(self) -> WatcherState:
        if self._previous_ip is None:
            return WatcherState.UNCONFIRMED
        return WatcherState.CONFIRMED

    def _load_current_ip(self) -> IPv4Address:
        text = self._fetch(self.service_url)
        return parse_ipv4(text.strip())

    def refresh(self) -> None:
        """
        Re-read the public IP. Leaves `previous_ip` alone, and leaves
        `current_ip` alone too if the lookup fails.
        """
        self._current_ip = self._load_current_ip()
        self.logger.debug(f"🌐 Public IP acquired: {self._current_ip} ({self.service_url})")

    def did_public_ip_change(self) -> bool:
        if self._previous_ip is None:
            self.logger.info("Indicating IP change because previous IP is unknown")
            return True

        if self._previous_ip != self._current_ip:
            self.logger.info(f"IP address changed ({self._previous_ip} → {self._current_ip})")
            return True

        self.logger.debug(f"IP address unchanged ({self._current_ip})")
        return False

    def commit(self) -> None:
        """Mark the current IP as synchronized to DNS."""
        self._previous_ip = self._current_ip
