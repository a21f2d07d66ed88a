# --- Standard library imports ---
import json
from typing import Optional

# --- Third-party imports ---
import requests

# --- Project imports ---
from .config import Config
from .logger import get_logger
from .zone_id import ZoneId
from .records import DnsRecord
from .exceptions import ConfigError, DnsProviderError


# Largest page size Cloudflare accepts for dns_records listings
PER_PAGE = 100


class CloudflareClient:
    """
    Handles all communication with the Cloudflare DNS records API.

    One client (and one HTTP session) is shared by every zone the agent
    monitors; zones are passed per call.
    """

    def __init__(
            self,
            api_token: str,
            api_base_url: str = Config.CLOUDFLARE_API_BASE_URL,
            timeout: float = Config.API_TIMEOUT,
            session: Optional[requests.Session] = None,
        ):
        if not api_token:
            raise ConfigError("CLOUDFLARE_API_TOKEN is not set")

        self.logger = get_logger("cloudflare")
        self.api_base_url = api_base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

        self.headers = {
            "Authorization": f"Bearer {api_token}",
            "Content-Type": "application/json",
        }

    # Private helper for URL construction
    def _build_resource_url(self, zone_id: ZoneId, record_id: str = None) -> str:
        """
        Constructs the Cloudflare DNS resource URL for a zone

        Args:
            zone_id: Zone the records live in
            record_id: Omit for the collection endpoint (GET), give it for the
                       single resource endpoint (PATCH)

        Returns:
            The complete API endpoint URL
        """
        base_path = f"{self.api_base_url}/zones/{zone_id}/dns_records"

        if record_id is None:
            return base_path

        if not record_id:
            raise ValueError("record_id must not be empty for single resource operations")

        return f"{base_path}/{record_id}"

    def _request(self, method: str, url: str, **kwargs) -> dict:
        """
        Send one API request and unwrap the Cloudflare envelope.

        Raises:
            DnsProviderError: On network errors, HTTP errors, invalid JSON, or
                              a response with `success: false`
        """
        try:
            resp = self.session.request(
                method, url, headers=self.headers, timeout=self.timeout, **kwargs
            )
            resp.raise_for_status()
        except requests.RequestException as e:
            raise DnsProviderError(f"Cloudflare {method} {url} failed: {e}") from e

        try:
            data = resp.json()
        except ValueError as e:
            raise DnsProviderError(
                f"Cloudflare {method} {url} returned invalid JSON"
            ) from e

        if not isinstance(data, dict) or not data.get("success"):
            errors = data.get("errors") if isinstance(data, dict) else data
            raise DnsProviderError(f"Cloudflare {method} {url} unsuccessful: {errors}")

        self.logger.debug(f"{method} JSON response:\n{json.dumps(data, indent=2)}")
        return data

    def list_dns_records(self, zone_id: ZoneId) -> list[DnsRecord]:
        """
        Fetch every DNS record of a zone, in the order Cloudflare returns them.

        Follows `result_info` pagination until the last page.

        Raises:
            DnsProviderError: If any page cannot be fetched or parsed
        """
        url = self._build_resource_url(zone_id)
        records: list[DnsRecord] = []
        page = 1

        while True:
            self.logger.debug(f"Initiating record pull → {url} (page {page})")
            data = self._request("GET", url, params={"page": page, "per_page": PER_PAGE})

            records.extend(DnsRecord.from_api(item) for item in data.get("result") or [])

            total_pages = (data.get("result_info") or {}).get("total_pages") or 1
            if page >= total_pages:
                break
            page += 1

        return records

    def update_dns_record(self, zone_id: ZoneId, record: DnsRecord) -> dict:
        """
        Push a record's current state back to Cloudflare (PATCH by record ID).

        Returns:
            dict: The updated DNS record from the Cloudflare response

        Raises:
            DnsProviderError: If the API request fails or the response is invalid
        """
        url = self._build_resource_url(zone_id, record.id)
        data = self._request("PATCH", url, json=record.to_api())

        updated = data.get("result")
        if not updated:
            raise DnsProviderError(
                f"PATCH succeeded but response contained no DNS record [{record.id}]"
            )
        return updated
