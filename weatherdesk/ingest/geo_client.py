"""IP geolocation client (ipinfo.io)."""

import ipaddress
import logging

import httpx

from weatherdesk.errors import LocationError
from weatherdesk.models.location import LocationInfo, parse_coordinate

logger = logging.getLogger(__name__)

IPINFO_BASE_URL = "https://ipinfo.io"


class GeoLocator:
    def __init__(self, client: httpx.Client, base_url: str = IPINFO_BASE_URL):
        self.client = client
        self.base_url = base_url.rstrip("/")

    def locate(self, client_ip: str | None = None) -> LocationInfo:
        """Resolve the caller to a city and coordinate.

        Private and loopback addresses cannot be geolocated, so those fall
        back to the service's own public address.
        """
        if _is_public_ip(client_ip):
            url = f"{self.base_url}/{client_ip}/json"
        else:
            url = f"{self.base_url}/json"

        try:
            resp = self.client.get(url)
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPError as e:
            raise LocationError.from_http_error("Location lookup failed", e) from e
        except ValueError as e:
            raise LocationError(f"Location lookup returned invalid JSON: {e}") from e

        info = _parse_ip_info(data)
        logger.info(
            "Resolved %s to %s, %s (%s,%s)",
            info.ip or "caller", info.city, info.country,
            info.coordinate.latitude, info.coordinate.longitude,
        )
        return info


def _is_public_ip(value: str | None) -> bool:
    if not value:
        return False
    try:
        return ipaddress.ip_address(value).is_global
    except ValueError:
        return False


def _parse_ip_info(data: object) -> LocationInfo:
    if not isinstance(data, dict):
        raise LocationError("Location lookup returned a non-object payload")
    loc = data.get("loc")
    if not isinstance(loc, str):
        raise LocationError("Location lookup returned no coordinate")
    return LocationInfo(
        ip=str(data.get("ip") or ""),
        city=str(data.get("city") or ""),
        region=str(data.get("region") or ""),
        country=str(data.get("country") or ""),
        coordinate=parse_coordinate(loc),
    )
