"""Client for the third-party registration lookup API.

The service answers ``GET <url>?plate=AB-123-CD`` with a JSON body shaped like
``{"success": true, "marque": "PEUGEOT", "modele": "308",
"date_mise_circulation": "15/03/2019"}``.
"""
import logging
import re
from dataclasses import dataclass
from datetime import date

import httpx

from app.config import settings

logger = logging.getLogger(__name__)

DOMESTIC_PLATE_PATTERN = re.compile(r"^[A-Z]{2}-\d{3}-[A-Z]{2}$")


class PlateLookupError(Exception):
    pass


@dataclass
class PlateLookupResult:
    success: bool
    make: str = ""
    model: str = ""
    year: int | None = None
    registration_date: str | None = None


def is_domestic_plate(plate: str) -> bool:
    """True for plates in the ``AB-123-CD`` registration format."""
    return bool(plate) and DOMESTIC_PLATE_PATTERN.match(plate) is not None


def _registration_year(registration_date: str | None) -> int:
    if registration_date:
        parts = registration_date.split("/")
        if len(parts) == 3:
            try:
                return int(parts[2])
            except ValueError:
                pass
    return date.today().year


def parse_lookup_response(data: dict) -> PlateLookupResult:
    if not data or not data.get("success"):
        return PlateLookupResult(success=False)

    registration_date = data.get("date_mise_circulation")
    return PlateLookupResult(
        success=True,
        make=data.get("marque") or "",
        model=data.get("modele") or "",
        year=_registration_year(registration_date),
        registration_date=registration_date,
    )


class PlateLookupClient:
    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url or settings.plate_lookup_url
        self.timeout = httpx.Timeout(timeout if timeout is not None else settings.plate_lookup_timeout)
        self._transport = transport

    async def lookup(self, plate: str) -> PlateLookupResult:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(self.base_url, params={"plate": plate})
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error("Plate lookup failed for %s: HTTP %s", plate, e.response.status_code)
            raise PlateLookupError("Failed to fetch vehicle data") from e
        except httpx.RequestError as e:
            logger.error("Plate lookup connection error for %s: %s", plate, e)
            raise PlateLookupError("Failed to fetch vehicle data") from e
        except ValueError as e:
            logger.error("Plate lookup returned invalid JSON for %s", plate)
            raise PlateLookupError("Failed to fetch vehicle data") from e

        result = parse_lookup_response(data if isinstance(data, dict) else {})
        logger.info("Plate lookup for %s: success=%s", plate, result.success)
        return result
