"""HTTP client the dashboard views use to talk to the vehicle endpoints."""
import asyncio
import logging
from typing import Any

import httpx

from app.config import settings

logger = logging.getLogger(__name__)


class ApiError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class FleetApiClient:
    """Thin async wrapper over ``httpx.AsyncClient``.

    Every call is bounded by ``timeout``. Timeouts, transport failures,
    non-2xx responses and unparseable bodies all surface as ``ApiError``
    carrying a message fit for a notification.
    """

    def __init__(
        self,
        base_url: str,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.timeout = timeout if timeout is not None else settings.client_timeout
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers=headers,
            timeout=httpx.Timeout(self.timeout),
            transport=transport,
        )

    async def __aenter__(self) -> "FleetApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, url: str, action: str, json: Any = None) -> Any:
        # httpx bounds each phase separately; wait_for bounds the whole exchange.
        try:
            response = await asyncio.wait_for(
                self._client.request(method, url, json=json), self.timeout
            )
        except (httpx.TimeoutException, asyncio.TimeoutError) as e:
            logger.error("Timeout when trying to %s: %s", action, e)
            raise ApiError(f"Request timed out when trying to {action}") from e
        except httpx.RequestError as e:
            logger.error("Network error when trying to %s: %s", action, e)
            raise ApiError(f"Network error when trying to {action}") from e

        if response.is_error:
            logger.error("API error on %s %s: %s", method, url, response.text)
            message = f"Failed to {action}: {response.status_code} {response.reason_phrase}"
            try:
                body = response.json()
            except ValueError:
                body = None
            if isinstance(body, dict) and body.get("error"):
                message = body["error"]
            raise ApiError(message, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise ApiError(f"Invalid response when trying to {action}") from e

    async def list_vehicles(self, partner_id: str) -> list[dict]:
        return await self._request("GET", f"/api/partners/{partner_id}/vehicles", "fetch partner vehicles")

    async def get_vehicle(self, partner_id: str, vehicle_id: str) -> dict:
        return await self._request(
            "GET", f"/api/partners/{partner_id}/vehicles/{vehicle_id}", "fetch vehicle details"
        )

    async def create_vehicle(self, partner_id: str, data: dict) -> dict:
        return await self._request("POST", f"/api/partners/{partner_id}/vehicles", "add vehicle", json=data)

    async def update_vehicle(self, partner_id: str, vehicle_id: str, data: dict) -> dict:
        return await self._request(
            "PUT", f"/api/partners/{partner_id}/vehicles/{vehicle_id}", "update vehicle", json=data
        )

    async def delete_vehicle(self, partner_id: str, vehicle_id: str) -> dict:
        return await self._request(
            "DELETE", f"/api/partners/{partner_id}/vehicles/{vehicle_id}", "delete vehicle"
        )
