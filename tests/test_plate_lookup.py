from datetime import date

import httpx
import pytest

from app.services.plate_lookup import (
    PlateLookupClient,
    PlateLookupError,
    is_domestic_plate,
    parse_lookup_response,
)

LOOKUP_URL = "https://plates.test/getDataImmatriculation"


def _client(handler) -> PlateLookupClient:
    return PlateLookupClient(base_url=LOOKUP_URL, timeout=1.0, transport=httpx.MockTransport(handler))


@pytest.mark.parametrize(
    "plate, expected",
    [
        ("AB-123-CD", True),
        ("ZZ-999-ZZ", True),
        ("ab-123-cd", False),
        ("AB123CD", False),
        ("AB-1234-CD", False),
        ("", False),
    ],
)
def test_is_domestic_plate(plate, expected):
    assert is_domestic_plate(plate) is expected


def test_parse_response_takes_year_from_registration_date():
    result = parse_lookup_response(
        {"success": True, "marque": "PEUGEOT", "modele": "508", "date_mise_circulation": "15/03/2019"}
    )
    assert result.success is True
    assert result.make == "PEUGEOT"
    assert result.model == "508"
    assert result.year == 2019
    assert result.registration_date == "15/03/2019"


def test_parse_response_without_date_uses_current_year():
    result = parse_lookup_response({"success": True, "marque": "RENAULT", "modele": "Espace"})
    assert result.year == date.today().year


def test_parse_unsuccessful_response():
    assert parse_lookup_response({"success": False}).success is False


@pytest.mark.asyncio
async def test_lookup_sends_plate_and_parses_body():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["plate"] = request.url.params["plate"]
        return httpx.Response(200, json={
            "success": True, "marque": "CITROEN", "modele": "C5 X", "date_mise_circulation": "01/09/2022",
        })

    result = await _client(handler).lookup("AB-123-CD")

    assert seen["plate"] == "AB-123-CD"
    assert result.success is True
    assert result.make == "CITROEN"
    assert result.year == 2022


@pytest.mark.asyncio
async def test_lookup_http_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text="unavailable")

    with pytest.raises(PlateLookupError):
        await _client(handler).lookup("AB-123-CD")


@pytest.mark.asyncio
async def test_lookup_invalid_json():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>oops</html>")

    with pytest.raises(PlateLookupError):
        await _client(handler).lookup("AB-123-CD")


@pytest.mark.asyncio
async def test_lookup_timeout():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(PlateLookupError):
        await _client(handler).lookup("AB-123-CD")
