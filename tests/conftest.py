"""Shared test fixtures — postcodes.io responses served by a mock transport."""

import json

import httpx
import pytest

# Trimmed from real postcodes.io responses
POSTCODE_RESULT = {
    "postcode": "SW1A 1AA",
    "quality": 1,
    "eastings": 529090,
    "northings": 179645,
    "country": "England",
    "nhs_ha": "London",
    "longitude": -0.141588,
    "latitude": 51.501009,
    "european_electoral_region": "London",
    "primary_care_trust": "Westminster",
    "region": "London",
    "lsoa": "Westminster 018C",
    "msoa": "Westminster 018",
    "incode": "1AA",
    "outcode": "SW1A",
    "parliamentary_constituency": "Cities of London and Westminster",
    "admin_district": "Westminster",
    "parish": "Westminster, unparished area",
    "admin_county": None,
    "admin_ward": "St James's",
    "ccg": "NHS North West London",
    "nuts": "Westminster",
    "codes": {
        "admin_district": "E09000033",
        "admin_county": "E99999999",
        "admin_ward": "E05013806",
        "parish": "E43000236",
        "parliamentary_constituency": "E14001172",
        "ccg": "E38000256",
        "nuts": "TLI32",
    },
}

OUTCODE_RESULT = {
    "outcode": "SW1A",
    "longitude": -0.13534,
    "latitude": 51.50275,
    "northings": 179821,
    "eastings": 529513,
    "admin_district": ["Westminster"],
    "parish": ["Westminster, unparished area"],
    "admin_county": [],
    "admin_ward": ["St James's", "Vincent Square"],
    "country": ["England"],
    "parliamentary_constituency": ["Cities of London and Westminster"],
}


class Recorder:
    """Mock postcodes.io that replies with a fixed status and body."""

    def __init__(self):
        self.status = 200
        self.body = b""
        self.requests: list[httpx.Request] = []

    def reply(self, status: int, payload=None, body: bytes | None = None):
        self.status = status
        if body is not None:
            self.body = body
        elif payload is not None:
            self.body = json.dumps(payload).encode()
        else:
            self.body = b""

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status, content=self.body)


@pytest.fixture()
def server() -> Recorder:
    return Recorder()


@pytest.fixture()
def http_client(server: Recorder):
    """An httpx.Client whose requests are answered by *server*."""
    c = httpx.Client(transport=httpx.MockTransport(server))
    yield c
    c.close()


@pytest.fixture()
def api(http_client: httpx.Client):
    """Create a PostcodesIO client wired to the mock transport."""
    from postcodesio import PostcodesIO

    c = PostcodesIO(client=http_client)
    yield c
    c.close()
