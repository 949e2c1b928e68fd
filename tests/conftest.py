"""
Pytest configuration and shared fixtures for the webring tests.
"""

import json
import logging
from typing import Callable, Dict

import httpx
import pytest

from webring import Data, Link, LinkStatus, Ring, StatusData

logging.basicConfig(level=logging.INFO)

WEBRING_URL = "https://ring.test/webring.json"
STATUS_URL = "https://ring.test/webring.status.json"


@pytest.fixture
def abc_ring() -> Ring:
    """Three links with schemes, the ring used by the neighbour scenarios."""
    return Ring([
        Link(name="a", link="https://a"),
        Link(name="b", link="https://b"),
        Link(name="c", link="https://c"),
    ])


@pytest.fixture
def sample_data() -> Data:
    """A webring document whose links have no scheme, like the published example."""
    return Data(
        name="acmRing",
        root="https://ring.test",
        ring=Ring([
            Link(name="diamond", link="libdb.so"),
            Link(name="aaronlieb", link="lieber.men"),
            Link(name="hanna", link="hanna.example"),
            Link(name="etok", link="etok.codes"),
        ]),
    )


@pytest.fixture
def sample_status() -> StatusData:
    return StatusData(anomalies={
        "hanna.example": LinkStatus(dead=True),
    })


@pytest.fixture
def documents(sample_data: Data, sample_status: StatusData) -> Dict[str, str]:
    """Wire documents served by the mock transport, keyed by URL."""
    return {
        WEBRING_URL: json.dumps({
            "version": 1,
            "name": sample_data.name,
            "root": sample_data.root,
            "ring": [{"name": link.name, "link": link.link} for link in sample_data.ring],
        }),
        STATUS_URL: json.dumps({
            "version": 1,
            "anomalies": {"hanna.example": {"dead": True, "missingWebring": False}},
        }),
    }


@pytest.fixture
def make_client() -> Callable[..., httpx.AsyncClient]:
    """Factory for AsyncClients backed by an httpx.MockTransport handler."""
    def factory(handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return factory


@pytest.fixture
def serve_documents(documents: Dict[str, str]):
    """A MockTransport handler serving documents, 404 for anything else."""
    requested = []

    def handler(request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        requested.append(request)
        if url in documents:
            return httpx.Response(200, text=documents[url], headers={"Content-Type": "application/json"})
        return httpx.Response(404, text="not found")

    handler.requested = requested
    return handler


@pytest.fixture
def webring_url() -> str:
    return WEBRING_URL


@pytest.fixture
def status_url() -> str:
    return STATUS_URL
