"""Shared pytest fixtures for the Benaloh test suite."""

import random

import pytest
from httpx import ASGITransport, AsyncClient

from benaloh import config
from benaloh.crypto import PrivateKey, PublicKey, generate_key
from benaloh.main import app, get_demo_key


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture()
def fixed_key() -> PrivateKey:
    """Key recorded from generate_key(5): p=31, q=29, so r=3 and n=899."""
    return PrivateKey(public_key=PublicKey(y=3, r=3, n=899), phi_div_r=280, x=552)


@pytest.fixture(scope="module")
def small_key() -> PrivateKey:
    """A 12-bit key: r is one of 53, 59, 61, small enough to decrypt exhaustively."""
    return generate_key(12, rng=random.Random(12))


@pytest.fixture(scope="module")
def key16() -> PrivateKey:
    return generate_key(16, rng=random.Random(16))


@pytest.fixture()
def demo_key(monkeypatch):
    """Swap the service's demo key for a quick 12-bit one."""
    monkeypatch.setattr(config, "KEY_BITS", 12)
    get_demo_key.cache_clear()
    yield get_demo_key()
    get_demo_key.cache_clear()


@pytest.fixture()
async def client(demo_key):
    """Provide an async HTTP test client bound to the FastAPI app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
