"""Pytest configuration and fixtures."""

import os

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from solders.keypair import Keypair

# Set test environment
os.environ["ENVIRONMENT"] = "test"
os.environ["DEBUG"] = "false"
os.environ.pop("WALLET_ADDRESS", None)

from solforge.api.app import create_app
from solforge.config import Settings


@pytest.fixture
def keypair() -> Keypair:
    """A fresh signing keypair."""
    return Keypair()


@pytest.fixture
def other_keypair() -> Keypair:
    """A second, unrelated keypair."""
    return Keypair()


@pytest.fixture
def address() -> str:
    """A valid base-58 address."""
    return str(Keypair().pubkey())


@pytest.fixture
def addresses() -> list[str]:
    """Four distinct valid base-58 addresses."""
    return [str(Keypair().pubkey()) for _ in range(4)]


@pytest.fixture
def settings() -> Settings:
    """Settings with balance lookup disabled."""
    return Settings(environment="test", debug=False, wallet_address=None)


@pytest.fixture
def test_app(settings):
    """Create test application without a balance service."""
    return create_app(settings=settings)


@pytest_asyncio.fixture
async def client(test_app):
    """Create async test client."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
