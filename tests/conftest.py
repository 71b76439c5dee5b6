import httpx
import pytest

from hotel_ops.core.session import SessionState
from hotel_ops.services.backend import HotelBackend
from hotel_ops.services.gateway import GatewayClient

from _helpers import API_KEY, AUTH_URL, REST_URL, FakeHotelApi


@pytest.fixture
def fake_api() -> FakeHotelApi:
    return FakeHotelApi()


@pytest.fixture
def session_state() -> SessionState:
    return SessionState()


@pytest.fixture
def gateway(fake_api, session_state) -> GatewayClient:
    return GatewayClient(
        REST_URL,
        AUTH_URL,
        session_state,
        api_key=API_KEY,
        transport=httpx.MockTransport(fake_api),
    )


@pytest.fixture
def backend(gateway) -> HotelBackend:
    return HotelBackend(gateway)
