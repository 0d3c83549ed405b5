from __future__ import annotations

import json
from typing import Callable, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from src.commonUtils.email_renderer import EmailRenderer
from src.commonUtils.emailUtil import BrevoEmailClient
from src.config.settings import Settings
from src.crud.contactService import ContactService
from src.main import create_app

ADMIN_EMAIL = "admin@autoflowmation.test"
SENDER_EMAIL = "noreply@autoflowmation.test"
ENDPOINT = "https://brevo.test/v3/smtp/email"


class FakeBrevo:
    """Records every outbound request and answers with queued status codes."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.statuses: List[int] = []
        self.network_error: bool = False

    def fail_call(self, index: int, status: int = 400) -> None:
        while len(self.statuses) <= index:
            self.statuses.append(201)
        self.statuses[index] = status

    def handler(self, request: httpx.Request) -> httpx.Response:
        call = len(self.requests)
        self.requests.append(request)
        if self.network_error:
            raise httpx.ConnectError("connection refused", request=request)
        status = self.statuses[call] if call < len(self.statuses) else 201
        if status >= 400:
            return httpx.Response(status, json={"code": "invalid_parameter", "message": "sender not verified"})
        return httpx.Response(status, json={"messageId": f"<msg-{call}@brevo>"})

    @property
    def bodies(self) -> List[dict]:
        return [json.loads(request.content) for request in self.requests]


def make_settings(**overrides) -> Settings:
    values = dict(
        BREVO_API_KEY="test-key",
        BREVO_SENDER_EMAIL=SENDER_EMAIL,
        BREVO_SENDER_NAME="Autoflowmation AI",
        BREVO_ADMIN_EMAIL=ADMIN_EMAIL,
        BREVO_API_ENDPOINT=ENDPOINT,
        FRONTEND_URL="https://autoflowmation.test",
        ENVIRONMENT="production",
    )
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def fake_brevo() -> FakeBrevo:
    return FakeBrevo()


@pytest.fixture
def email_client(fake_brevo: FakeBrevo) -> BrevoEmailClient:
    return BrevoEmailClient(api_key="test-key", endpoint=ENDPOINT,
                            transport=httpx.MockTransport(fake_brevo.handler))


@pytest.fixture
def renderer() -> EmailRenderer:
    return EmailRenderer(sender_email=SENDER_EMAIL, sender_name="Autoflowmation AI", admin_email=ADMIN_EMAIL)


@pytest.fixture
def contact_service(email_client: BrevoEmailClient, renderer: EmailRenderer) -> ContactService:
    return ContactService(email_client=email_client, renderer=renderer)


@pytest.fixture
def make_client(email_client: BrevoEmailClient) -> Callable[..., TestClient]:
    def _make(settings: Optional[Settings] = None, **kwargs) -> TestClient:
        app = create_app(settings or make_settings(), email_client=email_client)
        return TestClient(app, **kwargs)

    return _make


@pytest.fixture
def client(make_client) -> TestClient:
    with make_client() as test_client:
        yield test_client


@pytest.fixture
def settings_factory() -> Callable[..., Settings]:
    return make_settings
