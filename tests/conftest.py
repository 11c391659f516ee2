"""Shared fixtures: in-memory collaborators and a TestClient wired to them."""

from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from src.commonUtils.exceptions import MailchimpError
from src.config.settings import Settings, get_settings
from src.dependencies.relay_dependencies import get_mailchimp, get_mailer
from src.main import app

AUDIENCE_ID = "aud123"
OWNER_EMAIL = "owner@example.com"


class FakeMailchimp:
    """Records every call; raises the configured error for an operation when set."""

    def __init__(self) -> None:
        self.calls: List[tuple] = []
        self.errors: Dict[str, Exception] = {}
        self.members: Dict[str, Dict[str, Any]] = {}

    def _record(self, operation: str, *args: Any) -> None:
        self.calls.append((operation, *args))
        if operation in self.errors:
            raise self.errors[operation]

    def calls_to(self, operation: str) -> List[tuple]:
        return [call for call in self.calls if call[0] == operation]

    async def ping(self) -> Dict[str, Any]:
        self._record("ping")
        return {"health_status": "Everything's Chimpy!"}

    async def get_list_member(self, list_id: str, member_hash: str) -> Dict[str, Any]:
        self._record("get_list_member", list_id, member_hash)
        if member_hash not in self.members:
            raise MailchimpError("The requested resource could not be found.", status=404, title="Resource Not Found")
        return self.members[member_hash]

    async def add_list_member(self, list_id: str, member: Dict[str, Any]) -> Dict[str, Any]:
        self._record("add_list_member", list_id, member)
        return {"id": "abc", "email_address": member["email_address"], "status": member["status"]}

    async def update_list_member(self, list_id: str, member_hash: str, changes: Dict[str, Any]) -> Dict[str, Any]:
        self._record("update_list_member", list_id, member_hash, changes)
        return {"id": member_hash, **changes}


class FakeMailer:
    """Stands in for fastapi_mail.FastMail."""

    def __init__(self, error: Optional[Exception] = None) -> None:
        self.outbox: List[Any] = []
        self.error = error

    async def send_message(self, message: Any, template_name: Optional[str] = None) -> None:
        if self.error is not None:
            raise self.error
        self.outbox.append(message)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        GMAIL_USER=OWNER_EMAIL,
        GMAIL_APP_PASSWORD="app-password",
        MAILCHIMP_API_KEY="key-us1",
        MAILCHIMP_SERVER_PREFIX="us1",
        MAILCHIMP_AUDIENCE_ID=AUDIENCE_ID,
    )


@pytest.fixture
def mailchimp() -> FakeMailchimp:
    return FakeMailchimp()


@pytest.fixture
def mailer() -> FakeMailer:
    return FakeMailer()


@pytest.fixture
def client(settings: Settings, mailchimp: FakeMailchimp, mailer: FakeMailer):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_mailchimp] = lambda: mailchimp
    app.dependency_overrides[get_mailer] = lambda: mailer
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def valid_contact() -> Dict[str, Any]:
    return {
        "name": "Jane Q Public",
        "email": "Jane.Public@Example.com",
        "phone": "5551234567",
        "contactAbout": "partnership",
        "message": "I would like to talk about working together.",
        "agreeToPolicy": True,
    }
