"""Shared fixtures: in-memory collaborators and a Flask test client."""
import json
from typing import Optional, Dict, Any, List

import pytest

from messenger_translator import create_app
from messenger_translator.config.settings import TestingConfig
from messenger_translator.decorators.security import compute_signature
from messenger_translator.domain.entities.user import UserPreference
from messenger_translator.domain.exceptions import TranslationError, UserStoreError
from messenger_translator.domain.interfaces.message_provider import IMessageProvider
from messenger_translator.domain.interfaces.translation_provider import (
    ITranslationProvider,
    Language,
    TranslationResult,
)
from messenger_translator.domain.interfaces.user_repository import IUserRepository
from messenger_translator.infrastructure.service_container import ServiceContainer


class FakeMessageProvider(IMessageProvider):
    """Records everything the relay sends."""

    def __init__(self, profile: Optional[Dict[str, Any]] = None):
        self.calls: List[tuple] = []
        self.profile = profile

    @property
    def texts(self) -> List[tuple]:
        return [(recipient, text) for kind, recipient, text in self.calls if kind == "text"]

    @property
    def actions(self) -> List[tuple]:
        return [(recipient, action) for kind, recipient, action in self.calls if kind == "action"]

    def send_text_message(self, recipient, message):
        self.calls.append(("text", recipient, message))
        return {"status": "success", "message_id": f"mid.{len(self.calls)}"}

    def send_action(self, recipient, action):
        self.calls.append(("action", recipient, action))
        return {"status": "success"}

    def get_user_profile(self, user_id, fields="name,locale"):
        return self.profile

    def set_get_started(self, payload):
        self.calls.append(("get_started", None, payload))
        return True


class InMemoryUserRepository(IUserRepository):

    def __init__(self):
        self.users: Dict[str, UserPreference] = {}
        self.fail = False

    def _check(self):
        if self.fail:
            raise UserStoreError("store is down")

    def get_user(self, user_id):
        self._check()
        user = self.users.get(user_id)
        return UserPreference(**user.to_dict()) if user else None

    def list_users(self):
        self._check()
        return [UserPreference(**user.to_dict()) for user in self.users.values()]

    def add_user(self, user_id, locale, language, name=None):
        self._check()
        self.users[user_id] = UserPreference(id=user_id, locale=locale, language=language, name=name)
        return UserPreference(**self.users[user_id].to_dict())

    def update_user(self, user_id, fields):
        self._check()
        data = self.users[user_id].to_dict()
        data.update(fields)
        self.users[user_id] = UserPreference(**data)
        return UserPreference(**data)


class FakeTranslationProvider(ITranslationProvider):

    LANGUAGES = [
        Language(code="en", name="English"),
        Language(code="fr", name="French"),
        Language(code="de", name="German"),
        Language(code="es", name="Spanish"),
        Language(code="zh-CN", name="Chinese (Simplified)"),
    ]

    def __init__(self):
        self.translations: List[tuple] = []
        self.language_requests: List[str] = []
        self.fail = False

    def translate(self, text, target_language):
        if self.fail:
            raise TranslationError("backend is down")
        self.translations.append((text, target_language))
        return TranslationResult(
            text=f"[{target_language}] {text}",
            target_language=target_language,
            detected_source_language="en"
        )

    def get_languages(self, display_locale):
        if self.fail:
            raise TranslationError("backend is down")
        self.language_requests.append(display_locale)
        return list(self.LANGUAGES)


@pytest.fixture
def message_provider():
    return FakeMessageProvider()


@pytest.fixture
def user_repository():
    return InMemoryUserRepository()


@pytest.fixture
def translation_provider():
    return FakeTranslationProvider()


@pytest.fixture
def container(message_provider, user_repository, translation_provider):
    return ServiceContainer(
        TestingConfig,
        message_provider=message_provider,
        user_repository=user_repository,
        translation_provider=translation_provider,
        cache_enabled=False
    )


@pytest.fixture
def use_case(container):
    return container.get_process_event_use_case()


@pytest.fixture
def app(container):
    app = create_app(TestingConfig, container=container)
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def post_signed(client):
    """POST a JSON payload to /webhook with a valid signature."""
    def _post(payload, secret=TestingConfig.APP_SECRET, algorithm="sha1"):
        body = json.dumps(payload).encode("utf-8")
        return client.post(
            "/webhook",
            data=body,
            content_type="application/json",
            headers={"X-Hub-Signature": compute_signature(body, secret, algorithm)}
        )
    return _post


def message_event(sender_id="1001", text=None, attachments=None):
    message = {"mid": "m_1"}
    if text is not None:
        message["text"] = text
    if attachments is not None:
        message["attachments"] = attachments
    return {"sender": {"id": sender_id}, "recipient": {"id": "page"}, "message": message}


def postback_event(sender_id="1001", payload="get_started", title=None):
    postback = {"payload": payload}
    if title is not None:
        postback["title"] = title
    return {"sender": {"id": sender_id}, "recipient": {"id": "page"}, "postback": postback}


def delivery(*events, entries=1):
    """Wrap events into a page delivery, split across `entries` entries."""
    events = list(events)
    chunks = [events[i::entries] for i in range(entries)]
    return {
        "object": "page",
        "entry": [{"id": "page", "time": 0, "messaging": chunk} for chunk in chunks]
    }
