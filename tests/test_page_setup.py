"""Page maintenance tests (Get Started button, name backfill)."""
from unittest.mock import MagicMock

import pytest

from messenger_translator.application.use_cases.page_setup_use_case import PageSetupUseCase
from messenger_translator.domain.exceptions import UserStoreError

import manage_page


PROFILES = {"1": {"name": "Ana"}, "2": {"name": "Ben"}, "3": {}}


@pytest.fixture
def provider():
    provider = MagicMock()
    provider.get_user_profile.side_effect = lambda user_id, fields: PROFILES.get(user_id)
    return provider


def test_configure_get_started(message_provider, user_repository):
    use_case = PageSetupUseCase(message_provider, user_repository)

    assert use_case.configure_get_started()
    assert message_provider.calls == [("get_started", None, "get_started")]


def test_backfill_fills_missing_names(provider, user_repository):
    user_repository.add_user("1", locale="en", language="en")
    user_repository.add_user("2", locale="en", language="fr", name="Benjamin")
    user_repository.add_user("3", locale="en", language="en")

    stats = PageSetupUseCase(provider, user_repository).backfill_names()

    assert stats == {"updated": 1, "skipped": 1, "failed": 1}
    assert user_repository.users["1"].name == "Ana"
    assert user_repository.users["2"].name == "Benjamin"
    assert user_repository.users["1"].language == "en"


def test_backfill_overwrite(provider, user_repository):
    user_repository.add_user("2", locale="en", language="fr", name="Benjamin")

    stats = PageSetupUseCase(provider, user_repository).backfill_names(overwrite=True)

    assert stats["updated"] == 1
    assert user_repository.users["2"].name == "Ben"


def test_backfill_store_failure_propagates(provider, user_repository):
    user_repository.fail = True
    with pytest.raises(UserStoreError):
        PageSetupUseCase(provider, user_repository).backfill_names()


def test_manage_page_get_started(monkeypatch, message_provider, user_repository):
    container = MagicMock()
    container.get_page_setup_use_case.return_value = PageSetupUseCase(message_provider, user_repository)
    monkeypatch.setenv("FLASK_ENV", "testing")
    monkeypatch.setattr(manage_page, "ServiceContainer", lambda config, cache_enabled: container)

    assert manage_page.main(["get-started", "--payload", "get_help"]) == 0
    assert message_provider.calls == [("get_started", None, "get_help")]
    container.close.assert_called_once()


def test_manage_page_reports_store_failure(monkeypatch, provider, user_repository):
    user_repository.fail = True
    container = MagicMock()
    container.get_page_setup_use_case.return_value = PageSetupUseCase(provider, user_repository)
    monkeypatch.setenv("FLASK_ENV", "testing")
    monkeypatch.setattr(manage_page, "ServiceContainer", lambda config, cache_enabled: container)

    assert manage_page.main(["backfill-names"]) == 1
