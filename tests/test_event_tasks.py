"""Background task tests."""
from unittest.mock import patch

from messenger_translator.tasks import event_tasks

from conftest import message_event


def test_task_runs_the_use_case(container, message_provider):
    with patch.object(event_tasks, "get_container", return_value=container):
        result = event_tasks.process_event_task(message_event(sender_id="9", text="hi"))

    assert result == {"status": "success", "sender_id": "9"}
    assert message_provider.texts == [("9", "[en] hi")]


def test_task_reports_failed_events(container, translation_provider):
    translation_provider.fail = True
    with patch.object(event_tasks, "get_container", return_value=container):
        result = event_tasks.process_event_task(message_event(sender_id="9", text="hi"))

    assert result["status"] == "error"


def test_task_is_never_retried():
    assert event_tasks.process_event_task.max_retries == 0
    assert event_tasks.process_event_task.name == "messenger_translator.process_event"
