"""Tests for load retries with exponential backoff."""

from __future__ import annotations

from unittest.mock import Mock, patch

import pytest

from companion.utils import api_retry
from companion.utils.api_retry import backoff_delay, retry_with_backoff


@pytest.fixture
def no_sleep():
    with patch("companion.utils.api_retry.time.sleep") as sleep:
        yield sleep


@pytest.mark.unit
def test_success_first_try(no_sleep):
    load = Mock(return_value="match")

    @retry_with_backoff(max_retries=3)
    def fetch():
        return load()

    assert fetch() == "match"
    assert load.call_count == 1
    no_sleep.assert_not_called()


@pytest.mark.unit
def test_transient_error_then_success(no_sleep):
    load = Mock(side_effect=[OSError("disk busy"), TimeoutError("slow"), "match"])

    @retry_with_backoff(max_retries=5, base_delay=0.1)
    def fetch():
        return load()

    assert fetch() == "match"
    assert load.call_count == 3
    assert [c.args[0] for c in no_sleep.call_args_list] == [0.1, 0.2]


@pytest.mark.unit
def test_gives_up_after_max_retries(no_sleep):
    load = Mock(side_effect=OSError("gone"))

    @retry_with_backoff(max_retries=2, base_delay=0.01)
    def fetch():
        return load()

    with pytest.raises(OSError, match="gone"):
        fetch()

    # initial call plus two retries
    assert load.call_count == 3
    assert no_sleep.call_count == 2


@pytest.mark.unit
def test_non_transient_errors_are_not_retried(no_sleep):
    load = Mock(side_effect=ValueError("bad snapshot"))

    @retry_with_backoff(max_retries=3)
    def fetch():
        return load()

    with pytest.raises(ValueError):
        fetch()
    assert load.call_count == 1


@pytest.mark.unit
def test_custom_exception_types(no_sleep):
    load = Mock(side_effect=[KeyError("a"), TypeError("b")])

    @retry_with_backoff(max_retries=3, base_delay=0.01, exceptions=(KeyError,))
    def fetch():
        return load()

    with pytest.raises(TypeError):
        fetch()
    assert load.call_count == 2


@pytest.mark.unit
def test_backoff_delay_is_capped():
    assert backoff_delay(0, 0.5, 5.0, 2.0) == 0.5
    assert backoff_delay(2, 0.5, 5.0, 2.0) == 2.0
    assert backoff_delay(10, 0.5, 5.0, 2.0) == 5.0


@pytest.mark.unit
def test_retries_reported_to_progress_display(no_sleep):
    display = Mock()
    api_retry.set_progress_display(display)
    try:
        load = Mock(side_effect=[OSError("x"), "ok"])

        @retry_with_backoff(max_retries=1, base_delay=0.01)
        def fetch():
            return load()

        assert fetch() == "ok"
    finally:
        api_retry.set_progress_display(None)

    display.add_line.assert_called_once()
    assert "attempt 1/2" in display.add_line.call_args.args[0]


@pytest.mark.unit
def test_silent_mode_reports_nothing(no_sleep):
    display = Mock()
    api_retry.set_progress_display(display)
    try:
        load = Mock(side_effect=[OSError("x"), OSError("y")])

        @retry_with_backoff(max_retries=1, base_delay=0.01, silent=True)
        def fetch():
            return load()

        with pytest.raises(OSError):
            fetch()
    finally:
        api_retry.set_progress_display(None)

    display.add_line.assert_not_called()
