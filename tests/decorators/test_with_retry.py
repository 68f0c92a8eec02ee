"""Tests for the tenacity-based retry decorator."""

import importlib

import pytest

from bloglist.decorators import with_retry


class TestWithRetry:
    """Test cases for with_retry."""

    @pytest.mark.asyncio
    async def test_retries_until_success(self) -> None:
        """Transient failures are retried."""
        calls = 0

        @with_retry(max_retries=3, base_delay=0, max_delay=0)
        async def flaky() -> str:
            nonlocal calls
            calls += 1
            if calls < 3:
                raise ConnectionError("down")
            return "ok"

        assert await flaky() == "ok"
        assert calls == 3

    @pytest.mark.asyncio
    async def test_reraises_after_last_attempt(self) -> None:
        """The last error propagates once attempts run out."""
        calls = 0

        @with_retry(max_retries=2, base_delay=0, max_delay=0)
        async def always_down() -> None:
            nonlocal calls
            calls += 1
            raise TimeoutError("still down")

        with pytest.raises(TimeoutError):
            await always_down()
        assert calls == 2

    @pytest.mark.asyncio
    async def test_other_errors_are_not_retried(self) -> None:
        """Errors outside the retry set fail immediately."""
        calls = 0

        @with_retry(max_retries=3, base_delay=0, max_delay=0)
        async def broken() -> None:
            nonlocal calls
            calls += 1
            raise ValueError("bad input")

        with pytest.raises(ValueError, match="bad input"):
            await broken()
        assert calls == 1

    @pytest.mark.asyncio
    async def test_custom_retry_set(self) -> None:
        """Only the configured exception types are retried."""
        calls = 0

        @with_retry(max_retries=3, base_delay=0, max_delay=0, exec_retry=(KeyError,))
        async def lookup() -> str:
            nonlocal calls
            calls += 1
            if calls == 1:
                raise KeyError("missing")
            raise ConnectionError("down")

        with pytest.raises(ConnectionError):
            await lookup()
        assert calls == 2

    @pytest.mark.asyncio
    async def test_retry_is_logged(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Each retry logs the function, the attempt and the error."""
        events: list[tuple[str, dict]] = []

        class Recorder:
            def warning(self, event: str, **kw: object) -> None:
                events.append((event, kw))

        retry_module = importlib.import_module("bloglist.decorators.with_retry")
        monkeypatch.setattr(retry_module, "logger", Recorder())

        @with_retry(max_retries=2, base_delay=0, max_delay=0)
        async def flaky() -> None:
            raise ConnectionError("down")

        with pytest.raises(ConnectionError):
            await flaky()

        assert len(events) == 1
        event, fields = events[0]
        assert event == "Retrying after failure"
        assert fields["func"] == "flaky"
        assert fields["attempt"] == 1
        assert fields["max_attempts"] == 2
        assert "ConnectionError" in fields["error"]
