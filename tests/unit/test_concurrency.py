"""
Unit tests for run_with_retries.
"""
from unittest.mock import AsyncMock, patch

import pytest
from devconnect.application.use_cases.concurrency import run_with_retries
from devconnect.core.errors import AlreadyLiked, ConcurrentModification


@pytest.fixture(autouse=True)
def no_sleep():
    with patch("devconnect.application.use_cases.concurrency.asyncio.sleep", new=AsyncMock()) as sleep:
        yield sleep


class TestRunWithRetries:
    """Tests for run_with_retries"""

    @pytest.mark.asyncio
    async def test_returns_first_success(self):
        operation = AsyncMock(return_value="ok")
        assert await run_with_retries(operation, 3) == "ok"
        assert operation.await_count == 1

    @pytest.mark.asyncio
    async def test_retries_conflicts_then_succeeds(self, no_sleep):
        operation = AsyncMock(
            side_effect=[ConcurrentModification("x"), ConcurrentModification("y"), "ok"]
        )
        assert await run_with_retries(operation, 5) == "ok"
        assert operation.await_count == 3
        assert no_sleep.await_count == 2

    @pytest.mark.asyncio
    async def test_gives_up_after_max_attempts(self):
        operation = AsyncMock(side_effect=ConcurrentModification("conflict"))
        with pytest.raises(ConcurrentModification):
            await run_with_retries(operation, 3)
        assert operation.await_count == 3

    @pytest.mark.asyncio
    async def test_domain_errors_not_retried(self):
        operation = AsyncMock(side_effect=AlreadyLiked())
        with pytest.raises(AlreadyLiked):
            await run_with_retries(operation, 5)
        assert operation.await_count == 1

    @pytest.mark.asyncio
    async def test_backoff_is_capped(self, no_sleep):
        operation = AsyncMock(side_effect=ConcurrentModification("conflict"))
        with pytest.raises(ConcurrentModification):
            await run_with_retries(operation, 10, initial_delay=0.1, max_delay=0.2)
        delays = [call.args[0] for call in no_sleep.await_args_list]
        # Jitter scales each delay by at most 1.5
        assert max(delays) <= 0.2 * 1.5
