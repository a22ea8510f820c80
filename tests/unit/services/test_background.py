import pytest

from taskflow.app.services.background import BackgroundDispatcher


@pytest.mark.asyncio
async def test_job_runs():
    dispatcher = BackgroundDispatcher()
    done = []

    async def job():
        done.append(True)

    dispatcher.submit("job", job)
    await dispatcher.drain()

    assert done == [True]
    assert dispatcher.submitted_count == 1
    assert dispatcher.failure_count == 0
    assert dispatcher.pending == 0


@pytest.mark.asyncio
async def test_failure_is_counted_not_raised(caplog):
    dispatcher = BackgroundDispatcher()

    async def job():
        raise RuntimeError("index unavailable")

    task = dispatcher.submit("search-index-sync", job)
    await dispatcher.drain()

    assert dispatcher.failure_count == 1
    assert task.exception() is None
    assert "Background job failed: search-index-sync" in caplog.text
