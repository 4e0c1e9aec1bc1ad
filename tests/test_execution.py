import threading

import pytest

from simchat.llm.execution import ThreadedFetchExecutor

pytestmark = pytest.mark.core


def test_threaded_executor_runs_off_the_calling_thread() -> None:
    executor = ThreadedFetchExecutor()
    try:
        future = executor.submit(lambda: threading.current_thread().name)
        name = future.result(timeout=5)
    finally:
        executor.shutdown()
    assert name.startswith("SimChatFetch")
    assert name != threading.current_thread().name


def test_shutdown_lets_inflight_work_finish() -> None:
    release = threading.Event()
    executor = ThreadedFetchExecutor()
    future = executor.submit(lambda: release.wait(5) and "done")
    executor.shutdown()
    release.set()
    assert future.result(timeout=5) == "done"
    with pytest.raises(RuntimeError):
        executor.submit(lambda: None)
