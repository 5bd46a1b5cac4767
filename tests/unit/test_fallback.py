from __future__ import annotations

import threading

import pytest

from visual import (
    DEFAULT_FALLBACK,
    FallbackAlreadySetError,
    VisualError,
    get_fallback,
    is_fallback_set,
    set_fallback,
)


def test_default_is_empty_until_set() -> None:
    assert DEFAULT_FALLBACK == ""
    assert get_fallback() == DEFAULT_FALLBACK
    assert not is_fallback_set()


def test_set_fallback_commits_value() -> None:
    set_fallback("nothing")

    assert get_fallback() == "nothing"
    assert is_fallback_set()


def test_second_set_fails_and_keeps_first_value() -> None:
    set_fallback("nothing")

    with pytest.raises(FallbackAlreadySetError) as excinfo:
        set_fallback("something else")

    assert get_fallback() == "nothing"
    assert excinfo.value.current == "nothing"
    assert "already initialised" in str(excinfo.value)


def test_setting_the_same_value_twice_still_fails() -> None:
    set_fallback("nothing")

    with pytest.raises(FallbackAlreadySetError):
        set_fallback("nothing")


def test_empty_string_counts_as_set() -> None:
    set_fallback("")

    assert is_fallback_set()
    with pytest.raises(FallbackAlreadySetError):
        set_fallback("late")
    assert get_fallback() == ""


def test_error_is_recoverable_runtime_error() -> None:
    assert issubclass(FallbackAlreadySetError, VisualError)
    assert issubclass(FallbackAlreadySetError, RuntimeError)


def test_non_string_is_rejected_without_changing_state() -> None:
    with pytest.raises(TypeError):
        set_fallback(42)  # type: ignore[arg-type]

    assert not is_fallback_set()
    set_fallback("ok")
    assert get_fallback() == "ok"


def test_set_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level("INFO", logger="visual.fallback")

    set_fallback("nothing")

    assert "nothing" in caplog.text


def test_racing_setters_exactly_one_wins() -> None:
    workers = 16
    barrier = threading.Barrier(workers)
    winners: list[str] = []
    losers: list[str] = []
    lock = threading.Lock()

    def attempt(index: int) -> None:
        text = f"value-{index}"
        barrier.wait()
        try:
            set_fallback(text)
        except FallbackAlreadySetError:
            with lock:
                losers.append(text)
        else:
            with lock:
                winners.append(text)

    threads = [threading.Thread(target=attempt, args=(i,)) for i in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(winners) == 1
    assert len(losers) == workers - 1
    assert get_fallback() == winners[0]


def test_readers_see_default_or_committed_value() -> None:
    committed = "x" * 1024
    stop = threading.Event()
    seen: set[str] = set()

    def read() -> None:
        while not stop.is_set():
            seen.add(get_fallback())

    readers = [threading.Thread(target=read) for _ in range(4)]
    for reader in readers:
        reader.start()
    set_fallback(committed)
    stop.set()
    for reader in readers:
        reader.join()

    assert seen <= {DEFAULT_FALLBACK, committed}
    assert get_fallback() == committed
