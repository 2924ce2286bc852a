"""Tests for the trailing debounce."""

import threading
import time

from rent_search.debounce import DEFAULT_DELAY_MS, debounce


class _Recorder:
    def __init__(self) -> None:
        self.calls: list[tuple] = []
        self.fired = threading.Event()

    def __call__(self, *args, **kwargs) -> None:
        self.calls.append((args, kwargs))
        self.fired.set()


def test_default_delay() -> None:
    assert debounce(lambda: None).delay_ms == DEFAULT_DELAY_MS == 300


def test_only_last_call_runs() -> None:
    rec = _Recorder()
    fn = debounce(rec, 100)
    fn("a")
    fn("ab")
    fn("abc")
    assert rec.calls == []
    assert rec.fired.wait(2)
    time.sleep(0.15)
    assert rec.calls == [(("abc",), {})]


def test_keyword_arguments_passed_through() -> None:
    rec = _Recorder()
    fn = debounce(rec, 10)
    fn(query="studio")
    assert rec.fired.wait(2)
    assert rec.calls == [((), {"query": "studio"})]


def test_pending_until_fired() -> None:
    rec = _Recorder()
    fn = debounce(rec, 50)
    assert not fn.pending
    fn(1)
    assert fn.pending
    assert rec.fired.wait(2)
    time.sleep(0.05)
    assert not fn.pending


def test_separate_bursts_each_run() -> None:
    rec = _Recorder()
    fn = debounce(rec, 10)
    fn(1)
    assert rec.fired.wait(2)
    rec.fired.clear()
    fn(2)
    assert rec.fired.wait(2)
    assert [c[0] for c in rec.calls] == [(1,), (2,)]


def test_calls_from_many_threads_run_once() -> None:
    rec = _Recorder()
    fn = debounce(rec, 100)
    threads = [threading.Thread(target=fn, args=(i,)) for i in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert rec.fired.wait(2)
    time.sleep(0.25)
    assert len(rec.calls) == 1


def test_slow_callback_runs_never_overlap() -> None:
    lock = threading.Lock()
    state = {"active": 0, "peak": 0, "runs": 0}
    done = threading.Event()

    def slow(n: int) -> None:
        with lock:
            state["active"] += 1
            state["peak"] = max(state["peak"], state["active"])
        time.sleep(0.4)
        with lock:
            state["active"] -= 1
            state["runs"] += 1
            if state["runs"] == 2:
                done.set()

    fn = debounce(slow, 50)
    fn(1)
    time.sleep(0.15)
    fn(2)
    assert done.wait(3)
    assert state["peak"] == 1
    assert state["runs"] == 2
