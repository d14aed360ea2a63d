#!/usr/bin/env python3
"""
Messaging Demo Test Script

Tests:
1. Demo run appends four entries
2. Concurrent appends are neither lost nor duplicated
3. Fewer than two students sends nothing
4. Slow tasks raise TimeoutError

Run: python scripts/test_messaging.py
"""
import sys
sys.path.insert(0, '.')

import threading
import time
from concurrent.futures import ThreadPoolExecutor

from longhorn.main import demo_two_groups
from longhorn.services import messaging_service
from longhorn.services.messaging_service import (
    ChatTask,
    ExecutionLog,
    FriendRequestTask,
    run_messaging_demo,
)


def test_demo_run():
    print("\n[1] Testing messaging demo...")
    students = demo_two_groups()
    log = ExecutionLog()
    sent = run_messaging_demo(students, log, pool_size=4, timeout=5.0)
    entries = log.entries()
    assert sent == 4
    assert sorted(entries) == sorted([
        "Friend request: Alice -> Bob",
        "Chat: Alice -> Bob: Hello there!",
        "Friend request: Bob -> Alice",
        "Chat: Bob -> Alice: Hi back!",
    ])
    print(f"    ✅ {len(entries)} entries logged")


def test_tasks_return_entry():
    students = demo_two_groups()
    log = ExecutionLog()
    assert ChatTask(students[0], students[1], "Hey", log).run() == "Chat: Alice -> Bob: Hey"
    assert FriendRequestTask(students[1], students[0], log)() == "Friend request: Bob -> Alice"
    assert len(log) == 2


def test_concurrent_appends():
    print("\n[2] Testing concurrent appends...")
    log = ExecutionLog()
    workers, per_worker = 8, 250

    def writer(worker_id):
        for i in range(per_worker):
            log.append(f"{worker_id}:{i}")

    with ThreadPoolExecutor(max_workers=workers) as executor:
        list(executor.map(writer, range(workers)))

    entries = log.entries()
    assert len(entries) == workers * per_worker
    assert len(set(entries)) == workers * per_worker
    print(f"    ✅ {len(entries)} appends, none lost or duplicated")


def test_entries_is_a_snapshot():
    log = ExecutionLog()
    log.append("one")
    snapshot = log.entries()
    snapshot.append("two")
    assert log.entries() == ["one"]
    log.clear()
    assert len(log) == 0


def test_lock_released_after_failed_append():
    log = ExecutionLog()

    # Simulate an exception while the lock is held
    original = log._entries
    log._entries = None
    try:
        log.append("boom")
    except AttributeError:
        pass
    log._entries = original
    assert log._lock.acquire(timeout=1)
    log._lock.release()
    log.append("after")
    assert log.entries() == ["after"]


def test_not_enough_students():
    print("\n[3] Testing single student...")
    log = ExecutionLog()
    assert run_messaging_demo(demo_two_groups()[:1], log) == 0
    assert len(log) == 0


def test_timeout():
    print("\n[4] Testing timeout...")
    students = demo_two_groups()
    log = ExecutionLog()
    release = threading.Event()
    original_run = messaging_service.ChatTask.run

    def slow_run(self):
        release.wait(2.0)
        return original_run(self)

    messaging_service.ChatTask.run = slow_run
    messaging_service.ChatTask.__call__ = slow_run
    try:
        try:
            run_messaging_demo(students, log, pool_size=4, timeout=0.1)
        except TimeoutError:
            print("    ✅ TimeoutError raised")
        else:
            raise AssertionError("Expected TimeoutError")
    finally:
        release.set()
        messaging_service.ChatTask.run = original_run
        messaging_service.ChatTask.__call__ = original_run
        time.sleep(0.1)


def main():
    print("=" * 60)
    print("MESSAGING DEMO TEST")
    print("=" * 60)
    test_demo_run()
    test_tasks_return_entry()
    test_concurrent_appends()
    test_entries_is_a_snapshot()
    test_lock_released_after_failed_append()
    test_not_enough_students()
    test_timeout()
    print("\n" + "=" * 60)
    print("✅ ALL MESSAGING TESTS PASSED!")
    print("=" * 60)


if __name__ == "__main__":
    main()
