"""
Messaging Service - concurrent chat and friend-request demo.

Tasks run on a thread pool and append one line each to a shared
ExecutionLog. The log's lock is held for a single append only, so
every entry lands exactly once.
"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor, wait
from typing import List, Optional, Sequence

from longhorn.core.config import get_settings
from longhorn.models.student import Student

logger = logging.getLogger(__name__)


class ExecutionLog:
    """Append-only, thread-safe list of log lines."""

    def __init__(self):
        self._entries: List[str] = []
        self._lock = threading.Lock()

    def append(self, entry: str) -> None:
        with self._lock:
            self._entries.append(entry)

    def entries(self) -> List[str]:
        """Snapshot copy of all entries."""
        with self._lock:
            return list(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class ChatTask:
    """Sends one chat message from sender to receiver."""

    def __init__(self, sender: Student, receiver: Student, message: str, log: ExecutionLog):
        self.sender = sender
        self.receiver = receiver
        self.message = message
        self.log = log

    def run(self) -> str:
        entry = f"Chat: {self.sender.name} -> {self.receiver.name}: {self.message}"
        self.log.append(entry)
        logger.debug(entry)
        return entry

    __call__ = run


class FriendRequestTask:
    """Sends one friend request from sender to receiver."""

    def __init__(self, sender: Student, receiver: Student, log: ExecutionLog):
        self.sender = sender
        self.receiver = receiver
        self.log = log

    def run(self) -> str:
        entry = f"Friend request: {self.sender.name} -> {self.receiver.name}"
        self.log.append(entry)
        logger.debug(entry)
        return entry

    __call__ = run


def run_messaging_demo(
    students: Sequence[Student],
    log: ExecutionLog,
    pool_size: Optional[int] = None,
    timeout: Optional[float] = None
) -> int:
    """
    Exchange friend requests and chats between the first two students.

    Returns:
        Number of log entries appended (0 with fewer than two students)

    Raises:
        TimeoutError if the tasks do not finish within `timeout` seconds
    """
    settings = get_settings()
    pool_size = pool_size or settings.thread_pool_size
    timeout = timeout if timeout is not None else settings.messaging_timeout_seconds

    if len(students) < 2:
        logger.info("Not enough students to run the messaging demo")
        return 0

    first, second = students[0], students[1]
    tasks = [
        FriendRequestTask(first, second, log),
        ChatTask(first, second, "Hello there!", log),
        FriendRequestTask(second, first, log),
        ChatTask(second, first, "Hi back!", log),
    ]

    executor = ThreadPoolExecutor(max_workers=pool_size)
    try:
        futures = [executor.submit(task) for task in tasks]
        done, not_done = wait(futures, timeout=timeout)
        if not_done:
            for future in not_done:
                future.cancel()
            raise TimeoutError("Messaging tasks did not finish in time.")
        for future in done:
            future.result()
    finally:
        executor.shutdown(wait=False)

    return len(tasks)
