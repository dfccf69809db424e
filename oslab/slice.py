"""A bounded, thread-safe FIFO queue and a small concurrent exercise for it."""

from __future__ import annotations

import argparse
import threading
from collections import deque
from typing import Any, Optional, Sequence


class Slice:
    """Fixed-capacity FIFO queue.

    Pushing onto a full queue drops the value; popping an empty queue
    returns ``empty_value``.
    """

    def __init__(self, size: int, empty_value: Any = 0) -> None:
        if size <= 0:
            raise ValueError("queue size must be positive")
        self.size = size
        self.empty_value = empty_value
        self._values: deque[Any] = deque()
        self._lock = threading.Lock()

    def push(self, value: Any) -> bool:
        """Append ``value``; return False if the queue was full and it was dropped."""
        with self._lock:
            if len(self._values) == self.size:
                return False
            self._values.append(value)
            return True

    def pop(self) -> Any:
        """Remove and return the oldest value, or ``empty_value`` if there is none."""
        with self._lock:
            if not self._values:
                return self.empty_value
            return self._values.popleft()

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)


def exercise(queue: Slice, threads: int = 5) -> list[Any]:
    """Start ``threads`` workers that each push 10 and pop once; return what they popped."""
    results: list[Any] = []
    results_lock = threading.Lock()

    def run() -> None:
        queue.push(10)
        value = queue.pop()
        with results_lock:
            results.append(value)

    workers = [threading.Thread(target=run) for _ in range(threads)]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    return results


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Exercise the bounded queue from several threads.")
    parser.add_argument("--threads", type=int, default=5)
    parser.add_argument("--size", type=int, default=10)
    args = parser.parse_args(argv)

    queue = Slice(args.size)
    for value in exercise(queue, args.threads):
        print(value)

    if len(queue) != 0:
        print(f"invalid queue state, non_empty = {len(queue)} != 0")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())