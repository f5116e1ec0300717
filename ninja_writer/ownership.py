"""Guarded append-only lists shared between statements and their handles.

Two ownership strategies are available. ``SINGLE`` uses a cooperative flag
and refuses overlapping access, which can only happen through re-entrant
calls on one thread. ``SHARED`` uses a readers-writer guard: reads run
together and writes wait for them. The document's statement list also
queues concurrent writers, so inserts from many threads are safe. The lists
attached to a single statement raise when a second writer shows up, since
attaching to one statement from several threads at once is not supported.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from enum import Enum
from typing import Generic, Iterable, Iterator, TypeVar

from ninja_writer.errors import BorrowError

T = TypeVar("T")


class Ownership(Enum):
    SINGLE = "single"
    SHARED = "shared"

    def guard(self, blocking: bool = False) -> "CooperativeGuard | LockGuard":
        if self is Ownership.SHARED:
            return LockGuard(blocking=blocking)
        return CooperativeGuard()


class CooperativeGuard:
    mode = Ownership.SINGLE.value

    def __init__(self):
        self._writing = False

    @contextmanager
    def write(self) -> Iterator[None]:
        if self._writing:
            raise BorrowError("list is already borrowed for writing", self.mode)
        self._writing = True
        try:
            yield
        finally:
            self._writing = False

    @contextmanager
    def read(self) -> Iterator[None]:
        if self._writing:
            raise BorrowError("list is borrowed for writing, cannot read", self.mode)
        yield


class LockGuard:
    """A readers-writer guard built on a ``threading.Condition``.

    Any number of threads may read at once. A writer waits for readers to
    finish. Two writers overlap only when the guard is non-blocking, in
    which case the second one raises. A thread asking for the guard it
    already holds for writing raises instead of deadlocking.
    """

    mode = Ownership.SHARED.value

    def __init__(self, blocking: bool = False):
        self.blocking = blocking
        self._condition = threading.Condition()
        self._writer: int | None = None
        self._readers: dict[int, int] = {}

    @contextmanager
    def write(self) -> Iterator[None]:
        ident = threading.get_ident()
        with self._condition:
            if self._writer == ident or ident in self._readers:
                raise BorrowError("list is already held by this thread, cannot lock for writing", self.mode)
            while self._writer is not None or self._readers:
                if self._writer is not None and not self.blocking:
                    raise BorrowError("list is being written by another thread, cannot lock for writing", self.mode)
                self._condition.wait()
            self._writer = ident
        try:
            yield
        finally:
            with self._condition:
                self._writer = None
                self._condition.notify_all()

    @contextmanager
    def read(self) -> Iterator[None]:
        ident = threading.get_ident()
        with self._condition:
            if self._writer == ident:
                raise BorrowError("list is already held by this thread, cannot lock for reading", self.mode)
            while self._writer is not None:
                self._condition.wait()
            self._readers[ident] = self._readers.get(ident, 0) + 1
        try:
            yield
        finally:
            with self._condition:
                remaining = self._readers.pop(ident) - 1
                if remaining:
                    self._readers[ident] = remaining
                self._condition.notify_all()


class AddOnlyList(Generic[T]):
    """A list that only grows. Items are never replaced, moved or removed."""

    def __init__(self, items: Iterable[T] = (), ownership: Ownership = Ownership.SINGLE, blocking: bool = False):
        self.ownership = ownership
        self.blocking = blocking
        self._guard = ownership.guard(blocking=blocking)
        self._items: list[T] = list(items)

    def add(self, item: T) -> int:
        """Append ``item`` and return its index."""
        with self._guard.write():
            self._items.append(item)
            return len(self._items) - 1

    def extend(self, items: Iterable[T]) -> None:
        # materialize first so a failing iterable never runs under the guard
        items = list(items)
        with self._guard.write():
            self._items.extend(items)

    def snapshot(self) -> tuple[T, ...]:
        with self._guard.read():
            return tuple(self._items)

    def adopt(self, ownership: Ownership) -> "AddOnlyList[T]":
        """Return a list with the same items guarded by ``ownership``."""
        if ownership is self.ownership:
            return self
        return AddOnlyList(self.snapshot(), ownership=ownership, blocking=self.blocking)

    def __getitem__(self, index: int) -> T:
        with self._guard.read():
            return self._items[index]

    def __len__(self) -> int:
        with self._guard.read():
            return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.snapshot())

    def __bool__(self) -> bool:
        return len(self) > 0

    def __repr__(self) -> str:
        return f"AddOnlyList({list(self.snapshot())!r}, ownership={self.ownership.value})"
