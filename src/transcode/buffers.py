from __future__ import annotations

import io
from contextlib import contextmanager
from typing import Iterator


class BufferPool:
    """Reusable ``io.StringIO`` scratch buffers handed out one caller at a time.

    A buffer is checked out for the duration of an ``acquire()`` block and
    is emptied before it goes back, including when the block raises.
    """

    def __init__(self) -> None:
        self._free: list[io.StringIO] = []

    def __len__(self) -> int:
        return len(self._free)

    @contextmanager
    def acquire(self) -> Iterator[io.StringIO]:
        buf = self._free.pop() if self._free else io.StringIO()
        try:
            yield buf
        finally:
            buf.seek(0)
            buf.truncate()
            self._free.append(buf)
