"""Per-thread routing of sys.stdout while examples run."""

import io
import sys
import threading
from typing import Dict, List, Optional

_lock = threading.Lock()
_router: Optional["ThreadRoutedStdout"] = None


class ThreadRoutedStdout(io.TextIOBase):
    """Stands in for ``sys.stdout``.

    Writes from a bound thread go to that thread's buffer. Writes from an
    abandoned thread are dropped. Everything else goes to the stream this
    router replaced.
    """

    def __init__(self, fallback, abandoned: Optional[List[threading.Thread]] = None):
        self.fallback = fallback
        self._buffers: Dict[int, io.StringIO] = {}
        self._abandoned: List[threading.Thread] = list(abandoned or [])
        self._guard = threading.Lock()

    def write(self, s: str) -> int:
        ident = threading.get_ident()
        with self._guard:
            buffer = self._buffers.get(ident)
            dropped = any(t.ident == ident and t.is_alive() for t in self._abandoned)
        if buffer is not None:
            return buffer.write(s)
        if dropped:
            return len(s)
        return self.fallback.write(s)

    def flush(self) -> None:
        self.fallback.flush()

    def writable(self) -> bool:
        return True

    def isatty(self) -> bool:
        return False

    @property
    def encoding(self):
        return getattr(self.fallback, "encoding", "utf-8")

    def bind(self, ident: int, buffer: io.StringIO) -> None:
        with self._guard:
            self._buffers[ident] = buffer

    def unbind(self, ident: int) -> None:
        with self._guard:
            self._buffers.pop(ident, None)

    def abandon(self, thread: threading.Thread) -> None:
        """Mute a worker that outlived its timeout."""
        with self._guard:
            self._buffers.pop(thread.ident, None)
            self._abandoned.append(thread)

    def alive_abandoned(self) -> List[threading.Thread]:
        with self._guard:
            self._abandoned = [t for t in self._abandoned if t.is_alive()]
            return list(self._abandoned)

    def idle(self) -> bool:
        with self._guard:
            bound = bool(self._buffers)
        return not bound and not self.alive_abandoned()


def acquire() -> ThreadRoutedStdout:
    """Install the router as sys.stdout, or reuse the installed one."""
    global _router
    with _lock:
        if _router is None or sys.stdout is not _router:
            carried = _router.alive_abandoned() if _router is not None else []
            _router = ThreadRoutedStdout(sys.stdout, abandoned=carried)
            sys.stdout = _router
        return _router


def release(router: ThreadRoutedStdout) -> None:
    """Restore the original stream once no run and no muted worker needs the router."""
    global _router
    with _lock:
        if sys.stdout is router and router.idle():
            sys.stdout = router.fallback
            _router = None
