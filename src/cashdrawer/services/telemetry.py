"""Per-call timing for DrawerService, shown with ``--verbose``.

``@traced`` always binds the operation name into structlog's context, so
every log line of a settle or replay says which one it came from. The
timing itself only runs once :func:`enable_telemetry` has been called:
the call gets a :class:`Span`, service code may annotate it through
:func:`get_current_span`, and the finished span lands in
``ServiceResult.meta["telemetry"]``.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec, TypeVar

import structlog

from cashdrawer.services.result import ServiceResult

log = structlog.get_logger("cashdrawer.telemetry")

_enabled: ContextVar[bool] = ContextVar("_enabled", default=False)
_active: ContextVar[Span | None] = ContextVar("_active", default=None)


@dataclass
class Span:
    """Wall time of one service call plus what the call chose to record."""

    name: str
    start_time: float = field(default_factory=time.perf_counter)
    end_time: float | None = None
    annotations: dict[str, Any] = field(default_factory=dict)

    @property
    def duration_ms(self) -> float:
        if self.end_time is None:
            return 0.0
        return (self.end_time - self.start_time) * 1000

    def end(self) -> None:
        self.end_time = time.perf_counter()

    def annotate(self, key: str, value: Any) -> None:
        self.annotations[key] = value

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"name": self.name, "duration_ms": round(self.duration_ms, 2)}
        if self.annotations:
            out["annotations"] = dict(self.annotations)
        return out


_P = ParamSpec("_P")
_R = TypeVar("_R")


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:  # noqa: UP047
    """Bind ``op`` for logging and, with telemetry on, time the call."""
    op = func.__name__

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        with structlog.contextvars.bound_contextvars(op=op):
            if not _enabled.get():
                return func(*args, **kwargs)
            return _timed(func, Span(name=func.__qualname__), *args, **kwargs)

    return wrapper


def _timed(func: Callable[_P, _R], span: Span, *args: _P.args, **kwargs: _P.kwargs) -> _R:
    token = _active.set(span)
    try:
        result = func(*args, **kwargs)
    finally:
        span.end()
        _active.reset(token)

    ok = getattr(result, "ok", True)
    log.debug("span.complete", span=span.name, duration_ms=round(span.duration_ms, 2), ok=ok)
    if not isinstance(result, ServiceResult):
        return result
    meta = {**(result.meta or {}), "telemetry": span.to_dict()}
    return result.model_copy(update={"meta": meta})  # type: ignore[return-value]


def enable_telemetry() -> None:
    """Turn span timing on for the current context (``--verbose``)."""
    _enabled.set(True)


def disable_telemetry() -> None:
    _enabled.set(False)


def get_current_span() -> Span | None:
    """The span of the traced call in progress, or None when timing is off."""
    if not _enabled.get():
        return None
    return _active.get()
