"""Checked byte-buffer allocation helpers.

Buffers are ``bytearray`` objects. A request for zero bytes or zero elements
yields ``None``. A request whose total size would not fit in an unsigned
64-bit integer raises ``OverflowError``. A failed allocation raises
``MemoryError``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

__all__ = [
    "ULLONG_MAX",
    "simulated_failure",
    "malloc",
    "calloc",
    "alloc",
    "realloc",
    "realloc_change_place_bytes",
    "realloc_change_place_elements",
]

ULLONG_MAX = 2**64 - 1

_log = logging.getLogger(__name__)

_FAILURE_KINDS = frozenset({"alloc", "malloc", "calloc"})
_active_failures: ContextVar[frozenset[str]] = ContextVar(
    "_active_failures", default=frozenset()
)


@contextmanager
def simulated_failure(kind: str) -> Iterator[None]:
    """Make allocations fail inside the ``with`` block.

    *kind* is ``"malloc"`` (only :func:`malloc` fails), ``"calloc"`` (only
    :func:`calloc` fails) or ``"alloc"`` (both fail).
    """
    if kind not in _FAILURE_KINDS:
        raise ValueError(
            f"unknown failure kind {kind!r}; expected one of {sorted(_FAILURE_KINDS)}"
        )
    token = _active_failures.set(_active_failures.get() | {kind})
    try:
        yield
    finally:
        _active_failures.reset(token)


def _is_failing(kind: str) -> bool:
    active = _active_failures.get()
    return "alloc" in active or kind in active


def _require_non_negative(**values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must not be negative, got {value}")


def _checked_total(count: int, item_size: int) -> int:
    total = count * item_size
    if total > ULLONG_MAX:
        raise OverflowError(
            f"Overflow detected during allocation request: {count} * {item_size}"
        )
    return total


def _new_buffer(size: int) -> bytearray:
    try:
        return bytearray(size)
    except (MemoryError, OverflowError) as exc:
        raise MemoryError(f"Failed to allocate {size} bytes of memory") from exc


def malloc(size: int) -> bytearray | None:
    """Allocate *size* bytes; ``None`` when *size* is zero."""
    _require_non_negative(size=size)
    if size == 0:
        return None
    if size > ULLONG_MAX:
        raise OverflowError(f"Overflow detected during allocation request: {size}")
    if _is_failing("malloc"):
        raise MemoryError(f"Simulated malloc failure (size: {size})")
    return _new_buffer(size)


def calloc(count: int, item_size: int) -> bytearray | None:
    """Allocate *count* zeroed items of *item_size* bytes each.

    Returns ``None`` when either argument is zero.
    """
    _require_non_negative(count=count, item_size=item_size)
    if count == 0 or item_size == 0:
        return None
    total = _checked_total(count, item_size)
    if _is_failing("calloc"):
        raise MemoryError(f"Simulated calloc failure ({count} * {item_size})")
    return _new_buffer(total)


def alloc(count: int, item_size: int) -> bytearray | None:
    """Allocate room for *count* items of *item_size* bytes each.

    The overflow check comes before the zero-size check, so an overflowing
    request always raises.
    """
    _require_non_negative(count=count, item_size=item_size)
    total = _checked_total(count, item_size)
    if count == 0 or item_size == 0:
        return None
    return malloc(total)


def realloc(
    buffer: bytearray | bytes | None, new_size: int, retry: int = 0
) -> bytearray | None:
    """Resize *buffer* to *new_size* bytes, keeping its leading contents.

    A ``bytearray`` is resized in place and returned; other buffers are copied.
    With no buffer, a new zeroed one is made. A *new_size* of zero gives
    ``None``. A failing resize is attempted ``retry + 1`` times in all before
    ``MemoryError`` is raised; the original buffer is then left unchanged.
    """
    _require_non_negative(new_size=new_size, retry=retry)
    if new_size == 0:
        return None

    attempts = retry + 1
    for attempt in range(1, attempts + 1):
        try:
            return _resize(buffer, new_size)
        except MemoryError:
            if attempt < attempts:
                _log.warning(
                    "Realloc attempt %d/%d failed for %d bytes. Retrying...",
                    attempt,
                    attempts,
                    new_size,
                )
    raise MemoryError(
        f"Reallocation failed after {attempts} attempts for {new_size} bytes. "
        "Original buffer remains valid."
    )


def _resize(buffer: bytearray | bytes | None, new_size: int) -> bytearray:
    if buffer is None:
        return bytearray(new_size)
    target = buffer if isinstance(buffer, bytearray) else bytearray(buffer)
    current = len(target)
    if new_size < current:
        del target[new_size:]
    elif new_size > current:
        target.extend(bytes(new_size - current))
    return target


def realloc_change_place_bytes(
    buffer: bytearray | bytes | None, old_size: int, new_size: int
) -> bytearray | None:
    """Move *buffer* into a new block of *new_size* bytes.

    The first ``min(old_size, new_size)`` bytes are copied; the result is
    always a different object from *buffer*. A *new_size* of zero gives
    ``None``. On failure the original buffer is left untouched.
    """
    _require_non_negative(old_size=old_size, new_size=new_size)
    if new_size == 0:
        return None
    if buffer is not None and old_size > len(buffer):
        raise ValueError(
            f"old_size {old_size} exceeds the buffer's length {len(buffer)}"
        )
    try:
        moved = malloc(new_size)
    except MemoryError as exc:
        raise MemoryError(
            f"Failed to allocate {new_size} bytes for new memory block. "
            "Original buffer remains valid."
        ) from exc
    assert moved is not None
    if buffer is not None:
        to_copy = min(old_size, new_size)
        moved[:to_copy] = buffer[:to_copy]
    return moved


def realloc_change_place_elements(
    buffer: bytearray | bytes | None,
    old_count: int,
    item_size: int,
    new_count: int,
) -> bytearray | None:
    """Move an array of *old_count* items into a new zeroed block of *new_count* items.

    Items beyond the old contents are zero. A *new_count* of zero gives
    ``None``; an *item_size* of zero raises ``ValueError``. On failure the
    original buffer is left untouched.
    """
    _require_non_negative(old_count=old_count, item_size=item_size, new_count=new_count)
    if item_size == 0:
        raise ValueError("Element size cannot be zero")
    if new_count == 0:
        return None
    new_total = _checked_total(new_count, item_size)
    old_total = old_count * item_size
    if buffer is not None and old_total > len(buffer):
        raise ValueError(
            f"old size {old_total} bytes exceeds the buffer's length {len(buffer)}"
        )
    try:
        moved = calloc(new_count, item_size)
    except MemoryError as exc:
        raise MemoryError(
            f"Failed to allocate {new_count} elements of size {item_size}. "
            "Original buffer remains valid."
        ) from exc
    assert moved is not None
    if buffer is not None:
        to_copy = min(old_total, new_total)
        moved[:to_copy] = buffer[:to_copy]
    return moved