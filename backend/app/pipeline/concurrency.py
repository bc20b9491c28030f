# backend/app/pipeline/concurrency.py

"""
Unordered fan-out over a list, results returned in input order.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Generic, List, Optional, Sequence, TypeVar

T = TypeVar("T")
R = TypeVar("R")


@dataclass
class Outcome(Generic[R]):
    """Settled result of one call: either ``value`` or ``error``."""

    value: Optional[R] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _settle(func: Callable[[T], R], item: T) -> Outcome[R]:
    try:
        return Outcome(value=func(item))
    except Exception as exc:  # noqa: BLE001 - the caller decides what a failure means
        return Outcome(error=exc)


def concurrent_map(
    func: Callable[[T], R],
    items: Sequence[T],
    *,
    max_workers: int = 8,
) -> List[Outcome[R]]:
    """
    Call ``func`` on every item concurrently and wait for all of them.

    Calls run in no particular order; the returned outcomes line up with
    ``items``. One failing call never cancels the others.
    """
    if not items:
        return []

    workers = max(1, min(max_workers, len(items)))
    with ThreadPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(lambda item: _settle(func, item), items))
