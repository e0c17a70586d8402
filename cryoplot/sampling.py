from __future__ import annotations

from dataclasses import dataclass
import cmath
from typing import Any, Callable, Union


@dataclass(frozen=True)
class Sample:
    """Outcome of evaluating a function at one point: a value or a reason.

    Build samples with ``success`` or ``failure``; exactly one of ``value``
    and ``reason`` is set.
    """

    value: complex | None = None
    reason: str | None = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.reason is None):
            raise ValueError("a Sample carries either a value or a failure reason")

    @property
    def ok(self) -> bool:
        return self.reason is None

    @classmethod
    def success(cls, value: complex) -> "Sample":
        return cls(value=value)

    @classmethod
    def failure(cls, reason: str) -> "Sample":
        return cls(reason=reason or "undefined")


ComplexFunction = Callable[[complex], Union[complex, Sample, Any]]


def _describe(exc: Exception) -> str:
    return f"{type(exc).__name__}: {exc}"


def evaluate(func: ComplexFunction, z: complex) -> Sample:
    """Evaluate ``func`` at ``z`` and report the outcome as a ``Sample``.

    Any exception raised by ``func``, a result that is not a number and a
    non-finite result all mean the function is undefined at ``z``.
    """
    try:
        out = func(z)
    except Exception as exc:
        return Sample.failure(_describe(exc))
    if isinstance(out, Sample):
        if not out.ok:
            return out
        out = out.value
    try:
        value = complex(out)
    except Exception as exc:
        return Sample.failure(_describe(exc))
    if not cmath.isfinite(value):
        return Sample.failure("non-finite result")
    return Sample.success(value)


@dataclass
class PassStats:
    """Counters for one rendering pass."""

    kind: str
    samples: int = 0
    failures: int = 0
    drawn: int = 0

    def record(self, sample: Sample) -> None:
        self.samples += 1
        if not sample.ok:
            self.failures += 1
