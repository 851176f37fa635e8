"""Data models for scoped state handles and scenario reports."""

from dataclasses import dataclass, field
from typing import Any, Callable

from scopedstate.utils.logging import LogEntry


@dataclass(frozen=True, eq=False, repr=False)
class StatefulHandle:
    """Opaque handle over a privately held counter.

    The counter lives in the closure shared by ``increment`` and ``get``; no
    attribute of the handle holds it. The handle is frozen and slotted, so
    assigning any attribute raises FrozenInstanceError.
    """

    # Declared by hand: dataclass(slots=True) breaks frozen __setattr__ for unknown names
    __slots__ = ("initial", "increment", "get")

    initial: int
    increment: Callable[[], None]
    get: Callable[[], int]

    def __repr__(self) -> str:
        return f"StatefulHandle(initial={self.initial!r})"


@dataclass
class ScenarioResult:
    """Outcome of one scenario."""

    name: str
    expected: Any
    actual: Any

    @property
    def passed(self) -> bool:
        return self.expected == self.actual


@dataclass
class ScenarioReport:
    """Results of a scenario run."""

    results: list[ScenarioResult] = field(default_factory=list)
    log_entries: list[LogEntry] = field(default_factory=list)

    def add(self, name: str, expected: Any, actual: Any) -> ScenarioResult:
        result = ScenarioResult(name=name, expected=expected, actual=actual)
        self.results.append(result)
        return result

    def total_count(self) -> int:
        """Get total number of scenarios run."""
        return len(self.results)

    def passed_count(self) -> int:
        """Get number of scenarios that passed."""
        return sum(1 for result in self.results if result.passed)

    def all_passed(self) -> bool:
        """Check if every scenario passed."""
        return self.passed_count() == self.total_count()

    def failures(self) -> list[ScenarioResult]:
        """Get the scenarios whose actual value differs from the expected one."""
        return [result for result in self.results if not result.passed]
