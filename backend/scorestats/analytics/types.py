"""Analytics data types.

Every calculator returns these plain dataclasses.  Ratios whose denominator
can be zero are wrapped in ``Ok`` / ``Undefined`` so callers must decide
what to do with a missing value instead of serializing NaN or Infinity.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A well-defined computed value."""

    value: T


@dataclass(frozen=True)
class Undefined:
    """A value that cannot be computed for this input (e.g. zero denominator)."""

    reason: str


Ratio = Union[Ok[float], Undefined]


def unwrap_or_none(result: Ok[T] | Undefined) -> T | None:
    """Collapse a tagged result to its value, or None when undefined."""
    if isinstance(result, Ok):
        return result.value
    return None


@dataclass(frozen=True)
class ScoreRecord:
    """A single persisted score observation."""

    user_id: str
    score: float
    recorded_at: datetime


class Interpretation(str, Enum):
    LOW = "low variability"
    MODERATE = "moderate variability"
    HIGH = "high variability"


@dataclass(frozen=True)
class DescriptiveStats:
    """Population descriptive statistics for a non-empty score sequence."""

    count: int
    mean: float
    median: float
    variance: float
    standard_deviation: float
    coefficient_of_variation: Ratio
    max_score: float
    min_score: float


@dataclass(frozen=True)
class GaussianPoint:
    x: float
    y: float


@dataclass(frozen=True)
class HistogramBin:
    """One ``[start, end)`` bucket of the frequency histogram."""

    start: float
    end: float
    count: int
    frequency: float  # percentage of all scores

    @property
    def range(self) -> str:
        return f"{self.start:.1f}-{self.end:.1f}"


@dataclass(frozen=True)
class StatisticsReport:
    """Global statistics over every score in the collection."""

    count: int
    mean: float
    median: float
    variance: float
    standard_deviation: float
    coefficient_of_variation: Ratio
    max_score: float
    min_score: float
    gaussian_curve: Ok[Iterable[GaussianPoint]] | Undefined
    histogram: list[HistogramBin]
    interpretation: Interpretation


@dataclass(frozen=True)
class InsufficientData:
    """Returned instead of a report when there are no scores at all."""

    message: str = "Not enough data to compute statistics"
    count: int = 0


@dataclass(frozen=True)
class UserTrendReport:
    """Statistics and improvement signal for a single user."""

    user_id: str
    count: int
    mean: float
    standard_deviation: float
    max_score: float
    min_score: float
    last_score: float
    improvement_percent: Ratio


@dataclass(frozen=True)
class UserInsufficientData:
    """Returned instead of a trend report when the user has no scores."""

    user_id: str
    message: str = "Not enough data for this user"
    count: int = 0
