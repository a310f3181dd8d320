"""Aggregated qualifier counts."""

from typing import NamedTuple

from pydantic import BaseModel, Field

from swimqualifiers.models.sex import Sex


class QualifierKey(NamedTuple):
    """Exact (sex, literal age group, event) combination."""

    sex: Sex
    age: str
    event: str


class AthleteBucket(NamedTuple):
    """Athletes grouped by sex and resolved age group."""

    sex: Sex
    age: str


class QualifierSummary(BaseModel):
    """Everything the report needs from one run.

    ``qualifier_counts`` uses literal ages from the meet filenames (strict).
    ``unique_qualifiers`` and ``total_athletes`` use ages resolved to the
    nearest defined age group (lenient). Athletes are identified by name only.
    """

    qualifier_counts: dict[QualifierKey, int] = Field(default_factory=dict)
    unique_qualifiers: dict[AthleteBucket, set[str]] = Field(default_factory=dict)
    total_athletes: dict[AthleteBucket, set[str]] = Field(default_factory=dict)

    # Run diagnostics
    matches_found: int = 0
    no_standard_count: int = 0

    def count(self, sex: Sex, age: str, event: str) -> int:
        """Qualifying swims for an exact combination (0 if none)."""
        return self.qualifier_counts.get(QualifierKey(sex, age, event), 0)

    def unique_qualifier_count(self, sex: Sex, age: str) -> int:
        return len(self.unique_qualifiers.get(AthleteBucket(sex, age), set()))

    def total_athlete_count(self, sex: Sex, age: str) -> int:
        return len(self.total_athletes.get(AthleteBucket(sex, age), set()))
