"""Count qualifying swims and qualifying athletes against the standards.

Two matching policies are used on purpose:

- the per-event grid only counts a swim when the literal age group from the
  meet file has a standard of its own;
- the athlete summary resolves each age to the nearest defined age group
  first, so swimmers outside the defined brackets are still counted.
"""

from collections.abc import Iterable

from swimqualifiers.logging import get_logger
from swimqualifiers.models import (
    AthleteBucket,
    MeetResult,
    QualifierKey,
    QualifierSummary,
    Sex,
    StandardsTable,
)
from swimqualifiers.services.age_resolver import find_best_age_match

logger = get_logger(__name__)


def count_qualifiers(
    results: Iterable[MeetResult], standards: StandardsTable
) -> tuple[dict[QualifierKey, int], int, int]:
    """Count qualifying swims per exact (sex, age, event).

    Returns:
        Tuple of (counts, matches_found, no_standard_count), where
        no_standard_count is the number of swims in a known event whose
        literal age group has no standard
    """
    counts: dict[QualifierKey, int] = {}
    matches_found = 0
    no_standard_count = 0

    for result in results:
        sex = Sex.from_token(result.sex)
        if sex is None:
            continue
        event_standards = standards.event_standards(sex, result.event)
        if event_standards is None:
            continue

        qualifying_time = event_standards.get(result.age)
        if qualifying_time is None:
            no_standard_count += 1
            continue

        if result.time <= qualifying_time:
            key = QualifierKey(sex, result.age, result.event)
            counts[key] = counts.get(key, 0) + 1
            matches_found += 1

    return counts, matches_found, no_standard_count


def count_unique_qualifiers(
    results: Iterable[MeetResult], standards: StandardsTable
) -> dict[AthleteBucket, set[str]]:
    """Names of athletes with at least one qualifying swim, per resolved age."""
    qualifiers: dict[AthleteBucket, set[str]] = {}

    for result in results:
        if not result.name:
            continue
        sex = Sex.from_token(result.sex)
        if sex is None:
            continue
        event_standards = standards.event_standards(sex, result.event)
        if event_standards is None:
            continue

        matched_age = find_best_age_match(result.age, event_standards)
        if matched_age is None:
            continue

        if result.time <= event_standards[matched_age]:
            qualifiers.setdefault(AthleteBucket(sex, matched_age), set()).add(result.name)

    return qualifiers


def count_total_athletes(
    results: Iterable[MeetResult], standards: StandardsTable
) -> dict[AthleteBucket, set[str]]:
    """Names of every athlete seen, qualifying or not, per resolved age."""
    athletes: dict[AthleteBucket, set[str]] = {}
    age_vocabulary: dict[Sex, set[str]] = {}

    for result in results:
        if not result.name:
            continue
        sex = Sex.from_token(result.sex)
        if sex is None:
            continue

        if sex not in age_vocabulary:
            age_vocabulary[sex] = standards.representative_ages(sex)
        matched_age = find_best_age_match(result.age, age_vocabulary[sex])
        if matched_age is None:
            continue

        athletes.setdefault(AthleteBucket(sex, matched_age), set()).add(result.name)

    return athletes


def aggregate(results: list[MeetResult], standards: StandardsTable) -> QualifierSummary:
    """Run every counting pass over the full result set."""
    counts, matches_found, no_standard_count = count_qualifiers(results, standards)

    logger.info(
        "qualifiers_counted",
        matches_found=matches_found,
        no_standard_count=no_standard_count,
        count_entries=len(counts),
    )

    return QualifierSummary(
        qualifier_counts=counts,
        unique_qualifiers=count_unique_qualifiers(results, standards),
        total_athletes=count_total_athletes(results, standards),
        matches_found=matches_found,
        no_standard_count=no_standard_count,
    )
