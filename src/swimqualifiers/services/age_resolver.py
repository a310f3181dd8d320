"""Resolve an athlete's age to the closest age group with a standard."""

from collections.abc import Iterable


def _parse_age(label: str) -> int | None:
    try:
        return int(label)
    except ValueError:
        return None


def find_best_age_match(athlete_age: str, available_ages: Iterable[str]) -> str | None:
    """Pick the age-group label an athlete should be measured against.

    Rules, in order:
    1. an exact numeric match wins
    2. younger than every group -> the youngest group
    3. older than every group -> the oldest group
    4. otherwise the numerically closest group (lower one on a tie)

    Labels that are not integers are ignored.

    Args:
        athlete_age: Literal age label from the meet file, e.g. "12"
        available_ages: Age-group labels defined in the standards

    Returns:
        The matching label as it appears in ``available_ages``, or None if
        either side has no numeric age
    """
    age = _parse_age(athlete_age)
    if age is None:
        return None

    candidates: list[tuple[int, str]] = []
    for label in available_ages:
        num = _parse_age(label)
        if num is not None:
            candidates.append((num, label))
    if not candidates:
        return None
    candidates.sort()

    for num, label in candidates:
        if num == age:
            return label

    youngest, oldest = candidates[0], candidates[-1]
    if age < youngest[0]:
        return youngest[1]
    if age > oldest[0]:
        return oldest[1]

    # min() keeps the first of equal distances, i.e. the lower age group
    return min(candidates, key=lambda candidate: abs(age - candidate[0]))[1]
