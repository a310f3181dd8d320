"""Qualifying time standards keyed by sex, event and age group."""

from pydantic import BaseModel, Field

from swimqualifiers.models.sex import Sex

# Labels that are not plain integers sort after every numeric age group
UNPARSEABLE_AGE_RANK = 999


def age_sort_key(label: str) -> int:
    """Numeric sort key for an age-group label."""
    try:
        return int(label)
    except ValueError:
        return UNPARSEABLE_AGE_RANK


class StandardsTable(BaseModel):
    """Qualifying times: sex -> event -> age-group label -> seconds.

    Event names and age labels are stored in normalized form, so callers must
    normalize before looking anything up. ``event_order`` keeps the row order
    of each standards tab, which the report uses for its rows.
    """

    standards: dict[Sex, dict[str, dict[str, float]]] = Field(default_factory=dict)
    event_order: dict[Sex, list[str]] = Field(default_factory=dict)

    def add_event(self, sex: Sex, event: str, times: dict[str, float]) -> None:
        """Record an event row. A repeated event keeps its first position."""
        events = self.standards.setdefault(sex, {})
        order = self.event_order.setdefault(sex, [])
        if event not in events:
            order.append(event)
        events[event] = times

    def for_sex(self, sex: Sex | str) -> dict[str, dict[str, float]] | None:
        """Event standards for a sex category or any token naming one."""
        key = sex if isinstance(sex, Sex) else Sex.from_token(sex)
        if key is None:
            return None
        return self.standards.get(key)

    def event_standards(self, sex: Sex | str, event: str) -> dict[str, float] | None:
        """Age-group times for one event, or None if the event is undefined."""
        events = self.for_sex(sex)
        if events is None:
            return None
        return events.get(event)

    def qualifying_time(self, sex: Sex | str, event: str, age: str) -> float | None:
        """Qualifying time for an exact (sex, event, age-group) combination."""
        times = self.event_standards(sex, event)
        if times is None:
            return None
        return times.get(age)

    def events(self, sex: Sex) -> list[str]:
        """Normalized events in the order they appear in the standards tab."""
        return list(self.event_order.get(sex, []))

    def age_groups(self, sex: Sex) -> list[str]:
        """Every age group defined for any event, sorted numerically."""
        ages: set[str] = set()
        for times in self.standards.get(sex, {}).values():
            ages.update(times)
        return sorted(ages, key=age_sort_key)

    def representative_ages(self, sex: Sex | str) -> set[str]:
        """Age-group vocabulary taken from the first event that defines any."""
        key = sex if isinstance(sex, Sex) else Sex.from_token(sex)
        if key is None:
            return set()
        events = self.standards.get(key, {})
        for event in self.event_order.get(key, []):
            times = events.get(event)
            if times:
                return set(times)
        return set()

    def event_count(self, sex: Sex) -> int:
        return len(self.standards.get(sex, {}))
