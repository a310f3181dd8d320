"""Pydantic models for swim qualifier counting."""

from swimqualifiers.models.meet_result import MeetFileInfo, MeetResult
from swimqualifiers.models.sex import Sex
from swimqualifiers.models.standards import (
    UNPARSEABLE_AGE_RANK,
    StandardsTable,
    age_sort_key,
)
from swimqualifiers.models.summary import AthleteBucket, QualifierKey, QualifierSummary

__all__ = [
    # Meet results
    "MeetFileInfo",
    "MeetResult",
    # Sex
    "Sex",
    # Standards
    "StandardsTable",
    "UNPARSEABLE_AGE_RANK",
    "age_sort_key",
    # Summary
    "AthleteBucket",
    "QualifierKey",
    "QualifierSummary",
]
