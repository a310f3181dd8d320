"""Meet result models."""

from pydantic import BaseModel, ConfigDict, Field


class MeetFileInfo(BaseModel):
    """Metadata carried in a meet file's name.

    Example: ``CAN-MBSK_2025_LCM_M_00-13_Results.xlsx`` is a long course
    meters file for boys, age group 13 (the upper half of ``00-13``).
    """

    model_config = ConfigDict(frozen=True)

    filename: str
    course: str
    sex: str  # literal token, e.g. "M" or "F"
    age: str  # literal age-group label, not yet resolved against standards


class MeetResult(BaseModel):
    """One swimmer's single timed swim."""

    model_config = ConfigDict(frozen=True)

    course: str
    sex: str
    age: str
    event: str  # normalized event name
    time: float = Field(gt=0)  # seconds
    name: str = ""

    def __str__(self) -> str:
        who = self.name or "(unnamed)"
        return f"{who} {self.sex} {self.age} {self.event}: {self.time:.2f}s"
