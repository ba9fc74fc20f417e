"""Schedule data models and loading."""

from .loader import load_schedule_data
from .models import (
    DAYS,
    PERIODS,
    GRADES,
    DEFAULT_SECTIONS,
    Teacher,
    ScheduleSlot,
    ScheduleData,
    class_sections,
)

__all__ = [
    # Loader
    "load_schedule_data",
    # Models
    "Teacher",
    "ScheduleSlot",
    "ScheduleData",
    # Constants
    "DAYS",
    "PERIODS",
    "GRADES",
    "DEFAULT_SECTIONS",
    "class_sections",
]
