"""
Pydantic models for schedule export input.

JSON input uses camelCase keys (``teacherId``, ``teacherNotes``); models accept
either the alias or the Python field name.

Ordering conventions:
- Days follow the school week in DAYS (Sunday through Thursday)
- Periods follow PERIODS (1 through 7)
"""

from __future__ import annotations

from typing import Any, Iterator, Mapping, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Constants
# =============================================================================

DAYS: tuple[str, ...] = ("الأحد", "الاثنين", "الثلاثاء", "الأربعاء", "الخميس")
PERIODS: tuple[int, ...] = (1, 2, 3, 4, 5, 6, 7)

GRADES: tuple[int, ...] = (10, 11, 12)
DEFAULT_SECTIONS: tuple[int, ...] = (1, 2, 3, 4, 5, 6, 7)


# =============================================================================
# Helper Functions
# =============================================================================

def class_sections(
    grade_sections: Optional[Mapping[Any, Sequence[int]]] = None,
) -> Iterator[tuple[int, int]]:
    """
    Yield every (grade, section) pair to export, in grade order.

    A grade's sections come from ``grade_sections`` (keyed by the grade as an
    int or a string); a missing or empty entry falls back to DEFAULT_SECTIONS.
    """
    grade_sections = grade_sections or {}
    for grade in GRADES:
        sections = grade_sections.get(grade) or grade_sections.get(str(grade)) or DEFAULT_SECTIONS
        for section in sections:
            yield grade, section


# =============================================================================
# Core Entity Models
# =============================================================================

class Teacher(BaseModel):
    """Teacher entity."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1, description="Unique identifier")
    name: str = Field(description="Display name")
    subject: str = Field(default="", description="Subject taught")

    def __str__(self) -> str:
        return f"{self.name} ({self.id})"


class ScheduleSlot(BaseModel):
    """One scheduled lesson: a teacher teaching a grade/section at a day and period."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    teacher_id: str = Field(alias="teacherId", description="Teacher ID")
    day: str = Field(description="Day name, one of DAYS")
    period: int = Field(description="Period number, one of PERIODS")
    grade: int = Field(description="Grade level")
    section: int = Field(description="Section number within the grade")

    @property
    def class_label(self) -> str:
        """Grade/section composite written into teacher grids."""
        return f"{self.grade}/{self.section}"

    def __str__(self) -> str:
        return f"{self.day} P{self.period}: {self.teacher_id} -> {self.class_label}"


# =============================================================================
# Main Input Model
# =============================================================================

class ScheduleData(BaseModel):
    """
    Everything an export run reads: teachers, slots, and the optional
    teacher notes and grade/section mapping.
    """
    model_config = ConfigDict(populate_by_name=True)

    teachers: list[Teacher] = Field(default_factory=list, description="Teachers")
    slots: list[ScheduleSlot] = Field(default_factory=list, description="Scheduled lessons")
    teacher_notes: dict[str, str] = Field(
        default_factory=dict,
        alias="teacherNotes",
        description="Free-text note per teacher ID",
    )
    grade_sections: dict[str, list[int]] = Field(
        default_factory=dict,
        alias="gradeSections",
        description="Valid section numbers per grade",
    )

    _teacher_map: dict[str, Teacher] = {}

    def model_post_init(self, __context: Any) -> None:
        """Build the teacher lookup map."""
        self._teacher_map = {}
        for teacher in self.teachers:
            self._teacher_map.setdefault(teacher.id, teacher)

    # -------------------------------------------------------------------------
    # Lookup Methods
    # -------------------------------------------------------------------------

    def get_teacher(self, teacher_id: str) -> Optional[Teacher]:
        """Get teacher by ID."""
        return self._teacher_map.get(teacher_id)

    def get_teacher_slots(self, teacher_id: str) -> list[ScheduleSlot]:
        """Get all slots taught by a teacher."""
        return [s for s in self.slots if s.teacher_id == teacher_id]

    def get_class_slots(self, grade: int, section: int) -> list[ScheduleSlot]:
        """Get all slots for one grade/section."""
        return [s for s in self.slots if s.grade == grade and s.section == section]

    def summary(self) -> dict[str, Any]:
        """Get a summary of the schedule data."""
        return {
            "teachers": len(self.teachers),
            "slots": len(self.slots),
            "teacher_notes": len(self.teacher_notes),
            "classes": sum(1 for _ in class_sections(self.grade_sections)),
        }
