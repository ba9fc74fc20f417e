"""
Grid placement for schedule templates.

Cell positions are pure index arithmetic against DAYS and PERIODS:

    row    = layout.row_base + index on the row axis
    column = layout.column_base + index on the column axis

The base offsets are fixed by the template files and are never read from the
templates themselves.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, NamedTuple, Optional, Sequence

from openpyxl.worksheet.worksheet import Worksheet

from ..data.models import DAYS, PERIODS, ScheduleSlot, Teacher


# =============================================================================
# Layout Constants
# =============================================================================

@dataclass(frozen=True)
class GridLayout:
    """Origin of a template's data grid (1-based row and column)."""
    row_base: int
    column_base: int


# One row per teacher; (day, period) columns, right-to-left
MASTER_LAYOUT = GridLayout(row_base=5, column_base=3)

# One row per day; one column per period
WEEK_LAYOUT = GridLayout(row_base=4, column_base=3)

TITLE_CELL = (1, 4)
NOTES_COLUMN = 1

TEACHER_TITLE = "جدول المعلم: {name}"
CLASS_TITLE = "جدول الصف: {grade}/{section}"


class GridCell(NamedTuple):
    """A data cell of the template grid and the slot key it shows."""
    row: int
    column: int
    day: str
    period: int


# =============================================================================
# Positions
# =============================================================================

def week_grid(
    layout: GridLayout = WEEK_LAYOUT,
    days: Sequence[str] = DAYS,
    periods: Sequence[int] = PERIODS,
) -> list[GridCell]:
    """Cells of a one-week grid: days down, periods across."""
    return [
        GridCell(layout.row_base + day_idx, layout.column_base + period_idx, day, period)
        for day_idx, day in enumerate(days)
        for period_idx, period in enumerate(periods)
    ]


def master_row(
    teacher_index: int,
    layout: GridLayout = MASTER_LAYOUT,
    days: Sequence[str] = DAYS,
    periods: Sequence[int] = PERIODS,
) -> list[GridCell]:
    """
    Cells of one teacher's row in the master schedule.

    Both days and periods run in reverse, so the last period of the last day
    sits in the first data column.
    """
    row = layout.row_base + teacher_index
    cells = []
    column = layout.column_base
    for day in reversed(days):
        for period in reversed(periods):
            cells.append(GridCell(row, column, day, period))
            column += 1
    return cells


# =============================================================================
# Slot Lookup
# =============================================================================

class SlotIndex:
    """
    Keyed access to schedule slots.

    When several slots share a key the first one in input order wins.
    """

    def __init__(self, slots: Iterable[ScheduleSlot]):
        self._by_teacher: dict[tuple[str, str, int], ScheduleSlot] = {}
        self._by_class: dict[tuple[int, int, str, int], ScheduleSlot] = {}
        for slot in slots:
            self._by_teacher.setdefault((slot.teacher_id, slot.day, slot.period), slot)
            self._by_class.setdefault((slot.grade, slot.section, slot.day, slot.period), slot)

    def for_teacher(self, teacher_id: str, day: str, period: int) -> Optional[ScheduleSlot]:
        """Slot taught by a teacher at a day and period."""
        return self._by_teacher.get((teacher_id, day, period))

    def for_class(self, grade: int, section: int, day: str, period: int) -> Optional[ScheduleSlot]:
        """Slot held by a grade/section at a day and period."""
        return self._by_class.get((grade, section, day, period))


def teacher_lookup(index: SlotIndex, teacher_id: str) -> Callable[[GridCell], Optional[str]]:
    """Cell values for a teacher grid: the slot's grade/section."""
    def lookup(cell: GridCell) -> Optional[str]:
        slot = index.for_teacher(teacher_id, cell.day, cell.period)
        return slot.class_label if slot else None
    return lookup


def class_lookup(
    index: SlotIndex,
    grade: int,
    section: int,
    teachers: dict[str, Teacher],
) -> Callable[[GridCell], Optional[str]]:
    """Cell values for a class grid: the subject of the slot's teacher."""
    def lookup(cell: GridCell) -> Optional[str]:
        slot = index.for_class(grade, section, cell.day, cell.period)
        if slot is None:
            return None
        teacher = teachers.get(slot.teacher_id)
        return teacher.subject if teacher else ""
    return lookup


# =============================================================================
# Filling
# =============================================================================

def fill_grid(
    worksheet: Worksheet,
    cells: Iterable[GridCell],
    lookup: Callable[[GridCell], Optional[str]],
) -> int:
    """
    Write looked-up values into the grid.

    Args:
        worksheet: Sheet to write into
        cells: Grid cells, in placement order
        lookup: Value for a cell, or None when no slot matches; unmatched
            cells keep the template's content

    Returns:
        Number of cells written with a value
    """
    written = 0
    for cell in cells:
        value = lookup(cell)
        if value is not None:
            worksheet.cell(row=cell.row, column=cell.column).value = value
            written += 1
    return written


def write_title(worksheet: Worksheet, title: str) -> None:
    """Write the sheet heading into the template's title cell."""
    row, column = TITLE_CELL
    worksheet.cell(row=row, column=column).value = title
