"""
Schedule export operations.

Each export reads its template fresh, fills the grid, and returns the
serialized workbook. Multi-sheet exports fetch the template bytes once and
decode a new workbook per sheet, since filling mutates the workbook in place.
Sheets are produced one after another; a failure anywhere aborts the export
and no file is returned.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Optional, Sequence

from openpyxl import Workbook

from ..config import ExportSettings, get_settings
from ..data.models import ScheduleSlot, Teacher, class_sections
from ..logging import get_logger
from .cloner import class_sheet_title, clone_sheet, sheet_title
from .delivery import ExportedFile
from .grid import (
    CLASS_TITLE,
    MASTER_LAYOUT,
    NOTES_COLUMN,
    TEACHER_TITLE,
    SlotIndex,
    class_lookup,
    fill_grid,
    master_row,
    teacher_lookup,
    week_grid,
    write_title,
)
from .templates import fetch_template, open_template, workbook_to_bytes

logger = get_logger(__name__)


# =============================================================================
# Output Filenames
# =============================================================================

MASTER_FILENAME = "الجدول_الرئيسي.xlsx"
TEACHER_FILENAME = "جدول_{name}.xlsx"
ALL_TEACHERS_FILENAME = "جداول_جميع_المعلمين.xlsx"
CLASS_FILENAME = "جدول_الصف_{grade}_{section}.xlsx"
ALL_CLASSES_FILENAME = "جداول_جميع_الصفوف.xlsx"


# =============================================================================
# Single-Sheet Exports
# =============================================================================

def export_master_schedule(
    teachers: Sequence[Teacher],
    slots: Iterable[ScheduleSlot],
    teacher_notes: Optional[Mapping[str, str]] = None,
    *,
    settings: Optional[ExportSettings] = None,
) -> ExportedFile:
    """
    Export the master schedule: one row per teacher, one column per
    (day, period), with the teacher's note in the first column.

    Args:
        teachers: Teachers, in row order
        slots: All schedule slots
        teacher_notes: Optional note per teacher ID
        settings: Export settings (defaults to get_settings())

    Returns:
        The serialized workbook
    """
    settings = settings or get_settings()
    teacher_notes = teacher_notes or {}
    log = logger.bind(export="master_schedule")

    try:
        data = fetch_template(settings.master_template, timeout=settings.fetch_timeout)
        workbook, worksheet = open_template(data)

        index = SlotIndex(slots)
        written = 0
        for teacher_idx, teacher in enumerate(teachers):
            written += fill_grid(worksheet, master_row(teacher_idx), teacher_lookup(index, teacher.id))

            note = teacher_notes.get(teacher.id)
            if note:
                row = MASTER_LAYOUT.row_base + teacher_idx
                worksheet.cell(row=row, column=NOTES_COLUMN).value = note

        exported = ExportedFile(MASTER_FILENAME, workbook_to_bytes(workbook))
    except Exception:
        log.exception("export_failed")
        raise

    log.info("export_completed", teachers=len(teachers), cells=written)
    return exported


def export_teacher_schedule(
    teacher: Teacher,
    slots: Iterable[ScheduleSlot],
    *,
    settings: Optional[ExportSettings] = None,
) -> ExportedFile:
    """
    Export one teacher's week: days down, periods across, grade/section per slot.

    ``slots`` may hold every teacher's slots; only this teacher's are placed.
    """
    settings = settings or get_settings()
    log = logger.bind(export="teacher_schedule", teacher_id=teacher.id)

    try:
        data = fetch_template(settings.schedule_template, timeout=settings.fetch_timeout)
        workbook, worksheet = open_template(data)

        write_title(worksheet, TEACHER_TITLE.format(name=teacher.name))
        written = fill_grid(worksheet, week_grid(), teacher_lookup(SlotIndex(slots), teacher.id))

        exported = ExportedFile(
            TEACHER_FILENAME.format(name=teacher.name),
            workbook_to_bytes(workbook),
        )
    except Exception:
        log.exception("export_failed")
        raise

    log.info("export_completed", cells=written)
    return exported


def export_class_schedule(
    grade: int,
    section: int,
    slots: Iterable[ScheduleSlot],
    teachers: Iterable[Teacher],
    *,
    settings: Optional[ExportSettings] = None,
) -> ExportedFile:
    """
    Export one grade/section's week, showing the subject of each lesson.

    The subject comes from the slot's teacher; an unknown teacher gives an
    empty cell.
    """
    settings = settings or get_settings()
    log = logger.bind(export="class_schedule", grade=grade, section=section)

    try:
        data = fetch_template(settings.schedule_template, timeout=settings.fetch_timeout)
        workbook, worksheet = open_template(data)

        teacher_map = {t.id: t for t in teachers}
        write_title(worksheet, CLASS_TITLE.format(grade=grade, section=section))
        written = fill_grid(
            worksheet,
            week_grid(),
            class_lookup(SlotIndex(slots), grade, section, teacher_map),
        )

        exported = ExportedFile(
            CLASS_FILENAME.format(grade=grade, section=section),
            workbook_to_bytes(workbook),
        )
    except Exception:
        log.exception("export_failed")
        raise

    log.info("export_completed", cells=written)
    return exported


# =============================================================================
# Multi-Sheet Exports
# =============================================================================

def export_all_teachers(
    teachers: Sequence[Teacher],
    slots: Iterable[ScheduleSlot],
    *,
    settings: Optional[ExportSettings] = None,
) -> ExportedFile:
    """Export one sheet per teacher, each a filled copy of the schedule template."""
    settings = settings or get_settings()
    log = logger.bind(export="all_teachers")

    try:
        data = fetch_template(settings.schedule_template, timeout=settings.fetch_timeout)
        index = SlotIndex(slots)
        output = _OutputWorkbook()

        for teacher in teachers:
            _, template_sheet = open_template(data)
            write_title(template_sheet, TEACHER_TITLE.format(name=teacher.name))
            fill_grid(template_sheet, week_grid(), teacher_lookup(index, teacher.id))
            output.add(template_sheet, sheet_title(teacher.name))
            log.debug("sheet_added", teacher_id=teacher.id)

        exported = output.export(ALL_TEACHERS_FILENAME)
    except Exception:
        log.exception("export_failed")
        raise

    log.info("export_completed", sheets=exported.sheet_count)
    return exported


def export_all_classes(
    slots: Iterable[ScheduleSlot],
    teachers: Iterable[Teacher],
    grade_sections: Optional[Mapping[str, Sequence[int]]] = None,
    *,
    settings: Optional[ExportSettings] = None,
) -> ExportedFile:
    """
    Export one sheet per grade/section.

    Sections come from ``grade_sections`` (keyed by grade), falling back to
    DEFAULT_SECTIONS for grades it does not list.
    """
    settings = settings or get_settings()
    log = logger.bind(export="all_classes")

    try:
        data = fetch_template(settings.schedule_template, timeout=settings.fetch_timeout)
        index = SlotIndex(slots)
        teacher_map = {t.id: t for t in teachers}
        output = _OutputWorkbook()

        for grade, section in class_sections(grade_sections):
            _, template_sheet = open_template(data)
            write_title(template_sheet, CLASS_TITLE.format(grade=grade, section=section))
            fill_grid(
                template_sheet,
                week_grid(),
                class_lookup(index, grade, section, teacher_map),
            )
            output.add(template_sheet, class_sheet_title(grade, section))
            log.debug("sheet_added", grade=grade, section=section)

        exported = output.export(ALL_CLASSES_FILENAME)
    except Exception:
        log.exception("export_failed")
        raise

    log.info("export_completed", sheets=exported.sheet_count)
    return exported


class _OutputWorkbook:
    """Workbook accumulating cloned sheets.

    openpyxl cannot save a workbook without sheets, so the default sheet stays
    until the first clone arrives.
    """

    def __init__(self):
        self.workbook = Workbook()
        self._placeholder = self.workbook.active
        self.sheet_count = 0

    def add(self, source, title: str) -> None:
        if self._placeholder is not None:
            self.workbook.remove(self._placeholder)
            self._placeholder = None
        clone_sheet(source, self.workbook, title)
        self.sheet_count += 1

    def export(self, filename: str) -> ExportedFile:
        return ExportedFile(
            filename,
            workbook_to_bytes(self.workbook),
            sheet_count=self.sheet_count,
        )
