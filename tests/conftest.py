"""Shared fixtures: template workbooks built with openpyxl."""

from __future__ import annotations

from io import BytesIO
from pathlib import Path

import pytest
from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side

from schedule_export.config import ExportSettings
from schedule_export.data.models import DAYS, PERIODS, ScheduleSlot, Teacher

THIN = Side(style="thin", color="000000")
GRID_BORDER = Border(top=THIN, bottom=THIN, left=THIN, right=THIN)
GRID_FILL = PatternFill(fill_type="solid", fgColor="FFF2CC")
CENTER = Alignment(horizontal="center", vertical="center", wrap_text=True)

# Pre-filled grid cell of the schedule template (day index 1, period index 1)
TEMPLATE_DEFAULT_CELL = (5, 4)
TEMPLATE_DEFAULT_VALUE = "—"


def _to_bytes(workbook: Workbook) -> bytes:
    buffer = BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


def build_schedule_template() -> bytes:
    """Teacher/class template: title in D1, days from row 4, periods from column 3."""
    wb = Workbook()
    ws = wb.active
    ws.title = "جدول"
    ws.sheet_view.rightToLeft = True

    ws["D1"] = "جدول"
    ws["D1"].font = Font(name="Arial", size=16, bold=True)
    ws["D1"].alignment = CENTER
    ws.merge_cells("D1:H1")

    ws["A3"] = "اليوم"
    ws["A3"].font = Font(bold=True)
    for period_idx, period in enumerate(PERIODS):
        cell = ws.cell(row=3, column=3 + period_idx, value=f"الحصة {period}")
        cell.font = Font(bold=True)
        cell.border = GRID_BORDER

    for day_idx, day in enumerate(DAYS):
        row = 4 + day_idx
        label = ws.cell(row=row, column=1, value=day)
        label.border = GRID_BORDER
        ws.merge_cells(start_row=row, start_column=1, end_row=row, end_column=2)
        for period_idx in range(len(PERIODS)):
            cell = ws.cell(row=row, column=3 + period_idx)
            cell.border = GRID_BORDER
            cell.fill = GRID_FILL
            cell.alignment = CENTER
            cell.number_format = "@"
        ws.row_dimensions[row].height = 24

    row, column = TEMPLATE_DEFAULT_CELL
    ws.cell(row=row, column=column).value = TEMPLATE_DEFAULT_VALUE

    ws.row_dimensions[1].height = 30
    ws.column_dimensions["A"].width = 14
    ws.column_dimensions["B"].width = 6
    for letter in "CDEFGHI":
        ws.column_dimensions[letter].width = 12

    ws.page_setup.orientation = "landscape"
    ws.page_setup.paperSize = 9
    ws.page_setup.fitToWidth = 1

    return _to_bytes(wb)


def build_master_template() -> bytes:
    """Master template: teachers from row 5, (day, period) columns from column 3."""
    wb = Workbook()
    ws = wb.active
    ws.title = "الجدول الرئيسي"
    ws.sheet_view.rightToLeft = True

    ws["C1"] = "الجدول الرئيسي"
    ws["C1"].font = Font(size=18, bold=True)
    ws.merge_cells("C1:K1")

    column = 3
    for day in reversed(DAYS):
        ws.cell(row=3, column=column, value=day)
        for period in reversed(PERIODS):
            ws.cell(row=4, column=column, value=period).border = GRID_BORDER
            column += 1

    ws.column_dimensions["A"].width = 30
    ws.column_dimensions["B"].width = 20
    ws.page_setup.orientation = "landscape"

    return _to_bytes(wb)


@pytest.fixture
def schedule_template_bytes() -> bytes:
    return build_schedule_template()


@pytest.fixture
def schedule_template_path(tmp_path, schedule_template_bytes) -> Path:
    path = tmp_path / "جداول_template_new.xlsx"
    path.write_bytes(schedule_template_bytes)
    return path


@pytest.fixture
def master_template_path(tmp_path) -> Path:
    path = tmp_path / "جدول_رئيسي_template.xlsx"
    path.write_bytes(build_master_template())
    return path


@pytest.fixture
def settings(tmp_path, schedule_template_path, master_template_path) -> ExportSettings:
    """Settings pointing at the fixture templates."""
    return ExportSettings(
        master_template=str(master_template_path),
        schedule_template=str(schedule_template_path),
        output_dir=str(tmp_path / "exports"),
    )


@pytest.fixture
def missing_settings(tmp_path) -> ExportSettings:
    """Settings whose templates do not exist."""
    return ExportSettings(
        master_template=str(tmp_path / "missing" / "master.xlsx"),
        schedule_template=str(tmp_path / "missing" / "schedule.xlsx"),
        output_dir=str(tmp_path / "exports"),
    )


@pytest.fixture
def teachers() -> list[Teacher]:
    return [
        Teacher(id="t1", name="Ali", subject="رياضيات"),
        Teacher(id="t2", name="Sara", subject="فيزياء"),
        Teacher(id="t3", name="Omar", subject="كيمياء"),
    ]


@pytest.fixture
def slots() -> list[ScheduleSlot]:
    return [
        ScheduleSlot(teacher_id="t1", day=DAYS[0], period=PERIODS[0], grade=10, section=2),
        ScheduleSlot(teacher_id="t1", day=DAYS[2], period=PERIODS[3], grade=11, section=1),
        ScheduleSlot(teacher_id="t2", day=DAYS[0], period=PERIODS[1], grade=10, section=2),
        ScheduleSlot(teacher_id="t2", day=DAYS[-1], period=PERIODS[-1], grade=12, section=7),
        ScheduleSlot(teacher_id="t3", day=DAYS[4], period=PERIODS[2], grade=10, section=1),
    ]
