"""
Sheet cloning.

Copies a filled template sheet into another workbook: values, cell styles,
row heights, column widths, merged ranges and print settings. openpyxl styles
belong to their workbook, so every style object is copied rather than shared.
"""

from __future__ import annotations

import re
from copy import copy

from openpyxl import Workbook
from openpyxl.utils import column_index_from_string, get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

# Worksheet names are capped at 31 characters by the xlsx format
MAX_SHEET_TITLE = 30

# Characters openpyxl refuses in worksheet titles
INVALID_TITLE_CHARS = re.compile(r"[\\*?:/\[\]]")

PAGE_SETUP_FIELDS = (
    "orientation",
    "paperSize",
    "scale",
    "fitToHeight",
    "fitToWidth",
    "firstPageNumber",
    "useFirstPageNumber",
    "paperHeight",
    "paperWidth",
    "pageOrder",
    "usePrinterDefaults",
    "blackAndWhite",
    "draft",
    "cellComments",
    "errors",
    "horizontalDpi",
    "verticalDpi",
    "copies",
)


def sheet_title(name: str) -> str:
    """Sheet title for a teacher: the name made title-safe and cut to MAX_SHEET_TITLE characters."""
    return INVALID_TITLE_CHARS.sub("_", name)[:MAX_SHEET_TITLE]


def class_sheet_title(grade: int, section: int) -> str:
    """Sheet title for a grade/section."""
    return f"{grade}-{section}"


def clone_sheet(source: Worksheet, target: Workbook, title: str) -> Worksheet:
    """
    Append a copy of ``source`` to ``target``.

    Args:
        source: Filled template sheet
        target: Workbook receiving the copy
        title: Title of the new sheet

    Returns:
        The new worksheet
    """
    sheet = target.create_sheet(title=title)

    _copy_cells(source, sheet)
    _copy_dimensions(source, sheet)

    for merged in list(source.merged_cells.ranges):
        sheet.merge_cells(merged.coord)

    sheet.sheet_view.rightToLeft = True
    sheet.sheet_view.view = "normal"

    _copy_print_settings(source, sheet)
    return sheet


def _copy_cells(source: Worksheet, sheet: Worksheet) -> None:
    """Copy values and styles over the occupied range, empty cells included."""
    for row in source.iter_rows(
        min_row=1,
        max_row=source.max_row,
        min_col=1,
        max_col=source.max_column,
    ):
        for cell in row:
            new_cell = sheet.cell(row=cell.row, column=cell.column)
            new_cell.value = cell.value
            if cell.has_style:
                new_cell.font = copy(cell.font)
                new_cell.alignment = copy(cell.alignment)
                new_cell.border = copy(cell.border)
                new_cell.fill = copy(cell.fill)
                new_cell.number_format = cell.number_format
                new_cell.protection = copy(cell.protection)


def _copy_dimensions(source: Worksheet, sheet: Worksheet) -> None:
    """Copy row heights and explicit column widths."""
    for idx, dimension in source.row_dimensions.items():
        if dimension.height is not None:
            sheet.row_dimensions[idx].height = dimension.height

    for key, dimension in source.column_dimensions.items():
        if not dimension.width:
            continue
        # A loaded dimension may span several columns (min..max)
        start = dimension.min or column_index_from_string(key)
        end = dimension.max or start
        for col_idx in range(start, end + 1):
            sheet.column_dimensions[get_column_letter(col_idx)].width = dimension.width


def _copy_print_settings(source: Worksheet, sheet: Worksheet) -> None:
    """Copy page setup, margins and print options."""
    if source.page_setup is not None:
        for field in PAGE_SETUP_FIELDS:
            setattr(sheet.page_setup, field, getattr(source.page_setup, field))

    if source.page_margins is not None:
        sheet.page_margins = copy(source.page_margins)

    if source.print_options is not None:
        sheet.print_options = copy(source.print_options)

    page_setup_pr = source.sheet_properties.pageSetUpPr
    if page_setup_pr is not None:
        sheet.sheet_properties.pageSetUpPr = copy(page_setup_pr)
