"""Workbook export: templates, grid filling, sheet cloning and delivery."""

from .templates import fetch_template, open_template, workbook_to_bytes
from .grid import (
    GridLayout,
    GridCell,
    SlotIndex,
    MASTER_LAYOUT,
    WEEK_LAYOUT,
    TITLE_CELL,
    NOTES_COLUMN,
    week_grid,
    master_row,
    fill_grid,
    write_title,
)
from .cloner import clone_sheet, sheet_title, class_sheet_title, MAX_SHEET_TITLE
from .delivery import ExportedFile, safe_filename, save_export, XLSX_MEDIA_TYPE
from .exporters import (
    export_master_schedule,
    export_teacher_schedule,
    export_all_teachers,
    export_class_schedule,
    export_all_classes,
    MASTER_FILENAME,
    ALL_TEACHERS_FILENAME,
    ALL_CLASSES_FILENAME,
)

__all__ = [
    # Templates
    "fetch_template",
    "open_template",
    "workbook_to_bytes",
    # Grid
    "GridLayout",
    "GridCell",
    "SlotIndex",
    "MASTER_LAYOUT",
    "WEEK_LAYOUT",
    "TITLE_CELL",
    "NOTES_COLUMN",
    "week_grid",
    "master_row",
    "fill_grid",
    "write_title",
    # Cloner
    "clone_sheet",
    "sheet_title",
    "class_sheet_title",
    "MAX_SHEET_TITLE",
    # Delivery
    "ExportedFile",
    "save_export",
    "safe_filename",
    "XLSX_MEDIA_TYPE",
    # Exports
    "export_master_schedule",
    "export_teacher_schedule",
    "export_all_teachers",
    "export_class_schedule",
    "export_all_classes",
    "MASTER_FILENAME",
    "ALL_TEACHERS_FILENAME",
    "ALL_CLASSES_FILENAME",
]
