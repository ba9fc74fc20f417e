"""Schedule Exporter - fills school timetable templates and produces xlsx workbooks."""

from .errors import ExportError, TemplateUnavailable, TemplateMalformed, DataValidationError
from .export import (
    ExportedFile,
    export_master_schedule,
    export_teacher_schedule,
    export_all_teachers,
    export_class_schedule,
    export_all_classes,
    save_export,
)
from .cli import app as cli_app

__all__ = [
    # Exports
    "export_master_schedule",
    "export_teacher_schedule",
    "export_all_teachers",
    "export_class_schedule",
    "export_all_classes",
    "ExportedFile",
    "save_export",
    # Errors
    "ExportError",
    "TemplateUnavailable",
    "TemplateMalformed",
    "DataValidationError",
    # CLI
    "cli_app",
]
