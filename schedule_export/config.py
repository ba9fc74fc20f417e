"""Export configuration loaded from environment variables.

Template sources may be filesystem paths or http(s) URLs.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class ExportSettings(BaseSettings):
    """Exporter configuration.

    Values come from ``SCHEDULE_EXPORT_*`` environment variables, or a ``.env``
    file in the working directory, with the defaults below.
    """

    # Templates
    master_template: str = Field(
        default="templates/جدول_رئيسي_template.xlsx",
        description="Template for the master schedule (path or URL)",
    )
    schedule_template: str = Field(
        default="templates/جداول_template_new.xlsx",
        description="Template shared by teacher and class schedules (path or URL)",
    )
    fetch_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Timeout in seconds for fetching a template over HTTP",
    )

    # Output
    output_dir: str = Field(
        default="exports",
        description="Directory exported workbooks are saved into",
    )

    # Logging
    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format (for production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    model_config = {
        "env_prefix": "SCHEDULE_EXPORT_",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


_settings: ExportSettings | None = None


def get_settings() -> ExportSettings:
    """Get the process-wide export settings.

    Returns:
        ExportSettings instance, created on first use
    """
    global _settings
    if _settings is None:
        _settings = ExportSettings()
    return _settings
