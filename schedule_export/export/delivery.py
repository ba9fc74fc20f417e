"""Exported files and saving them for download."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@dataclass(frozen=True)
class ExportedFile:
    """A serialized workbook ready to hand to the user."""
    filename: str
    content: bytes
    sheet_count: int = 1
    media_type: str = XLSX_MEDIA_TYPE

    @property
    def size(self) -> int:
        """Size of the workbook in bytes."""
        return len(self.content)

    def __str__(self) -> str:
        return f"{self.filename} ({self.sheet_count} sheet(s), {self.size} bytes)"


def safe_filename(filename: str) -> str:
    """
    Filename with path separators replaced, so it names a single file.

    Teacher names end up in filenames and may contain ``/`` or ``\\``.

    Raises:
        ValueError: If nothing usable is left
    """
    name = filename.replace("/", "_").replace("\\", "_").strip()
    if name in ("", ".", ".."):
        raise ValueError(f"Invalid export filename: {filename!r}")
    return name


def save_export(exported: ExportedFile, output_dir: str | Path) -> Path:
    """
    Save an exported workbook into a directory.

    Args:
        exported: File to save
        output_dir: Directory to save into (created if missing)

    Returns:
        Path of the written file, always directly inside ``output_dir``
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    filepath = output_dir / safe_filename(exported.filename)
    filepath.write_bytes(exported.content)
    return filepath
