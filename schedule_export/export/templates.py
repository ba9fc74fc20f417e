"""
Template loading.

Templates are pre-authored workbooks read fresh for every export. A source is
either a filesystem path or an http(s) URL.
"""

from __future__ import annotations

from io import BytesIO
from pathlib import Path
from typing import Union

import requests
from openpyxl import Workbook, load_workbook
from openpyxl.worksheet.worksheet import Worksheet

from ..errors import TemplateMalformed, TemplateUnavailable
from ..logging import get_logger

logger = get_logger(__name__)

TemplateSource = Union[str, Path]


def is_remote(source: TemplateSource) -> bool:
    """Whether the source is fetched over HTTP rather than read from disk."""
    return isinstance(source, str) and source.lower().startswith(("http://", "https://"))


def fetch_template(source: TemplateSource, timeout: float = 30.0) -> bytes:
    """
    Fetch the raw bytes of a template.

    Args:
        source: Filesystem path or http(s) URL
        timeout: HTTP timeout in seconds

    Returns:
        Template file contents

    Raises:
        TemplateUnavailable: If the template cannot be retrieved
    """
    if is_remote(source):
        try:
            response = requests.get(source, timeout=timeout)
        except requests.RequestException as e:
            raise TemplateUnavailable(str(source), str(e)) from e
        if not response.ok:
            raise TemplateUnavailable(str(source), f"HTTP {response.status_code}")
        data = response.content
    else:
        try:
            data = Path(source).read_bytes()
        except OSError as e:
            raise TemplateUnavailable(str(source), e.strerror or str(e)) from e

    logger.debug("template_fetched", source=str(source), size=len(data))
    return data


def open_template(data: bytes) -> tuple[Workbook, Worksheet]:
    """
    Parse template bytes into a workbook and its first worksheet.

    Each call decodes a new, independent workbook.

    Raises:
        TemplateMalformed: If the workbook has no worksheet
    """
    workbook = load_workbook(BytesIO(data))
    if not workbook.worksheets:
        raise TemplateMalformed()
    return workbook, workbook.worksheets[0]


def workbook_to_bytes(workbook: Workbook) -> bytes:
    """Serialize a workbook to xlsx bytes."""
    buffer = BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()
