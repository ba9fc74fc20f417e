"""Load schedule data from JSON files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from ..errors import DataValidationError
from .models import ScheduleData


def load_schedule_data(path: Union[str, Path]) -> ScheduleData:
    """
    Load schedule data from a JSON file.

    Args:
        path: Path to the JSON file

    Returns:
        Parsed ScheduleData

    Raises:
        FileNotFoundError: If the file doesn't exist
        json.JSONDecodeError: If the file isn't valid JSON
        DataValidationError: If the data doesn't have the expected shape
    """
    path = Path(path)

    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise DataValidationError(f"Expected a JSON object in {path}, got {type(data).__name__}")

    try:
        return ScheduleData.model_validate(data)
    except ValidationError as e:
        raise DataValidationError(str(e)) from e
