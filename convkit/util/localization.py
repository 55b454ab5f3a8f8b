"""
Key based string lookup for user-facing text.
"""

import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional

import yaml

from ..config import get_config_value


logger = logging.getLogger(__name__)


class Localizer:
    """Looks up localized strings by key, falling back to the key itself."""

    def __init__(self, table: Optional[Dict[str, str]] = None):
        self._table = dict(table or {})

    @classmethod
    def from_file(cls, file_path: str) -> "Localizer":
        """Load a string table from a JSON or YAML file."""
        if not os.path.exists(file_path):
            raise FileNotFoundError(f"Localization file not found: {file_path}")

        file_ext = Path(file_path).suffix.lower()
        with open(file_path, 'r', encoding='utf-8') as f:
            if file_ext == '.json':
                table = json.load(f)
            elif file_ext in ['.yaml', '.yml']:
                table = yaml.safe_load(f) or {}
            else:
                raise ValueError(f"Unsupported localization file format: {file_ext}")

        if not isinstance(table, dict):
            raise ValueError(f"Localization file must contain a mapping: {file_path}")

        logger.info(f"Loaded {len(table)} localized strings from {file_path}")
        return cls({str(k): str(v) for k, v in table.items()})

    def get(self, key: str) -> str:
        value = self._table.get(key)
        if value is None:
            logger.debug(f"No localization for key {key!r}")
            return key
        return value

    def __contains__(self, key: str) -> bool:
        return key in self._table

    def __len__(self) -> int:
        return len(self._table)


_default_localizer: Optional[Localizer] = None


def get_default_localizer() -> Localizer:
    """
    Return the process-wide localizer.

    Built on first use from the file named by CONVKIT_LOCALIZATION_PATH, or
    empty when the variable is not set.
    """
    global _default_localizer
    if _default_localizer is None:
        path = get_config_value("localization_path")
        _default_localizer = Localizer.from_file(path) if path else Localizer()
    return _default_localizer


def set_default_localizer(localizer: Optional[Localizer]) -> None:
    """Replace the process-wide localizer; None resets it to lazy loading."""
    global _default_localizer
    _default_localizer = localizer
