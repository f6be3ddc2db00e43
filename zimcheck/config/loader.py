"""
YAML loader for zimcheck configuration.

Provides robust YAML parsing with:
- Error messages including file path and line numbers
- Schema validation using Pydantic models
- Safe YAML loading (no arbitrary code execution)

Usage:
    config = load_config("zimcheck.yaml")
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from zimcheck.config.schema import CheckerConfig
from zimcheck.errors import SchemaValidationError, YAMLParseError
from zimcheck.utils.logger import logger


def _load_raw_yaml(file_path: Path) -> Dict[str, Any]:
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            content = f.read()
    except OSError as e:
        raise YAMLParseError(f"Cannot read config file: {e}", file_path=file_path) from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        line = None
        column = None
        mark = getattr(e, "problem_mark", None)
        if mark is not None:
            line = mark.line + 1
            column = mark.column + 1
        raise YAMLParseError(
            f"Invalid YAML syntax: {getattr(e, 'problem', None) or e}",
            file_path=file_path,
            line=line,
            column=column,
        ) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SchemaValidationError(
            "Config root must be a mapping",
            actual_value=type(data).__name__,
            source_file=file_path,
        )
    return data


def load_config(path: Optional[Union[str, Path]] = None) -> CheckerConfig:
    """
    Load and validate a configuration file.

    Args:
        path: YAML file, or None for the built-in defaults

    Returns:
        Validated CheckerConfig

    Raises:
        YAMLParseError: If the file cannot be read or parsed
        SchemaValidationError: If content fails validation
    """
    if path is None:
        return CheckerConfig()

    file_path = Path(path)
    raw_data = _load_raw_yaml(file_path)

    try:
        config = CheckerConfig(**raw_data)
    except ValidationError as e:
        first = e.errors()[0]
        field_path = ".".join(str(part) for part in first.get("loc", ()))
        raise SchemaValidationError(
            first.get("msg", str(e)),
            field_path=field_path or None,
            actual_value=first.get("input") if field_path else None,
            source_file=file_path,
        ) from e

    logger.debug("Loaded configuration from %s", file_path)
    return config
