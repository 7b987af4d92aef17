"""Loading analyzer result files for the CLI."""

import json
from pathlib import Path
from typing import Any, Dict

from .exceptions import ResultFileError
from .logging_config import get_logger

logger = get_logger(__name__)


def load_results(path: Path) -> Dict[str, Any]:
    """Read one analyzer result object from a JSON file.

    Raises:
        ResultFileError: If the file is unreadable, not JSON, or not an object.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ResultFileError(path, e.strerror or str(e))
    except json.JSONDecodeError as e:
        raise ResultFileError(path, f"invalid JSON at line {e.lineno}: {e.msg}")

    if not isinstance(data, dict):
        raise ResultFileError(path, f"expected a JSON object, got {type(data).__name__}")

    logger.info(f"Loaded results from {path}")
    return data
