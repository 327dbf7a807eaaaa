"""
JSON load/save for document models.

Documents are stored as plain JSON files. Fields left at their defaults
(empty strings, empty lists, unset sections) are omitted on write so a
filtered view stays compact.
"""

import json
import logging
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as ModelValidationError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class DocumentError(Exception):
    """A document file could not be read or decoded."""

    def __init__(self, path: Path, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")


def load_model(path: Path, model_cls: type[ModelT]) -> ModelT:
    """Load a JSON file into model_cls.

    Raises:
        DocumentError: If the file is missing, not JSON, or the wrong shape
    """
    if not path.exists():
        raise DocumentError(path, "File not found")

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DocumentError(path, f"Not UTF-8 text: {e.reason} at byte {e.start}") from None
    except OSError as e:
        raise DocumentError(path, f"Cannot read file: {e.strerror or e}") from None

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DocumentError(path, f"Invalid JSON: {e}") from None

    if not isinstance(data, dict):
        raise DocumentError(path, f"Expected a JSON object, got {type(data).__name__}")

    try:
        model = model_cls.model_validate(data)
    except ModelValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(p) for p in first["loc"]) or "(root)"
        raise DocumentError(path, f"{first['msg']} at {location}") from None

    logger.debug(f"Loaded {model_cls.__name__} from {path}")
    return model


def model_to_json(model: BaseModel, indent: int = 2) -> str:
    """Serialize a model to JSON text, omitting default-valued fields."""
    data = model.model_dump(mode="json", exclude_defaults=True)
    return json.dumps(data, indent=indent, ensure_ascii=False) + "\n"


def save_model(model: BaseModel, path: Path, indent: int = 2) -> None:
    """Write a model to a JSON file, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(model_to_json(model, indent=indent), encoding="utf-8")
    logger.debug(f"Wrote {type(model).__name__} to {path}")
