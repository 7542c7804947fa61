"""Read Swagger documents from disk and write them back as JSON.

YAML input requires a .yml or .yaml filename suffix; everything else is
parsed as JSON. Output is always JSON.
"""

import json
import logging
from pathlib import Path

import yaml
from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from swagger_mixin.document.base import Document
from swagger_mixin.errors import LoadError, SerializationError

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yml", ".yaml")


def detect_format(file_path: Path) -> str:
    """Pick the parser for a document by its filename suffix.

    Returns: 'yaml' or 'json'.
    """
    if Path(file_path).suffix in YAML_SUFFIXES:
        return "yaml"
    return "json"


def load_document(file_path: Path) -> Document:
    """Parse a Swagger 2.0 file into a Document.

    Raises LoadError when the file cannot be read, is not valid YAML/JSON,
    or its root is not a Swagger object.
    """
    file_path = Path(file_path)
    fmt = detect_format(file_path)
    logger.info("Loading %s (format: %s)", file_path, fmt)

    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise LoadError(file_path, e.strerror or str(e)) from e

    try:
        if fmt == "yaml":
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except yaml.YAMLError as e:
        raise LoadError(file_path, f"YAMLError: {e}") from e
    except json.JSONDecodeError as e:
        raise LoadError(file_path, f"JSONDecodeError: {e.msg} (line {e.lineno})") from e

    if not isinstance(data, dict):
        raise LoadError(file_path, f"expected a mapping at the document root, got {type(data).__name__}")

    try:
        return Document.model_validate(data)
    except ValidationError as e:
        raise LoadError(file_path, f"not a valid swagger document: {e}") from e


def dump_document(document: Document) -> str:
    """Serialize a Document to indented JSON with sorted keys."""
    try:
        data = document.model_dump(mode="json", by_alias=True, exclude_unset=True)
        return json.dumps(data, indent=2, sort_keys=True, ensure_ascii=False) + "\n"
    except (PydanticSerializationError, TypeError, ValueError) as e:
        raise SerializationError(f"could not serialize merged document: {e}") from e
