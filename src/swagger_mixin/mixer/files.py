"""Merge Swagger files straight from disk."""

import logging
from pathlib import Path
from typing import TextIO

from swagger_mixin.document.loader import dump_document, load_document
from swagger_mixin.errors import SerializationError
from swagger_mixin.mixer.descriptions import fix_empty_response_descriptions
from swagger_mixin.mixer.merge import mixin

logger = logging.getLogger(__name__)


def mixin_files(primary_path: Path, mixin_paths: list[Path], out: TextIO) -> int:
    """Load the given files, merge the mixins into primary and write JSON to `out`.

    All files are loaded before anything is merged, so a LoadError leaves
    nothing written. Empty response descriptions of the merged document are
    repaired before it is serialized. Returns the collision count.
    """
    primary = load_document(primary_path)
    mixins = [load_document(p) for p in mixin_paths]

    collisions = mixin(primary, *mixins)
    fix_empty_response_descriptions(primary)
    logger.info("Merged %d mixin(s) into %s with %d collision(s)", len(mixins), primary_path, collisions)

    text = dump_document(primary)
    try:
        out.write(text)
    except OSError as e:
        raise SerializationError(f"could not write merged document: {e}") from e

    return collisions
