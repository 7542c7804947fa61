"""Operation id bookkeeping for merged documents.

Swagger requires operationIds to be unique within a document. Ids brought
in from a mixin that are already taken get "Mixin<N>" appended, where N is
the zero-based position of the mixin. Ids inside each single document are
assumed to be unique already.
"""

import logging

from swagger_mixin.document.base import Document, PathItem

logger = logging.getLogger(__name__)


def collect_operation_ids(document: Document) -> set[str]:
    """Return the non-empty operationIds of every path in the document.

    OPTIONS operations are not scanned.
    """
    ids = set()
    for path_item in document.paths.values():
        for op in path_item.operations():
            if op.operation_id:
                ids.add(op.operation_id)
    return ids


def mixin_operation_id(operation_id: str, mixin_index: int) -> str:
    return f"{operation_id}Mixin{mixin_index}"


def disambiguate_operation_ids(
    path_item: PathItem, seen: set[str], mixin_index: int
) -> list[tuple[str, str]]:
    """Rename operations of a mixin path item whose ids are already in `seen`.

    Every non-empty id, renamed or not, is added to `seen` so later mixins
    see it too. A renamed id is not checked again. Returns (old, new) pairs.
    """
    renamed = []
    for op in path_item.operations():
        if not op.operation_id:
            continue
        if op.operation_id in seen:
            new_id = mixin_operation_id(op.operation_id, mixin_index)
            logger.info("operationId '%s' already in use, renamed to '%s'", op.operation_id, new_id)
            renamed.append((op.operation_id, new_id))
            op.operation_id = new_id
        seen.add(op.operation_id)
    return renamed
