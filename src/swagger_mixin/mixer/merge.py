"""Merge mixin Swagger documents into a primary document.

Use cases include adding independently versioned metadata APIs to
application APIs of a service, for code generators that only handle one
spec per server process.
"""

import copy
import logging

from swagger_mixin.document.base import Document
from swagger_mixin.mixer.operation_ids import collect_operation_ids, disambiguate_operation_ids

logger = logging.getLogger(__name__)


def mixin(primary: Document, *mixins: Document) -> int:
    """Add the paths, definitions, parameters and responses of the mixins to primary.

    Entries are added in mixin order. An entry whose key already exists in
    primary (or came from a higher priority mixin) is skipped with a warning
    and counted; primary entries are never overwritten. Same-named
    definitions are assumed to describe the same type, so check them before
    relying on the result. Keys are not normalized in any way.

    Operation ids that collide are renamed with a "Mixin<N>" suffix.
    Colliding parameters and responses are not renamed since that would
    mean rewriting every $ref to them.

    The mixins are not modified. Returns the number of skipped entries.
    """
    skipped = 0
    seen_ids = collect_operation_ids(primary)

    for i, m in enumerate(mixins):
        for name, definition in m.definitions.items():
            if name in primary.definitions:
                logger.warning(
                    "definitions entry '%s' already exists in primary or higher priority mixin, skipping", name
                )
                skipped += 1
                continue
            primary.definitions[name] = copy.deepcopy(definition)

        for path, path_item in m.paths.items():
            if path in primary.paths:
                logger.warning(
                    "paths entry '%s' already exists in primary or higher priority mixin, skipping", path
                )
                skipped += 1
                continue
            path_item = path_item.model_copy(deep=True)
            disambiguate_operation_ids(path_item, seen_ids, i)
            primary.paths[path] = path_item

        for name, parameter in m.parameters.items():
            if name in primary.parameters:
                logger.warning(
                    "top level parameters entry '%s' already exists in primary or higher priority mixin, skipping",
                    name,
                )
                skipped += 1
                continue
            primary.parameters[name] = copy.deepcopy(parameter)

        for name, response in m.responses.items():
            if name in primary.responses:
                logger.warning(
                    "top level responses entry '%s' already exists in primary or higher priority mixin, skipping",
                    name,
                )
                skipped += 1
                continue
            primary.responses[name] = response.model_copy(deep=True)

    return skipped
