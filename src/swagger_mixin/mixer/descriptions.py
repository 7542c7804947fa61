"""Fill in empty response descriptions.

response.description is required by Swagger 2.0 and an explicit "" is
valid, but many serializers drop empty strings when the document is
written again, leaving an invalid document behind. Putting "(empty)" in
those descriptions keeps the merged output valid.
"""

from swagger_mixin.document.base import Document, Response, Responses

EMPTY_DESCRIPTION = "(empty)"


def fix_empty_desc(response: Response | None) -> None:
    """Set "(empty)" as the description of a non-ref response that has none."""
    if response is None or response.description or response.is_ref:
        return
    response.description = EMPTY_DESCRIPTION


def fix_empty_descs(responses: Responses) -> None:
    fix_empty_desc(responses.default)
    for response in responses.status_code_responses.values():
        fix_empty_desc(response)


def fix_empty_response_descriptions(document: Document) -> None:
    """Repair every operation response, OPTIONS included, and every shared response."""
    for path_item in document.paths.values():
        for op in path_item.all_operations():
            fix_empty_descs(op.responses)
    for response in document.responses.values():
        fix_empty_desc(response)
