"""Swagger 2.0 document models.

Only the parts of a document that the mixer reads or rewrites are modelled
as fields. Everything else (info, schemes, response schemas, vendor
extensions, ...) is carried along as extra data so a load/dump cycle
leaves it untouched.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_serializer, model_validator

COLLECTIONS = ("paths", "definitions", "parameters", "responses")


class SwaggerModel(BaseModel):
    """Base for all document nodes: keeps unknown fields, accepts wire aliases."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class Response(SwaggerModel):
    """A single response, either inline or a `$ref` to a shared one."""

    description: str | None = None
    ref: str | None = Field(default=None, alias="$ref")

    @property
    def is_ref(self) -> bool:
        return bool(self.ref)


class Responses(SwaggerModel):
    """The responses of an operation: an optional default plus status codes."""

    default: Response | None = None
    status_code_responses: dict[int, Response] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _split_status_codes(cls, data: Any) -> Any:
        # On the wire status codes are siblings of "default"
        if not isinstance(data, dict) or "status_code_responses" in data:
            return data
        data = dict(data)
        codes = {}
        for key in list(data):
            if str(key).isdigit():
                codes[int(key)] = data.pop(key)
        data["status_code_responses"] = codes
        return data

    @model_serializer(mode="wrap")
    def _join_status_codes(self, handler) -> dict[str, Any]:
        data = handler(self)
        codes = data.pop("status_code_responses", None) or {}
        for code, response in codes.items():
            data[str(code)] = response
        return data


class Operation(SwaggerModel):
    operation_id: str = Field(default="", alias="operationId")
    responses: Responses = Field(default_factory=Responses)


class PathItem(SwaggerModel):
    """The operations available on a single path."""

    get: Operation | None = None
    put: Operation | None = None
    post: Operation | None = None
    delete: Operation | None = None
    options: Operation | None = None
    head: Operation | None = None
    patch: Operation | None = None

    def operations(self) -> list[Operation]:
        """Present operations, OPTIONS excluded."""
        methods = (self.get, self.put, self.post, self.delete, self.head, self.patch)
        return [op for op in methods if op is not None]

    def all_operations(self) -> list[Operation]:
        """Present operations for every HTTP method, OPTIONS included."""
        methods = (self.get, self.put, self.post, self.delete, self.options, self.head, self.patch)
        return [op for op in methods if op is not None]


class Document(SwaggerModel):
    """A whole Swagger 2.0 document.

    The four collections the mixer merges are always present after
    validation, even when the source omits them or sets them to null.
    Empty collections other than the required paths are left out when
    the document is dumped.
    """

    paths: dict[str, PathItem] = Field(default_factory=dict)
    definitions: dict[str, Any] = Field(default_factory=dict)
    parameters: dict[str, Any] = Field(default_factory=dict)
    responses: dict[str, Response] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _ensure_collections(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for name in COLLECTIONS:
            if data.get(name) is None:
                data[name] = {}
        return data

    @model_serializer(mode="wrap")
    def _drop_empty_collections(self, handler) -> dict[str, Any]:
        data = handler(self)
        for name in COLLECTIONS:
            if name != "paths" and name in data and not data[name]:
                del data[name]
        # Swagger 2.0 requires paths, even an empty one
        data.setdefault("paths", {})
        return data
