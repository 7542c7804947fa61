"""Errors raised while loading, merging and writing Swagger documents.

Name collisions are not errors: the mixer counts and logs them.
"""

from pathlib import Path


class MixinError(Exception):
    """Base class for fatal swagger-mixin errors."""


class LoadError(MixinError):
    """A document could not be read or did not parse as a Swagger document."""

    def __init__(self, path: Path | str, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"could not load {path}: {reason}")


class SerializationError(MixinError):
    """The merged document could not be serialized or written."""
