from __future__ import annotations

from typing import Optional


class RepresentationError(ValueError):
    """Base error for representation inputs rejected before any output is built."""


class MissingIdentifierError(RepresentationError):
    def __init__(self, id_field: str, message: Optional[str] = None):
        super().__init__(message or f"Entity has no usable '{id_field}' identifier.")
        self.id_field = id_field


class InvalidTemplateError(RepresentationError):
    def __init__(
        self,
        template: str,
        *,
        placeholder_count: Optional[int] = None,
        message: Optional[str] = None,
    ):
        if message is None:
            message = (
                f"Href template {template!r} must contain exactly one "
                f"placeholder, found {placeholder_count}."
            )
        super().__init__(message)
        self.template = template
        self.placeholder_count = placeholder_count


class DuplicateRelationNameError(RepresentationError):
    def __init__(self, name: str, message: Optional[str] = None):
        super().__init__(message or f"Relation name {name!r} is used more than once.")
        self.name = name


__all__ = [
    "RepresentationError",
    "MissingIdentifierError",
    "InvalidTemplateError",
    "DuplicateRelationNameError",
]
