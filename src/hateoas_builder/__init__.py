"""hateoas_builder package exports."""

from .core import (
    BuilderSettings,
    Cardinality,
    Document,
    DuplicateRelationNameError,
    HALResource,
    InvalidTemplateError,
    JSONAPIDocument,
    Link,
    MissingIdentifierError,
    RelationDescriptor,
    RepresentationBuilder,
    RepresentationError,
    RepresentationFormat,
    build,
    get_link,
    get_link_href,
    get_related_href,
    get_relationship_data,
    load_settings,
)
from .core.logging import setup_logging

__all__ = [
    # Builder
    "build",
    "RepresentationBuilder",
    "RelationDescriptor",
    "RepresentationFormat",
    "Cardinality",
    "Document",
    # Exceptions
    "RepresentationError",
    "MissingIdentifierError",
    "InvalidTemplateError",
    "DuplicateRelationNameError",
    # Parsing / read helpers
    "HALResource",
    "JSONAPIDocument",
    "Link",
    "get_link",
    "get_link_href",
    "get_related_href",
    "get_relationship_data",
    # Config / logging
    "BuilderSettings",
    "load_settings",
    "setup_logging",
]
