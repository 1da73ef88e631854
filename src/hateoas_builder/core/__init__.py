"""Core hypermedia surface for hateoas-builder (transport-agnostic)."""

from .builder import RepresentationBuilder, build
from .config import BuilderSettings, load_settings
from .errors import (
    DuplicateRelationNameError,
    InvalidTemplateError,
    MissingIdentifierError,
    RepresentationError,
)
from .hal import (
    get_embedded,
    get_link,
    get_link_href,
    get_link_title,
    get_related_href,
    get_relationship,
    get_relationship_data,
    parse_id_from_href,
)
from .models import (
    Cardinality,
    Document,
    HALResource,
    JSONAPIDocument,
    JSONAPIResource,
    Link,
    RelationDescriptor,
    RepresentationFormat,
)
from .templates import HrefTemplate, encode_identifier

__all__ = [
    # Builder
    "build",
    "RepresentationBuilder",
    # Models
    "Cardinality",
    "Document",
    "RelationDescriptor",
    "RepresentationFormat",
    "Link",
    "HALResource",
    "JSONAPIResource",
    "JSONAPIDocument",
    # Templates
    "HrefTemplate",
    "encode_identifier",
    # Exceptions
    "RepresentationError",
    "MissingIdentifierError",
    "InvalidTemplateError",
    "DuplicateRelationNameError",
    # Read helpers
    "get_link",
    "get_link_href",
    "get_link_title",
    "get_embedded",
    "parse_id_from_href",
    "get_relationship",
    "get_related_href",
    "get_relationship_data",
    # Config
    "BuilderSettings",
    "load_settings",
]
