"""Attach HAL or JSON:API hypermedia links to a domain entity."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union
from uuid import UUID

from pydantic import BaseModel, ValidationError

from .config import BuilderSettings, load_settings
from .errors import (
    DuplicateRelationNameError,
    InvalidTemplateError,
    MissingIdentifierError,
    RepresentationError,
)
from .models import Document, RelationDescriptor, RepresentationFormat
from .observability import log_event
from .templates import HrefTemplate, append_path

SELF_REL = "self"
# HAL control keys never copied from the entity into the attributes
HAL_RESERVED_KEYS = frozenset({"_links", "_embedded"})

EntityLike = Union[Mapping[str, Any], BaseModel]
RelationLike = Union[RelationDescriptor, Mapping[str, Any]]


# --- Validation ------------------------------------------------------------ #


def _entity_fields(entity: EntityLike) -> Dict[str, Any]:
    if isinstance(entity, BaseModel):
        return entity.model_dump(mode="json", by_alias=True)
    if isinstance(entity, Mapping):
        return dict(entity)
    raise TypeError(
        f"Entity must be a mapping or pydantic model, got {type(entity).__name__}."
    )


def _identifier(fields: Mapping[str, Any], id_field: str) -> Union[int, str, UUID]:
    value = fields.get(id_field)
    if value is None or isinstance(value, bool):
        raise MissingIdentifierError(id_field)
    if not isinstance(value, (int, str, UUID)):
        raise MissingIdentifierError(
            id_field,
            f"Entity identifier '{id_field}' must be an int, str or UUID, "
            f"got {type(value).__name__}.",
        )
    if isinstance(value, str) and not value.strip():
        raise MissingIdentifierError(id_field)
    return value


def _coerce_relations(relations: Iterable[RelationLike]) -> List[RelationDescriptor]:
    descriptors: List[RelationDescriptor] = []
    for relation in relations or ():
        if isinstance(relation, RelationDescriptor):
            descriptors.append(relation)
        else:
            descriptors.append(RelationDescriptor.model_validate(relation))
    return descriptors


def _relation_templates(
    descriptors: List[RelationDescriptor],
) -> List[Tuple[RelationDescriptor, HrefTemplate]]:
    parsed = [(d, HrefTemplate.parse(d.target_href_template)) for d in descriptors]

    seen = set()
    for descriptor, _ in parsed:
        if descriptor.name == SELF_REL:
            raise DuplicateRelationNameError(
                SELF_REL, f"Relation name {SELF_REL!r} is reserved for the self link."
            )
        if descriptor.name in seen:
            raise DuplicateRelationNameError(descriptor.name)
        seen.add(descriptor.name)
    return parsed


def _absolute(href: str, base_url: Optional[str]) -> str:
    if base_url and href.startswith("/"):
        return base_url.rstrip("/") + href
    return href


# --- Rendering ------------------------------------------------------------- #


def _hal_link(href: str, title: Optional[str]) -> Dict[str, str]:
    link = {"href": href}
    if title:
        link["title"] = title
    return link


def _render_hal(
    fields: Dict[str, Any],
    self_href: str,
    relations: List[Tuple[RelationDescriptor, str]],
) -> Document:
    links: Dict[str, Any] = {SELF_REL: {"href": self_href}}
    for descriptor, href in relations:
        if descriptor.is_many and descriptor.related_ids is not None:
            links[descriptor.name] = [
                _hal_link(append_path(href, rid), descriptor.title)
                for rid in descriptor.related_ids
            ]
        else:
            links[descriptor.name] = _hal_link(href, descriptor.title)

    document: Document = {
        key: copy.deepcopy(value)
        for key, value in fields.items()
        if key not in HAL_RESERVED_KEYS
    }
    document["_links"] = links
    return document


def _linkage(descriptor: RelationDescriptor) -> Any:
    def _one(rid: Any) -> Any:
        if descriptor.related_type:
            return {"type": descriptor.related_type, "id": str(rid)}
        return rid

    ids = descriptor.related_ids or ()
    if descriptor.is_many:
        return [_one(rid) for rid in ids]
    return _one(ids[0]) if ids else None


def _render_json_api(
    fields: Dict[str, Any],
    id_field: str,
    identifier: Any,
    resource_type: str,
    self_href: str,
    descriptors: List[RelationDescriptor],
) -> Document:
    resource: Dict[str, Any] = {
        "type": resource_type,
        "id": str(identifier),
        "attributes": {
            key: copy.deepcopy(value)
            for key, value in fields.items()
            if key != id_field
        },
        "links": {SELF_REL: self_href},
    }

    if descriptors:
        resource["relationships"] = {
            d.name: {
                "links": {"related": append_path(self_href, "relationships", d.name)},
                "data": _linkage(d),
            }
            for d in descriptors
        }

    return {"data": resource}


# --- Public API ------------------------------------------------------------ #


def build(
    entity: EntityLike,
    self_href_template: str,
    relations: Iterable[RelationLike] = (),
    format: Union[RepresentationFormat, str] = RepresentationFormat.HAL,
    *,
    id_field: str = "id",
    resource_type: Optional[str] = None,
    base_url: Optional[str] = None,
) -> Document:
    """
    Build a HAL or JSON:API document for ``entity``.

    Every input is validated before anything is rendered:
    - MissingIdentifierError: the entity has no usable ``id_field`` value
    - InvalidTemplateError: a template has zero or several placeholders
    - DuplicateRelationNameError: two relations share a name (or one is 'self')

    The entity is never mutated; attribute values are deep-copied into the result.
    """
    fmt = RepresentationFormat.parse(format)
    fields = _entity_fields(entity)

    try:
        identifier = _identifier(fields, id_field)
        self_template = HrefTemplate.parse(self_href_template)
        descriptors = _coerce_relations(relations)
        parsed = _relation_templates(descriptors)

        if fmt is RepresentationFormat.JSON_API:
            resource_type = resource_type or self_template.last_segment()
            if not resource_type:
                raise InvalidTemplateError(
                    self_href_template,
                    placeholder_count=1,
                    message=(
                        f"Cannot derive a resource type from {self_href_template!r}; "
                        "pass resource_type explicitly."
                    ),
                )
    except (RepresentationError, ValidationError) as exc:
        log_event(
            "representation_rejected",
            format=fmt.value,
            error_type=type(exc).__name__,
        )
        raise

    self_href = _absolute(self_template.expand(identifier), base_url)
    relation_hrefs = [
        (descriptor, _absolute(template.expand(identifier), base_url))
        for descriptor, template in parsed
    ]

    if fmt is RepresentationFormat.HAL:
        document = _render_hal(fields, self_href, relation_hrefs)
    else:
        document = _render_json_api(
            fields, id_field, identifier, resource_type, self_href, descriptors
        )

    log_event(
        "representation_built",
        format=fmt.value,
        resource=self_href,
        relations=len(descriptors),
    )
    return document


@dataclass(frozen=True)
class RepresentationBuilder:
    """Holds per-application defaults for build(); immutable and thread-safe."""

    id_field: str = "id"
    base_url: Optional[str] = None
    default_format: RepresentationFormat = RepresentationFormat.HAL

    @classmethod
    def from_settings(cls, settings: BuilderSettings) -> "RepresentationBuilder":
        return cls(
            id_field=settings.id_field,
            base_url=settings.base_url,
            default_format=settings.default_format,
        )

    @classmethod
    def from_env(cls, *, use_dotenv: bool = True) -> "RepresentationBuilder":
        return cls.from_settings(load_settings(use_dotenv=use_dotenv))

    def build(
        self,
        entity: EntityLike,
        self_href_template: str,
        relations: Iterable[RelationLike] = (),
        format: Union[RepresentationFormat, str, None] = None,
        *,
        resource_type: Optional[str] = None,
    ) -> Document:
        return build(
            entity,
            self_href_template,
            relations,
            format if format is not None else self.default_format,
            id_field=self.id_field,
            resource_type=resource_type,
            base_url=self.base_url,
        )


__all__ = ["build", "RepresentationBuilder", "EntityLike", "RelationLike"]
