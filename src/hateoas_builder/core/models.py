from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator

from . import hal

# Plain JSON-ready mapping returned by the builder
Document = Dict[str, Any]

Identifier = Union[int, str, UUID]

MEDIA_TYPES = {
    "hal": "application/hal+json",
    "json_api": "application/vnd.api+json",
}


class RepresentationFormat(str, Enum):
    HAL = "hal"
    JSON_API = "json_api"

    @property
    def media_type(self) -> str:
        return MEDIA_TYPES[self.value]

    @classmethod
    def parse(cls, value: Union[str, "RepresentationFormat"]) -> "RepresentationFormat":
        """
        Accepts members, names and values, case-insensitively.
        Example: parse('json:api') -> RepresentationFormat.JSON_API
        """
        if isinstance(value, cls):
            return value
        key = str(value or "").strip().lower().replace(":", "_").replace("-", "_")
        if key == "jsonapi":
            key = "json_api"
        for member in cls:
            if key == member.value:
                return member
        raise ValueError(f"Unknown representation format: {value!r}")


class Cardinality(str, Enum):
    ONE = "one"
    MANY = "many"


class RelationDescriptor(BaseModel):
    """
    One navigable relationship from an entity to related resources.
    Accepts both snake_case names and the camelCase aliases
    (targetHrefTemplate, relatedIds, relatedType).
    """

    name: str = Field(min_length=1)
    target_href_template: str = Field(alias="targetHrefTemplate")
    cardinality: Cardinality = Cardinality.ONE
    related_ids: Optional[Tuple[Identifier, ...]] = Field(
        default=None, alias="relatedIds"
    )
    title: Optional[str] = None
    related_type: Optional[str] = Field(default=None, alias="relatedType")

    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    @model_validator(mode="after")
    def _check_one_has_single_id(self) -> "RelationDescriptor":
        if (
            self.cardinality is Cardinality.ONE
            and self.related_ids is not None
            and len(self.related_ids) > 1
        ):
            raise ValueError(
                f"Relation {self.name!r} has cardinality 'one' but "
                f"{len(self.related_ids)} related ids."
            )
        return self

    @property
    def is_many(self) -> bool:
        return self.cardinality is Cardinality.MANY


# --- Parsed document models (consumer side) ---


class Link(BaseModel):
    href: str
    title: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class HALResource(BaseModel):
    """
    Parsed HAL+JSON resource.
    _links/_embedded stay loosely typed because a relation can be
    a single link object or an array of link objects.
    """

    links: Dict[str, Any] = Field(default_factory=dict, alias="_links")
    embedded: Dict[str, Any] = Field(default_factory=dict, alias="_embedded")

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    @property
    def self_href(self) -> Optional[str]:
        return self.link_href("self")

    def link(self, rel: str) -> Optional[Link]:
        value = hal.get_link({"_links": self.links}, rel)
        return Link.model_validate(value) if isinstance(value, dict) else None

    def link_href(self, rel: str) -> Optional[str]:
        return hal.get_link_href({"_links": self.links}, rel)

    def link_title(self, rel: str) -> Optional[str]:
        return hal.get_link_title({"_links": self.links}, rel)

    def link_id(self, rel: str) -> Optional[int]:
        href = self.link_href(rel)
        return hal.parse_id_from_href(href) if href else None

    def link_hrefs(self, rel: str) -> List[str]:
        """All hrefs for a relation, whether it is one link or an array."""
        value = self.links.get(rel)
        if isinstance(value, dict):
            value = [value]
        if not isinstance(value, list):
            return []
        return [item["href"] for item in value if isinstance(item, dict) and item.get("href")]

    def attributes(self) -> Dict[str, Any]:
        return dict(self.model_extra or {})


class JSONAPIResource(BaseModel):
    type: str
    id: str
    attributes: Dict[str, Any] = Field(default_factory=dict)
    relationships: Dict[str, Any] = Field(default_factory=dict)
    links: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(extra="ignore")

    def related_href(self, name: str) -> Optional[str]:
        return hal.get_related_href({"data": self.model_dump()}, name)

    def relationship_data(self, name: str) -> Any:
        return hal.get_relationship_data({"data": self.model_dump()}, name)


class JSONAPIDocument(BaseModel):
    data: JSONAPIResource
    meta: Optional[Dict[str, Any]] = None

    model_config = ConfigDict(extra="ignore")

    def related_href(self, name: str) -> Optional[str]:
        return self.data.related_href(name)


__all__ = [
    "Document",
    "Identifier",
    "MEDIA_TYPES",
    "RepresentationFormat",
    "Cardinality",
    "RelationDescriptor",
    "Link",
    "HALResource",
    "JSONAPIResource",
    "JSONAPIDocument",
]
