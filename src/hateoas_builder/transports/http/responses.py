from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Union

from starlette.responses import JSONResponse

from hateoas_builder.core.builder import EntityLike, RelationLike, RepresentationBuilder
from hateoas_builder.core.models import Document, RepresentationFormat


class HypermediaResponse(JSONResponse):
    """JSON response whose media type follows the representation format."""

    def __init__(
        self,
        content: Document,
        format: Union[RepresentationFormat, str] = RepresentationFormat.HAL,
        status_code: int = 200,
        headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.format = RepresentationFormat.parse(format)
        super().__init__(
            content,
            status_code=status_code,
            headers=headers,
            media_type=self.format.media_type,
        )


def representation_response(
    entity: EntityLike,
    self_href_template: str,
    relations: Iterable[RelationLike] = (),
    format: Union[RepresentationFormat, str, None] = None,
    *,
    builder: Optional[RepresentationBuilder] = None,
    resource_type: Optional[str] = None,
    status_code: int = 200,
    headers: Optional[Mapping[str, Any]] = None,
) -> HypermediaResponse:
    """Build the document for ``entity`` and wrap it in a HypermediaResponse."""
    builder = builder or RepresentationBuilder()
    fmt = RepresentationFormat.parse(format) if format is not None else builder.default_format
    document = builder.build(
        entity,
        self_href_template,
        relations,
        fmt,
        resource_type=resource_type,
    )
    return HypermediaResponse(document, fmt, status_code=status_code, headers=headers)


__all__ = ["HypermediaResponse", "representation_response"]
