from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import quote, urlsplit, urlunsplit

from .errors import InvalidTemplateError

# "{id}", "{order_id}" ... one identifier-like name between braces
PLACEHOLDER_RE = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")


def encode_identifier(value: Any) -> str:
    """
    Render an identifier as a single percent-encoded path segment.
    Example: encode_identifier("a/b c") -> 'a%2Fb%20c'
    """
    return quote(str(value), safe="")


def append_path(href: str, *segments: Any) -> str:
    """
    Append encoded path segments, keeping any query or fragment in place.
    Example: append_path('/orders/1?sort=asc', 10) -> '/orders/1/10?sort=asc'
    """
    parts = urlsplit(href)
    path = parts.path.rstrip("/") + "".join(
        "/" + encode_identifier(segment) for segment in segments
    )
    return urlunsplit(parts._replace(path=path))


@dataclass(frozen=True)
class HrefTemplate:
    """A parsed href template with exactly one identifier placeholder."""

    raw: str
    prefix: str
    placeholder: str
    suffix: str

    @classmethod
    def parse(cls, template: str) -> "HrefTemplate":
        if not isinstance(template, str) or not template.strip():
            raise InvalidTemplateError(str(template), placeholder_count=0)

        matches = list(PLACEHOLDER_RE.finditer(template))
        if len(matches) != 1:
            raise InvalidTemplateError(template, placeholder_count=len(matches))

        match = matches[0]
        prefix = template[: match.start()]
        suffix = template[match.end() :]

        # Leftover braces mean a malformed or non-identifier placeholder
        if any(ch in "{}" for ch in prefix + suffix):
            raise InvalidTemplateError(
                template,
                placeholder_count=len(matches),
                message=f"Href template {template!r} has unbalanced braces.",
            )
        if any(ch.isspace() for ch in template):
            raise InvalidTemplateError(
                template,
                placeholder_count=len(matches),
                message=f"Href template {template!r} contains whitespace.",
            )

        return cls(
            raw=template,
            prefix=prefix,
            placeholder=match.group(1),
            suffix=suffix,
        )

    def expand(self, identifier: Any) -> str:
        return f"{self.prefix}{encode_identifier(identifier)}{self.suffix}"

    def last_segment(self) -> Optional[str]:
        """
        Literal path segment directly before the placeholder.
        Example: '/api/v3/orders/{id}' -> 'orders'
        """
        path = urlsplit(self.prefix).path
        segments = [s for s in path.split("/") if s]
        return segments[-1] if segments else None


__all__ = ["HrefTemplate", "PLACEHOLDER_RE", "append_path", "encode_identifier"]
