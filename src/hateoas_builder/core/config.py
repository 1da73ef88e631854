from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from .models import RepresentationFormat

ID_FIELD_ENV = "HATEOAS_ID_FIELD"
BASE_URL_ENV = "HATEOAS_BASE_URL"
DEFAULT_FORMAT_ENV = "HATEOAS_DEFAULT_FORMAT"


@dataclass(frozen=True)
class BuilderSettings:
    id_field: str = "id"
    base_url: Optional[str] = None
    default_format: RepresentationFormat = RepresentationFormat.HAL


def load_settings(*, use_dotenv: bool = True) -> BuilderSettings:
    """Load builder settings from environment (optional .env)."""
    if use_dotenv:
        load_dotenv(find_dotenv(usecwd=True))

    id_field = os.getenv(ID_FIELD_ENV, "").strip() or "id"
    base_url = os.getenv(BASE_URL_ENV, "").strip().rstrip("/") or None
    raw_format = os.getenv(DEFAULT_FORMAT_ENV, "").strip()

    default_format = (
        RepresentationFormat.parse(raw_format) if raw_format else RepresentationFormat.HAL
    )

    return BuilderSettings(
        id_field=id_field,
        base_url=base_url,
        default_format=default_format,
    )


__all__ = [
    "BuilderSettings",
    "load_settings",
    "ID_FIELD_ENV",
    "BASE_URL_ENV",
    "DEFAULT_FORMAT_ENV",
]
