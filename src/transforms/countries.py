from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, ValidatorFunctionWrapHandler, field_validator


class _Lenient(BaseModel):
    """
    A field that fails validation becomes None instead of rejecting the whole record.
    """

    model_config = ConfigDict(frozen=True)

    @field_validator("*", mode="wrap")
    @classmethod
    def _malformed_to_none(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        try:
            return handler(value)
        except ValidationError:
            return None


class CountryName(_Lenient):
    common: str | None = None
    official: str | None = None


class CountryFlags(_Lenient):
    png: str | None = None
    svg: str | None = None
    alt: str | None = None


class CountryRecord(_Lenient):
    """
    One entry of the /v3.1/all payload.
    v2-style payloads carry `name` as a plain string; both shapes are accepted.
    """

    name: CountryName | str | None = None
    flags: CountryFlags | None = None

    @property
    def common_name(self) -> str | None:
        if isinstance(self.name, CountryName):
            return self.name.common or self.name.official
        return self.name

    @property
    def flag_png(self) -> str | None:
        return self.flags.png if self.flags is not None else None


@dataclass(frozen=True)
class ImageReference:
    src: str | None
    alt: str | None = None


def to_image_reference(record: CountryRecord) -> ImageReference:
    alt = record.flags.alt if record.flags is not None and record.flags.alt else record.common_name
    return ImageReference(src=record.flag_png, alt=alt)


def transform_countries(payload: Any) -> list[CountryRecord]:
    """
    RAW -> CountryRecord, order-preserving.
    Items that are not objects become empty records so the one-to-one count holds.
    """
    if not isinstance(payload, list):
        raise ValueError(f"Expected a JSON array of countries, got {type(payload).__name__}")

    return [CountryRecord.model_validate(item) if isinstance(item, dict) else CountryRecord() for item in payload]


def build_image_references(payload: Any) -> list[ImageReference]:
    return [to_image_reference(r) for r in transform_countries(payload)]
