"""Schema field descriptor model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.enums import FieldMode, FieldType


class FieldSchema(BaseModel):
    """One column (or nested member) of a query result schema.

    Validates directly from the service's ``schema.fields`` entries, so
    ``FieldSchema.model_validate({"name": "id", "type": "INTEGER"})`` works
    as well as keyword construction. Nested members of a RECORD live in
    ``nested_fields`` in declaration order.
    """

    name: str
    type_name: str = Field(..., alias="type")
    mode: FieldMode = FieldMode.NULLABLE
    nested_fields: tuple[FieldSchema, ...] = Field(default=(), alias="fields")
    description: str | None = None

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @field_validator("mode", mode="before")
    @classmethod
    def validate_mode(cls, v: Any) -> FieldMode:
        """Map missing or unknown modes to NULLABLE."""
        if isinstance(v, FieldMode):
            return v
        return FieldMode.from_str(v)

    @field_validator("nested_fields", mode="before")
    @classmethod
    def validate_fields(cls, v: Any) -> Any:
        """Treat an explicit null as no nested fields."""
        return () if v is None else v

    @property
    def field_type(self) -> FieldType | None:
        """Canonical field type, or None when the wire name is unknown."""
        field_type = FieldType.from_str(self.type_name)
        return field_type.canonical if field_type else None

    @property
    def is_repeated(self) -> bool:
        return self.mode == FieldMode.REPEATED

    def element(self) -> FieldSchema:
        """Descriptor for a single element of a REPEATED field."""
        return self.model_copy(update={"mode": FieldMode.NULLABLE})

    @classmethod
    def list_from_api(cls, raw_fields: list[dict[str, Any]] | None) -> tuple[FieldSchema, ...]:
        """Build descriptors from a ``schema.fields`` array."""
        return tuple(cls.model_validate(raw) for raw in raw_fields or [])
