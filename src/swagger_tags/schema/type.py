"""Data-type references used by properties, parameters and responses."""

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict, model_validator

from swagger_tags.config import get_settings
from swagger_tags.errors import TagParseError

TYPE_SPLIT_PATTERN = re.compile(r"[<>]")


class TypeKind(str, Enum):
    PRIMITIVE = "primitive"
    REFERENCE = "reference"


def classify(name: str) -> TypeKind:
    """Configured primitives first, then upper-case names refer to models."""
    if name in get_settings().primitive_types:
        return TypeKind.PRIMITIVE
    if any(char.isupper() for char in name):
        return TypeKind.REFERENCE
    return TypeKind.PRIMITIVE


class Type(BaseModel):
    """A single type, possibly an array of it, possibly naming a Model."""

    model_config = ConfigDict(frozen=True)

    name: str
    array: bool = False
    kind: TypeKind

    @model_validator(mode="before")
    @classmethod
    def _classify(cls, data):
        if isinstance(data, dict) and data.get("kind") is None and "name" in data:
            data = {**data, "kind": classify(data["name"])}
        return data

    @classmethod
    def parse(cls, raw: str) -> "Type":
        """Parse ``"Array<Widget>"`` or ``"string"``."""
        parts = [part for part in TYPE_SPLIT_PATTERN.split(raw.strip()) if part]
        if not parts:
            raise TagParseError(f"empty type annotation {raw!r}")
        return cls(name=parts[-1], array=any(part.lower() == "array" for part in parts))

    @classmethod
    def from_type_list(cls, types: list[str]) -> "Type":
        if not types:
            raise TagParseError("missing [Type] annotation")
        return cls.parse(types[0])

    @property
    def ref(self) -> bool:
        return self.kind is TypeKind.REFERENCE

    @property
    def model_name(self) -> str | None:
        return self.name if self.ref else None

    def to_legacy_dict(self) -> dict:
        if self.array:
            type_tag = "$ref" if self.ref else "type"
            return {"type": "array", "items": {type_tag: self.name}}
        return {"type": self.name}

    def to_swagger_v2(self) -> dict:
        if self.ref:
            schema = {"$ref": f"#/definitions/{self.name}"}
        else:
            schema = {"type": self.name}
        if self.array:
            return {"type": "array", "items": schema}
        return schema
