"""A single field of a Model, built from one ``@property`` tag."""

from pydantic import BaseModel

from swagger_tags.errors import TagParseError
from swagger_tags.parser.base import Tag
from swagger_tags.parser.grammar import split_name_options
from swagger_tags.schema.type import Type


class Property(BaseModel):
    name: str
    type: Type
    description: str | None = None
    required: bool = False

    @classmethod
    def from_tag(cls, tag: Tag) -> "Property":
        """``@property owner(required) [User] The widget owner``"""
        if not tag.name:
            raise TagParseError("property is missing a name", tag_name=tag.tag_name)
        name, options = split_name_options(tag.name)
        try:
            type_ = Type.from_type_list(tag.types)
        except TagParseError as exc:
            exc.tag_name = tag.tag_name
            raise

        return cls(name=name, type=type_, description=tag.text or None, required="required" in options)

    @property
    def model_name(self) -> str | None:
        return self.type.model_name

    def to_legacy_dict(self) -> dict:
        result = self.type.to_legacy_dict()
        if self.description:
            result["description"] = self.description
        return result

    def to_swagger_v2(self) -> dict:
        result = self.type.to_swagger_v2()
        if self.description:
            result["description"] = self.description
        return result
