"""Operation inputs: path placeholders, ``@parameter`` and ``@parameter_list`` tags."""

from pydantic import BaseModel

from swagger_tags.config import get_settings
from swagger_tags.errors import TagParseError
from swagger_tags.parser.base import Tag
from swagger_tags.parser.grammar import FORMAT_PARAM_NAME, parse_parameter_list, split_name_options
from swagger_tags.schema.type import Type

FLAG_OPTIONS = ("required", "multiple")


class Parameter(BaseModel):
    """A single API parameter (path, query, body, header, ...)."""

    name: str
    type: Type
    description: str = ""
    required: bool = False
    param_type: str = "query"
    allow_multiple: bool = False
    allowable_values: list[str] | None = None

    @classmethod
    def from_path_param(cls, name: str) -> "Parameter":
        return cls(
            name=name,
            type=Type(name="string"),
            description=f"Scope response to {name}",
            required=True,
            param_type="path",
        )

    @classmethod
    def from_tag(cls, tag: Tag) -> "Parameter":
        """Parse a single ``@parameter`` tag.

        Examples:
            [Array]   status                  Filter by status.
            [Array]   status(required)        Filter by status.
            [Array]   status(required, body)  Filter by status.
            [Integer] media[media_type_id]    ID of the desired media type.
        """
        if not tag.name:
            raise TagParseError("parameter is missing a name", tag_name=tag.tag_name)
        name, options = split_name_options(tag.name)
        try:
            type_ = Type.from_type_list(tag.types)
        except TagParseError as exc:
            exc.tag_name = tag.tag_name
            raise

        locations = [option for option in options if option not in FLAG_OPTIONS]
        return cls(
            name=name,
            type=type_,
            description=tag.text,
            required="required" in options,
            allow_multiple="multiple" in options,
            param_type=locations[-1] if locations else "query",
        )

    @classmethod
    def from_parameter_list(cls, tag: Tag) -> "Parameter":
        """Parse the ``@parameter_list`` shorthand into a query parameter.

        Example:
            [String] sort_order  Orders widgets by field.
            [List]   id
            [List]   created_at
        """
        parsed = parse_parameter_list(tag.text)
        return cls(
            name=parsed.name,
            type=Type(name=parsed.data_type.lower()),
            description=parsed.description,
            required=parsed.required,
            param_type="query",
            allow_multiple=False,
            allowable_values=parsed.allowable_values,
        )

    @classmethod
    def format_parameter(cls) -> "Parameter":
        return cls(
            name=FORMAT_PARAM_NAME,
            type=Type(name="string"),
            description="Response format either JSON or XML",
            required=True,
            param_type="path",
            allow_multiple=False,
            allowable_values=list(get_settings().format_values),
        )

    def to_legacy_dict(self) -> dict:
        result = {
            "paramType": self.param_type,
            "name": self.name,
            "description": self.description,
            "required": self.required,
            "allowMultiple": self.allow_multiple,
        }
        result.update(self.type.to_legacy_dict())
        if self.allowable_values is not None:
            result["allowableValues"] = {"valueType": "LIST", "values": list(self.allowable_values)}
        return result

    def to_swagger_v2(self) -> dict:
        result = {
            "name": self.name,
            "description": self.description,
            "required": self.required,
            "in": self.param_type,
        }
        if self.type.ref:
            result["schema"] = self.type.to_swagger_v2()
        else:
            result.update(self.type.to_swagger_v2())
        if self.allow_multiple and "items" in result:
            result["collectionFormat"] = "multi"
        if self.allowable_values is not None:
            result["enum"] = list(self.allowable_values)
        return result
