import pytest

from swagger_tags.config import get_settings
from swagger_tags.errors import TagParseError
from swagger_tags.parser.base import Tag
from swagger_tags.schema.parameter import Parameter
from swagger_tags.schema.type import Type


class TestFromPathParam:
    def test_defaults(self):
        p = Parameter.from_path_param("account_id")
        assert p.name == "account_id"
        assert p.type.name == "string"
        assert p.required is True
        assert p.param_type == "path"
        assert p.allow_multiple is False
        assert p.description == "Scope response to account_id"


class TestFromTag:
    def test_plain_query_param(self):
        p = Parameter.from_tag(Tag(tag_name="parameter", name="status", types=["Array<string>"], text="Filter"))
        assert p.name == "status"
        assert p.required is False
        assert p.param_type == "query"
        assert p.type.array is True
        assert p.description == "Filter"

    def test_required_with_location(self):
        p = Parameter.from_tag(Tag(tag_name="parameter", name="widget(required, body)", types=["Widget"]))
        assert p.required is True
        assert p.param_type == "body"

    def test_multiple_flag(self):
        p = Parameter.from_tag(Tag(tag_name="parameter", name="ids(multiple)", types=["Array<integer>"]))
        assert p.allow_multiple is True
        assert p.param_type == "query"

    def test_missing_name_fails(self):
        with pytest.raises(TagParseError):
            Parameter.from_tag(Tag(tag_name="parameter", types=["string"]))

    def test_missing_type_fails(self):
        with pytest.raises(TagParseError) as exc_info:
            Parameter.from_tag(Tag(tag_name="parameter", name="q"))
        assert exc_info.value.tag_name == "parameter"


class TestFromParameterList:
    def test_shorthand(self):
        tag = Tag(tag_name="parameter_list", text="[Array] status(required)\nFilter by status\n[List] 1\n[List] 2")
        p = Parameter.from_parameter_list(tag)
        assert p.name == "status"
        assert p.required is True
        assert p.param_type == "query"
        assert p.allow_multiple is False
        assert p.allowable_values == ["1", "2"]

    def test_type_is_lower_cased(self):
        tag = Tag(tag_name="parameter_list", text="[String] sort_order Orders by field.\n[List] id")
        p = Parameter.from_parameter_list(tag)
        assert p.type.name == "string"
        assert p.type.ref is False
        assert p.description == "Orders by field."

    def test_malformed_shorthand_fails(self):
        with pytest.raises(TagParseError):
            Parameter.from_parameter_list(Tag(tag_name="parameter_list", text="sort_order only"))


class TestFormatParameter:
    def test_shape(self):
        p = Parameter.format_parameter()
        assert p.name == "format_type"
        assert p.required is True
        assert p.param_type == "path"
        assert p.allowable_values == ["json", "xml"]

    def test_values_from_settings(self, monkeypatch):
        get_settings.cache_clear()
        monkeypatch.setenv("SWAGGER_TAGS_FORMAT_VALUES", '["json"]')
        try:
            assert Parameter.format_parameter().allowable_values == ["json"]
        finally:
            get_settings.cache_clear()


class TestLegacyDict:
    def test_path_param(self):
        assert Parameter.from_path_param("id").to_legacy_dict() == {
            "paramType": "path",
            "name": "id",
            "description": "Scope response to id",
            "required": True,
            "allowMultiple": False,
            "type": "string",
        }

    def test_allowable_values(self):
        d = Parameter.format_parameter().to_legacy_dict()
        assert d["allowableValues"] == {"valueType": "LIST", "values": ["json", "xml"]}

    def test_array_of_ref(self):
        p = Parameter(name="widgets", type=Type.parse("Array<Widget>"), param_type="body")
        d = p.to_legacy_dict()
        assert d["type"] == "array"
        assert d["items"] == {"$ref": "Widget"}
        assert "allowableValues" not in d


class TestSwaggerV2:
    def test_primitive_is_merged(self):
        assert Parameter.from_path_param("id").to_swagger_v2() == {
            "name": "id",
            "description": "Scope response to id",
            "required": True,
            "in": "path",
            "type": "string",
        }

    def test_ref_is_nested_under_schema(self):
        p = Parameter(name="widget", type=Type(name="Widget"), required=True, param_type="body")
        d = p.to_swagger_v2()
        assert d["schema"] == {"$ref": "#/definitions/Widget"}
        assert "type" not in d

    def test_multiple_array_gets_collection_format(self):
        p = Parameter(name="ids", type=Type.parse("Array<integer>"), allow_multiple=True)
        d = p.to_swagger_v2()
        assert d["items"] == {"type": "integer"}
        assert d["collectionFormat"] == "multi"

    def test_multiple_scalar_has_no_collection_format(self):
        p = Parameter(name="id", type=Type(name="integer"), allow_multiple=True)
        assert "collectionFormat" not in p.to_swagger_v2()

    def test_enum(self):
        assert Parameter.format_parameter().to_swagger_v2()["enum"] == ["json", "xml"]

    def test_empty_allowable_values_still_emitted(self):
        tag = Tag(tag_name="parameter_list", text="[String] q Search\n")
        assert Parameter.from_parameter_list(tag).to_swagger_v2()["enum"] == []
