"""API endpoints described by tags on a single method declaration."""

import logging
import re

from pydantic import BaseModel, ConfigDict

from swagger_tags.config import get_settings
from swagger_tags.errors import AnnotationError, TagParseError
from swagger_tags.parser.base import ApiContext, Declaration, Tag
from swagger_tags.parser.grammar import parse_path_params
from swagger_tags.schema.parameter import Parameter
from swagger_tags.schema.type import Type

logger = logging.getLogger(__name__)

NICKNAME_SEPARATOR_PATTERN = re.compile(r"[^a-zA-Z\d:]+")


class ErrorMessage(BaseModel):
    code: int
    message: str
    response_model: str | None = None

    def to_dict(self) -> dict:
        result = {"code": self.code, "message": self.message}
        if self.response_model is not None:
            result["responseModel"] = self.response_model
        return result


class Operation(BaseModel):
    """One documented endpoint: path, method, parameters and responses."""

    model_config = ConfigDict(protected_namespaces=())

    api: ApiContext
    path: str | None = None
    http_method: str | None = None
    summary: str | None = None
    notes: str | None = None
    parameters: list[Parameter] = []
    response_type: Type | None = None
    error_messages: list[ErrorMessage] = []
    model_names: list[str] = []

    @classmethod
    def from_declaration(cls, declaration: Declaration, api: ApiContext) -> "Operation":
        operation = cls(api=api)
        for tag in declaration.tags:
            try:
                operation.parse_tag(tag)
            except TagParseError as exc:
                exc.tag_name = exc.tag_name or tag.tag_name
                exc.declaration = declaration.path
                raise

        operation.sort_parameters()
        operation.append_format_parameter()
        logger.debug("Built operation %s %s", operation.http_method, operation.path)
        return operation

    def parse_tag(self, tag: Tag) -> None:
        if tag.tag_name == "path":
            self.add_path_params_and_method(tag)
        elif tag.tag_name == "parameter":
            self.parameters.append(Parameter.from_tag(tag))
        elif tag.tag_name == "parameter_list":
            self.parameters.append(Parameter.from_parameter_list(tag))
        elif tag.tag_name == "response_type":
            self.add_response_type(Type.from_type_list(tag.types))
        elif tag.tag_name == "error_message":
            self.add_error_message(tag)
        elif tag.tag_name == "summary":
            self.summary = tag.text
        elif tag.tag_name == "notes":
            self.notes = tag.text.replace("\n", get_settings().notes_line_break)
        else:
            logger.debug("Ignoring unrecognized tag @%s", tag.tag_name)

    def add_path_params_and_method(self, tag: Tag) -> None:
        """``@path [PUT] /api/v1/accounts/{account_id}.{format_type}``"""
        if not tag.types:
            raise TagParseError("missing [HTTP_METHOD] annotation", tag_name=tag.tag_name)
        self.path = tag.text
        self.http_method = tag.types[0]

        for name in parse_path_params(tag.text):
            self.parameters.append(Parameter.from_path_param(name))

    def add_response_type(self, type_: Type) -> None:
        if type_.ref:
            self.model_names.append(type_.name)
        self.response_type = type_

    def add_error_message(self, tag: Tag) -> None:
        try:
            code = int(tag.name)
        except (TypeError, ValueError):
            raise TagParseError(f"status code {tag.name!r} is not an integer", tag_name=tag.tag_name) from None

        self.error_messages.append(
            ErrorMessage(code=code, message=tag.text, response_model=tag.types[0] if tag.types else None)
        )

    def sort_parameters(self) -> None:
        self.parameters.sort(key=lambda p: p.name)

    def append_format_parameter(self) -> None:
        self.parameters.append(Parameter.format_parameter())

    @property
    def nickname(self) -> str:
        self._check_path()
        slug = NICKNAME_SEPARATOR_PATTERN.sub("-", self.path[1:])
        return slug + self.http_method.lower()

    def _check_path(self) -> None:
        if self.path is None or self.http_method is None:
            raise AnnotationError("operation is missing a @path tag", tag_name="path")

    @property
    def effective_summary(self) -> str | None:
        return self.summary or self.api.description

    def to_legacy_dict(self) -> dict:
        result = {
            "httpMethod": self.http_method,
            "nickname": self.nickname,
            "type": "void",
            "produces": list(get_settings().produces),
            "parameters": [p.to_legacy_dict() for p in self.parameters],
            "summary": self.effective_summary,
            "notes": self.notes,
            "responseMessages": [err.to_dict() for err in self.error_messages],
        }
        if self.response_type is not None:
            result.update(self.response_type.to_legacy_dict())
        return result

    def to_swagger_v2(self) -> dict:
        self._check_path()
        responses = {"default": {"description": self.effective_summary}}
        if self.response_type is not None:
            responses["default"]["schema"] = self.response_type.to_swagger_v2()

        for err in self.error_messages:
            response = {"description": err.message}
            if err.response_model is not None:
                response["schema"] = Type.parse(err.response_model).to_swagger_v2()
            responses[str(err.code)] = response

        op = {
            "summary": self.effective_summary,
            "tags": [self.api.resource] if self.api.resource else [],
            "parameters": [p.to_swagger_v2() for p in self.parameters],
            "responses": responses,
        }
        if self.notes:
            op["description"] = self.notes

        return {self.http_method.lower(): op}
