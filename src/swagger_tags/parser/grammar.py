"""Micro-grammars embedded in tag names and tag bodies."""

import re
from typing import NamedTuple

from swagger_tags.errors import TagParseError

FORMAT_PARAM_NAME = "format_type"

# /api/v1/accounts/{account_id}.{format_type}
PATH_PARAM_PATTERN = re.compile(r"\{(?P<name>[^}]+)\}")

# status(required, body)
NAME_OPTIONS_PATTERN = re.compile(r"\A(?P<name>[^()]*)(?:\((?P<options>[^)]*)\))?")

# [String] sort_order(required) Orders widgets by field.
# [List] id
# [List] created_at
PARAMETER_LIST_PATTERN = re.compile(
    r"\A\[(?P<type>\w*)\]\s*(?P<name>\w*)(?P<required>\(required\))?\s*(?P<description>.*)\n(?P<values>[\s\S]*)\Z"
)

LIST_VALUE_MARKER = "[List]"


class ParameterListMatch(NamedTuple):
    data_type: str
    name: str
    required: bool
    description: str
    allowable_values: list[str]


def parse_path_params(path: str) -> list[str]:
    """Return placeholder names of a path template in order, except ``format_type``."""
    return [
        match.group("name")
        for match in PATH_PARAM_PATTERN.finditer(path)
        if match.group("name") != FORMAT_PARAM_NAME
    ]


def split_name_options(raw: str) -> tuple[str, list[str]]:
    """Split ``"status(required, body)"`` into ``("status", ["required", "body"])``."""
    match = NAME_OPTIONS_PATTERN.match(raw)
    name = match.group("name").strip()
    options_string = match.group("options")
    if options_string is None:
        return name, []
    options = [option.strip() for option in options_string.split(",")]
    return name, [option for option in options if option]


def parse_parameter_list(text: str) -> ParameterListMatch:
    """Parse the compact ``@parameter_list`` shorthand.

    The first line holds the bracketed type, the name, an optional
    ``(required)`` marker and the description; every following
    ``[List]`` entry is one allowable value.
    """
    match = PARAMETER_LIST_PATTERN.match(text)
    if match is None:
        raise TagParseError(
            f"expected '[Type] name(required)? description' followed by [List] lines, got {text!r}",
            tag_name="parameter_list",
        )

    return ParameterListMatch(
        data_type=match.group("type"),
        name=match.group("name"),
        required=match.group("required") is not None,
        description=match.group("description").strip(),
        allowable_values=parse_list_values(match.group("values")),
    )


def parse_list_values(values: str) -> list[str]:
    return [value.strip() for value in values.split(LIST_VALUE_MARKER) if value.strip()]
