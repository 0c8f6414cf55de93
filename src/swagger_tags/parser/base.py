"""Input models handed over by the annotation extractor.

Whatever walks the source tree converts each annotated declaration into
these models; everything downstream only ever reads them.
"""

from pydantic import BaseModel, ConfigDict


class Tag(BaseModel):
    """A single annotation tag, e.g. ``@parameter [Integer] id(required) Widget ID``."""

    tag_name: str  # path / parameter / parameter_list / model / property / ...
    text: str = ""
    name: str | None = None  # "id(required)", "404", ...
    types: list[str] = []


class Declaration(BaseModel):
    """An annotated source entity (a class or a method)."""

    type: str  # class / method
    tags: list[Tag] = []
    path: str | None = None  # WidgetsController#index

    def tags_named(self, tag_name: str) -> list[Tag]:
        return [tag for tag in self.tags if tag.tag_name == tag_name]


class ApiContext(BaseModel):
    """The API resource that owns a group of operations."""

    model_config = ConfigDict(frozen=True)

    description: str | None = None  # fallback summary
    resource: str | None = None  # v2 grouping tag
