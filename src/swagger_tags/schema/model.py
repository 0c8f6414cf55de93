"""Complex schema objects declared with ``@model`` / ``@property`` tags.

A Model carries its id (normally the class name) and an ordered list of
properties. Properties may point at other models by name, so the full set
of models forms a directed, possibly cyclic, reference graph.
"""

import logging

from pydantic import BaseModel

from swagger_tags.errors import MissingModelIdError, TagParseError
from swagger_tags.parser.base import Declaration, Tag
from swagger_tags.schema.property import Property

logger = logging.getLogger(__name__)


class Model(BaseModel):
    id: str | None = None
    properties: list[Property] = []

    @classmethod
    def from_declarations(cls, declarations: list[Declaration]) -> "Model | None":
        """Build a Model from the first class declaration, if there is one."""
        declaration = next((d for d in declarations if d.type == "class"), None)
        if declaration is None:
            logger.warning("No class declaration among %d declarations, no model built", len(declarations))
            return None
        return cls.from_declaration(declaration)

    @classmethod
    def from_declaration(cls, declaration: Declaration) -> "Model":
        try:
            model = cls.from_tags(declaration.tags)
        except TagParseError as exc:
            exc.declaration = declaration.path
            raise
        logger.debug("Built model %s with %d properties", model.id, len(model.properties))
        return model

    @classmethod
    def from_tags(cls, tags: list[Tag]) -> "Model":
        return cls().parse_tags(tags)

    def parse_tags(self, tags: list[Tag]) -> "Model":
        for tag in tags:
            if tag.tag_name == "model":
                if self.id is None:
                    self.id = tag.text
            elif tag.tag_name == "property":
                self.properties.append(Property.from_tag(tag))
        return self

    @property
    def valid(self) -> bool:
        return self.id is not None

    @property
    def properties_model_names(self) -> list[str]:
        names = []
        for prop in self.properties:
            if prop.model_name is not None and prop.model_name not in names:
                names.append(prop.model_name)
        return names

    @property
    def required_names(self) -> list[str]:
        return [prop.name for prop in self.properties if prop.required]

    def recursive_model_names(self, models: list["Model"]) -> list[str]:
        """All model ids reachable through properties, each listed once.

        Direct names come first, then each child's names depth first. Names
        missing from ``models`` are kept but not expanded. This model's own
        id is never reported, even when a cycle leads back to it.
        """
        index: dict[str, Model] = {}
        for model in models:
            if model.id is not None:
                index.setdefault(model.id, model)

        names: list[str] = []
        self._collect_model_names(index, names, {self.id})
        return names

    def _collect_model_names(self, index: dict[str, "Model"], names: list[str], seen: set) -> None:
        direct = [name for name in self.properties_model_names if name not in seen]
        seen.update(direct)
        names.extend(direct)
        for name in direct:
            child = index.get(name)
            if child is not None:
                child._collect_model_names(index, names, seen)

    def to_legacy_dict(self) -> dict:
        if self.id is None:
            raise MissingModelIdError("model is missing a @model tag", tag_name="model")

        return {
            "id": self.id,
            "properties": {prop.name: prop.to_legacy_dict() for prop in self.properties},
            "required": self.required_names,
        }

    def to_swagger_v2(self) -> dict:
        return {
            "properties": {prop.name: prop.to_swagger_v2() for prop in self.properties},
            "required": self.required_names,
        }
