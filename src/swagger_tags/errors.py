"""Errors raised while turning annotation tags into schema objects."""


class AnnotationError(Exception):
    """Base error, carrying enough context to locate the offending annotation."""

    def __init__(self, message: str, tag_name: str | None = None, declaration: str | None = None):
        super().__init__(message)
        self.message = message
        self.tag_name = tag_name
        self.declaration = declaration

    def __str__(self) -> str:
        location = " ".join(
            part for part in (self.declaration, f"@{self.tag_name}" if self.tag_name else None) if part
        )
        if location:
            return f"{location}: {self.message}"
        return self.message


class TagParseError(AnnotationError):
    """A tag body or name does not follow its expected grammar."""


class MissingModelIdError(AnnotationError):
    """A Model was serialized without ever receiving a @model tag."""
