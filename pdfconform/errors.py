"""Exceptions raised while producing a PDF document."""

from __future__ import annotations

from typing import Any, Iterable, Optional

from pdfconform.validation_error import ValidationError


class PdfError(Exception):
    """Base class of all errors raised while writing a document."""

    def _key(self) -> tuple:
        return self.args

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash((type(self), self._key()))


def _at(location: Optional[Any]) -> str:
    return "" if location is None else f" at {location}"


class FontError(PdfError):
    """A font could not be embedded."""

    def __init__(self, font: Any, message: str) -> None:
        super().__init__(f"failed to embed font {font}: {message}")
        self.font = font
        self.message = message

    def _key(self) -> tuple:
        return (self.font, self.message)


class ValidationFailed(PdfError):
    """The document violates the chosen conformance standard."""

    def __init__(self, errors: Iterable[ValidationError]) -> None:
        self.errors = tuple(errors)
        lines = "; ".join(e.describe() for e in self.errors)
        super().__init__(f"validation failed with {len(self.errors)} error(s): {lines}")

    def _key(self) -> tuple:
        return self.errors


class DuplicateTagId(PdfError):
    """The same tag id was used more than once."""

    def __init__(self, tag_id: Any, location: Optional[Any] = None) -> None:
        super().__init__(f"duplicate tag id {tag_id}{_at(location)}")
        self.tag_id = tag_id
        self.location = location

    def _key(self) -> tuple:
        return (self.tag_id, self.location)


class UnknownTagId(PdfError):
    """A tag id was not found in the tag tree."""

    def __init__(self, tag_id: Any, location: Optional[Any] = None) -> None:
        super().__init__(f"unknown tag id {tag_id}{_at(location)}")
        self.tag_id = tag_id
        self.location = location

    def _key(self) -> tuple:
        return (self.tag_id, self.location)


class ImageError(PdfError):
    """An image could not be processed."""

    def __init__(self, image: Any, location: Optional[Any] = None) -> None:
        super().__init__(f"failed to process image {image}{_at(location)}")
        self.image = image
        self.location = location

    def _key(self) -> tuple:
        return (self.image, self.location)


class SixteenBitImageError(PdfError):
    """A 16-bit image was used with a PDF version that does not support it."""

    def __init__(self, image: Any, location: Optional[Any] = None) -> None:
        super().__init__(
            f"sixteen-bit image {image} requires PDF 1.5 or later{_at(location)}"
        )
        self.image = image
        self.location = location

    def _key(self) -> tuple:
        return (self.image, self.location)