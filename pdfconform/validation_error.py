"""Violations of a PDF conformance standard found while writing a document."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Optional


class EmbedError(enum.Enum):
    """A problem with an embedded file."""

    EXISTENCE = "existence"
    MISSING_DATE = "missing_date"
    MISSING_DESCRIPTION = "missing_description"
    MISSING_MIME_TYPE = "missing_mime_type"


class ValidationErrorKind(enum.Enum):
    """The kind of a validation error."""

    TOO_LONG_STRING = "too_long_string"
    TOO_LONG_NAME = "too_long_name"
    TOO_LONG_ARRAY = "too_long_array"
    TOO_LONG_DICTIONARY = "too_long_dictionary"
    TOO_LARGE_FLOAT = "too_large_float"
    TOO_MANY_INDIRECT_OBJECTS = "too_many_indirect_objects"
    TOO_HIGH_Q_NESTING_LEVEL = "too_high_q_nesting_level"
    CONTAINS_POSTSCRIPT = "contains_postscript"
    MISSING_CMYK_PROFILE = "missing_cmyk_profile"
    CONTAINS_NOT_DEF_GLYPH = "contains_not_def_glyph"
    INVALID_CODEPOINT_MAPPING = "invalid_codepoint_mapping"
    UNICODE_PRIVATE_AREA = "unicode_private_area"
    NO_DOCUMENT_LANGUAGE = "no_document_language"
    NO_DOCUMENT_TITLE = "no_document_title"
    MISSING_ALT_TEXT = "missing_alt_text"
    MISSING_HEADING_TITLE = "missing_heading_title"
    MISSING_DOCUMENT_OUTLINE = "missing_document_outline"
    MISSING_ANNOTATION_ALT_TEXT = "missing_annotation_alt_text"
    MISSING_DOCUMENT_DATE = "missing_document_date"
    TRANSPARENCY = "transparency"
    IMAGE_INTERPOLATION = "image_interpolation"
    EMBEDDED_FILE = "embedded_file"
    MISSING_TAGGING = "missing_tagging"


_K = ValidationErrorKind

_MESSAGES = {
    _K.TOO_LONG_STRING: "a string is longer than the maximum allowed length (32767)",
    _K.TOO_LONG_NAME: "a name is longer than the maximum allowed length (127)",
    _K.TOO_LONG_ARRAY: "an array is longer than the maximum allowed length (8191)",
    _K.TOO_LONG_DICTIONARY: "a dictionary has more entries than allowed (4095)",
    _K.TOO_LARGE_FLOAT: "a float is larger than the maximum allowed (32767)",
    _K.TOO_MANY_INDIRECT_OBJECTS: "too many indirect objects (limit 8388607)",
    _K.TOO_HIGH_Q_NESTING_LEVEL: "q/Q nesting level exceeds the maximum (28)",
    _K.CONTAINS_POSTSCRIPT: "the document contains PostScript code",
    _K.MISSING_CMYK_PROFILE: "a CMYK color was used but no CMYK ICC profile was provided",
    _K.CONTAINS_NOT_DEF_GLYPH: "the .notdef glyph was used",
    _K.INVALID_CODEPOINT_MAPPING: "a glyph has an invalid codepoint mapping",
    _K.UNICODE_PRIVATE_AREA: "a glyph is mapped to the Unicode private use area",
    _K.NO_DOCUMENT_LANGUAGE: "no document language was set",
    _K.NO_DOCUMENT_TITLE: "no document title was set",
    _K.MISSING_ALT_TEXT: "a figure or formula is missing an alt text",
    _K.MISSING_HEADING_TITLE: "a heading is missing a title",
    _K.MISSING_DOCUMENT_OUTLINE: "the document has no outline",
    _K.MISSING_ANNOTATION_ALT_TEXT: "an annotation is missing an alt text",
    _K.MISSING_DOCUMENT_DATE: "the document date is missing",
    _K.TRANSPARENCY: "the document contains transparency",
    _K.IMAGE_INTERPOLATION: "an image has interpolation enabled",
    _K.EMBEDDED_FILE: "the document contains an embedded file",
    _K.MISSING_TAGGING: "the document is not tagged",
}

_EMBED_MESSAGES = {
    EmbedError.EXISTENCE: "embedded files are not allowed",
    EmbedError.MISSING_DATE: "modification date is missing",
    EmbedError.MISSING_DESCRIPTION: "description is missing",
    EmbedError.MISSING_MIME_TYPE: "MIME type is missing",
}

_NEEDS_GLYPH = {_K.INVALID_CODEPOINT_MAPPING, _K.UNICODE_PRIVATE_AREA}


@dataclass(frozen=True)
class ValidationError:
    """A single validation error.

    Only the fields meaningful for `kind` are set: `font`, `glyph`, `codepoint`
    and `text` for glyph problems, `embed_error` for embedded files and
    `location` wherever the source position is known.
    """

    kind: ValidationErrorKind
    location: Optional[Any] = None
    font: Optional[Any] = None
    glyph: Optional[int] = None
    codepoint: Optional[str] = None
    text: Optional[str] = None
    embed_error: Optional[EmbedError] = None

    def __post_init__(self) -> None:
        if self.kind is _K.EMBEDDED_FILE and self.embed_error is None:
            raise ValueError("an embedded file error needs an embed_error")
        if self.kind in _NEEDS_GLYPH and self.glyph is None:
            raise ValueError(f"{self.kind.value} needs a glyph id")
        if self.kind is _K.UNICODE_PRIVATE_AREA and self.codepoint is None:
            raise ValueError("unicode_private_area needs a codepoint")
        if self.codepoint is not None and len(self.codepoint) != 1:
            raise ValueError("codepoint must be a single character")

    def describe(self) -> str:
        """A human-readable description of the error."""
        message = _MESSAGES[self.kind]
        details = []
        if self.kind is _K.EMBEDDED_FILE and self.embed_error is not None:
            details.append(_EMBED_MESSAGES[self.embed_error])
        if self.glyph is not None:
            details.append(f"glyph {self.glyph}")
        if self.kind is _K.INVALID_CODEPOINT_MAPPING:
            if self.codepoint is None:
                details.append("no codepoint")
            else:
                details.append(f"U+{ord(self.codepoint):04X}")
        elif self.codepoint is not None:
            details.append(f"U+{ord(self.codepoint):04X}")
        if self.text is not None:
            details.append(f"text {self.text!r}")
        if self.font is not None:
            details.append(f"font {self.font}")
        if self.location is not None:
            details.append(f"at {self.location}")
        if details:
            message = f"{message} ({', '.join(details)})"
        return message

    def __str__(self) -> str:
        return self.describe()