"""Conformance standards a PDF document can be validated against."""

from __future__ import annotations

import enum
from typing import Optional, Union

from pdfconform.validation_error import EmbedError, ValidationError, ValidationErrorKind
from pdfconform.version import PdfVersion

_K = ValidationErrorKind


class OutputIntentSubtype(enum.Enum):
    """The subtype of an output intent dictionary."""

    PDFA = "GTS_PDFA1"
    PDFX = "GTS_PDFX"
    PDFE = "ISO_PDFE1"


class Validator(enum.Enum):
    """A validator for exporting documents to a specific subset of PDF."""

    NONE = "None"
    A1_A = "PDF/A1-A"
    A1_B = "PDF/A1-B"
    A2_A = "PDF/A2-A"
    A2_B = "PDF/A2-B"
    A2_U = "PDF/A2-U"
    A3_A = "PDF/A3-A"
    A3_B = "PDF/A3-B"
    A3_U = "PDF/A3-U"
    UA1 = "PDF/UA1"
    A4 = "PDF/A4"
    A4F = "PDF/A4f"
    A4E = "PDF/A4e"

    @property
    def _family(self) -> str:
        return _FAMILIES[self]

    def prohibits(self, error: ValidationError) -> bool:
        """Whether this standard forbids what `error` describes."""
        if self is Validator.NONE:
            return False
        kind = error.kind
        if kind is _K.INVALID_CODEPOINT_MAPPING:
            return self.requires_codepoint_mappings()
        if kind is _K.EMBEDDED_FILE:
            return self._prohibits_embed(error.embed_error)
        if kind is _K.UNICODE_PRIVATE_AREA:
            return self in _PROHIBITS_PRIVATE_AREA
        if kind is _K.NO_DOCUMENT_LANGUAGE:
            return self in _A_LEVEL
        if kind is _K.MISSING_TAGGING:
            return self in _A_LEVEL or self is Validator.UA1
        return kind in _ALWAYS_PROHIBITED[self._family]

    def _prohibits_embed(self, embed_error: Optional[EmbedError]) -> bool:
        family = self._family
        if embed_error is EmbedError.EXISTENCE:
            return family in ("a1", "a2") or self is Validator.A4
        if embed_error is EmbedError.MISSING_DESCRIPTION:
            return family in ("a3", "ua1") or self in (Validator.A4E, Validator.A4F)
        if embed_error in (EmbedError.MISSING_DATE, EmbedError.MISSING_MIME_TYPE):
            return family == "a3"
        raise ValueError(f"unknown embed error: {embed_error!r}")

    def compatible_with_version(self, pdf_version: PdfVersion) -> bool:
        """Whether this validator can be used with `pdf_version`."""
        family = self._family
        if family == "none":
            return True
        if family == "a1":
            return pdf_version <= PdfVersion.PDF_14
        if family == "a4":
            return pdf_version is PdfVersion.PDF_20
        return pdf_version <= PdfVersion.PDF_17

    def recommended_version(self) -> PdfVersion:
        """The PDF version best suited to this validator."""
        family = self._family
        if family == "a1":
            return PdfVersion.PDF_14
        if family == "a4":
            return PdfVersion.PDF_20
        return PdfVersion.PDF_17

    def is_pdf_a(self) -> bool:
        """Whether this is one of the PDF/A standards."""
        return self._family in ("a1", "a2", "a3", "a4")

    def xmp_identification(self) -> dict[str, Union[int, str]]:
        """The identification entries written into XMP metadata.

        Keys present are among "pdfa_part", "pdfa_rev", "pdfa_conformance"
        and "pdfua_part".
        """
        return dict(_XMP_IDENTIFICATION[self])

    def requires_codepoint_mappings(self) -> bool:
        """Whether every glyph must map to a valid codepoint."""
        family = self._family
        if family in ("none", "a1"):
            return False
        return self not in (Validator.A2_B, Validator.A3_B)

    def requires_display_doc_title(self) -> bool:
        """Whether viewers must be told to display the document title."""
        return self is Validator.UA1

    def requires_no_device_cs(self) -> bool:
        """Whether device-dependent color spaces are forbidden."""
        return self.is_pdf_a()

    def requires_tagging(self) -> bool:
        """Whether the document must be tagged."""
        return self in _A_LEVEL or self is Validator.UA1

    def xmp_metadata(self) -> bool:
        """Whether XMP metadata must be written."""
        return self is not Validator.NONE

    def requires_binary_header(self) -> bool:
        """Whether the file header must contain a binary marker."""
        return self.is_pdf_a()

    def requires_file_provenance_information(self) -> bool:
        """Whether file provenance information must be recorded."""
        return self.is_pdf_a()

    def prohibits_instance_id_in_xmp_metadata(self) -> bool:
        """Whether the XMP metadata must not contain an instance id."""
        return self._family == "a1"

    def output_intent(self) -> Optional[OutputIntentSubtype]:
        """The output intent subtype required, if any."""
        return OutputIntentSubtype.PDFA if self.is_pdf_a() else None

    def allows_info_dict(self) -> bool:
        """Whether a document info dictionary may be written."""
        return self._family != "a4"

    def write_embedded_files(self, is_empty: bool) -> bool:
        """Whether an EmbeddedFiles name tree should be written."""
        if self is Validator.A4F:
            return True
        return not is_empty

    def allows_associated_files(self) -> bool:
        """Whether embedded files are listed as associated files."""
        return self._family in ("a3", "a4")

    def as_str(self) -> str:
        """The name of the standard, e.g. "PDF/A2-B"."""
        return self.value


_FAMILIES = {
    Validator.NONE: "none",
    Validator.A1_A: "a1",
    Validator.A1_B: "a1",
    Validator.A2_A: "a2",
    Validator.A2_B: "a2",
    Validator.A2_U: "a2",
    Validator.A3_A: "a3",
    Validator.A3_B: "a3",
    Validator.A3_U: "a3",
    Validator.UA1: "ua1",
    Validator.A4: "a4",
    Validator.A4F: "a4",
    Validator.A4E: "a4",
}

_A_LEVEL = frozenset({Validator.A1_A, Validator.A2_A, Validator.A3_A})

_PROHIBITS_PRIVATE_AREA = frozenset(
    {Validator.A2_A, Validator.A3_A, Validator.A4, Validator.A4F, Validator.A4E}
)

_A2_A3_PROHIBITED = frozenset(
    {
        _K.TOO_LONG_STRING,
        _K.TOO_LONG_NAME,
        _K.TOO_MANY_INDIRECT_OBJECTS,
        _K.TOO_HIGH_Q_NESTING_LEVEL,
        _K.CONTAINS_POSTSCRIPT,
        _K.MISSING_CMYK_PROFILE,
        _K.CONTAINS_NOT_DEF_GLYPH,
        _K.IMAGE_INTERPOLATION,
        _K.MISSING_DOCUMENT_DATE,
    }
)

_ALWAYS_PROHIBITED = {
    "none": frozenset(),
    "a1": frozenset(
        {
            _K.TOO_LONG_STRING,
            _K.TOO_LONG_NAME,
            _K.TOO_LONG_ARRAY,
            _K.TOO_LARGE_FLOAT,
            _K.TOO_LONG_DICTIONARY,
            _K.TOO_MANY_INDIRECT_OBJECTS,
            _K.TOO_HIGH_Q_NESTING_LEVEL,
            _K.CONTAINS_POSTSCRIPT,
            _K.MISSING_CMYK_PROFILE,
            _K.TRANSPARENCY,
            _K.IMAGE_INTERPOLATION,
            _K.MISSING_DOCUMENT_DATE,
        }
    ),
    "a2": _A2_A3_PROHIBITED,
    "a3": _A2_A3_PROHIBITED,
    "a4": frozenset(
        {
            _K.MISSING_CMYK_PROFILE,
            _K.CONTAINS_NOT_DEF_GLYPH,
            _K.IMAGE_INTERPOLATION,
            _K.MISSING_DOCUMENT_DATE,
        }
    ),
    "ua1": frozenset(
        {
            _K.CONTAINS_NOT_DEF_GLYPH,
            _K.NO_DOCUMENT_TITLE,
            _K.MISSING_ALT_TEXT,
            _K.MISSING_HEADING_TITLE,
            _K.MISSING_DOCUMENT_OUTLINE,
            _K.MISSING_ANNOTATION_ALT_TEXT,
        }
    ),
}

_XMP_IDENTIFICATION: dict[Validator, dict[str, Union[int, str]]] = {
    Validator.NONE: {},
    Validator.A1_A: {"pdfa_part": 1, "pdfa_conformance": "A"},
    Validator.A1_B: {"pdfa_part": 1, "pdfa_conformance": "B"},
    Validator.A2_A: {"pdfa_part": 2, "pdfa_conformance": "A"},
    Validator.A2_B: {"pdfa_part": 2, "pdfa_conformance": "B"},
    Validator.A2_U: {"pdfa_part": 2, "pdfa_conformance": "U"},
    Validator.A3_A: {"pdfa_part": 3, "pdfa_conformance": "A"},
    Validator.A3_B: {"pdfa_part": 3, "pdfa_conformance": "B"},
    Validator.A3_U: {"pdfa_part": 3, "pdfa_conformance": "U"},
    Validator.A4: {"pdfa_part": 4, "pdfa_rev": 2020},
    Validator.A4F: {"pdfa_part": 4, "pdfa_rev": 2020, "pdfa_conformance": "F"},
    Validator.A4E: {"pdfa_part": 4, "pdfa_rev": 2020, "pdfa_conformance": "E"},
    Validator.UA1: {"pdfua_part": 1},
}