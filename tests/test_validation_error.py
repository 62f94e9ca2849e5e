import pytest

from pdfconform.validation_error import EmbedError, ValidationError, ValidationErrorKind


def test_simple_error_describes_limit():
    err = ValidationError(ValidationErrorKind.TOO_LONG_STRING)
    assert "32767" in err.describe()
    assert str(err) == err.describe()


def test_nesting_level_limit_in_description():
    err = ValidationError(ValidationErrorKind.TOO_HIGH_Q_NESTING_LEVEL)
    assert "28" in err.describe()


def test_errors_are_hashable_and_comparable():
    a = ValidationError(ValidationErrorKind.TRANSPARENCY, location=7)
    b = ValidationError(ValidationErrorKind.TRANSPARENCY, location=7)
    c = ValidationError(ValidationErrorKind.TRANSPARENCY, location=8)
    assert a == b
    assert a != c
    assert len({a, b, c}) == 2


def test_embedded_file_requires_embed_error():
    with pytest.raises(ValueError):
        ValidationError(ValidationErrorKind.EMBEDDED_FILE)


def test_embedded_file_description_mentions_problem():
    err = ValidationError(
        ValidationErrorKind.EMBEDDED_FILE, embed_error=EmbedError.MISSING_MIME_TYPE
    )
    assert "MIME type" in err.describe()


def test_codepoint_mapping_requires_glyph():
    with pytest.raises(ValueError):
        ValidationError(ValidationErrorKind.INVALID_CODEPOINT_MAPPING)


def test_codepoint_mapping_without_codepoint():
    err = ValidationError(ValidationErrorKind.INVALID_CODEPOINT_MAPPING, glyph=5)
    assert "no codepoint" in err.describe()
    assert "glyph 5" in err.describe()


def test_private_area_requires_codepoint():
    with pytest.raises(ValueError):
        ValidationError(ValidationErrorKind.UNICODE_PRIVATE_AREA, glyph=3)


def test_private_area_describes_codepoint():
    err = ValidationError(
        ValidationErrorKind.UNICODE_PRIVATE_AREA, glyph=3, codepoint="\ue000"
    )
    assert "U+E000" in err.describe()


def test_codepoint_must_be_single_char():
    with pytest.raises(ValueError):
        ValidationError(
            ValidationErrorKind.INVALID_CODEPOINT_MAPPING, glyph=1, codepoint="ab"
        )


def test_notdef_includes_text_and_location():
    err = ValidationError(
        ValidationErrorKind.CONTAINS_NOT_DEF_GLYPH, text="x", location="page 2"
    )
    description = err.describe()
    assert "'x'" in description
    assert "page 2" in description


def test_every_kind_without_extra_fields_describes():
    needs_more = {
        ValidationErrorKind.EMBEDDED_FILE,
        ValidationErrorKind.INVALID_CODEPOINT_MAPPING,
        ValidationErrorKind.UNICODE_PRIVATE_AREA,
    }
    descriptions = {
        ValidationError(kind).describe()
        for kind in ValidationErrorKind
        if kind not in needs_more
    }
    assert len(descriptions) == len(ValidationErrorKind) - len(needs_more)