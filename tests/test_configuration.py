import pytest

from pdfconform.configuration import Configuration
from pdfconform.validator import Validator
from pdfconform.version import PdfVersion


def test_invalid_combination_1():
    with pytest.raises(ValueError):
        Configuration(Validator.A1_B, PdfVersion.PDF_17)


def test_default():
    config = Configuration()
    assert config.validator is Validator.NONE
    assert config.version is PdfVersion.PDF_17


@pytest.mark.parametrize("validator", list(Validator))
def test_for_validator_uses_recommended_version(validator):
    config = Configuration.for_validator(validator)
    assert config.validator is validator
    assert config.version is validator.recommended_version()


@pytest.mark.parametrize("version", list(PdfVersion))
def test_for_version(version):
    config = Configuration.for_version(version)
    assert config.validator is Validator.NONE
    assert config.version is version


def test_a4_requires_pdf20():
    assert Configuration(Validator.A4, PdfVersion.PDF_20).version is PdfVersion.PDF_20
    with pytest.raises(ValueError):
        Configuration(Validator.A4E, PdfVersion.PDF_17)


def test_equality():
    assert Configuration.for_validator(Validator.A2_B) == Configuration(
        Validator.A2_B, PdfVersion.PDF_17
    )