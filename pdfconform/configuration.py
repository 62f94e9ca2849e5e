"""A pairing of conformance validator and PDF version."""

from __future__ import annotations

from dataclasses import dataclass

from pdfconform.validator import Validator
from pdfconform.version import PdfVersion


@dataclass(frozen=True)
class Configuration:
    """A validator together with a compatible PDF version.

    Raises ValueError if the two are not compatible.
    """

    validator: Validator = Validator.NONE
    version: PdfVersion = PdfVersion.PDF_17

    def __post_init__(self) -> None:
        if not self.validator.compatible_with_version(self.version):
            raise ValueError(
                f"{self.validator.as_str()} is not compatible with {self.version.as_str()}"
            )

    @classmethod
    def for_validator(cls, validator: Validator) -> Configuration:
        """A configuration using the validator's recommended PDF version."""
        return cls(validator, validator.recommended_version())

    @classmethod
    def for_version(cls, version: PdfVersion) -> Configuration:
        """A configuration with the given PDF version and no validator."""
        return cls(Validator.NONE, version)