"""PDF versions and the features each version supports."""

from __future__ import annotations

import enum


class PdfVersion(enum.Enum):
    """The version of a PDF document, ordered from oldest to newest."""

    PDF_14 = (1, 4)
    PDF_15 = (1, 5)
    PDF_16 = (1, 6)
    PDF_17 = (1, 7)
    PDF_20 = (2, 0)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PdfVersion):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, PdfVersion):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, PdfVersion):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, PdfVersion):
            return NotImplemented
        return self.value >= other.value

    def as_str(self) -> str:
        """A human-readable name such as "PDF 1.7"."""
        return f"PDF {self.xmp_version()}"

    def xmp_version(self) -> str:
        """The version number as written into XMP metadata, e.g. "1.7"."""
        major, minor = self.value
        return f"{major}.{minor}"

    def header_version(self) -> tuple[int, int]:
        """The (major, minor) pair written into the file header."""
        return self.value

    def supports_icc(self, major: int, minor: int) -> bool:
        """Whether an ICC profile of the given version may be embedded."""
        if self is PdfVersion.PDF_14:
            return major <= 2 and minor <= 2
        if self is PdfVersion.PDF_15:
            return major <= 4
        if self is PdfVersion.PDF_16:
            return major <= 4 and minor <= 1
        return major <= 4 and minor <= 2

    def supports_bit_depth(self, bits_per_component: int) -> bool:
        """Whether images with 8 or 16 bits per component are allowed."""
        if bits_per_component == 8:
            return True
        if bits_per_component == 16:
            return self >= PdfVersion.PDF_15
        raise ValueError(f"unsupported bits per component: {bits_per_component!r}")

    def deprecates_proc_sets(self) -> bool:
        """Whether procedure sets are deprecated in this version."""
        return self >= PdfVersion.PDF_20

    def deprecates_cid_set(self) -> bool:
        """Whether the CIDSet entry is deprecated in this version."""
        return self >= PdfVersion.PDF_20