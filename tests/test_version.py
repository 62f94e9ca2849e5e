import pytest

from pdfconform.version import PdfVersion


def test_ordering_follows_declaration():
    names = [PdfVersion.as_str(v) for v in sorted(PdfVersion)]
    assert names == ["PDF 1.4", "PDF 1.5", "PDF 1.6", "PDF 1.7", "PDF 2.0"]
    assert PdfVersion.PDF_14 < PdfVersion.PDF_20
    assert PdfVersion.PDF_17 >= PdfVersion.PDF_16
    assert not PdfVersion.PDF_15 > PdfVersion.PDF_16


@pytest.mark.parametrize(
    "version, name",
    [
        (PdfVersion.PDF_14, "PDF 1.4"),
        (PdfVersion.PDF_15, "PDF 1.5"),
        (PdfVersion.PDF_16, "PDF 1.6"),
        (PdfVersion.PDF_17, "PDF 1.7"),
        (PdfVersion.PDF_20, "PDF 2.0"),
    ],
)
def test_as_str(version, name):
    assert version.as_str() == name


@pytest.mark.parametrize(
    "version, xmp",
    [(PdfVersion.PDF_14, "1.4"), (PdfVersion.PDF_17, "1.7"), (PdfVersion.PDF_20, "2.0")],
)
def test_xmp_version(version, xmp):
    assert version.xmp_version() == xmp


@pytest.mark.parametrize(
    "version, header, xmp",
    [
        (PdfVersion.PDF_14, (1, 4), "1.4"),
        (PdfVersion.PDF_15, (1, 5), "1.5"),
        (PdfVersion.PDF_16, (1, 6), "1.6"),
        (PdfVersion.PDF_17, (1, 7), "1.7"),
        (PdfVersion.PDF_20, (2, 0), "2.0"),
    ],
)
def test_header_version_matches_xmp_version(version, header, xmp):
    assert tuple(PdfVersion.header_version(version)) == header
    assert PdfVersion.xmp_version(version) == xmp


def test_supports_icc():
    assert PdfVersion.PDF_14.supports_icc(2, 2)
    assert not PdfVersion.PDF_14.supports_icc(4, 0)
    assert PdfVersion.PDF_15.supports_icc(4, 3)
    assert not PdfVersion.PDF_16.supports_icc(4, 2)
    assert PdfVersion.PDF_17.supports_icc(4, 2)
    assert not PdfVersion.PDF_20.supports_icc(5, 0)


def test_supports_bit_depth():
    assert all(v.supports_bit_depth(8) for v in PdfVersion)
    assert not PdfVersion.PDF_14.supports_bit_depth(16)
    assert PdfVersion.PDF_15.supports_bit_depth(16)


def test_supports_bit_depth_rejects_unknown():
    with pytest.raises(ValueError):
        PdfVersion.PDF_17.supports_bit_depth(4)


@pytest.mark.parametrize(
    "version, expected",
    [
        (PdfVersion.PDF_14, False),
        (PdfVersion.PDF_15, False),
        (PdfVersion.PDF_16, False),
        (PdfVersion.PDF_17, False),
        (PdfVersion.PDF_20, True),
    ],
)
def test_deprecations_only_in_pdf20(version, expected):
    assert PdfVersion.deprecates_proc_sets(version) is expected
    assert PdfVersion.deprecates_cid_set(version) is expected