# pdfconform

Building blocks for writing PDF files that conform to a chosen standard:

- **Geometry** (`pdfconform.geom`): `Point`, `Size`, `Rect`,
  `Quadrilateral`, `Transform`, and `Path` / `PathBuilder` for building
  vector paths made of `PathSegment`s with a `PathVerb` each.
- **Byte data** (`pdfconform.data`): `Data`, an immutable holder of bytes
  that is compared and hashed by content.
- **PDF versions** (`pdfconform.version`): `PdfVersion`, ordered from
  `PDF_14` to `PDF_20`, with the features each version supports
  (ICC profile versions, 16-bit images, deprecated entries).
- **Validation errors** (`pdfconform.validation_error`): `ValidationError`
  with a `ValidationErrorKind` and, for embedded files, an `EmbedError`.
- **Conformance rules** (`pdfconform.validator`): `Validator` for PDF/A-1
  to PDF/A-4 and PDF/UA-1. It says which validation errors each standard
  forbids and what it requires (tagging, XMP metadata, binary header,
  output intent, and so on).
- **Configuration** (`pdfconform.configuration`): `Configuration`, a
  validator paired with a PDF version; incompatible pairs raise
  `ValueError`.
- **Errors** (`pdfconform.errors`): exceptions derived from `PdfError`,
  such as `ValidationFailed`, `FontError` and `DuplicateTagId`.

## Installation

```
pip install pdfconform
```

## Usage

```python
from pdfconform.configuration import Configuration
from pdfconform.validator import Validator
from pdfconform.version import PdfVersion

config = Configuration.for_validator(Validator.A2_B)
print(config.version.as_str())          # "PDF 1.7"

# PDF/A-1 requires PDF 1.4 or earlier.
print(Validator.A1_B.compatible_with_version(PdfVersion.PDF_17))  # False

Configuration(Validator.A1_B, PdfVersion.PDF_17)  # raises ValueError
```

Checking what a standard forbids:

```python
from pdfconform.errors import ValidationFailed
from pdfconform.validation_error import ValidationError, ValidationErrorKind
from pdfconform.validator import Validator

error = ValidationError(ValidationErrorKind.TRANSPARENCY)
print(Validator.A1_B.prohibits(error))  # True
print(Validator.A2_B.prohibits(error))  # False

raise ValidationFailed([error])
```

Geometry:

```python
from pdfconform.geom import PathBuilder, Transform

builder = PathBuilder()
builder.move_to(0, 0)
builder.line_to(100, 0)
builder.line_to(100, 50)
builder.close()
path = builder.finish()

moved = path.transform(Transform.from_translate(10, 10))
print(moved.bounds())  # Rect(left=10.0, top=10.0, right=110.0, bottom=60.0)
```

## What this package does not do

It does not write PDF files. There is no document, page or content-stream
writer, no font or image embedding, and no XMP serialisation; the package
supplies the geometry, version and conformance rules such a writer would
consult, and the errors it would raise.

## Running the tests

```
pip install -e ".[test]"
pytest
```