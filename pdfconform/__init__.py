"""PDF geometry, byte data, PDF versions and conformance rules for PDF/A and PDF/UA."""

__version__ = "0.1.0"

__all__ = [
    "configuration",
    "data",
    "errors",
    "geom",
    "validation_error",
    "validator",
    "version",
]