"""Builders for export options and render structures."""
from formio_export.core.builders.discriminators import (
    is_formio_form,
    is_formio_submission,
    is_formio_wizard,
)
from formio_export.core.builders.options_validator import (
    PropertySpec,
    verify_properties,
)
from formio_export.core.builders.structure_builder import (
    build_structure,
    normalize_component,
)

__all__ = [
    "is_formio_form",
    "is_formio_submission",
    "is_formio_wizard",
    "PropertySpec",
    "verify_properties",
    "build_structure",
    "normalize_component",
]
