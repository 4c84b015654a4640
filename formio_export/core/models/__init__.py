"""Domain models for form.io exports."""

from formio_export.core.models.structure import (
    RenderedDocument,
    StructureEntry,
    SubmissionIdentity,
)

__all__ = [
    "RenderedDocument",
    "StructureEntry",
    "SubmissionIdentity",
]
