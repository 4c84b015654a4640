"""
Structure models for form.io exports.

A StructureEntry is one renderable unit: a component definition, one
submission's data and the render options that apply to it.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class SubmissionIdentity:
    """Identity metadata copied from a full form.io submission."""
    id: Any
    owner: Any = None
    modified: Any = None

    @classmethod
    def from_submission(cls, record: Dict[str, Any]) -> "SubmissionIdentity":
        return cls(
            id=record.get("_id"),
            owner=record.get("owner"),
            modified=record.get("modified"),
        )

    @classmethod
    def from_options(cls, options: Dict[str, Any]) -> Optional["SubmissionIdentity"]:
        """Read identity back from render options, if one was attached."""
        submission = options.get("submission")
        if not isinstance(submission, dict):
            return None
        return cls(
            id=submission.get("id"),
            owner=submission.get("owner"),
            modified=submission.get("modified"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "owner": self.owner, "modified": self.modified}


@dataclass
class StructureEntry:
    """
    Normalized renderable unit.

    Combines a component definition with one submission's data payload and
    the render options built for that submission.
    """

    component: Dict[str, Any]
    data: Dict[str, Any] = field(default_factory=dict)
    options: Dict[str, Any] = field(default_factory=dict)

    @property
    def identity(self) -> Optional[SubmissionIdentity]:
        return SubmissionIdentity.from_options(self.options)

    @property
    def title(self) -> str:
        """Heading for this entry: options title, then component title/label."""
        return (
            self.options.get("title")
            or self.component.get("title")
            or self.component.get("label")
            or ""
        )


@dataclass
class RenderedDocument:
    """Binary artifact returned by the PDF and XLSX renderers."""
    filename: str
    content: bytes
    media_type: str

    @property
    def size(self) -> int:
        return len(self.content)

    def save(self, directory: str = ".") -> Path:
        """Write the document into directory and return its path."""
        path = Path(directory) / self.filename
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "wb") as f:
            f.write(self.content)
        return path
