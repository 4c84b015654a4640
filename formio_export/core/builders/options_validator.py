"""
Options validation for the export entry points.

Checks an options mapping against a declarative property schema: required
properties must be present, absent optional properties receive their
declared default, everything else passes through untouched.
"""
import copy
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from formio_export.core.exceptions import MissingRequiredFieldError


@dataclass(frozen=True)
class PropertySpec:
    """
    Schema entry for one option.

    ``type`` documents the expected value type and is not enforced.
    ``default`` is either a value, deep-copied on every use, or a
    zero-argument callable, called on every use.
    """

    type: Optional[type] = None
    required: bool = False
    default: Any = None

    @property
    def has_default(self) -> bool:
        return self.default is not None

    def make_default(self) -> Any:
        if callable(self.default):
            return self.default()
        return copy.deepcopy(self.default)


def verify_properties(
    options: Optional[Mapping[str, Any]],
    schema: Mapping[str, PropertySpec],
) -> Dict[str, Any]:
    """
    Validate options against a property schema.

    Args:
        options: Caller options; None is treated as empty
        schema: Property name -> PropertySpec

    Returns:
        New dict with defaults filled in

    Raises:
        MissingRequiredFieldError: A required property is missing or None
    """
    result = dict(options or {})

    for name, spec in schema.items():
        if result.get(name) is not None:
            continue
        if spec.required:
            raise MissingRequiredFieldError(name)
        if spec.has_default:
            result[name] = spec.make_default()

    return result
