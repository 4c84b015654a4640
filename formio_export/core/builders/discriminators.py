"""Shape checks for form.io component definitions and submissions."""
from typing import Any

SUBMISSION_IDENTITY_KEYS = ("_id", "owner", "modified")


def is_formio_form(component: Any) -> bool:
    """True for a whole-form definition."""
    if not isinstance(component, dict):
        return False
    return component.get("display") == "form" or component.get("type") == "form"


def is_formio_wizard(component: Any) -> bool:
    """True for a multi-page wizard definition."""
    if not isinstance(component, dict):
        return False
    return component.get("display") == "wizard"


def is_formio_submission(record: Any) -> bool:
    """True for a full submission object rather than raw data."""
    if not isinstance(record, dict):
        return False
    return all(key in record for key in SUBMISSION_IDENTITY_KEYS)
