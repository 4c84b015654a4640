"""
Structure builder.

Turns a list of export items into one StructureEntry per submission.

Each export item is a mapping::

    {"component": {...}, "submission": [record, ...], "option": {...}}

Form and wizard definitions are normalized to ``type``/``display`` "form".
Full submissions get their identity attached to a per-submission copy of the
item's options, so identities never leak between submissions.
"""
import copy
import logging
from typing import Any, Dict, Iterable, List, Mapping

from formio_export.core.builders.discriminators import (
    is_formio_form,
    is_formio_submission,
    is_formio_wizard,
)
from formio_export.core.models.structure import StructureEntry, SubmissionIdentity
from formio_export.core.ports.components import ComponentFactoryPort

logger = logging.getLogger(__name__)

COMPONENT_ID = "FormioExport"
NO_COMPONENT_MESSAGE = "no component defined"


def normalize_component(component: Dict[str, Any]) -> Dict[str, Any]:
    """Collapse form and wizard definitions to the canonical "form" type.

    Returns a shallow copy when normalization applies; the caller's
    definition is left as is.
    """
    if is_formio_form(component) or is_formio_wizard(component):
        component = dict(component)
        component["type"] = "form"
        component["display"] = "form"
    return component


def _submission_records(submissions: Any) -> List[Any]:
    if submissions is None:
        return []
    if isinstance(submissions, dict):
        return [submissions]
    return list(submissions)


def _submission_payload(record: Any) -> Any:
    """Data payload of a record: its ``data`` key, else the record itself."""
    if isinstance(record, dict) and "data" in record:
        return record["data"]
    return record


def build_options(base_options: Mapping[str, Any], record: Any) -> Dict[str, Any]:
    """Copy base options and attach identity for full submissions."""
    options = copy.deepcopy(dict(base_options or {}))
    if is_formio_submission(record):
        options["submission"] = SubmissionIdentity.from_submission(record).to_dict()
    return options


def build_structure(
    items: Iterable[Mapping[str, Any]],
    factory: ComponentFactoryPort,
) -> List[StructureEntry]:
    """
    Build structure entries for all export items.

    Args:
        items: Export items in output order
        factory: Component factory invoked once per submission

    Returns:
        StructureEntry list in item order, then submission order
    """
    structure: List[StructureEntry] = []

    for index, item in enumerate(items or []):
        component = item.get("component")
        if not isinstance(component, dict):
            logger.warning(
                f"{COMPONENT_ID}: {NO_COMPONENT_MESSAGE}",
                extra={"component_id": COMPONENT_ID, "entry_index": index},
            )
            continue

        component = normalize_component(component)
        base_options = item.get("option") or {}

        for record in _submission_records(item.get("submission")):
            options = build_options(base_options, record)
            structure.append(
                factory.create(component, _submission_payload(record), options)
            )

    logger.debug(f"Built {len(structure)} structure entries")
    return structure
