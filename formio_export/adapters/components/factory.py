"""
Default component factory.

Implements ComponentFactoryPort by snapshotting the submission data and
render options into a StructureEntry.
"""
import copy
from typing import Any, Dict

from formio_export.core.models.structure import StructureEntry
from formio_export.core.ports.components import ComponentFactoryPort


class DefaultComponentFactory(ComponentFactoryPort):
    """Builds plain StructureEntry objects."""

    def create(
        self,
        component: Dict[str, Any],
        data: Any,
        options: Dict[str, Any],
    ) -> StructureEntry:
        return StructureEntry(
            component=component,
            data=copy.deepcopy(data) if data is not None else {},
            options=copy.deepcopy(options),
        )
