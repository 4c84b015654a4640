"""Component factory port.

Turns a component definition plus one submission's data into a
StructureEntry. Core code depends only on this abstraction.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict

from formio_export.core.models.structure import StructureEntry


class ComponentFactoryPort(ABC):
    """Abstract interface for building structure entries.

    Implementations: DefaultComponentFactory
    """

    @abstractmethod
    def create(
        self,
        component: Dict[str, Any],
        data: Any,
        options: Dict[str, Any],
    ) -> StructureEntry:
        """Build one renderable unit.

        Args:
            component: Normalized component definition
            data: Submission data payload
            options: Render options for this submission

        Returns:
            StructureEntry ready for rendering
        """
        pass
