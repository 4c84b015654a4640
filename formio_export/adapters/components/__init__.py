"""Component factory adapters."""
from formio_export.adapters.components.factory import DefaultComponentFactory

__all__ = ["DefaultComponentFactory"]
