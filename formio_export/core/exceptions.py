"""Core domain exceptions.

All exceptions raised by core logic inherit from CoreError.
Adapters catch provider-specific errors and re-raise as these.
"""


class CoreError(Exception):
    """Base for all core domain errors."""
    pass


class ValidationError(CoreError):
    """Export options failed validation."""
    pass


class MissingRequiredFieldError(ValidationError):
    """A required export option was not supplied."""

    def __init__(self, field: str):
        super().__init__(f"Missing required property: {field}")
        self.field = field


class RendererError(CoreError):
    """An HTML, PDF or XLSX renderer failed."""
    pass
