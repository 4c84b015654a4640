"""Export port interfaces.

Defines the contracts for the HTML, PDF and XLSX renderers. Core code
depends only on these abstractions, not on Gotenberg or openpyxl.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from formio_export.core.models.structure import StructureEntry


class HtmlRendererPort(ABC):
    """Abstract interface for rendering structure entries to HTML.

    Implementations: StructureHtmlRenderer
    """

    @abstractmethod
    async def render_html(self, structure: List[StructureEntry]) -> str:
        """Render structure entries.

        Args:
            structure: Entries in output order

        Returns:
            HTML source
        """
        pass


class PdfRendererPort(ABC):
    """Abstract interface for HTML to PDF conversion.

    Implementations: GotenbergAdapter
    """

    @abstractmethod
    async def render_pdf(self, config: Dict[str, Any]) -> Any:
        """Convert HTML to PDF.

        Args:
            config: Renderer configuration; ``source`` holds the HTML

        Returns:
            Renderer-specific PDF artifact
        """
        pass


class XlsxRendererPort(ABC):
    """Abstract interface for spreadsheet export.

    Implementations: OpenpyxlXlsxRenderer
    """

    @abstractmethod
    async def render_xlsx(self, config: Dict[str, Any]) -> Any:
        """Build a spreadsheet from configuration alone.

        Args:
            config: Renderer configuration (sheets, columns, rows, filename)

        Returns:
            Renderer-specific spreadsheet artifact
        """
        pass
