"""
HTML renderer for form.io submissions.

Implements HtmlRendererPort. Each StructureEntry becomes one section with a
field/value table built by walking the component tree; layout components
contribute section headings, input components contribute rows.

The output is a complete HTML document ready for Gotenberg PDF conversion.
"""
import html as html_lib
import logging
from typing import Any, Dict, List, Optional

from formio_export.adapters.export import styles
from formio_export.core.models.structure import StructureEntry
from formio_export.core.ports.export import HtmlRendererPort

logger = logging.getLogger(__name__)

SECTION_TYPES = ("panel", "fieldset", "well")
GRID_TYPES = ("datagrid", "editgrid")
NON_DATA_TYPES = ("button", "content", "htmlelement")


def escape(text: Any) -> str:
    """Escape HTML special characters."""
    if text is None or text == "":
        return ""
    return html_lib.escape(str(text))


def format_value(value: Any, component_type: Optional[str] = None) -> str:
    """Format a submission value as escaped HTML."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if component_type == "selectboxes" and isinstance(value, dict):
        return escape(", ".join(str(k) for k, checked in value.items() if checked))
    if isinstance(value, dict):
        return "<br>".join(
            f"{escape(k)}: {format_value(v)}" for k, v in value.items()
        )
    if isinstance(value, list):
        if any(isinstance(item, dict) for item in value):
            return "<br>".join(format_value(item) for item in value)
        return escape(", ".join(str(item) for item in value))
    return escape(value)


def _label(component: Dict[str, Any]) -> str:
    return (
        component.get("label")
        or component.get("legend")
        or component.get("title")
        or component.get("key")
        or ""
    )


def _children(component: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Child components across components/columns/rows layouts."""
    children = list(component.get("components") or [])
    for column in component.get("columns") or []:
        children.extend(column.get("components") or [])
    for row in component.get("rows") or []:
        for cell in row or []:
            if isinstance(cell, dict):
                children.extend(cell.get("components") or [])
    return children


def _is_layout(component: Dict[str, Any]) -> bool:
    if component.get("type") in GRID_TYPES:
        return False
    return bool(
        component.get("components") or component.get("columns") or component.get("rows")
    )


def render_component_rows(
    component: Dict[str, Any],
    data: Dict[str, Any],
    lines: List[str],
) -> None:
    """Append table rows for component and its descendants."""
    component_type = component.get("type")
    if component.get("hidden") or component_type in NON_DATA_TYPES:
        return

    if component_type == "container" and component.get("key"):
        nested = data.get(component["key"]) if isinstance(data, dict) else None
        lines.append(f'<tr class="section"><td colspan="2">{escape(_label(component))}</td></tr>')
        for child in _children(component):
            render_component_rows(child, nested or {}, lines)
        return

    if _is_layout(component):
        if component_type in SECTION_TYPES and _label(component):
            lines.append(f'<tr class="section"><td colspan="2">{escape(_label(component))}</td></tr>')
        for child in _children(component):
            render_component_rows(child, data, lines)
        return

    key = component.get("key")
    if not key or component.get("input") is False:
        return

    value = data.get(key) if isinstance(data, dict) else None
    lines.append('<tr>')
    lines.append(f'<th>{escape(_label(component))}</th>')
    lines.append(f'<td>{format_value(value, component_type)}</td>')
    lines.append('</tr>')


def render_identity(entry: StructureEntry) -> str:
    """Render submission id/owner/modified, or nothing for raw data."""
    identity = entry.identity
    if identity is None:
        return ""
    return (
        '<div class="submission-meta">'
        f'<span><strong>Submission:</strong> {escape(identity.id)}</span>'
        f'<span><strong>Owner:</strong> {escape(identity.owner)}</span>'
        f'<span><strong>Modified:</strong> {escape(identity.modified)}</span>'
        '</div>'
    )


def render_entry(entry: StructureEntry) -> str:
    """Render one structure entry as an HTML section."""
    lines = ['<div class="formio-submission">']
    if entry.title:
        lines.append(f'<h1>{escape(entry.title)}</h1>')
    identity_html = render_identity(entry)
    if identity_html:
        lines.append(identity_html)

    rows: List[str] = []
    render_component_rows(entry.component, entry.data or {}, rows)
    if rows:
        lines.append('<table class="submission-table">')
        lines.append('<tbody>')
        lines.extend(rows)
        lines.append('</tbody>')
        lines.append('</table>')

    lines.append('</div>')
    return "\n".join(lines)


def render_structure_html(
    structure: List[StructureEntry],
    title: str = "Form Submissions",
    page_size: str = "letter",
) -> str:
    """
    Render structure entries as a complete HTML document.

    Args:
        structure: Entries in output order
        title: Document title
        page_size: CSS page size for PDF conversion

    Returns:
        HTML document
    """
    body_html = "\n".join(render_entry(entry) for entry in structure)

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>{escape(title)}</title>
    <style>
{styles.get_page_css(page_size=page_size)}
{styles.get_submission_css()}
    </style>
</head>
<body>
{body_html}
</body>
</html>"""


class StructureHtmlRenderer(HtmlRendererPort):
    """Server-side HTML rendering of structure entries."""

    def __init__(self, title: str = "Form Submissions", page_size: str = "letter"):
        self.title = title
        self.page_size = page_size

    async def render_html(self, structure: List[StructureEntry]) -> str:
        html = render_structure_html(structure, title=self.title, page_size=self.page_size)
        logger.info(f"Rendered {len(structure)} submissions to HTML ({len(html)} chars)")
        return html
