"""
CSS styles for submission export.

Stylesheets for the HTML renderer. The page rules apply when the HTML is
converted to PDF.
"""

from typing import Dict, Optional


def get_submission_css(
    font_family: str = "Helvetica",
    font_size: str = "11pt",
    line_height: str = "1.4",
) -> str:
    """Get CSS styles for rendered submissions.

    Args:
        font_family: Primary font family
        font_size: Base font size
        line_height: Line height

    Returns:
        CSS string for submission tables
    """
    return f"""
    body {{
        font-family: '{font_family}', sans-serif;
        font-size: {font_size};
        line-height: {line_height};
        color: #222;
        background: #fff;
        margin: 0;
    }}

    h1 {{
        font-size: 16pt;
        margin: 0 0 0.5em 0;
        border-bottom: 2px solid #333;
    }}

    .formio-submission {{
        margin-bottom: 2em;
    }}

    .formio-submission + .formio-submission {{
        page-break-before: always;
    }}

    .submission-meta {{
        font-size: 9pt;
        color: #666;
        margin-bottom: 1em;
    }}

    .submission-meta span {{
        margin-right: 1.5em;
    }}

    table.submission-table {{
        border-collapse: collapse;
        width: 100%;
    }}

    .submission-table th,
    .submission-table td {{
        border: 1px solid #ccc;
        padding: 0.3em 0.6em;
        text-align: left;
        vertical-align: top;
    }}

    .submission-table th {{
        width: 35%;
        background-color: #f5f5f5;
        font-weight: bold;
    }}

    .submission-table tr.section td {{
        background-color: #e8e8e8;
        font-weight: bold;
        text-transform: uppercase;
        font-size: 9pt;
    }}
    """


def get_page_css(
    page_size: str = "letter",
    margins: Optional[Dict[str, str]] = None,
) -> str:
    """Get @page rules for PDF conversion.

    Args:
        page_size: Page size (letter, A4, etc.)
        margins: Dict with top, bottom, left, right margins

    Returns:
        CSS string with page rules
    """
    if margins is None:
        margins = {"top": "0.5in", "bottom": "0.5in", "left": "0.5in", "right": "0.5in"}

    return f"""
    @page {{
        size: {page_size};
        margin: {margins['top']} {margins['right']} {margins['bottom']} {margins['left']};
    }}

    table {{
        page-break-inside: auto;
    }}

    tr {{
        page-break-inside: avoid;
    }}
    """
