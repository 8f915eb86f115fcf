"""HTML rendering for generated CV form definitions.

Turns a validated CVForm into a `<form>` fragment and wraps that fragment
in a standalone HTML5 document with inline styling.

## Rendering Rules

- Elements are emitted in input order.
- Consecutive bullet-list-item elements share a single `<ul>`; any other
  known element, or the end of the sequence, closes an open list first.
- Input-like elements get a `form-field` block. The label's `for`/`id`
  value is the element name, else the label lowercased with whitespace
  runs collapsed to `-`.
- Unknown element types are logged and skipped; the rest of the form
  still renders.
- Model-provided text is HTML-escaped. Output depends only on the input.
"""

import html
import re
from typing import Iterable

from src.shared.files import setup_logging
from src.shared.schemas import CVElement, CVForm

logger = setup_logging(__name__)

INPUT_TYPES = frozenset({
    "text-input",
    "textarea",
    "date-input",
    "email-input",
    "phone-input",
    "url-input",
})

DOCUMENT_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{title}</title>
  <style>
    body {{
      font-family: Arial, sans-serif;
      max-width: 800px;
      margin: 0 auto;
      padding: 20px;
      background-color: #f4f7f6;
    }}
    .cv-form {{
      display: flex;
      flex-direction: column;
      gap: 25px;
      padding: 30px;
      border: 1px solid #dcdcdc;
      border-radius: 10px;
      background-color: #fff;
      box-shadow: 0 2px 5px rgba(0,0,0,0.1);
    }}
    h2 {{
      margin-top: 0;
      color: #333;
      border-bottom: 2px solid #5a9bd5;
      padding-bottom: 5px;
      margin-bottom: 20px;
    }}
    .form-field {{
      display: flex;
      flex-direction: column;
      margin-bottom: 15px;
    }}
    label {{
      margin-bottom: 8px;
      font-weight: bold;
      color: #555;
    }}
    input, textarea, select {{
      padding: 12px;
      border: 1px solid #ccc;
      border-radius: 5px;
      font-size: 16px;
      width: 100%;
      box-sizing: border-box;
    }}
    textarea {{
      min-height: 100px;
      resize: vertical;
    }}
    ul {{
      list-style: disc inside;
      padding-left: 20px;
      margin-top: 10px;
      margin-bottom: 15px;
    }}
    li {{
      margin-bottom: 5px;
    }}
    button {{
      padding: 12px 20px;
      background-color: #5a9bd5;
      color: white;
      border: none;
      border-radius: 5px;
      cursor: pointer;
      font-size: 18px;
      font-weight: bold;
      margin-top: 20px;
      align-self: flex-start;
      transition: background-color 0.3s ease;
    }}
    button:hover {{
      background-color: #4a8acb;
    }}
  </style>
</head>
<body>
{body}
</body>
</html>"""


def _esc(value: str) -> str:
    return html.escape(value, quote=True)


def field_id(element: CVElement) -> str:
    """Identifier tying a label to its control.

    Example:
        >>> field_id(CVElement(type="text-input", label="Full  Name"))
        'full-name'
    """
    if element.name:
        return element.name
    return re.sub(r"\s+", "-", (element.label or "").lower())


def _render_input(element: CVElement) -> list[str]:
    lines = ['  <div class="form-field">\n']
    if element.label:
        lines.append(f'    <label for="{_esc(field_id(element))}">{_esc(element.label)}</label>\n')

    is_textarea = element.type == "textarea"
    tag = "    <textarea" if is_textarea else f'    <input type="{element.type.replace("-input", "")}"'

    attrs = ""
    if element.name:
        attrs += f' name="{_esc(element.name)}"'
    if element.label:
        attrs += f' id="{_esc(field_id(element))}"'
    if element.required:
        attrs += " required"
    if element.placeholder:
        attrs += f' placeholder="{_esc(element.placeholder)}"'

    closing = "></textarea>\n" if is_textarea else ">\n"
    lines.append(tag + attrs + closing)
    lines.append("  </div>\n")
    return lines


def _render_submit(element: CVElement) -> str:
    name_attr = f' name="{_esc(element.name)}"' if element.name else ""
    return f'  <button type="submit"{name_attr}>{_esc(element.label or "Submit")}</button>\n'


def render_elements(elements: Iterable[CVElement]) -> str:
    """Render form elements (without the enclosing `<form>`)."""
    parts: list[str] = []
    in_list = False

    for element in elements:
        kind = element.type

        if kind == "bullet-list-item":
            if not in_list:
                parts.append("  <ul>\n")
                in_list = True
            parts.append(f"    <li>{_esc(element.value or '')}</li>\n")
            continue

        if kind not in INPUT_TYPES and kind not in ("section-header", "submit-button"):
            logger.warning(f"Unknown element type: {kind}")
            continue

        if in_list:
            parts.append("  </ul>\n")
            in_list = False

        if kind == "section-header":
            parts.append(f"  <h2>{_esc(element.label or '')}</h2>\n")
        elif kind == "submit-button":
            parts.append(_render_submit(element))
        else:
            parts.extend(_render_input(element))

    if in_list:
        parts.append("  </ul>\n")

    return "".join(parts)


def render_form(form: CVForm) -> str:
    """Render a CV form definition as a `<form class="cv-form">` fragment."""
    return f'<form class="cv-form">\n{render_elements(form.elements)}</form>\n'


def render_document(form_markup: str, title: str = "Generated CV Form") -> str:
    """Wrap rendered form markup in a self-contained HTML document."""
    return DOCUMENT_TEMPLATE.format(title=_esc(title), body=form_markup)
