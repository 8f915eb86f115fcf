"""Demo 3: CV form UI generation.

Gemini describes a CV form as JSON (a "cv-form" root with typed elements);
the form is rendered to HTML and saved as a standalone document.

## Usage

```bash
# Writes generated-cv-form.html in the current directory
python -m src.demos.run_demo_3_ui_gen

# Custom output location
python -m src.demos.run_demo_3_ui_gen --output out/cv.html
```
"""

import sys
from pathlib import Path

from src.config import CV_FORM_OUTPUT_PATH
from src.demos.common import build_parser, run_structured, start_demo
from src.prompts import UI_GEN_PROMPT, UI_GEN_SYSTEM_PROMPT
from src.shared.files import setup_logging, write_text_output
from src.shared.schemas import CVForm
from src.visualization.form_html import render_document, render_form

logger = setup_logging(__name__)


def main(argv=None) -> int:
    """Run CV form generation demo."""
    parser = build_parser("Demo 3: Generate a CV form and render it as HTML", UI_GEN_PROMPT)
    parser.add_argument(
        "--output", type=Path, default=CV_FORM_OUTPUT_PATH,
        help=f"HTML output path (default: {CV_FORM_OUTPUT_PATH})",
    )
    args = parser.parse_args(argv)

    start_demo(args, "ui_gen")

    form = run_structured(
        args.prompt, CVForm, UI_GEN_SYSTEM_PROMPT, args.model, log_raw=True
    )

    if form is None:
        logger.info("Failed to generate UI.")
        return 0

    form_html = render_form(form)

    logger.info(f"UI JSON Structure:\n{form.model_dump_json(indent=2, exclude_unset=True)}")
    logger.info(f"Generated HTML:\n{form_html}")

    try:
        output_path = write_text_output(render_document(form_html), args.output)
    except OSError as e:
        logger.error(f"Failed to save HTML to {args.output}: {e}")
        return 0
    logger.info(f"HTML saved to {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
