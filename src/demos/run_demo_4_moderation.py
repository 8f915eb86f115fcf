"""Demo 4: Content moderation.

Checks a piece of user input against content guidelines and reports a
compliance verdict (flag, category, explanation).

## Usage

```bash
python -m src.demos.run_demo_4_moderation
```
"""

import sys

from src.demos.common import build_parser, run_structured, start_demo
from src.prompts import MODERATION_PROMPT, MODERATION_SYSTEM_PROMPT
from src.shared.files import setup_logging
from src.shared.schemas import ContentCompliance

logger = setup_logging(__name__)


def main(argv=None) -> int:
    """Run content moderation demo."""
    parser = build_parser("Demo 4: Content compliance check", MODERATION_PROMPT)
    args = parser.parse_args(argv)

    start_demo(args, "moderation")

    compliance = run_structured(
        args.prompt, ContentCompliance, MODERATION_SYSTEM_PROMPT, args.model
    )

    if compliance:
        logger.info(f"Content compliance: {compliance.model_dump_json()}")
    else:
        logger.info("Failed to perform compliance check.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
