"""Demo 2: Step-by-step guide.

Asks for an Everest climbing guide (in Ukrainian) as a list of
explanation/output steps.

## Usage

```bash
python -m src.demos.run_demo_2_chain_of_thought --log-file
```
"""

import sys

from src.demos.common import build_parser, run_structured, start_demo
from src.prompts import EXTRACTION_SYSTEM_PROMPT, GUIDE_PROMPT
from src.shared.files import setup_logging
from src.shared.schemas import GuideSteps

logger = setup_logging(__name__)


def main(argv=None) -> int:
    """Run step-by-step guide demo."""
    parser = build_parser("Demo 2: Step-by-step guide as JSON", GUIDE_PROMPT)
    args = parser.parse_args(argv)

    start_demo(args, "chain_of_thought")

    guide = run_structured(args.prompt, GuideSteps, EXTRACTION_SYSTEM_PROMPT, args.model)

    if guide is None:
        logger.info("Failed to parse Everest climbing guide.")
        return 0

    logger.info(f"Parsed Everest climbing guide ({len(guide.steps)} steps):")
    for i, step in enumerate(guide.steps, 1):
        logger.info(f"  {i:2}. {step.explanation}")
        logger.info(f"      -> {step.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
