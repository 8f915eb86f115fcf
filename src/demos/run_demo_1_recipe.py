"""Demo 1: Recipe extraction.

Pulls a recipe (name, cooking time, ingredients) out of a short text.

## Usage

```bash
python -m src.demos.run_demo_1_recipe

# Different source text
python -m src.demos.run_demo_1_recipe --prompt "Extract the recipe details from ..."
```
"""

import sys

from src.demos.common import build_parser, run_structured, start_demo
from src.prompts import EXTRACTION_SYSTEM_PROMPT, RECIPE_PROMPT
from src.shared.files import setup_logging
from src.shared.schemas import Recipe

logger = setup_logging(__name__)


def main(argv=None) -> int:
    """Run recipe extraction demo."""
    parser = build_parser("Demo 1: Extract recipe details as JSON", RECIPE_PROMPT)
    args = parser.parse_args(argv)

    start_demo(args, "recipe")

    recipe = run_structured(args.prompt, Recipe, EXTRACTION_SYSTEM_PROMPT, args.model)

    if recipe:
        logger.info(f"Parsed recipe:\n{recipe.model_dump_json(indent=2)}")
    else:
        logger.info("Failed to parse recipe details.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
