"""
Score a saved application form from the command line.
No server or Redis needed; runs the engine directly.

Usage:
    python -m app.scripts.score_form application.json                 # full result
    python -m app.scripts.score_form application.json --pillar 3      # one pillar
    python -m app.scripts.score_form application.json --no-recommendations --indent 0
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from app.config import settings
from app.core.dependencies import get_scoring_engine
from app.core.logging_config import configure_logging
from app.scoring.pillar_structure import PILLAR_IDS
from app.scoring.scoring_engine import pillar_key

logger = logging.getLogger(__name__)


def load_form(path: Path):
    """Read a FormData JSON file; None if it is missing or unparseable."""
    try:
        with path.open(encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        logger.error(f"File not found: {path}")
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Could not read {path}: {e}")
    return None


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Score an IIICI certification application form")
    ap.add_argument("file", type=Path, help="FormData JSON file (pillar_1 .. pillar_6)")
    ap.add_argument("--pillar", type=int, choices=PILLAR_IDS, help="Only score this pillar")
    ap.add_argument("--no-recommendations", action="store_true", help="Omit recommendations")
    ap.add_argument("--indent", type=int, default=2, help="JSON indent (0 for compact)")
    args = ap.parse_args(argv)
    configure_logging(settings.LOG_LEVEL, "console")

    form_data = load_form(args.file)
    if form_data is None:
        return 1
    if not isinstance(form_data, dict):
        logger.error(f"{args.file} must contain a JSON object keyed by pillar_1 .. pillar_6")
        return 1

    engine = get_scoring_engine()
    if args.pillar is not None:
        result = engine.process_pillar_data(args.pillar, form_data.get(pillar_key(args.pillar)))
    else:
        result = engine.process_form_data(form_data)
        if args.no_recommendations:
            result = result.model_copy(update={"recommendations": []})

    indent = args.indent or None
    print(result.model_dump_json(by_alias=True, indent=indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
