"""CLI entry point for the weekly menu layout parser."""

import argparse
import datetime
import json
import logging
import sys
import time
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

from menu_parser.config import LayoutConfig
from menu_parser.pipeline.loader import load_document
from menu_parser.pipeline.filter import filter_fragments
from menu_parser.pipeline.merger import merge_words
from menu_parser.pipeline.denoiser import remove_noise_rows
from menu_parser.pipeline.clusterer import cluster_columns
from menu_parser.pipeline.assembler import assemble
from menu_parser.state import Day, Fragment, PageDimensions

logger = logging.getLogger(__name__)


def run_pipeline(state: dict) -> dict:
    """Run every layout stage over `state`, return final state."""
    state.setdefault("config", LayoutConfig())

    state.update(filter_fragments(state))
    state.update(merge_words(state))
    state.update(remove_noise_rows(state))
    state.update(cluster_columns(state))
    state.update(assemble(state))

    return state


def parse_layout(
    fragments: list[Fragment],
    dimensions: PageDimensions,
    config: LayoutConfig | None = None,
    today: datetime.date | None = None,
) -> list[Day]:
    """Reconstruct the week from positioned fragments. Raises UnparsableLayout."""
    state = {
        "fragments": list(fragments),
        "dimensions": dimensions,
        "config": config or LayoutConfig(),
        "today": today,
    }
    return run_pipeline(state)["days"]


def day_as_text(day: Day, human: bool = False) -> str:
    items = day["items"]
    if not human:
        return "\n".join(f"- {item}" for item in items)
    if len(items) >= 2:
        return f"Au menu : {', '.join(items[:-1])} et {items[-1]}."
    return f"Au menu : {', '.join(items)}."


def days_as_text(days: list[Day], human: bool = False) -> str:
    return "\n\n".join(
        f"{day['date'].isoformat()} :\n{day_as_text(day, human)}" for day in days
    )


def days_as_json(days: list[Day]) -> list[dict]:
    return [{"date": day["date"].isoformat(), "items": day["items"]} for day in days]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Rebuild a weekly menu from a rendered page.")
    parser.add_argument("input_path", help="PDF, or HTML position dump of the page")
    parser.add_argument("--output", "-o", default="output/days.json")
    parser.add_argument("--format", default="json", choices=["json", "text"])
    parser.add_argument("--human", action="store_true",
                        help="text format: one sentence per day")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("pdfminer").setLevel(logging.ERROR)

    input_path = Path(args.input_path)
    if not input_path.exists():
        logger.error("File not found: %s", input_path)
        return 1

    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    start = time.time()
    logger.info("Parsing menu from %s", input_path)

    try:
        config = LayoutConfig.from_env()
        fragments, dimensions = load_document(str(input_path))
        days = parse_layout(fragments, dimensions, config)
    except Exception:
        logger.exception("Pipeline failed")
        return 1

    with open(output_path, "w", encoding="utf-8") as fh:
        if args.format == "json":
            json.dump(days_as_json(days), fh, indent=2, ensure_ascii=False)
        else:
            fh.write(days_as_text(days, args.human) + "\n")

    logger.info("Done: %d days -> %s (%.1fs)",
                len(days), output_path, time.time() - start)
    return 0


if __name__ == "__main__":
    sys.exit(main())
