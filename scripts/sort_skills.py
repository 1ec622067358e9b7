#!/usr/bin/env python
"""CLI for sorting LinkedIn skills by endorsement count."""
import argparse
import json
import logging
import sys

from skill_sorter.config import Config
from skill_sorter.documents import load_document
from skill_sorter.exceptions import SkillSorterError
from skill_sorter.presentation import (
    format_ranking,
    index_rows,
    ranking_rows,
    render_table,
)
from skill_sorter.session import extract_skills


def _parse_override(value: str) -> tuple[int, str]:
    index, sep, count = value.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected INDEX=COUNT, got {value!r}")
    try:
        return int(index), count
    except ValueError:
        raise argparse.ArgumentTypeError(f"index must be an integer, got {index!r}")


def main():
    parser = argparse.ArgumentParser(description="Sort profile skills by endorsement count")
    parser.add_argument("path", type=str, help="Saved profile page (.html) or profile PDF (.pdf)")
    parser.add_argument("--config", type=str, help="Path to config file")
    parser.add_argument(
        "--set", dest="overrides", type=_parse_override, action="append", default=[],
        metavar="INDEX=COUNT", help="Correct the count of the skill at INDEX (repeatable)",
    )
    parser.add_argument("--json", action="store_true", help="Print the ranking as JSON")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    config = Config.load(args.config)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level_value,
        format="%(asctime)s - %(levelname)s - %(message)s"
    )

    errors = config.validate()
    if errors:
        for e in errors:
            logging.error(e)
        return 1

    try:
        document = load_document(args.path, item_selector=config.item_selector)
    except (FileNotFoundError, SkillSorterError) as exc:
        logging.error(exc)
        return 1

    session = extract_skills(document, config)
    result = session.result
    if result.notice:
        print(result.notice)
        return 0

    if not args.json:
        print(f"\nExtracted {len(session)} skills via {result.winning_strategy} strategy")
        print(render_table(index_rows(session.records)))

    for index, count in args.overrides:
        session.update_count(index, count)

    ranking = session.rank()
    if args.json:
        print(json.dumps(ranking_rows(ranking), indent=2))
        return 0

    print()
    print(format_ranking(ranking))
    print(render_table(ranking_rows(ranking)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
