"""
Query Engine command-line entry point
Interprets one query and prints the response as JSON
"""
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import settings
from .models.item import Item
from .models.requests import QueryRequest
from .services.pipeline import process_request

logger = logging.getLogger(__name__)


def load_items(path: Path) -> List[Item]:
    """
    Load candidate items from a JSON array

    Args:
        path: File containing [{"name": ..., "description": ..., "keywords": [...]}, ...]

    Returns:
        Parsed items
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a JSON array of items")
    return [Item.model_validate(entry) for entry in data]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="query-engine",
        description="Interpret one line of launcher input"
    )
    parser.add_argument("query", nargs="?", default="", help="Raw query text")
    parser.add_argument(
        "--items",
        type=Path,
        default=None,
        help="JSON file with candidate items to rank in apps mode"
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="Logging level (default: %(default)s)"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )

    items: List[Item] = []
    if args.items is not None:
        try:
            items = load_items(args.items)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load items from {args.items}: {e}")
            return 1

    request = QueryRequest(query=args.query, items=items)
    response = process_request(request)

    print(json.dumps(response.model_dump(mode="json"), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
