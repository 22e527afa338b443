from __future__ import annotations

import argparse
from typing import Sequence

from commandpalette.config import SettingsManager
from commandpalette.model import StandardPaletteModel
from commandpalette.query import join_query
from commandpalette.registry import ItemRegistry
from commandpalette.results import SearchResult, SearchResultType
from commandpalette.utils import LoggingOptions, configure_logging, get_logger


DEMO_CATALOGUE: tuple[tuple[str, str, str], ...] = (
    ("Ancient near east", "Sumer", "The Mesopotamian city-states"),
    ("Ancient near east", "Babylon", "The city-state of Babylon"),
    ("Ancient near east", "Hittites", "The Hittite empire"),
    ("Ancient near east", "Egypt", "The Egyptian empire"),
    ("Ancient near east", "Persia", "The Persian empire"),
    ("Ancient Mesoamerica", "Olmecs", "The Olmec empire"),
    ("Ancient Mesoamerica", "Aztecs", "The Aztec empire"),
    ("Ancient Mesoamerica", "Mayans", "The Mayan empire"),
    ("Ancient South American", "Chimú", "The Chimú culture"),
    ("Ancient South American", "Inca", "The Incan empire"),
    ("Romance languages", "Italian", ""),
    ("Romance languages", "Romanian", ""),
    ("Romance languages", "French", ""),
    ("Romance languages", "Spanish", ""),
    ("Romance languages", "Portuguese", ""),
    ("Germanic languages", "German", ""),
    ("Germanic languages", "English", ""),
    ("Germanic languages", "Danish", ""),
    ("Germanic languages", "Swedish", ""),
    ("Germanic languages", "Icelandic", ""),
    ("Germanic languages", "Norwegian", ""),
    ("Germanic languages", "Dutch", ""),
    ("Isolate languages", "Finnish", ""),
)


def build_demo_registry() -> ItemRegistry:
    registry = ItemRegistry()
    registry.add_many(
        {
            "text": title,
            "category": category,
            "caption": caption,
            "handler": _print_caption,
            "args": caption or title,
        }
        for category, title, caption in DEMO_CATALOGUE
    )
    return registry


def _print_caption(args: object) -> None:
    print(args)


def format_result(result: SearchResult) -> str:
    if result.type is SearchResultType.HEADER:
        return f"[{result.text}]"
    caption = f"  - {result.caption}" if result.caption else ""
    return f"    {result.text}{caption}"


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="commandpalette",
        description="Search the demo command catalogue.",
    )
    parser.add_argument("query", nargs="*", help="Query text, e.g. ':lang: it'")
    parser.add_argument("--category", default="", help="Category filter")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    settings = SettingsManager().load()
    configure_logging(
        LoggingOptions(
            level=settings.log_level,  # type: ignore[arg-type]
            debug=args.debug,
            log_to_file=False,
        )
    )
    logger = get_logger(__name__)

    raw_query = " ".join(args.query)
    if args.category:
        raw_query = join_query(args.category, raw_query)

    model = StandardPaletteModel(build_demo_registry(), settings=settings)
    results = model.search(raw_query)
    logger.info("Demo search", query=raw_query, results=len(results))

    if not results:
        print("No results.")
        return 1
    for result in results:
        print(format_result(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
