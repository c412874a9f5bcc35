from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from tabulate import tabulate

from . import catalog
from .config import ResourcesConfig
from .errors import ResourceError
from .language_mapping import language_name, resolve_language
from .registry import DEFAULT_CLUSTERS, ResourceRegistry


def _configure_logging(args: argparse.Namespace) -> None:
    if args.debug:
        level = logging.DEBUG
    elif args.verbose:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="[queries-resources] %(levelname)s %(name)s: %(message)s")


def _make_registry(args: argparse.Namespace) -> ResourceRegistry:
    config = ResourcesConfig.from_env()
    if args.resources_dir:
        config = ResourcesConfig(resources_dir=Path(args.resources_dir), cache_failures=config.cache_failures)
    return ResourceRegistry(config=config)


def run_list(args: argparse.Namespace) -> int:
    language = None
    if args.language:
        language = resolve_language(args.language, supported=catalog.supported_languages())

    rows = []
    for rid in catalog.iter_catalog(language):
        if rid.stemmed:
            continue
        variants = "plain, stemmed" if rid.kind == catalog.GAZETTEER and rid.language in catalog.STEM_SOURCES else "-"
        rows.append([
            f"{rid.language} ({language_name(rid.language)})",
            rid.kind,
            rid.name,
            variants,
            ", ".join(catalog.source_keys(rid)),
        ])
    print(tabulate(rows, headers=["Language", "Kind", "Name", "Variants", "Sources"]))
    return 0


def run_stem(args: argparse.Namespace) -> int:
    registry = _make_registry(args)
    for word in args.words:
        print(f"{word}\t{registry.stem(args.language, word)}")
    return 0


def run_cluster(args: argparse.Namespace) -> int:
    registry = _make_registry(args)
    clusters = registry.word_clusters(args.language, args.name)
    missing = 0
    for word in args.words:
        cluster = clusters.get(word)
        if cluster is None:
            missing += 1
            cluster = "-"
        print(f"{word}\t{cluster}")
    return 1 if missing else 0


def run_gazetteer(args: argparse.Namespace) -> int:
    registry = _make_registry(args)
    if args.contains is not None:
        found = registry.contains(args.language, args.name, args.contains, stemmed=args.stem)
        print("yes" if found else "no")
        return 0 if found else 1

    entries = sorted(registry.gazetteer(args.language, args.name, stemmed=args.stem))
    if args.limit is not None:
        entries = entries[: args.limit]
    for entry in entries:
        print(entry)
    return 0


def run_preload(args: argparse.Namespace) -> int:
    registry = _make_registry(args)
    languages = [args.language] if args.language else None
    rows = [[str(rid), len(registry.get(rid))] for rid in registry.preload(languages)]
    print(tabulate(rows, headers=["Resource", "Entries"]))
    return 0


def build_parser() -> argparse.ArgumentParser:
    from . import __version__

    parser = argparse.ArgumentParser(
        prog="python -m queries_resources",
        description="Inspect bundled stem maps, word clusters and gazetteers",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    # Common arguments inherited by every subcommand
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument("--debug", action="store_true", help="Enable verbose debug logging")
    parent_parser.add_argument("--verbose", action="store_true", help="Print high-level progress messages")
    parent_parser.add_argument(
        "--resources-dir",
        default=None,
        help="Read resources from this directory instead of the bundled data",
    )

    subparsers = parser.add_subparsers(dest="task", required=True)

    list_parser = subparsers.add_parser("list", parents=[parent_parser], help="List catalogued resources")
    list_parser.add_argument("--language", "-l", default=None, help="Only list resources of this language")

    stem_parser = subparsers.add_parser("stem", parents=[parent_parser], help="Stem words")
    stem_parser.add_argument("language", help="Language code or name")
    stem_parser.add_argument("words", nargs="+", help="Words to stem")

    cluster_parser = subparsers.add_parser("cluster", parents=[parent_parser], help="Look up word clusters")
    cluster_parser.add_argument("language", help="Language code or name")
    cluster_parser.add_argument("words", nargs="+", help="Words to look up (case-sensitive)")
    cluster_parser.add_argument("--name", default=DEFAULT_CLUSTERS, help="Cluster resource name")

    gazetteer_parser = subparsers.add_parser("gazetteer", parents=[parent_parser], help="Show or query a gazetteer")
    gazetteer_parser.add_argument("language", help="Language code or name")
    gazetteer_parser.add_argument("name", help="Gazetteer name (e.g. cities_us)")
    gazetteer_parser.add_argument("--stem", action="store_true", help="Use the stemmed variant")
    gazetteer_parser.add_argument("--contains", default=None, metavar="PHRASE", help="Check membership of a phrase")
    gazetteer_parser.add_argument("--limit", type=int, default=None, help="Print at most N entries")

    preload_parser = subparsers.add_parser("preload", parents=[parent_parser], help="Build every resource")
    preload_parser.add_argument("--language", "-l", default=None, help="Only build resources of this language")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args)

    handlers = {
        "list": run_list,
        "stem": run_stem,
        "cluster": run_cluster,
        "gazetteer": run_gazetteer,
        "preload": run_preload,
    }
    try:
        return handlers[args.task](args)
    except ResourceError as exc:
        print(f"[queries-resources] Error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
