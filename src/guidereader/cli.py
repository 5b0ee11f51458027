"""Command-line interface for splitting and reading guide documents."""

import argparse
import sys
import json
from pathlib import Path

from guidereader.config import ReaderConfig, load_config, build_segmenter, ConfigLoadError
from guidereader.catalog.loader import load_catalog_from_string, CatalogLoadError
from guidereader.core.types import ReaderState
from guidereader.render.html import render_view, render_options, render_text
from guidereader.runtime.reader import GuideReader
from guidereader.store import TextDirectoryStore, DocumentLoadError
from guidereader.console import SimpleConsoleLogger


def _load_config(args) -> ReaderConfig:
    config = load_config(args.config) if args.config else ReaderConfig()
    if getattr(args, "text_dir", None):
        config = config.model_copy(update={"text_dir": args.text_dir})
    return config


def _make_store(config: ReaderConfig) -> TextDirectoryStore:
    return TextDirectoryStore(config.text_dir, catalog_name=config.catalog_name,
                              encoding=config.encoding)


def split_command(args):
    """Split a text file (or stdin) into sentences."""
    try:
        config = _load_config(args)
        if args.file and args.file != "-":
            path = Path(args.file)
            if not path.exists():
                print(f"Error: File not found: {path}")
                return 1
            text = path.read_text(encoding=config.encoding)
        else:
            text = sys.stdin.read()

        sentences = build_segmenter(config).segment(text)
        if args.json:
            print(json.dumps(sentences, ensure_ascii=False, indent=2))
        else:
            for sentence in sentences:
                print(sentence)
        return 0

    except ConfigLoadError as e:
        print(f"❌ Config error: {e}")
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"❌ Cannot read input: {e}")
        return 1


def list_command(args):
    """List the guides in a text directory's catalog."""
    try:
        config = _load_config(args)
        store = _make_store(config)
        catalog = load_catalog_from_string(store.read_catalog(), fmt=config.catalog_format)

        if catalog.is_empty:
            print("— 无有效导游词 —")
            return 0
        for entry in catalog.entries:
            print(f"{entry.file}\t{entry.name}")
        return 0

    except (ConfigLoadError, CatalogLoadError, DocumentLoadError) as e:
        print(f"❌ 无法加载文件列表: {e}")
        return 1


def validate_command(args):
    """Validate a text directory: catalog shape and every listed file."""
    try:
        config = _load_config(args)
        store = _make_store(config)
        print(f"Validating catalog: {store.catalog_path}")
        catalog = load_catalog_from_string(store.read_catalog(), fmt=config.catalog_format)
    except (ConfigLoadError, CatalogLoadError, DocumentLoadError) as e:
        print(f"❌ Catalog validation failed: {e}")
        return 1

    issues = catalog.validate_entries()
    if catalog.is_empty:
        issues.append("Catalog has no valid entries")
    if catalog.skipped:
        print(f"   Skipped items: {catalog.skipped}")

    segmenter = build_segmenter(config)
    for entry in catalog.entries:
        try:
            count = len(segmenter.segment(store.read(entry.file)))
        except DocumentLoadError as e:
            issues.append(f"{entry.file}: {e}")
            continue
        if args.verbose:
            print(f"   {entry.file}: {entry.name} ({count} 句)")

    if issues:
        print("❌ Catalog validation failed:")
        for issue in issues:
            print(f"   {issue}")
        return 1

    print("✅ Catalog validation successful!")
    print(f"   Guides: {len(catalog.entries)}")
    return 0


def show_command(args):
    """Open a guide and print its sentences."""
    try:
        config = _load_config(args)
    except ConfigLoadError as e:
        print(f"❌ Config error: {e}")
        return 1

    reader = GuideReader(
        source=_make_store(config),
        segmenter=build_segmenter(config),
        catalog_format=config.catalog_format,
        logger=SimpleConsoleLogger() if args.verbose else None,
    )

    state, view = reader.refresh(ReaderState(current_file=args.file or ""))
    if args.file and state.catalog is not None and state.catalog.find(args.file) is None:
        print(f"❌ Guide not in catalog: {args.file}")
        return 1

    if args.html:
        if state.catalog is not None:
            print(f'<select id="fileSelector">{render_options(state.catalog, state.current_file)}</select>')
        print(render_view(view))
    else:
        print(render_text(view))
    return 1 if view.kind == "error" else 0


def info_command(args):
    """Display version and system information."""
    print("guide-reader CLI")
    print("=" * 50)

    try:
        import importlib.metadata
        version = importlib.metadata.version("guide-reader")
        print(f"Version: {version}")
    except Exception:
        print("Version: development")

    print(f"Python: {sys.version.split()[0]}")

    import pydantic
    import yaml
    print(f"   pydantic: {pydantic.VERSION}")
    print(f"   PyYAML: {yaml.__version__}")
    return 0


def create_parser():
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="guidereader",
        description="Split guide narration into sentences and read guide directories"
    )
    parser.add_argument(
        "-c", "--config",
        help="Path to a reader config YAML file"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    split_parser = subparsers.add_parser(
        "split",
        help="Split a text file (or stdin) into sentences"
    )
    split_parser.add_argument(
        "file",
        nargs="?",
        help="Text file to split; '-' or omitted reads stdin"
    )
    split_parser.add_argument(
        "--json",
        action="store_true",
        help="Print sentences as a JSON array"
    )

    list_parser = subparsers.add_parser(
        "list",
        help="List guides in a text directory"
    )
    list_parser.add_argument(
        "text_dir",
        nargs="?",
        help="Directory holding the catalog (default: from config)"
    )

    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a text directory's catalog and guide files"
    )
    validate_parser.add_argument(
        "text_dir",
        nargs="?",
        help="Directory holding the catalog (default: from config)"
    )
    validate_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show per-guide sentence counts"
    )

    show_parser = subparsers.add_parser(
        "show",
        help="Show a guide's sentences"
    )
    show_parser.add_argument(
        "text_dir",
        nargs="?",
        help="Directory holding the catalog (default: from config)"
    )
    show_parser.add_argument(
        "-f", "--file",
        help="Guide file to show (default: first in catalog)"
    )
    show_parser.add_argument(
        "--html",
        action="store_true",
        help="Print an HTML fragment instead of plain text"
    )
    show_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log reader events to stderr"
    )

    subparsers.add_parser(
        "info",
        help="Display version and system information"
    )

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "split":
        return split_command(args)
    elif args.command == "list":
        return list_command(args)
    elif args.command == "validate":
        return validate_command(args)
    elif args.command == "show":
        return show_command(args)
    elif args.command == "info":
        return info_command(args)
    else:
        print(f"Unknown command: {args.command}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
