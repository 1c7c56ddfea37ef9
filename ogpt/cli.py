#!/usr/bin/env python3
"""
OGPT - Open Graph Protocol tools

Render Open Graph meta elements from a JSON or TOML description, check
referenced URLs and browse the supported vocabularies.
"""
import sys
import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, List

import tomli
from rich.console import Console
from rich.table import Table

from ogpt.base import OgptError, PropertyBag
from ogpt.config import init_config, get_config
from ogpt.constants import META_ATTRIBUTES
from ogpt.objects import OBJECT_TYPES
from ogpt.serializer import prefix_attribute
from ogpt.url_checker import UrlStatus, check_url
from ogpt.vocabulary import supported_locales, supported_types

logger = logging.getLogger(__name__)


console = Console()


def load_document(path: Path) -> Dict[str, Any]:
    """
    Read an object description from a JSON or TOML file.

    Raises:
        OgptError: If the file cannot be read, parsed, or has an unknown extension
    """
    suffix = path.suffix.lower()
    if suffix not in (".json", ".toml"):
        raise OgptError(f"Unknown document format: {path.name} (expected .json or .toml)")

    try:
        if suffix == ".json":
            with open(path, "r", encoding="utf-8") as f:
                document = json.load(f)
        else:
            with open(path, "rb") as f:
                document = tomli.load(f)
    except OSError as e:
        raise OgptError(f"Cannot read {path}: {e}") from e
    except (json.JSONDecodeError, tomli.TOMLDecodeError) as e:
        raise OgptError(f"Cannot parse {path}: {e}") from e

    if not isinstance(document, dict):
        raise OgptError(f"{path.name} must contain a table of objects")
    return document


def build_objects(document: Dict[str, Any], config) -> List[PropertyBag]:
    """Instantiate one object per document section, in document order."""
    objects = []
    for section, data in document.items():
        object_class = OBJECT_TYPES.get(section)
        if object_class is None:
            known = ", ".join(OBJECT_TYPES)
            raise OgptError(f"Unknown section '{section}' (expected one of: {known})")
        objects.append(object_class.from_dict(data, config=config))
        logger.debug(f"Loaded {object_class.__name__} from section '{section}'")
    return objects


def cmd_render(args):
    """Render meta elements for a document."""
    config = get_config()
    if args.verify:
        config.verify_urls = True

    objects = build_objects(load_document(Path(args.file)), config)

    if args.prefix_attr:
        print(prefix_attribute(objects))
        return

    blocks = [obj.to_html(args.meta_attribute) for obj in objects]
    output = "\n".join(block for block in blocks if block)
    if output:
        print(output)
    elif not args.quiet:
        console.print("[yellow]Nothing to render[/yellow]")


def cmd_check_url(args):
    """Check a single URL with a HEAD request."""
    config = get_config()
    result = check_url(
        args.url,
        accepted_mimes=args.accept or (),
        timeout=config.timeout,
        user_agent=config.user_agent,
    )

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        table = Table(title="URL Check")
        table.add_column("Field", style="cyan")
        table.add_column("Value")

        style = "green" if result.is_valid else "red"
        table.add_row("URL", result.url)
        table.add_row("Status", f"[{style}]{result.status.value}[/{style}]")
        if result.status_code is not None:
            table.add_row("HTTP status", str(result.status_code))
        if result.content_type:
            table.add_row("Content-Type", result.content_type)
        if result.response_time_ms is not None:
            table.add_row("Response time", f"{result.response_time_ms:.0f} ms")
        if result.error_message:
            table.add_row("Error", result.error_message)

        console.print(table)

    if not result.is_valid:
        if result.status == UrlStatus.INVALID and not args.json:
            console.print("[red]Only http and https URLs can be checked[/red]")
        sys.exit(1)


def cmd_types(args):
    """List supported page types."""
    if args.flat:
        for slug in supported_types(flatten=True):
            print(slug)
        return

    table = Table(title="Open Graph Page Types")
    table.add_column("Category", style="cyan")
    table.add_column("Type", style="green")
    table.add_column("Label")

    for category, group in supported_types().items():
        for slug, label in group.items():
            table.add_row(category, slug, label)

    console.print(table)


def cmd_locales(args):
    """List supported locales."""
    if args.keys:
        for code in supported_locales(keys_only=True):
            print(code)
        return

    table = Table(title="Supported Locales")
    table.add_column("Code", style="cyan")
    table.add_column("Language", style="green")

    for code, label in supported_locales().items():
        table.add_row(code, label)

    console.print(table)


def cmd_config(args):
    """Manage configuration."""
    config = get_config()

    if args.action == "show":
        if args.key:
            if args.key not in config.to_dict():
                console.print(f"[red]Unknown config key: {args.key}[/red]")
                sys.exit(1)
            print(getattr(config, args.key))
        else:
            print(json.dumps(config.to_dict(), indent=2))

    elif args.action == "init":
        config_path = Path.home() / ".config" / "ogpt" / "config.toml"
        config.save(config_path)
        if not args.quiet:
            console.print(f"[green]Created config at {config_path}[/green]")


def create_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="ogpt",
        description="OGPT - Open Graph Protocol tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Render meta elements
  ogpt render page.toml
  ogpt render page.json --meta-attribute name
  ogpt render page.toml --prefix-attr

  # Check a referenced URL
  ogpt check-url https://example.com/image.jpg --accept image/jpeg image/png
  ogpt check-url https://example.com/ --json

  # Vocabularies
  ogpt types
  ogpt locales --keys

Configuration:
  Config file: ~/.config/ogpt/config.toml or ./ogpt.toml
  Environment: OGPT_VERIFY_URLS, OGPT_TIMEOUT, OGPT_META_ATTRIBUTE
        """
    )

    # Global options
    parser.add_argument("--config", help="Config file path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("-q", "--quiet", action="store_true", help="Minimal output")

    subparsers = parser.add_subparsers(dest="command", required=True, help="Commands")

    # render
    render_parser = subparsers.add_parser("render", help="Render meta elements from a JSON or TOML file")
    render_parser.add_argument("file", help="Document with one section per object (og, article, ...)")
    render_parser.add_argument("--meta-attribute", choices=META_ATTRIBUTES,
                               help="Attribute holding the property name (default: from config)")
    render_parser.add_argument("--prefix-attr", action="store_true",
                               help="Print the value for the HTML prefix attribute instead")
    render_parser.add_argument("--verify", action="store_true",
                               help="Verify URLs with a HEAD request before accepting them")
    render_parser.set_defaults(func=cmd_render)

    # check-url
    check_parser = subparsers.add_parser("check-url", help="Check that a URL answers 200 OK")
    check_parser.add_argument("url", help="URL to check")
    check_parser.add_argument("--accept", nargs="+", metavar="MIME",
                              help="Accepted media types (e.g. image/* text/html)")
    check_parser.add_argument("--json", action="store_true", help="Output JSON")
    check_parser.set_defaults(func=cmd_check_url)

    # types
    types_parser = subparsers.add_parser("types", help="List supported page types")
    types_parser.add_argument("--flat", action="store_true", help="Only print type slugs")
    types_parser.set_defaults(func=cmd_types)

    # locales
    locales_parser = subparsers.add_parser("locales", help="List supported locales")
    locales_parser.add_argument("--keys", action="store_true", help="Only print locale codes")
    locales_parser.set_defaults(func=cmd_locales)

    # config
    config_parser = subparsers.add_parser("config", help="Manage configuration")
    config_parser.add_argument("action", choices=["show", "init"], help="Config action")
    config_parser.add_argument("key", nargs="?", help="Config key")
    config_parser.set_defaults(func=cmd_config)

    return parser


def main():
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    config_args = {}
    if args.config:
        config_args["config_file"] = Path(args.config)
    if getattr(args, "meta_attribute", None):
        config_args["meta_attribute"] = args.meta_attribute

    config = init_config(**config_args)

    level = logging.DEBUG if args.verbose else getattr(logging, str(config.log_level).upper(), logging.WARNING)
    logging.basicConfig(level=level, format='%(levelname)s: %(message)s')

    # Execute command
    try:
        args.func(args)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted[/yellow]")
        sys.exit(130)
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
