"""Command line interface for mcpforge."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from pydantic import ValidationError

from .config import ScaffoldSettings
from .errors import AlreadyExistsError, InvalidNameError, ScaffoldError
from .scaffold import ResourceScaffolder

EXIT_OK = 0
EXIT_EXISTS = 1
EXIT_FAILURE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mcpforge", description="Generate MCP server boilerplate")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every step to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    resource_parser = subparsers.add_parser("make-resource", help="create a new MCP resource class")
    resource_parser.add_argument("name", help="The name of the resource")
    resource_parser.add_argument(
        "--app-root",
        type=Path,
        help="Application root the resource is created under (default: ./app)",
    )
    resource_parser.add_argument(
        "--config",
        type=Path,
        default=Path("pyproject.toml"),
        help="pyproject.toml holding a [tool.mcpforge] table",
    )

    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_settings(args: argparse.Namespace) -> ScaffoldSettings:
    settings = ScaffoldSettings.from_pyproject(args.config)
    return settings.with_overrides(app_root=args.app_root)


def _handle_make_resource(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    try:
        settings = _load_settings(args)
    except (ValidationError, ValueError, OSError) as exc:
        print(f"❌ Invalid configuration in {args.config}: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    scaffolder = ResourceScaffolder(settings)
    try:
        path = scaffolder.make(args.name)
    except InvalidNameError as exc:
        parser.error(str(exc))
    except AlreadyExistsError as exc:
        print(f"❌ MCP resource {exc.class_name} already exists!", file=sys.stderr)
        return EXIT_EXISTS
    except ScaffoldError as exc:
        print(f"❌ {exc}", file=sys.stderr)
        return EXIT_FAILURE

    print(f"✅ Created: {path}")
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    if args.command == "make-resource":
        return _handle_make_resource(args, parser)
    parser.error("no command provided")
    return EXIT_FAILURE


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
