"""CLI entry point for page-composer.

This module acts as the central entry point for the project's CLI tools.
It delegates commands to the appropriate submodules or runs specific tasks.
"""

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

from pagecomposer.catalog import CatalogError
from pagecomposer.cli import ScriptError, load_script, replay_script, resolve_catalog
from pagecomposer.config import EnvVar, get_environment, list_environment_variables
from pagecomposer.core.log import get_logger, setup_logging
from pagecomposer.editor import FileClipboard
from pagecomposer.output import format_document_tree
from pagecomposer.validation import validate_document

# Load environment variables from .env file
load_dotenv()

logger = get_logger("cli")

# Errors a bad catalog or script can raise while replaying
REPLAY_ERRORS = (CatalogError, ScriptError, ValidationError, KeyError)


# =============================================================================
# Catalog Command
# =============================================================================


def cmd_catalog(args: argparse.Namespace) -> int:
    """Handle the catalog command."""
    try:
        catalog = resolve_catalog(args.catalog)
    except CatalogError as e:
        logger.error(f"Catalog failed: {e}")
        return 1

    for category in catalog.categories():
        print(category)
        for item in catalog.items(category):
            print(f"  - {item.name}")
    return 0


def handle_catalog_command(argv: list[str]) -> int:
    """Handle catalog-specific commands."""
    parser = argparse.ArgumentParser(
        prog="python . catalog",
        description="List catalog categories and items",
    )
    parser.add_argument(
        "--catalog",
        "-c",
        type=Path,
        default=None,
        help="Catalog JSON file (default: PAGECOMPOSER_CATALOG_PATH or built-in)",
    )

    args = parser.parse_args(argv)
    return cmd_catalog(args)


# =============================================================================
# Build Command
# =============================================================================


def cmd_build(args: argparse.Namespace) -> int:
    """Handle the build command."""
    try:
        catalog = resolve_catalog(args.catalog)
        editor = replay_script(load_script(args.script), catalog)
    except REPLAY_ERRORS as e:
        logger.error(f"Build failed: {e}")
        return 1

    for error in validate_document(editor.document):
        logger.warning(f"{error.node_id}: {error.message}")

    semantic = True if args.semantic else None
    if args.output:
        editor.clipboard = FileClipboard(args.output)
        editor.copy_code(semantic=semantic)
        return 0

    print(editor.generate(semantic=semantic))
    return 0


def handle_build_command(argv: list[str]) -> int:
    """Handle build-specific commands."""
    parser = argparse.ArgumentParser(
        prog="python . build",
        description="Replay an editor script and generate markup",
    )
    parser.add_argument(
        "script",
        type=Path,
        help="JSON file with a list of editor commands",
    )
    parser.add_argument(
        "--catalog",
        "-c",
        type=Path,
        default=None,
        help="Catalog JSON file (default: PAGECOMPOSER_CATALOG_PATH or built-in)",
    )
    parser.add_argument(
        "--semantic",
        "-s",
        action="store_true",
        help="Use semantic tags (default: PAGECOMPOSER_SEMANTIC_HTML)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Write markup to this file instead of stdout",
    )

    if not argv:
        parser.print_help()
        return 1

    args = parser.parse_args(argv)
    return cmd_build(args)


# =============================================================================
# Tree Command
# =============================================================================


def cmd_tree(args: argparse.Namespace) -> int:
    """Handle the tree command."""
    try:
        catalog = resolve_catalog(args.catalog)
        editor = replay_script(load_script(args.script), catalog)
    except REPLAY_ERRORS as e:
        logger.error(f"Tree failed: {e}")
        return 1

    print(format_document_tree(editor.document, editor.selection))
    return 0


def handle_tree_command(argv: list[str]) -> int:
    """Handle tree-specific commands."""
    parser = argparse.ArgumentParser(
        prog="python . tree",
        description="Replay an editor script and print the document tree",
    )
    parser.add_argument(
        "script",
        type=Path,
        help="JSON file with a list of editor commands",
    )
    parser.add_argument(
        "--catalog",
        "-c",
        type=Path,
        default=None,
        help="Catalog JSON file (default: PAGECOMPOSER_CATALOG_PATH or built-in)",
    )

    if not argv:
        parser.print_help()
        return 1

    args = parser.parse_args(argv)
    return cmd_tree(args)


# =============================================================================
# Env Command
# =============================================================================


def cmd_env(_args: argparse.Namespace) -> int:
    """Show environment variables and their resolved values."""
    for var in list_environment_variables():
        info = var.value
        print(f"{info.name}={get_environment(var)}  # {info.description}")
    return 0


def show_help() -> None:
    """Display CLI help message."""
    print("Usage: python . {command} [args]")
    print("\n=== Commands ===")
    print("  catalog    List catalog categories and items")
    print("  build      Replay an editor script and generate markup")
    print("  tree       Replay an editor script and print the document tree")
    print("  env        Show configuration environment variables")
    print("\nExamples:")
    print("  python . catalog")
    print("  python . build page.json                # Print markup")
    print("  python . build page.json --semantic     # Use header/nav/main tags")
    print("  python . build page.json -o Page.jsx    # Write markup to a file")
    print("  python . tree page.json")


def main() -> int:
    """Main entry point for the CLI."""
    if len(sys.argv) < 2:
        show_help()
        return 1

    command = sys.argv[1]
    rest_args = sys.argv[2:]

    if command in ("-h", "--help"):
        show_help()
        return 0

    commands = {
        "catalog": lambda: handle_catalog_command(rest_args),
        "build": lambda: handle_build_command(rest_args),
        "tree": lambda: handle_tree_command(rest_args),
        "env": lambda: cmd_env(argparse.Namespace()),
    }

    if command in commands:
        setup_logging(get_environment(EnvVar.LOG_LEVEL))
        return commands[command]()

    logger.error(f"Unknown command: {command}")
    show_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
