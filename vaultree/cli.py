"""CLI interface for Vaultree - inspect what the agent sees of your vault."""

import argparse
import logging
import sys
from pathlib import Path

from vaultree.config import get_settings
from vaultree.indexer import MAX_TREE_CHARS
from vaultree.storage import SettingsStorage
from vaultree.tools import create_tool_registry

logger = logging.getLogger(__name__)


# ANSI color codes
class Colors:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    RED = "\033[31m"


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for CLI."""
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level.upper(), logging.INFO),
    )


def resolve_vault(vault: str | None) -> tuple[Path, int]:
    """Get vault path and tree size limit from arguments or environment."""
    if vault:
        path = Path(vault).expanduser()
        if not path.is_dir():
            raise NotADirectoryError(f"Vault path is not a directory: {path}")
        return path.resolve(), MAX_TREE_CHARS

    settings = get_settings()
    return settings.vault_path, settings.file_tree_max_chars


def cmd_tree(args: argparse.Namespace) -> int:
    vault_path, max_chars = resolve_vault(args.vault)
    registry = create_tool_registry(vault_path, SettingsStorage(vault_path), max_chars=max_chars)

    result = registry.execute("get_file_tree", fullListing=args.full_listing, path=args.path)
    if not result.success:
        print(f"{Colors.RED}{result.message}{Colors.RESET}", file=sys.stderr)
        return 1

    logger.info(f"{Colors.DIM}{result.message}{Colors.RESET}")
    print(result.data)
    return 0


def cmd_patterns(args: argparse.Namespace) -> int:
    vault_path, _ = resolve_vault(args.vault)
    storage = SettingsStorage(vault_path)

    if args.clear:
        storage.update(inclusions=[], exclusions=[])
    if args.include is not None or args.exclude is not None:
        current = storage.get()
        storage.update(
            inclusions=current.inclusions + (args.include or []),
            exclusions=current.exclusions + (args.exclude or []),
        )

    settings = storage.get()
    print(f"{Colors.BOLD}Inclusions:{Colors.RESET} {', '.join(settings.inclusions) or '(all files)'}")
    print(f"{Colors.BOLD}Exclusions:{Colors.RESET} {', '.join(settings.exclusions) or '(none)'}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vaultree",
        description="Show the vault file tree handed to the AI agent.",
    )
    parser.add_argument("--vault", help="Vault folder (defaults to VAULTREE_VAULT_PATH)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    tree = subparsers.add_parser("tree", help="Print the file tree JSON")
    tree.add_argument(
        "--full-listing",
        action="store_true",
        help="Include empty folders",
    )
    tree.add_argument("--path", default="", help="Folder to describe, relative to vault root")
    tree.set_defaults(func=cmd_tree)

    patterns = subparsers.add_parser("patterns", help="Show or change file filter patterns")
    patterns.add_argument("--include", nargs="+", metavar="PATTERN", help="Add inclusion patterns")
    patterns.add_argument("--exclude", nargs="+", metavar="PATTERN", help="Add exclusion patterns")
    patterns.add_argument("--clear", action="store_true", help="Remove all patterns")
    patterns.set_defaults(func=cmd_patterns)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the Vaultree CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging("DEBUG" if args.verbose else "INFO")

    try:
        return args.func(args)
    except NotADirectoryError as e:
        print(f"{Colors.RED}{e}{Colors.RESET}", file=sys.stderr)
        return 1
    except ValueError as e:
        # pydantic ValidationError is a ValueError
        print(f"{Colors.RED}Failed to load settings: {e}{Colors.RESET}", file=sys.stderr)
        print(
            f"{Colors.RED}Pass --vault or set VAULTREE_VAULT_PATH in a .env file.{Colors.RESET}",
            file=sys.stderr,
        )
        return 1


if __name__ == "__main__":
    sys.exit(main())
