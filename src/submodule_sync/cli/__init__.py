"""Command-line interface for submodule-sync.

Usage:
    submodule-sync update
    submodule-sync bootstrap
    submodule-sync status
    submodule-sync [--root DIR] [--proto ssh|https] [--dry-run] [--config FILE] <command>
"""

import argparse
import sys

from submodule_sync import __version__
from submodule_sync.cli.submodule_cmds import cmd_bootstrap, cmd_status, cmd_update
from submodule_sync.config import PROTOCOLS
from submodule_sync.errors import SubmoduleSyncError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="submodule-sync",
        description="Bootstrap, update and reconcile git submodules from package manifests",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--root", default=None,
        help="Superproject root (default: $SUBMOD_ROOT or current directory)",
    )
    parser.add_argument(
        "--proto", choices=PROTOCOLS, default=None,
        help="Remote URL protocol (default: $SUBMOD_PROTO or ssh)",
    )
    parser.add_argument(
        "--dry-run", action="store_true",
        help="Print mutating git commands instead of running them (same as SKIP_GIT=1)",
    )
    parser.add_argument(
        "--config", default=None,
        help="Path to a YAML config file (default: <root>/.submodule-sync.yaml)",
    )
    sub = parser.add_subparsers(dest="command")

    sub.add_parser(
        "update", help="Fetch and fast-forward every submodule's branch",
    )
    sub.add_parser(
        "bootstrap",
        help="Init submodules recursively, update them, then reconcile with manifests",
    )
    sub.add_parser(
        "status", help="Show the reconciliation plan without changing anything",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    dispatch = {
        "update": cmd_update,
        "bootstrap": cmd_bootstrap,
        "status": cmd_status,
    }

    try:
        return dispatch[args.command](args)
    except SubmoduleSyncError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
