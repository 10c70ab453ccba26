"""Submodule CLI commands."""

import argparse

from submodule_sync.config import load_config


def _config_from_args(args: argparse.Namespace):
    return load_config(
        root=args.root,
        config_path=args.config,
        protocol=args.proto,
        dry_run=args.dry_run,
    )


def cmd_update(args: argparse.Namespace) -> int:
    from submodule_sync.git.runner import GitRunner
    from submodule_sync.git.update import update_all

    cfg = _config_from_args(args)
    prefix = "[DRY RUN] " if cfg.dry_run else ""
    print(f"  {prefix}Updating submodules in {cfg.root}")

    results = update_all(cfg.root, GitRunner(dry_run=cfg.dry_run), cfg.default_branch)

    if not results:
        print("  No submodules registered.")
        return 0

    changed = [r for r in results if r["status"] == "updated"]
    print(f"\n  {len(results)} submodule(s) processed, {len(changed)} updated")
    return 0


def cmd_bootstrap(args: argparse.Namespace) -> int:
    from submodule_sync.git.reconcile import bootstrap

    cfg = _config_from_args(args)
    prefix = "[DRY RUN] " if cfg.dry_run else ""
    print(f"  {prefix}Bootstrapping submodules in {cfg.root} ({cfg.protocol})")

    result = bootstrap(cfg)

    print(f"\n  Updated: {len(result['updated'])} submodule(s)")
    print(f"  Corrections: {len(result['actions'])}")
    for action in result["actions"]:
        print(f"    - {action.kind:<8} {action.path}  {action.url}")
    return 0


def cmd_status(args: argparse.Namespace) -> int:
    from submodule_sync.git.reconcile import OK, plan

    cfg = _config_from_args(args)
    actions = plan(cfg)

    if not actions:
        print("  No manifests declare a repository.")
        return 0

    print(f"  {'Path':<40} {'Action':<8} {'URL'}")
    print(f"  {'─' * 90}")
    for action in actions:
        reason = f"  ({action.reason})" if action.reason else ""
        print(f"  {action.path:<40} {action.kind:<8} {action.url}{reason}")

    pending = [a for a in actions if a.kind != OK]
    print(f"\n  {len(pending)} correction(s) pending")
    return 0
