#!/usr/bin/env python3
"""
plz command line entry point.

Typical usage:
        # Register a game and run it
        plz alias add hk "D:/Games/Hollow Knight/hollow_knight.exe"
        plz run hk

        # Name every game under the configured games directory
        plz config games_directory "D:/Games"
        plz alias autoadd

        # Look a game up on the mirror sites (preferred provider first)
        plz fetch hollow knight
        plz fetch hollow knight --provider linkdepot --no-fallback

The alias/config document lives next to the executable (`plz_config.json`),
or wherever `--config` / $PLZ_CONFIG points.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from plz import __version__
from plz.config import Config
from plz.errors import PlzError, ConfigParseError, DirectoryReadError, GamesDirectoryUnset, InputReadError
from plz.fetcher_lib.fetch import new_session
from plz.fetcher_lib.orchestrator import fetch_game
from plz.fetcher_lib.providers import build_providers
from plz.launch import launch
from plz.log import setup_logging, close_logging
from plz.registry import AliasRegistry
from plz.scanner import autoadd
from plz.store import Store, default_config_path
from plz.updates import check_for_updates
from plz.utils.constants import PROVIDERS
from plz.utils.paths import normalize_path

logger = logging.getLogger('plz.cli')


def _error(message):
    print(f"error: {message}", file=sys.stderr)


def _warning(message):
    print(f"warning: {message}", file=sys.stderr)


def prompt_line(question: str) -> str:
    """Read one line from stdin. A closed stdin is fatal for the command."""
    try:
        return input(question)
    except EOFError as e:
        raise InputReadError("could not read from stdin") from e


def confirm_overwrite(name: str, old_path: str, new_path: str) -> bool:
    """Blocking y/n prompt used before replacing an existing alias."""
    print(f"Alias `{name}` already points to `{old_path}`.")
    while True:
        answer = prompt_line(f"Overwrite it with `{new_path}`? [y/n] ").strip().lower()
        if answer in ('y', 'yes'):
            return True
        if answer in ('n', 'no'):
            return False


def ask_alias_name(path: str) -> Optional[str]:
    print(f"\n🎮 Found: {path}")
    return prompt_line("   Alias name (leave empty to ignore): ").strip()


# --- command handlers -------------------------------------------------------

def cmd_run(args, registry: AliasRegistry, config: Config) -> int:
    path = registry.get(args.alias)
    launch(path, logger=logger)
    return 0


def cmd_random(args, registry: AliasRegistry, config: Config) -> int:
    name, path = registry.random()
    print(f"🎲 Running `{name}`")
    launch(path, logger=logger)
    return 0


def cmd_alias_add(args, registry: AliasRegistry, config: Config) -> int:
    path = normalize_path(args.path)
    if registry.add(args.name, path, confirm=confirm_overwrite):
        print(f"✅ Added alias `{args.name.strip()}` -> {path}")
    else:
        print(f"Kept existing alias `{args.name.strip()}` -> {registry.get(args.name.strip())}")
    return 0


def cmd_alias_remove(args, registry: AliasRegistry, config: Config) -> int:
    registry.remove(args.name)
    print(f"🗑️  Removed alias `{args.name}`")
    return 0


def cmd_alias_list(args, registry: AliasRegistry, config: Config) -> int:
    items = registry.list()
    if not items:
        print("No aliases found.")
        return 0
    width = len(items[0][0])
    for name, path in items:
        print(f"{name:<{width}}  {path}")
    return 0


def cmd_alias_autoadd(args, registry: AliasRegistry, config: Config) -> int:
    root = config.games_directory
    if not root:
        raise GamesDirectoryUnset()
    print(f"🔍 Scanning {root}")
    try:
        summary = autoadd(root, registry, ask_alias_name, confirm=confirm_overwrite, logger=logger)
    finally:
        # Whatever was registered before an abort is kept
        registry.save()
    print(f"\n✓ Added {summary.added}, ignored {summary.ignored}, "
          f"skipped {summary.skipped} already known ({summary.directories} folder(s) scanned)")
    return 0


def cmd_fetch(args, registry: AliasRegistry, config: Config) -> int:
    game = ' '.join(args.game).strip()
    primary = args.provider or config.provider_preference
    session = new_session()
    try:
        providers = build_providers(session, config.provider_urls(), logger=logger)
        report = fetch_game(game, providers, primary, fallback=not args.no_fallback, logger=logger)
    finally:
        session.close()

    if not report.succeeded:
        for name, outcome, detail in report.attempts:
            print(f"  ✗ {name}: {outcome} ({detail})", file=sys.stderr)
        _error(f"could not find `{game}` on any provider")
        return 1

    result = report.result
    print(f"🎮 {result.title}  [{result.provider}]")
    width = max(len(label) for label, _ in result.entries)
    for label, url in result.entries:
        print(f"  {label:<{width}}  {url}")
    return 0


def cmd_config(args, registry: AliasRegistry, config: Config) -> int:
    if args.value is None:
        value = config.get(args.key)
        if isinstance(value, bool):
            value = 'true' if value else 'false'
        print(value if value != '' else '(not set)')
        return 0
    value = config.set(args.key, args.value)
    if isinstance(value, bool):
        value = 'true' if value else 'false'
    print(f"✅ {config.resolve_key(args.key)} = {value}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='plz', description="plz is an alias manager to help you manage your games.")
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--config', '-c', help='Path to plz_config.json (default: next to the plz executable or $PLZ_CONFIG)')
    parser.add_argument('--debug', action='store_true', help='Also print log messages to stderr')
    sub = parser.add_subparsers(dest='command', metavar='command')
    sub.required = True

    p = sub.add_parser('run', help='Run an alias')
    p.add_argument('alias', help='The alias to run')
    p.set_defaults(handler=cmd_run)

    p = sub.add_parser('random', help='Run a random alias')
    p.set_defaults(handler=cmd_random)

    p = sub.add_parser('alias', help='Manage aliases')
    alias_sub = p.add_subparsers(dest='alias_command', metavar='action')
    alias_sub.required = True

    a = alias_sub.add_parser('add', help='Add a new alias')
    a.add_argument('name', help='The alias to add')
    a.add_argument('path', help='The path to the executable')
    a.set_defaults(handler=cmd_alias_add)

    a = alias_sub.add_parser('remove', help='Remove an alias')
    a.add_argument('name', help='The alias to remove')
    a.set_defaults(handler=cmd_alias_remove)

    a = alias_sub.add_parser('list', help='List aliases, longest names first')
    a.set_defaults(handler=cmd_alias_list)

    a = alias_sub.add_parser('autoadd', help='Scan the games directory and name the executables found')
    a.set_defaults(handler=cmd_alias_autoadd)

    p = sub.add_parser('fetch', help='Look a game up on the mirror sites')
    p.add_argument('game', nargs='+', help='Game name')
    p.add_argument('--provider', '-p', choices=PROVIDERS, help='Provider to try first (default: provider_preference)')
    p.add_argument('--no-fallback', action='store_true', help='Only try the first provider')
    p.set_defaults(handler=cmd_fetch)

    p = sub.add_parser('config', help='Show or set a config value')
    p.add_argument('key', help='games_directory, check_for_updates or provider_preference')
    p.add_argument('value', nargs='?', help='New value (omit to show the current one)')
    p.set_defaults(handler=cmd_config)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config_path = Path(args.config).expanduser() if args.config else default_config_path()
    try:
        store = Store(config_path)
    except (ConfigParseError, OSError) as e:
        _error(e)
        return 1

    log = setup_logging(store.path.parent, debug=args.debug)
    registry = AliasRegistry(store, logger=logging.getLogger('plz.registry'))
    config = Config(store)

    try:
        if config.check_for_updates:
            tag = check_for_updates(__version__, logger=log)
            if tag:
                print(f"📦 plz {tag} is available (you have {__version__})", file=sys.stderr)

        try:
            return args.handler(args, registry, config)
        except DirectoryReadError as e:
            _error(e)
            print("   Aliases named before the error were saved.", file=sys.stderr)
            return 1
        except PlzError as e:
            _error(e)
            return 1
        except KeyboardInterrupt:
            print("\n\n⏸️  Interrupted by user.", file=sys.stderr)
            return 1
    finally:
        # Advisory: stale aliases never fail a command
        try:
            for message in registry.check():
                _warning(message)
        except OSError as e:
            log.warning(f"consistency check could not save: {e}")
        close_logging()


if __name__ == "__main__":
    sys.exit(main())
