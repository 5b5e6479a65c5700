from __future__ import annotations

import argparse
from pathlib import Path
import sys
from typing import Optional, TextIO

from prefkit_core.diagnostics import set_log_handler
from prefkit_core.engine import (
    InvalidPreferencesError,
    PersistenceError,
    PreferenceEngine,
    write_export_artifact,
)
from prefkit_core.i18n import default_translation_table
from prefkit_core.model import THEMES
from prefkit_core.persistence import JsonFileStore, build_paths

_AFFIRMATIVE = {"y", "yes", "s", "si", "sí"}


def build_parser() -> argparse.ArgumentParser:
    languages = list(default_translation_table().languages)
    parser = argparse.ArgumentParser(prog="prefkit", description="Manage user preferences and profiles.")
    parser.add_argument("--data-dir", help="Directory holding preferences.json (default: platform data dir).")
    parser.add_argument("--verbose", action="store_true", help="Log engine activity to stderr.")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("show", help="Print the current preferences.")
    set_theme = commands.add_parser("set-theme", help="Set the theme.")
    set_theme.add_argument("theme", choices=list(THEMES))
    commands.add_parser("toggle-theme", help="Switch between light and dark.")
    set_size = commands.add_parser("set-font-size", help="Set the font size.")
    set_size.add_argument("size", type=int)
    set_unit = commands.add_parser("set-font-unit", help="Set the font size unit.")
    set_unit.add_argument("unit")
    set_language = commands.add_parser("set-language", help="Set the UI language.")
    set_language.add_argument("language", choices=languages)
    commands.add_parser("toggle-language", help="Switch to the next UI language.")
    save_profile = commands.add_parser("save-profile", help="Save the current settings as a profile.")
    save_profile.add_argument("name")
    load_profile = commands.add_parser("load-profile", help="Load a saved profile.")
    load_profile.add_argument("name")
    commands.add_parser("list-profiles", help="List saved profile names.")
    export = commands.add_parser("export", help="Export the current settings to user_preferences.json.")
    export.add_argument("--yes", action="store_true", help="Skip the confirmation question.")
    export.add_argument("--output-dir", help="Directory to write into (default: <data-dir>/exports).")
    import_cmd = commands.add_parser("import", help="Apply settings from an exported preferences file.")
    import_cmd.add_argument("path")
    return parser


def _print_view(engine: PreferenceEngine, out: TextIO) -> None:
    view = engine.view()
    bundle = view.bundle
    display_names = engine.translations.display_names
    print(bundle.text("title"), file=out)
    print(view.current_theme_text, file=out)
    print(f"{bundle.text('font_title')}: {view.font_value}", file=out)
    print(f"{bundle.text('language_title')}: {display_names.get(view.state.language, view.state.language)}", file=out)
    _print_profiles(engine, out)


def _print_profiles(engine: PreferenceEngine, out: TextIO) -> None:
    names = engine.profile_names()
    if not names:
        print(engine.bundle.text("cli.no_profiles"), file=out)
        return
    print(f"{engine.bundle.text('profile_title')}:", file=out)
    for name in names:
        print(f"  {name}", file=out)


def _ask(prompt: str, suffix: str, *, stdin: TextIO, out: TextIO) -> bool:
    out.write(prompt + suffix)
    out.flush()
    answer = stdin.readline()
    return answer.strip().lower() in _AFFIRMATIVE


def _run_command(
    args: argparse.Namespace,
    engine: PreferenceEngine,
    *,
    export_dir: Path,
    stdin: TextIO,
    out: TextIO,
) -> int:
    command = args.command
    if command == "show":
        _print_view(engine, out)
    elif command == "set-theme":
        engine.set_theme(args.theme)
        _print_view(engine, out)
    elif command == "toggle-theme":
        engine.toggle_theme()
        _print_view(engine, out)
    elif command == "set-font-size":
        engine.set_font_size(args.size)
        _print_view(engine, out)
    elif command == "set-font-unit":
        engine.set_font_unit(args.unit)
        _print_view(engine, out)
    elif command == "set-language":
        engine.set_language(args.language)
        _print_view(engine, out)
    elif command == "toggle-language":
        engine.toggle_language()
        _print_view(engine, out)
    elif command in ("save-profile", "load-profile"):
        if command == "save-profile":
            result = engine.save_profile(args.name)
        else:
            result = engine.load_profile(args.name)
        print(result.message if result.applied else engine.bundle.text("cli.nothing_to_do"), file=out)
    elif command == "list-profiles":
        _print_profiles(engine, out)
    elif command == "export":
        prompt = engine.prepare_export()
        confirmed = args.yes or _ask(prompt, engine.bundle.text("cli.yes_no_suffix"), stdin=stdin, out=out)
        artifact = engine.complete_export(confirmed)
        if artifact is None:
            print(engine.bundle.text("cli.export_cancelled"), file=out)
            return 0
        target_dir = Path(args.output_dir) if args.output_dir else export_dir
        path = write_export_artifact(artifact, target_dir)
        print(engine.bundle.text("cli.export_written", path=str(path)), file=out)
    elif command == "import":
        payload = Path(args.path).read_bytes()
        engine.import_preferences(payload)
        _print_view(engine, out)
    return 0


def run_cli(
    argv: Optional[list[str]] = None,
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    stdin = stdin or sys.stdin
    out = stdout or sys.stdout
    err = stderr or sys.stderr
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        set_log_handler(lambda message: print(message, file=err))
    try:
        paths = build_paths(Path(args.data_dir) if args.data_dir else None)
        engine = PreferenceEngine(JsonFileStore(paths.store_path))
        engine.initialize()
        return _run_command(args, engine, export_dir=paths.export_dir, stdin=stdin, out=out)
    except (PersistenceError, InvalidPreferencesError, ValueError, OSError) as exc:
        print(f"error: {exc}", file=err)
        return 1
    finally:
        if args.verbose:
            set_log_handler(None)


def main() -> None:
    sys.exit(run_cli())
