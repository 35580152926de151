"""Command line entry: `bastion start <method> ...`."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence

from .services import game_service, settings_service
from .services.args_service import CommonArgs, LinuxArgs
from .services.game_service import (
    ExecMethod,
    LinuxDirect,
    MacGPTK,
    MacGPTKIndirect,
    Steam,
    WindowsDirect,
    WindowsIndirect,
)
from .services.install_service import BeamNGInstall
from .services.settings_service import LauncherSettings
from .util.errors import InstallNotFoundError, LauncherError
from .util.logging import configure_logging

logger = logging.getLogger(__name__)

GPTK_METHODS = {"mac-gptk", "mac-gptk-indirect"}


def _add_install(p: argparse.ArgumentParser) -> None:
    p.add_argument("install_path", type=Path, help="Very root of the BeamNG.drive install")


def _add_console(p: argparse.ArgumentParser) -> None:
    p.add_argument("-c", "--console", action="store_true", help="Open with BeamNG.drive console")


def _add_gptk(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "gptk_path",
        type=Path,
        nargs="?",
        help="Path to the Apple Game Porting Toolkit app (defaults to the saved setting)",
    )


def _logging_options(suppress: bool) -> argparse.ArgumentParser:
    # Subcommands repeat these with suppressed defaults so a flag given earlier is kept.
    p = argparse.ArgumentParser(add_help=False)
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS if suppress else False,
        help="Log debug output",
    )
    p.add_argument(
        "--log-file",
        type=Path,
        default=argparse.SUPPRESS if suppress else None,
        help="Write the log here instead of the default location",
    )
    return p


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bastion", description="BeamNG.drive launcher", parents=[_logging_options(False)]
    )
    sub = parser.add_subparsers(dest="command", required=True)
    common = [_logging_options(True)]

    start = sub.add_parser("start", help="Start the game", parents=common)
    methods = start.add_subparsers(dest="method", required=True)

    steam = methods.add_parser(
        "steam",
        parents=common,
        help="Opens the game using Steam. No game arguments are supported.",
    )
    steam.add_argument("steam_exec", type=Path, nargs="?", help="Override the command to execute Steam")

    windows = methods.add_parser(
        "windows",
        parents=common,
        help="Directly launches the game and passes requested arguments.",
    )
    _add_install(windows)
    _add_console(windows)
    windows.add_argument("--gfx-api", help="Override game graphics API")

    windows_indirect = methods.add_parser(
        "windows-indirect",
        parents=common,
        help="Opens the game's launcher. No game arguments are supported.",
    )
    _add_install(windows_indirect)

    linux = methods.add_parser(
        "linux",
        parents=common,
        help="Directly launches the game using the Linux binary and passes requested arguments.",
    )
    _add_install(linux)
    linux.add_argument("-c", "--gfx-api", help="Override game graphics API")

    mac = methods.add_parser(
        "mac-gptk",
        parents=common,
        help="Directly launches the game using the Apple Game Porting Toolkit and passes requested arguments.",
    )
    _add_install(mac)
    _add_gptk(mac)
    _add_console(mac)
    mac.add_argument("--gfx-api", help="Override game graphics API")

    mac_indirect = methods.add_parser(
        "mac-gptk-indirect",
        parents=common,
        help="Opens the game's launcher using the Apple Game Porting Toolkit. No game arguments are supported.",
    )
    _add_install(mac_indirect)
    _add_gptk(mac_indirect)

    config = sub.add_parser("config", help="Show or change saved defaults", parents=common)
    config.add_argument("--steam-exec", help="Default command to execute Steam")
    config.add_argument("--gptk-path", help="Default Apple Game Porting Toolkit app path")
    config.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def parse_args(
    argv: Optional[Sequence[str]] = None,
    settings: Optional[LauncherSettings] = None,
) -> argparse.Namespace:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = settings or LauncherSettings()

    if args.command == "start" and args.method in GPTK_METHODS and args.gptk_path is None:
        if not settings.gptk_path:
            parser.error(f"{args.method} requires gptk_path (or a saved gptk_path setting)")
        args.gptk_path = Path(settings.gptk_path)
    return args


def build_method(args: argparse.Namespace, settings: LauncherSettings) -> ExecMethod:
    """Turn parsed `start` arguments into a launch method.

    Raises InstallNotFoundError if the install root is not a directory.
    """
    if args.method == "steam":
        steam_exec = args.steam_exec or (Path(settings.steam_exec) if settings.steam_exec else None)
        return Steam(steam_path=steam_exec)

    install = BeamNGInstall.init(args.install_path)
    if not install.exists():
        raise InstallNotFoundError(install.path)

    if args.method == "windows":
        return WindowsDirect(install=install, args=CommonArgs(console=args.console, gfx_api=args.gfx_api))
    if args.method == "windows-indirect":
        return WindowsIndirect(install=install)
    if args.method == "linux":
        return LinuxDirect(install=install, args=LinuxArgs(gfx_api=args.gfx_api))
    if args.method == "mac-gptk":
        return MacGPTK(
            install=install,
            gptk_path=args.gptk_path,
            args=CommonArgs(console=args.console, gfx_api=args.gfx_api),
        )
    if args.method == "mac-gptk-indirect":
        return MacGPTKIndirect(install=install, gptk_path=args.gptk_path)
    raise ValueError(f"Unknown launch method: {args.method}")


def run_start(args: argparse.Namespace, settings: LauncherSettings) -> int:
    try:
        method = build_method(args, settings)
    except InstallNotFoundError as e:
        logger.error("%s", e)
        print("Given install does not exist.", file=sys.stderr)
        return 1

    label = "Steam" if isinstance(method, Steam) else "BeamNG.drive"
    logger.info("Starting %s (%s)", label, args.method)
    try:
        status = game_service.launch(method)
    except LauncherError as e:
        logger.error("%s process failed: %s", label, e)
        print(f"{label} process failed: {e}", file=sys.stderr)
        return 1

    logger.info("%s exited with status %s", label, status)
    return 0


def run_config(args: argparse.Namespace, settings: LauncherSettings) -> int:
    changes = {
        name: value
        for name, value in (
            ("steam_exec", args.steam_exec),
            ("gptk_path", args.gptk_path),
            ("log_level", args.log_level),
        )
        if value is not None
    }
    if changes:
        settings = replace(settings, **changes)
        try:
            path = settings_service.save_settings(settings)
        except OSError as e:
            logger.error("Could not save settings: %s", e)
            print(f"Could not save settings: {e}", file=sys.stderr)
            return 1
        logger.info("Saved settings to %s", path)

    for name, value in (
        ("steam_exec", settings.steam_exec),
        ("gptk_path", settings.gptk_path),
        ("log_level", settings.log_level),
    ):
        print(f"{name} = {value}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    settings = settings_service.load_settings()
    args = parse_args(argv, settings)

    level = logging.DEBUG if args.verbose else logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.INFO
    try:
        configure_logging(level, args.log_file)
    except OSError as e:
        print(f"Could not open log file: {e}", file=sys.stderr)
        return 1

    if args.command == "config":
        return run_config(args, settings)
    return run_start(args, settings)
