#!/usr/bin/env python3
import argparse
import sys
from datetime import datetime


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="status-clock",
        description="Status Clock: a live clock in a terminal status bar with a settings menu",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  status-clock                          # Start the interactive clock
  status-clock --once                   # Print the status bar text and exit
  status-clock --format "h:mm:ss a"     # Format the current time
  status-clock --settings               # Show stored settings
        """,
    )

    parser.add_argument(
        "--version", "-v",
        action="store_true",
        help="Show version information"
    )

    parser.add_argument(
        "--home",
        metavar="DIR",
        help="Configuration directory (default: ~/.status_clock or $STATUS_CLOCK_HOME)"
    )

    parser.add_argument(
        "--once",
        action="store_true",
        help="Print the current status bar text and exit"
    )

    parser.add_argument(
        "--format", "-f",
        metavar="FMT",
        dest="time_format",
        help="Format the current time with tokens HH H hh h mm m ss s a A and exit"
    )

    parser.add_argument(
        "--military",
        action="store_true",
        help="Format the current time as 24-hour HH:mm and exit"
    )

    parser.add_argument(
        "--settings",
        action="store_true",
        help="Show the stored settings and exit"
    )

    parser.add_argument(
        "--reset-settings",
        action="store_true",
        help="Restore default settings and exit"
    )

    parser.add_argument(
        "--config-reload",
        action="store_true",
        help="Reload configuration and exit"
    )

    return parser


def main(argv=None, clock=datetime.now):
    args = build_parser().parse_args(argv)

    if args.version:
        from status_clock import __version__

        print(f"Status Clock version {__version__}")
        return 0

    from status_clock.config import Config

    if args.home:
        Config.use_directory(args.home)
        Config.reload()

    if args.time_format is not None or args.military:
        from status_clock.formatter import TimeFormatConfig, format_time

        config = TimeFormatConfig(
            military_time=args.military, custom_format=args.time_format or ""
        )
        print(format_time(clock(), config))
        return 0

    if args.config_reload:
        if Config.reload():
            print("Configuration reloaded successfully")
        else:
            print("Failed to reload configuration")
        return 0

    from status_clock.settings import SettingsStore

    if args.reset_settings:
        store = SettingsStore()
        store.reset()
        print(f"Settings reset to defaults in {store.path}")
        return 0

    if args.settings:
        from rich.console import Console

        from status_clock.ui.manager import UIManager

        UIManager(Console(), SettingsStore()).show_settings()
        return 0

    if args.once:
        from status_clock.formatter import TimeFormatConfig, render_status_text
        from status_clock.ui.theme import render_theme_icons

        store = SettingsStore()
        if not store.get("statusClock.enable"):
            print("(disabled)")
            return 0
        text = render_status_text(
            clock(),
            TimeFormatConfig.from_settings(store),
            show_date=bool(store.get("statusClock.showDate")),
        )
        print(render_theme_icons(text))
        return 0

    try:
        from status_clock import app

        app.main()
        return 0
    except KeyboardInterrupt:
        print("\nBye!")
        return 0
    except Exception as exc:
        print(f"Error: {exc}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
