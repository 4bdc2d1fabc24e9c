"""Command line interface.

Usage:
    tongues translate locales greeting.hello --arg name=Ada
    tongues translate locales status.done --locale fr_FR.UTF-8 --plain
    tongues candidates fr_CA@quebec
    tongues list locales

Exit Codes:
    0   Success
    1   Translation failed (diagnostic printed to stderr)
    2   Usage error

Environment:
    LANG        Default locale when --locale is not given
    NO_COLOR    Any non-empty value disables styling (same as --plain)

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path

from tongues.diagnostics import DiagnosticFormatter, OutputFormat, TonguesError
from tongues.locale_utils import parse_locale
from tongues.localization import (
    FallbackInfo,
    ResolverConfig,
    Translator,
    candidate_file_names,
    list_translations,
)

__all__ = ["build_parser", "main"]

logger = logging.getLogger(__name__)


def _parse_assignment(text: str) -> tuple[str, str]:
    """argparse type for NAME=VALUE pairs."""
    name, sep, value = text.partition("=")
    if not sep or not name:
        msg = f"expected NAME=VALUE, got {text!r}"
        raise argparse.ArgumentTypeError(msg)
    return name, value


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (exposed for tests and shell completion)."""
    parser = argparse.ArgumentParser(
        prog="tongues",
        description="Translate message keys using a directory of TOML translation files.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Translate with the locale from $LANG:
  tongues translate locales greeting.hello --arg name=Ada

  # Force a locale and strip styling:
  tongues translate locales status.done --locale fr_FR.UTF-8 --plain

  # Show which file names would be tried:
  tongues candidates fr_CA@quebec
""",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="count",
        default=0,
        help="Log fallback events (-v) or every lookup step (-vv) to stderr",
    )
    parser.add_argument(
        "--error-format",
        choices=[fmt.value for fmt in OutputFormat],
        default=OutputFormat.RUST.value,
        help="Format of diagnostics printed on failure (default: rust)",
    )
    parser.add_argument(
        "--extension",
        default=ResolverConfig().extension,
        help="Translation file suffix (default: .toml)",
    )
    parser.add_argument(
        "--default-language",
        default=ResolverConfig().default_language,
        help="Language tried when nothing matches the locale (default: en)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    translate_cmd = commands.add_parser("translate", help="Render a message")
    translate_cmd.add_argument("directory", type=Path, help="Translation directory")
    translate_cmd.add_argument("key", help="Dotted message key, e.g. greeting.hello")
    translate_cmd.add_argument(
        "--arg",
        "-a",
        dest="arguments",
        action="append",
        type=_parse_assignment,
        default=[],
        metavar="NAME=VALUE",
        help="Value for a ($NAME) placeholder (repeatable)",
    )
    translate_cmd.add_argument("--locale", "-l", help="Locale string (default: $LANG)")
    translate_cmd.add_argument(
        "--plain", action="store_true", help="Do not emit ANSI styling sequences"
    )
    translate_cmd.add_argument(
        "--raw", action="store_true", help="Print the template without substitution or markup"
    )

    candidates_cmd = commands.add_parser(
        "candidates", help="List file names tried for a locale, most specific first"
    )
    candidates_cmd.add_argument("locale", help="Locale string, e.g. fr_CA@quebec")

    list_cmd = commands.add_parser("list", help="Describe translation files in a directory")
    list_cmd.add_argument("directory", type=Path, help="Translation directory")

    return parser


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _log_fallback(info: FallbackInfo) -> None:
    logger.info(
        "%s: %s has no '%s', trying %s",
        info.message_key,
        info.source_path,
        info.missing_segment,
        info.fallback_locale,
    )


def _run_translate(args: argparse.Namespace, config: ResolverConfig) -> int:
    translator = Translator(args.directory, config=config, on_fallback=_log_fallback)
    if args.raw:
        print(translator.resolve(args.key, args.locale).template)
        return 0
    plain = args.plain or bool(os.environ.get("NO_COLOR"))
    print(
        translator.translate(
            args.key, dict(args.arguments), locale=args.locale, color=not plain
        )
    )
    return 0


def _run_candidates(args: argparse.Namespace, config: ResolverConfig) -> int:
    tag = parse_locale(args.locale)
    print(f"# {tag.language} territory={tag.territory} encoding={tag.encoding} "
          f"modifier={tag.modifier}")
    for name in dict.fromkeys(candidate_file_names(tag, config.extension)):
        print(name)
    print(f"{tag.language}*{config.extension}")
    print(f"{config.default_language}*{config.extension}")
    return 0


def _run_list(args: argparse.Namespace, config: ResolverConfig) -> int:
    files = list_translations(args.directory, config)
    if not files:
        print(f"No translation files in {args.directory}", file=sys.stderr)
        return 1
    width = max(len(entry.path.name) for entry in files)
    for entry in files:
        print(f"{entry.path.name:<{width}}  {entry.display_name}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point.

    Args:
        argv: Command line arguments without the program name
              (default: sys.argv[1:])

    Returns:
        Process exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        config = ResolverConfig(
            extension=args.extension, default_language=args.default_language
        )
    except ValueError as e:
        parser.error(str(e))

    formatter = DiagnosticFormatter(output_format=OutputFormat(args.error_format))
    try:
        match args.command:
            case "translate":
                return _run_translate(args, config)
            case "candidates":
                return _run_candidates(args, config)
            case "list":
                return _run_list(args, config)
    except TonguesError as e:
        if e.diagnostic is not None:
            print(formatter.format(e.diagnostic), file=sys.stderr)
        else:
            print(f"error: {e}", file=sys.stderr)
        return 1
    parser.error(f"unknown command {args.command!r}")
