"""
Command-line entry point
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from .config import load_settings, parse_list, parse_toggle
from .exceptions import InspectionError
from .models import InspectionReport
from .services import InspectionService
from .utils import format_count

logger = logging.getLogger(__name__)

LOG_LEVELS = {0: logging.WARNING, 1: logging.INFO, 2: logging.DEBUG}

DESCRIPTION = "Checks i18next translations and application source code for broken references, " \
              "orphaned strings, and missing translations."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='i18nspector', description=DESCRIPTION)
    parser.add_argument('--resourcePaths', dest='resource_paths', metavar='<path>,…',
                        help="Comma-separated list of paths to recursively scan for translations. "
                             "Suffix a path with '?' to exempt its strings from orphan checks.")
    parser.add_argument('--resourceExtensions', dest='resource_extensions', metavar='<extension>,…',
                        help="Comma-separated list of translation file name extensions to process. "
                             "Defaults to '.json,.jsonc,.properties'.")
    parser.add_argument('--sourceCodePaths', dest='source_code_paths', metavar='<path>,…',
                        help="Comma-separated list of paths to recursively scan for source code.")
    parser.add_argument('--sourceCodeExtensions', dest='source_code_extensions', metavar='<extension>,…',
                        help="Comma-separated list of source code file name extensions to process. "
                             "Defaults to '.js,.jsx,.ts,.tsx'.")
    parser.add_argument('--checkForOrphanedStrings', dest='check_for_orphaned_strings', metavar='<no|yes>',
                        help="Whether to check for strings that aren't referenced by source code. "
                             "Defaults to 'yes'.")
    parser.add_argument('--checkForUntranslatedStrings', dest='check_for_untranslated_strings',
                        metavar='<no|yes>',
                        help="Whether to check for strings that are missing translations. Defaults to 'yes'.")
    parser.add_argument('--baseLanguage', dest='base_language_tag', metavar='<language-tag>',
                        help="IETF tag of the language in which strings are initially written. Defaults to 'en'.")
    parser.add_argument('--verbose', dest='verbose', type=int, choices=[0, 1, 2],
                        help="0 (default) prints a summary along with any problems found; 1 adds string counts "
                             "per translation file and reference counts per source code file; 2 adds every "
                             "visited directory, inspected file, and referenced string.")
    return parser


def overrides_from_args(args: argparse.Namespace) -> dict:
    """Settings overrides for the options given on the command line"""
    overrides = {
        'base_language_tag': args.base_language_tag,
        'verbose': args.verbose,
    }
    for name in ('resource_paths', 'source_code_paths', 'resource_extensions', 'source_code_extensions'):
        value = getattr(args, name)
        if value is not None:
            overrides[name] = parse_list(value) or None
    for name in ('check_for_orphaned_strings', 'check_for_untranslated_strings'):
        value = getattr(args, name)
        if value is not None:
            overrides[name] = parse_toggle(value)
    return overrides


def configure_logging(verbose: int):
    logging.basicConfig(
        level=LOG_LEVELS.get(verbose, logging.WARNING),
        format='%(message)s' if verbose < 2 else '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )


def format_report(report: InspectionReport) -> List[str]:
    """Human-readable report lines"""
    lines = [
        "",
        f"🌐  Inspected {format_count(len(report.defined_resources), 'string')}, "
        f"translations in {format_count(len(report.language_tags), 'language')}, and "
        f"references in {format_count(len(report.source_code_files), 'source code file')}."
    ]

    if report.untranslated_resources:
        lines += ["", "Untranslated strings:"]
        lines += [
            f"\t🟡 '{untranslated.resource.key}' ({', '.join(untranslated.missing_language_tags)})"
            for untranslated in report.untranslated_resources
        ]

    if report.orphaned_resources or report.orphans_unanalyzable:
        lines += ["", "Orphaned strings:"]
        if report.orphans_unanalyzable:
            lines.append("\t⚠️  String references cannot be analyzed until ⛔-marked source code problems "
                         "are resolved.")
        else:
            lines += [f"\t🟠 '{resource.key}'" for resource in report.orphaned_resources]

    if report.problems:
        lines += ["", "Source code problems:"]
        lines += [
            f"\t{'⛔' if problem.is_fatal else '🔴'} {problem.description}"
            for problem in report.problems
        ]

    return lines


async def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point; returns the process exit status"""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(overrides_from_args(args))
    except ValueError as e:
        print(f"🛑  {e}", file=sys.stderr)
        return 1

    if not settings.has_paths:
        parser.print_help()
        return 1

    configure_logging(settings.verbose)

    try:
        report = await InspectionService(settings).inspect()
    except InspectionError as e:
        print(f"\n🛑  {e}", file=sys.stderr)
        return 1

    print('\n'.join(format_report(report)))

    return 1 if report.has_failures else 0


def run():
    sys.exit(asyncio.run(main()))


if __name__ == '__main__':
    run()
