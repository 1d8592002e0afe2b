# Copyright 2026 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# SPDX-License-Identifier: Apache-2.0

r"""The ``versionkit`` command line.

Both commands read stdin and never run git themselves::

    # Parse one commit message and print it as JSON.
    git log -1 --format=%B | versionkit parse

    # Recommend the next version from the commits since a tag.
    git log --date=unix --decorate=short --format=medium --no-color v1.2.3.. \
        | versionkit next 1.2.3 --prerelease rc

Results go to stdout; the commit summary, logs and errors go to stderr.
Exit status is 0 on success (including "no release needed") and 1 on
invalid input.
"""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from versionkit.commit_parsing import (
    DEFAULT_ISSUE_PREFIXES,
    DEFAULT_REFERENCE_ACTIONS,
    CommitMessage,
    ParseOptions,
    parse_git_log,
    parse_message,
)
from versionkit.config import load_config
from versionkit.errors import VersionKitError
from versionkit.logging import configure_logging, get_logger
from versionkit.versioning import ReleaseUpdate, compute_update

logger = get_logger(__name__)

_SHORT_HASH = 7


def message_to_dict(message: CommitMessage) -> dict[str, Any]:
    """Return a JSON-serializable view of ``message``, derived fields included."""
    revert = message.revert
    return {
        'raw': message.raw,
        'header': message.header,
        'type': message.type,
        'scope': message.scope,
        'subject': message.subject,
        'body': message.body,
        'footer': [{'token': entry.token, 'value': entry.value} for entry in message.footer],
        'breaking': message.breaking,
        'references': [
            {
                'raw': ref.raw,
                'ref': ref.ref,
                'action': ref.action,
                'scope': ref.scope,
                'prefix': ref.prefix,
                'issue': ref.issue,
            }
            for ref in message.references
        ],
        'mentions': message.mentions,
        'revert': {'hash': revert.hash, 'header': revert.header} if revert else None,
    }


def print_update_table(update: ReleaseUpdate, previous: str, console: Console) -> None:
    """Print the considered commits and the resulting version."""
    table = Table(show_header=True, header_style='bold', show_edge=False, pad_edge=False)
    table.add_column('Commit', style='dim')
    table.add_column('Type', style='bold')
    table.add_column('Scope')
    table.add_column('Subject', ratio=1)

    for commit in update.commits:
        message = commit.message
        kind = Text(message.type or '-')
        if message.breaking is not None:
            kind.append('!', style='bold red')
        table.add_row(
            commit.hash[:_SHORT_HASH],
            kind,
            escape(message.scope or ''),
            escape(message.subject),
        )

    console.print(table)
    if update.version is None:
        console.print(f'\nNo release needed since [bold]{escape(previous)}[/].')
    else:
        console.print(
            f'\n[bold]{update.bump.value}[/] bump: {escape(previous)} [cyan]->[/] [bold green]{update.version}[/]',
        )


def _print_error(exc: VersionKitError, console: Console) -> None:
    console.print(f'[bold red]error\\[{exc.code.value}][/][bold]: {escape(exc.message)}[/]')
    if exc.hint:
        console.print(f'   [cyan]=[/] [green]help[/]: {escape(exc.hint)}')


def _cmd_parse(args: argparse.Namespace) -> int:
    options = ParseOptions(
        issue_prefixes=tuple(args.issue_prefix or DEFAULT_ISSUE_PREFIXES),
        reference_actions=tuple(args.action or DEFAULT_REFERENCE_ACTIONS),
    )
    message = parse_message(sys.stdin.read(), options)
    print(json.dumps(message_to_dict(message), indent=2))  # noqa: T201
    return 0


def _cmd_next(args: argparse.Namespace, console: Console) -> int:
    config = load_config(Path.cwd(), args.config)
    overrides: dict[str, Any] = {
        'bump_all_changes': True if args.all_commits else None,
        'include_merge_commits': True if args.include_merge else None,
        'include_reverted_commits': True if args.include_reverted else None,
    }
    if args.prerelease is not None:
        overrides['prerelease'] = args.prerelease
    config = config.with_overrides(**overrides)

    commits = parse_git_log(sys.stdin.read(), config.parse_options, include_merge=config.include_merge_commits)
    logger.debug('commits_read', count=len(commits))
    update = compute_update(args.version, commits, config, args.bump)

    if not args.quiet:
        print_update_table(update, args.version, console)
    if update.version is not None:
        print(update.version)  # noqa: T201
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the ``versionkit`` command."""
    parser = argparse.ArgumentParser(
        prog='versionkit',
        description='Parse conventional commits and recommend the next semantic version.',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Log debug events.')
    parser.add_argument('-q', '--quiet', action='store_true', help='Only log warnings and errors.')
    parser.add_argument('--json-log', action='store_true', help='Log one JSON object per line.')
    subparsers = parser.add_subparsers(dest='command', required=True)

    parse_cmd = subparsers.add_parser('parse', help='Parse a commit message read from stdin.')
    parse_cmd.add_argument(
        '--issue-prefix',
        action='append',
        metavar='PREFIX',
        help='Issue prefix to recognize (repeatable, default "#").',
    )
    parse_cmd.add_argument(
        '--action',
        action='append',
        metavar='VERB',
        help='Reference action verb to recognize (repeatable).',
    )

    next_cmd = subparsers.add_parser('next', help='Recommend the next version from git log output on stdin.')
    next_cmd.add_argument('version', help='The version of the previous release.')
    next_cmd.add_argument('--config', type=Path, help='Config file (default: versionkit.toml or pyproject.toml).')
    next_cmd.add_argument(
        '-a',
        '--all-commits',
        action='store_true',
        help='Treat every commit as worth at least a patch release.',
    )
    prerelease = next_cmd.add_mutually_exclusive_group()
    prerelease.add_argument(
        '-p',
        '--prerelease',
        nargs='?',
        const=True,
        default=None,
        metavar='ID',
        help='Produce a prerelease, optionally with identifier ID (e.g. "rc").',
    )
    prerelease.add_argument(
        '--no-prerelease',
        dest='prerelease',
        action='store_const',
        const=False,
        help='Promote a prerelease to a release.',
    )
    next_cmd.add_argument(
        '--bump',
        choices=('major', 'minor', 'patch', 'v1'),
        help='Use this bump instead of the recommended one.',
    )
    next_cmd.add_argument('--include-merge', action='store_true', help='Consider merge commits.')
    next_cmd.add_argument('--include-reverted', action='store_true', help='Keep reverted commits and their reverts.')
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return its exit status."""
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose, quiet=args.quiet, json_log=args.json_log)
    console = Console(stderr=True)

    try:
        if args.command == 'parse':
            return _cmd_parse(args)
        return _cmd_next(args, console)
    except VersionKitError as exc:
        logger.debug('command_failed', code=exc.code.value)
        _print_error(exc, console)
        return 1


if __name__ == '__main__':
    sys.exit(main())
