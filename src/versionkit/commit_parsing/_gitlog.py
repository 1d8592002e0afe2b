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

r"""Reader for captured ``git log`` output.

Expects the output of::

    git log --date=unix --decorate=short --format=medium --no-color

which looks like::

    commit 4917f329b13b590e1c34037d883ecb6e2f95789d (tag: v1.2.3, main)
    Author: Jane Doe <jane@example.com>
    Date:   1700000000

        feat: my third commit

This module only parses text that was already captured; running git is
the caller's job.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone

from versionkit.commit_parsing._message import Commit, parse_message
from versionkit.commit_parsing._types import ParseOptions
from versionkit.errors import E, VersionKitError

_COMMIT_HEAD: re.Pattern[str] = re.compile(
    r'^([0-9a-f]+)'  # hash
    r'(?: \((.*?)\))?'  # decorations
    r'\s+(Merge:.*\s+)?'  # merge parents
    r'Author:\s*(.*?)\s+'
    r'Date:\s*(\d+)\s+\n',
    re.ASCII,
)
_COMMIT_SPLIT: re.Pattern[str] = re.compile(r'^commit ', re.MULTILINE)
_MESSAGE_INDENT: re.Pattern[str] = re.compile(r'^ {4}', re.MULTILINE)

# https://git-scm.com/docs/git-check-ref-format
_INVALID_REF: re.Pattern[str] = re.compile(r'[\x00-\x20:*?\[\\\x7f]|/[/.]|@\{|^@$|^[/.]|[/.]$')


def check_ref(ref: str) -> None:
    """Raise unless ``ref`` is a well-formed git ref name.

    Raises:
        VersionKitError: With code ``E.GIT_REF_INVALID``.
    """
    if ref and _INVALID_REF.search(ref):
        raise VersionKitError(
            code=E.GIT_REF_INVALID,
            message=f'Invalid revision specifier: {ref!r}',
            hint='Tag names must follow git-check-ref-format rules.',
        )


def parse_commit(
    src: str,
    options: ParseOptions | None = None,
    *,
    include_merge: bool = False,
) -> Commit | None:
    """Parse one ``git log`` entry, without its leading ``commit `` keyword.

    Args:
        src: The entry text, starting with the commit hash.
        options: Reference detection options for the message.
        include_merge: Return merge commits instead of skipping them.

    Returns:
        The :class:`Commit`, or ``None`` for a blank entry or a skipped
        merge commit.

    Raises:
        VersionKitError: If a non-blank entry is not in the expected
            format, or a tag name is invalid.
    """
    m = _COMMIT_HEAD.match(src)
    if not m:
        if src.strip():
            raise VersionKitError(
                code=E.COMMIT_MALFORMED,
                message=f'Malformed git commit:\ncommit {src}',
                hint='Capture the log with: git log --date=unix --decorate=short --format=medium --no-color',
            )
        return None

    hash_, refs, merge, author, timestamp = m.groups()
    if merge and not include_merge:
        return None

    tags: list[str] = []
    for ref in (refs or '').split(', '):
        if ref.startswith('tag: '):
            tag = ref[len('tag: ') :]
            check_ref(tag)
            tags.append(tag)

    message = _MESSAGE_INDENT.sub('', src[m.end() :]).rstrip()
    return Commit(
        hash=hash_,
        message=parse_message(message, options),
        author=author,
        date=datetime.fromtimestamp(int(timestamp), tz=timezone.utc),
        tags=tuple(tags),
        merge=bool(merge),
    )


def parse_git_log(
    text: str,
    options: ParseOptions | None = None,
    *,
    include_merge: bool = False,
) -> list[Commit]:
    """Parse a whole ``git log`` dump, newest commit first.

    Args:
        text: The captured log output.
        options: Reference detection options for every message.
        include_merge: Keep merge commits.

    Returns:
        The parsed commits in log order.
    """
    commits: list[Commit] = []
    for src in _COMMIT_SPLIT.split(text):
        commit = parse_commit(src, options, include_merge=include_merge)
        if commit is not None:
            commits.append(commit)
    return commits
