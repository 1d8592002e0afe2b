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

r"""Commit message parser.

A message is split into blank-line separated paragraphs::

    feat(scope)!: subject           <- header (first paragraph)

    Free-form body text.            <- body

    BREAKING CHANGE: what broke     <- footer, from the first paragraph
    Closes #12                         that starts with a footer token

The header is matched against ``type(scope)!: subject``. Footer fields
are ``Token: value`` or ``Token #ref``; ``BREAKING CHANGE`` is the only
token allowed to contain a space. Once the footer has started, every
following line belongs to it: lines that do not start a new field
continue the value of the previous one.

The parser never raises. A message that follows no convention at all
still yields a :class:`CommitMessage` with ``type``/``scope`` set to
``None``, ``subject`` equal to the header and an empty footer.

Pure implementation: depends only on ``re`` and sibling modules.
No I/O, no logging, no side effects.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime

from versionkit.commit_parsing._references import find_mentions, find_references
from versionkit.commit_parsing._types import FooterEntry, ParseOptions, Reference, Revert

BREAKING_TOKENS: frozenset[str] = frozenset({'BREAKING CHANGE', 'BREAKING-CHANGE'})

_TRAILING_SPACE = re.compile(r'[ \t]+$', re.MULTILINE)
_PARAGRAPH_BREAK = re.compile(r'(?:\r?\n){2,}')
_WHITESPACE_RUN = re.compile(r'\s+')

# Footer field start: optional indent or "* " bullet, then the token,
# then either ": " or whitespace directly followed by a "#" reference.
_FOOTER_SOURCE = r'^[ \t*]*(BREAKING CHANGE|[\w-]+)(:\s|[ \t]+(?=#))'
_FOOTER_START: re.Pattern[str] = re.compile(_FOOTER_SOURCE, re.ASCII)
_FOOTER_FIELD: re.Pattern[str] = re.compile(_FOOTER_SOURCE, re.MULTILINE | re.ASCII)

# Header: type(scope)!: subject
HEADER_PATTERN: re.Pattern[str] = re.compile(r'^(\w+)(?:\((.*)\))?(!?): (.+)$', re.ASCII)

# Both GitHub's 'Revert "..."' and the conventional 'revert: ...' forms,
# followed by git's standard "This reverts commit <hash>." line.
REVERT_PATTERN: re.Pattern[str] = re.compile(
    r'^(?:Revert|revert:)\s(?:""|"?([\s\S]+?)"?)\s*This reverts commit (\w+)\.',
    re.IGNORECASE | re.ASCII,
)


def find_revert(raw: str) -> Revert | None:
    """Return the reverted commit named in ``raw``, if any.

    Only returns a :class:`Revert` when both the reverted header and the
    reverted hash are present.
    """
    m = REVERT_PATTERN.match(raw)
    if not m:
        return None
    header, hash_ = m.group(1), m.group(2)
    if not header or not hash_:
        return None
    return Revert(hash=hash_, header=header)


@dataclass(frozen=True)
class CommitMessage:
    """A parsed commit message.

    Build instances with :func:`parse_message`. ``references``,
    ``mentions`` and ``revert`` are derived from ``raw`` on each access.

    Attributes:
        raw: The message exactly as given.
        header: The first paragraph.
        body: Paragraphs between the header and the footer.
        footer: Footer fields in order of appearance. A token may repeat.
        type: Conventional commit type, or ``None`` if the header does
            not follow the ``type(scope): subject`` shape.
        scope: Conventional commit scope, or ``None``.
        subject: The header text after ``type(scope): ``, or the whole
            whitespace-normalized header when ``type`` is ``None``.
        breaking: Breaking change description, or ``None``.
        options: The options used for reference detection.
    """

    raw: str
    header: str = ''
    body: str = ''
    footer: tuple[FooterEntry, ...] = ()
    type: str | None = None
    scope: str | None = None
    subject: str = ''
    breaking: str | None = None
    options: ParseOptions = field(default_factory=ParseOptions)

    @property
    def references(self) -> list[Reference]:
        """Issue references anywhere in the raw message."""
        return find_references(self.raw, self.options)

    @property
    def mentions(self) -> list[str]:
        """``@name`` mentions anywhere in the raw message."""
        return find_mentions(self.raw)

    @property
    def revert(self) -> Revert | None:
        """The commit this message reverts, or ``None``."""
        return find_revert(self.raw)


@dataclass(frozen=True)
class Commit:
    """One commit: an opaque hash plus its parsed message.

    ``author``, ``date``, ``tags`` and ``merge`` are filled in when the
    commit is read from ``git log`` output and keep their defaults
    otherwise.
    """

    hash: str
    message: CommitMessage
    author: str = ''
    date: datetime | None = None
    tags: tuple[str, ...] = ()
    merge: bool = False


def _split_footer(src: str) -> tuple[FooterEntry, ...]:
    """Split the footer text into consecutive token/value fields."""
    entries: list[FooterEntry] = []
    token = ''
    value_start = -1
    for m in _FOOTER_FIELD.finditer(src):
        if token:
            entries.append(FooterEntry(token=token, value=src[value_start : m.start()].strip()))
        token = m.group(1)
        value_start = m.end()
    if token:
        entries.append(FooterEntry(token=token, value=src[value_start:].strip()))
    return tuple(entries)


def parse_message(raw: str, options: ParseOptions | None = None) -> CommitMessage:
    """Parse a raw commit message.

    Args:
        raw: The full commit message.
        options: Reference detection options, kept on the result for its
            ``references`` property.

    Returns:
        The parsed :class:`CommitMessage`.
    """
    options = options or ParseOptions()
    paragraphs = _PARAGRAPH_BREAK.split(_TRAILING_SPACE.sub('', raw).strip())
    header = paragraphs.pop(0)

    footer: tuple[FooterEntry, ...] = ()
    for index, paragraph in enumerate(paragraphs):
        if _FOOTER_START.match(paragraph):
            footer = _split_footer('\n\n'.join(paragraphs[index:]))
            del paragraphs[index:]
            break

    body = '\n\n'.join(paragraphs).strip()
    breaking = next((entry.value for entry in footer if entry.token in BREAKING_TOKENS), None)

    type_: str | None = None
    scope: str | None = None
    subject = _WHITESPACE_RUN.sub(' ', header)
    m = HEADER_PATTERN.match(subject)
    if m:
        type_ = m.group(1)
        scope = m.group(2) or None
        subject = m.group(4)
        # A footer note always wins over the "!" shorthand.
        if m.group(3) and not breaking:
            breaking = body or subject

    return CommitMessage(
        raw=raw,
        header=header,
        body=body,
        footer=footer,
        type=type_,
        scope=scope,
        subject=subject,
        breaking=breaking,
        options=options,
    )
