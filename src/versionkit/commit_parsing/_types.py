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

"""Pure leaf types for commit message parsing.

This module has **zero** runtime dependencies beyond the standard library
and no imports from other ``versionkit`` modules. Everything here is a
frozen dataclass or enum: no I/O, no logging, no side effects.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DEFAULT_ISSUE_PREFIXES: tuple[str, ...] = ('#',)

DEFAULT_REFERENCE_ACTIONS: tuple[str, ...] = (
    'close',
    'closes',
    'closed',
    'fix',
    'fixes',
    'fixed',
    'resolve',
    'resolves',
    'resolved',
)


class BumpType(Enum):
    """Semver bump categories, ordered by precedence (highest first).

    ``V1`` is never recommended from commits; callers pass it to
    :func:`~versionkit.bump.apply_bump` to leave the ``0.x`` range.
    """

    MAJOR = 'major'
    MINOR = 'minor'
    PATCH = 'patch'
    NONE = 'none'
    V1 = 'v1'


# Lower index = higher precedence. V1 is an explicit request, not a rank.
BUMP_PRECEDENCE: list[BumpType] = [
    BumpType.MAJOR,
    BumpType.MINOR,
    BumpType.PATCH,
    BumpType.NONE,
]


def max_bump(a: BumpType, b: BumpType) -> BumpType:
    """Return the higher-precedence bump type.

    >>> max_bump(BumpType.MINOR, BumpType.PATCH)
    <BumpType.MINOR: 'minor'>
    >>> max_bump(BumpType.NONE, BumpType.MAJOR)
    <BumpType.MAJOR: 'major'>
    """
    return BUMP_PRECEDENCE[min(BUMP_PRECEDENCE.index(a), BUMP_PRECEDENCE.index(b))]


@dataclass(frozen=True)
class ParseOptions:
    """Options controlling reference detection.

    Hashable, so compiled patterns can be cached per options value.

    Attributes:
        issue_prefixes: Literal strings that introduce an issue id
            (``'#'`` for ``#123``, ``'gh-'`` for ``gh-123``).
        reference_actions: Verbs that may precede a reference
            (``Closes #123``). Matched case-insensitively.
    """

    issue_prefixes: tuple[str, ...] = DEFAULT_ISSUE_PREFIXES
    reference_actions: tuple[str, ...] = DEFAULT_REFERENCE_ACTIONS

    def __post_init__(self) -> None:
        # Lists are accepted but stored as tuples to stay hashable.
        object.__setattr__(self, 'issue_prefixes', tuple(self.issue_prefixes))
        object.__setattr__(self, 'reference_actions', tuple(self.reference_actions))


@dataclass(frozen=True)
class FooterEntry:
    """One ``token: value`` (or ``token #value``) footer field."""

    token: str
    value: str


@dataclass(frozen=True)
class Reference:
    """An issue reference such as ``Closes owner/repo#12``.

    Attributes:
        raw: The matched text, including the action verb if any.
        action: The verb preceding the reference (``"Closes"``), as
            written, or ``None``.
        scope: Repository-like text directly before the prefix
            (``"owner/repo"``), or ``None``.
        prefix: The issue prefix that matched (``"#"``).
        issue: The issue id (``"12"``).
    """

    raw: str
    action: str | None
    scope: str | None
    prefix: str
    issue: str

    @property
    def ref(self) -> str:
        """The reference without its action, e.g. ``owner/repo#12``."""
        return f'{self.scope or ""}{self.prefix}{self.issue}'


@dataclass(frozen=True)
class Revert:
    """The commit named by a ``This reverts commit <hash>.`` message."""

    hash: str
    header: str
