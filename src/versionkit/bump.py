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

"""Version bump recommendation and application.

Key Concepts (ELI5)::

    ┌─────────────────────┬────────────────────────────────────────────────┐
    │ Concept             │ ELI5 Explanation                               │
    ├─────────────────────┼────────────────────────────────────────────────┤
    │ Recommendation      │ Look at every commit since the last release   │
    │                     │ and pick the strongest signal: a breaking     │
    │                     │ change means major, a ``feat`` means minor,   │
    │                     │ anything listed in the changelog means patch. │
    ├─────────────────────┼────────────────────────────────────────────────┤
    │ Pre-1.0 versions    │ ``0.x`` releases make no compatibility        │
    │                     │ promise, so major bumps land on the minor     │
    │                     │ digit and minor bumps on the patch digit.     │
    │                     │ Only an explicit ``v1`` bump reaches 1.0.0.   │
    ├─────────────────────┼────────────────────────────────────────────────┤
    │ Prerelease          │ ``None`` keeps going the way the previous     │
    │ directive           │ version went, ``True``/``"rc"`` asks for a    │
    │                     │ prerelease, ``False`` promotes to a release.  │
    └─────────────────────┴────────────────────────────────────────────────┘

Usage::

    from versionkit.bump import apply_bump, recommend_bump

    bump = recommend_bump(commits, changelog_sections=('feat', 'fix'))
    apply_bump('1.2.3', bump)  # '1.3.0' for a feat
    apply_bump('1.2.3', 'major', prerelease='rc')  # '2.0.0-rc.0'
    apply_bump('0.4.1', 'v1')  # '1.0.0'

Pure implementation: no I/O, no logging, no side effects.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable
from typing import TypeAlias

from versionkit.commit_parsing import BumpType, Commit, max_bump
from versionkit.errors import InvalidBump
from versionkit.semver import PRERELEASE_PATTERN, ReleaseType, SemVer

# None keeps the previous version's prerelease-ness, True/False force it,
# a string forces a prerelease with that identifier.
PrereleaseDirective: TypeAlias = bool | str | None

DEFAULT_CHANGELOG_SECTIONS: tuple[str, ...] = ('feat', 'fix', 'perf', 'revert')

# Commits without a conventional type are filed under this section.
OTHER_SECTION = 'other'


def recommend_bump(
    commits: Iterable[Commit],
    changelog_sections: Collection[str] = DEFAULT_CHANGELOG_SECTIONS,
    bump_all_changes: bool = False,
) -> BumpType:
    """Reduce a list of commits to a single bump category.

    Args:
        commits: Commits since the previous release, in any order.
        changelog_sections: Commit types that are worth a patch release.
        bump_all_changes: Treat every commit as worth a patch release.

    Returns:
        ``MAJOR`` if any commit carries a breaking change note, else
        ``MINOR`` if any commit is a ``feat``, else ``PATCH`` if any
        commit counts as a change, else ``NONE``.
    """
    bump = BumpType.NONE
    for commit in commits:
        message = commit.message
        if message.breaking is not None:
            return BumpType.MAJOR
        if message.type == 'feat':
            bump = max_bump(bump, BumpType.MINOR)
        elif bump_all_changes or (message.type or OTHER_SECTION) in changelog_sections:
            bump = max_bump(bump, BumpType.PATCH)
    return bump


def coerce_bump(bump: BumpType | str, previous: str) -> BumpType:
    """Return ``bump`` as a :class:`BumpType`, accepting names like ``"Minor"``.

    Raises:
        InvalidBump: If ``bump`` names no bump type.
    """
    if isinstance(bump, BumpType):
        return bump
    try:
        return BumpType(str(bump).lower())
    except ValueError:
        raise InvalidBump(bump, previous, 'unknown bump type') from None


def _release_type(version: SemVer, bump: BumpType, previous: str) -> ReleaseType:
    """Map a bump category onto the version's major-version rules."""
    if bump is BumpType.NONE:
        raise InvalidBump(bump, previous, 'nothing to bump')
    if version.major > 0:
        if bump is BumpType.V1:
            raise InvalidBump(bump, previous, 'the version is already 1.0.0 or later')
        return ReleaseType(bump.value)
    if bump is BumpType.V1:
        return ReleaseType.MAJOR
    if bump is BumpType.MAJOR:
        return ReleaseType.MINOR
    return ReleaseType.PATCH


def _prerelease_type(version: SemVer, release: ReleaseType) -> ReleaseType:
    """Pick the prerelease flavour of ``release``.

    A prerelease that already sits on the target boundary (e.g.
    ``2.0.0-3`` for a major, ``1.3.0-3`` for a minor) only advances its
    counter.
    """
    if version.is_prerelease and version.patch == 0:
        if release is ReleaseType.MAJOR and version.minor != 0:
            return ReleaseType.PREMAJOR
        return ReleaseType.PRERELEASE
    if release is ReleaseType.MAJOR:
        return ReleaseType.PREMAJOR
    if release is ReleaseType.MINOR:
        return ReleaseType.PREMINOR
    return ReleaseType.PRERELEASE


def apply_bump(
    previous: str,
    bump: BumpType | str,
    prerelease: PrereleaseDirective = None,
) -> str:
    """Compute the next version string.

    Args:
        previous: The current version, e.g. ``"1.2.3"`` or ``"1.2.3-rc.1"``.
        bump: ``MAJOR``, ``MINOR``, ``PATCH`` or ``V1`` (also accepted as
            the strings ``"major"``, ``"minor"``, ``"patch"``, ``"v1"``).
        prerelease: The prerelease directive; see :data:`PrereleaseDirective`.

    Returns:
        The next version, e.g. ``"1.3.0"`` or ``"2.0.0-rc.0"``.

    Raises:
        InvalidVersion: If ``previous`` is not a semantic version.
        InvalidBump: If ``bump`` is unknown, ``NONE``, or ``V1`` on a
            version that is already 1.0.0 or later, or if ``prerelease``
            is not a valid dot-separated prerelease identifier.
    """
    version = SemVer.parse(previous)
    release = _release_type(version, coerce_bump(bump, previous), previous)

    if prerelease is True or isinstance(prerelease, str):
        wants_prerelease = True
    elif prerelease is None:
        wants_prerelease = version.is_prerelease
    else:
        wants_prerelease = False

    if not wants_prerelease:
        return str(version.bump(release))

    release = _prerelease_type(version, release)
    identifier: str | None = None
    if isinstance(prerelease, str) and prerelease:
        if not PRERELEASE_PATTERN.match(prerelease):
            raise InvalidBump(bump, previous, f'{prerelease!r} is not a valid prerelease identifier')
        identifier = prerelease
    elif release is not ReleaseType.PRERELEASE:
        # Carry e.g. "rc" from "1.2.3-rc.4" onto the new line; "1.2.3-4"
        # has nothing to carry.
        identifier = '.'.join(str(part) for part in version.prerelease[:-1]) or None
    return str(version.bump(release, identifier))


__all__ = [
    'DEFAULT_CHANGELOG_SECTIONS',
    'OTHER_SECTION',
    'PrereleaseDirective',
    'apply_bump',
    'coerce_bump',
    'recommend_bump',
]
