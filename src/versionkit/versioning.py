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

"""Compute the next release from a previous version and its commits.

Ties the pure pieces together::

    commits ──► filter_reverted ──► recommend_bump ──► apply_bump ──► version

Usage::

    from versionkit.commit_parsing import parse_git_log
    from versionkit.config import VersionKitConfig
    from versionkit.versioning import compute_update

    config = VersionKitConfig()
    commits = parse_git_log(log_text, config.parse_options)
    update = compute_update('1.2.3', commits, config)
    if update.version is not None:
        print(update.version)
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from versionkit.bump import apply_bump, coerce_bump, recommend_bump
from versionkit.commit_parsing import BumpType, Commit, filter_reverted
from versionkit.config import VersionKitConfig
from versionkit.logging import get_logger
from versionkit.semver import parse_version

logger = get_logger(__name__)


@dataclass(frozen=True)
class ReleaseUpdate:
    """The outcome of :func:`compute_update`.

    Attributes:
        commits: The commits that were considered, after revert filtering.
        bump: The bump that was applied (or ``NONE``).
        version: The next version, or ``None`` when no release is needed.
    """

    commits: tuple[Commit, ...]
    bump: BumpType
    version: str | None


def compute_update(
    previous: str,
    commits: Sequence[Commit],
    config: VersionKitConfig | None = None,
    bump: BumpType | str | None = None,
) -> ReleaseUpdate:
    """Recommend and apply the next version.

    Args:
        previous: The version of the last release.
        commits: Commits since the last release.
        config: Release rules; defaults to :class:`VersionKitConfig`.
        bump: Explicit bump overriding the recommendation.

    Returns:
        A :class:`ReleaseUpdate`.

    Raises:
        InvalidVersion: If ``previous`` is not a semantic version.
        InvalidBump: If ``bump`` cannot be applied to ``previous``. An
            explicit ``"none"`` is not an error; it yields no release.
    """
    config = config or VersionKitConfig()
    # Fail on a bad version even when no release turns out to be needed.
    parse_version(previous)

    considered = list(commits) if config.include_reverted_commits else filter_reverted(commits)
    if len(considered) != len(commits):
        logger.debug('reverted_commits_dropped', dropped=len(commits) - len(considered))

    if bump is None:
        resolved = recommend_bump(
            considered,
            changelog_sections=config.changelog_sections,
            bump_all_changes=config.bump_all_changes,
        )
    else:
        resolved = coerce_bump(bump, previous)

    if resolved is BumpType.NONE:
        logger.info('no_release_needed', previous=previous, commits=len(considered))
        return ReleaseUpdate(commits=tuple(considered), bump=resolved, version=None)

    version = apply_bump(previous, resolved, config.prerelease)
    logger.info(
        'release_update_computed',
        previous=previous,
        bump=resolved.value,
        version=version,
        commits=len(considered),
    )
    return ReleaseUpdate(commits=tuple(considered), bump=resolved, version=version)


__all__ = [
    'ReleaseUpdate',
    'compute_update',
]
