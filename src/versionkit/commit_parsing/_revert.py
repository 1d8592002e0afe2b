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

"""Revert cancellation.

A commit and the commit that reverts it cancel out: neither should
contribute to the version bump. A revert commit only cancels a commit
whose hash and header both match what the revert message names.
"""

from __future__ import annotations

from collections.abc import Sequence

from versionkit.commit_parsing._message import Commit


def filter_reverted(commits: Sequence[Commit]) -> list[Commit]:
    """Drop every reverted commit together with the commit reverting it.

    Reverts of commits that are not in ``commits`` are kept.

    Args:
        commits: Commits in any order.

    Returns:
        The remaining commits, in their original order.
    """
    reverts = {commit.hash: revert for commit in commits if (revert := commit.message.revert) is not None}

    removed: set[str] = set()
    for commit in commits:
        for reverting_hash, revert in reverts.items():
            if revert.hash.strip() == commit.hash.strip() and revert.header.strip() == commit.message.header.strip():
                removed.update((commit.hash, reverting_hash))
                break

    return [commit for commit in commits if commit.hash not in removed]
