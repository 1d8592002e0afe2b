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

"""versionkit: conventional commit parsing and next-version recommendation.

Usage::

    from versionkit import Commit, apply_bump, parse_message, recommend_bump

    commits = [Commit(hash='a1', message=parse_message('feat: add export'))]
    apply_bump('1.2.3', recommend_bump(commits))  # '1.3.0'
"""

from versionkit.bump import DEFAULT_CHANGELOG_SECTIONS, PrereleaseDirective, apply_bump, recommend_bump
from versionkit.commit_parsing import (
    BumpType,
    Commit,
    CommitMessage,
    FooterEntry,
    ParseOptions,
    Reference,
    Revert,
    filter_reverted,
    find_references,
    parse_git_log,
    parse_message,
)
from versionkit.config import VersionKitConfig, load_config
from versionkit.errors import E, InvalidBump, InvalidVersion, VersionKitError
from versionkit.semver import ReleaseType, SemVer, parse_version
from versionkit.versioning import ReleaseUpdate, compute_update

__all__ = [
    'DEFAULT_CHANGELOG_SECTIONS',
    'BumpType',
    'Commit',
    'CommitMessage',
    'E',
    'FooterEntry',
    'InvalidBump',
    'InvalidVersion',
    'ParseOptions',
    'PrereleaseDirective',
    'Reference',
    'ReleaseType',
    'ReleaseUpdate',
    'Revert',
    'SemVer',
    'VersionKitConfig',
    'VersionKitError',
    'apply_bump',
    'compute_update',
    'filter_reverted',
    'find_references',
    'load_config',
    'parse_git_log',
    'parse_message',
    'parse_version',
    'recommend_bump',
]
