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

r"""Commit message parsing.

Turns raw commit messages into :class:`CommitMessage` records holding
the conventional-commit header fields, body, footer fields, breaking
change note, issue references, mentions and revert information.

Usage::

    from versionkit.commit_parsing import ParseOptions, parse_message

    msg = parse_message('feat(auth)!: drop v1 tokens\n\nCloses #12')
    assert msg.type == 'feat'
    assert msg.scope == 'auth'
    assert msg.breaking == 'drop v1 tokens'
    assert [r.issue for r in msg.references] == ['12']

    # Custom issue prefixes and action verbs:
    opts = ParseOptions(issue_prefixes=('#', 'gh-'), reference_actions=('kills',))
    msg = parse_message('fix: x\n\nKills gh-3', opts)
    assert msg.references[0].action == 'Kills'

Captured ``git log`` output is read with :func:`parse_git_log`, and
:func:`filter_reverted` drops commits that were later reverted.
"""

from versionkit.commit_parsing._gitlog import check_ref, parse_commit, parse_git_log
from versionkit.commit_parsing._message import (
    BREAKING_TOKENS,
    Commit,
    CommitMessage,
    find_revert,
    parse_message,
)
from versionkit.commit_parsing._references import find_mentions, find_references
from versionkit.commit_parsing._revert import filter_reverted
from versionkit.commit_parsing._types import (
    BUMP_PRECEDENCE,
    DEFAULT_ISSUE_PREFIXES,
    DEFAULT_REFERENCE_ACTIONS,
    BumpType,
    FooterEntry,
    ParseOptions,
    Reference,
    Revert,
    max_bump,
)

__all__ = [
    'BREAKING_TOKENS',
    'BUMP_PRECEDENCE',
    'DEFAULT_ISSUE_PREFIXES',
    'DEFAULT_REFERENCE_ACTIONS',
    'BumpType',
    'Commit',
    'CommitMessage',
    'FooterEntry',
    'ParseOptions',
    'Reference',
    'Revert',
    'check_ref',
    'filter_reverted',
    'find_mentions',
    'find_references',
    'find_revert',
    'max_bump',
    'parse_commit',
    'parse_git_log',
    'parse_message',
]
