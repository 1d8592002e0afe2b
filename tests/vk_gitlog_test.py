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

"""Tests for reading captured git log output."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from versionkit.commit_parsing import ParseOptions, check_ref, parse_commit, parse_git_log
from versionkit.errors import E, VersionKitError

LOG = """\
commit 4917f329b13b590e1c34037d883ecb6e2f95789d (HEAD -> main, tag: v1.3.0, origin/main)
Author: Jane Doe <jane@example.com>
Date:   1700000200

    feat(api): add export endpoint

    Exports everything.

    Closes #12

commit 8a3c1de2f5b5e8c1f8e1b7a2d0c9e6f4a1b2c3d4
Merge: 1111111 2222222
Author: Jane Doe <jane@example.com>
Date:   1700000100

    Merge branch 'feature'

commit 0c1d2e3f4a5b6c7d8e9f0a1b2c3d4e5f6a7b8c9d (tag: v1.2.3)
Author: John Roe <john@example.com>
Date:   1700000000

    fix: handle empty input
"""


class TestParseGitLog:
    """Tests for parse_git_log()."""

    def test_commits_in_log_order(self) -> None:
        """Merge commits are skipped by default."""
        commits = parse_git_log(LOG)
        assert [c.hash[:7] for c in commits] == ['4917f32', '0c1d2e3']

    def test_fields(self) -> None:
        """Author, date, tags and message are extracted."""
        first = parse_git_log(LOG)[0]
        assert first.author == 'Jane Doe <jane@example.com>'
        assert first.date == datetime.fromtimestamp(1700000200, tz=timezone.utc)
        assert first.tags == ('v1.3.0',)
        assert first.merge is False
        assert first.message.raw == 'feat(api): add export endpoint\n\nExports everything.\n\nCloses #12'
        assert first.message.type == 'feat'
        assert first.message.scope == 'api'
        assert first.message.body == 'Exports everything.'

    def test_include_merge(self) -> None:
        """Merge commits are kept on request."""
        commits = parse_git_log(LOG, include_merge=True)
        assert len(commits) == 3
        assert commits[1].merge is True
        assert commits[1].message.header == "Merge branch 'feature'"

    def test_options_passed_to_messages(self) -> None:
        """Parse options reach every message."""
        options = ParseOptions(issue_prefixes=('gh-',))
        first = parse_git_log(LOG, options)[0]
        assert first.message.references == []

    def test_empty(self) -> None:
        """Empty output yields no commits."""
        assert parse_git_log('') == []
        assert parse_git_log('\n\n') == []

    def test_malformed(self) -> None:
        """Text that is not git log output is rejected."""
        with pytest.raises(VersionKitError, match='Malformed git commit') as exc_info:
            parse_git_log('commit nothex\nsomething else\n')
        assert exc_info.value.code is E.COMMIT_MALFORMED


class TestParseCommit:
    """Tests for parse_commit()."""

    def test_blank_chunk(self) -> None:
        """Blank chunks are not commits."""
        assert parse_commit('   \n') is None

    def test_header_only_message(self) -> None:
        """A one-line message keeps no trailing whitespace."""
        commit = parse_commit('abc123\nAuthor: A <a@b>\nDate:   0\n\n    chore: x   \n\n')
        assert commit is not None
        assert commit.hash == 'abc123'
        assert commit.message.raw == 'chore: x'
        assert commit.date == datetime(1970, 1, 1, tzinfo=timezone.utc)
        assert commit.tags == ()

    def test_multiple_tags(self) -> None:
        """Every tag decoration is collected."""
        commit = parse_commit('abc123 (tag: v2.0.0, tag: latest, main)\nAuthor: A <a@b>\nDate:   5\n\n    feat: x\n')
        assert commit is not None
        assert commit.tags == ('v2.0.0', 'latest')

    def test_invalid_tag(self) -> None:
        """Tags that are not valid ref names are rejected."""
        with pytest.raises(VersionKitError, match='Invalid revision specifier') as exc_info:
            parse_commit('abc123 (tag: bad..tag/)\nAuthor: A <a@b>\nDate:   5\n\n    feat: x\n')
        assert exc_info.value.code is E.GIT_REF_INVALID


class TestCheckRef:
    """Tests for check_ref()."""

    @pytest.mark.parametrize('ref', ['v1.2.3', 'release/1.x', 'main', '', 'feature-branch'])
    def test_valid(self, ref: str) -> None:
        """Well-formed refs pass."""
        check_ref(ref)

    @pytest.mark.parametrize('ref', ['a b', 'a:b', 'a*', 'a?', 'a[b', 'a\\b', 'a//b', 'a/.b', 'a@{1}', '@', '/a', '.a', 'a/', 'a.'])
    def test_invalid(self, ref: str) -> None:
        """Malformed refs raise."""
        with pytest.raises(VersionKitError, match='Invalid revision specifier'):
            check_ref(ref)
