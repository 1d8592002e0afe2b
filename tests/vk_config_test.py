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

"""Tests for config loading and validation."""

from __future__ import annotations

from pathlib import Path

import pytest
from versionkit.commit_parsing import DEFAULT_REFERENCE_ACTIONS, ParseOptions
from versionkit.config import VersionKitConfig, load_config, parse_config
from versionkit.errors import E, VersionKitError


class TestDefaults:
    """Test default VersionKitConfig values."""

    def test_defaults(self) -> None:
        """Test defaults."""
        cfg = VersionKitConfig()
        assert cfg.bump_all_changes is False
        assert cfg.changelog_sections == ('feat', 'fix', 'perf', 'revert')
        assert cfg.prerelease is None
        assert cfg.include_merge_commits is False
        assert cfg.include_reverted_commits is False
        assert cfg.issue_prefixes == ('#',)
        assert cfg.reference_actions == DEFAULT_REFERENCE_ACTIONS

    def test_parse_options(self) -> None:
        """Parse options mirror the reference settings."""
        cfg = VersionKitConfig(issue_prefixes=('gh-',), reference_actions=('kills',))
        assert cfg.parse_options == ParseOptions(issue_prefixes=('gh-',), reference_actions=('kills',))

    def test_with_overrides(self) -> None:
        """None overrides are skipped except for prerelease."""
        cfg = VersionKitConfig(bump_all_changes=True, prerelease='rc')
        assert cfg.with_overrides(bump_all_changes=None).bump_all_changes is True
        assert cfg.with_overrides(prerelease=False).prerelease is False
        assert cfg.with_overrides(prerelease=None).prerelease is None
        assert cfg.prerelease == 'rc'


class TestParseConfig:
    """Test parse_config() validation."""

    def test_empty(self) -> None:
        """An empty table gives the defaults."""
        assert parse_config({}) == VersionKitConfig()

    def test_kebab_and_snake_case(self) -> None:
        """Both key spellings are accepted."""
        cfg = parse_config({'bump-all-changes': True, 'include_merge_commits': True})
        assert cfg.bump_all_changes is True
        assert cfg.include_merge_commits is True

    def test_lists_become_tuples(self) -> None:
        """List values are stored as tuples."""
        cfg = parse_config({'changelog-sections': ['feat', 'fix'], 'issue-prefixes': ['#', 'gh-']})
        assert cfg.changelog_sections == ('feat', 'fix')
        assert cfg.issue_prefixes == ('#', 'gh-')

    @pytest.mark.parametrize('value', [True, False, 'rc', 'beta.1', 'pre-release'])
    def test_prerelease_values(self, value: bool | str) -> None:
        """Prerelease accepts booleans and identifiers."""
        assert parse_config({'prerelease': value}).prerelease == value

    def test_unknown_key(self) -> None:
        """Unknown keys are rejected."""
        with pytest.raises(VersionKitError, match="Unknown key 'bump-everything'") as exc_info:
            parse_config({'bump-everything': True})
        assert exc_info.value.code is E.CONFIG_INVALID
        assert 'bump-all-changes' in exc_info.value.hint

    def test_bool_type(self) -> None:
        """Booleans must be booleans."""
        with pytest.raises(VersionKitError, match='bump_all_changes must be a boolean'):
            parse_config({'bump-all-changes': 'yes'})

    def test_list_type(self) -> None:
        """List keys must be lists of strings."""
        with pytest.raises(VersionKitError, match='changelog_sections must be a list of strings'):
            parse_config({'changelog-sections': 'feat'})
        with pytest.raises(VersionKitError, match=r'reference_actions\[1\] must be a non-empty string'):
            parse_config({'reference-actions': ['closes', 3]})

    def test_empty_prefixes(self) -> None:
        """At least one issue prefix is required."""
        with pytest.raises(VersionKitError, match='issue_prefixes must not be empty'):
            parse_config({'issue-prefixes': []})

    @pytest.mark.parametrize('value', ['', 'rc!', 'a..b', 3])
    def test_invalid_prerelease(self, value: object) -> None:
        """Bad prerelease values are rejected."""
        with pytest.raises(VersionKitError, match='prerelease'):
            parse_config({'prerelease': value})


class TestLoadConfig:
    """Test load_config() file lookup."""

    def test_defaults_without_files(self, tmp_path: Path) -> None:
        """No config files gives the defaults."""
        assert load_config(tmp_path) == VersionKitConfig()

    def test_versionkit_toml(self, tmp_path: Path) -> None:
        """versionkit.toml is read from its top level."""
        (tmp_path / 'versionkit.toml').write_text('bump-all-changes = true\nprerelease = "rc"\n')
        cfg = load_config(tmp_path)
        assert cfg.bump_all_changes is True
        assert cfg.prerelease == 'rc'

    def test_pyproject_table(self, tmp_path: Path) -> None:
        """pyproject.toml is read from [tool.versionkit]."""
        (tmp_path / 'pyproject.toml').write_text(
            '[project]\nname = "x"\n\n[tool.versionkit]\nchangelog-sections = ["feat"]\n',
        )
        assert load_config(tmp_path).changelog_sections == ('feat',)

    def test_pyproject_without_table(self, tmp_path: Path) -> None:
        """A pyproject.toml without the table gives the defaults."""
        (tmp_path / 'pyproject.toml').write_text('[project]\nname = "x"\n')
        assert load_config(tmp_path) == VersionKitConfig()

    def test_versionkit_toml_wins(self, tmp_path: Path) -> None:
        """versionkit.toml takes precedence over pyproject.toml."""
        (tmp_path / 'versionkit.toml').write_text('bump-all-changes = true\n')
        (tmp_path / 'pyproject.toml').write_text('[tool.versionkit]\nbump-all-changes = false\n')
        assert load_config(tmp_path).bump_all_changes is True

    def test_explicit_relative_path(self, tmp_path: Path) -> None:
        """An explicit path is resolved against cwd."""
        (tmp_path / 'release.toml').write_text('include-merge-commits = true\n')
        (tmp_path / 'versionkit.toml').write_text('include-merge-commits = false\n')
        assert load_config(tmp_path, Path('release.toml')).include_merge_commits is True

    def test_explicit_missing(self, tmp_path: Path) -> None:
        """A missing explicit path is an error."""
        with pytest.raises(VersionKitError, match='Config file not found') as exc_info:
            load_config(tmp_path, tmp_path / 'nope.toml')
        assert exc_info.value.code is E.CONFIG_NOT_FOUND

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Broken TOML is reported as invalid config."""
        (tmp_path / 'versionkit.toml').write_text('bump-all-changes = \n')
        with pytest.raises(VersionKitError, match='is not valid TOML') as exc_info:
            load_config(tmp_path)
        assert exc_info.value.code is E.CONFIG_INVALID

    def test_table_must_be_table(self, tmp_path: Path) -> None:
        """[tool.versionkit] must be a table."""
        (tmp_path / 'pyproject.toml').write_text('[tool]\nversionkit = 3\n')
        with pytest.raises(VersionKitError, match='must be a table'):
            load_config(tmp_path)

    def test_tool_must_be_table(self, tmp_path: Path) -> None:
        """A non-table 'tool' key is reported as invalid config."""
        (tmp_path / 'pyproject.toml').write_text('tool = "versionkit"\n')
        with pytest.raises(VersionKitError, match=r'\[tool\] in .* must be a table') as exc_info:
            load_config(tmp_path)
        assert exc_info.value.code is E.CONFIG_INVALID
