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

"""Configuration loading and validation.

Configuration lives in ``versionkit.toml`` or in the ``[tool.versionkit]``
table of ``pyproject.toml``::

    [tool.versionkit]
    changelog-sections = ["feat", "fix", "perf", "revert"]
    bump-all-changes = false
    prerelease = "rc"            # or true / false; omit to keep current
    include-merge-commits = false
    include-reverted-commits = false
    issue-prefixes = ["#", "gh-"]
    reference-actions = ["closes", "fixes"]

Keys may be written in kebab-case or snake_case. Unknown keys and wrong
types are rejected with :class:`~versionkit.errors.VersionKitError`
rather than ignored, so typos surface immediately.
"""

from __future__ import annotations

import sys
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from versionkit.bump import DEFAULT_CHANGELOG_SECTIONS, PrereleaseDirective
from versionkit.commit_parsing import DEFAULT_ISSUE_PREFIXES, DEFAULT_REFERENCE_ACTIONS, ParseOptions
from versionkit.errors import E, VersionKitError
from versionkit.logging import get_logger

logger = get_logger(__name__)

CONFIG_FILENAME = 'versionkit.toml'
PYPROJECT_FILENAME = 'pyproject.toml'


@dataclass(frozen=True)
class VersionKitConfig:
    """Validated versionkit configuration.

    Attributes:
        bump_all_changes: Every commit is worth at least a patch release.
        changelog_sections: Commit types that are worth a patch release.
        prerelease: The prerelease directive passed to the applier.
        include_merge_commits: Keep merge commits read from ``git log``.
        include_reverted_commits: Keep commits that were later reverted,
            and their reverts.
        issue_prefixes: Issue reference prefixes.
        reference_actions: Verbs recognized before issue references.
    """

    bump_all_changes: bool = False
    changelog_sections: tuple[str, ...] = DEFAULT_CHANGELOG_SECTIONS
    prerelease: PrereleaseDirective = None
    include_merge_commits: bool = False
    include_reverted_commits: bool = False
    issue_prefixes: tuple[str, ...] = DEFAULT_ISSUE_PREFIXES
    reference_actions: tuple[str, ...] = DEFAULT_REFERENCE_ACTIONS

    @property
    def parse_options(self) -> ParseOptions:
        """The commit parsing options derived from this config."""
        return ParseOptions(issue_prefixes=self.issue_prefixes, reference_actions=self.reference_actions)

    def with_overrides(self, **overrides: Any) -> VersionKitConfig:  # noqa: ANN401
        """Return a copy with the given (already validated) fields replaced.

        ``None`` values are skipped, except for ``prerelease`` where
        ``None`` is meaningful; pass it only when you mean it.
        """
        changes = {key: value for key, value in overrides.items() if value is not None or key == 'prerelease'}
        return replace(self, **changes)


_KNOWN_KEYS: frozenset[str] = frozenset(f.name for f in fields(VersionKitConfig))


def _invalid(message: str, hint: str = '') -> VersionKitError:
    return VersionKitError(code=E.CONFIG_INVALID, message=message, hint=hint)


def _bool(key: str, value: object) -> bool:
    if not isinstance(value, bool):
        raise _invalid(f'{key} must be a boolean, got {type(value).__name__}')
    return value


def _str_tuple(key: str, value: object, *, allow_empty: bool = True) -> tuple[str, ...]:
    if not isinstance(value, list):
        raise _invalid(f'{key} must be a list of strings, got {type(value).__name__}')
    for index, item in enumerate(value):
        if not isinstance(item, str) or not item:
            raise _invalid(f'{key}[{index}] must be a non-empty string')
    if not value and not allow_empty:
        raise _invalid(f'{key} must not be empty')
    return tuple(value)


def _prerelease(value: object) -> PrereleaseDirective:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        if not value or not all(part.replace('-', '').isalnum() for part in value.split('.')):
            raise _invalid(
                f'prerelease identifier {value!r} is not valid',
                hint='Use dot-separated alphanumerics, e.g. "rc" or "beta.1".',
            )
        return value
    raise _invalid(f'prerelease must be a boolean or a string, got {type(value).__name__}')


def parse_config(table: Mapping[str, object]) -> VersionKitConfig:
    """Validate a raw config table.

    Args:
        table: The parsed TOML table (kebab-case or snake_case keys).

    Returns:
        A :class:`VersionKitConfig`; missing keys keep their defaults.

    Raises:
        VersionKitError: On an unknown key or a value of the wrong type.
    """
    values: dict[str, Any] = {}
    for raw_key, value in table.items():
        key = raw_key.replace('-', '_')
        if key not in _KNOWN_KEYS:
            raise _invalid(
                f'Unknown key {raw_key!r} in versionkit config',
                hint=f'Valid keys: {", ".join(sorted(k.replace("_", "-") for k in _KNOWN_KEYS))}',
            )
        if key == 'prerelease':
            values[key] = _prerelease(value)
        elif key in ('changelog_sections', 'reference_actions'):
            values[key] = _str_tuple(key, value)
        elif key == 'issue_prefixes':
            values[key] = _str_tuple(key, value, allow_empty=False)
        else:
            values[key] = _bool(key, value)
    return VersionKitConfig(**values)


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open('rb') as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise _invalid(f'{path} is not valid TOML: {exc}') from exc


def load_config(cwd: Path, config_path: Path | None = None) -> VersionKitConfig:
    """Load the configuration for the project in ``cwd``.

    Lookup order: ``config_path`` if given, then ``versionkit.toml``,
    then ``[tool.versionkit]`` in ``pyproject.toml``, then defaults.

    Args:
        cwd: The project directory.
        config_path: Explicit config file; relative paths are resolved
            against ``cwd``. A ``pyproject.toml`` is read from its
            ``[tool.versionkit]`` table, any other file from its top level.

    Returns:
        The validated :class:`VersionKitConfig`.

    Raises:
        VersionKitError: If ``config_path`` does not exist or any config
            file is invalid.
    """
    if config_path is not None:
        path = config_path if config_path.is_absolute() else cwd / config_path
        if not path.is_file():
            raise VersionKitError(
                code=E.CONFIG_NOT_FOUND,
                message=f'Config file not found: {path}',
                hint='Check the --config path.',
            )
    elif (cwd / CONFIG_FILENAME).is_file():
        path = cwd / CONFIG_FILENAME
    elif (cwd / PYPROJECT_FILENAME).is_file():
        path = cwd / PYPROJECT_FILENAME
    else:
        logger.debug('config_defaults', cwd=str(cwd))
        return VersionKitConfig()

    data = _read_toml(path)
    if path.name == PYPROJECT_FILENAME:
        tool = data.get('tool', {})
        if not isinstance(tool, dict):
            raise _invalid(f'[tool] in {path} must be a table')
        data = tool.get('versionkit', {})
        if not isinstance(data, dict):
            raise _invalid(f'[tool.versionkit] in {path} must be a table')

    config = parse_config(data)
    logger.debug('config_loaded', path=str(path))
    return config


__all__ = [
    'CONFIG_FILENAME',
    'VersionKitConfig',
    'load_config',
    'parse_config',
]
