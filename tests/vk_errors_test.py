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

"""Tests for versionkit.errors."""

from __future__ import annotations

from versionkit.commit_parsing import BumpType
from versionkit.errors import E, InvalidBump, InvalidVersion, VersionKitError


class TestErrorCodes:
    """Tests for the E enum."""

    def test_codes_are_unique_and_prefixed(self) -> None:
        """Every code is a distinct VK- string."""
        values = [code.value for code in E]
        assert len(values) == len(set(values))
        assert all(value.startswith('VK-') for value in values)


class TestVersionKitError:
    """Tests for VersionKitError."""

    def test_str_includes_code(self) -> None:
        """The string form is 'CODE: message'."""
        err = VersionKitError(code=E.CONFIG_INVALID, message='bad', hint='fix it')
        assert str(err) == 'VK-CONFIG-INVALID: bad'
        assert err.hint == 'fix it'

    def test_hint_optional(self) -> None:
        """The hint defaults to empty."""
        assert VersionKitError(code=E.COMMIT_MALFORMED, message='x').hint == ''


class TestSubclasses:
    """Tests for InvalidVersion and InvalidBump."""

    def test_invalid_version(self) -> None:
        """InvalidVersion carries the version."""
        err = InvalidVersion('1.2')
        assert isinstance(err, VersionKitError)
        assert err.code is E.VERSION_INVALID
        assert err.version == '1.2'
        assert err.message == "Version '1.2' is not a valid semantic version"

    def test_invalid_bump_enum(self) -> None:
        """Enum bumps are shown by value."""
        err = InvalidBump(BumpType.V1, '1.2.3', 'the version is already 1.0.0 or later')
        assert err.code is E.BUMP_INVALID
        assert err.bump is BumpType.V1
        assert err.message == "Cannot apply bump 'v1' to version '1.2.3': the version is already 1.0.0 or later"

    def test_invalid_bump_without_reason(self) -> None:
        """The reason is optional."""
        assert InvalidBump('huge', '1.0.0').message == "Cannot apply bump 'huge' to version '1.0.0'"
