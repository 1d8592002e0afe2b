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

"""Typed errors for versionkit.

Every error carries a stable :class:`E` code, a human-readable message
and an optional hint telling the user how to fix the input::

    raise VersionKitError(
        code=E.CONFIG_INVALID,
        message='changelog_sections must be a list',
        hint='Use e.g. changelog-sections = ["feat", "fix"].',
    )

The version applier raises the two narrow subclasses
:class:`InvalidVersion` and :class:`InvalidBump`; callers that only care
about "bad user input" can catch :class:`VersionKitError`.
"""

from __future__ import annotations

import enum

__all__ = [
    'E',
    'InvalidBump',
    'InvalidVersion',
    'VersionKitError',
]


class E(enum.Enum):
    """Stable error codes."""

    VERSION_INVALID = 'VK-VERSION-INVALID'
    BUMP_INVALID = 'VK-BUMP-INVALID'
    CONFIG_INVALID = 'VK-CONFIG-INVALID'
    CONFIG_NOT_FOUND = 'VK-CONFIG-NOT-FOUND'
    COMMIT_MALFORMED = 'VK-COMMIT-MALFORMED'
    GIT_REF_INVALID = 'VK-GIT-REF-INVALID'


class VersionKitError(Exception):
    """Base class for all user-facing versionkit errors.

    Attributes:
        code: The stable error code.
        message: What went wrong.
        hint: How to fix it (may be empty).
    """

    def __init__(self, code: E, message: str, hint: str = '') -> None:
        self.code = code
        self.message = message
        self.hint = hint
        super().__init__(f'{code.value}: {message}')


class InvalidVersion(VersionKitError):
    """The previous version string is not a valid semantic version."""

    def __init__(self, version: str) -> None:
        self.version = version
        super().__init__(
            code=E.VERSION_INVALID,
            message=f'Version {version!r} is not a valid semantic version',
            hint='Use a version string like "1.2.3" or "1.2.3-rc.1".',
        )


class InvalidBump(VersionKitError):
    """The requested bump cannot be applied to the given version."""

    def __init__(self, bump: object, version: str, reason: str = '') -> None:
        self.bump = bump
        self.version = version
        bump_name = getattr(bump, 'value', bump)
        message = f'Cannot apply bump {bump_name!r} to version {version!r}'
        if reason:
            message = f'{message}: {reason}'
        super().__init__(
            code=E.BUMP_INVALID,
            message=message,
            hint='Valid bumps are "major", "minor", "patch", and "v1" (only for 0.x versions).',
        )
