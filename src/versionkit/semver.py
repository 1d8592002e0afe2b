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

r"""Semantic Versioning 2.0.0 parsing, ordering and increments.

Increments follow the rules used by the npm ``semver`` package, which is
what most release tooling reads and writes::

    ┌──────────────┬──────────────┬──────────────────────────────────────┐
    │ Release type │ 1.2.3        │ 1.2.3-rc.4                           │
    ├──────────────┼──────────────┼──────────────────────────────────────┤
    │ major        │ 2.0.0        │ 2.0.0                                │
    │ minor        │ 1.3.0        │ 1.3.0                                │
    │ patch        │ 1.2.4        │ 1.2.3   (promotes the prerelease)    │
    │ premajor     │ 2.0.0-0      │ 2.0.0-0                              │
    │ preminor     │ 1.3.0-0      │ 1.3.0-0                              │
    │ prepatch     │ 1.2.4-0      │ 1.2.4-0                              │
    │ prerelease   │ 1.2.4-0      │ 1.2.3-rc.5                           │
    └──────────────┴──────────────┴──────────────────────────────────────┘

With an identifier such as ``"beta"`` the prerelease part becomes
``beta.0``, unless the version is already on the ``beta.N`` line, in
which case ``N`` is incremented.

Pure implementation: depends only on ``re`` and :mod:`versionkit.errors`.
"""

from __future__ import annotations

import enum
import functools
import re
from dataclasses import dataclass, replace

from versionkit.errors import InvalidVersion

_NUM = r'0|[1-9]\d*'
_PRERELEASE_ID = rf'(?:{_NUM}|\d*[a-zA-Z-][a-zA-Z0-9-]*)'
_BUILD_ID = r'[0-9A-Za-z-]+'

SEMVER_PATTERN: re.Pattern[str] = re.compile(
    rf'^v?(?P<major>{_NUM})\.(?P<minor>{_NUM})\.(?P<patch>{_NUM})'
    rf'(?:-(?P<prerelease>{_PRERELEASE_ID}(?:\.{_PRERELEASE_ID})*))?'
    rf'(?:\+(?P<build>{_BUILD_ID}(?:\.{_BUILD_ID})*))?$',
    re.ASCII,
)

# Dot-separated prerelease identifiers, e.g. ``rc`` or ``beta.1``.
PRERELEASE_PATTERN: re.Pattern[str] = re.compile(rf'^{_PRERELEASE_ID}(?:\.{_PRERELEASE_ID})*$', re.ASCII)

_NUMERIC: re.Pattern[str] = re.compile(r'[0-9]+')

PrereleasePart = int | str


class ReleaseType(enum.Enum):
    """Concrete increment to perform on a version."""

    MAJOR = 'major'
    MINOR = 'minor'
    PATCH = 'patch'
    PREMAJOR = 'premajor'
    PREMINOR = 'preminor'
    PREPATCH = 'prepatch'
    PRERELEASE = 'prerelease'


def _parse_parts(text: str) -> tuple[PrereleasePart, ...]:
    return tuple(int(part) if _NUMERIC.fullmatch(part) else part for part in text.split('.'))


@functools.total_ordering
@dataclass(frozen=True)
class SemVer:
    """A parsed semantic version.

    Build metadata is kept for display but ignored by ordering and
    dropped by every increment.

    Attributes:
        major: Major version number.
        minor: Minor version number.
        patch: Patch version number.
        prerelease: Prerelease identifiers; numeric ones are ``int``.
        build: Build metadata identifiers.
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[PrereleasePart, ...] = ()
    build: tuple[str, ...] = ()

    @classmethod
    def parse(cls, version: str) -> SemVer:
        """Parse ``version``, allowing surrounding whitespace and a ``v`` prefix.

        Raises:
            InvalidVersion: If ``version`` is not a semantic version.
        """
        m = SEMVER_PATTERN.match(version.strip()) if isinstance(version, str) else None
        if not m:
            raise InvalidVersion(str(version))
        prerelease = m.group('prerelease')
        build = m.group('build')
        return cls(
            major=int(m.group('major')),
            minor=int(m.group('minor')),
            patch=int(m.group('patch')),
            prerelease=_parse_parts(prerelease) if prerelease else (),
            build=tuple(build.split('.')) if build else (),
        )

    @property
    def is_prerelease(self) -> bool:
        """``True`` if the version has a prerelease part."""
        return bool(self.prerelease)

    def __str__(self) -> str:
        text = f'{self.major}.{self.minor}.{self.patch}'
        if self.prerelease:
            text += '-' + '.'.join(str(part) for part in self.prerelease)
        if self.build:
            text += '+' + '.'.join(self.build)
        return text

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self._compare(other) < 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self._compare(other) == 0

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch, self.prerelease))

    def _compare(self, other: SemVer) -> int:
        # A release sorts after its prereleases; numeric identifiers
        # sort before alphanumeric ones.
        mine = (self.major, self.minor, self.patch)
        theirs = (other.major, other.minor, other.patch)
        if mine != theirs:
            return -1 if mine < theirs else 1
        if self.prerelease == other.prerelease:
            return 0
        if not self.prerelease:
            return 1
        if not other.prerelease:
            return -1
        for a, b in zip(self.prerelease, other.prerelease):
            if a == b:
                continue
            a_num, b_num = isinstance(a, int), isinstance(b, int)
            if a_num and b_num:
                return -1 if a < b else 1  # type: ignore[operator]
            if a_num != b_num:
                return -1 if a_num else 1
            return -1 if str(a) < str(b) else 1
        return -1 if len(self.prerelease) < len(other.prerelease) else 1

    def _next_prerelease(self, identifier: str | None) -> tuple[PrereleasePart, ...]:
        """Return the prerelease part after one ``pre`` step."""
        parts = list(self.prerelease)
        if not parts:
            parts = [0]
        else:
            for index in range(len(parts) - 1, -1, -1):
                part = parts[index]
                if isinstance(part, int):
                    parts[index] = part + 1
                    break
            else:
                parts.append(0)
        if identifier:
            ident = _parse_parts(identifier)
            on_line = parts[: len(ident)] == list(ident) and len(parts) > len(ident) and isinstance(parts[len(ident)], int)
            if not on_line:
                parts = [*ident, 0]
        return tuple(parts)

    def bump(self, release: ReleaseType, identifier: str | None = None) -> SemVer:
        """Return the version after ``release``.

        Args:
            release: The increment to perform.
            identifier: Prerelease identifier for the ``pre*`` release
                types, e.g. ``"rc"`` for ``2.0.0-rc.0``.

        Returns:
            A new :class:`SemVer` without build metadata.
        """
        if release is ReleaseType.MAJOR:
            major = self.major + 1 if self.minor or self.patch or not self.prerelease else self.major
            return SemVer(major, 0, 0)
        if release is ReleaseType.MINOR:
            minor = self.minor + 1 if self.patch or not self.prerelease else self.minor
            return SemVer(self.major, minor, 0)
        if release is ReleaseType.PATCH:
            patch = self.patch + 1 if not self.prerelease else self.patch
            return SemVer(self.major, self.minor, patch)
        if release is ReleaseType.PREMAJOR:
            return SemVer(self.major + 1, 0, 0)._with_pre(identifier)
        if release is ReleaseType.PREMINOR:
            return SemVer(self.major, self.minor + 1, 0)._with_pre(identifier)
        if release is ReleaseType.PREPATCH:
            return SemVer(self.major, self.minor, self.patch + 1)._with_pre(identifier)
        # PRERELEASE
        if not self.prerelease:
            return SemVer(self.major, self.minor, self.patch + 1)._with_pre(identifier)
        return replace(self, build=())._with_pre(identifier)

    def _with_pre(self, identifier: str | None) -> SemVer:
        return replace(self, prerelease=self._next_prerelease(identifier))


def parse_version(version: str) -> SemVer:
    """Parse a semantic version string. See :meth:`SemVer.parse`."""
    return SemVer.parse(version)


__all__ = [
    'PRERELEASE_PATTERN',
    'SEMVER_PATTERN',
    'ReleaseType',
    'SemVer',
    'parse_version',
]
