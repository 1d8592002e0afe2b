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

r"""Issue reference and ``@mention`` scanning.

A reference is an optional action verb, an optional repository-like
scope, an issue prefix and an issue id ending in a digit::

    Closes #12
           ^^^                      prefix '#', issue '12'
    kills stevemao/commits-parser#1
          ^^^^^^^^^^^^^^^^^^^^^^    scope
    see gh-7                        no action, prefix 'gh-'

The pattern is compiled once per :class:`ParseOptions` value.

Pure implementation: depends only on ``re`` and :mod:`._types`.
"""

from __future__ import annotations

import functools
import re

from versionkit.commit_parsing._types import ParseOptions, Reference

_MENTION_PATTERN: re.Pattern[str] = re.compile(r'@([\w-]+)', re.ASCII)


@functools.lru_cache(maxsize=32)
def _reference_pattern(options: ParseOptions) -> re.Pattern[str]:
    """Build the reference pattern for ``options``.

    Groups: 1 action (case-insensitive), 2 scope, 3 prefix, 4 issue.
    """
    actions = '|'.join(re.escape(action) for action in options.reference_actions)
    prefixes = '|'.join(re.escape(prefix) for prefix in options.issue_prefixes)
    action_group = rf'(?:\b((?i:{actions}))\s+)?' if actions else '()'
    return re.compile(
        action_group
        + r'([\w./-]+(?![\w./-]))?'  # scope must be a whole token
        + rf'({prefixes})'
        + r'([\w-]*\d+)',
        re.ASCII,
    )


def find_references(text: str, options: ParseOptions | None = None) -> list[Reference]:
    """Return every issue reference in ``text``, in order of appearance.

    Args:
        text: Any text; usually a whole raw commit message.
        options: Prefixes and action verbs to recognize. Defaults to
            ``#`` and the close/fix/resolve verb family.

    Returns:
        A list of :class:`Reference` records; empty if none matched.
    """
    options = options or ParseOptions()
    if not options.issue_prefixes:
        return []
    return [
        Reference(
            raw=m.group(0),
            action=m.group(1) or None,
            scope=m.group(2) or None,
            prefix=m.group(3),
            issue=m.group(4),
        )
        for m in _reference_pattern(options).finditer(text)
    ]


def find_mentions(text: str) -> list[str]:
    """Return the names of all ``@name`` mentions in ``text``."""
    return _MENTION_PATTERN.findall(text)
