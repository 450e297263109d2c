# Copyright 2026 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""SemVer coercion for SDK version strings."""

import re
from typing import List

import semver

_CORE_PATTERN = re.compile(r'^(\d+)(\.\d+)?(\.\d+)?(.*)$')


def _strip_leading_v(version: str) -> str:
  """Strip leading v from the version, if any."""
  # global.json and installer listings never use "v", but tags do.
  if version.startswith(('v', 'V')):
    return version[1:]

  return version


def _remove_leading_zero(component: str) -> str:
  """Remove leading zeros from a numeric component."""
  if component.startswith('.') and component[1:].isdigit():
    return '.' + str(int(component[1:]))
  if component.isdigit():
    return str(int(component))

  return component


def coerce_prerelease(suffix: str) -> str:
  """Coerce a prerelease suffix (including its leading '-') into valid SemVer.

  Numeric identifiers lose their leading zeros and empty identifiers are
  replaced with '-' (i.e. 1.0.0-a..0 -> 1.0.0-a.-.0) which mostly preserves
  ordering. Build metadata is dropped, it never takes part in precedence.
  """
  suffix = suffix.split('+', 1)[0]
  if not suffix.startswith('-') or len(suffix) == 1:
    return suffix

  components: List[str] = []
  for component in suffix[1:].split('.'):
    if not component:
      components.append('-')
    else:
      components.append(_remove_leading_zero(component))

  return '-' + '.'.join(components)


def coerce(version: str) -> str:
  """Coerce a potentially loose SDK version into strict SemVer.

  Missing minor and patch components default to 0, so '6' becomes '6.0.0'.
  Strings that do not start with a number are returned unchanged.
  """
  version = _strip_leading_v(version.strip())
  match = _CORE_PATTERN.match(version)
  if not match:
    return version

  major = match.group(1)
  minor = match.group(2) or '.0'
  patch = match.group(3) or '.0'
  suffix = match.group(4) or ''

  return (_remove_leading_zero(major) + _remove_leading_zero(minor) +
          _remove_leading_zero(patch) + coerce_prerelease(suffix))


def is_valid(version: str) -> bool:
  """Returns whether or not the version coerces to a valid SemVer."""
  return semver.Version.is_valid(coerce(version))


def parse(version: str) -> semver.Version:
  """Parse a (possibly loose) SDK version. Raises ValueError if invalid."""
  return semver.Version.parse(coerce(version))
