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
"""SDK version and range parsing."""

import re
from typing import Optional

from . import ranges
from . import semver_index
from .version import FEATURE_BAND_WIDTH
from .version import Version

# e.g. 7.x, 8.0.*, 6.0.1xx, 8.0.1xx-preview
_FLOATING_RANGE_PATTERN = re.compile(
    r'''^
    (?P<major>\d+)\.
    (?:
      (?P<any_minor>[x*])
      |
      (?P<minor>\d+)\.
      (?:
        (?P<any_patch>[x*])
        |
        (?P<band>\d+)xx
      )
    )
    (?:-(?P<prerelease>[0-9a-z][0-9a-z.-]*))?
    $''', re.VERBOSE | re.IGNORECASE)


class InvalidVersion(ValueError):
  """The string is not a valid SDK version."""


class InvalidRange(ValueError):
  """The string is not a valid SDK version range."""


def _strip(value: str) -> str:
  value = value.strip()
  if value.startswith(('v', 'V')):
    return value[1:]

  return value


def parse_version(str_version: str) -> Version:
  """Parse an SDK version, e.g. 6.0.105 or 8.0.100-rc.1.23455.8."""
  try:
    return Version.from_string(str_version)
  except ValueError as e:
    raise InvalidVersion(f'Invalid SDK version: {str_version!r}') from e


def _parse_floating_range(str_range: str) -> Optional[ranges.FloatingRange]:
  match = _FLOATING_RANGE_PATTERN.match(_strip(str_range))
  if not match:
    return None

  major = int(match.group('major'))
  prerelease = match.group('prerelease')
  if prerelease:
    # Same clean-up exact versions get, e.g. preview..01 -> preview.-.1
    prerelease = semver_index.coerce_prerelease('-' + prerelease)[1:]

  if match.group('any_minor'):
    return ranges.FloatingRange(
        major=major, floating=ranges.Floating.MAJOR, prerelease=prerelease)

  minor = int(match.group('minor'))
  if match.group('any_patch'):
    return ranges.FloatingRange(
        major=major,
        minor=minor,
        floating=ranges.Floating.MINOR,
        prerelease=prerelease)

  return ranges.FloatingRange(
      major=major,
      minor=minor,
      patch=int(match.group('band')) * FEATURE_BAND_WIDTH,
      floating=ranges.Floating.FEATURE,
      prerelease=prerelease)


def parse_range(str_range: str) -> ranges.Range:
  """Parse an SDK range.

  Floating forms are 7.x, 6.0.x and 6.0.1xx (optionally with a prerelease
  suffix). Anything else must be a version, which is an exact range.
  """
  floating_range = _parse_floating_range(str_range)
  if floating_range is not None:
    return floating_range

  try:
    return ranges.ExactRange(Version.from_string(str_range))
  except ValueError as e:
    raise InvalidRange(f'Invalid SDK range: {str_range!r}') from e


def is_valid(str_range: str) -> bool:
  """Returns whether the string is a version or a range."""
  try:
    parse_range(str_range)
  except InvalidRange:
    return False

  return True
