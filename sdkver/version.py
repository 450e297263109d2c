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
"""SDK version model.

SDK versions look like SemVer but the third component is a feature band
followed by a two digit patch, e.g. 8.0.304 is patch 4 of feature band 3.
Differences from SemVer:
  - Prerelease components are compared case insensitively (as in NuGet).
  - Loose inputs may omit the minor and patch components, which are treated
    as 0.
"""

import functools
from typing import Any, Optional

import attr
import semver

from . import semver_index

FEATURE_BAND_WIDTH = 100


def zero_if_none(value: Optional[int]) -> int:
  return 0 if value is None else value


def none_if_empty(value: Optional[str]) -> Optional[str]:
  return value or None


def non_negative_int(instance: Any, attribute: attr.Attribute,
                     value: Any) -> None:
  """attrs validator for numeric version components."""
  del instance  # Unused.
  # bool is an int subclass but never a meaningful component.
  if not isinstance(value, int) or isinstance(value, bool):
    raise ValueError(
        f'{attribute.name} must be an integer, got {type(value).__name__}')
  if value < 0:
    raise ValueError(f'{attribute.name} must be non-negative, got {value}')


@functools.total_ordering
@attr.s(frozen=True, eq=False, repr=True)
class Version:
  """SDK version."""

  major: int = attr.ib(validator=non_negative_int)
  minor: int = attr.ib(
      default=0, converter=zero_if_none, validator=non_negative_int)
  # The feature band and patch digits, e.g. 304.
  patch: int = attr.ib(
      default=0, converter=zero_if_none, validator=non_negative_int)
  prerelease: Optional[str] = attr.ib(
      default=None,
      converter=none_if_empty,
      validator=attr.validators.optional(attr.validators.instance_of(str)))

  @property
  def feature_band(self) -> int:
    return self.patch // FEATURE_BAND_WIDTH

  @property
  def build(self) -> int:
    return self.patch % FEATURE_BAND_WIDTH

  def _semver(self) -> semver.Version:
    prerelease = self.prerelease.lower() if self.prerelease else None
    return semver.Version(self.major, self.minor, self.patch, prerelease)

  def __eq__(self, other):
    if not isinstance(other, Version):
      return NotImplemented
    return compare(self, other) == 0

  def __lt__(self, other):
    if not isinstance(other, Version):
      return NotImplemented
    return compare(self, other) < 0

  def __hash__(self):
    return hash(self._semver())

  def __str__(self) -> str:
    version = f'{self.major}.{self.minor}.{self.patch}'
    if self.prerelease:
      version += f'-{self.prerelease}'

    return version

  @classmethod
  def from_string(cls, str_version: str) -> 'Version':
    """Build a version from a string. Raises ValueError if invalid."""
    parsed = semver_index.parse(str_version)
    return cls(parsed.major, parsed.minor, parsed.patch, parsed.prerelease)


def compare(a: Version, b: Version) -> int:
  """Compare two versions, returning -1, 0 or 1."""
  # pylint: disable=protected-access
  return a._semver().compare(b._semver())
