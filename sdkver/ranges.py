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
"""SDK version ranges.

A range is either an exact version (6.0.100) or a floating range pinned
down to a major (7.x), a minor (6.0.x) or a feature band (6.0.1xx).
Floating ranges have a lower bound but no upper bound within the versions
they pin, so 6.0.1xx is satisfied by 6.0.100 and by 6.0.401 alike.
"""

import enum
import logging
from typing import Optional, Tuple, Union

import attr

from .version import FEATURE_BAND_WIDTH
from .version import Version
from .version import compare
from .version import non_negative_int
from .version import none_if_empty

# Defaults for components a floating range leaves unspecified.
DEFAULT_MINOR = 0
DEFAULT_PATCH = 0


class Floating(enum.Enum):
  """Granularity a floating range is pinned to."""
  MAJOR = 'major'
  MINOR = 'minor'
  FEATURE = 'feature'


@attr.s(frozen=True)
class ExactRange:
  """Range satisfied by exactly one version."""

  version: Version = attr.ib(validator=attr.validators.instance_of(Version))


@attr.s(frozen=True)
class FloatingRange:
  """Range pinned to a major, minor or feature band.

  Components finer than `floating` are kept as given but take no part in
  matching or formatting.
  """

  major: int = attr.ib(validator=non_negative_int)
  floating: Floating = attr.ib(converter=Floating)
  minor: Optional[int] = attr.ib(
      default=None, validator=attr.validators.optional(non_negative_int))
  patch: Optional[int] = attr.ib(
      default=None, validator=attr.validators.optional(non_negative_int))
  prerelease: Optional[str] = attr.ib(
      default=None,
      converter=none_if_empty,
      validator=attr.validators.optional(attr.validators.instance_of(str)))

  def pinned(self) -> Tuple[int, int, int]:
    """Return (major, minor, patch) with defaults applied.

    Components finer than the floating granularity are zeroed.
    """
    minor = DEFAULT_MINOR if self.minor is None else self.minor
    patch = DEFAULT_PATCH if self.patch is None else self.patch

    if self.floating == Floating.MAJOR:
      return self.major, DEFAULT_MINOR, DEFAULT_PATCH
    if self.floating == Floating.MINOR:
      return self.major, minor, DEFAULT_PATCH
    return self.major, minor, patch

  @property
  def feature_band(self) -> int:
    return self.pinned()[2] // FEATURE_BAND_WIDTH


Range = Union[ExactRange, FloatingRange]


def lower_bound(floating_range: FloatingRange) -> Version:
  """Get the lowest version that satisfies a floating range.

  The range's prerelease tag, if any, is carried onto the bound so that
  prereleases at or above that tag are eligible.
  """
  major, minor, patch = floating_range.pinned()
  return Version(major, minor, patch, floating_range.prerelease)


def _same_family(version: Version, floating_range: FloatingRange) -> bool:
  """Whether the version shares the major (and minor, if pinned)."""
  major, minor, _ = floating_range.pinned()
  if version.major != major:
    return False
  if floating_range.floating == Floating.MAJOR:
    return True

  return version.minor == minor


def matches(version: Version, sdk_range: Range) -> bool:
  """Whether the version satisfies the range."""
  if isinstance(sdk_range, ExactRange):
    return compare(version, sdk_range.version) == 0

  if not isinstance(sdk_range, FloatingRange):
    raise TypeError(f'Unsupported range type: {type(sdk_range).__name__}')

  # Release-only ranges never match prereleases.
  if not sdk_range.prerelease and version.prerelease:
    return False

  if not _same_family(version, sdk_range):
    return False

  return compare(version, lower_bound(sdk_range)) >= 0


def in_feature_band(version: Version, sdk_range: Range) -> bool:
  """Whether the version is in the same feature band as the range.

  Unlike `matches`, this is clipped to the range's band: 6.0.401 is not in
  the band of 6.0.1xx. Major and minor floating ranges pin no band, so only
  their major (and minor) are checked.
  """
  if isinstance(sdk_range, ExactRange):
    exact = sdk_range.version
    return (version.major == exact.major and version.minor == exact.minor and
            version.feature_band == exact.feature_band)

  if not _same_family(version, sdk_range):
    return False
  if sdk_range.floating != Floating.FEATURE:
    return True

  return version.feature_band == sdk_range.feature_band


def coerce_floating_component(component: Optional[int]) -> int:
  """Snap a minor/patch-like component down to a multiple of 10."""
  return (component // 10) * 10 if component else 0


def to_canonical_string(sdk_range: Range) -> str:
  """Format a range the way global.json and SDK listings spell it."""
  if isinstance(sdk_range, ExactRange):
    return str(sdk_range.version)

  major, minor, _ = sdk_range.pinned()
  if sdk_range.floating == Floating.MAJOR:
    return f'{major}.x'
  if sdk_range.floating == Floating.MINOR:
    return f'{major}.{minor}.x'

  return f'{major}.{minor}.{sdk_range.feature_band}xx'


def prefer_range_string(sdk_range: Range, version: Version,
                        fallback: str) -> str:
  """Keep the range's canonical form if the version still satisfies it.

  Otherwise return `fallback` (usually the new literal version) unchanged.
  """
  if matches(version, sdk_range):
    return to_canonical_string(sdk_range)

  logging.debug('%s does not satisfy %s, using %s', version,
                to_canonical_string(sdk_range), fallback)
  return fallback
