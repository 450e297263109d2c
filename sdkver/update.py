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
"""Dependency update decisions for SDK constraints."""

import logging

from . import parser
from . import ranges


def get_new_value(current_value: str, new_version: str) -> str:
  """Get the constraint to write after updating to `new_version`.

  A floating constraint that the new version still satisfies is kept in its
  canonical form, with its prerelease suffix if it has one. Exact
  constraints, and floating ones the new version falls outside of, are
  replaced by the new version.
  """
  try:
    current_range = parser.parse_range(current_value)
    version = parser.parse_version(new_version)
  except (parser.InvalidRange, parser.InvalidVersion) as e:
    logging.warning('Unable to update %s to %s: %s', current_value,
                    new_version, e)
    return new_version

  if isinstance(current_range, ranges.ExactRange):
    return new_version

  new_value = ranges.prefer_range_string(current_range, version, new_version)
  # Keep the prerelease gate, which the canonical form leaves out.
  if new_value != new_version and current_range.prerelease:
    new_value += f'-{current_range.prerelease}'

  return new_value
