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
"""SDK version range matching."""

from .parser import InvalidRange, InvalidVersion, parse_range, parse_version
from .ranges import (ExactRange, Floating, FloatingRange, Range,
                     coerce_floating_component, in_feature_band, lower_bound,
                     matches, prefer_range_string, to_canonical_string)
from .update import get_new_value
from .version import Version, compare
