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
"""SemVer coercion tests."""

import unittest

import semver

from . import semver_index


class SemverIndexTest(unittest.TestCase):
  """SemVer coercion tests."""

  def test_coerce(self):
    """Test coerce."""
    self.assertEqual('6.0.0', semver_index.coerce('6'))
    self.assertEqual('6.0.0', semver_index.coerce('v6'))
    self.assertEqual('6.0.0', semver_index.coerce('6.0'))
    self.assertEqual('6.0.105', semver_index.coerce('6.0.105'))
    self.assertEqual('6.0.105', semver_index.coerce(' v6.0.105 '))
    self.assertEqual('6.0.105', semver_index.coerce('06.00.0105'))

    self.assertEqual('', semver_index.coerce(''))
    self.assertEqual('rubbish', semver_index.coerce('rubbish'))
    self.assertEqual('6.0.1xx', semver_index.coerce('6.0.1xx'))
    self.assertEqual('1.0.0.0', semver_index.coerce('1.0.0.0'))

  def test_coerce_prerelease(self):
    """Test coerce with prerelease and build suffixes."""
    self.assertEqual('6.0.100-preview.1',
                     semver_index.coerce('6.0.100-preview.01'))
    self.assertEqual('6.0.100-a.-.0', semver_index.coerce('6.0.100-a..0'))
    self.assertEqual('6.0.100', semver_index.coerce('6.0.100+abc'))
    self.assertEqual('6.0.100-rc.1',
                     semver_index.coerce('6.0.100-rc.1+build.5'))
    self.assertEqual('6.0.0-foo', semver_index.coerce('6-foo'))

  def test_is_valid(self):
    """Test is_valid."""
    self.assertTrue(semver_index.is_valid('6'))
    self.assertTrue(semver_index.is_valid('8.0.100-rc.1.23455.8'))
    self.assertFalse(semver_index.is_valid('6.0.1xx'))
    self.assertFalse(semver_index.is_valid('6.0.100.1'))
    self.assertFalse(semver_index.is_valid('rubbish'))
    self.assertFalse(semver_index.is_valid(''))

  def test_parse(self):
    """Test parse."""
    self.assertEqual(
        semver.Version(6, 0, 105, 'preview.1'),
        semver_index.parse('v6.0.105-preview.1'))
    with self.assertRaises(ValueError):
      semver_index.parse('7.x')


if __name__ == '__main__':
  unittest.main()
