#!/usr/bin/python3

# emoji-lookup - A lookup library for emoji names, aliases and keywords
#
# Copyright (c) 2025 emoji-lookup developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>

'''
This file implements test cases for the EmojiLookup class
'''

import os
import sys
import logging
import tempfile
import unittest

LOGGER = logging.getLogger('emoji-lookup')

# pylint: disable=wrong-import-position
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../engine'))
import emj_util # pylint: disable=import-error
import emj_dataset # pylint: disable=import-error
import emj_skin_tones # pylint: disable=import-error
import emj_lookup # pylint: disable=import-error
sys.path.pop(0)
# pylint: enable=wrong-import-position

# pylint: disable=missing-function-docstring
# pylint: disable=missing-class-docstring
# pylint: disable=invalid-name
# pylint: disable=line-too-long

DARK = '\U0001F3FF'

class EmojiLookupTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.maxDiff = None
        self.lookup = emj_lookup.EmojiLookup(
            data_dir=os.path.normpath(emj_util.DATADIR))

    def tearDown(self) -> None:
        pass

    def test_dummy(self) -> None:
        self.assertEqual(True, True)

    def test_scenario_fire(self) -> None:
        results = self.lookup.search('fire')
        self.assertIn(('fire', 1.0),
                      [(result.name, result.score) for result in results])
        self.assertEqual(self.lookup.get_primary_name('flame'), 'fire')
        self.assertTrue(self.lookup.is_same_emoji('flame', 'lit'))
        meta = self.lookup.info('fire')
        assert meta is not None # for mypy
        self.assertEqual(meta.category, 'nature')
        self.assertIn('fire', meta.keywords)

    def test_scenario_skin_tones(self) -> None:
        self.assertEqual(self.lookup.apply_skin_tone('👋', 'dark'), '👋' + DARK)
        self.assertEqual(self.lookup.apply_skin_tone('👋', '5'), '👋' + DARK)
        self.assertEqual(self.lookup.remove_skin_tone('👋' + DARK), '👋')
        self.assertEqual(self.lookup.remove_skin_tone('👋'), '👋')
        self.assertFalse(self.lookup.supports_skin_tone('fire'))
        self.assertTrue(self.lookup.supports_skin_tone('wave'))
        with self.assertRaises(emj_skin_tones.InvalidToneError):
            self.lookup.apply_skin_tone('👋', 'invalid-tone')

    def test_scenario_unknown(self) -> None:
        self.assertEqual(self.lookup.get_aliases('unknown_name_xyz'), [])
        self.assertEqual(self.lookup.get_primary_name('unknown_name_xyz'),
                         'unknown_name_xyz')
        self.assertIsNone(self.lookup.get('unknown_name_xyz'))
        self.assertIsNone(self.lookup.info('unknown_name_xyz'))
        self.assertEqual(self.lookup.search('unknown_name_xyz'), [])
        self.assertIsNone(self.lookup.get_name_from_emoji('x'))

    def test_get_and_info(self) -> None:
        self.assertEqual(self.lookup.get('fire'), '🔥')
        self.assertEqual(self.lookup.get('hot'), '🔥')
        self.assertEqual(self.lookup.get('burger'), '🍔')
        self.assertEqual(self.lookup.resolve_emoji('burger'), '🍔')
        info = self.lookup.info('doggo')
        assert info is not None # for mypy
        self.assertEqual(info.name, 'dog')
        self.assertEqual(info.character, '🐕')
        self.assertEqual(info.unicode_version, '6.0')

    def test_all_operations_delegate(self) -> None:
        self.assertEqual(self.lookup.get_all_names('flame')[0], 'fire')
        self.assertEqual(self.lookup.get_alias_map()['kitty'], 'cat')
        self.assertEqual(self.lookup.get_categories(),
                         ['animals', 'food', 'nature', 'people', 'travel'])
        self.assertEqual(len(self.lookup.get_by_category('travel')), 12)
        self.assertEqual(self.lookup.suggest('fier')[0].name, 'fire')
        self.assertEqual(self.lookup.get_name_from_emoji('🔥'), 'fire')
        self.assertEqual(self.lookup.get_reverse_mapping()['🐈'], 'cat')
        self.assertTrue(self.lookup.is_known_emoji('🐈'))
        self.assertTrue(self.lookup.is_valid_emoji('🐈'))
        self.assertTrue(self.lookup.is_valid_emoji('🦖'))
        self.assertFalse(self.lookup.is_valid_emoji('cat'))
        self.assertTrue(self.lookup.supports_skin_tone_by_name('thumbsup'))
        self.assertTrue(self.lookup.supports_skin_tone_by_character('👍'))
        self.assertEqual(self.lookup.skin_tone_of('👍' + DARK), 'dark')
        self.assertEqual(len(self.lookup.skin_tone_variants('👍')), 6)
        self.assertEqual(
            self.lookup.get_all_skin_tone_variations('👍')['dark'], '👍' + DARK)
        self.assertEqual(len(self.lookup.filter_by_category('food')), 13)
        self.assertEqual(
            [info.name for info in self.lookup.filter_by_version('14.0', 'exact')],
            ['melting_face'])
        self.assertEqual(
            [info.name for info in self.lookup.filter_by_keyword('woof')],
            ['dog'])
        self.assertEqual(self.lookup.get_unicode_versions()[-1], '14.0')

    def test_custom_dataset(self) -> None:
        dataset = emj_dataset.EmojiDataset.from_mappings(
            {'fire': '🔥'}, aliases={'fire': ['lit']})
        lookup = emj_lookup.EmojiLookup(dataset=dataset)
        self.assertIs(lookup.dataset, dataset)
        self.assertEqual(lookup.get('lit'), '🔥')
        self.assertEqual([result.name for result in lookup.search('li')],
                         ['fire'])

    def test_missing_data(self) -> None:
        with tempfile.TemporaryDirectory() as dirname:
            with open(os.path.join(dirname, 'emojis.json'), 'w',
                      encoding='utf-8') as data_file:
                data_file.write('{"fire": "🔥"}')
            with self.assertRaises(emj_dataset.DatasetError):
                emj_lookup.EmojiLookup(data_dir=dirname)

    def test_default_lookup_is_memoized(self) -> None:
        self.assertIs(emj_lookup.get_default_lookup(),
                      emj_lookup.get_default_lookup())

if __name__ == '__main__':
    LOG_HANDLER = logging.StreamHandler(stream=sys.stderr)
    LOGGER.setLevel(logging.DEBUG)
    LOGGER.addHandler(LOG_HANDLER)
    unittest.main()
