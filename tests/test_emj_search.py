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
This file implements test cases for searching emoji
'''

import os
import sys
import logging
import unittest

LOGGER = logging.getLogger('emoji-lookup')

# pylint: disable=wrong-import-position
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../engine'))
import emj_util # pylint: disable=import-error
import emj_dataset # pylint: disable=import-error
import emj_search # pylint: disable=import-error
sys.path.pop(0)
# pylint: enable=wrong-import-position

# pylint: disable=missing-function-docstring
# pylint: disable=missing-class-docstring
# pylint: disable=invalid-name
# pylint: disable=line-too-long

class SearchIndexTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.maxDiff = None
        self.dataset = emj_dataset.EmojiDataset(
            data_dir=os.path.normpath(emj_util.DATADIR))
        self.index = emj_search.SearchIndex(self.dataset)

    def tearDown(self) -> None:
        pass

    def test_dummy(self) -> None:
        self.assertEqual(True, True)

    def test_search_fire(self) -> None:
        results = self.index.search('fire')
        self.assertEqual(
            [(result.name, result.score) for result in results],
            [('fire', 1.0), ('burning', 0.8)])
        self.assertEqual(results[0].character, '🔥')
        self.assertEqual(results[0].category, 'nature')
        self.assertEqual(results[0].keywords, ['fire', 'flame', 'hot', 'burn'])

    def test_search_alias_only(self) -> None:
        self.assertEqual(
            [(result.name, result.score) for result in self.index.search('lit')],
            [('fire', 0.6)])
        self.assertEqual(
            [(result.name, result.score) for result in self.index.search('snapstreak')],
            [('fire', 0.6)])

    def test_search_ranking(self) -> None:
        self.assertEqual(
            [(result.name, result.score) for result in self.index.search('hot')],
            [('hot_dog', 1.0),
             ('melting_face', 0.8),
             ('chili_pepper', 0.8),
             ('coffee', 0.8),
             ('burning', 0.8),
             ('fire', 0.8)])
        self.assertEqual(
            [(result.name, result.score) for result in self.index.search('wave')],
            [('wave', 1.0), ('ocean', 0.8)])
        self.assertEqual(
            [(result.name, result.score) for result in self.index.search('happy')],
            [('grinning', 0.8), ('smile', 0.8), ('blush', 0.8), ('joy', 0.8)])

    def test_search_is_case_insensitive(self) -> None:
        self.assertEqual(self.index.search('FiRe'), self.index.search('fire'))

    def test_search_unknown_term(self) -> None:
        self.assertEqual(self.index.search('xyzzy'), [])
        self.assertEqual(self.index.search(''), [])

    def test_substring_completeness(self) -> None:
        for name in self.dataset.names():
            lowered = name.lower()
            for start in range(len(lowered)):
                for end in range(start + 1, len(lowered) + 1):
                    results = {
                        result.name: result.score
                        for result in self.index.search(lowered[start:end])}
                    self.assertEqual(
                        results.get(name), 1.0,
                        f'{lowered[start:end]!r} does not find {name!r}')

    def test_score_precedence(self) -> None:
        for name in self.dataset.names():
            meta = self.dataset.metadata(name)
            assert meta is not None # for mypy
            for keyword in meta.keywords:
                results = self.index.search(keyword)
                names = [result.name for result in results]
                self.assertEqual(len(names), len(set(names)))
                for result in results:
                    if keyword.lower() in result.name.lower():
                        self.assertEqual(result.score, 1.0)
                scores = [result.score for result in results]
                self.assertEqual(scores, sorted(scores, reverse=True))

    def test_at_most_one_result_per_name(self) -> None:
        for term in ('a', 'e', 'ha', 'o', 'face'):
            names = [result.name for result in self.index.search(term)]
            self.assertEqual(len(names), len(set(names)))

    def test_search_is_deterministic(self) -> None:
        other_index = emj_search.SearchIndex(self.dataset)
        for term in ('a', 'hot', 'heart', 'ca'):
            self.assertEqual(self.index.search(term), other_index.search(term))

    def test_entries_without_character_are_skipped(self) -> None:
        index = emj_search.SearchIndex(emj_dataset.EmojiDataset.from_mappings(
            {'fire': '🔥'},
            metadata={'phoenix': {'keywords': ['fire']}},
            aliases={'unicorn': ['fire_horse']}))
        self.assertEqual([result.name for result in index.search('fire')],
                         ['fire'])

    def test_search_without_metadata(self) -> None:
        index = emj_search.SearchIndex(emj_dataset.EmojiDataset.from_mappings(
            {'fire': '🔥'}))
        self.assertEqual(
            index.search('ir'),
            [emj_search.SearchResult(
                name='fire', character='🔥', keywords=[], category='other',
                score=1.0)])

    def test_get_by_category(self) -> None:
        results = self.index.get_by_category('animals')
        self.assertEqual(len(results), 14)
        self.assertEqual(results[0].name, 'cat')
        self.assertTrue(all(result.category == 'animals' for result in results))
        self.assertTrue(all(result.score is None for result in results))
        self.assertEqual(self.index.get_by_category('no_such_category'), [])
        self.assertEqual(self.index.get_by_category('Animals'), [])

    def test_get_categories(self) -> None:
        self.assertEqual(self.index.get_categories(),
                         ['animals', 'food', 'nature', 'people', 'travel'])

    def test_index_sizes(self) -> None:
        sizes = self.index.index_sizes()
        self.assertEqual(sorted(sizes), ['alias', 'keyword', 'name'])
        self.assertTrue(all(size > 0 for size in sizes.values()))

    def test_substrings(self) -> None:
        self.assertEqual(len(emj_search.substrings('fire')), 10)
        self.assertEqual(emj_search.substrings('a'), {'a'})

    def test_suggest(self) -> None:
        results = self.index.suggest('fier')
        self.assertTrue(results)
        self.assertEqual(results[0].name, 'fire')
        self.assertTrue(0.0 < results[0].score <= 1.0)
        self.assertEqual(self.index.suggest('fire')[0].score, 1.0)
        self.assertEqual(self.index.suggest('hambruger')[0].name, 'hamburger')
        self.assertEqual(self.index.suggest(''), [])
        self.assertEqual(self.index.suggest('   '), [])

    def test_suggest_limit_and_uniqueness(self) -> None:
        results = self.index.suggest('heart', limit=3, score_cutoff=0.0)
        self.assertEqual(len(results), 3)
        names = [result.name for result in self.index.suggest('heart')]
        self.assertEqual(len(names), len(set(names)))
        scores = [result.score for result in self.index.suggest('heart')]
        self.assertEqual(scores, sorted(scores, reverse=True))

    def test_suggest_does_not_change_search(self) -> None:
        before = self.index.search('fir')
        self.index.suggest('fier')
        self.assertEqual(self.index.search('fir'), before)

if __name__ == '__main__':
    LOG_HANDLER = logging.StreamHandler(stream=sys.stderr)
    LOGGER.setLevel(logging.DEBUG)
    LOGGER.addHandler(LOG_HANDLER)
    unittest.main()
