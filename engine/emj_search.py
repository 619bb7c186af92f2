# vim:et sts=4 sw=4
#
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

'''A module used by emoji-lookup to search emoji by name, keyword
and alias.

At construction time every contiguous substring of every lowercased
name, keyword and alias is registered in one of three indexes, which
makes a substring query a single dictionary lookup. The memory needed
grows with the square of the string lengths. That is fine for a
vocabulary of a few thousand short strings but would not be for a
large corpus, a suffix automaton or a trie would be needed then.
'''

from typing import List
from typing import Tuple
from typing import Dict
from typing import Set
from typing import Optional
from typing import Iterable
from typing import NamedTuple
import functools
import logging

import rapidfuzz

import emj_util
import emj_dataset

LOGGER = logging.getLogger('emoji-lookup')

NAME_MATCH_SCORE = 1.0
KEYWORD_MATCH_SCORE = 0.8
ALIAS_MATCH_SCORE = 0.6

class SearchResult(NamedTuple):
    '''
    A named tuple containing one search result

    name: str            The emoji name (a primary name for alias hits)
    character: str       The emoji character
    keywords: List[str]  The keywords of the emoji, [] without metadata
    category: str        The category, 'other' without metadata
    score: float         1.0 name match, 0.8 keyword match, 0.6 alias
                         match, the fuzzy ratio / 100 for suggestions,
                         None for category listings
    '''
    name: str
    character: str
    keywords: List[str]
    category: str
    score: Optional[float] = None

def substrings(text: str) -> Set[str]:
    '''Returns all contiguous non-empty substrings of a text

    Examples:

    >>> sorted(substrings('abc'))
    ['a', 'ab', 'abc', 'b', 'bc', 'c']

    >>> sorted(substrings('aaa'))
    ['a', 'aa', 'aaa']

    >>> substrings('')
    set()
    '''
    return {text[start:end]
            for start in range(len(text))
            for end in range(start + 1, len(text) + 1)}

def _build_index(
        entries: Iterable[Tuple[str, Iterable[str]]]) -> Dict[str, Tuple[str, ...]]:
    '''Builds a substring index

    Returns a dictionary mapping each lowercased substring to the
    tuple of identifiers whose strings contain it. The identifiers
    appear in the order in which they were first registered.

    :param entries: Pairs (identifier, strings). All strings of one
                    identifier must come in one pair.
    '''
    index: Dict[str, List[str]] = {}
    for identifier, strings in entries:
        keys: Set[str] = set()
        for string in strings:
            keys |= substrings(string.lower())
        for key in keys:
            try:
                index[key].append(identifier)
            except KeyError:
                index[key] = [identifier]
    return {key: tuple(value) for key, value in index.items()}

@functools.lru_cache(maxsize=None)
def _match_rapidfuzz(label: str, query: str) -> float:
    '''Matches a label from the emoji data against the query string'''
    return float(rapidfuzz.fuzz.token_set_ratio(label, query))

def _normalize_label(text: str) -> str:
    '''Lowercase, accents removed, underscores treated as spaces

    Examples:

    >>> _normalize_label('Crème_Brûlée')
    'creme brulee'
    '''
    return emj_util.remove_accents(text.lower()).replace('_', ' ').strip()

class SearchIndex():
    '''Substring indexes over the names, keywords and aliases of a dataset'''

    def __init__(self, dataset: emj_dataset.EmojiDataset) -> None:
        self._dataset = dataset
        self._order: Dict[str, int] = {
            name: position for position, name in enumerate(dataset.names())}
        self._by_name = _build_index(
            (name, (name,)) for name in dataset.names())
        keyword_entries = []
        for name in dataset.metadata_names():
            meta = dataset.metadata(name)
            if meta is not None:
                keyword_entries.append((name, meta.keywords))
        self._by_keyword = _build_index(keyword_entries)
        self._by_alias = _build_index(dataset.alias_table())
        # Labels for fuzzy matching: (normalized label, name, kind),
        # kind 0 for names, 1 for keywords, 2 for aliases.
        self._labels: List[Tuple[str, str, int]] = []
        for name in dataset.names():
            self._labels.append((_normalize_label(name), name, 0))
        for name, keywords in keyword_entries:
            self._labels += [(_normalize_label(keyword), name, 1)
                             for keyword in keywords]
        for primary, aliases in dataset.alias_table():
            self._labels += [(_normalize_label(alias), primary, 2)
                             for alias in aliases]
        LOGGER.debug('Search index sizes: %s', self.index_sizes())

    def index_sizes(self) -> Dict[str, int]:
        '''The number of keys in each of the three indexes'''
        return {'name': len(self._by_name),
                'keyword': len(self._by_keyword),
                'alias': len(self._by_alias)}

    def _result(self, name: str, score: Optional[float]) -> Optional[SearchResult]:
        character = self._dataset.character(name)
        if character is None:
            return None
        meta = self._dataset.metadata(name)
        if meta is None:
            return SearchResult(name=name, character=character,
                                keywords=[], category='other', score=score)
        return SearchResult(name=name, character=character,
                            keywords=meta.keywords, category=meta.category,
                            score=score)

    def search(self, term: str) -> List[SearchResult]:
        '''Search emoji whose name, keywords or aliases contain a term

        Every emoji appears at most once, with the score of the best
        kind of match: 1.0 for the name, 0.8 for a keyword and 0.6
        for an alias. Results are sorted by score, equal scores keep
        the order in which the names were registered in the index
        (dataset order for names, metadata order for keywords, alias
        table order for aliases).

        Returns an empty list if nothing matches.

        :param term: The search term, matching is case insensitive

        Examples:

        >>> index = SearchIndex(emj_dataset.EmojiDataset.from_mappings(
        ...     {'fire': '🔥', 'sun': '☀'},
        ...     metadata={'sun': {'keywords': ['bright', 'hot'],
        ...                       'category': 'nature'}},
        ...     aliases={'fire': ['hot']}))
        >>> [(r.name, r.score) for r in index.search('hot')]
        [('sun', 0.8), ('fire', 0.6)]

        >>> [(r.name, r.score) for r in index.search('FI')]
        [('fire', 1.0)]

        >>> index.search('xyz')
        []
        '''
        term = term.lower()
        scores: Dict[str, float] = {}
        for index, score in ((self._by_name, NAME_MATCH_SCORE),
                             (self._by_keyword, KEYWORD_MATCH_SCORE),
                             (self._by_alias, ALIAS_MATCH_SCORE)):
            for name in index.get(term, ()):
                if name not in scores:
                    scores[name] = score
        results = []
        for name, score in scores.items():
            result = self._result(name, score)
            if result is not None:
                results.append(result)
        # sorted() is stable, ties stay in registration order
        return sorted(results, key=lambda result: -(result.score or 0.0))

    def get_by_category(self, category: str) -> List[SearchResult]:
        '''All emoji whose metadata has exactly this category

        In dataset order, the score of the results is None.
        Returns an empty list for unknown categories.

        :param category: The category, for example 'animals'
        '''
        results = []
        for name in self._dataset.names():
            meta = self._dataset.metadata(name)
            if meta is None or meta.category != category:
                continue
            result = self._result(name, None)
            if result is not None:
                results.append(result)
        return results

    def get_categories(self) -> List[str]:
        '''Sorted list of the distinct categories found in the metadata'''
        categories = set()
        for name in self._dataset.metadata_names():
            meta = self._dataset.metadata(name)
            if meta is not None and meta.category:
                categories.add(meta.category)
        return sorted(categories)

    def suggest(self,
                term: str,
                limit: int = 10,
                score_cutoff: float = 60.0) -> List[SearchResult]:
        '''Fuzzy search for misspelled terms

        Matches the term against all names, keywords and aliases
        with rapidfuzz.fuzz.token_set_ratio(). Every emoji appears
        at most once, with its best ratio divided by 100 as score.
        Sorted by score. For equal scores a match of the name comes
        before a match of a keyword which comes before a match of an
        alias, then dataset order.

        :param term: The (possibly misspelled) search term
        :param limit: The maximum number of results
        :param score_cutoff: Ratios below this (0-100) are ignored

        Examples:

        >>> index = SearchIndex(emj_dataset.EmojiDataset.from_mappings(
        ...     {'fire': '🔥', 'dog': '🐕'}))
        >>> [r.name for r in index.suggest('fier')]
        ['fire']

        >>> index.suggest('   ')
        []
        '''
        query = _normalize_label(term)
        if not query:
            return []
        # name → (ratio, kind)
        best: Dict[str, Tuple[float, int]] = {}
        for label, name, kind in self._labels:
            if not label:
                continue
            ratio = _match_rapidfuzz(label, query)
            if ratio < score_cutoff:
                continue
            previous = best.get(name)
            if previous is None or (-ratio, kind) < (-previous[0], previous[1]):
                best[name] = (ratio, kind)
        ranked = sorted(
            best.items(),
            key=lambda item: (-item[1][0],
                              item[1][1],
                              self._order.get(item[0], len(self._order))))
        results = []
        for name, (ratio, dummy_kind) in ranked:
            result = self._result(name, ratio / 100.0)
            if result is not None:
                results.append(result)
            if len(results) >= limit:
                break
        return results
