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

'''A module used by emoji-lookup to filter emoji by category,
Unicode version and keyword.
'''

from typing import List
from typing import Optional
from typing import NamedTuple
import logging

import emj_util
import emj_dataset

LOGGER = logging.getLogger('emoji-lookup')

VERSION_COMPARISONS = ('exact', 'min', 'max')

class EmojiInfo(NamedTuple):
    '''
    A named tuple containing all information about one emoji

    name: str             The emoji name
    character: str        The emoji character
    category: str         The category, 'other' if unknown
    keywords: List[str]   The keywords, [] if unknown
    unicode_version: str  The Unicode version, '1.0' if unknown
    '''
    name: str
    character: str
    category: str
    keywords: List[str]
    unicode_version: str = '1.0'

class EmojiFilter():
    '''Filters over the emoji of one dataset'''

    def __init__(self, dataset: emj_dataset.EmojiDataset) -> None:
        self._dataset = dataset

    def info(self,
             name: str,
             default_category: str = 'other') -> Optional[EmojiInfo]:
        '''Returns all information about an emoji name

        Returns None if the name has no character.

        :param name: The emoji name (not an alias)
        :param default_category: The category to use if the emoji
                                 has no metadata
        '''
        character = self._dataset.character(name)
        if character is None:
            return None
        meta = self._dataset.metadata(name)
        if meta is None:
            return EmojiInfo(name=name, character=character,
                             category=default_category, keywords=[])
        return EmojiInfo(name=name,
                         character=character,
                         category=meta.category or default_category,
                         keywords=meta.keywords,
                         unicode_version=meta.unicode_version)

    def filter_by_category(self, category: str) -> List[EmojiInfo]:
        '''Returns the emoji listed for a category

        Uses the membership lists of categories.json, in the order
        stored there. Listed names without a character are skipped.

        :param category: The category, for example 'animals'

        Examples:

        >>> emoji_filter = EmojiFilter(emj_dataset.EmojiDataset.from_mappings(
        ...     {'cat': '🐈', 'dog': '🐕'},
        ...     categories={'animals': ['dog', 'cat', 'unicorn']}))
        >>> [(info.name, info.category) for info
        ...  in emoji_filter.filter_by_category('animals')]
        [('dog', 'animals'), ('cat', 'animals')]

        >>> emoji_filter.filter_by_category('plants')
        []
        '''
        results = []
        for name in self._dataset.category_members(category):
            info = self.info(name, default_category=category)
            if info is None:
                LOGGER.debug('"%s" in category "%s" has no character',
                             name, category)
                continue
            results.append(info)
        return results

    def filter_by_version(self,
                          version: str,
                          comparison: str = 'min') -> List[EmojiInfo]:
        '''Returns the emoji introduced in, since or up to a Unicode version

        Emoji without metadata count as version '1.0'. Versions are
        compared numerically, '10.0' is newer than '9.0'.

        Raises ValueError for an unknown comparison.

        :param version: A dotted version like '13.0'
        :param comparison: 'exact' for exactly this version, 'min' for
                           this version or newer, 'max' for this version
                           or older

        Examples:

        >>> emoji_filter = EmojiFilter(emj_dataset.EmojiDataset.from_mappings(
        ...     {'fire': '🔥', 'ninja': '🥷', 'heart': '❤'},
        ...     metadata={'fire': {'unicodeVersion': '6.0'},
        ...               'ninja': {'unicodeVersion': '13.0'}}))
        >>> [info.name for info in emoji_filter.filter_by_version('9.0')]
        ['ninja']

        >>> [info.name for info in emoji_filter.filter_by_version('6.0', 'max')]
        ['fire', 'heart']

        >>> [info.name for info in emoji_filter.filter_by_version('13.0', 'exact')]
        ['ninja']
        '''
        if comparison not in VERSION_COMPARISONS:
            raise ValueError(
                f'comparison must be one of {VERSION_COMPARISONS}, '
                f'got {comparison!r}')
        results = []
        for name in self._dataset.names():
            info = self.info(name)
            if info is None:
                continue
            if comparison == 'exact':
                include = info.unicode_version == version
            elif comparison == 'min':
                include = emj_util.compare_versions(
                    info.unicode_version, version) >= 0
            else:
                include = emj_util.compare_versions(
                    info.unicode_version, version) <= 0
            if include:
                results.append(info)
        return results

    def filter_by_keyword(self,
                          keyword: str,
                          exact: bool = False) -> List[EmojiInfo]:
        '''Returns the emoji having a keyword, case insensitive

        :param keyword: The keyword to look for
        :param exact: If True, a keyword has to be equal, else it is
                      enough if it contains the keyword

        Examples:

        >>> emoji_filter = EmojiFilter(emj_dataset.EmojiDataset.from_mappings(
        ...     {'heart': '❤', 'glove': '🧤'},
        ...     metadata={'heart': {'keywords': ['love']},
        ...               'glove': {'keywords': ['gloves']}}))
        >>> [info.name for info in emoji_filter.filter_by_keyword('LOVE')]
        ['heart', 'glove']

        >>> [info.name for info in emoji_filter.filter_by_keyword('love', exact=True)]
        ['heart']
        '''
        term = keyword.lower()
        results = []
        for name in self._dataset.names():
            info = self.info(name)
            if info is None:
                continue
            keywords = [kw.lower() for kw in info.keywords]
            if exact:
                match = term in keywords
            else:
                match = any(term in kw for kw in keywords)
            if match:
                results.append(info)
        return results

    def get_unicode_versions(self) -> List[str]:
        '''Returns the distinct Unicode versions in the metadata

        Sorted from oldest to newest.
        '''
        versions = set()
        for name in self._dataset.metadata_names():
            meta = self._dataset.metadata(name)
            if meta is not None and meta.unicode_version:
                versions.add(meta.unicode_version)
        return sorted(versions, key=emj_util.version_key)
