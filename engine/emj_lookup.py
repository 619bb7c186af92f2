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

'''The emoji-lookup entry point

EmojiLookup loads the emoji data once and builds all lookup structures
in its constructor. Afterwards nothing changes anymore, all methods
only read.

Examples:

>>> lookup = EmojiLookup()
>>> lookup.get('fire')
'🔥'

>>> lookup.get('snapstreak')
'🔥'

>>> lookup.get_name_from_emoji('🐕')
'dog'

>>> [result.name for result in lookup.search('lit')][:1]
['fire']
'''

from typing import List
from typing import Dict
from typing import Optional
import functools
import logging

import emj_dataset
import emj_aliases
import emj_search
import emj_reverse
import emj_validators
import emj_skin_tones
import emj_filters

LOGGER = logging.getLogger('emoji-lookup')

class EmojiLookup():
    '''All lookups over one emoji dataset'''

    def __init__(self,
                 data_dir: Optional[str] = None,
                 dataset: Optional[emj_dataset.EmojiDataset] = None) -> None:
        '''
        Raises emj_dataset.DatasetError if the data cannot be loaded.

        :param data_dir: The directory containing the emoji data,
                         see emj_util.data_dirnames()
        :param dataset: Use this dataset instead of loading one,
                        “data_dir” is ignored then
        '''
        if dataset is None:
            dataset = emj_dataset.EmojiDataset(data_dir=data_dir)
        self._dataset = dataset
        self._resolver = emj_aliases.AliasResolver(dataset)
        self._index = emj_search.SearchIndex(dataset)
        self._reverse = emj_reverse.ReverseMapping(dataset)
        self._skin_tones = emj_skin_tones.SkinToneTransformer(
            dataset, self._resolver, self._reverse)
        self._filter = emj_filters.EmojiFilter(dataset)
        LOGGER.debug('%r ready', dataset)

    @property
    def dataset(self) -> emj_dataset.EmojiDataset:
        '''The dataset all lookups are done on'''
        return self._dataset

    def get(self, name_or_alias: str) -> Optional[str]:
        '''Returns the character for a name or an alias, None if unknown'''
        return self._resolver.resolve_emoji(name_or_alias)

    def info(self, name_or_alias: str) -> Optional[emj_filters.EmojiInfo]:
        '''Returns all information about an emoji given by name or alias

        For an alias, the information of its primary name is returned.

        :param name_or_alias: An emoji name or an alias
        '''
        if self._dataset.has_name(name_or_alias):
            return self._filter.info(name_or_alias)
        return self._filter.info(
            self._resolver.get_primary_name(name_or_alias))

    # Search

    def search(self, term: str) -> List[emj_search.SearchResult]:
        '''See emj_search.SearchIndex.search()'''
        return self._index.search(term)

    def suggest(self,
                term: str,
                limit: int = 10,
                score_cutoff: float = 60.0) -> List[emj_search.SearchResult]:
        '''See emj_search.SearchIndex.suggest()'''
        return self._index.suggest(
            term, limit=limit, score_cutoff=score_cutoff)

    def get_by_category(self, category: str) -> List[emj_search.SearchResult]:
        '''See emj_search.SearchIndex.get_by_category()'''
        return self._index.get_by_category(category)

    def get_categories(self) -> List[str]:
        '''See emj_search.SearchIndex.get_categories()'''
        return self._index.get_categories()

    # Aliases

    def get_aliases(self, name: str) -> List[str]:
        '''See emj_aliases.AliasResolver.get_aliases()'''
        return self._resolver.get_aliases(name)

    def get_primary_name(self, name: str) -> str:
        '''See emj_aliases.AliasResolver.get_primary_name()'''
        return self._resolver.get_primary_name(name)

    def is_same_emoji(self, name1: str, name2: str) -> bool:
        '''See emj_aliases.AliasResolver.is_same_emoji()'''
        return self._resolver.is_same_emoji(name1, name2)

    def get_all_names(self, name: str) -> List[str]:
        '''See emj_aliases.AliasResolver.get_all_names()'''
        return self._resolver.get_all_names(name)

    def resolve_emoji(self, name_or_alias: str) -> Optional[str]:
        '''See emj_aliases.AliasResolver.resolve_emoji()'''
        return self._resolver.resolve_emoji(name_or_alias)

    def get_alias_map(self) -> Dict[str, str]:
        '''See emj_aliases.AliasResolver.get_alias_map()'''
        return self._resolver.get_alias_map()

    # Skin tones

    def apply_skin_tone(self, character: str, tone: str) -> str:
        '''See emj_skin_tones.SkinToneTransformer.apply_skin_tone()'''
        return self._skin_tones.apply_skin_tone(character, tone)

    def remove_skin_tone(self, character: str) -> str:
        '''See emj_skin_tones.SkinToneTransformer.remove_skin_tone()'''
        return self._skin_tones.remove_skin_tone(character)

    def supports_skin_tone(self, name_or_character: str) -> bool:
        '''See emj_skin_tones.SkinToneTransformer.supports_skin_tone()'''
        return self._skin_tones.supports_skin_tone(name_or_character)

    def supports_skin_tone_by_name(self, name: str) -> bool:
        '''See emj_skin_tones.SkinToneTransformer.supports_skin_tone_by_name()'''
        return self._skin_tones.supports_skin_tone_by_name(name)

    def supports_skin_tone_by_character(self, character: str) -> bool:
        '''See
        emj_skin_tones.SkinToneTransformer.supports_skin_tone_by_character()
        '''
        return self._skin_tones.supports_skin_tone_by_character(character)

    def get_all_skin_tone_variations(self, character: str) -> Dict[str, str]:
        '''See
        emj_skin_tones.SkinToneTransformer.get_all_skin_tone_variations()
        '''
        return self._skin_tones.get_all_skin_tone_variations(character)

    def skin_tone_of(self, character: str) -> Optional[str]:
        '''See emj_skin_tones.SkinToneTransformer.skin_tone_of()'''
        return self._skin_tones.skin_tone_of(character)

    def skin_tone_variants(self, character: str) -> List[str]:
        '''See emj_skin_tones.SkinToneTransformer.skin_tone_variants()'''
        return self._skin_tones.skin_tone_variants(character)

    # Reverse mapping and validation

    def get_name_from_emoji(self, character: str) -> Optional[str]:
        '''See emj_reverse.ReverseMapping.get_name_from_emoji()'''
        return self._reverse.get_name_from_emoji(character)

    def get_reverse_mapping(self) -> Dict[str, str]:
        '''See emj_reverse.ReverseMapping.get_reverse_mapping()'''
        return self._reverse.get_reverse_mapping()

    def is_known_emoji(self, text: str) -> bool:
        '''See emj_reverse.ReverseMapping.is_known_emoji()'''
        return self._reverse.is_known_emoji(text)

    def is_valid_emoji(self, text: str) -> bool:
        '''Whether the text is a known emoji or looks like one

        See emj_validators.is_valid_emoji()
        '''
        return emj_validators.is_valid_emoji(text, known=self._reverse)

    # Filters

    def filter_by_category(self, category: str) -> List[emj_filters.EmojiInfo]:
        '''See emj_filters.EmojiFilter.filter_by_category()'''
        return self._filter.filter_by_category(category)

    def filter_by_version(self,
                          version: str,
                          comparison: str = 'min') -> List[emj_filters.EmojiInfo]:
        '''See emj_filters.EmojiFilter.filter_by_version()'''
        return self._filter.filter_by_version(version, comparison)

    def filter_by_keyword(self,
                          keyword: str,
                          exact: bool = False) -> List[emj_filters.EmojiInfo]:
        '''See emj_filters.EmojiFilter.filter_by_keyword()'''
        return self._filter.filter_by_keyword(keyword, exact)

    def get_unicode_versions(self) -> List[str]:
        '''See emj_filters.EmojiFilter.get_unicode_versions()'''
        return self._filter.get_unicode_versions()

@functools.lru_cache(maxsize=None)
def get_default_lookup() -> EmojiLookup:
    '''Returns the EmojiLookup for the default data directory

    Created on the first call, every later call returns the same object.
    '''
    return EmojiLookup()

if __name__ == "__main__":
    import doctest
    import sys
    (FAILED, _ATTEMPTED) = doctest.testmod()
    sys.exit(FAILED)
