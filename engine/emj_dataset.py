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

'''A module used by emoji-lookup to load the static emoji data.

The data consists of five JSON files which are loaded once from the
same directory:

emojis.json      name → character, the key order is the dataset order
metadata.json    name → {keywords, category, unicodeVersion}
categories.json  category → [names]
aliases.json     primary name → [aliases]
skin-tones.json  {"modifiers": {tone → modifier}, "capable": [names]}

Each file may also be gzip compressed (“emojis.json.gz” ...).
'''

from typing import Any
from typing import List
from typing import Tuple
from typing import Dict
from typing import Set
from typing import Optional
from typing import Iterable
from typing import Mapping
from typing import NamedTuple
import json
import logging

import emj_util

LOGGER = logging.getLogger('emoji-lookup')

# The named skin tones in their fixed order. The numeric tone
# identifiers '1' to '5' refer to these positions.
SKIN_TONES = ('light', 'medium-light', 'medium', 'medium-dark', 'dark')

SKIN_TONE_MODIFIERS = ('🏻', '🏼', '🏽', '🏾', '🏿')

DATA_FILES = {
    'emojis': 'emojis.json',
    'metadata': 'metadata.json',
    'categories': 'categories.json',
    'aliases': 'aliases.json',
    'skin_tones': 'skin-tones.json',
}

class DatasetError(ValueError):
    '''Raised when the emoji data is missing or malformed'''

class EmojiMetadata(NamedTuple):
    '''
    A named tuple containing the metadata of one emoji

    keywords: List[str]    Keywords used for searching
    category: str          The category, for example 'animals'
    unicode_version: str   Unicode version which introduced the emoji
    '''
    keywords: List[str]
    category: str = 'other'
    unicode_version: str = '1.0'

def _read_json_file(dirname: str, basename: str) -> Any:
    '''Reads one JSON file, possibly gzip compressed

    :param dirname: The directory containing the file
    :param basename: The file name without a “.gz” suffix
    '''
    (path, open_function) = emj_util.find_path_and_open_function(
        (dirname,), (basename,))
    if not path or open_function is None:
        raise DatasetError(f'could not find "{basename}" in "{dirname}"')
    LOGGER.debug('Loading %s', path)
    try:
        with open_function(path, mode='rt', encoding='utf-8') as data_file:
            return json.load(data_file)
    except (OSError, EOFError, UnicodeDecodeError) as error:
        raise DatasetError(f'could not read "{path}": {error}') from error
    except json.JSONDecodeError as error:
        raise DatasetError(f'invalid JSON in "{path}": {error}') from error

def find_data_dir(data_dir: Optional[str] = None) -> str:
    '''Find the directory containing the emoji data

    Returns the first directory of emj_util.data_dirnames() which
    contains “emojis.json” or “emojis.json.gz”.

    :param data_dir: A directory to try first
    '''
    dirnames = emj_util.data_dirnames(data_dir)
    for dirname in dirnames:
        (path, dummy_open_function) = emj_util.find_path_and_open_function(
            (dirname,), (DATA_FILES['emojis'],))
        if path:
            return dirname
    raise DatasetError(
        f'could not find "{DATA_FILES["emojis"]}" in "{dirnames}"')

def _check_string_list(value: Any, what: str) -> List[str]:
    if (not isinstance(value, list)
            or not all(isinstance(item, str) for item in value)):
        raise DatasetError(f'{what} must be a list of strings')
    return list(value)

def _check_object(value: Any, what: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise DatasetError(f'{what} must be a JSON object')
    return value

class EmojiDataset():
    '''The immutable emoji data

    All views return copies, the dataset never changes after it
    has been constructed.
    '''
    def __init__(self,
                 data_dir: Optional[str] = None,
                 mappings: Optional[Mapping[str, Any]] = None) -> None:
        '''
        Load the emoji data

        Raises DatasetError if a file is missing or malformed.

        :param data_dir: The directory to load the data from.
                         If not given, the directories from
                         emj_util.data_dirnames() are searched.
        :param mappings: Use these mappings instead of loading
                         files from disk. The keys are the keys
                         of DATA_FILES.
        '''
        if mappings is not None:
            self._data_dir = ''
            raw = dict(mappings)
        else:
            self._data_dir = find_data_dir(data_dir)
            LOGGER.info('Loading emoji data from %s', self._data_dir)
            raw = {key: _read_json_file(self._data_dir, basename)
                   for key, basename in DATA_FILES.items()}
        self._init_from_raw(raw)

    @classmethod
    def from_mappings(
            cls,
            emojis: Mapping[str, str],
            metadata: Optional[Mapping[str, Any]] = None,
            categories: Optional[Mapping[str, Iterable[str]]] = None,
            aliases: Optional[Mapping[str, Iterable[str]]] = None,
            skin_tones: Optional[Mapping[str, Any]] = None) -> 'EmojiDataset':
        '''Build a dataset from mappings in memory

        The mappings have the same structure as the JSON files and go
        through the same validation.

        Examples:

        >>> dataset = EmojiDataset.from_mappings({'fire': '🔥'})
        >>> dataset.names()
        ['fire']
        >>> dataset.character('fire')
        '🔥'
        >>> dataset.metadata('fire') is None
        True
        '''
        if skin_tones is None:
            skin_tones = {
                'modifiers': dict(zip(SKIN_TONES, SKIN_TONE_MODIFIERS)),
                'capable': []}
        raw = {
            'emojis': dict(emojis),
            'metadata': dict(metadata or {}),
            'categories': dict(categories or {}),
            'aliases': dict(aliases or {}),
            'skin_tones': dict(skin_tones),
        }
        return cls(mappings=raw)

    def _init_from_raw(self, raw: Dict[str, Any]) -> None:
        '''Validates the raw data and stores it'''
        self._emojis: Dict[str, str] = {}
        for name, character in _check_object(
                raw.get('emojis'), 'emojis').items():
            if not isinstance(character, str) or not character:
                raise DatasetError(
                    f'character of "{name}" must be a non-empty string')
            self._emojis[name] = character

        self._metadata: Dict[str, EmojiMetadata] = {}
        for name, meta in _check_object(
                raw.get('metadata', {}), 'metadata').items():
            meta = _check_object(meta, f'metadata of "{name}"')
            keywords = _check_string_list(
                meta.get('keywords', []), f'keywords of "{name}"')
            category = meta.get('category') or 'other'
            unicode_version = meta.get('unicodeVersion') or '1.0'
            if (not isinstance(category, str)
                    or not isinstance(unicode_version, str)):
                raise DatasetError(
                    f'category and unicodeVersion of "{name}" '
                    f'must be strings')
            if name not in self._emojis:
                LOGGER.debug('metadata for unknown emoji "%s"', name)
            self._metadata[name] = EmojiMetadata(
                keywords=keywords,
                category=category,
                unicode_version=unicode_version)

        self._categories: Dict[str, List[str]] = {}
        for category, names in _check_object(
                raw.get('categories', {}), 'categories').items():
            self._categories[category] = _check_string_list(
                names, f'members of category "{category}"')

        self._aliases: Dict[str, List[str]] = {}
        for primary, aliases in _check_object(
                raw.get('aliases', {}), 'aliases').items():
            aliases = _check_string_list(aliases, f'aliases of "{primary}"')
            if primary in aliases:
                raise DatasetError(
                    f'"{primary}" is listed as an alias of itself')
            self._aliases[primary] = aliases

        skin_tones = _check_object(raw.get('skin_tones'), 'skin tones')
        modifiers = _check_object(
            skin_tones.get('modifiers'), 'skin tone modifiers')
        if sorted(modifiers) != sorted(SKIN_TONES):
            raise DatasetError(
                f'skin tone modifiers must be exactly {SKIN_TONES}, '
                f'got {sorted(modifiers)}')
        self._skin_tone_modifiers: Dict[str, str] = {}
        for tone in SKIN_TONES:
            modifier = modifiers[tone]
            if not isinstance(modifier, str) or not modifier:
                raise DatasetError(
                    f'modifier of skin tone "{tone}" '
                    f'must be a non-empty string')
            self._skin_tone_modifiers[tone] = modifier
        if len(set(self._skin_tone_modifiers.values())) != len(SKIN_TONES):
            raise DatasetError('skin tone modifiers must be different')
        self._skin_tone_capable: Set[str] = set(_check_string_list(
            skin_tones.get('capable', []), 'skin tone capable emoji'))
        LOGGER.debug(
            'Loaded %d emoji, %d metadata entries, %d categories, '
            '%d alias entries, %d skin tone capable emoji',
            len(self._emojis), len(self._metadata), len(self._categories),
            len(self._aliases), len(self._skin_tone_capable))

    @property
    def data_dir(self) -> str:
        '''The directory the data was loaded from, '' if built in memory'''
        return self._data_dir

    def names(self) -> List[str]:
        '''All emoji names in dataset order'''
        return list(self._emojis)

    def items(self) -> List[Tuple[str, str]]:
        '''All (name, character) pairs in dataset order'''
        return list(self._emojis.items())

    def has_name(self, name: str) -> bool:
        '''Whether “name” is an emoji name (not an alias)'''
        return name in self._emojis

    def character(self, name: str) -> Optional[str]:
        '''The character of an emoji name, None if unknown'''
        return self._emojis.get(name)

    def metadata(self, name: str) -> Optional[EmojiMetadata]:
        '''The metadata of an emoji name, None if there is none'''
        meta = self._metadata.get(name)
        if meta is None:
            return None
        return meta._replace(keywords=list(meta.keywords))

    def metadata_names(self) -> List[str]:
        '''All names which have metadata, in metadata order'''
        return list(self._metadata)

    def categories(self) -> List[str]:
        '''The categories of categories.json in stored order'''
        return list(self._categories)

    def category_members(self, category: str) -> List[str]:
        '''The names listed for a category, [] for unknown categories'''
        return list(self._categories.get(category, []))

    def aliases_of(self, primary: str) -> List[str]:
        '''The aliases of a primary name, [] if there are none'''
        return list(self._aliases.get(primary, []))

    def is_primary(self, name: str) -> bool:
        '''Whether “name” is a key of the alias table'''
        return name in self._aliases

    def alias_table(self) -> List[Tuple[str, List[str]]]:
        '''All (primary name, aliases) pairs in stored order'''
        return [(primary, list(aliases))
                for primary, aliases in self._aliases.items()]

    def skin_tone_capable(self) -> Set[str]:
        '''The names which support skin tone modifiers'''
        return set(self._skin_tone_capable)

    def skin_tone_modifiers(self) -> Dict[str, str]:
        '''The 5 named skin tones mapped to their modifiers, in tone order'''
        return dict(self._skin_tone_modifiers)

    def __len__(self) -> int:
        return len(self._emojis)

    def __repr__(self) -> str:
        return (f'{self.__class__.__name__}('
                f'data_dir={self._data_dir!r}, emoji={len(self._emojis)})')

if __name__ == "__main__":
    import doctest
    import sys
    (FAILED, _ATTEMPTED) = doctest.testmod()
    sys.exit(FAILED)
