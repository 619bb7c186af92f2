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

'''A module used by emoji-lookup to resolve aliases of emoji names.

Every key of the alias table is a primary name. A primary name and
its aliases form one equivalence class. A name which is neither a
primary name nor an alias is its own class.
'''

from typing import List
from typing import Dict
from typing import Optional
import logging

import emj_dataset

LOGGER = logging.getLogger('emoji-lookup')

class AliasResolver():
    '''Answers primary name and alias questions for one dataset'''

    def __init__(self, dataset: emj_dataset.EmojiDataset) -> None:
        self._dataset = dataset
        self._alias_table: Dict[str, List[str]] = dict(dataset.alias_table())
        # alias → primary name. If an alias is listed for several
        # primary names, the first one in table order owns it.
        self._primary_by_alias: Dict[str, str] = {}
        for primary, aliases in self._alias_table.items():
            for alias in aliases:
                if alias in self._primary_by_alias:
                    LOGGER.debug(
                        'alias "%s" of "%s" already belongs to "%s"',
                        alias, primary, self._primary_by_alias[alias])
                    continue
                self._primary_by_alias[alias] = primary

    def get_aliases(self, name: str) -> List[str]:
        '''Returns the other names of an emoji

        For a primary name this is its alias list as stored.
        For an alias it is the primary name followed by the
        other aliases of that primary name.
        For an unknown name it is an empty list.

        :param name: A primary name or an alias

        Examples:

        >>> resolver = AliasResolver(emj_dataset.EmojiDataset.from_mappings(
        ...     {'fire': '🔥'}, aliases={'fire': ['flame', 'hot', 'lit']}))
        >>> resolver.get_aliases('fire')
        ['flame', 'hot', 'lit']

        >>> resolver.get_aliases('hot')
        ['fire', 'flame', 'lit']

        >>> resolver.get_aliases('water')
        []
        '''
        if self._dataset.is_primary(name):
            return list(self._alias_table[name])
        primary = self._primary_by_alias.get(name)
        if primary is None:
            return []
        return [primary] + [
            alias for alias in self._alias_table[primary] if alias != name]

    def get_primary_name(self, name: str) -> str:
        '''Returns the primary name for a name or alias

        Returns the input unchanged if it is a primary name or unknown.

        :param name: A primary name or an alias

        Examples:

        >>> resolver = AliasResolver(emj_dataset.EmojiDataset.from_mappings(
        ...     {'dog': '🐕'}, aliases={'dog': ['doggo']}))
        >>> resolver.get_primary_name('doggo')
        'dog'

        >>> resolver.get_primary_name('dog')
        'dog'

        >>> resolver.get_primary_name('unknown_name_xyz')
        'unknown_name_xyz'
        '''
        if self._dataset.is_primary(name):
            return name
        return self._primary_by_alias.get(name, name)

    def is_same_emoji(self, name1: str, name2: str) -> bool:
        '''Whether two names or aliases refer to the same emoji'''
        return self.get_primary_name(name1) == self.get_primary_name(name2)

    def get_all_names(self, name: str) -> List[str]:
        '''Returns the primary name followed by all its aliases

        :param name: A primary name or an alias
        '''
        primary = self.get_primary_name(name)
        return [primary] + self.get_aliases(primary)

    def resolve_emoji(self, name_or_alias: str) -> Optional[str]:
        '''Returns the character for a name or an alias

        The name is looked up directly first, only on a miss
        the alias is resolved to its primary name.

        Returns None if neither works.

        :param name_or_alias: An emoji name or an alias
        '''
        character = self._dataset.character(name_or_alias)
        if character is not None:
            return character
        return self._dataset.character(self.get_primary_name(name_or_alias))

    def get_alias_map(self) -> Dict[str, str]:
        '''Returns a new dictionary mapping every alias to its primary name'''
        return dict(self._primary_by_alias)

    def is_alias(self, name: str) -> bool:
        '''Whether “name” is listed as an alias'''
        return name in self._primary_by_alias
