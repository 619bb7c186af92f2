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

'''A module used by emoji-lookup to find the name of an emoji character.

Several names may share one character. The reverse mapping is built by
walking the names in dataset order (the key order of emojis.json) and
the last name written for a character wins. This makes the answer
deterministic but it depends on the order of the data file, it is not
necessarily the “best” name.
'''

from typing import Dict
from typing import Optional
from typing import Iterable
from typing import Mapping
from typing import Tuple
from typing import Union
import logging

import emj_dataset

LOGGER = logging.getLogger('emoji-lookup')

def create_reverse_mapping(
        emojis: Union[Mapping[str, str], Iterable[Tuple[str, str]]]) -> Dict[str, str]:
    '''Creates a character → name mapping from a name → character mapping

    If several names have the same character, the last one wins.

    :param emojis: A mapping name → character or (name, character) pairs

    Examples:

    >>> create_reverse_mapping({'fire': '🔥', 'cat': '🐈'})
    {'🔥': 'fire', '🐈': 'cat'}

    >>> create_reverse_mapping({'burning': '🔥', 'fire': '🔥'})
    {'🔥': 'fire'}

    >>> create_reverse_mapping({})
    {}
    '''
    if isinstance(emojis, Mapping):
        pairs: Iterable[Tuple[str, str]] = emojis.items()
    else:
        pairs = emojis
    reverse: Dict[str, str] = {}
    for name, character in pairs:
        if character in reverse:
            LOGGER.debug('"%s" replaces "%s" as name of %s',
                         name, reverse[character], character)
        reverse[character] = name
    return reverse

class ReverseMapping():
    '''The character → name mapping of one dataset'''

    def __init__(self, dataset: emj_dataset.EmojiDataset) -> None:
        self._reverse = create_reverse_mapping(dataset.items())

    def get_name_from_emoji(self, character: str) -> Optional[str]:
        '''Returns the name of an emoji character, None if unknown

        :param character: The emoji character, matched exactly
        '''
        return self._reverse.get(character)

    def get_reverse_mapping(self) -> Dict[str, str]:
        '''Returns a copy of the whole character → name mapping'''
        return dict(self._reverse)

    def is_known_emoji(self, text: str) -> bool:
        '''Whether the text is exactly the character of a known emoji'''
        return text in self._reverse

    def __contains__(self, text: object) -> bool:
        return text in self._reverse

    def __len__(self) -> int:
        return len(self._reverse)
