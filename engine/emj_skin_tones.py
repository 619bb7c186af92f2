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

'''A module used by emoji-lookup to add and remove skin tone modifiers.

The five skin tones are

    light         U+1F3FB  🏻  numeric alias '1'
    medium-light  U+1F3FC  🏼  numeric alias '2'
    medium        U+1F3FD  🏽  numeric alias '3'
    medium-dark   U+1F3FE  🏾  numeric alias '4'
    dark          U+1F3FF  🏿  numeric alias '5'

See: http://unicode.org/reports/tr51/#Diversity
'''

from typing import List
from typing import Dict
from typing import Set
from typing import Optional
import itertools
import logging

import emj_util
import emj_dataset
import emj_aliases
import emj_reverse

LOGGER = logging.getLogger('emoji-lookup')

NUMERIC_TONES = {
    str(position): tone
    for position, tone in enumerate(emj_dataset.SKIN_TONES, start=1)}

class InvalidToneError(ValueError):
    '''Raised for a skin tone which is neither a tone name nor '1'-'5' '''

class SkinToneTransformer():
    '''Applies and removes skin tone modifiers'''

    def __init__(self,
                 dataset: emj_dataset.EmojiDataset,
                 resolver: emj_aliases.AliasResolver,
                 reverse: emj_reverse.ReverseMapping) -> None:
        self._resolver = resolver
        self._reverse = reverse
        self._modifiers: Dict[str, str] = dataset.skin_tone_modifiers()
        self._capable: Set[str] = dataset.skin_tone_capable()
        # Characters (without variation selectors) of the skin tone
        # capable emoji, used to find the persons in ZWJ sequences.
        self._capable_characters: Set[str] = set()
        for name in self._capable:
            character = resolver.resolve_emoji(name)
            if character is None:
                LOGGER.debug('skin tone capable emoji "%s" is unknown', name)
                continue
            self._capable_characters.add(
                character.replace(emj_util.VS16, ''))

    def resolve_tone(self, tone: str) -> str:
        '''Returns the modifier for a skin tone name or numeric alias

        Raises InvalidToneError for anything else.

        :param tone: 'light', 'medium-light', 'medium', 'medium-dark',
                     'dark' or '1' to '5'
        '''
        try:
            return self._modifiers[NUMERIC_TONES.get(tone, tone)]
        except (KeyError, TypeError) as error:
            raise InvalidToneError(f'Invalid skin tone: {tone!r}') from error

    def _remove_modifiers(self, character: str) -> str:
        for modifier in self._modifiers.values():
            character = character.replace(modifier, '')
        return character

    def remove_skin_tone(self, character: str) -> str:
        '''Removes all skin tone modifiers from an emoji

        Also removes all U+FE0F VARIATION SELECTOR-16 and all
        U+200D ZERO WIDTH JOINER, in sequences of several persons
        the modifiers of all persons are removed.

        :param character: The emoji
        '''
        return self._remove_modifiers(character).replace(
            emj_util.VS16, '').replace(emj_util.ZWJ, '')

    def apply_skin_tone(self, character: str, tone: str) -> str:
        '''Gives an emoji the skin tone requested

        An existing skin tone is replaced, not kept.

        Raises InvalidToneError if the tone is not valid.

        :param character: The emoji
        :param tone: A skin tone name or '1' to '5'
        '''
        modifier = self.resolve_tone(tone)
        return self.remove_skin_tone(character) + modifier

    def skin_tone_of(self, character: str) -> Optional[str]:
        '''Returns the name of the first skin tone in an emoji, None if none'''
        positions = [(character.find(modifier), tone)
                     for tone, modifier in self._modifiers.items()
                     if modifier in character]
        if not positions:
            return None
        return min(positions)[1]

    def supports_skin_tone_by_name(self, name: str) -> bool:
        '''Whether the emoji with this name or alias supports skin tones

        :param name: An emoji name or an alias
        '''
        if self._resolver.resolve_emoji(name) is None:
            return False
        if name in self._capable:
            return True
        return self._resolver.get_primary_name(name) in self._capable

    def supports_skin_tone_by_character(self, character: str) -> bool:
        '''Whether this emoji character supports skin tones

        The character has to match a character of the dataset exactly.

        :param character: The emoji character
        '''
        name = self._reverse.get_name_from_emoji(character)
        if name is None:
            return False
        return self.supports_skin_tone_by_name(name)

    def supports_skin_tone(self, name_or_character: str) -> bool:
        '''Whether an emoji given by name, alias or character supports
        skin tones

        Tries the input as a name first and as a character only if
        that fails.

        :param name_or_character: An emoji name, alias or character
        '''
        if self._resolver.resolve_emoji(name_or_character) is not None:
            return self.supports_skin_tone_by_name(name_or_character)
        return self.supports_skin_tone_by_character(name_or_character)

    def get_all_skin_tone_variations(self, character: str) -> Dict[str, str]:
        '''Returns the emoji without skin tone and with each skin tone

        The key 'default' maps to the emoji without skin tone, the
        tone names map to the emoji with that skin tone.

        :param character: The emoji, an existing skin tone is ignored
        '''
        base = self.remove_skin_tone(character)
        variations = {'default': base}
        for tone in emj_dataset.SKIN_TONES:
            variations[tone] = self.apply_skin_tone(base, tone)
        return variations

    def skin_tone_variants(self, character: str) -> List[str]:
        '''
        Returns a list of skin tone variants for the given emoji

        In sequences joined with ZERO WIDTH JOINER each person gets
        its own skin tone, all combinations are returned. The first
        variant is always the one without any skin tone.

        If the given emoji does not support skin tones, a list
        containing only the original emoji is returned.

        :param character: The emoji, existing skin tones are ignored
        '''
        base = self._remove_modifiers(character)
        if not base:
            return [character]
        parts = base.split(emj_util.ZWJ)
        if len(parts) > 4:
            return [character]
        options: List[List[str]] = []
        for part in parts:
            bare_part = part.replace(emj_util.VS16, '')
            if bare_part in self._capable_characters:
                options.append(
                    [part] + [bare_part + modifier
                              for modifier in self._modifiers.values()])
            else:
                options.append([part])
        if all(len(option) == 1 for option in options):
            return [character]
        return [emj_util.ZWJ.join(variant)
                for variant in itertools.product(*options)]
