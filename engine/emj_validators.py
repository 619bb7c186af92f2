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
'''
Format checks for emoji, emoji names and skin tones
'''

from typing import Container
from typing import Optional
import re

import emj_util
import emj_dataset

# Code point ranges accepted by the heuristic in is_valid_emoji()
# for strings which are not known emoji.
EMOJI_RANGES = (
    (0x1F600, 0x1F64F), # Emoticons
    (0x1F300, 0x1F5FF), # Miscellaneous Symbols and Pictographs
    (0x1F680, 0x1F6FF), # Transport and Map Symbols
    (0x1F700, 0x1F77F), # Alchemical Symbols
    (0x1F780, 0x1F7FF), # Geometric Shapes Extended
    (0x1F800, 0x1F8FF), # Supplemental Arrows-C
    (0x2600, 0x26FF),   # Miscellaneous Symbols
    (0x2700, 0x27BF),   # Dingbats
    (0x1F900, 0x1F9FF), # Supplemental Symbols and Pictographs
    (0x1FA00, 0x1FA6F), # Chess Symbols
    (0x1FA70, 0x1FAFF), # Symbols and Pictographs Extended-A
    (0x1F1E6, 0x1F1FF), # Regional indicator symbols
    (0x1F3FB, 0x1F3FF), # Skin tone modifiers
    (0x200D, 0x200D),   # ZERO WIDTH JOINER
    (0xFE0F, 0xFE0F),   # VARIATION SELECTOR-16
)

VALID_TONES = emj_dataset.SKIN_TONES + ('1', '2', '3', '4', '5')

_ASCII_ALNUM_OR_SPACE_PATTERN = re.compile(r'[a-zA-Z0-9\s]')
_EMOJI_NAME_PATTERN = re.compile(r'[a-zA-Z0-9_-]+')
_NOT_NAME_CHARACTER_PATTERN = re.compile(r'[^a-z0-9_]')

def _in_range(codepoint: int) -> bool:
    '''Checks whether the codepoint is in one of the emoji ranges

    Examples:

    >>> _in_range(0x1F525)
    True

    >>> _in_range(ord('a'))
    False
    '''
    return any(low <= codepoint <= high for low, high in EMOJI_RANGES)

def is_valid_emoji(text: str, known: Optional[Container[str]] = None) -> bool:
    '''Checks whether a string is an emoji

    The whole string has to be an emoji, a string containing an
    emoji together with letters, digits or white space is rejected.

    :param text: The string to check
    :param known: Characters known to be emoji, for example a
                  emj_reverse.ReverseMapping. If the text is one of
                  them it is valid without further checks.

    Examples:

    >>> is_valid_emoji('🔥')
    True

    >>> is_valid_emoji('👋🏻')
    True

    >>> is_valid_emoji('hello 🔥')
    False

    >>> is_valid_emoji('')
    False
    '''
    if not text:
        return False
    if known is not None and text in known:
        return True
    if _ASCII_ALNUM_OR_SPACE_PATTERN.search(text):
        return False
    return all(_in_range(ord(character)) for character in text)

def is_valid_emoji_name(name: str) -> bool:
    '''Checks whether a string has the format of an emoji name

    Only ASCII letters, digits, underscores and hyphens are allowed.

    Examples:

    >>> is_valid_emoji_name('thumbs_up')
    True

    >>> is_valid_emoji_name('medium-light')
    True

    >>> is_valid_emoji_name('fire!')
    False

    >>> is_valid_emoji_name('')
    False
    '''
    return bool(name) and _EMOJI_NAME_PATTERN.fullmatch(name) is not None

def is_valid_skin_tone(tone: str) -> bool:
    '''Checks whether a string is one of the 10 skin tone identifiers

    Examples:

    >>> is_valid_skin_tone('medium-dark')
    True

    >>> is_valid_skin_tone('5')
    True

    >>> is_valid_skin_tone('6')
    False
    '''
    return tone in VALID_TONES

def sanitize_emoji_name(name: str) -> str:
    '''Makes a valid emoji name from a string

    Lowercases and replaces everything which is not a lowercase ASCII
    letter, digit or underscore with an underscore.

    Examples:

    >>> sanitize_emoji_name('Thumbs Up!')
    'thumbs_up_'

    >>> sanitize_emoji_name('medium-light')
    'medium_light'
    '''
    return _NOT_NAME_CHARACTER_PATTERN.sub('_', name.lower())

def has_variation_selector(text: str) -> bool:
    '''Checks whether the text contains U+FE0F VARIATION SELECTOR-16

    Examples:

    >>> has_variation_selector('❤\\ufe0f')
    True

    >>> has_variation_selector('🔥')
    False
    '''
    return emj_util.VS16 in text

def strip_variation_selectors(text: str) -> str:
    '''Removes all U+FE0F VARIATION SELECTOR-16 from the text

    Examples:

    >>> strip_variation_selectors('❤\\ufe0f')
    '❤'

    >>> strip_variation_selectors('🏳\\ufe0f\\u200d🌈')
    '🏳\\u200d🌈'
    '''
    return text.replace(emj_util.VS16, '')
