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
Utility functions used in emoji-lookup
'''

from typing import Any
from typing import Tuple
from typing import List
from typing import Optional
from typing import Iterable
from typing import Callable
import os
import re
import sys
import gzip
import functools
import unicodedata
import logging

LOGGER = logging.getLogger('emoji-lookup')

NORMALIZATION_FORM_INTERNAL = 'NFC'

DATADIR = os.path.join(os.path.dirname(__file__), '../data')
INSTALLED_DATADIR = os.path.join(sys.prefix, 'share', 'emoji-lookup', 'data')

ZWJ = '\u200d'
VS16 = '\ufe0f'

def debug_level() -> int:
    '''Returns the debug level set in the environment

    EMOJI_LOOKUP_DEBUG_LEVEL is parsed as an integer, anything which
    cannot be parsed means 0.
    '''
    try:
        return int(str(os.getenv('EMOJI_LOOKUP_DEBUG_LEVEL')))
    except (TypeError, ValueError):
        return 0

def xdg_data_path(*resource: str) -> str:
    '''
    Returns the path of a resource in the XDG user data directory

    Like xdg.BaseDirectory.save_data_path() but does not create
    the directory, the directory is only read from.

    :param resource: Path components below $XDG_DATA_HOME

    Examples:

    >>> os.environ['XDG_DATA_HOME'] = '/tmp/xdg'
    >>> xdg_data_path('emoji-lookup', 'data')
    '/tmp/xdg/emoji-lookup/data'
    >>> del os.environ['XDG_DATA_HOME']
    '''
    xdg_data_home = os.environ.get('XDG_DATA_HOME') or os.path.join(
        os.path.expanduser('~'), '.local', 'share')
    resource_joined = os.path.join(*resource)
    assert not resource_joined.startswith('/')
    return os.path.join(xdg_data_home, resource_joined)

def data_dirnames(data_dir: Optional[str] = None) -> List[str]:
    '''Returns the list of directories to search for the emoji data

    In order of preference:

    - the directory given as argument
    - $EMOJI_LOOKUP_DATADIR
    - ~/.local/share/emoji-lookup/data (or below $XDG_DATA_HOME)
    - the “data” directory of the source tree
    - $prefix/share/emoji-lookup/data where the data is installed

    :param data_dir: A directory which overrides everything else
    '''
    dirnames = []
    if data_dir:
        dirnames.append(data_dir)
    if os.getenv('EMOJI_LOOKUP_DATADIR'):
        dirnames.append(str(os.getenv('EMOJI_LOOKUP_DATADIR')))
    dirnames.append(xdg_data_path('emoji-lookup', 'data'))
    dirnames.append(os.path.normpath(DATADIR))
    dirnames.append(INSTALLED_DATADIR)
    return dirnames

def find_path_and_open_function(
        dirnames: Iterable[str],
        basenames: Iterable[str]) -> Tuple[str, Optional[Callable[..., Any]]]:
    '''Find the first existing file of a list of basenames and dirnames

    For each file in “basenames”, tries whether that file or the
    file with “.gz” added can be found in the list of directories
    “dirnames”.

    Returns a tuple (path, open_function) where “path” is the
    complete path of the first file found and the open function
    is either “open()” or “gzip.open()”.

    :param dirnames: A list of directories to search in
    :param basenames: A list of file names to search for
    '''
    for basename in basenames:
        for dirname in dirnames:
            path = os.path.join(dirname, basename)
            if os.path.exists(path):
                if path.endswith('.gz'):
                    return (path, gzip.open)
                return (path, open)
            path = os.path.join(dirname, basename + '.gz')
            if os.path.exists(path):
                return (path, gzip.open)
    return ('', None)

# Mapping of Unicode ordinals to Unicode ordinals, strings, or None.
# Unmapped characters are left untouched. Characters mapped to None
# are deleted.
TRANS_TABLE = {
    ord('ẞ'): 'SS',
    ord('ß'): 'ss',
    ord('Ø'): 'O',
    ord('ø'): 'o',
    ord('Æ'): 'AE',
    ord('æ'): 'ae',
    ord('Œ'): 'OE',
    ord('œ'): 'oe',
    ord('Ł'): 'L',
    ord('ł'): 'l',
}

@functools.lru_cache(maxsize=None)
def remove_accents(text: str) -> str:
    '''Removes accents from the text

    :param text: The text to change
    :return: The text with all accents removed

    Examples:

    >>> remove_accents('Ångstrøm')
    'Angstrom'

    >>> remove_accents('crème brûlée')
    'creme brulee'
    '''
    result = ''.join([
        x for x in unicodedata.normalize('NFKD', text)
        if unicodedata.category(x) != 'Mn']).translate(TRANS_TABLE)
    return unicodedata.normalize(NORMALIZATION_FORM_INTERNAL, result)

def format_emoji_name(raw_name: str) -> str:
    '''Turns a human readable emoji description into an emoji name

    Non-word characters become underscores, runs of underscores
    collapse, and the result is lowercased.

    Examples:

    >>> format_emoji_name('Grinning Face')
    'grinning_face'

    >>> format_emoji_name('Face with Tears of Joy')
    'face_with_tears_of_joy'

    >>> format_emoji_name('Flag: United  States')
    'flag_united_states'
    '''
    name = re.sub(r'\W', ' ', raw_name.strip())
    name = re.sub(r' +', '_', name)
    return name.lower()

def version_key(version: str) -> Tuple[int, ...]:
    '''Returns a key to sort dotted version strings numerically

    Parts which are not numbers count as 0.

    Examples:

    >>> version_key('13.0')
    (13, 0)

    >>> sorted(['10.0', '9.0', '1.1'], key=version_key)
    ['1.1', '9.0', '10.0']
    '''
    key = []
    for part in version.split('.'):
        try:
            key.append(int(part))
        except ValueError:
            key.append(0)
    return tuple(key)

def compare_versions(version_a: str, version_b: str) -> int:
    '''Compares two dotted version strings numerically

    Returns a negative number if version_a is older, 0 if both are
    equal and a positive number if version_a is newer. Missing
    trailing parts count as 0.

    Examples:

    >>> compare_versions('13.0', '9.0') > 0
    True

    >>> compare_versions('6.0', '6')
    0

    >>> compare_versions('1.1', '6.0') < 0
    True
    '''
    key_a = list(version_key(version_a))
    key_b = list(version_key(version_b))
    length = max(len(key_a), len(key_b))
    key_a += [0] * (length - len(key_a))
    key_b += [0] * (length - len(key_b))
    for part_a, part_b in zip(key_a, key_b):
        if part_a != part_b:
            return part_a - part_b
    return 0
