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
Command line tool of emoji-lookup

Exit status: 0 on success, 1 if a lookup found nothing or the emoji
data could not be loaded, 2 for invalid arguments (including an
invalid skin tone).
'''
from typing import Any
from typing import List
from typing import Optional
from typing import Sequence
import sys
import argparse
import logging

import emj_util
import emj_dataset
import emj_search
import emj_skin_tones
import emj_lookup

LOGGER = logging.getLogger('emoji-lookup')

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_USAGE = 2

def parse_args(argv: Optional[Sequence[str]] = None) -> Any:
    '''Parse the command line arguments'''
    parser = argparse.ArgumentParser(
        prog='emoji-lookup',
        description='Look up emoji by name, alias, keyword or character.')
    parser.add_argument(
        '--search', '-s',
        metavar='TERM',
        dest='search',
        default=None,
        help='Search emoji whose name, keywords or aliases contain TERM')
    parser.add_argument(
        '--suggest',
        metavar='TERM',
        dest='suggest',
        default=None,
        help='Fuzzy search for a possibly misspelled TERM')
    parser.add_argument(
        '--name', '-n',
        metavar='CHARACTER',
        dest='name',
        default=None,
        help='Print the name of an emoji character')
    parser.add_argument(
        '--aliases', '-a',
        metavar='NAME',
        dest='aliases',
        default=None,
        help='Print the other names of an emoji name or alias')
    parser.add_argument(
        '--category', '-c',
        metavar='CATEGORY',
        dest='category',
        default=None,
        help='List the emoji of a category')
    parser.add_argument(
        '--categories',
        action='store_true',
        dest='categories',
        default=False,
        help='List all categories, default: %(default)s')
    parser.add_argument(
        '--emoji', '-e',
        metavar='NAME_OR_CHARACTER',
        dest='emoji',
        default=None,
        help='Print an emoji given by name, alias or character, '
        + 'use together with --skin-tone to change its skin tone')
    parser.add_argument(
        '--skin-tone', '-t',
        metavar='TONE',
        dest='skin_tone',
        default=None,
        help='Skin tone for --emoji: '
        + ', '.join(emj_dataset.SKIN_TONES) + ' or 1-5')
    parser.add_argument(
        '--variations',
        metavar='NAME_OR_CHARACTER',
        dest='variations',
        default=None,
        help='List all skin tone variants of an emoji')
    parser.add_argument(
        '--format-name',
        metavar='DESCRIPTION',
        dest='format_name',
        default=None,
        help='Print the emoji name for a description like "Grinning Face"')
    parser.add_argument(
        '--data-dir',
        metavar='DIR',
        dest='data_dir',
        default=None,
        help='Directory containing the emoji data, default: '
        + ', '.join(emj_util.data_dirnames()[-3:]))
    parser.add_argument(
        '--limit', '-l',
        metavar='N',
        type=int,
        dest='limit',
        default=10,
        help='Maximum number of results for --search and --suggest, '
        + 'default: %(default)s')
    parser.add_argument(
        '--debug', '-d',
        action='store_true',
        dest='debug',
        default=False,
        help='Print debug output to stderr, default: %(default)s')
    args = parser.parse_args(argv)
    if args.skin_tone is not None and args.emoji is None:
        parser.error('--skin-tone needs --emoji')
    if args.limit < 1:
        parser.error('--limit must be at least 1')
    if not any((args.search, args.suggest, args.name, args.aliases,
                args.category, args.categories, args.emoji,
                args.variations, args.format_name)):
        parser.error('nothing to look up')
    return args

def _print_results(results: List[emj_search.SearchResult],
                   limit: Optional[int] = None) -> int:
    if not results:
        return EXIT_NOT_FOUND
    for result in results[:limit]:
        if result.score is None:
            print(f'{result.character} {result.name}')
        else:
            print(f'{result.character} {result.name} {result.score:.2f}')
    return EXIT_OK

def _character(lookup: emj_lookup.EmojiLookup,
               name_or_character: str) -> Optional[str]:
    '''Names and aliases are tried first, then known characters'''
    character = lookup.get(name_or_character)
    if character is not None:
        return character
    if lookup.is_valid_emoji(name_or_character):
        return name_or_character
    return None

def run(lookup: emj_lookup.EmojiLookup, args: Any) -> int:
    '''Does the lookup requested on the command line

    Returns the exit status.
    '''
    if args.search is not None:
        return _print_results(lookup.search(args.search), args.limit)
    if args.suggest is not None:
        return _print_results(
            lookup.suggest(args.suggest, limit=args.limit))
    if args.category is not None:
        return _print_results(lookup.get_by_category(args.category))
    if args.categories:
        for category in lookup.get_categories():
            print(category)
        return EXIT_OK
    if args.name is not None:
        name = lookup.get_name_from_emoji(args.name)
        if name is None:
            return EXIT_NOT_FOUND
        print(name)
        return EXIT_OK
    if args.aliases is not None:
        aliases = lookup.get_aliases(args.aliases)
        if not aliases:
            return EXIT_NOT_FOUND
        for alias in aliases:
            print(alias)
        return EXIT_OK
    if args.variations is not None:
        character = _character(lookup, args.variations)
        if character is None:
            return EXIT_NOT_FOUND
        for variant in lookup.skin_tone_variants(character):
            print(variant)
        return EXIT_OK
    if args.emoji is not None:
        character = _character(lookup, args.emoji)
        if character is None:
            return EXIT_NOT_FOUND
        if args.skin_tone is not None:
            character = lookup.apply_skin_tone(character, args.skin_tone)
        print(character)
        return EXIT_OK
    print(emj_util.format_emoji_name(args.format_name))
    return EXIT_OK

def main(argv: Optional[Sequence[str]] = None) -> int:
    '''Main program'''
    args = parse_args(argv)
    log_handler = logging.StreamHandler(stream=sys.stderr)
    log_formatter = logging.Formatter(
        '%(asctime)s %(filename)s '
        'line %(lineno)d %(funcName)s %(levelname)s: '
        '%(message)s')
    log_handler.setFormatter(log_formatter)
    if args.debug or emj_util.debug_level() > 0:
        LOGGER.setLevel(logging.DEBUG)
    else:
        LOGGER.setLevel(logging.WARNING)
    LOGGER.addHandler(log_handler)
    try:
        lookup = emj_lookup.EmojiLookup(data_dir=args.data_dir)
        return run(lookup, args)
    except emj_dataset.DatasetError as error:
        LOGGER.error('Cannot load the emoji data: %s', error)
        return EXIT_NOT_FOUND
    except emj_skin_tones.InvalidToneError as error:
        LOGGER.error('%s', error)
        return EXIT_USAGE
    finally:
        LOGGER.removeHandler(log_handler)

if __name__ == "__main__":
    sys.exit(main())
