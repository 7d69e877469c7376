#!/usr/bin/env python3
from string import ascii_lowercase, ascii_uppercase


DEFAULT_CHARS_TO_INCLUDE = ascii_lowercase + ' '
UPPERCASE_CHARS = ascii_uppercase


def get_char_code_map(chars_to_include):
    '''
    Builds the dense index for an alphabet. Characters are numbered in the
    order they first appear, duplicates are dropped.

    Returns a tuple of `(char_code_map, unique_chars, no_duplicate_chars)`
    where the map goes from a character's code point to its index.
    '''
    char_code_map = {}
    no_duplicate_chars = []

    for character in chars_to_include:
        code = ord(character)

        if code in char_code_map:
            continue

        char_code_map[code] = len(no_duplicate_chars)
        no_duplicate_chars.append(character)

    if not no_duplicate_chars:
        raise ValueError('An alphabet needs at least one character')

    return char_code_map, len(no_duplicate_chars), ''.join(no_duplicate_chars)


def build_alphabet(ignore_case=True, additional_chars_to_include=''):
    chars = DEFAULT_CHARS_TO_INCLUDE + additional_chars_to_include

    # Uppercase letters only need their own nodes when case is preserved.
    if not ignore_case:
        chars += UPPERCASE_CHARS

    return chars


def to_indices(text, char_code_map):
    '''
    Maps every character of `text` to its code, or `None` if the character
    isn't part of the alphabet.
    '''
    return [char_code_map.get(ord(character)) for character in text]
