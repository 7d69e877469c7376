#!/usr/bin/env python3
from regex import compile as RegEx


# Apostrophes inside a word are dropped so "don't" scores as "dont".
_APOSTROPHE_PATTERN = RegEx(r"(?<=\p{L})['’](?=\p{L})")
_SEPARATOR_PATTERN = RegEx(r'\P{L}+')


def extract_words(text, ignore_case=True):
    '''
    Splits free text into word tokens. Anything that isn't a letter is
    treated as a boundary between words.
    '''
    if ignore_case:
        text = text.lower()

    text = _APOSTROPHE_PATTERN.sub('', text)

    return [word for word in _SEPARATOR_PATTERN.split(text) if word]
