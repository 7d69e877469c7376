#!/usr/bin/env python3
from pathlib import Path


DATA_PATH = Path(__file__).parent / 'data'

DEFAULT_GOOD_SAMPLES = [
    'hello world',
    'world',
    'computer',
    'information',
    'it is a beautiful day',
    'my name is',
    'i would like a cup of coffee',
    'this is a simple sentence',
    'see you soon',
    'welcome home',
    'good morning',
    'can you recommend a good book',
    'what time is it',
    'have a nice day',
    'i love reading books',
    'nice to meet you',
    'thank you for your help',
    'understanding',
    'thank you very much',
    'how are you',
    'our team finished the project early'
]

DEFAULT_BAD_SAMPLES = [
    'zzqx wvbk',
    'asdkjh qwpoeiru zxmnv',
    'oqbwifsiehf osdfbw sjkdoo',
    'qwertyuiop',
    'jjjj kkkk llll',
    'xkcd vbnm qpzl',
    'hfgdjs ldkfj',
    'bbbbbbbbbb',
    'pqzvxw jtkr',
    'ghjkl fdsa',
    'wxyzq',
    'mnbvcxz lkjhg',
    'sdfgh jklqw',
    'yyuuii oopp',
    'cvbxnz',
    'tttt rrrr'
]


def load_training_text(path='corpus.txt'):
    with open(DATA_PATH / path, 'r', encoding='utf-8') as file:
        return file.read()


# The baseline corpus the bundled snapshots were trained on. Larger,
# well-formed corpora give much better cutoffs.
DEFAULT_TRAINING_TEXT = load_training_text()
