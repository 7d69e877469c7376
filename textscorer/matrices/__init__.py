#!/usr/bin/env python3
from collections import namedtuple
from enum import Enum
from importlib import import_module
from json import loads as from_json
from logging import getLogger
from math import fsum
from pathlib import Path

from ..alphabet import build_alphabet, get_char_code_map, to_indices
from ..samples import DATA_PATH, DEFAULT_BAD_SAMPLES, DEFAULT_GOOD_SAMPLES, DEFAULT_TRAINING_TEXT
from ..words import extract_words


logger = getLogger(__name__)

# How far `strict` and `loose` sit from `avg`, as a fraction of the distance
# between `avg` and the average score of the good samples.
CUTOFF_SPREAD = 0.5


class SnapshotError(ValueError):
    pass


class CutoffScore(namedtuple('CutoffScore', ('strict', 'avg', 'loose'))):
    '''
    The three thresholds used for classification. A query scoring below
    `strict` is gibberish regardless of the strictness asked for, while a
    query scoring between `avg` and `loose` is only gibberish when
    `CutoffScoreStrictness.Loose` is asked for.
    '''
    __slots__ = ()

    def to_dict(self):
        return {'strict': self.strict, 'avg': self.avg, 'loose': self.loose}

    @classmethod
    def from_dict(this, data):
        return this(strict=float(data['strict']), avg=float(data['avg']), loose=float(data['loose']))


class CutoffScoreStrictness(Enum):
    Strict = 'Strict'
    Avg = 'Avg'
    Loose = 'Loose'

    @classmethod
    def parse(this, value):
        if isinstance(value, this):
            return value

        for member in this:
            if member.value.lower() == str(value).lower():
                return member

        raise ValueError(f'Unknown strictness: {value!r}')


def average(scores):
    return fsum(scores) / len(scores)


def calculate_cutoff_scores(good_scores, bad_scores):
    '''
    Places `avg` halfway between the average good and bad scores, then moves
    `CUTOFF_SPREAD` of the remaining distance to the good average in either
    direction for `loose` (towards good) and `strict` (towards bad).
    '''
    good_average = average(good_scores)
    bad_average = average(bad_scores)
    avg = (good_average + bad_average) / 2
    distance = good_average - avg

    # Inverted samples would otherwise produce strict > avg > loose.
    if distance < 0:
        logger.warning('Bad samples outscore good samples (%.6f > %.6f), cutoffs may be unreliable',
                       bad_average, good_average)
        distance = -distance

    return CutoffScore(
        strict=avg - CUTOFF_SPREAD * distance,
        avg=avg,
        loose=avg + CUTOFF_SPREAD * distance
    )


class NGramMatrix:
    '''
    Models text as a Markov process over n-grams of characters.

    Subclasses decide how counts are stored by setting `order` and
    implementing:

    1. `create_matrix`: An empty count table for an alphabet size.
    2. `add_transition`: Counts one window of `order` character codes.
    3. `get_transition_probability`: The probability of a window's last
       character given the characters leading up to it.
    4. `matrix_to_snapshot` / `matrix_from_snapshot`: The JSON shape of the
       count table.
    '''
    order = None
    default_snapshot = None

    def __init__(self, initial_training_text=None, good_samples=None, bad_samples=None,
                 ignore_case=True, additional_chars_to_include=''):
        self.ignore_case = ignore_case
        self.char_code_map, self.alpha_size, self.chars_to_include = get_char_code_map(
            build_alphabet(ignore_case, additional_chars_to_include)
        )
        self.matrix = self.create_matrix(self.alpha_size)
        self.cutoff_scores = CutoffScore(0.0, 0.0, 0.0)
        self.saved_good_samples = list(DEFAULT_GOOD_SAMPLES if good_samples is None else good_samples)
        self.saved_bad_samples = list(DEFAULT_BAD_SAMPLES if bad_samples is None else bad_samples)

        # Training recalibrates the cutoffs from the saved samples as well.
        self.train(DEFAULT_TRAINING_TEXT if initial_training_text is None else initial_training_text)

    @staticmethod
    def create_matrix(alpha_size):
        raise NotImplementedError

    def add_transition(self, window):
        raise NotImplementedError

    def get_transition_probability(self, window):
        raise NotImplementedError

    def matrix_to_snapshot(self):
        raise NotImplementedError

    @classmethod
    def matrix_from_snapshot(this, data, alpha_size):
        raise NotImplementedError

    def get_windows(self, text):
        '''
        Yields every run of `order` consecutive character codes in `text`.
        Runs that touch a character outside the alphabet are skipped.
        '''
        if self.ignore_case:
            text = text.lower()

        indices = to_indices(text, self.char_code_map)

        for start in range(len(indices) - self.order + 1):
            window = indices[start:start + self.order]

            if None in window:
                continue

            yield tuple(window)

    def train(self, training_text):
        windows = 0

        for window in self.get_windows(training_text):
            self.add_transition(window)
            windows += 1

        logger.debug('Trained %s on %d window(s)', type(self).__name__, windows)

        self.recalibrate_cutoff_scores()

    def get_score(self, text):
        total = 0.0
        windows = 0

        for window in self.get_windows(text):
            total += self.get_transition_probability(window)
            windows += 1

        if not windows:
            return 0.0

        return total / windows

    def get_cutoff_scores(self):
        return self.cutoff_scores

    def recalibrate_cutoff_scores(self, good_samples=None, bad_samples=None):
        '''
        Relearns the cutoffs from sample scores. Samples that are passed in
        replace the saved ones and are reused by later training. If either
        set ends up empty, the previous cutoffs are kept.
        '''
        good_samples = self.saved_good_samples if good_samples is None else list(good_samples)
        bad_samples = self.saved_bad_samples if bad_samples is None else list(bad_samples)

        if not good_samples or not bad_samples:
            logger.warning('Cannot calibrate with %d good and %d bad sample(s), keeping %r',
                           len(good_samples), len(bad_samples), self.cutoff_scores)
            return self.cutoff_scores

        self.saved_good_samples = good_samples
        self.saved_bad_samples = bad_samples

        self.cutoff_scores = calculate_cutoff_scores(
            [self.get_score(sample) for sample in good_samples],
            [self.get_score(sample) for sample in bad_samples]
        )

        logger.debug('Recalibrated cutoffs to %r', self.cutoff_scores)

        return self.cutoff_scores

    def get_cutoff(self, strictness=CutoffScoreStrictness.Avg):
        strictness = CutoffScoreStrictness.parse(strictness)

        return {
            CutoffScoreStrictness.Strict: self.cutoff_scores.strict,
            CutoffScoreStrictness.Avg: self.cutoff_scores.avg,
            CutoffScoreStrictness.Loose: self.cutoff_scores.loose
        }[strictness]

    def is_gibberish(self, text, strictness=CutoffScoreStrictness.Avg):
        return self.get_score(text) < self.get_cutoff(strictness)

    def get_word_by_word_analysis(self, text, strictness=CutoffScoreStrictness.Avg):
        cutoff = self.get_cutoff(strictness)
        words = []
        gibberish_words = []

        for word in extract_words(text, self.ignore_case):
            bundle = {'word': word, 'score': self.get_score(word)}

            if bundle['score'] < cutoff:
                gibberish_words.append(bundle)

            words.append(bundle)

        return {
            'numWords': len(words),
            'numGibberishWords': len(gibberish_words),
            'words': words,
            'gibberishWords': gibberish_words,
            'cutoffs': self.cutoff_scores
        }

    def to_snapshot(self):
        return {
            'order': self.order,
            'ignoreCase': self.ignore_case,
            'charsToInclude': self.chars_to_include,
            'matrix': self.matrix_to_snapshot(),
            'cutoffScores': self.cutoff_scores.to_dict(),
            'goodSamples': list(self.saved_good_samples),
            'badSamples': list(self.saved_bad_samples)
        }

    @classmethod
    def from_snapshot(this, data):
        '''
        Rebuilds a matrix from `to_snapshot` output without retraining. When
        called on `NGramMatrix` itself, the variant is picked from `order`.
        '''
        try:
            order = data['order']
            matrix_class = MATRICES[order] if this.order is None else this

            if matrix_class.order != order:
                raise SnapshotError(f'Snapshot is for order {order}, not {matrix_class.order}')

            matrix = matrix_class.__new__(matrix_class)

            if not isinstance(data['ignoreCase'], bool):
                raise SnapshotError(f'Invalid ignoreCase: {data["ignoreCase"]!r}')

            matrix.ignore_case = data['ignoreCase']
            matrix.char_code_map, matrix.alpha_size, matrix.chars_to_include = get_char_code_map(data['charsToInclude'])

            if matrix.alpha_size != len(data['charsToInclude']):
                raise SnapshotError('Snapshot alphabet contains duplicate characters')

            matrix.matrix = matrix_class.matrix_from_snapshot(data['matrix'], matrix.alpha_size)
            matrix.cutoff_scores = CutoffScore.from_dict(data['cutoffScores'])
            matrix.saved_good_samples = [str(sample) for sample in data.get('goodSamples', DEFAULT_GOOD_SAMPLES)]
            matrix.saved_bad_samples = [str(sample) for sample in data.get('badSamples', DEFAULT_BAD_SAMPLES)]
        except SnapshotError:
            raise
        except (KeyError, TypeError, ValueError) as error:
            raise SnapshotError(f'Malformed snapshot: {error}') from error

        return matrix

    @classmethod
    def load_default(this):
        '''
        Loads the pre-trained, pre-calibrated snapshot bundled for this
        variant, so no training happens.
        '''
        with open(DATA_PATH / this.default_snapshot, 'r', encoding='utf-8') as file:
            return this.from_snapshot(from_json(file.read()))


def validate_counts(rows, alpha_size):
    '''
    Checks a snapshot count table is `alpha_size` square and holds only
    non-negative integers, returning a fresh copy of it.
    '''
    if not isinstance(rows, list) or len(rows) != alpha_size:
        raise SnapshotError(f'Expected {alpha_size} rows of counts')

    for row in rows:
        if not isinstance(row, list) or len(row) != alpha_size:
            raise SnapshotError(f'Expected {alpha_size} counts per row')

        for count in row:
            if isinstance(count, bool) or not isinstance(count, int) or count < 0:
                raise SnapshotError(f'Invalid count: {count!r}')

    return [list(row) for row in rows]


# We automatically build out the available matrices, keyed by their order.
MATRICES = {}

for file in Path(__file__).parent.glob('*.py'):
    # We skip any files that my be internally used by Python.
    if file.name.startswith('__'):
        continue

    for matrix in import_module(f'textscorer.matrices.{file.stem}').MATRICES:
        MATRICES[matrix.order] = matrix
