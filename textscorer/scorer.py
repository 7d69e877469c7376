#!/usr/bin/env python3
from .matrices import CutoffScoreStrictness
from .matrices.bigram import BigramMatrix
from .matrices.trigram import TrigramMatrix
from . import snapshot


class TextScorer:
    '''
    Scores text for how much it looks like English, and decides whether it
    is gibberish.

    When no options are given, a snapshot trained on the bundled corpus is
    loaded instead of training from scratch. Otherwise the options are
    passed straight to the underlying matrix:

    1. `initial_training_text`: Baseline corpus to learn n-gram frequencies
       from. A substantial, well-formed corpus is recommended.
    2. `good_samples`: Well-formed queries used to learn typical scores.
    3. `bad_samples`: Misspelled or gibberish queries used the same way.
    4. `ignore_case`: Whether to lowercase all training and query input.
    5. `additional_chars_to_include`: Extra characters to model, on top of
       `a-z` and space (plus `A-Z` when case is preserved). Adding many
       characters flattens the distribution and makes predictions noisier.
    '''
    def __init__(self, use_bigram=True, matrix=None, **options):
        matrix_class = BigramMatrix if use_bigram else TrigramMatrix

        # Without options, the bundled pre-trained snapshot is used as is.
        if matrix is None:
            matrix = matrix_class(**options) if options else matrix_class.load_default()

        self.matrix = matrix

    @classmethod
    def load(this, path):
        return this(matrix=snapshot.load(path))

    def save(self, path):
        return snapshot.save(self.matrix, path)

    def train_with_english_text(self, text):
        '''
        Reinforces the learned frequencies with another corpus, then
        recalibrates the cutoffs against them.
        '''
        self.matrix.train(text)

    def recalibrate_cutoff_scores(self, good_samples, bad_samples):
        return self.matrix.recalibrate_cutoff_scores(good_samples, bad_samples)

    def is_gibberish(self, text, strictness=CutoffScoreStrictness.Avg):
        return self.matrix.is_gibberish(text, strictness)

    def get_text_score(self, text):
        return self.matrix.get_score(text)

    def get_cutoff_scores(self):
        return self.matrix.get_cutoff_scores()

    def get_text_score_and_cutoffs(self, text):
        return {'cutoffs': self.matrix.get_cutoff_scores(), 'score': self.matrix.get_score(text)}

    def get_detailed_word_info(self, text, strictness=CutoffScoreStrictness.Avg):
        return self.matrix.get_word_by_word_analysis(text, strictness)
