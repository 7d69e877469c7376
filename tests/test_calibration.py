import logging

import pytest

from textscorer.matrices import CUTOFF_SPREAD, CutoffScore, CutoffScoreStrictness, calculate_cutoff_scores
from textscorer.matrices.bigram import BigramMatrix

from conftest import ENGLISH_TEXT, RANDOM_TEXT


SCORES = {'hello world': 0.05, 'zzqx wvbk': 0.01}


def test_cutoffs_straddle_the_midpoint():
    cutoffs = calculate_cutoff_scores([0.05], [0.01])

    assert cutoffs.avg == pytest.approx(0.03)
    assert cutoffs.strict < cutoffs.avg < cutoffs.loose
    assert cutoffs.loose == pytest.approx(0.03 + CUTOFF_SPREAD * 0.02)
    assert cutoffs.strict == pytest.approx(0.03 - CUTOFF_SPREAD * 0.02)


def test_cutoffs_use_sample_averages():
    cutoffs = calculate_cutoff_scores([0.04, 0.06], [0.0, 0.02])

    assert cutoffs.avg == pytest.approx(0.03)


def test_recalibration_scores_the_samples(bigram, monkeypatch):
    monkeypatch.setattr(bigram, 'get_score', SCORES.get)

    cutoffs = bigram.recalibrate_cutoff_scores(['hello world'], ['zzqx wvbk'])

    assert cutoffs is bigram.get_cutoff_scores()
    assert cutoffs.avg == pytest.approx(0.03)
    assert cutoffs.strict < 0.03 < cutoffs.loose


def test_inverted_samples_still_give_ordered_cutoffs(caplog):
    with caplog.at_level(logging.WARNING):
        cutoffs = calculate_cutoff_scores([0.01], [0.05])

    assert cutoffs.avg == pytest.approx(0.03)
    assert cutoffs.strict <= cutoffs.avg <= cutoffs.loose
    assert 'outscore' in caplog.text


def test_recalibration_is_idempotent(matrix):
    first = matrix.recalibrate_cutoff_scores(['hello world', 'good morning'], ['zzqx wvbk', 'qwpoeiru'])
    second = matrix.recalibrate_cutoff_scores(['hello world', 'good morning'], ['zzqx wvbk', 'qwpoeiru'])

    assert first == second


@pytest.mark.parametrize('good_samples, bad_samples', [
    ([], ['zzqx wvbk']),
    (['hello world'], []),
    ([], [])
])
def test_empty_samples_keep_previous_cutoffs(bigram, good_samples, bad_samples):
    previous = bigram.get_cutoff_scores()
    saved = (bigram.saved_good_samples, bigram.saved_bad_samples)

    assert bigram.recalibrate_cutoff_scores(good_samples, bad_samples) == previous
    assert bigram.get_cutoff_scores() == previous
    assert (bigram.saved_good_samples, bigram.saved_bad_samples) == saved


def test_training_recalibrates_with_saved_samples():
    matrix = BigramMatrix(initial_training_text='', good_samples=['hello world'], bad_samples=['zzqx wvbk'])

    # Nothing scores above zero before any training.
    assert matrix.get_cutoff_scores() == CutoffScore(0.0, 0.0, 0.0)

    matrix.train('hello there, the world is wide and the road is long')

    assert matrix.get_cutoff_scores().avg > 0
    assert matrix.get_cutoff_scores() == matrix.recalibrate_cutoff_scores()


def test_recalibration_replaces_saved_samples(bigram):
    bigram.recalibrate_cutoff_scores(['good morning'], ['qqqq'])
    bigram.train('good morning to you')

    assert bigram.saved_good_samples == ['good morning']
    assert bigram.saved_bad_samples == ['qqqq']


def test_equal_score_is_not_gibberish(matrix):
    score = matrix.get_score(ENGLISH_TEXT)
    matrix.cutoff_scores = CutoffScore(score, score, score)

    for strictness in CutoffScoreStrictness:
        assert not matrix.is_gibberish(ENGLISH_TEXT, strictness)


def test_classification_picks_the_requested_cutoff(bigram):
    bigram.cutoff_scores = CutoffScore(0.1, 0.2, 0.3)
    bigram.get_score = lambda text: 0.15

    assert not bigram.is_gibberish('x', CutoffScoreStrictness.Strict)
    assert bigram.is_gibberish('x', CutoffScoreStrictness.Avg)
    assert bigram.is_gibberish('x', CutoffScoreStrictness.Loose)
    assert bigram.is_gibberish('x', 'loose')
    assert not bigram.is_gibberish('x', 'STRICT')


@pytest.mark.parametrize('text', [ENGLISH_TEXT, RANDOM_TEXT, 'hello', 'qzxv', '', 'the road is long'])
def test_strictness_is_monotonic(matrix, text):
    strict = matrix.is_gibberish(text, CutoffScoreStrictness.Strict)
    avg = matrix.is_gibberish(text, CutoffScoreStrictness.Avg)
    loose = matrix.is_gibberish(text, CutoffScoreStrictness.Loose)

    if strict:
        assert avg and loose
    if not loose:
        assert not avg and not strict


def test_unknown_strictness_is_rejected(bigram):
    with pytest.raises(ValueError):
        bigram.is_gibberish('hello', 'medium')


def test_word_by_word_analysis(bigram):
    bigram.cutoff_scores = CutoffScore(0.0, 0.05, 0.1)
    analysis = bigram.get_word_by_word_analysis('Hello, the asdkjh world!')

    assert [word['word'] for word in analysis['words']] == ['hello', 'the', 'asdkjh', 'world']
    assert analysis['numWords'] == 4
    assert analysis['numGibberishWords'] == len(analysis['gibberishWords'])
    assert analysis['cutoffs'] == bigram.get_cutoff_scores()

    for word in analysis['words']:
        assert word['score'] == bigram.get_score(word['word'])
        assert (word in analysis['gibberishWords']) == (word['score'] < 0.05)


def test_word_by_word_analysis_scores_each_word_once(bigram, monkeypatch):
    scored = []
    get_score = bigram.get_score

    def counting_get_score(text):
        scored.append(text)
        return get_score(text)

    monkeypatch.setattr(bigram, 'get_score', counting_get_score)
    bigram.get_word_by_word_analysis('hello asdkjh world', CutoffScoreStrictness.Loose)

    assert scored == ['hello', 'asdkjh', 'world']


def test_get_cutoff(bigram):
    bigram.cutoff_scores = CutoffScore(0.1, 0.2, 0.3)

    assert bigram.get_cutoff() == 0.2
    assert bigram.get_cutoff(CutoffScoreStrictness.Strict) == 0.1
    assert bigram.get_cutoff('loose') == 0.3
