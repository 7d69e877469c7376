import pytest

from textscorer.matrices.bigram import BigramMatrix
from textscorer.matrices.trigram import TrigramMatrix
from textscorer.samples import DEFAULT_TRAINING_TEXT


ENGLISH_TEXT = 'the quick fox jumps over the lazy dog'
RANDOM_TEXT = 'oqbwifsiehf osdfbw sjkdoo thehwei'


@pytest.fixture
def bigram():
    return BigramMatrix(initial_training_text=DEFAULT_TRAINING_TEXT)


@pytest.fixture
def trigram():
    return TrigramMatrix(initial_training_text=DEFAULT_TRAINING_TEXT)


@pytest.fixture(params=[BigramMatrix, TrigramMatrix], ids=['bigram', 'trigram'])
def matrix(request):
    return request.param(initial_training_text=DEFAULT_TRAINING_TEXT)


@pytest.fixture(params=[BigramMatrix, TrigramMatrix], ids=['bigram', 'trigram'])
def matrix_class(request):
    return request.param
