#!/usr/bin/env python3
from . import NGramMatrix, validate_counts


class BigramMatrix(NGramMatrix):
    '''
    Counts transitions between pairs of characters in a square table, where
    `matrix[i][j]` is the number of times character `i` was followed by
    character `j`.
    '''
    order = 2
    default_snapshot = 'bigram.json'

    @staticmethod
    def create_matrix(alpha_size):
        return [[0] * alpha_size for _ in range(alpha_size)]

    def add_transition(self, window):
        first, second = window
        self.matrix[first][second] += 1

    def get_transition_probability(self, window):
        first, second = window
        row = self.matrix[first]

        # Rows are normalized here rather than after every training step.
        row_total = sum(row)

        if row_total == 0:
            return 0.0

        return row[second] / row_total

    def matrix_to_snapshot(self):
        return [list(row) for row in self.matrix]

    @classmethod
    def matrix_from_snapshot(this, data, alpha_size):
        return validate_counts(data, alpha_size)


MATRICES = [BigramMatrix]
