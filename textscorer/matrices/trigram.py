#!/usr/bin/env python3
from . import NGramMatrix, SnapshotError, validate_counts


class TrigramMatrixLayer:
    '''
    One layer per leading character. `count_layer[j][k]` counts the second
    and third characters, `layer_total` is the sum of every cell.
    '''
    __slots__ = ('count_layer', 'layer_total')

    def __init__(self, count_layer, layer_total=0):
        self.count_layer = count_layer
        self.layer_total = layer_total

    def to_dict(self):
        return {
            'countLayer': [list(row) for row in self.count_layer],
            'layerTotal': self.layer_total
        }


class TrigramMatrix(NGramMatrix):
    order = 3
    default_snapshot = 'trigram.json'

    @staticmethod
    def create_matrix(alpha_size):
        return [
            TrigramMatrixLayer([[0] * alpha_size for _ in range(alpha_size)])
            for _ in range(alpha_size)
        ]

    def add_transition(self, window):
        first, second, third = window
        layer = self.matrix[first]
        layer.count_layer[second][third] += 1
        layer.layer_total += 1

    def get_transition_probability(self, window):
        first, second, third = window
        layer = self.matrix[first]

        if layer.layer_total == 0:
            return 0.0

        return layer.count_layer[second][third] / layer.layer_total

    def matrix_to_snapshot(self):
        return [layer.to_dict() for layer in self.matrix]

    @classmethod
    def matrix_from_snapshot(this, data, alpha_size):
        if not isinstance(data, list) or len(data) != alpha_size:
            raise SnapshotError(f'Expected {alpha_size} layers of counts')

        layers = []

        for layer in data:
            count_layer = validate_counts(layer['countLayer'], alpha_size)
            layer_total = sum(sum(row) for row in count_layer)

            # A stale total would skew every probability in the layer.
            if layer['layerTotal'] != layer_total:
                raise SnapshotError(f'Layer total {layer["layerTotal"]!r} does not match its counts ({layer_total})')

            layers.append(TrigramMatrixLayer(count_layer, layer_total))

        return layers


MATRICES = [TrigramMatrix]
