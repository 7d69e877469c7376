#!/usr/bin/env python3
from json import dumps as to_json, loads as from_json
from json.decoder import JSONDecodeError
from logging import getLogger
from pathlib import Path

from .matrices import NGramMatrix, SnapshotError


logger = getLogger(__name__)


def save(matrix, path):
    '''
    Writes the matrix's counts, cutoffs and calibration samples to `path` as
    JSON. The file can be loaded again with `load` without retraining.
    '''
    path = Path(path)

    with open(path, 'w', encoding='utf-8') as file:
        file.write(to_json(matrix.to_snapshot(), separators=(',', ':')))

    logger.debug('Saved %s snapshot to %s', type(matrix).__name__, path)

    return path


def load(path):
    path = Path(path)

    try:
        with open(path, 'r', encoding='utf-8') as file:
            data = from_json(file.read())
    except UnicodeDecodeError as error:
        raise SnapshotError(f'Snapshot is not valid UTF-8: {path}') from error
    except JSONDecodeError as error:
        raise SnapshotError(f'Snapshot is not valid JSON: {path}') from error

    if not isinstance(data, dict):
        raise SnapshotError(f'Snapshot is not a JSON object: {path}')

    matrix = NGramMatrix.from_snapshot(data)

    logger.debug('Loaded %s snapshot from %s', type(matrix).__name__, path)

    return matrix
