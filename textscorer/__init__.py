#!/usr/bin/env python3
from argparse import ArgumentParser
from logging import basicConfig
from pathlib import Path
from sys import exit

from .matrices import CutoffScore, CutoffScoreStrictness, SnapshotError # noqa: F401,E261
from .matrices.bigram import BigramMatrix # noqa: F401,E261
from .matrices.trigram import TrigramMatrix # noqa: F401,E261
from .report import render_html, render_json
from .scorer import TextScorer


def read_lines(path):
    with open(path, 'r', encoding='utf-8') as file:
        return [line.strip() for line in file if line.strip()]


def build_scorer(arguments):
    if arguments.snapshot:
        return TextScorer.load(arguments.snapshot)

    options = {}

    # Only a non-default alphabet needs training, otherwise the bundled
    # snapshot is loaded.
    if arguments.case_sensitive:
        options['ignore_case'] = False

    if arguments.chars:
        options['additional_chars_to_include'] = arguments.chars

    return TextScorer(use_bigram=not arguments.trigram, **options)


def train(arguments):
    options = {}

    if arguments.good:
        options['good_samples'] = read_lines(arguments.good)

    if arguments.bad:
        options['bad_samples'] = read_lines(arguments.bad)

    if arguments.snapshot:
        scorer = TextScorer.load(arguments.snapshot)

        if options:
            scorer.recalibrate_cutoff_scores(
                options.get('good_samples', scorer.matrix.saved_good_samples),
                options.get('bad_samples', scorer.matrix.saved_bad_samples)
            )
    else:
        # We start from an empty matrix, every corpus is trained on its own.
        scorer = TextScorer(
            use_bigram=not arguments.trigram,
            initial_training_text='',
            ignore_case=not arguments.case_sensitive,
            additional_chars_to_include=arguments.chars,
            **options
        )

    for corpus in arguments.corpus:
        print('[i] Training on:', corpus)

        with open(corpus, 'r', encoding='utf-8') as file:
            scorer.train_with_english_text(file.read())

    output_path = scorer.save(arguments.output)
    cutoffs = scorer.get_cutoff_scores()

    print('[+] The snapshot has been saved to:', output_path.resolve())
    print(f'[i] Cutoffs: strict={cutoffs.strict:.6f} avg={cutoffs.avg:.6f} loose={cutoffs.loose:.6f}')


def analyze(arguments, scorer, strictness):
    analysis = scorer.get_detailed_word_info(arguments.text, strictness)

    # We make sure that the formats are actually valid.
    output_formats = [output_format.strip().upper() for output_format in arguments.formats.split(',') if output_format.strip()]

    if not output_formats:
        print('[-] You must specify at least one format: HTML,JSON')
        exit(1)

    for output_format in output_formats:
        if output_format not in ('HTML', 'JSON'):
            print('[-] You specified an invalid output format:', output_format)
            exit(1)

    if not arguments.output:
        if 'HTML' in output_formats:
            print('[-] An output path is required for HTML reports')
            exit(1)

        print(render_json(analysis))
        return

    output_path = Path(arguments.output)
    output_path.mkdir(parents=True, exist_ok=True)

    if 'HTML' in output_formats:
        with open(output_path / 'report.html', 'w') as file:
            file.write(render_html(analysis, strictness))

        print('[+] An HTML copy of the report has been saved to:', output_path.resolve())
    if 'JSON' in output_formats:
        with open(output_path / 'report.json', 'w') as file:
            file.write(render_json(analysis))

        print('[+] A JSON copy of the report has been saved to:', output_path.resolve())

    print('[i] Words analyzed:', analysis['numWords'])
    print('[i] Gibberish words:', analysis['numGibberishWords'])


def main(arguments=None):
    parser = ArgumentParser(description='Scores text for how much it looks like English and flags gibberish')
    parser.add_argument('--trigram', action='store_true', help='Whether to model trigrams instead of bigrams (Default: Bigrams)')
    parser.add_argument('--snapshot', help='A saved snapshot to load instead of training from scratch')
    parser.add_argument('--case-sensitive', action='store_true', help='Whether to model uppercase letters separately (Default: Ignore case)')
    parser.add_argument('--chars', default='', help='Additional characters to model, e.g. ".,;?!" (Default: None)')
    parser.add_argument('--log', default='WARNING', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'], help='Sets the logging level (Default: WARNING)')

    commands = parser.add_subparsers(dest='command', required=True)

    score_parser = commands.add_parser('score', help='Prints the score of the given text')
    score_parser.add_argument('text', help='The text to score')

    check_parser = commands.add_parser('check', help='Checks whether the given text is gibberish')
    check_parser.add_argument('text', help='The text to check')

    analyze_parser = commands.add_parser('analyze', help='Scores the given text word by word')
    analyze_parser.add_argument('text', help='The text to analyze')
    analyze_parser.add_argument('-f', '--formats', default='JSON', help='A comma-seperated list of formats to output (Default: JSON)')
    analyze_parser.add_argument('-o', '--output', help='The path to save the report into (Default: Print JSON)')

    for command_parser in (check_parser, analyze_parser):
        command_parser.add_argument('-s', '--strictness', default='avg', choices=['strict', 'avg', 'loose'], help='The cutoff to classify against (Default: avg)')

    train_parser = commands.add_parser('train', help='Trains a matrix on corpus files and saves a snapshot')
    train_parser.add_argument('corpus', nargs='+', help='The corpus files to train on')
    train_parser.add_argument('-o', '--output', required=True, help='The path to save the snapshot into')
    train_parser.add_argument('--good', help='A file of well-formed samples, one per line')
    train_parser.add_argument('--bad', help='A file of gibberish samples, one per line')

    arguments = parser.parse_args(arguments)

    basicConfig(level=arguments.log, format='%(levelname)s:%(name)s: %(message)s')

    # A snapshot already fixes the order and the alphabet.
    if arguments.snapshot and (arguments.trigram or arguments.case_sensitive or arguments.chars):
        print('[-] --trigram, --case-sensitive and --chars cannot be combined with --snapshot')
        exit(1)

    try:
        if arguments.command == 'train':
            train(arguments)
            return

        scorer = build_scorer(arguments)
    except SnapshotError as error:
        print('[-] The snapshot could not be loaded:', error)
        exit(1)
    except UnicodeDecodeError as error:
        print('[-] A file is not valid UTF-8:', error)
        exit(1)
    except OSError as error:
        print('[-] A file could not be read:', error)
        exit(1)

    if arguments.command == 'score':
        print(f'{scorer.get_text_score(arguments.text):.6f}')
        return

    strictness = CutoffScoreStrictness.parse(arguments.strictness)

    if arguments.command == 'check':
        result = scorer.get_text_score_and_cutoffs(arguments.text)
        cutoff = getattr(result['cutoffs'], strictness.value.lower())

        if scorer.is_gibberish(arguments.text, strictness):
            print(f'[-] Gibberish (score {result["score"]:.6f} < {strictness.value} cutoff {cutoff:.6f})')
        else:
            print(f'[+] Looks fine (score {result["score"]:.6f} >= {strictness.value} cutoff {cutoff:.6f})')
    elif arguments.command == 'analyze':
        analyze(arguments, scorer, strictness)
