#!/usr/bin/env python3
from json import dumps as to_json

from jinja2 import Template


_HTML_TEMPLATE = Template('''<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>{{ title }}</title>
    <style>
        body { font-family: sans-serif; margin: 2em; }
        table { border-collapse: collapse; }
        td, th { border: 1px solid #ccc; padding: 0.25em 0.75em; text-align: left; }
        .gibberish { background: #fdd; }
    </style>
</head>
<body>
    <h1>{{ title }}</h1>
    <p>{{ analysis.numGibberishWords }} of {{ analysis.numWords }} word(s) look like gibberish ({{ strictness }}).</p>
    <p>Cutoffs: strict {{ '%.6f' | format(analysis.cutoffs.strict) }},
        avg {{ '%.6f' | format(analysis.cutoffs.avg) }},
        loose {{ '%.6f' | format(analysis.cutoffs.loose) }}</p>
    <table>
        <tr><th>Word</th><th>Score</th></tr>
        {% for word in analysis.words %}
        <tr{% if word in analysis.gibberishWords %} class="gibberish"{% endif %}>
            <td>{{ word.word }}</td>
            <td>{{ '%.6f' | format(word.score) }}</td>
        </tr>
        {% endfor %}
    </table>
</body>
</html>
''', autoescape=True)


def to_serializable(analysis):
    return {**analysis, 'cutoffs': analysis['cutoffs'].to_dict()}


def render_json(analysis):
    return to_json(to_serializable(analysis), indent=' ' * 4)


def render_html(analysis, strictness, title='Word-by-word analysis'):
    return _HTML_TEMPLATE.render(
        title=title,
        analysis=analysis,
        strictness=strictness.value
    )
