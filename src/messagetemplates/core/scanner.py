'''
The Scanner chops a raw template string into literal text runs and raw hole bodies.

Scanning never fails: escaped braces are resolved, stray `}`s are kept as text,
and holes that are not properly closed are passed on (flagged) for the Parser to complain about.
'''
from typing import NamedTuple, TypeAlias
from pyparsing import ParseResults

from . import grammar


class TextRun(NamedTuple):
    ''' A run of literal text, `{{` and `}}` already unescaped, along with the exact source it was scanned from. '''
    text: str
    source: str | None = None

    def __str__(self):
        if self.source is not None:
            return self.source
        return self.text.replace('{', '{{').replace('}', '}}')


class HoleToken(NamedTuple):
    ''' The raw, unparsed inside of a `{...}`, with its span in the raw string. '''
    body: str
    start: int
    end: int
    closed: bool

    @staticmethod
    def from_parsed(result: ParseResults):
        value = result['value']
        return HoleToken(
            body=value.get('body', ''),
            start=result['locn_start'],
            end=result['locn_end'],
            closed='close' in value,
        )

    def __str__(self):
        return '{' + self.body + ('}' if self.closed else '')


RawToken: TypeAlias = TextRun | HoleToken


def scan(raw: str) -> list[RawToken]:
    ''' Lexes the raw template string into interleaved TextRuns and HoleTokens. '''
    if not raw:
        return []
    tokens: list[RawToken] = []
    # Only holes know their span, a text run's source is whatever lies between two holes
    text, position = None, 0
    for result_piece in grammar.template_tokens.parse_string(raw, parse_all=True):
        if isinstance(result_piece, str):
            text = (text or '') + result_piece
            continue
        hole = HoleToken.from_parsed(result_piece)
        if text is not None:
            tokens.append(TextRun(text, raw[position:hole.start]))
            text = None
        tokens.append(hole)
        position = hole.end
    if text is not None:
        tokens.append(TextRun(text, raw[position:]))
    return tokens
