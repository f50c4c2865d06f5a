'''
This file defines the pyparsing grammars describing message templates.
Not used directly, but internally used by the scanner (for the raw template string) and the parser (for each hole body).

Two entry points:
    Given a raw template string, chop the ENTIRE thing into text runs and (possibly malformed) holes.
    Given a hole body (the text between `{` and `}`), interpret the entire thing as a property.
'''
import re
from pyparsing import (
    Literal, Word, Char, Combine, OneOrMore, ZeroOrMore, Regex, Opt, Suppress,
    Located, StringEnd, alphanums, nums, replace_with,
)

# ============================================ Terminals ===========================================

left_brace      = Literal('{').leave_whitespace()
right_brace     = Literal('}').leave_whitespace()
escaped_left    = Literal('{{').set_parse_action(replace_with('{')).leave_whitespace()
escaped_right   = Literal('}}').set_parse_action(replace_with('}')).leave_whitespace()
comma           = Suppress(',').leave_whitespace()
colon           = Suppress(':').leave_whitespace()

# ============================================= Scanner ============================================

# NOTE: `}}` must be tried before a lone `}`, and a lone `}` outside of a hole is simply text.
text_run = Combine(OneOrMore( escaped_left | escaped_right | right_brace | Regex('[^{}]+', re.S).leave_whitespace() ))('text_run').leave_whitespace().set_name('Text')
'A run of literal text, with escaped braces already unescaped.'

hole_body = Regex('[^{}]+', re.S)('body').leave_whitespace().set_name('Hole Body')
hole = Located( Suppress(left_brace) + Opt(hole_body) + Opt(right_brace)('close') )('hole').leave_whitespace().set_name('Hole')
'A `{` followed by everything up to the next brace. If that brace is not a `}` the hole is unclosed.'

template_tokens = ZeroOrMore( text_run | hole ).leave_whitespace().parse_with_tabs().set_name('Template')
'Matches any string whatsoever, so scanning never fails.'

# ============================================= Holes ==============================================

operator        = Char('@$')('operator').set_name('operator')
designator      = Word(alphanums + '_')('designator').set_name('property name or index')
integer         = Combine(Opt(Literal('-')) + Word(nums)).leave_whitespace().set_name('integer')
alignment       = comma + integer('alignment')
format_string   = colon + Regex('[^}]+', re.S)('format').leave_whitespace().set_name('format')

# Nothing may follow the property, not even whitespace
end_of_body     = StringEnd().leave_whitespace()

property_body = ( Opt(operator) + designator + Opt(alignment) + Opt(format_string) + end_of_body ).leave_whitespace().parse_with_tabs().set_name('Property')
'The inside of a single `{...}` hole: optional operator, designator, optional alignment, optional format.'

