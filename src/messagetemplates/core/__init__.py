'''
The core of message templates: scanning, parsing, caching, binding and rendering.

Raw string → Scanner → Parser → Template (cached by raw string) → Binder (+ arguments) → CapturedEvent → Renderer (+ formatter) → text
'''
from .state import ErrorLog, GrammarError
from .scanner import scan, TextRun, HoleToken, RawToken
from .parser import parse
from .template import Template, TextElement, PropertyElement, TemplateElement, Operator, Name, Index, Designator
from .template_cache import TemplateCache, DEFAULT_CACHE, get_or_parse
from .binder import bind, CapturedEvent, CapturedProperty
from .renderer import render, Renderer, UnboundPolicy, Formatter, default_formatter, align
