'''
The TemplateCache maps raw template strings to their one canonical parsed Template.

Templates are typically reused across many call sites while parsing is the most expensive step,
so every distinct raw string should only ever be parsed once (as long as it stays cached).
'''
import logging
import threading
from lru import LRU

from .state import GrammarError
from .template import Template

logger = logging.getLogger(__name__)


class TemplateCache:
    '''
    Thread-safe get-or-parse cache of Templates, keyed by raw template string.

    With `size=0` the cache is unbounded, otherwise it holds the `size` most recently used Templates.
    Strings which fail to parse are never cached.
    '''
    __slots__ = ('size', '_templates', '_lock')

    size: int
    _templates: dict[str, Template]

    def __init__(self, size: int=0):
        if size < 0:
            raise ValueError(f'Cache size must be non-negative, got {size}')
        self.size = size
        self._templates = LRU(size, callback=self._on_evict) if size else {}
        self._lock = threading.Lock()

    @staticmethod
    def _on_evict(raw: str, template: Template):
        logger.debug('Evicted template %r', raw)

    def get_or_parse(self, raw: str) -> Template:
        ''' Get the canonical Template for the given raw string, parsing it if it's not cached yet. Raises GrammarError. '''
        ## Fast path: no need to lock for a cache hit
        template = self._templates.get(raw)
        if template is not None:
            return template

        with self._lock:
            ## Someone else may have parsed it while we were waiting for the lock
            template = self._templates.get(raw)
            if template is not None:
                return template
            try:
                template = Template.from_string(raw)
            except GrammarError:
                logger.debug('Not caching invalid template %r', raw)
                raise
            self._templates[raw] = template
            logger.debug('Parsed and cached template %r', raw)
            return template

    def __contains__(self, raw: str):
        return raw in self._templates
    def __len__(self):
        return len(self._templates)
    def __repr__(self):
        return f'TemplateCache(size={self.size}, cached={len(self)})'

    def clear(self):
        with self._lock:
            self._templates.clear()


DEFAULT_CACHE = TemplateCache()
'Process-wide cache, created at import time and never in need of teardown.'


def get_or_parse(raw: str) -> Template:
    ''' Get the canonical Template for the given raw string from the process-wide cache. '''
    return DEFAULT_CACHE.get_or_parse(raw)
