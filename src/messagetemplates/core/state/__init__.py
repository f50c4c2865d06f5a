'''
Objects representing and containing diagnostic state produced while handling message templates.

Aside from type-checking there are no dependencies from the state submodule on the rest of the core module.
'''
from .error_log import ErrorLog, GrammarError
