import logging
from pyparsing import ParseBaseException, StringEnd

logger = logging.getLogger(__name__)


class GrammarError(ValueError):
    '''
    Raised when a raw template string does not follow the message template grammar.
    Carries the full ErrorLog, since a single template may contain several faulty holes.
    '''
    def __init__(self, errors: 'ErrorLog', raw: str=None):
        self.errors = errors
        self.raw = raw
        super().__init__(str(errors))


class ErrorLog:
    '''
    Class for storing, conveying and combining error messages about message templates.
    '''

    class Message:
        __slots__ = ('message', 'count')
        def __init__(self, message: str, count=1):
            self.message = message
            self.count = count
        def __str__(self):
            return ('(%d) ' % self.count if self.count > 1 else '') + self.message

    __slots__ = ('errors', 'terminal')

    errors: list['ErrorLog.Message']
    terminal: bool

    def __init__(self):
        self.errors = []
        self.terminal = False

    #############################################
    ## Error logging methods
    #############################################

    def log(self, message, terminal=False):
        ''' The error-logging method '''
        message = str(message)
        if self.errors and self.errors[-1].message == message:
            self.errors[-1].count += 1
        else:
            logger.debug('%s logged: %s', 'Error' if terminal else 'Warning', message)
            self.errors.append(ErrorLog.Message(message))
        self.terminal |= terminal
        return self

    def log_parse_exception(self, e: ParseBaseException, offset: int=0, line: str=None):
        '''
        Bespoke formatting for a not-uncommon terminal exception.
        `offset` shifts the reported position, for exceptions raised while parsing a substring (e.g. a hole body) of `line`.
        '''
        error_msg = e.msg and (e.msg[0].lower() + e.msg[1:])
        position = e.loc + offset
        ### Create a human-readable error message
        if isinstance(e.parser_element, StringEnd):
            message = f'Unexpected character {e.pstr[e.loc]!r} at position {position}'
        elif e.loc >= len(e.pstr):
            message = f'Unexpected end of property at position {position}, {error_msg}'
        else:
            message = f'Unexpected character {e.pstr[e.loc]!r} at position {position}, {error_msg}'
        ### Point out the offending piece of code
        if line is not None:
            message += f':\n\t{line}\n\t{" " * position}^'
        return self.log(message, True)

    #############################################
    ## Log viewing methods
    #############################################

    def __len__(self): return len(self.errors)
    def __str__(self):
        return '\n'.join(str(m) for m in self.errors) if self.errors else 'No warnings!'
