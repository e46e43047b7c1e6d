'''
vlogging
========

Everything from the standard logging module, plus two extra levels: LOUD, for
the per-field chatter of conversions and parsing, and SILENT, for turning the
command line tools all the way down. Loggers from get_logger carry a `loud`
method.
'''
from logging import *

_getLogger = getLogger

# The root logger keeps no level of its own so that each handler decides what
# it wants to see.
root = getLogger()
root.setLevel(NOTSET)

LOUD = 1
SILENT = 99999999999

LEVEL_FLAGS = {
    '--loud': LOUD,
    '--debug': DEBUG,
    '--warning': WARNING,
    '--quiet': ERROR,
    '--silent': SILENT,
}

def add_loud(log):
    '''
    Add the `loud` method to the given logger.
    '''
    def loud(self, message, *args, **kwargs):
        if self.isEnabledFor(LOUD):
            self._log(LOUD, message, args, **kwargs)

    addLevelName(LOUD, 'LOUD')
    log.loud = loud.__get__(log, log.__class__)

def basic_config(level):
    '''
    Put a stderr handler with the given level on the root logger, unless the
    root already has handlers.
    '''
    if root.handlers:
        return

    handler = StreamHandler()
    handler.setFormatter(Formatter('{levelname}:{name}:{message}', style='{'))
    handler.setLevel(level)
    root.addHandler(handler)

def get_level_by_argv(argv):
    '''
    Return (level, argv) where argv is a copy with every level flag removed.
    If several flags are given, the one listed first in LEVEL_FLAGS wins, so
    --loud beats --debug beats --warning and so on. Without any flag the level
    is INFO.
    '''
    present = [flag for flag in LEVEL_FLAGS if flag in argv]
    if present:
        level = LEVEL_FLAGS[present[0]]
    else:
        level = INFO

    remaining = [arg for arg in argv if arg not in LEVEL_FLAGS]
    return (level, remaining)

def get_logger(name=None, main_fallback=None):
    '''
    When a module runs as a script its name is "__main__", so main_fallback
    lets the caller present the tool's real name in log lines instead.
    '''
    if name == '__main__' and main_fallback is not None:
        name = main_fallback
    log = _getLogger(name)
    add_loud(log)
    return log

getLogger = get_logger

def main_level_by_argv(argv):
    (level, argv) = get_level_by_argv(argv)
    basic_config(level)
    return argv

def main_decorator(main):
    '''
    Decorate a tool's main(argv) so that --debug, --quiet and friends set the
    stderr handler level before argparse ever sees argv.
    '''
    def wrapped(argv):
        argv = main_level_by_argv(argv)
        return main(argv)
    return wrapped
