'''
Helpers for letting the jpdate commands read their dates from a pipe or the
clipboard instead of only from argv.

Any positional argument may be one of the INPUT_STRINGS to read lines from
stdin, or one of the CLIPBOARD_STRINGS to read lines from the clipboard.
Everything else is taken literally.
'''
# import pyperclip moved to stay lazy.
import sys

CLIPBOARD_STRINGS = ['!c', '!clip', '!clipboard']
INPUT_STRINGS = ['!i', '!in', '!input', '!stdin']

def ctrlc_return1(function):
    '''
    If the user presses ctrl+c during the decorated gateway, return status 1
    instead of showing the stacktrace.
    '''
    def wrapped(*args, **kwargs):
        try:
            return function(*args, **kwargs)
        except KeyboardInterrupt:
            return 1
    return wrapped

def _stdin_lines():
    for line in sys.stdin:
        yield line.rstrip('\n')

def input(arg, *, skip_blank=False, strip=False):
    '''
    Resolve one command line argument into an iterable of lines.
    '''
    if not isinstance(arg, str):
        raise TypeError(f'arg should be {str}, not {type(arg)}.')

    arg_lower = arg.lower()

    if arg_lower in INPUT_STRINGS:
        lines = _stdin_lines()

    elif arg_lower in CLIPBOARD_STRINGS:
        import pyperclip
        lines = pyperclip.paste().splitlines()

    else:
        lines = arg.splitlines()

    if strip:
        lines = (line.strip() for line in lines)
    if skip_blank:
        lines = (line for line in lines if line)

    return lines

def input_many(args, **input_kwargs):
    '''
    Yield the input() lines of every argument in turn. Useful for argparse
    positionals with nargs='+'.
    '''
    if isinstance(args, str):
        yield from input(args, **input_kwargs)
        return

    for arg in args:
        yield from input(arg, **input_kwargs)

def output(stream, line, *, end):
    line = str(line)
    stream.write(line)
    if not line.endswith(end):
        stream.write(end)
    if stream.isatty():
        stream.flush()

def stdout(line='', end='\n'):
    # In pythonw, stdout is None.
    if sys.stdout is not None:
        output(sys.stdout, line, end=end)

def stderr(line='', end='\n'):
    if sys.stderr is not None:
        output(sys.stderr, line, end=end)
