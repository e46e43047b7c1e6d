'''
argparse gateway for the jpdate tools.

argparse's own help output wraps our triple-quoted help strings into one long
paragraph, so instead we build the helptext ourselves from the dedented
description and argument helps, and print it to stderr whenever the user asks
for --help or calls a command that can't run bare.
'''
import argparse
import os
import re
import sys
import textwrap

from jpdatekit import pipeable
from jpdatekit import vlogging

log = vlogging.get_logger(__name__)

# > jpdate --help
# > jpdate parse --help
HELP_ARGS = {'-h', '--help'}

# > jpdate help
HELP_COMMANDS = {'help', '-h', '--help'}

# Text printed after every helptext. vlogging's level flags live outside of
# argparse so they are documented here.
HELPTEXT_EPILOGUES = {
    '''
    All commands accept --loud, --debug, --warning, --quiet, --silent to
    adjust the log level on stderr.
    ''',
}

# INTERNALS
################################################################################

def can_use_bare(parser) -> bool:
    '''
    True if the parser has a func and no required arguments, so running the
    program with nothing after it should do real work instead of showing help.
    '''
    has_func = bool(parser.get_default('func'))
    has_required_args = any(is_required(action) for action in parser._actions)
    return has_func and not has_required_args

def get_program_name():
    program_name = os.path.basename(sys.argv[0])
    program_name = re.sub(r'\.pyw?$', '', program_name)
    return program_name

def get_subparser_action(parser):
    for action in parser._actions:
        if isinstance(action, argparse._SubParsersAction):
            return action
    return None

def is_required(action):
    # Positionals with nargs=* still report required=True.
    if action.option_strings == [] and action.nargs == '*':
        return False
    return action.required

def listget(li, index, fallback=None):
    try:
        return li[index]
    except IndexError:
        return fallback

def dedent(text):
    if not text:
        return ''
    return textwrap.dedent(text).strip()

# HELPTEXT
################################################################################

def make_argument_help(action) -> str:
    if action.option_strings:
        name = ', '.join(action.option_strings)
        if action.nargs != 0:
            name = f'{name} {action.metavar or action.dest.upper()}'
    else:
        name = action.metavar or action.dest
        if action.nargs in ('+', '*'):
            name = f'{name} [{name} ...]'

    helptext = textwrap.indent(dedent(action.help), '    ')
    if helptext:
        return f'{name}:\n{helptext}'
    return name

def make_helptext(parser, *, command_name=None) -> str:
    program_name = get_program_name()
    if command_name is not None:
        program_name = f'{program_name} {command_name}'

    arguments = [
        action for action in parser._actions
        if not isinstance(action, (argparse._HelpAction, argparse._SubParsersAction))
        and action.help != argparse.SUPPRESS
    ]
    argument_helps = '\n\n'.join(make_argument_help(action) for action in arguments)

    subparser_action = get_subparser_action(parser)
    if subparser_action is None:
        command_previews = ''
    else:
        previews = []
        for (sp_name, sp) in subparser_action.choices.items():
            description = dedent(sp.description).split('\n\n')[0]
            previews.append(f'{sp_name}\n{textwrap.indent(description, "    ")}')
        command_previews = 'Commands:\n' + '\n\n'.join(previews)
        command_previews += (
            f'\n\nTo see details on each command, run\n'
            f'> {program_name} <command> --help'
        )

    parts = [
        program_name,
        dedent(parser.description),
        argument_helps,
        command_previews,
    ]
    parts = [part.strip() for part in parts if part and part.strip()]
    return '\n\n'.join(parts)

def print_helptext(text) -> None:
    '''
    Print the given text to stderr, followed by the epilogues.
    '''
    fulltext = [text.strip()]
    fulltext.extend(sorted(dedent(epi) for epi in HELPTEXT_EPILOGUES))
    separator = '\n' + ('-' * 80) + '\n'
    pipeable.stderr()
    pipeable.stderr(separator.join(fulltext))

# MAINS
################################################################################

def _run(parser, argv, args_postprocessor):
    args = parser.parse_args(argv)
    if args_postprocessor is not None:
        args = args_postprocessor(args)
    return args.func(args)

def _go_single(parser, argv, *, args_postprocessor=None):
    needs_help = (
        any(arg.lower() in HELP_ARGS for arg in argv) or
        len(argv) == 0 and not can_use_bare(parser)
    )
    if needs_help:
        print_helptext(make_helptext(parser))
        return 1

    return _run(parser, argv, args_postprocessor)

def _go_multi(parser, argv, *, args_postprocessor=None):
    subparsers = get_subparser_action(parser).choices
    command = listget(argv, 0, '').lower()

    if command == '' and can_use_bare(parser):
        return _run(parser, argv, args_postprocessor)

    if command == '' or command in HELP_COMMANDS:
        print_helptext(make_helptext(parser))
        return 1

    if command not in subparsers:
        print_helptext(make_helptext(parser))
        pipeable.stderr(f'\nYou are seeing the default help text because "{command}" was not recognized.')
        return 1

    subparser = subparsers[command]
    arguments = argv[1:]

    no_args = len(arguments) == 0 and not can_use_bare(subparser)
    if no_args or any(arg.lower() in HELP_ARGS for arg in arguments):
        print_helptext(make_helptext(subparser, command_name=command))
        return 1

    log.debug('Running command %s with %s.', command, arguments)
    return _run(parser, argv, args_postprocessor)

def go(parser, argv, *, args_postprocessor=None):
    if get_subparser_action(parser):
        return _go_multi(parser, argv, args_postprocessor=args_postprocessor)
    else:
        return _go_single(parser, argv, args_postprocessor=args_postprocessor)
