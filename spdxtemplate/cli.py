"""
# SPDX Template: cli.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Command-line interface.
"""

import argparse
import os
import re
import sys

from spdxtemplate._version import __version__
from spdxtemplate.constants import (
    COMMAND_LINE_ERROR_EXIT_CODE,
    GENERIC_ERROR_EXIT_CODE,
    RULE_SYNTAX_HELP,
    TEMPLATE_FILE_EXTENSION,
)
from spdxtemplate.core import template_text_to_html, template_to_text
from spdxtemplate.exceptions import RuleFormatError

DESCRIPTION = '''
    Convert SPDX license templates to HTML (or to text).
'''
TEMPLATE_FILE_NAME_HELP = '''
    name of license template file to be converted
    (can be abbreviated as `file` or `file.` for increased productivity)
'''
ALL_MODE_HELP = '''
    convert all license template files under the working directory
'''
TEXT_MODE_HELP = '''
    write the default license text (`.txt`) instead of HTML (`.html`)
'''
VERBOSE_MODE_HELP = '''
    run in verbose mode (prints every text span and rule parsed)
'''


def is_template_file(file_name: str) -> bool:
    return file_name.endswith(TEMPLATE_FILE_EXTENSION)


def extract_template_name(template_file_name_argument: str) -> str:
    """
    Extract name-without-extension from a template file name argument.

    Here, template file name argument may be of the form
    `«template_name».template`, `«template_name».`, or `«template_name»`.
    The path is normalised by resolving `./` and `../`.
    """
    template_file_name_argument = os.path.normpath(template_file_name_argument)
    template_name = re.sub(
        pattern=r'[.](template)? \Z',
        repl='',
        string=template_file_name_argument,
        flags=re.VERBOSE,
    )

    return template_name


def parse_command_line_arguments() -> argparse.Namespace:
    argument_parser = argparse.ArgumentParser(description=DESCRIPTION)
    argument_parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'{argument_parser.prog} version {__version__}',
    )
    argument_parser.add_argument(
        '-a', '--all',
        dest='all_mode_enabled',
        action='store_true',
        help=ALL_MODE_HELP,
    )
    argument_parser.add_argument(
        '-t', '--text',
        dest='text_mode_enabled',
        action='store_true',
        help=TEXT_MODE_HELP,
    )
    argument_parser.add_argument(
        '-x', '--verbose',
        dest='verbose_mode_enabled',
        action='store_true',
        help=VERBOSE_MODE_HELP,
    )
    argument_parser.add_argument(
        'template_file_name_arguments',
        default=[],
        help=TEMPLATE_FILE_NAME_HELP,
        metavar=f'file{TEMPLATE_FILE_EXTENSION}',
        nargs='*',
    )

    return argument_parser.parse_args()


def convert_template(template: str, template_file_name: str, text_mode_enabled: bool,
                     verbose_mode_enabled: bool) -> str:
    try:
        if text_mode_enabled:
            return template_to_text(template, verbose_mode_enabled)

        return template_text_to_html(template, verbose_mode_enabled)
    except RuleFormatError as rule_format_error:
        print(f'error: {template_file_name}: {rule_format_error.message}\n\n{RULE_SYNTAX_HELP}', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)


def generate_output_file(template_file_name_argument: str, text_mode_enabled: bool, verbose_mode_enabled: bool,
                         uses_command_line_argument: bool):
    template_name = extract_template_name(template_file_name_argument)
    template_file_name = f'{template_name}{TEMPLATE_FILE_EXTENSION}'
    try:
        with open(template_file_name, 'r', encoding='utf-8') as template_file:
            template = template_file.read()
    except FileNotFoundError as file_not_found_error:
        if uses_command_line_argument:
            print(
                f'error: argument `{template_file_name_argument}`: file `{template_file_name}` not found',
                file=sys.stderr,
            )
            sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)
        else:
            error_message = f'file `{template_file_name}` not found for `{template_file_name}` in template_file_names'
            raise FileNotFoundError(error_message) from file_not_found_error

    output = convert_template(template, template_file_name, text_mode_enabled, verbose_mode_enabled)

    output_extension = '.txt' if text_mode_enabled else '.html'
    output_file_name = f'{template_name}{output_extension}'
    try:
        with open(output_file_name, 'w', encoding='utf-8') as output_file:
            output_file.write(output)
        print(f'success: wrote to `{output_file_name}`')
    except IOError:
        print(f'error: cannot write to `{output_file_name}`', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)


def main():
    parsed_arguments = parse_command_line_arguments()
    template_file_name_arguments = parsed_arguments.template_file_name_arguments
    all_mode_enabled = parsed_arguments.all_mode_enabled
    text_mode_enabled = parsed_arguments.text_mode_enabled
    verbose_mode_enabled = parsed_arguments.verbose_mode_enabled

    if all_mode_enabled:
        if len(template_file_name_arguments) > 0:
            print('error: option -a (or --all) cannot be used with positional argument', file=sys.stderr)
            sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)

        template_file_names = [
            os.path.join(path, file_name)
            for path, _, file_names in os.walk(os.curdir)
            for file_name in file_names
            if is_template_file(file_name)
        ]
        for template_file_name in sorted(template_file_names):
            generate_output_file(template_file_name, text_mode_enabled, verbose_mode_enabled,
                                 uses_command_line_argument=False)

    else:
        for template_file_name_argument in template_file_name_arguments:
            generate_output_file(template_file_name_argument, text_mode_enabled, verbose_mode_enabled,
                                 uses_command_line_argument=True)


if __name__ == '__main__':
    main()
