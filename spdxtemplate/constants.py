"""
# SPDX Template: constants.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Constants.
"""

GENERIC_ERROR_EXIT_CODE = 1
COMMAND_LINE_ERROR_EXIT_CODE = 2
VERBOSE_MODE_DIVIDER_SYMBOL_COUNT = 48

TEMPLATE_FILE_EXTENSION = '.template'

START_RULE = '<<'
END_RULE = '>>'

REPLACEABLE_LICENSE_TEXT_CLASS = 'replacable-license-text'
OPTIONAL_LICENSE_TEXT_CLASS = 'optional-license-text'

TYPE_KEYWORD = 'type'
NAME_KEYWORD = 'name'
ORIGINAL_KEYWORD = 'original'
MATCH_KEYWORD = 'match'
EXAMPLE_KEYWORD = 'example'
VALUE_SEPARATOR = '='

SPACES_PER_TAB = 5
MAX_TABS = 4
PIXELS_PER_TAB = (20, 40, 60, 70)
LINE_BREAK_MARKER = '\uE000'

RULE_SYNTAX_HELP = '''\
In SPDX license templates, a rule is written `<<«type»;«keyword»=«value»;...>>`, where
(1) «type» is one of `var`, `optional`, `beginOptional`, `endOptional` (case-insensitive),
    optionally written as `type=«type»`;
(2) «keyword» is one of `name`, `original`, `match`, `example`, each at most once;
(3) a semicolon inside a «value» is written `\\;`.
- Note for (2): in `original` and `example`, `\\n` and `\\t` stand for newline and tab.
- Note for (1): `var` rules require `name`, `original` and `match`;
  `optional` rules require `original`.
'''
