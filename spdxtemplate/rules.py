"""
# SPDX Template: rules.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

License template rules.

A rule body is parsed as
````
«type» ; «keyword»=«value» ; [...]
````
where «type» may also be written as `type=«type»`,
and «keyword» is one of `name`, `original`, `match`, `example`.
Parts are separated by a semicolon preceded by a character other than a backslash,
so that `\\;` may be used within a «value».
"""

import enum
import re
from typing import Iterable, Optional

from spdxtemplate.constants import (
    EXAMPLE_KEYWORD,
    MATCH_KEYWORD,
    NAME_KEYWORD,
    ORIGINAL_KEYWORD,
    TYPE_KEYWORD,
    VALUE_SEPARATOR,
)
from spdxtemplate.exceptions import CommittedMutateException, RuleFormatError
from spdxtemplate.utilities import none_to_empty_string

RULE_KEYWORDS = (
    EXAMPLE_KEYWORD,
    NAME_KEYWORD,
    ORIGINAL_KEYWORD,
    MATCH_KEYWORD,
    TYPE_KEYWORD,
)


class RuleKind(enum.Enum):
    """
    Kind of a license template rule.

    `OPTIONAL` is an atomic optional rule carrying its own `original` text,
    whereas `BEGIN_OPTIONAL` and `END_OPTIONAL` delimit an optional region of the template.
    The value of each member is its canonical type string.
    """
    VARIABLE = 'var'
    OPTIONAL = 'optional'
    BEGIN_OPTIONAL = 'beginOptional'
    END_OPTIONAL = 'endOptional'

    @staticmethod
    def from_type_string(type_string: str) -> 'RuleKind':
        try:
            return _KIND_FROM_NORMALISED_TYPE_STRING[type_string.lower()]
        except KeyError:
            raise RuleFormatError(f'Invalid rule type: {type_string}') from None


_KIND_FROM_NORMALISED_TYPE_STRING = {
    'var': RuleKind.VARIABLE,
    'variable': RuleKind.VARIABLE,
    'required': RuleKind.VARIABLE,
    'optional': RuleKind.OPTIONAL,
    'beginoptional': RuleKind.BEGIN_OPTIONAL,
    'begin_optional': RuleKind.BEGIN_OPTIONAL,
    'endoptional': RuleKind.END_OPTIONAL,
    'end_optional': RuleKind.END_OPTIONAL,
}


def unescape_value(value: Optional[str]) -> Optional[str]:
    """
    Interpret `\\n` as newline and `\\t` as tab.

    Other backslash sequences are left as they are.
    """
    if value is None:
        return None

    value = value.replace('\\n', '\n')
    value = value.replace('\\t', '\t')

    return value


def escape_value(value: str, escapes_whitespace: bool) -> str:
    value = value.replace(';', '\\;')
    if escapes_whitespace:
        value = value.replace('\n', '\\n')
        value = value.replace('\t', '\\t')

    return value


class Rule:
    """
    A parsed license template rule.

    - «kind»: see `RuleKind`
    - «name»: used for the HTML `id` of the rendered region (mandatory for variable rules)
    - «original»: default text (mandatory for variable and optional rules)
    - «match»: regular expression for acceptable substitutes (mandatory for variable rules)
    - «example»: example of an acceptable substitute

    Rules are immutable; use `RuleDraft` to assemble one field at a time.
    """
    _kind: 'RuleKind'
    _name: Optional[str]
    _original: Optional[str]
    _match: Optional[str]
    _example: Optional[str]

    def __init__(self, name: Optional[str], kind: Optional['RuleKind'],
                 original: Optional[str] = None, match: Optional[str] = None, example: Optional[str] = None):
        Rule._validate(name, kind, original, match)

        self._kind = kind
        self._name = name
        self._original = unescape_value(original)
        self._match = match
        self._example = unescape_value(example)

    @staticmethod
    def _validate(name: Optional[str], kind: Optional['RuleKind'], original: Optional[str], match: Optional[str]):
        if kind is None:
            raise RuleFormatError('Rule type can not be null.')

        if kind == RuleKind.VARIABLE and name is None:
            raise RuleFormatError('Rule name can not be null for a variable rule.')

        if kind in (RuleKind.VARIABLE, RuleKind.OPTIONAL) and original is None:
            raise RuleFormatError('Rule original text can not be null.')

        if kind == RuleKind.VARIABLE and match is None:
            raise RuleFormatError('Rule match regular expression can not be null.')

    @property
    def kind(self) -> 'RuleKind':
        return self._kind

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def original(self) -> Optional[str]:
        return self._original

    @property
    def match(self) -> Optional[str]:
        return self._match

    @property
    def example(self) -> Optional[str]:
        return self._example

    def _fields(self) -> tuple:
        return self._kind, self._name, self._original, self._match, self._example

    def __eq__(self, other) -> bool:
        if not isinstance(other, Rule):
            return NotImplemented

        return self._fields() == other._fields()

    def __hash__(self) -> int:
        return hash(self._fields())

    def __repr__(self) -> str:
        return (
            f'Rule(name={self._name!r}, kind={self._kind}, '
            f'original={self._original!r}, match={self._match!r}, example={self._example!r})'
        )

    def __str__(self) -> str:
        if self._kind in (RuleKind.VARIABLE, RuleKind.OPTIONAL):
            return f'{self._kind.value}: {none_to_empty_string(self._name)}'

        return self._kind.value

    def to_rule_string(self) -> str:
        """
        Serialise to a rule body, omitting absent fields.

        A semicolon within a value is written as `\\;`, which the parser keeps as is.
        A value ending in a backslash cannot be written, since the backslash would escape the separator.
        """
        rule_parts = [self._kind.value]
        for keyword, value, escapes_whitespace in [
            (NAME_KEYWORD, self._name, False),
            (ORIGINAL_KEYWORD, self._original, True),
            (MATCH_KEYWORD, self._match, False),
            (EXAMPLE_KEYWORD, self._example, True),
        ]:
            if value is None:
                continue
            if value.endswith('\\'):
                raise RuleFormatError(f'Rule {keyword} can not end with a backslash: {value}')

            rule_parts.append(f'{keyword}{VALUE_SEPARATOR}{escape_value(value, escapes_whitespace)}')

        return ';'.join(rule_parts)


class RuleDraft:
    """
    Builder for a `Rule`.

    Fields are set one at a time (in any order) and validated once by `build()`.
    A draft cannot be altered after it has been built.
    """
    _is_built: bool
    _kind: Optional['RuleKind']
    _name: Optional[str]
    _original: Optional[str]
    _match: Optional[str]
    _example: Optional[str]

    def __init__(self):
        self._is_built = False
        self._kind = None
        self._name = None
        self._original = None
        self._match = None
        self._example = None

    @property
    def kind(self) -> Optional['RuleKind']:
        return self._kind

    @kind.setter
    def kind(self, value: 'RuleKind'):
        if self._is_built:
            raise CommittedMutateException('error: cannot set `kind` after `build()`')

        self._kind = value

    @property
    def name(self) -> Optional[str]:
        return self._name

    @name.setter
    def name(self, value: str):
        if self._is_built:
            raise CommittedMutateException('error: cannot set `name` after `build()`')

        self._name = value

    @property
    def original(self) -> Optional[str]:
        return self._original

    @original.setter
    def original(self, value: str):
        if self._is_built:
            raise CommittedMutateException('error: cannot set `original` after `build()`')

        self._original = value

    @property
    def match(self) -> Optional[str]:
        return self._match

    @match.setter
    def match(self, value: str):
        if self._is_built:
            raise CommittedMutateException('error: cannot set `match` after `build()`')

        self._match = value

    @property
    def example(self) -> Optional[str]:
        return self._example

    @example.setter
    def example(self, value: str):
        if self._is_built:
            raise CommittedMutateException('error: cannot set `example` after `build()`')

        self._example = value

    def build(self) -> 'Rule':
        rule = Rule(self._name, self._kind, self._original, self._match, self._example)
        self._is_built = True

        return rule


def compute_separator_matches(rule_body: str) -> Iterable[re.Match]:
    return re.finditer(
        pattern=r'[^\\] ;',
        string=rule_body,
        flags=re.VERBOSE,
    )


def split_rule_parts(rule_body: str) -> list[str]:
    """
    Split a rule body into its (untrimmed) parts.

    A separator is a semicolon preceded by a character other than a backslash.
    That character belongs to the part before the separator.
    Consequently a semicolon cannot be escaped at the very start of a part,
    and `;;` leaves the second semicolon at the start of the next part.
    """
    rule_parts = []
    start = 0
    for separator_match in compute_separator_matches(rule_body):
        rule_parts.append(rule_body[start:separator_match.start() + 1])
        start = separator_match.end()
    rule_parts.append(rule_body[start:])

    return rule_parts


def is_keyword_part(rule_part: str) -> bool:
    return re.match(
        pattern=rf'(?: {"|".join(RULE_KEYWORDS)} ) [\s]* {VALUE_SEPARATOR}',
        string=rule_part,
        flags=re.VERBOSE,
    ) is not None


def extract_keyword(rule_part: str) -> str:
    for keyword in RULE_KEYWORDS:
        if rule_part.startswith(keyword):
            return keyword

    raise RuleFormatError(f'Unknown rule keyword: {rule_part}')


def extract_value(rule_part: str, keyword: str) -> str:
    """
    Extract the value of a keyword part, dropping one leading and one trailing double quote.

    The quotes are dropped independently, so `name="x` gives `x` too.
    """
    value = rule_part[len(keyword):].strip()
    if not value.startswith(VALUE_SEPARATOR):
        raise RuleFormatError(f"Missing '{VALUE_SEPARATOR}' for {keyword}")

    value = value[len(VALUE_SEPARATOR):].strip()
    if value.startswith('"'):
        value = value[1:]
    if value.endswith('"'):
        value = value[:-1]

    return value


def stage_rule_part(rule_draft: 'RuleDraft', rule_part: str, staged_keywords: set[str]):
    keyword = extract_keyword(rule_part)
    if keyword in staged_keywords:
        raise RuleFormatError(f'Duplicate rule keyword: {keyword}')

    value = extract_value(rule_part, keyword)
    staged_keywords.add(keyword)

    if keyword == TYPE_KEYWORD:
        rule_draft.kind = RuleKind.from_type_string(value)
    elif keyword == NAME_KEYWORD:
        rule_draft.name = value
    elif keyword == ORIGINAL_KEYWORD:
        rule_draft.original = value
    elif keyword == MATCH_KEYWORD:
        rule_draft.match = value
    else:
        rule_draft.example = value


def parse_rule(rule_body: str) -> 'Rule':
    """
    Parse a rule body (the content between `<<` and `>>`) into a rule.

    The first part is the rule type, unless it is itself a keyword part.
    A trailing empty part (e.g. from a trailing separator) is ignored,
    but any other empty part is an unknown keyword.
    """
    rule_parts = [rule_part.strip() for rule_part in split_rule_parts(rule_body)]
    if len(rule_parts) > 1 and rule_parts[-1] == '':
        rule_parts.pop()

    rule_draft = RuleDraft()
    staged_keywords: set[str] = set()

    first_part, *keyword_parts = rule_parts
    if is_keyword_part(first_part):
        keyword_parts.insert(0, first_part)
    else:
        rule_draft.kind = RuleKind.from_type_string(first_part)
        staged_keywords.add(TYPE_KEYWORD)

    for rule_part in keyword_parts:
        stage_rule_part(rule_draft, rule_part, staged_keywords)

    return rule_draft.build()
