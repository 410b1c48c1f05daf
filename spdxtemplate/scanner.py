"""
# SPDX Template: scanner.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Template scanning.

A license template is free-form text containing rules of the form
````
<<«rule_body»>>
````
where whitespace around «rule_body» is not part of it.
The shortest possible «rule_body» is taken, so a rule ends at the first `>>` after it begins.
"""

import re
from typing import Iterable, NamedTuple

from spdxtemplate.constants import END_RULE, START_RULE

RULE_PATTERN_COMPILED = re.compile(
    pattern=rf'''
        {re.escape(START_RULE)}
        [\s]*
        (?P<rule_body> [\s\S]+? )
        [\s]*
        {re.escape(END_RULE)}
    ''',
    flags=re.VERBOSE,
)


class TemplateSpan(NamedTuple):
    """
    A span of a template, either literal text or the body of a rule.
    """
    content: str
    is_rule: bool
    start: int
    end: int


def compute_rule_matches(template: str) -> Iterable[re.Match]:
    return RULE_PATTERN_COMPILED.finditer(template)


def scan_template(template: str) -> Iterable['TemplateSpan']:
    """
    Split a template into literal text spans and rule spans, in order.

    Empty literal text spans (between adjacent rules, or at either end) are skipped.
    """
    end = 0
    for rule_match in compute_rule_matches(template):
        if rule_match.start() > end:
            yield TemplateSpan(template[end:rule_match.start()], False, end, rule_match.start())

        yield TemplateSpan(rule_match.group('rule_body'), True, rule_match.start(), rule_match.end())
        end = rule_match.end()

    if len(template) > end:
        yield TemplateSpan(template[end:], False, end, len(template))


def wrap_rule(rule_body: str) -> str:
    return f'{START_RULE}{rule_body}{END_RULE}'
