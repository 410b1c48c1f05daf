"""
# SPDX Template: core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Core conversion logic.

A license template is parsed in a single left-to-right pass,
calling an output handler for each literal text span and each rule found.
For details on the syntax of rules, see `rules.py`;
for details on how rules are found within the template, see `scanner.py`.
"""

from typing import Optional

from spdxtemplate.constants import VERBOSE_MODE_DIVIDER_SYMBOL_COUNT
from spdxtemplate.exceptions import RuleFormatError
from spdxtemplate.handlers import FilterOutputHandler, HtmlOutputHandler, OutputHandler, TextOutputHandler
from spdxtemplate.rules import Rule, RuleKind, parse_rule
from spdxtemplate.scanner import scan_template
from spdxtemplate.utilities import is_blank


def print_event(event_name: str, payload: Optional[object]):
    print('-' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' {event_name}')
    if payload is not None:
        print(payload)


def dispatch_literal_text(output_handler: 'OutputHandler', text: Optional[str], verbose_mode_enabled: bool):
    if text is None or len(text) == 0:
        return

    if verbose_mode_enabled:
        print_event('TEXT', text)

    output_handler.literal_text(text)


def dispatch_begin_optional(output_handler: 'OutputHandler', rule: 'Rule', verbose_mode_enabled: bool):
    if verbose_mode_enabled:
        print_event('BEGIN_OPTIONAL', rule.name)

    output_handler.begin_optional(rule)


def dispatch_end_optional(output_handler: 'OutputHandler', rule: 'Rule', verbose_mode_enabled: bool):
    if verbose_mode_enabled:
        print_event('END_OPTIONAL', rule.name)

    output_handler.end_optional(rule)


def check_end_optional(pending_begin_rules: list['Rule'], end_rule: 'Rule'):
    """
    Ensure an end optional rule closes the innermost open optional region.

    Regions are matched by document order; if both rules are named, the names must agree.
    """
    if len(pending_begin_rules) == 0:
        raise RuleFormatError('End optional rule found without a matching begin optional rule')

    begin_rule = pending_begin_rules[-1]
    if is_blank(end_rule.name) or is_blank(begin_rule.name):
        return

    if end_rule.name.strip() != begin_rule.name.strip():
        raise RuleFormatError(
            f'End optional rule `{end_rule.name}` does not match begin optional rule `{begin_rule.name}`'
        )


def parse_template(template: str, output_handler: 'OutputHandler', verbose_mode_enabled: bool = False):
    """
    Parse a license template, calling the output handler for the text and rules found.

    An atomic optional rule is handed over as the start of an optional region,
    its original text, and the end of the region.
    Returns the result of the output handler.
    """
    pending_begin_rules: list['Rule'] = []

    for template_span in scan_template(template):
        if not template_span.is_rule:
            dispatch_literal_text(output_handler, template_span.content, verbose_mode_enabled)
            continue

        rule = parse_rule(template_span.content)
        kind = rule.kind

        if kind == RuleKind.VARIABLE:
            if verbose_mode_enabled:
                print_event('VARIABLE', rule)
            output_handler.variable_rule(rule)

        elif kind == RuleKind.OPTIONAL:
            dispatch_begin_optional(output_handler, rule, verbose_mode_enabled)
            dispatch_literal_text(output_handler, rule.original, verbose_mode_enabled)
            dispatch_end_optional(output_handler, rule, verbose_mode_enabled)

        elif kind == RuleKind.BEGIN_OPTIONAL:
            pending_begin_rules.append(rule)
            dispatch_begin_optional(output_handler, rule, verbose_mode_enabled)

        else:
            check_end_optional(pending_begin_rules, rule)
            pending_begin_rules.pop()
            dispatch_end_optional(output_handler, rule, verbose_mode_enabled)

    if len(pending_begin_rules) > 0:
        raise RuleFormatError('Missing EndOptional rule')

    return output_handler.result()


def template_to_text(template: str, verbose_mode_enabled: bool = False) -> str:
    """
    Convert a license template to the default text of the license.
    """
    return parse_template(template, TextOutputHandler(), verbose_mode_enabled)


def template_text_to_html(template: str, verbose_mode_enabled: bool = False) -> str:
    """
    Convert a license template to HTML highlighting its rules.
    """
    return parse_template(template, HtmlOutputHandler(), verbose_mode_enabled)


def template_to_simple_html(template: str, verbose_mode_enabled: bool = False) -> str:
    """
    Convert a license template to HTML where every rule is a `<div>` block.
    """
    return parse_template(template, HtmlOutputHandler(variable_tag_name='div'), verbose_mode_enabled)


def template_to_filtered_text(template: str, include_variable_text: bool = False,
                              verbose_mode_enabled: bool = False) -> list[str]:
    """
    Extract the text fragments of a license template outside of optional regions.
    """
    return parse_template(template, FilterOutputHandler(include_variable_text), verbose_mode_enabled)
