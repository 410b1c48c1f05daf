"""
# SPDX Template: handlers.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Output handlers for parsed license templates.
"""

import abc
from typing import Optional

from spdxtemplate.constants import OPTIONAL_LICENSE_TEXT_CLASS, REPLACEABLE_LICENSE_TEXT_CLASS
from spdxtemplate.rules import Rule
from spdxtemplate.utilities import (
    add_line_breaks,
    escape_html,
    escape_id_string,
    is_blank,
    none_to_empty_string,
)


class OutputHandler(abc.ABC):
    """
    Base class for an output handler.

    While a template is parsed, the handler is called (in template order) for
    - each run of literal text outside of rules
    - each variable rule
    - each start and end of an optional region
    A handler is single use; `result()` may be called at any time, any number of times.
    """

    @abc.abstractmethod
    def literal_text(self, text: str):
        raise NotImplementedError

    @abc.abstractmethod
    def variable_rule(self, rule: 'Rule'):
        raise NotImplementedError

    @abc.abstractmethod
    def begin_optional(self, rule: 'Rule'):
        raise NotImplementedError

    @abc.abstractmethod
    def end_optional(self, rule: 'Rule'):
        raise NotImplementedError

    @abc.abstractmethod
    def result(self):
        """
        Return the output accumulated so far.
        """
        raise NotImplementedError


class TextOutputHandler(OutputHandler):
    """
    Output handler producing the default text of a license.

    Variable rules are replaced by their original text,
    and optional regions are kept without any marking.
    """
    _text_fragments: list[str]

    def __init__(self):
        self._text_fragments = []

    def literal_text(self, text: str):
        self._text_fragments.append(text)

    def variable_rule(self, rule: 'Rule'):
        self._text_fragments.append(none_to_empty_string(rule.original))

    def begin_optional(self, rule: 'Rule'):
        pass

    def end_optional(self, rule: 'Rule'):
        pass

    def result(self) -> str:
        return ''.join(self._text_fragments)


def build_id_attribute_sequence(id_: Optional[str]) -> str:
    if is_blank(id_):
        return ''

    return f' id="{escape_id_string(id_)}"'


def format_replaceable_html(text: Optional[str], id_: Optional[str], tag_name: str = 'span') -> str:
    id_attribute_sequence = build_id_attribute_sequence(id_)
    escaped_text = add_line_breaks(escape_html(none_to_empty_string(text)))

    return (
        f'\n<{tag_name}{id_attribute_sequence} class="{REPLACEABLE_LICENSE_TEXT_CLASS}">'
        f'{escaped_text}'
        f'</{tag_name}>\n'
    )


def format_start_optional_html(id_: Optional[str]) -> str:
    id_attribute_sequence = build_id_attribute_sequence(id_)

    return f'\n<div{id_attribute_sequence} class="{OPTIONAL_LICENSE_TEXT_CLASS}">\n'


def format_end_optional_html() -> str:
    return '</div>\n'


class HtmlOutputHandler(OutputHandler):
    """
    Output handler producing HTML for a license.

    Literal text is escaped, with `<br/>` before each newline.
    A variable rule becomes an element (`<span>` by default) of class `replacable-license-text`,
    and an optional region becomes a `<div>` of class `optional-license-text`.
    Rule names become `id` attributes (omitted for blank names).
    """
    _html_fragments: list[str]
    _variable_tag_name: str

    def __init__(self, variable_tag_name: str = 'span'):
        self._html_fragments = []
        self._variable_tag_name = variable_tag_name

    @property
    def variable_tag_name(self) -> str:
        return self._variable_tag_name

    def literal_text(self, text: str):
        self._html_fragments.append(add_line_breaks(escape_html(text)))

    def variable_rule(self, rule: 'Rule'):
        self._html_fragments.append(format_replaceable_html(rule.original, rule.name, self._variable_tag_name))

    def begin_optional(self, rule: 'Rule'):
        self._html_fragments.append(format_start_optional_html(rule.name))

    def end_optional(self, rule: 'Rule'):
        self._html_fragments.append(format_end_optional_html())

    def result(self) -> str:
        return ''.join(self._html_fragments)


class FilterOutputHandler(OutputHandler):
    """
    Output handler collecting the text fragments that must be present in any matching license.

    Text within optional regions is dropped.
    Variable rules either split the text into separate fragments,
    or (if `include_variable_text` is set) contribute their original text.
    """
    _include_variable_text: bool
    _filtered_text: list[str]
    _current_fragments: list[str]
    _optional_depth: int

    def __init__(self, include_variable_text: bool = False):
        self._include_variable_text = include_variable_text
        self._filtered_text = []
        self._current_fragments = []
        self._optional_depth = 0

    @property
    def include_variable_text(self) -> bool:
        return self._include_variable_text

    def _flush(self):
        current_text = ''.join(self._current_fragments)
        if len(current_text) > 0:
            self._filtered_text.append(current_text)
        self._current_fragments = []

    def literal_text(self, text: str):
        if self._optional_depth <= 0:
            self._current_fragments.append(text)

    def variable_rule(self, rule: 'Rule'):
        if self._include_variable_text and self._optional_depth <= 0:
            self._current_fragments.append(none_to_empty_string(rule.original))
        else:
            self._flush()

    def begin_optional(self, rule: 'Rule'):
        self._optional_depth += 1

    def end_optional(self, rule: 'Rule'):
        self._optional_depth -= 1
        if self._optional_depth == 0:
            self._flush()

    def result(self) -> list[str]:
        filtered_text = list(self._filtered_text)
        current_text = ''.join(self._current_fragments)
        if len(current_text) > 0:
            filtered_text.append(current_text)

        return filtered_text
