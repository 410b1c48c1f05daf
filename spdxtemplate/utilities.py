"""
# SPDX Template: utilities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Common utility functions.
"""

import re
from typing import Optional

from bs4 import BeautifulSoup, Comment

from spdxtemplate.constants import LINE_BREAK_MARKER, MAX_TABS, PIXELS_PER_TAB, SPACES_PER_TAB


def escape_html(text: str) -> str:
    """
    Escape text using the five predefined XML entities.

    Unlike attribute escaping elsewhere, existing entities are not preserved:
    `&amp;` becomes `&amp;amp;`.
    """
    text = re.sub(pattern='&', repl='&amp;', string=text)
    text = re.sub(pattern='<', repl='&lt;', string=text)
    text = re.sub(pattern='>', repl='&gt;', string=text)
    text = re.sub(pattern='"', repl='&quot;', string=text)
    text = re.sub(pattern="'", repl='&apos;', string=text)

    return text


def add_line_breaks(text: str) -> str:
    return re.sub(pattern='\n', repl='<br/>\n', string=text)


def escape_id_string(id_: str) -> str:
    """
    Escape a string so that it is a legal HTML `id` token.

    An id not starting with an ASCII letter is prefixed with `X`,
    and every character outside `[A-Za-z0-9_.-]` is replaced by an underscore.
    """
    if re.match(pattern='[A-Za-z]', string=id_) is None:
        id_ = f'X{id_}'

    return re.sub(pattern=r'[^A-Za-z0-9_.-]', repl='_', string=id_)


def compute_leading_space_count(line: str) -> int:
    return len(line) - len(line.lstrip(' '))


def build_paragraph_tag(line: str) -> str:
    """
    Build an opening paragraph tag, indented according to the leading spaces of its first line.

    Every `SPACES_PER_TAB` leading spaces count as one tab (at most `MAX_TABS`),
    and each tab count has a fixed left margin in pixels.
    """
    tab_count = compute_leading_space_count(line) // SPACES_PER_TAB
    if tab_count == 0:
        return '<p>'

    tab_count = min(tab_count, MAX_TABS)
    pixels = PIXELS_PER_TAB[tab_count - 1]

    return f'<p style="margin-left: {pixels}px;">'


def add_html_formatting(text: str, in_paragraph: bool = False) -> str:
    """
    Add `<br/>` line breaks and `<p>` paragraphs to (already escaped) text.

    A blank line is a paragraph boundary; any other newline is a line break.
    Trailing empty lines are dropped before formatting,
    but a trailing newline outside a paragraph still yields a final `<br/>`.
    """
    lines = text.split('\n')
    while len(lines) > 0 and lines[-1] == '':
        lines.pop()
    if len(lines) == 0:
        lines = ['']

    result = lines[0]
    index = 1
    while index < len(lines):
        if lines[index].strip() == '':
            if in_paragraph:
                result += '</p>'
            result += '\n'
            index += 1
            if index < len(lines):
                result += build_paragraph_tag(lines[index]) + lines[index]
                index += 1
            else:
                result += '<p>'
            in_paragraph = True
        else:
            result += '<br/>\n' + lines[index]
            index += 1

    if in_paragraph:
        result += '</p>'
    elif text.endswith('\n'):
        result += '<br/>\n'

    return result


def format_escape_html(text: str) -> str:
    """
    Escape and format plain (non-template) license text as HTML.
    """
    return add_html_formatting(escape_html(text))


def html_to_text(html_string: str) -> str:
    """
    Convert HTML to text, keeping a line break for each `<br>` and `<p>` tag.

    Whitespace in the HTML source (newlines included) is collapsed to single spaces,
    so only the tags determine where the lines of the text break.
    Comments, scripts and style sheets contribute no text.
    """
    soup = BeautifulSoup(html_string, 'html.parser')
    for comment in soup.find_all(string=lambda string: isinstance(string, Comment)):
        comment.extract()
    for element in soup.find_all(['script', 'style']):
        element.decompose()
    for line_break in soup.find_all('br'):
        line_break.replace_with(LINE_BREAK_MARKER)
    for paragraph in soup.find_all('p'):
        paragraph.insert_before(LINE_BREAK_MARKER)

    text = re.sub(pattern=r'[\s]+', repl=' ', string=soup.get_text())
    text = text.replace(LINE_BREAK_MARKER, '\n')
    text = re.sub(pattern=r'[ ]* \n [ ]*', repl='\n', string=text, flags=re.VERBOSE)

    return text.strip()


def is_blank(string: Optional[str]) -> bool:
    return string is None or string.strip() == ''


def none_to_empty_string(string: Optional[str]) -> str:
    if string is None:
        return ''

    return string
