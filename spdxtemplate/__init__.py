"""
# SPDX Template: __init__.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Parse and render SPDX license templates.
"""

from spdxtemplate._version import __version__
from spdxtemplate.core import (
    parse_template,
    template_text_to_html,
    template_to_filtered_text,
    template_to_simple_html,
    template_to_text,
)
from spdxtemplate.exceptions import RuleFormatError
from spdxtemplate.handlers import FilterOutputHandler, HtmlOutputHandler, OutputHandler, TextOutputHandler
from spdxtemplate.rules import Rule, RuleDraft, RuleKind, parse_rule
