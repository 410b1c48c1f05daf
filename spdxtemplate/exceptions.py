"""
# SPDX Template: exceptions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Exception classes.
"""


class CommittedMutateException(Exception):
    pass


class RuleFormatError(Exception):
    """
    A license template rule is malformed.

    Raised while a rule is parsed or validated, and while a template is parsed.
    A malformed rule anywhere in a template aborts the parse.
    """
    _message: str

    def __init__(self, message: str):
        super().__init__(message)
        self._message = message

    @property
    def message(self) -> str:
        return self._message
