"""
# SPDX Template: test_rules.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `rules.py`.
"""

import unittest

from spdxtemplate.exceptions import CommittedMutateException, RuleFormatError
from spdxtemplate.rules import (
    Rule,
    RuleDraft,
    RuleKind,
    escape_value,
    parse_rule,
    split_rule_parts,
    unescape_value,
)

PARSEABLE_RULE = (
    r'var;original=Copyright (c) <year> <owner>\nAll rights reserved.;'
    r'match=Copyright \(c\) .+All rights reserved.;'
    r'name=copyright;'
    r'example=Copyright (C) 2013 John Doe\nAll rights reserved.'
    '\n'
)


class TestRules(unittest.TestCase):
    def test_rule_kind_from_type_string(self):
        self.assertEqual(RuleKind.from_type_string('var'), RuleKind.VARIABLE)
        self.assertEqual(RuleKind.from_type_string('VAR'), RuleKind.VARIABLE)
        self.assertEqual(RuleKind.from_type_string('Required'), RuleKind.VARIABLE)
        self.assertEqual(RuleKind.from_type_string('optional'), RuleKind.OPTIONAL)
        self.assertEqual(RuleKind.from_type_string('beginOptional'), RuleKind.BEGIN_OPTIONAL)
        self.assertEqual(RuleKind.from_type_string('BEGINOPTIONAL'), RuleKind.BEGIN_OPTIONAL)
        self.assertEqual(RuleKind.from_type_string('endoptional'), RuleKind.END_OPTIONAL)

        with self.assertRaises(RuleFormatError) as context:
            RuleKind.from_type_string('alt')
        self.assertEqual(context.exception.message, 'Invalid rule type: alt')
        self.assertIsNone(context.exception.__cause__)
        self.assertTrue(context.exception.__suppress_context__)

    def test_unescape_value(self):
        self.assertIsNone(unescape_value(None))
        self.assertEqual(unescape_value(''), '')
        self.assertEqual(unescape_value(r'a\nb\tc'), 'a\nb\tc')
        self.assertEqual(unescape_value(r'a\rb\;c\\d'), r'a\rb\;c\\d')

    def test_escape_value(self):
        self.assertEqual(escape_value('a\nb\tc;d', True), r'a\nb\tc\;d')
        self.assertEqual(escape_value('a\nb\tc;d', False), 'a\nb\tc\\;d')

    def test_split_rule_parts(self):
        self.assertEqual(split_rule_parts(''), [''])
        self.assertEqual(split_rule_parts('endOptional'), ['endOptional'])
        self.assertEqual(split_rule_parts('var;name=x;'), ['var', 'name=x', ''])
        self.assertEqual(split_rule_parts(r'var;original=a\;b;name=x'), ['var', r'original=a\;b', 'name=x'])
        self.assertEqual(split_rule_parts('var;;name=x'), ['var', ';name=x'])
        self.assertEqual(split_rule_parts(';name=x'), [';name=x'])

    def test_rule_construction(self):
        rule = Rule('testRule', RuleKind.VARIABLE, r'Original \ntext', 'match text', r'Example \n text')
        self.assertEqual(rule.name, 'testRule')
        self.assertEqual(rule.kind, RuleKind.VARIABLE)
        self.assertEqual(rule.original, 'Original \ntext')
        self.assertEqual(rule.match, 'match text')
        self.assertEqual(rule.example, 'Example \n text')

        rule = Rule('optionalRule', RuleKind.BEGIN_OPTIONAL)
        self.assertEqual(rule.name, 'optionalRule')
        self.assertIsNone(rule.original)
        self.assertIsNone(rule.match)
        self.assertIsNone(rule.example)

        self.assertEqual(Rule(None, RuleKind.END_OPTIONAL).kind, RuleKind.END_OPTIONAL)

    def test_rule_construction_validation(self):
        with self.assertRaises(RuleFormatError) as context:
            Rule('name', None, 'original', 'match')
        self.assertEqual(context.exception.message, 'Rule type can not be null.')

        with self.assertRaises(RuleFormatError) as context:
            Rule(None, RuleKind.VARIABLE, 'original', 'match')
        self.assertEqual(context.exception.message, 'Rule name can not be null for a variable rule.')

        with self.assertRaises(RuleFormatError) as context:
            Rule('name', RuleKind.VARIABLE, None, 'match')
        self.assertEqual(context.exception.message, 'Rule original text can not be null.')

        with self.assertRaises(RuleFormatError) as context:
            Rule('name', RuleKind.VARIABLE, 'original', None)
        self.assertEqual(context.exception.message, 'Rule match regular expression can not be null.')

        with self.assertRaises(RuleFormatError):
            Rule('name', RuleKind.OPTIONAL)

    def test_rule_str(self):
        self.assertEqual(str(Rule('copyright', RuleKind.VARIABLE, 'c', '.+')), 'var: copyright')
        self.assertEqual(str(Rule(None, RuleKind.OPTIONAL, 'text')), 'optional: ')
        self.assertEqual(str(Rule('opt', RuleKind.BEGIN_OPTIONAL)), 'beginOptional')
        self.assertEqual(str(Rule(None, RuleKind.END_OPTIONAL)), 'endOptional')

    def test_rule_equality(self):
        self.assertEqual(Rule('x', RuleKind.VARIABLE, 'a', 'b'), Rule('x', RuleKind.VARIABLE, 'a', 'b'))
        self.assertNotEqual(Rule('x', RuleKind.VARIABLE, 'a', 'b'), Rule('x', RuleKind.VARIABLE, 'a', 'c'))
        self.assertNotEqual(Rule('x', RuleKind.BEGIN_OPTIONAL), Rule('x', RuleKind.END_OPTIONAL))
        self.assertEqual(len({Rule('x', RuleKind.BEGIN_OPTIONAL), Rule('x', RuleKind.BEGIN_OPTIONAL)}), 1)

    def test_rule_draft(self):
        rule_draft = RuleDraft()
        rule_draft.kind = RuleKind.VARIABLE
        rule_draft.name = 'year'
        rule_draft.original = r'<year>\t'
        rule_draft.match = '[0-9]{4}'
        rule = rule_draft.build()
        self.assertEqual(rule, Rule('year', RuleKind.VARIABLE, '<year>\t', '[0-9]{4}'))

        with self.assertRaises(CommittedMutateException):
            rule_draft.name = 'month'
        with self.assertRaises(CommittedMutateException):
            rule_draft.example = '2013'

        rule_draft = RuleDraft()
        rule_draft.name = 'year'
        with self.assertRaises(RuleFormatError):
            rule_draft.build()

    def test_parse_rule(self):
        rule = parse_rule(PARSEABLE_RULE)
        self.assertEqual(rule.kind, RuleKind.VARIABLE)
        self.assertEqual(rule.name, 'copyright')
        self.assertEqual(rule.original, 'Copyright (c) <year> <owner>\nAll rights reserved.')
        self.assertEqual(rule.match, r'Copyright \(c\) .+All rights reserved.')
        self.assertEqual(rule.example, 'Copyright (C) 2013 John Doe\nAll rights reserved.')

        rule = parse_rule('beginOptional;name=optionalName')
        self.assertEqual(rule.kind, RuleKind.BEGIN_OPTIONAL)
        self.assertEqual(rule.name, 'optionalName')

        rule = parse_rule('endOptional')
        self.assertEqual(rule.kind, RuleKind.END_OPTIONAL)
        self.assertIsNone(rule.name)

        rule = parse_rule('  optional ; original = Some\\nText ; ')
        self.assertEqual(rule.kind, RuleKind.OPTIONAL)
        self.assertEqual(rule.original, 'Some\nText')

    def test_parse_rule_quoted_values(self):
        rule = parse_rule('var;name="copyright";original="Copyright (c) <year>";match=".+"')
        self.assertEqual(rule, Rule('copyright', RuleKind.VARIABLE, 'Copyright (c) <year>', '.+'))

        rule = parse_rule('type="beginOptional"; name = "opt" ')
        self.assertEqual(rule, Rule('opt', RuleKind.BEGIN_OPTIONAL))

        rule = parse_rule('var;name="x;original=""quoted"";match=.+"')
        self.assertEqual(rule.name, 'x')
        self.assertEqual(rule.original, '"quoted"')
        self.assertEqual(rule.match, '.+')

    def test_parse_rule_type_keyword(self):
        rule = parse_rule('name=x;type=VAR;original=o;match=m')
        self.assertEqual(rule, Rule('x', RuleKind.VARIABLE, 'o', 'm'))

        rule = parse_rule('type = beginOptional; name = opt')
        self.assertEqual(rule, Rule('opt', RuleKind.BEGIN_OPTIONAL))

        with self.assertRaises(RuleFormatError) as context:
            parse_rule('name=x;original=o;match=m')
        self.assertEqual(context.exception.message, 'Rule type can not be null.')

    def test_parse_rule_escaped_semicolon(self):
        rule = parse_rule(r'var;name=x;original=a\;b;match=.+')
        self.assertEqual(rule.original, r'a\;b')

        with self.assertRaises(RuleFormatError) as context:
            parse_rule('var;name=x;original=o;;match=.+')
        self.assertEqual(context.exception.message, 'Unknown rule keyword: ;match=.+')

    def test_parse_rule_errors(self):
        with self.assertRaises(RuleFormatError) as context:
            parse_rule('var;foo=bar')
        self.assertEqual(context.exception.message, 'Unknown rule keyword: foo=bar')

        with self.assertRaises(RuleFormatError) as context:
            parse_rule('notAType;name=x')
        self.assertEqual(context.exception.message, 'Invalid rule type: notAType')

        with self.assertRaises(RuleFormatError) as context:
            parse_rule('')
        self.assertEqual(context.exception.message, 'Invalid rule type: ')

        with self.assertRaises(RuleFormatError) as context:
            parse_rule('var;name x;original=o;match=m')
        self.assertEqual(context.exception.message, "Missing '=' for name")

        with self.assertRaises(RuleFormatError) as context:
            parse_rule('var;name=x;name=y;original=o;match=m')
        self.assertEqual(context.exception.message, 'Duplicate rule keyword: name')

        with self.assertRaises(RuleFormatError) as context:
            parse_rule('var;type=var;name=x;original=o;match=m')
        self.assertEqual(context.exception.message, 'Duplicate rule keyword: type')

        with self.assertRaises(RuleFormatError) as context:
            parse_rule('var;name=x;original=o')
        self.assertEqual(context.exception.message, 'Rule match regular expression can not be null.')

        with self.assertRaises(RuleFormatError):
            parse_rule('var;name=x; ;original=o;match=m')

    def test_to_rule_string(self):
        rule = Rule('copyright', RuleKind.VARIABLE, 'Copyright\n\t<owner>', r'Copyright .+', 'Copyright\tJane')
        self.assertEqual(
            rule.to_rule_string(),
            r'var;name=copyright;original=Copyright\n\t<owner>;match=Copyright .+;example=Copyright\tJane',
        )
        self.assertEqual(parse_rule(rule.to_rule_string()), rule)

        self.assertEqual(Rule('opt', RuleKind.BEGIN_OPTIONAL).to_rule_string(), 'beginOptional;name=opt')
        self.assertEqual(Rule(None, RuleKind.END_OPTIONAL).to_rule_string(), 'endOptional')
        self.assertEqual(Rule(None, RuleKind.OPTIONAL, 'x;y').to_rule_string(), r'optional;original=x\;y')

        for rule in [
            Rule('opt', RuleKind.BEGIN_OPTIONAL),
            Rule(None, RuleKind.END_OPTIONAL),
            Rule('o', RuleKind.OPTIONAL, 'Some optional\ntext.'),
            parse_rule(PARSEABLE_RULE),
            Rule('n', RuleKind.VARIABLE, 'a\\b', '[0-9]\\d'),
        ]:
            self.assertEqual(parse_rule(rule.to_rule_string()), rule)

    def test_to_rule_string_trailing_backslash(self):
        with self.assertRaises(RuleFormatError) as context:
            Rule('n', RuleKind.VARIABLE, 'a\\', '.+').to_rule_string()
        self.assertEqual(context.exception.message, 'Rule original can not end with a backslash: a\\')

        with self.assertRaises(RuleFormatError):
            Rule('opt\\', RuleKind.BEGIN_OPTIONAL).to_rule_string()


if __name__ == '__main__':
    unittest.main()
