"""
# SPDX Template: test_scanner.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `scanner.py`.
"""

import unittest

from spdxtemplate.scanner import TemplateSpan, compute_rule_matches, scan_template, wrap_rule


class TestScanner(unittest.TestCase):
    def test_compute_rule_matches(self):
        self.assertEqual(list(compute_rule_matches('')), [])
        self.assertEqual(list(compute_rule_matches('no rules < here >')), [])
        self.assertEqual(list(compute_rule_matches('<<>>')), [])
        self.assertEqual(
            [rule_match.group('rule_body') for rule_match in compute_rule_matches('a<<  var;name=x  >>b<<endOptional>>')],
            ['var;name=x', 'endOptional'],
        )
        self.assertEqual(
            [rule_match.group('rule_body') for rule_match in compute_rule_matches('<<var;original=<a>>>>')],
            ['var;original=<a'],
        )
        self.assertEqual(
            [rule_match.group('rule_body') for rule_match in compute_rule_matches('<<beginOptional;\nname=x\n>>')],
            ['beginOptional;\nname=x'],
        )

    def test_scan_template(self):
        self.assertEqual(list(scan_template('')), [])
        self.assertEqual(list(scan_template('plain')), [TemplateSpan('plain', False, 0, 5)])
        self.assertEqual(
            list(scan_template('a<<endOptional>><< beginOptional >>b')),
            [
                TemplateSpan('a', False, 0, 1),
                TemplateSpan('endOptional', True, 1, 16),
                TemplateSpan('beginOptional', True, 16, 35),
                TemplateSpan('b', False, 35, 36),
            ],
        )
        self.assertEqual(
            list(scan_template('<<var;name=x>>')),
            [TemplateSpan('var;name=x', True, 0, 14)],
        )

    def test_wrap_rule(self):
        self.assertEqual(wrap_rule('endOptional'), '<<endOptional>>')
        self.assertEqual(list(scan_template(wrap_rule('var;name=x'))), [TemplateSpan('var;name=x', True, 0, 14)])


if __name__ == '__main__':
    unittest.main()
