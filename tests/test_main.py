"""
Tests for the command line entry point.
"""

import io
import json
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import patch

import main


def run_cli(*argv):
    stdout, stderr = io.StringIO(), io.StringIO()
    with redirect_stdout(stdout), redirect_stderr(stderr):
        exit_code = main.main(list(argv))
    return exit_code, stdout.getvalue(), stderr.getvalue()


class TestMain(unittest.TestCase):
    """Test cases for main.main."""

    def test_standard_json(self):
        exit_code, out, _ = run_cli('--log-level', 'ERROR')

        self.assertEqual(exit_code, 0)
        tree = json.loads(out)
        self.assertEqual(len(tree), 34)
        self.assertEqual(tree[0]['children'][0]['code'], '110101')

    def test_well_formed_json(self):
        exit_code, out, _ = run_cli('--format', 'well-formed', '--log-level', 'ERROR')

        self.assertEqual(exit_code, 0)
        beijing = json.loads(out)[0]
        self.assertEqual(beijing['children'][0]['code'], '110100')
        self.assertEqual(beijing['children'][0]['name'], '市辖区')

    def test_summary_output(self):
        exit_code, out, _ = run_cli('--output-format', 'summary', '--log-level', 'ERROR')

        self.assertEqual(exit_code, 0)
        self.assertIn('173 nodes', out)
        self.assertIn('county: 138', out)

    def test_table_output(self):
        exit_code, out, _ = run_cli('--output-format', 'table', '--log-level', 'ERROR')

        self.assertEqual(exit_code, 0)
        self.assertIn('parent_code', out)
        self.assertIn('石家庄市', out)

    def test_blank_fallback_name_is_a_configuration_error(self):
        exit_code, _, err = run_cli('--fallback-name', ' ', '--log-level', 'ERROR')

        self.assertEqual(exit_code, 2)
        self.assertIn('Configuration Error', err)

    def test_unexpected_error_returns_one(self):
        with patch.object(main.FormattingEngine, 'run', side_effect=RuntimeError('disk on fire')):
            exit_code, out, err = run_cli('--log-level', 'ERROR')

        self.assertEqual(exit_code, 1)
        self.assertEqual(out, '')
        self.assertIn('Unexpected error: disk on fire', err)

    def test_unwritable_log_file_returns_one(self):
        exit_code, _, err = run_cli('--log-file', '/proc/nope/x.log', '--log-level', 'ERROR')

        self.assertEqual(exit_code, 1)
        self.assertIn('Unexpected error', err)

    def test_create_config_from_args(self):
        args = main.parse_arguments(['--format', 'well-formed', '--fallback-name', '其他', '--progress'])
        config = main.create_config_from_args(args)

        self.assertEqual(config.tree_format, 'well_formed')
        self.assertEqual(config.fallback_prefecture_name, '其他')
        self.assertTrue(config.show_progress)


if __name__ == '__main__':
    unittest.main()
