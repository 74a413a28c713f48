"""
Tests for the docbundle command group.
"""

from click.testing import CliRunner

from cli import main


class TestMainGroup:

    def test_lists_subcommands(self):
        result = CliRunner().invoke(main, ['--help'])
        assert result.exit_code == 0
        for name in ('split', 'select', 'inspect', 'pack'):
            assert name in result.output

    def test_help_lists_environment_variables(self):
        result = CliRunner().invoke(main, ['--help'])
        assert result.exit_code == 0
        assert "DOCBUNDLE_DELIMITER" in result.output
        assert "DOCBUNDLE_OUTPUT_DIR" in result.output

    def test_version(self):
        result = CliRunner().invoke(main, ['--version'])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_registered_commands(self):
        assert set(main.commands) == {'split', 'select', 'inspect', 'pack'}
