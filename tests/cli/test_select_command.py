"""
Unit Tests for Select Subcommand

Covers policy handling, stdout and file output, and the exit code for
each failure category.
"""

import json

from click.testing import CliRunner

from cli import main
from cli.help_texts import ExitCodes


REVISED = "# Reactive Streams, Revisited\n\nRevised draft.\n"
ORIGINAL = "# Reactive Streams\n\nOriginal draft.\n"


class TestSelectCommand:
    """Selecting a variant from a bundle file."""

    def test_help(self):
        result = CliRunner().invoke(main, ['select', '--help'])
        assert result.exit_code == 0
        assert "--policy" in result.output
        assert "index(N)" in result.output

    def test_default_policy_is_last(self, bundle_file, sep):
        result = CliRunner().invoke(main, ['select', '-i', str(bundle_file), '-d', sep])
        assert result.exit_code == 0
        assert result.output == REVISED

    def test_first(self, bundle_file, sep):
        result = CliRunner().invoke(main, ['select', '-i', str(bundle_file), '-d', sep, '-p', 'first'])
        assert result.exit_code == 0
        assert result.output == ORIGINAL

    def test_index(self, bundle_file, sep):
        result = CliRunner().invoke(main, ['select', '-i', str(bundle_file), '-d', sep, '-p', 'index(0)'])
        assert result.exit_code == 0
        assert result.output == ORIGINAL

    def test_delimiter_from_environment(self, bundle_file, sep, monkeypatch):
        monkeypatch.setenv("DOCBUNDLE_DELIMITER", sep)
        result = CliRunner().invoke(main, ['select', '-i', str(bundle_file), '-p', 'first'])
        assert result.exit_code == 0
        assert result.output == ORIGINAL

    def test_policy_from_config_file(self, bundle_file, sep, tmp_path):
        config = tmp_path / "docbundle.yaml"
        config.write_text(f"delimiter: '{sep}'\npolicy: first\n", encoding="utf-8")
        result = CliRunner().invoke(main, ['select', '-i', str(bundle_file), '--config', str(config)])
        assert result.exit_code == 0
        assert result.output == ORIGINAL

    def test_stdin(self, sep):
        result = CliRunner().invoke(
            main, ['select', '-i', '-', '-d', sep, '-p', 'first'],
            input=f"alpha{sep}beta",
        )
        assert result.exit_code == 0
        assert result.output == "alpha"

    def test_stdin_crlf_preserved(self, sep):
        result = CliRunner().invoke(
            main, ['select', '-i', '-', '-d', sep],
            input=f"old\r\n{sep}new\r\nline\r\n".encode("utf-8"),
        )
        assert result.exit_code == 0
        assert result.stdout_bytes == b"new\r\nline\r\n"

    def test_stdin_invalid_utf8(self, sep):
        result = CliRunner().invoke(main, ['select', '-i', '-', '-d', sep], input=b"\xff\xfe")
        assert result.exit_code == ExitCodes.FILE_NOT_FOUND
        assert "not valid UTF-8" in result.output

    def test_ansi_sequences_preserved(self, sep):
        result = CliRunner().invoke(
            main, ['select', '-i', '-', '-d', sep],
            input=f"a{sep}\x1b[1mbold\x1b[0m\n".encode("utf-8"),
        )
        assert result.exit_code == 0
        assert result.stdout_bytes == b"\x1b[1mbold\x1b[0m\n"

    def test_sidecar_requires_output(self, bundle_file, sep):
        result = CliRunner().invoke(main, ['select', '-i', str(bundle_file), '-d', sep, '--sidecar'])
        assert result.exit_code == ExitCodes.USAGE_ERROR
        assert "--sidecar requires --output" in result.output

    def test_debug_log_reports_environment(self, bundle_file, sep):
        result = CliRunner().invoke(main, ['select', '-i', str(bundle_file), '-d', sep, '--log-level', 'DEBUG'])
        assert result.exit_code == 0
        assert "DOCBUNDLE_DELIMITER is not set" in result.output

    def test_no_delimiter_in_file(self, tmp_path, sep):
        plain = tmp_path / "plain.md"
        plain.write_text("# Only one\n", encoding="utf-8")
        result = CliRunner().invoke(main, ['select', '-i', str(plain), '-d', sep])
        assert result.exit_code == 0
        assert result.output == "# Only one\n"

    def test_out_of_range(self, bundle_file, sep):
        result = CliRunner().invoke(main, ['select', '-i', str(bundle_file), '-d', sep, '-p', 'index(5)'])
        assert result.exit_code == ExitCodes.OUT_OF_RANGE
        assert "between 0 and 1" in result.output
        assert REVISED not in result.output

    def test_missing_delimiter(self, bundle_file):
        result = CliRunner().invoke(main, ['select', '-i', str(bundle_file)])
        assert result.exit_code == ExitCodes.INVALID_ARGUMENT
        assert "DOCBUNDLE_DELIMITER" in result.output

    def test_invalid_policy(self, bundle_file, sep):
        result = CliRunner().invoke(main, ['select', '-i', str(bundle_file), '-d', sep, '-p', 'middle'])
        assert result.exit_code == ExitCodes.INVALID_CONFIGURATION
        assert "Configuration Error" in result.output

    def test_missing_file(self, tmp_path, sep):
        result = CliRunner().invoke(main, ['select', '-i', str(tmp_path / "absent.md"), '-d', sep])
        assert result.exit_code == ExitCodes.FILE_NOT_FOUND
        assert "UTF-8" in result.output

    def test_invalid_config_file(self, bundle_file, sep, tmp_path):
        config = tmp_path / "bad.yaml"
        config.write_text("engine: fast\n", encoding="utf-8")
        result = CliRunner().invoke(main, ['select', '-i', str(bundle_file), '-d', sep, '--config', str(config)])
        assert result.exit_code == ExitCodes.INVALID_CONFIGURATION
        assert "Unknown configuration keys" in result.output


class TestSelectOutputFile:
    """Writing the selected variant to a file."""

    def test_write_with_sidecar(self, bundle_file, sep, isolate_tests):
        result = CliRunner().invoke(main, [
            'select', '-i', str(bundle_file), '-d', sep, '-o', 'out/post.md', '--sidecar',
        ])
        assert result.exit_code == 0
        assert "Variant 1 of 2 written to" in result.output

        output = isolate_tests / "out" / "post.md"
        assert output.read_text(encoding="utf-8") == REVISED

        metadata = json.loads((isolate_tests / "out" / "post.md.meta.json").read_text(encoding="utf-8"))
        assert metadata["policy"] == "last"
        assert metadata["variant_index"] == 1
        assert metadata["variant_count"] == 2
        assert metadata["source_file"] == str(bundle_file)

    def test_bytes_preserved(self, tmp_path, sep, isolate_tests):
        bundle = tmp_path / "crlf.md"
        bundle.write_bytes(f"a\r\nb\r\n{sep}c\r\n".encode("utf-8"))
        result = CliRunner().invoke(main, ['select', '-i', str(bundle), '-d', sep, '-p', 'first', '-o', 'a.md'])
        assert result.exit_code == 0
        assert (isolate_tests / "a.md").read_bytes() == b"a\r\nb\r\n"

    def test_refuses_overwrite(self, bundle_file, sep, isolate_tests):
        existing = isolate_tests / "post.md"
        existing.write_text("keep me", encoding="utf-8")
        result = CliRunner().invoke(main, ['select', '-i', str(bundle_file), '-d', sep, '-o', 'post.md'])
        assert result.exit_code == ExitCodes.OUTPUT_ERROR
        assert "--force" in result.output
        assert existing.read_text(encoding="utf-8") == "keep me"

    def test_existing_sidecar_refused(self, bundle_file, sep, isolate_tests):
        sidecar = isolate_tests / "o.md.meta.json"
        sidecar.write_text("KEEP", encoding="utf-8")
        result = CliRunner().invoke(main, [
            'select', '-i', str(bundle_file), '-d', sep, '-o', 'o.md', '--sidecar',
        ])
        assert result.exit_code == ExitCodes.OUTPUT_ERROR
        assert sidecar.read_text(encoding="utf-8") == "KEEP"
        assert not (isolate_tests / "o.md").exists()

    def test_force_overwrite(self, bundle_file, sep, isolate_tests):
        existing = isolate_tests / "post.md"
        existing.write_text("replace me", encoding="utf-8")
        result = CliRunner().invoke(main, ['select', '-i', str(bundle_file), '-d', sep, '-o', 'post.md', '--force'])
        assert result.exit_code == 0
        assert existing.read_text(encoding="utf-8") == REVISED
