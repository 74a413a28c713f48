"""
Unit tests for BundleInspector and BundleReport.
"""

import json

import pytest

from docbundle.errors import InvalidArgumentError
from docbundle.inspection import BundleInspector, BundleReport, inspect_bundle
from docbundle.reader import BundleReader


class TestInspectText:

    def test_two_variants(self, sep):
        report = inspect_bundle(f"# Draft\nbody{sep}# Final\nbody\n", sep, policy="last")
        assert isinstance(report, BundleReport)
        assert report.delimiter_count == 1
        assert report.variant_count == 2
        assert report.selected_index == 1
        assert report.is_valid
        assert report.issues == []
        assert report.variants[0].preview == "# Draft"
        assert report.variants[1].line_count == 3

    def test_single_variant_is_info(self, sep):
        report = inspect_bundle("just one document", sep)
        assert report.variant_count == 1
        assert [i.level for i in report.issues] == ["info"]
        assert report.is_valid

    def test_empty_variants_are_warnings(self, sep):
        report = inspect_bundle(f"{sep}body{sep}", sep)
        assert [i.location for i in report.warnings] == ["variant[0]", "variant[2]"]
        assert report.variants[0].line_count == 0
        assert report.is_valid

    def test_duplicate_variant_warning(self, sep):
        report = inspect_bundle(f"same{sep}other{sep}same", sep)
        assert len(report.warnings) == 1
        assert "variant[0]" in report.warnings[0].message

    def test_strict_fails_on_warnings(self, sep):
        report = inspect_bundle(f"{sep}body", sep, strict=True)
        assert not report.is_valid

    def test_out_of_range_policy_is_error(self, sep):
        report = inspect_bundle(f"a{sep}b", sep, policy="index(5)")
        assert not report.is_valid
        assert report.selected_index is None
        assert report.errors[0].location == "policy"

    def test_no_policy_no_selection(self, sep):
        report = inspect_bundle(f"a{sep}b", sep)
        assert report.policy is None
        assert report.selected_index is None

    def test_long_preview_is_shortened(self, sep):
        report = inspect_bundle("x" * 100, sep)
        assert len(report.variants[0].preview) == 40
        assert report.variants[0].preview.endswith("…")

    def test_accepts_bundle_source(self, bundle_file, sep):
        source = BundleReader().read(bundle_file)
        report = inspect_bundle(source, sep, policy="first")
        assert report.source == str(bundle_file)
        assert report.selected_index == 0

    def test_invalid_delimiter_rejected(self):
        with pytest.raises(InvalidArgumentError):
            BundleInspector("")

    def test_invalid_policy_rejected(self, sep):
        with pytest.raises(InvalidArgumentError):
            BundleInspector(sep, policy="sometimes")


class TestInspectFiles:

    def test_missing_file_becomes_error_report(self, tmp_path, sep):
        report = BundleInspector(sep).inspect_file(tmp_path / "absent.md")
        assert not report.is_valid
        assert report.errors[0].location == "file"

    def test_batch(self, tmp_path, sep):
        (tmp_path / "a.md").write_text(f"a{sep}b", encoding="utf-8")
        (tmp_path / "b.md").write_text("single", encoding="utf-8")
        reports = BundleInspector(sep, policy="last").inspect_batch(str(tmp_path / "*.md"))
        assert [r.variant_count for r in reports] == [2, 1]
        assert all(r.is_valid for r in reports)

    def test_batch_without_matches(self, tmp_path, sep):
        reports = BundleInspector(sep).inspect_batch(str(tmp_path / "*.md"))
        assert len(reports) == 1
        assert not reports[0].is_valid


class TestInspectStdinSource:

    def test_source_named_after_stream(self, sep):
        source = BundleReader().read_bytes(f"a{sep}b".encode("utf-8"))
        report = inspect_bundle(source, sep)
        assert report.source == "<stdin>"
        assert report.variant_count == 2


class TestBundleReport:

    def test_to_dict_and_json(self, sep):
        report = inspect_bundle(f"{sep}b", sep, policy="first")
        data = report.to_dict()
        assert data["variant_count"] == 2
        assert data["policy"] == "first"
        assert data["summary"] == {"errors": 0, "warnings": 1, "infos": 0}
        assert json.loads(report.to_json()) == data

    def test_format_human_marks_selection(self, sep):
        report = inspect_bundle(f"draft{sep}final", sep, policy="last")
        text = report.format_human()
        assert text.startswith("✅ <text>: OK (2 variant(s))")
        assert "→ [1]" in text

    def test_format_human_failure(self, sep):
        report = inspect_bundle(f"a{sep}b", sep, policy="index(9)")
        text = report.format_human()
        assert text.startswith("❌")
        assert "[policy]" in text
