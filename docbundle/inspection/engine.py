"""
Inspection Engine

Splits bundles and reports their structure: how many variants they
hold, how large each one is, and which one a selection policy picks.
Supports single text, single file, batch (glob), and strict mode.
"""

import logging
import time
from pathlib import Path
from typing import List, Optional, Union

from docbundle.errors import BundleReadError, OutOfRangeError
from docbundle.inspection.report import BundleReport, InspectionIssue, VariantSummary
from docbundle.reader import BundleReader, BundleSource, expand_pattern
from docbundle.selector import SelectionPolicy, parse_policy, resolve_index
from docbundle.splitter import split, validate_delimiter


logger = logging.getLogger(__name__)

PREVIEW_LENGTH = 40


def _preview(text: str) -> str:
    """First non-blank line of a variant, shortened for display."""
    for line in text.splitlines():
        stripped = line.strip()
        if stripped:
            if len(stripped) > PREVIEW_LENGTH:
                return stripped[:PREVIEW_LENGTH - 1] + "…"
            return stripped
    return ""


class BundleInspector:
    """Inspects bundles split on a fixed delimiter.

    Issues reported:
    - info: the bundle holds a single variant (no delimiter found)
    - warning: a variant is empty
    - warning: a variant is identical to an earlier one
    - error: the selection policy does not resolve for this bundle
    - error: the file cannot be read
    """

    def __init__(
        self,
        delimiter: str,
        policy: Optional[Union[SelectionPolicy, str]] = None,
        strict: bool = False,
    ):
        """Initialize the inspector.

        Args:
            delimiter: Separator token shared by every inspected bundle
            policy: Optional selection policy to check against each bundle
            strict: If True, warnings are treated as failures

        Raises:
            InvalidArgumentError: If the delimiter or policy is invalid
        """
        validate_delimiter(delimiter)
        self.delimiter = delimiter
        self.policy = parse_policy(policy) if policy is not None else None
        self.strict = strict
        self._reader = BundleReader()

    def inspect_text(self, text: str, source: str = "<text>") -> BundleReport:
        """Inspect bundle text that is already in memory."""
        start = time.time()
        variants = split(text, self.delimiter)
        issues: List[InspectionIssue] = []

        summaries = [
            VariantSummary(
                index=i,
                character_count=len(v),
                line_count=v.count("\n") + 1 if v else 0,
                preview=_preview(v),
            )
            for i, v in enumerate(variants)
        ]

        if len(variants) == 1:
            issues.append(InspectionIssue(
                level="info",
                location="bundle",
                message="No delimiter found; the file holds a single document",
            ))

        seen = {}
        for i, variant in enumerate(variants):
            if not variant:
                issues.append(InspectionIssue(
                    level="warning",
                    location=f"variant[{i}]",
                    message="Variant is empty",
                    suggestion="Check for a delimiter at the start or end of the file, or two adjacent delimiters",
                ))
            elif variant in seen:
                issues.append(InspectionIssue(
                    level="warning",
                    location=f"variant[{i}]",
                    message=f"Variant is identical to variant[{seen[variant]}]",
                ))
            else:
                seen[variant] = i

        selected_index = None
        if self.policy is not None:
            try:
                selected_index = resolve_index(len(variants), self.policy)
            except OutOfRangeError as e:
                issues.append(InspectionIssue(
                    level="error",
                    location="policy",
                    message=str(e),
                    suggestion="Use 'first', 'last', or an index within the bundle",
                ))

        report = BundleReport(
            source=source,
            delimiter_count=len(variants) - 1,
            variants=summaries,
            policy=str(self.policy) if self.policy is not None else None,
            selected_index=selected_index,
            issues=issues,
            duration_ms=int((time.time() - start) * 1000),
        )
        report.is_valid = self._is_valid(issues)
        return report

    def inspect_source(self, source: BundleSource) -> BundleReport:
        """Inspect a bundle loaded by BundleReader."""
        name = str(source.path) if source.path is not None else source.metadata.get("name", "<text>")
        return self.inspect_text(source.text, source=name)

    def inspect_file(self, file_path: Union[str, Path]) -> BundleReport:
        """Inspect a bundle file; read failures become error-level issues."""
        try:
            source = self._reader.read(file_path)
        except BundleReadError as e:
            logger.warning(f"Cannot inspect {file_path}: {e}")
            return BundleReport(
                source=str(file_path),
                delimiter_count=0,
                is_valid=False,
                policy=str(self.policy) if self.policy is not None else None,
                issues=[InspectionIssue(
                    level="error",
                    location="file",
                    message=str(e),
                    suggestion="Check that the file exists and is UTF-8 encoded text",
                )],
            )
        return self.inspect_source(source)

    def inspect_batch(self, pattern: str) -> List[BundleReport]:
        """Inspect every file matching a glob pattern.

        Returns:
            List of BundleReport, one per file. A pattern with no matches
            yields a single failed report for the pattern itself.
        """
        files = expand_pattern(pattern)
        if not files:
            return [BundleReport(
                source=pattern,
                delimiter_count=0,
                is_valid=False,
                issues=[InspectionIssue(
                    level="error",
                    location="pattern",
                    message=f"No files match pattern: {pattern}",
                )],
            )]

        logger.info(f"Inspecting {len(files)} bundle file(s)")
        return [self.inspect_file(f) for f in files]

    def _is_valid(self, issues: List[InspectionIssue]) -> bool:
        has_errors = any(i.level == "error" for i in issues)
        has_warnings = any(i.level == "warning" for i in issues)
        return not has_errors and (not self.strict or not has_warnings)


def inspect_bundle(
    source: Union[BundleSource, str],
    delimiter: str,
    policy: Optional[Union[SelectionPolicy, str]] = None,
    strict: bool = False,
) -> BundleReport:
    """Inspect a single bundle given as text or as a BundleSource."""
    inspector = BundleInspector(delimiter, policy=policy, strict=strict)
    if isinstance(source, BundleSource):
        return inspector.inspect_source(source)
    return inspector.inspect_text(source)
