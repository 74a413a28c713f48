"""
Inspection Report Data Models

Defines InspectionIssue, VariantSummary and BundleReport dataclasses
used to describe the structure of a bundle.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Literal, Optional


@dataclass
class InspectionIssue:
    """A single issue found while inspecting a bundle.

    Attributes:
        level: Severity level (error, warning, info)
        location: Where the issue was found ("bundle", "variant[2]", "policy")
        message: Human-readable description of the issue
        suggestion: Optional suggestion for fixing the issue
    """
    level: Literal["error", "warning", "info"]
    location: str
    message: str
    suggestion: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        d = {"level": self.level, "location": self.location, "message": self.message}
        if self.suggestion:
            d["suggestion"] = self.suggestion
        return d


@dataclass
class VariantSummary:
    """Size information for one variant."""
    index: int
    character_count: int
    line_count: int
    preview: str = ""

    def to_dict(self) -> dict:
        return {
            "index": self.index,
            "character_count": self.character_count,
            "line_count": self.line_count,
            "preview": self.preview,
        }


@dataclass
class BundleReport:
    """Structured report from inspecting one bundle.

    Attributes:
        source: Path of the inspected file, or "<text>" for in-memory input
        delimiter_count: Number of delimiter occurrences found
        variants: Per-variant summaries in bundle order
        policy: Policy that was checked against the bundle (if any)
        selected_index: Ordinal the policy resolves to (None if unresolvable)
        is_valid: Whether the bundle passed inspection
        issues: Issues found
        timestamp: When inspection was performed (UTC)
        duration_ms: How long inspection took in milliseconds
    """
    source: str
    delimiter_count: int
    variants: List[VariantSummary] = field(default_factory=list)
    policy: Optional[str] = None
    selected_index: Optional[int] = None
    is_valid: bool = True
    issues: List[InspectionIssue] = field(default_factory=list)
    timestamp: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    duration_ms: int = 0

    @property
    def variant_count(self) -> int:
        return len(self.variants)

    @property
    def errors(self) -> List[InspectionIssue]:
        return [i for i in self.issues if i.level == "error"]

    @property
    def warnings(self) -> List[InspectionIssue]:
        return [i for i in self.issues if i.level == "warning"]

    @property
    def infos(self) -> List[InspectionIssue]:
        return [i for i in self.issues if i.level == "info"]

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "source": self.source,
            "delimiter_count": self.delimiter_count,
            "variant_count": self.variant_count,
            "variants": [v.to_dict() for v in self.variants],
            "policy": self.policy,
            "selected_index": self.selected_index,
            "is_valid": self.is_valid,
            "issues": [i.to_dict() for i in self.issues],
            "timestamp": self.timestamp,
            "duration_ms": self.duration_ms,
            "summary": {
                "errors": len(self.errors),
                "warnings": len(self.warnings),
                "infos": len(self.infos),
            },
        }

    def to_json(self, indent: int = 2) -> str:
        """Serialize report to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def format_human(self) -> str:
        """Format report for human-readable console output."""
        if self.is_valid and not self.warnings:
            icon = "✅"
            status = "OK"
        elif self.is_valid and self.warnings:
            icon = "✅"
            status = "OK (with warnings)"
        else:
            icon = "❌"
            status = "Failed"

        lines = [f"{icon} {self.source}: {status} ({self.variant_count} variant(s))"]

        for variant in self.variants:
            marker = "→" if variant.index == self.selected_index else " "
            lines.append(
                f"  {marker} [{variant.index}] {variant.character_count} chars, "
                f"{variant.line_count} line(s)  {variant.preview}"
            )

        for issue in self.issues:
            if issue.level == "error":
                prefix = "  ❌"
            elif issue.level == "warning":
                prefix = "  ⚠"
            else:
                prefix = "  ℹ"
            lines.append(f"{prefix} [{issue.location}] {issue.message}")
            if issue.suggestion:
                lines.append(f"      → {issue.suggestion}")

        return "\n".join(lines)
