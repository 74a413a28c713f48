"""
Inspection Module for docbundle

Reports the variant structure of bundles and checks selection
policies against them before anything is published.
"""

from docbundle.inspection.report import BundleReport, InspectionIssue, VariantSummary
from docbundle.inspection.engine import BundleInspector, inspect_bundle

__all__ = [
    "BundleReport",
    "InspectionIssue",
    "VariantSummary",
    "BundleInspector",
    "inspect_bundle",
]
