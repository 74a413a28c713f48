"""
Pydantic schemas for docbundle data models.

Contains the SelectionV1 schema for selection sidecar metadata.
"""

from docbundle.schemas.selection_v1 import SelectionV1

__all__ = [
    "SelectionV1",
]
