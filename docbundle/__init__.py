"""
docbundle - split multi-variant document bundles and select one variant.

A bundle is the raw text of one source file holding one or more
renderings of the same document, separated by a fixed delimiter token.

    >>> from docbundle import split, select, SelectionPolicy
    >>> variants = split("draft::SEP::revised", "::SEP::")
    >>> select(variants, SelectionPolicy.last())
    'revised'
"""

from docbundle.errors import (
    BundleError,
    BundleErrorInfo,
    BundleReadError,
    InvalidArgumentError,
    OutOfRangeError,
    OutputWriteError,
)
from docbundle.selector import (
    DEFAULT_POLICY,
    PolicyKind,
    SelectionPolicy,
    parse_policy,
    resolve_index,
    select,
)
from docbundle.splitter import (
    count_occurrences,
    join,
    make_delimiter,
    split,
    validate_delimiter,
)

__version__ = "0.1.0"

__all__ = [
    "BundleError",
    "BundleErrorInfo",
    "BundleReadError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "OutputWriteError",
    "DEFAULT_POLICY",
    "PolicyKind",
    "SelectionPolicy",
    "parse_policy",
    "resolve_index",
    "select",
    "count_occurrences",
    "join",
    "make_delimiter",
    "split",
    "validate_delimiter",
]
