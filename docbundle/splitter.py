"""
Bundle splitter.

Parses a bundle (the raw text of one source file) into its ordered
variants, and packs variants back into a bundle.

A bundle holding k delimiter occurrences always yields k + 1 variants.
Content is never trimmed or normalized, so joining the variants with the
delimiter reproduces the original text exactly.
"""

import logging
import secrets
from typing import Iterable, Optional, Tuple

from docbundle.errors import InvalidArgumentError


logger = logging.getLogger(__name__)

DELIMITER_PREFIX = "<|RELATED_DOC_SEP-"
DELIMITER_SUFFIX = "|>"


def validate_delimiter(delimiter: str) -> None:
    """Raise InvalidArgumentError unless delimiter is a non-empty string."""
    if not isinstance(delimiter, str):
        raise InvalidArgumentError(
            f"Delimiter must be a string, got {type(delimiter).__name__}",
            argument="delimiter",
            value=delimiter,
        )
    if not delimiter:
        raise InvalidArgumentError(
            "Delimiter must not be empty",
            argument="delimiter",
            value=delimiter,
        )


def _check_text(raw_text: str) -> None:
    if not isinstance(raw_text, str):
        raise InvalidArgumentError(
            f"Bundle text must be a string, got {type(raw_text).__name__}",
            argument="raw_text",
            value=type(raw_text).__name__,
        )


def split(raw_text: str, delimiter: str) -> Tuple[str, ...]:
    """Split a bundle into its variants.

    Occurrences are matched exactly (case-sensitive), left to right and
    without overlap. Empty variants at the start, at the end, or between
    adjacent delimiters are kept.

    Args:
        raw_text: Full bundle text
        delimiter: Separator token; must be non-empty

    Returns:
        Tuple of variants in order of appearance

    Raises:
        InvalidArgumentError: If the delimiter is empty or either argument
            is not a string
    """
    _check_text(raw_text)
    validate_delimiter(delimiter)

    variants = tuple(raw_text.split(delimiter))
    logger.debug(f"Split bundle of {len(raw_text)} chars into {len(variants)} variant(s)")
    return variants


def count_occurrences(raw_text: str, delimiter: str) -> int:
    """Count non-overlapping delimiter occurrences in a bundle."""
    _check_text(raw_text)
    validate_delimiter(delimiter)
    return raw_text.count(delimiter)


def join(variants: Iterable[str], delimiter: str) -> str:
    """Pack variants into a single bundle.

    This is the writer side of split(): split(join(vs, d), d) gives back
    vs. Inputs that would break that are rejected.

    Raises:
        InvalidArgumentError: If the delimiter is empty, no variants are
            given, or the variants would not split back unchanged
    """
    validate_delimiter(delimiter)
    variants = list(variants)

    if not variants:
        raise InvalidArgumentError(
            "At least one variant is required to build a bundle",
            argument="variants",
            value=variants,
        )

    for ordinal, variant in enumerate(variants):
        _check_text(variant)
        if delimiter in variant:
            raise InvalidArgumentError(
                f"Variant {ordinal} already contains the delimiter",
                argument="variants",
                value=ordinal,
            )

    bundle = delimiter.join(variants)

    # A variant edge plus the delimiter can still form an earlier match
    if bundle.split(delimiter) != variants:
        raise InvalidArgumentError(
            "Variants would not split back unchanged with this delimiter",
            argument="variants",
            value=len(variants),
        )

    return bundle


def make_delimiter(suffix: Optional[str] = None) -> str:
    """Build a delimiter token, generating a random suffix if none is given.

    >>> make_delimiter("a1b2")
    '<|RELATED_DOC_SEP-a1b2|>'
    """
    if suffix is None:
        suffix = secrets.token_hex(8)
    if not suffix:
        raise InvalidArgumentError(
            "Delimiter suffix must not be empty",
            argument="suffix",
            value=suffix,
        )
    return f"{DELIMITER_PREFIX}{suffix}{DELIMITER_SUFFIX}"
