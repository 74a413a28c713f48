"""
Variant selector.

Picks exactly one variant out of a split bundle according to a
selection policy:

- first: ordinal 0, the first-authored version
- last: the final ordinal, the most recently appended revision
- index(n): ordinal n, which must exist in the bundle

The selected variant is returned as-is (the same object that was passed
in). An invalid ordinal is reported, never replaced by another variant.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from docbundle.errors import InvalidArgumentError, OutOfRangeError


logger = logging.getLogger(__name__)


class PolicyKind(Enum):
    """Supported selection policies."""
    FIRST = "first"
    LAST = "last"
    INDEX = "index"


# index(3), index:3, index 3
_INDEX_PATTERN = re.compile(r"^index\s*(?:\(\s*(-?\d+)\s*\)|[:\s]\s*(-?\d+))$")


@dataclass(frozen=True)
class SelectionPolicy:
    """Selection policy value object.

    Attributes:
        kind: Which policy to apply
        index: Requested ordinal, only meaningful for PolicyKind.INDEX
    """
    kind: PolicyKind
    index: int = 0

    def __post_init__(self):
        if not isinstance(self.kind, PolicyKind):
            raise InvalidArgumentError(
                f"Policy kind must be a PolicyKind, got {self.kind!r}",
                argument="policy",
                value=self.kind,
            )
        if isinstance(self.index, bool) or not isinstance(self.index, int):
            raise InvalidArgumentError(
                f"Policy index must be an integer, got {self.index!r}",
                argument="policy",
                value=self.index,
            )

    @classmethod
    def first(cls) -> "SelectionPolicy":
        return cls(PolicyKind.FIRST)

    @classmethod
    def last(cls) -> "SelectionPolicy":
        return cls(PolicyKind.LAST)

    @classmethod
    def at(cls, index: int) -> "SelectionPolicy":
        """Policy selecting the variant at a fixed ordinal."""
        return cls(PolicyKind.INDEX, index)

    def __str__(self) -> str:
        if self.kind is PolicyKind.INDEX:
            return f"index({self.index})"
        return self.kind.value


DEFAULT_POLICY = SelectionPolicy.last()


def parse_policy(text: str) -> SelectionPolicy:
    """Parse a policy string such as 'first', 'last', 'index(2)' or 'index:2'.

    Matching is case-insensitive and ignores surrounding whitespace.

    Raises:
        InvalidArgumentError: If the string is not a recognized policy
    """
    if isinstance(text, SelectionPolicy):
        return text
    if not isinstance(text, str):
        raise InvalidArgumentError(
            f"Selection policy must be a string, got {type(text).__name__}",
            argument="policy",
            value=text,
        )

    normalized = text.strip().lower()

    if normalized == PolicyKind.FIRST.value:
        return SelectionPolicy.first()
    if normalized == PolicyKind.LAST.value:
        return SelectionPolicy.last()

    match = _INDEX_PATTERN.match(normalized)
    if match:
        number = match.group(1) if match.group(1) is not None else match.group(2)
        return SelectionPolicy.at(int(number))

    raise InvalidArgumentError(
        f"Unknown selection policy '{text}'. Valid options: first, last, index(N)",
        argument="policy",
        value=text,
    )


def resolve_index(count: int, policy: SelectionPolicy) -> int:
    """Return the ordinal a policy selects from `count` variants.

    Raises:
        InvalidArgumentError: If count is less than 1
        OutOfRangeError: If an index policy falls outside [0, count - 1]
    """
    if count < 1:
        raise InvalidArgumentError(
            "Cannot select from an empty variant sequence",
            argument="variants",
            value=count,
        )

    if policy.kind is PolicyKind.FIRST:
        return 0
    if policy.kind is PolicyKind.LAST:
        return count - 1

    # Negative ordinals are rejected rather than counted from the end
    if not 0 <= policy.index < count:
        raise OutOfRangeError(
            f"Variant index {policy.index} is out of range for a bundle "
            f"with {count} variant(s) (valid: 0..{count - 1})",
            index=policy.index,
            count=count,
        )
    return policy.index


def select(variants: Sequence[str], policy: SelectionPolicy = DEFAULT_POLICY) -> str:
    """Select one variant according to the policy.

    Args:
        variants: Ordered variants, normally the output of split()
        policy: Selection policy (a SelectionPolicy or a policy string)

    Returns:
        The chosen element of `variants`, unmodified

    Raises:
        InvalidArgumentError: If variants is empty or the policy is invalid
        OutOfRangeError: If an index policy falls outside the sequence
    """
    policy = parse_policy(policy)
    ordinal = resolve_index(len(variants), policy)
    logger.debug(f"Policy {policy} selected variant {ordinal} of {len(variants)}")
    return variants[ordinal]
