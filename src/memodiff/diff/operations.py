#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/memodiff/diff/operations.py
"""Diff operations and their annotated rendering units.

A diff is an ordered list of :class:`DiffOperation` values. Reading the
``EQUAL`` and ``INSERT`` spans in order reproduces the revised text;
reading ``EQUAL`` and ``DELETE`` reproduces the original. The renderers
never reorder operations, so the rendered document keeps that property.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator, Literal

from memodiff.exceptions import ValidationError

SpanRole = Literal["equal", "inserted", "deleted"]


class DiffKind(IntEnum):
    """Kind of a diff operation.

    Values follow the diff-match-patch convention so that engine tuples
    ``(op, text)`` convert without a lookup table.
    """

    DELETE = -1
    EQUAL = 0
    INSERT = 1


@dataclass(frozen=True, slots=True)
class DiffOperation:
    """One tagged text span of an edit script."""

    kind: DiffKind
    text: str

    @classmethod
    def from_tuple(cls, diff: tuple[int, str]) -> DiffOperation:
        """Build an operation from a diff-match-patch ``(op, text)`` tuple.

        Raises
        ------
        ValidationError
            If ``op`` is not one of -1, 0 or 1.

        """
        op, text = diff
        try:
            kind = DiffKind(op)
        except ValueError as e:
            raise ValidationError(
                f"Unknown diff operation code: {op!r}",
                parameter_name="op",
                parameter_value=op,
                original_error=e,
            ) from e
        return cls(kind, text)

    def to_tuple(self) -> tuple[int, str]:
        """Return the diff-match-patch ``(op, text)`` form of this operation."""
        return int(self.kind), self.text


@dataclass(frozen=True, slots=True)
class AnnotatedSpan:
    """Markup-level unit derived from one :class:`DiffOperation`.

    ``nav_index`` is set only for inserted and deleted spans. Deleted
    spans are rendered inert, so ``interactive`` is False for them.
    """

    role: SpanRole
    text: str
    nav_index: int | None = None

    @property
    def interactive(self) -> bool:
        return self.role != "deleted"


_ROLES: dict[DiffKind, SpanRole] = {
    DiffKind.EQUAL: "equal",
    DiffKind.INSERT: "inserted",
    DiffKind.DELETE: "deleted",
}


def operations_from_tuples(diffs: Iterable[tuple[int, str]]) -> list[DiffOperation]:
    """Convert diff-match-patch output into a list of operations."""
    return [DiffOperation.from_tuple(diff) for diff in diffs]


def annotate(operations: Iterable[DiffOperation]) -> Iterator[AnnotatedSpan]:
    """Yield an annotated span for every operation, in input order.

    Inserts and deletes share one navigation counter starting at 1;
    equal spans never consume an index.
    """
    nav_index = 1
    for op in operations:
        if op.kind == DiffKind.EQUAL:
            yield AnnotatedSpan("equal", op.text)
            continue
        yield AnnotatedSpan(_ROLES[op.kind], op.text, nav_index)
        nav_index += 1


def original_text(operations: Iterable[DiffOperation]) -> str:
    """Reconstruct the original document from ``EQUAL`` and ``DELETE`` spans."""
    return "".join(op.text for op in operations if op.kind != DiffKind.INSERT)


def revised_text(operations: Iterable[DiffOperation]) -> str:
    """Reconstruct the revised document from ``EQUAL`` and ``INSERT`` spans."""
    return "".join(op.text for op in operations if op.kind != DiffKind.DELETE)


def count_changes(operations: Iterable[DiffOperation]) -> dict[str, int]:
    """Count insert and delete operations for summary output."""
    inserted = 0
    deleted = 0
    for op in operations:
        if op.kind == DiffKind.INSERT:
            inserted += 1
        elif op.kind == DiffKind.DELETE:
            deleted += 1
    return {
        "insertions": inserted,
        "deletions": deleted,
        "total_changes": inserted + deleted,
    }
