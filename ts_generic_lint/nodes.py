"""
Syntax-level view of TypeScript type references.

The front end (:mod:`ts_generic_lint.parser`) builds these from a tree-sitter tree; checkers
only ever read them. All offsets are UTF-8 byte offsets into the source, ``end`` exclusive.
"""

from __future__ import annotations

from dataclasses import dataclass, field

TYPE_REFERENCE = "type_reference"


@dataclass(frozen=True)
class SourceRange:
    start: int
    end: int

    def to_dict(self) -> dict[str, int]:
        return {"start": self.start, "end": self.end}


@dataclass(frozen=True)
class TypeNode:
    """A type appearing as a type argument, e.g. ``any``, ``A | B`` or ``[A, B]``."""

    kind: str
    source_range: SourceRange


@dataclass(frozen=True)
class TypeReferenceNode(TypeNode):
    """
    A use of a named type, with or without a type-argument list.

    ``name`` is the identifier text; qualified references keep their dots (``ns.Uint8Array``).
    ``name_range`` covers only the identifier, ``source_range`` covers the whole reference
    including ``<...>``.
    """

    name: str = ""
    name_range: SourceRange | None = None
    type_arguments: tuple[TypeNode, ...] = field(default_factory=tuple)

    @classmethod
    def create(
        cls,
        name: str,
        name_range: SourceRange,
        type_arguments: tuple[TypeNode, ...] = (),
        source_range: SourceRange | None = None,
    ) -> TypeReferenceNode:
        return cls(
            kind=TYPE_REFERENCE,
            source_range=source_range or name_range,
            name=name,
            name_range=name_range,
            type_arguments=tuple(type_arguments),
        )
