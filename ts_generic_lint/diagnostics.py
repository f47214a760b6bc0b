from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ts_generic_lint.nodes import SourceRange


@dataclass(frozen=True)
class TextEdit:
    """Insert ``inserted_text`` at byte offset ``insertion_point``."""

    insertion_point: int
    inserted_text: str

    def to_dict(self) -> dict[str, Any]:
        return {"insertionPoint": self.insertion_point, "insertedText": self.inserted_text}


@dataclass(frozen=True)
class Diagnostic:
    message_id: str
    anchor_range: SourceRange
    message: str
    fix: TextEdit | None = None

    @property
    def fixable(self) -> bool:
        return self.fix is not None

    def to_dict(self) -> dict[str, Any]:
        result = {"messageId": self.message_id, "anchorRange": self.anchor_range.to_dict()}
        if self.fix is not None:
            result["fix"] = self.fix.to_dict()
        return result


@dataclass(frozen=True)
class Violation:
    diagnostic: Diagnostic
    rule: str
    path: str
    lineno: int
    col_offset: int

    @property
    def message_id(self) -> str:
        return self.diagnostic.message_id

    def __str__(self):
        location = f"{self.path}:{self.lineno}:{self.col_offset}"
        return f"{location}: {self.diagnostic.message} [{self.message_id}]"

    def to_json(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "line": self.lineno,
            "column": self.col_offset,
            "messageId": self.message_id,
            "message": self.diagnostic.message,
            "fixable": self.diagnostic.fixable,
        }
