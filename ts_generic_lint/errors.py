from typing import NamedTuple


class Message(NamedTuple):
    id: str
    name: str
    message: str
    reason: str

    def render(self, **kwargs) -> str:
        return self.message.format(**kwargs)


MISSING_GENERIC = Message(
    id="TG001",
    name="missingGeneric",
    message="{target} must be used as {target}<{argument}>.",
    reason="Without an explicit argument the generic falls back to its default parameter, "
    "which may not be assignable where `{argument}` is required.",
)

WRONG_GENERIC = Message(
    id="TG002",
    name="wrongGeneric",
    message="{target} generic argument must be exactly '{argument}'.",
    reason="A different argument may be intentional, so it is reported without an automatic fix.",
)

MESSAGES = (MISSING_GENERIC, WRONG_GENERIC)
