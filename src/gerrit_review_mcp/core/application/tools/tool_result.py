from dataclasses import dataclass


@dataclass(frozen=True)
class ToolResult:
    """Outcome of one tool call: patch text on success, a message on failure."""

    text: str
    is_error: bool = False

    @classmethod
    def success(cls, text: str) -> "ToolResult":
        return cls(text=text)

    @classmethod
    def error(cls, message: str) -> "ToolResult":
        return cls(text=message, is_error=True)
