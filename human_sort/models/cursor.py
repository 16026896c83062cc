"""Read position into a single string."""


class Cursor:
    """Read-only position marker into one string, advanced monotonically.

    Each side of a comparison owns its own cursor; nothing else moves it.
    """

    __slots__ = ("text", "position")

    def __init__(self, text: str, position: int = 0):
        self.text = text
        self.position = position

    @property
    def at_end(self) -> bool:
        """Whether every character has been consumed."""
        return self.position >= len(self.text)

    def peek(self) -> str | None:
        """Return the current character without consuming it, or None at the end."""
        if self.position >= len(self.text):
            return None
        return self.text[self.position]

    def advance(self, count: int = 1) -> None:
        """Move forward by ``count`` characters, never past the end."""
        self.position = min(self.position + count, len(self.text))

    def __repr__(self) -> str:
        return f"Cursor(position={self.position}, length={len(self.text)})"
