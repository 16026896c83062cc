"""ASCII digit classification (0-9 only)."""


class AsciiDigitClassifier:
    """Treat only the characters '0' through '9' as digits."""

    @property
    def name(self) -> str:
        return "ASCII digits"

    def is_digit(self, char: str) -> bool:
        return "0" <= char <= "9"

    def digit_value(self, char: str) -> int:
        return ord(char) - 48
