class MonospaceMetrics:
    """Deterministic metrics: every character is ``char_width`` pixels wide."""

    def __init__(self, char_width: int = 10, line_height: int = 12) -> None:
        self.char_width = char_width
        self._line_height = line_height

    def measure_width(self, text: str) -> int:
        return len(text) * self.char_width

    def line_height(self) -> int:
        return self._line_height
