"""Line value type."""

from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class Line:
    """One input line without its terminator.

    ``ordinal`` is the 1-based position in the concatenated input, counted
    across every file. Features never change it; line numbering uses the
    emitted count kept by the pipeline instead.
    """

    text: str
    ordinal: int

    @property
    def blank(self) -> bool:
        return not self.text

    def with_text(self, text: str) -> "Line":
        return replace(self, text=text)
