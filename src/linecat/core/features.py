"""Line features: one transformation applied to one line at a time.

Each feature receives the line and the pipeline state and answers with a
``FeatureResult``:

- transformed: the line continues with new text
- unchanged: the line continues as it was
- dropped: the line is discarded and later features never see it

``FeatureKind`` values fix the order in which the pipeline applies the
features: filters and structural edits first, decorations last, so line
numbers count only what is finally shown.
"""

from __future__ import annotations

import base64
import binascii
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, ClassVar, Optional

from ..errors import DecodeError, PatternError
from ..models.config import REGEX_PREFIX
from ..models.line import Line

if TYPE_CHECKING:
    from .pipeline import PipelineState

TEXT_ENCODING = "utf-8"
TEXT_ERRORS = "surrogateescape"


class FeatureKind(IntEnum):
    """Known features, valued in canonical application order."""

    SEARCH = 10
    SQUEEZE = 20
    TABS = 30
    DOLLAR = 40
    NUMBER = 50
    ENCODE = 90
    DECODE = 91


class Outcome(Enum):
    TRANSFORMED = "transformed"
    UNCHANGED = "unchanged"
    DROPPED = "dropped"


@dataclass(frozen=True, slots=True)
class FeatureResult:
    outcome: Outcome
    line: Optional[Line] = None

    @classmethod
    def transformed(cls, line: Line) -> "FeatureResult":
        return cls(Outcome.TRANSFORMED, line)

    @property
    def dropped(self) -> bool:
        return self.outcome is Outcome.DROPPED


UNCHANGED = FeatureResult(Outcome.UNCHANGED)
DROPPED = FeatureResult(Outcome.DROPPED)


class Feature(ABC):
    """A single line transformation."""

    kind: ClassVar[FeatureKind]

    @abstractmethod
    def apply(self, line: Line, state: "PipelineState") -> FeatureResult:
        """Transform ``line``, possibly reading or updating ``state``."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class LineNumber(Feature):
    """Prefix ``"<n> "`` where n counts emitted lines, not input lines."""

    kind = FeatureKind.NUMBER

    def apply(self, line: Line, state: "PipelineState") -> FeatureResult:
        return FeatureResult.transformed(line.with_text(f"{state.emitted + 1} {line.text}"))


class DollarSignSuffix(Feature):
    kind = FeatureKind.DOLLAR

    def apply(self, line: Line, state: "PipelineState") -> FeatureResult:
        return FeatureResult.transformed(line.with_text(line.text + "$"))


class TabExpand(Feature):
    """Show horizontal tabs as ``^I``."""

    kind = FeatureKind.TABS

    def apply(self, line: Line, state: "PipelineState") -> FeatureResult:
        if "\t" not in line.text:
            return UNCHANGED
        return FeatureResult.transformed(line.with_text(line.text.replace("\t", "^I")))


class EmptyLineCompress(Feature):
    """Squeeze runs of blank lines down to a single blank line."""

    kind = FeatureKind.SQUEEZE

    def apply(self, line: Line, state: "PipelineState") -> FeatureResult:
        if line.blank and state.previous_blank:
            return DROPPED
        state.previous_blank = line.blank
        return UNCHANGED


class Search(Feature):
    """Keep only lines matching a literal substring or a regular expression.

    The matcher is built once by ``compile`` and reused for every line.
    """

    kind = FeatureKind.SEARCH

    def __init__(
        self,
        pattern: str,
        *,
        ignore_case: bool = False,
        regex: Optional[re.Pattern[str]] = None,
    ):
        self.pattern = pattern
        self.ignore_case = ignore_case
        self.regex = regex
        self._needle = pattern.casefold() if ignore_case else pattern

    @classmethod
    def compile(cls, text: str, ignore_case: bool = False) -> "Search":
        """Build a search from configured text.

        Text starting with ``reg:`` is a regular expression; anything else
        is matched literally.

        Raises:
            PatternError: If the regular expression does not compile
        """
        if not text.startswith(REGEX_PREFIX):
            return cls(text, ignore_case=ignore_case)

        expression = text[len(REGEX_PREFIX):]
        flags = re.IGNORECASE if ignore_case else 0
        try:
            compiled = re.compile(expression, flags)
        except re.error as e:
            raise PatternError(f"invalid regular expression {expression!r}: {e}") from e
        return cls(expression, ignore_case=ignore_case, regex=compiled)

    def matches(self, text: str) -> bool:
        if self.regex is not None:
            return self.regex.search(text) is not None
        if self.ignore_case:
            return self._needle in text.casefold()
        return self._needle in text

    def apply(self, line: Line, state: "PipelineState") -> FeatureResult:
        return UNCHANGED if self.matches(line.text) else DROPPED

    def __repr__(self) -> str:
        mode = "regex" if self.regex is not None else "literal"
        return f"Search({self.pattern!r}, {mode}, ignore_case={self.ignore_case})"


def _to_bytes(text: str) -> bytes:
    return text.encode(TEXT_ENCODING, TEXT_ERRORS)


def _to_text(data: bytes) -> str:
    return data.decode(TEXT_ENCODING, TEXT_ERRORS)


class Base64Encode(Feature):
    kind = FeatureKind.ENCODE

    def apply(self, line: Line, state: "PipelineState") -> FeatureResult:
        encoded = base64.b64encode(_to_bytes(line.text)).decode("ascii")
        return FeatureResult.transformed(line.with_text(encoded))


class Base64Decode(Feature):
    """Decode standard Base64; any malformed line aborts the run."""

    kind = FeatureKind.DECODE

    def apply(self, line: Line, state: "PipelineState") -> FeatureResult:
        try:
            decoded = base64.b64decode(line.text, validate=True)
        except (binascii.Error, ValueError) as e:
            raise DecodeError(f"line {line.ordinal}: invalid base64 input: {e}") from e
        return FeatureResult.transformed(line.with_text(_to_text(decoded)))


__all__ = [
    "Base64Decode",
    "Base64Encode",
    "DROPPED",
    "DollarSignSuffix",
    "EmptyLineCompress",
    "Feature",
    "FeatureKind",
    "FeatureResult",
    "LineNumber",
    "Outcome",
    "Search",
    "TEXT_ENCODING",
    "TEXT_ERRORS",
    "TabExpand",
    "UNCHANGED",
]
