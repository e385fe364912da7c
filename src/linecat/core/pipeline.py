"""Ordered composition of line features."""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence

from ..models.config import FeatureConfig
from ..models.line import Line
from .features import (
    Base64Decode,
    Base64Encode,
    DollarSignSuffix,
    EmptyLineCompress,
    Feature,
    LineNumber,
    Outcome,
    Search,
    TabExpand,
)

logger = logging.getLogger(__name__)


@dataclass
class PipelineState:
    """State carried from one line to the next.

    ``emitted`` counts lines that left the pipeline; ``previous_blank`` is
    true when the last line seen by the blank-line squeezer was empty.
    """

    emitted: int = 0
    previous_blank: bool = False


class Pipeline:
    """Apply enabled features, in canonical order, to each line."""

    def __init__(self, features: Sequence[Feature] = ()):
        self.features = tuple(sorted(features, key=lambda f: f.kind))
        self.state = PipelineState()

    @classmethod
    def from_config(cls, config: FeatureConfig) -> "Pipeline":
        """Build the pipeline for a configuration.

        Search patterns are compiled here, before any input is opened. An
        enabled encoding replaces every other feature.

        Raises:
            PatternError: If the search regular expression is malformed
        """
        if config.encoding:
            ignored = config.line_features
            if ignored:
                logger.warning(
                    "Ignoring %s: base64 %s is applied on its own",
                    ", ".join(ignored),
                    "encoding" if config.encode_base64 else "decoding",
                )
            feature = Base64Encode() if config.encode_base64 else Base64Decode()
            return cls([feature])

        features: list[Feature] = []
        if config.search_text is not None:
            features.append(Search.compile(config.search_text, config.ignore_case))
        if config.squeeze:
            features.append(EmptyLineCompress())
        if config.tabs:
            features.append(TabExpand())
        if config.dollar:
            features.append(DollarSignSuffix())
        if config.number:
            features.append(LineNumber())

        pipeline = cls(features)
        logger.debug("Pipeline: %s", pipeline)
        return pipeline

    @property
    def passthrough(self) -> bool:
        return not self.features

    def process(self, line: Line) -> Optional[Line]:
        """Fold ``line`` through every feature; None when it is dropped."""
        for feature in self.features:
            result = feature.apply(line, self.state)
            if result.dropped:
                return None
            if result.outcome is Outcome.TRANSFORMED:
                line = result.line
        self.state.emitted += 1
        return line

    def run(self, lines: Iterable[Line]) -> Iterator[Line]:
        for line in lines:
            out = self.process(line)
            if out is not None:
                yield out

    def __repr__(self) -> str:
        inner = ", ".join(repr(f) for f in self.features) or "passthrough"
        return f"Pipeline({inner})"


__all__ = ["Pipeline", "PipelineState"]
