"""linecat core: everything between reading input and writing output.

- source: lazy lines (or raw chunks) from files or standard input
- features: the individual line transformations
- pipeline: ordered application of enabled features
- paginator: terminal-sized pages with a continuation prompt
- sink: buffered writer for standard output
- streaming: drivers tying the pieces together
"""

from .features import (
    Base64Decode,
    Base64Encode,
    DollarSignSuffix,
    EmptyLineCompress,
    Feature,
    FeatureKind,
    FeatureResult,
    LineNumber,
    Search,
    TabExpand,
)
from .paginator import Paginator
from .pipeline import Pipeline, PipelineState
from .sink import BufferedSink
from .source import LineSource
from .streaming import copy, stream

__all__ = [
    "Base64Decode",
    "Base64Encode",
    "BufferedSink",
    "DollarSignSuffix",
    "EmptyLineCompress",
    "Feature",
    "FeatureKind",
    "FeatureResult",
    "LineNumber",
    "LineSource",
    "Paginator",
    "Pipeline",
    "PipelineState",
    "Search",
    "TabExpand",
    "copy",
    "stream",
]
