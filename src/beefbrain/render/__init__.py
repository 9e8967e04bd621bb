"""Canonical YAML rendering for character sheets."""

from .emitter import CompactDumper
from .policy import DEFAULT_FLOW_STYLE_PATHS, FlowStylePolicy
from .serializer import build_node, dump_compact

__all__ = [
    "CompactDumper",
    "DEFAULT_FLOW_STYLE_PATHS",
    "FlowStylePolicy",
    "build_node",
    "dump_compact",
]
