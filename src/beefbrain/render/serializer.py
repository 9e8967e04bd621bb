"""Canonical serializer for character sheets.

The document tree is walked once, building PyYAML representation nodes. Each
collection whose dotted path matches the flow-style policy is marked inline;
everything else renders in block style. The node graph is then emitted with
:class:`~beefbrain.render.emitter.CompactDumper`.
"""

import io
from typing import Any

from yaml.nodes import MappingNode, Node, SequenceNode

from .emitter import CompactDumper
from .policy import FlowStylePolicy

MAP_TAG = "tag:yaml.org,2002:map"
SEQ_TAG = "tag:yaml.org,2002:seq"


def build_node(
    dumper: CompactDumper,
    data: Any,
    policy: FlowStylePolicy,
    path: tuple[str, ...] = (),
) -> Node:
    """
    Build a representation node for ``data``, annotating flow style by path.

    Args:
        dumper: Dumper providing scalar representation
        data: Subtree of the document
        policy: Flow-style policy deciding inline collections
        path: Path of ``data`` from the document root

    Returns:
        A PyYAML node ready for serialization
    """
    if isinstance(data, dict):
        pairs = [
            (dumper.represent_data(key), build_node(dumper, value, policy, path + (str(key),)))
            for key, value in data.items()
        ]
        return MappingNode(MAP_TAG, pairs, flow_style=policy.matches(path))

    if isinstance(data, list):
        items = [
            build_node(dumper, item, policy, path + (str(index),))
            for index, item in enumerate(data)
        ]
        return SequenceNode(SEQ_TAG, items, flow_style=policy.matches(path))

    return dumper.represent_data(data)


def dump_compact(data: Any, policy: FlowStylePolicy | None = None) -> str:
    """
    Render a document tree to canonical compact YAML.

    The output always begins with a ``---`` document-start marker, never wraps
    long lines, and writes flow collections without inner padding.

    Args:
        data: Document tree (mappings, lists, scalars)
        policy: Flow-style policy. Defaults to the character sheet layout.

    Returns:
        YAML text
    """
    if policy is None:
        policy = FlowStylePolicy()

    stream = io.StringIO()
    dumper = CompactDumper(
        stream,
        default_flow_style=False,
        allow_unicode=True,
        width=float("inf"),
        explicit_start=True,
    )
    try:
        dumper.open()
        dumper.serialize(build_node(dumper, data, policy))
        dumper.close()
    finally:
        dumper.dispose()

    return stream.getvalue()
