"""PyYAML dumper tuned for hand-edited character sheets.

Differences from ``yaml.SafeDumper``:

- a single-pair mapping with scalar key and value that sits directly inside a
  flow sequence is written without braces, ``[14, str: 2]``;
- block sequences are indented under their parent key.
"""

import yaml
from yaml.events import MappingEndEvent, ScalarEvent


class CompactDumper(yaml.SafeDumper):
    """SafeDumper emitting bare pairs inside flow sequences."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        # One entry per open flow mapping: True when its braces are omitted
        self._bare_mappings: list[bool] = []

    def increase_indent(self, flow: bool = False, indentless: bool = False) -> None:
        return super().increase_indent(flow, False)

    def _is_bare_pair(self) -> bool:
        """Check if the mapping just started is a scalar pair inside a flow sequence."""
        if not (self.flow_level and self.sequence_context):
            return False
        upcoming = self.events[:3]
        return (
            len(upcoming) == 3
            and isinstance(upcoming[0], ScalarEvent)
            and isinstance(upcoming[1], ScalarEvent)
            and isinstance(upcoming[2], MappingEndEvent)
        )

    def expect_flow_mapping(self) -> None:
        bare = self._is_bare_pair()
        self._bare_mappings.append(bare)
        if not bare:
            super().expect_flow_mapping()
            return
        self.flow_level += 1
        self.increase_indent(flow=True)
        self.state = self.expect_first_flow_mapping_key

    def _close_mapping(self) -> bool:
        """Close the current flow mapping if it is bare. Returns True if closed."""
        if not self._bare_mappings.pop():
            return False
        self.indent = self.indents.pop()
        self.flow_level -= 1
        self.state = self.states.pop()
        return True

    def expect_first_flow_mapping_key(self) -> None:
        if isinstance(self.event, MappingEndEvent) and self._close_mapping():
            return
        super().expect_first_flow_mapping_key()

    def expect_flow_mapping_key(self) -> None:
        if isinstance(self.event, MappingEndEvent) and self._close_mapping():
            return
        super().expect_flow_mapping_key()
