"""
Version-preserving YAML loading.

``yaml.safe_load`` resolves an unquoted ``version: 1.10`` to the float
``1.1``. Chart versions are strings, so every mapping value under a
``version`` key is constructed from its source text instead.
"""

from typing import Any, IO, Union

import yaml

_STR_TAG = "tag:yaml.org,2002:str"
_NUMERIC_TAGS = frozenset({"tag:yaml.org,2002:int", "tag:yaml.org,2002:float"})


class VersionPreservingLoader(yaml.SafeLoader):
    """SafeLoader that keeps ``version`` scalars exactly as written."""

    def construct_mapping(self, node, deep=False):
        if not isinstance(node, yaml.MappingNode):
            return super().construct_mapping(node, deep=deep)
        for key_node, value_node in node.value:
            if (
                isinstance(key_node, yaml.ScalarNode)
                and key_node.value == "version"
                and isinstance(value_node, yaml.ScalarNode)
                and value_node.tag in _NUMERIC_TAGS
            ):
                value_node.tag = _STR_TAG
        return super().construct_mapping(node, deep=deep)


def load_yaml(stream: Union[str, bytes, IO]) -> Any:
    """Parse a single YAML document with VersionPreservingLoader."""
    return yaml.load(stream, Loader=VersionPreservingLoader)
