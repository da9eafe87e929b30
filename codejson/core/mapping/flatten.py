from __future__ import annotations

from typing import Any, Dict, List, Mapping, Sequence

PATH_SEP = "."
NESTED_TYPE = "nested"


def _join(path: Sequence[str]) -> str:
    return PATH_SEP.join(path)


def get_flattened_mapping_properties(mapping: Mapping[str, Any]) -> Dict[str, str]:
    """Flatten an Elasticsearch mapping into {dotted.path: type}.

    >>> get_flattened_mapping_properties({"a": {"properties": {"b": {"type": "text"}}}})
    {'a.b': 'text'}

    Node rules, checked in order:
    - "properties" present: descend into it without adding a path segment
    - "type" present: record a leaf at the current path
    - otherwise: every key is a child segment
    """

    props: Dict[str, str] = {}

    def _walk(node: Mapping[str, Any], path: List[str]) -> None:
        if isinstance(node.get("properties"), Mapping):
            _walk(node["properties"], path)
        elif isinstance(node.get("type"), str) and node["type"]:
            props[_join(path)] = node["type"]
        else:
            for key, child in node.items():
                if isinstance(child, Mapping):
                    _walk(child, path + [key])

    _walk(mapping, [])
    return props


def get_flattened_mapping_properties_by_type(mapping: Mapping[str, Any]) -> Dict[str, List[str]]:
    """Flatten an Elasticsearch mapping into {type: [dotted.path, ...]}.

    Same traversal as get_flattened_mapping_properties. A "nested" node that
    has its own properties is listed under "nested" and its children are
    still visited.
    """

    props: Dict[str, List[str]] = {}

    def _record(field_type: str, path: List[str]) -> None:
        props.setdefault(field_type, []).append(_join(path))

    def _walk(node: Mapping[str, Any], path: List[str]) -> None:
        if isinstance(node.get("properties"), Mapping):
            if node.get("type") == NESTED_TYPE:
                _record(NESTED_TYPE, path)
            _walk(node["properties"], path)
        elif isinstance(node.get("type"), str) and node["type"]:
            _record(node["type"], path)
        else:
            for key, child in node.items():
                if isinstance(child, Mapping):
                    _walk(child, path + [key])

    _walk(mapping, [])
    return props
