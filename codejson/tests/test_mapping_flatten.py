from codejson.core.mapping import (
    get_flattened_mapping_properties,
    get_flattened_mapping_properties_by_type,
)


def _mapping():
    return {
        "repos": {
            "properties": {
                "name": {"type": "text"},
                "repoID": {"type": "keyword"},
                "permissions": {
                    "type": "nested",
                    "properties": {
                        "usageType": {"type": "keyword"},
                        "licenses": {
                            "properties": {
                                "URL": {"type": "keyword"},
                                "name": {"type": "text"},
                            }
                        },
                    },
                },
                "agency": {
                    "properties": {
                        "requirements": {
                            "properties": {"overallCompliance": {"type": "float"}}
                        }
                    }
                },
            }
        }
    }


def test_flatten_single_leaf() -> None:
    assert get_flattened_mapping_properties({"a": {"properties": {"b": {"type": "text"}}}}) == {
        "a.b": "text"
    }


def test_flatten_by_path() -> None:
    assert get_flattened_mapping_properties(_mapping()) == {
        "repos.name": "text",
        "repos.repoID": "keyword",
        "repos.permissions.usageType": "keyword",
        "repos.permissions.licenses.URL": "keyword",
        "repos.permissions.licenses.name": "text",
        "repos.agency.requirements.overallCompliance": "float",
    }


def test_flatten_by_type_records_nested_nodes_and_their_children() -> None:
    props = get_flattened_mapping_properties_by_type(_mapping())

    assert props["nested"] == ["repos.permissions"]
    assert props["keyword"] == [
        "repos.repoID",
        "repos.permissions.usageType",
        "repos.permissions.licenses.URL",
    ]
    assert props["text"] == ["repos.name", "repos.permissions.licenses.name"]
    assert props["float"] == ["repos.agency.requirements.overallCompliance"]


def test_flatten_ignores_scalar_settings_and_fields_named_type() -> None:
    mapping = {
        "dynamic": "strict",
        "properties": {"type": {"type": "keyword"}},
    }
    # "properties" wins over the scalar setting at the root
    assert get_flattened_mapping_properties(mapping) == {"type": "keyword"}
    assert get_flattened_mapping_properties({"settings": "x"}) == {}


def test_empty_properties_are_not_leaves() -> None:
    mapping = {
        "a": {"type": "object", "properties": {}},
        "b": {"type": "nested", "properties": {}},
    }

    assert get_flattened_mapping_properties(mapping) == {}
    assert get_flattened_mapping_properties_by_type(mapping) == {"nested": ["b"]}
