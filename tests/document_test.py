"""Tests for deserializing whole response documents."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from jsonapi_client.core.document import deserialize_document
from jsonapi_client.core.errors import IncludeDepthExceeded, MissingIncludedResource


def test_none_document() -> None:
    assert deserialize_document(None) is None


@pytest.mark.parametrize("document", [{"data": None}, {"data": []}, {"meta": {"count": 0}}])
def test_document_without_primary_data_is_unchanged(document: dict[str, Any]) -> None:
    assert deserialize_document(document, "authors") == document


def test_single_resource_document(
    article: dict[str, Any], included: list[dict[str, Any]]
) -> None:
    document = {
        "data": article,
        "included": included,
        "meta": {"generated": "now"},
        "links": {"self": "/articles/article1"},
    }
    result = deserialize_document(document, "authors")

    data = result["data"]
    assert data["name"] == "Learn python in 3 days."
    assert [author["name"] for author in data["authors"]] == ["aristote", "beyonce"]
    assert data["mycolor"] == {"type": "color", "id": "color1"}
    # the raw relationships block stays available next to the expansion
    assert data["relationships"] == article["relationships"]
    assert data["relationships"]["authors"]["meta"] == {"count": 2}

    assert result["included"] is included
    assert result["meta"] == {"generated": "now"}
    assert result["links"] == {"self": "/articles/article1"}


def test_collection_document(article: dict[str, Any], included: list[dict[str, Any]]) -> None:
    second = copy.deepcopy(article)
    second["id"] = "article2"
    second["relationships"]["authors"]["data"] = [{"id": "author2", "type": "author"}]
    document = {"data": [article, second], "included": included}

    result = deserialize_document(document, "authors,authors__addresses")

    assert [item["id"] for item in result["data"]] == ["article1", "article2"]
    assert result["data"][1]["authors"][0]["addresses"][0]["name"] == "2 rue du parc"


def test_resource_without_relationships_has_no_relationships_key() -> None:
    document = {"data": {"id": "1", "type": "tag", "attributes": {"name": "python"}}}
    assert deserialize_document(document) == {
        "data": {"id": "1", "type": "tag", "name": "python"}
    }


def test_document_is_not_mutated(article: dict[str, Any], included: list[dict[str, Any]]) -> None:
    document = {"data": article, "included": included}
    before = copy.deepcopy(document)
    deserialize_document(document, "authors,mycolor")
    assert document == before


def test_missing_included_resource_propagates(article: dict[str, Any]) -> None:
    with pytest.raises(MissingIncludedResource):
        deserialize_document({"data": article}, "authors")


def test_max_depth_is_forwarded() -> None:
    person = {
        "id": "p1",
        "type": "person",
        "relationships": {"friend": {"data": {"id": "p1", "type": "person"}}},
    }
    with pytest.raises(IncludeDepthExceeded):
        deserialize_document(
            {"data": person, "included": [person]}, "friend,friend.friend", max_depth=1
        )
