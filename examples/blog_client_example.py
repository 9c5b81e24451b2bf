"""Example: read a JSON:API blog with nested includes.

A small in-memory FastAPI app serves articles, users and comments. The
client requests ``include=author,comments,comments.author`` and prints the
deserialized graph.

Run with:
    python examples/blog_client_example.py
"""
from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.testclient import TestClient

from jsonapi_client import JSONAPIService, ServiceConfig
from jsonapi_client.utils import parse_include

JSONAPI = "application/vnd.api+json"


def _identifier(type_: str, id_: str) -> dict[str, str]:
    return {"type": type_, "id": id_}


RESOURCES: dict[tuple[str, str], dict[str, Any]] = {
    ("users", "1"): {
        "type": "users",
        "id": "1",
        "attributes": {"name": "Jane Doe", "bio": "Tech writer and API enthusiast."},
    },
    ("users", "2"): {
        "type": "users",
        "id": "2",
        "attributes": {"name": "John Smith", "bio": "Backend developer and data modeler."},
    },
    ("comments", "1"): {
        "type": "comments",
        "id": "1",
        "attributes": {"body": "Great article!"},
        "relationships": {"author": {"data": _identifier("users", "2")}},
    },
    ("comments", "2"): {
        "type": "comments",
        "id": "2",
        "attributes": {"body": "Helpful examples."},
        "relationships": {"author": {"data": _identifier("users", "1")}},
    },
    ("articles", "1"): {
        "type": "articles",
        "id": "1",
        "attributes": {"title": "JSON:API with FastAPI"},
        "relationships": {
            "author": {"data": _identifier("users", "1")},
            "comments": {
                "data": [_identifier("comments", "1"), _identifier("comments", "2")],
                "meta": {"count": 2},
            },
        },
    },
}


def build_included(resource: dict[str, Any], include: str) -> list[dict[str, Any]]:
    """Collect the resources reached by every include path."""
    included: dict[tuple[str, str], dict[str, Any]] = {}
    for path in parse_include(include):
        current = [resource]
        for name in path.split("."):
            reached = []
            for item in current:
                linkage = item.get("relationships", {}).get(name, {}).get("data")
                for identifier in linkage if isinstance(linkage, list) else [linkage]:
                    if identifier:
                        key = (identifier["type"], identifier["id"])
                        included[key] = RESOURCES[key]
                        reached.append(RESOURCES[key])
            current = reached
    return list(included.values())


app = FastAPI(title="Blog JSON:API Example")


@app.get("/articles/{article_id}")
async def get_article(article_id: str, request: Request) -> JSONResponse:
    article = RESOURCES[("articles", article_id)]
    include = request.query_params.get("include", "")
    document = {"data": article, "included": build_included(article, include)}
    return JSONResponse(document, media_type=JSONAPI)


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)
    config = ServiceConfig.from_env(log_errors=True)
    with JSONAPIService(client=TestClient(app), config=config) as service:
        document = service.get(
            "/articles/1", {"include": ["author", "comments", "comments.author"]}
        )
    article = document["data"]
    print(f"{article['title']} by {article['author']['name']}")
    print(f"{article['relationships']['comments']['meta']['count']} comments:")
    for comment in article["comments"]:
        print(f"  {comment['author']['name']}: {comment['body']}")


if __name__ == "__main__":
    main()
