# example_usage.py - Complete usage examples

import asyncio
import logging

from ra_strapi import HttpError, make_provider
from ra_strapi.adapters import RESTAdapter

API_URL = "http://localhost:1337/api"


async def example_read_operations(provider):
    """List, fetch and resolve references"""
    articles = await provider.get_list("articles", {
        "pagination": {"page": 1, "perPage": 10},
        "sort": {"field": "title", "order": "ASC"},
        "filter": {"views_gte": 100, "title_q": "strapi"},
    })
    print(f"Found {articles['total']} articles")

    if not articles["data"]:
        return

    first = articles["data"][0]
    article = await provider.get_one("articles", {"id": first["id"]})
    print(f"Article {article['data']['id']} (ref {article['data']['ref']})")

    ids = [item["id"] for item in articles["data"]]
    many = await provider.get_many("articles", {"ids": ids})
    print(f"Resolved {len(many['data'])} references")

    comments = await provider.get_many_reference("comments", {
        "target": "article",
        "id": first["id"],
        "pagination": {"page": 1, "perPage": 25},
        "sort": {"field": "createdAt", "order": "DESC"},
        "filter": {},
    })
    print(f"Article has {comments['total']} comments")


async def example_write_operations(provider):
    """Create, update and delete, then clean up in bulk"""
    created = await provider.create("articles", {"data": {"title": "Hello", "views": 0}})
    article = created["data"]
    print(f"Created article {article['id']}")

    # records read from the provider can be sent back as they are
    article["title"] = "Hello again"
    updated = await provider.update("articles", {"id": article["id"], "data": article})
    print(f"Updated title: {updated['data']['title']}")

    await provider.update_many("articles", {"ids": [article["id"]], "data": {"views": 1}})

    deleted = await provider.delete_many("articles", {"ids": [article["id"]]})
    print(f"Deleted: {deleted['data']}")


async def main():
    with RESTAdapter({"timeout": 10}) as transport:
        provider = make_provider(API_URL, transport)
        try:
            await example_read_operations(provider)
            await example_write_operations(provider)
        except HttpError as e:
            print(f"Request failed: {e}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    asyncio.run(main())
