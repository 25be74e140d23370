# ra_strapi/provider.py
"""
Data provider mapping admin framework queries to a Strapi v5 REST API.

Example:
    provider = make_provider("http://localhost:1337/api")
    result = await provider.get_list("articles", {
        "pagination": {"page": 1, "perPage": 10},
        "sort": {"field": "title", "order": "ASC"},
        "filter": {"views_gte": 100},
    })
    # {"data": [{"id": "<documentId>", "ref": 1, "title": ...}], "total": 42}
"""
import asyncio
import json
import logging
from typing import Any, Dict

from .adapters.rest_adapter import RESTAdapter
from .curator import to_strapi_payload
from .normalizer import normalize_record, normalize_sequence
from .query import POPULATE_ALL, build_list_query, reference_filter_key, stringify

logger = logging.getLogger(__name__)

DELETE_HEADERS = {"Content-Type": "text/plain"}


class StrapiRestProvider:
    """
    Implements get_list, get_one, get_many, get_many_reference, create,
    update, update_many, delete and delete_many over named resources.

    The transport is any object with an async ``request(url, options)``
    returning a response with a parsed ``json`` attribute. Its failures
    propagate unchanged.
    """

    def __init__(self, api_url: str, http_client=None):
        self.api_url = api_url.rstrip("/")
        self.http_client = http_client or RESTAdapter()

    async def _request(self, url: str, options: Dict = None):
        options = options or {}
        logger.debug("%s %s", options.get("method", "GET"), url)
        return await self.http_client.request(url, options)

    async def get_list(self, resource: str, params: Dict) -> Dict[str, Any]:
        query = build_list_query(
            params.get("pagination"),
            params.get("sort"),
            params.get("filter"),
        )
        url = f"{self.api_url}/{resource}?{POPULATE_ALL}&{stringify(query)}"

        response = await self._request(url, {})
        return {
            "data": normalize_sequence(response.json["data"]),
            "total": response.json["meta"]["pagination"]["total"],
        }

    async def get_one(self, resource: str, params: Dict) -> Dict[str, Any]:
        url = f"{self.api_url}/{resource}/{params['id']}?{POPULATE_ALL}"

        response = await self._request(url)
        return {"data": normalize_record(response.json["data"])}

    async def get_many(self, resource: str, params: Dict) -> Dict[str, Any]:
        query = {
            "filters": {
                "documentId": {"$in": list(params["ids"])},
            },
        }
        # no populate here, references only need the record itself
        url = f"{self.api_url}/{resource}?{stringify(query)}"

        response = await self._request(url)
        return {
            "data": normalize_sequence(response.json["data"]),
            "total": response.json["meta"].get("total"),
        }

    async def get_many_reference(self, resource: str, params: Dict) -> Dict[str, Any]:
        ra_filter = {
            **(params.get("filter") or {}),
            reference_filter_key(params["target"]): params["id"],
        }
        query = build_list_query(params["pagination"], params["sort"], ra_filter)
        url = f"{self.api_url}/{resource}?{POPULATE_ALL}&{stringify(query)}"

        response = await self._request(url, {})
        return {
            "data": normalize_sequence(response.json["data"]),
            "total": response.json["meta"]["pagination"]["total"],
        }

    async def update(self, resource: str, params: Dict) -> Dict[str, Any]:
        body = json.dumps({"data": to_strapi_payload(params["data"])})

        response = await self._request(
            f"{self.api_url}/{resource}/{params['id']}",
            {"method": "PUT", "body": body},
        )
        return {"data": normalize_record(response.json["data"])}

    async def update_many(self, resource: str, params: Dict) -> Dict[str, Any]:
        # data is sent as given and answers are not normalized
        body = json.dumps({"data": params["data"]})
        responses = await asyncio.gather(*[
            self._request(
                f"{self.api_url}/{resource}/{resource_id}",
                {"method": "PUT", "body": body},
            )
            for resource_id in params["ids"]
        ])
        return {"data": [response.json["data"]["id"] for response in responses]}

    async def create(self, resource: str, params: Dict) -> Dict[str, Any]:
        body = to_strapi_payload(params["data"])

        response = await self._request(
            f"{self.api_url}/{resource}",
            {"method": "POST", "body": body},
        )
        return {"data": normalize_record(response.json["data"])}

    async def delete(self, resource: str, params: Dict) -> Dict[str, Any]:
        response = await self._request(
            f"{self.api_url}/{resource}/{params['id']}",
            {"method": "DELETE", "headers": dict(DELETE_HEADERS)},
        )
        return {"data": response.json}

    async def delete_many(self, resource: str, params: Dict) -> Dict[str, Any]:
        responses = await asyncio.gather(*[
            self._request(
                f"{self.api_url}/{resource}/{resource_id}",
                {"method": "DELETE", "headers": dict(DELETE_HEADERS)},
            )
            for resource_id in params["ids"]
        ])
        return {"data": [response.json["data"]["id"] for response in responses]}


def make_provider(api_url: str, transport=None) -> StrapiRestProvider:
    """Build a provider for the Strapi API at api_url"""
    return StrapiRestProvider(api_url, transport)
