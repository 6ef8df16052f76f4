from typing import Any

import httpx
import pytest
import respx

API_BASE = "http://api.test"


def page_payload(items: list[dict[str, Any]], next_url: str | None = None) -> dict[str, Any]:
    return {"data": items, "links": {"next": next_url}}


def workplace(id: int, name: str | None = None, status: int = 0) -> dict[str, Any]:
    return {"id": id, "name": name or f"Workplace {id}", "status": status}


def shift(
    id: int,
    workplace_id: int,
    worker_id: int | None = 1,
    cancelled_at: str | None = None,
) -> dict[str, Any]:
    return {"id": id, "workplaceId": workplace_id, "workerId": worker_id, "cancelledAt": cancelled_at}


class FakeShiftsApi:
    """Serves canned pages keyed by absolute URL and records every request."""

    def __init__(self, base_url: str = API_BASE) -> None:
        self.base_url = base_url
        self.responses: dict[str, tuple[int, Any] | Exception] = {}
        self.requested: list[str] = []

    def add_collection(self, path: str, pages: list[list[dict[str, Any]]]) -> list[str]:
        urls = [f"{self.base_url}/{path}"] + [
            f"{self.base_url}/{path}?page={number}" for number in range(2, len(pages) + 1)
        ]
        for index, items in enumerate(pages):
            next_url = urls[index + 1] if index + 1 < len(urls) else None
            self.responses[urls[index]] = (200, page_payload(items, next_url))
        return urls

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requested.append(url)
        response = self.responses.get(url)
        if response is None:
            return httpx.Response(404, json={"message": "Not Found"})
        if isinstance(response, Exception):
            raise response
        status_code, body = response
        return httpx.Response(status_code, json=body)


@pytest.fixture()
def fake_api():
    api = FakeShiftsApi()
    with respx.mock(assert_all_called=False) as router:
        router.route(host="api.test").mock(side_effect=api.handler)
        yield api
