"""CoinMarketCap category endpoints."""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Sequence

import requests

from ..contracts.interface import CategoryDataSource
from ..core.errors import DecodeError, TransportError
from ..core.queries import DEFAULT_MEMBER_LIMIT, CategoryQuery
from ..models.categories import Category, CategoryMember

logger = logging.getLogger(__name__)

BASE_URL = "https://pro-api.coinmarketcap.com"
CATEGORIES_ENDPOINT = "/v1/cryptocurrency/categories"
CATEGORY_ENDPOINT = "/v1/cryptocurrency/category"
API_KEY_HEADER = "X-CMC_PRO_API_KEY"
DEFAULT_TIMEOUT = 10.0
# Documented upper bound for the ``limit`` parameter of both endpoints.
MAX_LIMIT = 5000


class CoinMarketCapClient(CategoryDataSource):
    """Requests-backed implementation of :class:`CategoryDataSource`."""

    provider: ClassVar[str] = "coinmarketcap"

    def __init__(
        self,
        api_key: str,
        *,
        session: requests.Session | None = None,
        base_url: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        member_limit: int = DEFAULT_MEMBER_LIMIT,
        paginate: bool = False,
    ) -> None:
        if member_limit > MAX_LIMIT:
            raise ValueError(f"CoinMarketCap category limit cannot exceed {MAX_LIMIT} entries")
        self._api_key = api_key
        self._session = session or requests.Session()
        self._owns_session = session is None
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._member_limit = member_limit
        self._paginate = paginate

    def fetch_categories(self) -> Sequence[Category]:
        payload = self._request(CATEGORIES_ENDPOINT, {})
        data = payload.get("data")
        if not isinstance(data, list):
            raise DecodeError("CoinMarketCap categories payload has no data list")
        return [self._parse(Category.from_payload, entry, "category") for entry in data]

    def fetch_category_members(
        self, query: CategoryQuery | str, *, expected: int | None = None
    ) -> Sequence[CategoryMember]:
        """Return the constituents of one category.

        Only the first page is requested unless the client was built with
        ``paginate=True``, in which case pages are requested until a short
        page comes back or ``expected`` members (the category's token count)
        have been collected.
        """

        if isinstance(query, str):
            query = CategoryQuery(category_id=query, limit=self._member_limit)
        members: list[CategoryMember] = []
        while True:
            page = self._fetch_member_page(query)
            members.extend(page)
            if not self._paginate or len(page) < query.limit:
                break
            if expected is not None and len(members) >= expected:
                break
            logger.debug("Category %s: requesting members from %d", query.category_id, query.start + query.limit)
            query = query.next_page()
        return members

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    # ------------------------------------------------------------------
    # Internal helpers
    def _fetch_member_page(self, query: CategoryQuery) -> list[CategoryMember]:
        payload = self._request(CATEGORY_ENDPOINT, query.params())
        data = payload.get("data")
        coins = data.get("coins") if isinstance(data, dict) else None
        if coins is None:
            return []
        if not isinstance(coins, list):
            raise DecodeError(f"CoinMarketCap category {query.category_id} has malformed coins list")
        return [self._parse(CategoryMember.from_payload, entry, "category member") for entry in coins]

    def _request(self, path: str, params: dict[str, Any]) -> dict[str, Any]:
        url = f"{self._base_url}{path}"
        headers = {"Accept": "application/json", API_KEY_HEADER: self._api_key}
        try:
            response = self._session.get(url, params=params, headers=headers, timeout=self._timeout)
        except requests.RequestException as exc:
            raise TransportError(f"Failed to call CoinMarketCap endpoint {path}: {exc}") from exc

        if response.status_code >= 400:
            self._raise_http_error(path, response)
        try:
            payload = response.json()
        except ValueError as exc:
            raise DecodeError(f"CoinMarketCap returned a non-JSON payload for {path}") from exc
        if not isinstance(payload, dict):
            raise DecodeError(f"Unexpected CoinMarketCap payload structure for {path}")
        status = payload.get("status")
        if isinstance(status, dict) and status.get("error_code") not in (0, "0", None):
            raise TransportError(self._extract_message(payload) or f"CoinMarketCap error code {status['error_code']}")
        return payload

    def _raise_http_error(self, path: str, response: requests.Response) -> None:
        try:
            payload = response.json()
        except ValueError:
            payload = None
        message = self._extract_message(payload) or "no error message"
        raise TransportError(f"Unexpected status code {response.status_code} for {path}: {message}")

    def _extract_message(self, payload: Any) -> str | None:
        if isinstance(payload, dict):
            status = payload.get("status")
            if isinstance(status, dict):
                msg = status.get("error_message")
                if isinstance(msg, str) and msg:
                    return msg
        return None

    def _parse(self, parser, entry: Any, kind: str):
        if not isinstance(entry, dict):
            raise DecodeError(f"Unexpected CoinMarketCap {kind} entry: {entry!r}")
        try:
            return parser(entry)
        except (KeyError, TypeError, ValueError) as exc:
            raise DecodeError(f"Malformed CoinMarketCap {kind} entry: {exc}") from exc
