"""The ESearch operation: find the records matching a query."""

from __future__ import annotations

import threading
from urllib.parse import unquote_plus

import requests

from clinvardl import logcdl
from clinvardl.models import ESearchResult
from clinvardl.operation import BASE_URL_ESEARCH, BaseOperation, RateLimiter
from clinvardl.parsers import new_esearch_parser
from clinvardl.query import Query

_MAX_GET_URL_LENGTH = 2048


class ESearchOperation(BaseOperation):
    """Runs ESearch, optionally narrowing every query with a filter expression."""

    def __init__(
        self,
        session: requests.Session | None = None,
        rate_limiter: RateLimiter | None = None,
        *,
        cancelled: threading.Event | None = None,
        timeout: float | None = 60.0,
    ) -> None:
        super().__init__(BASE_URL_ESEARCH, session, rate_limiter, cancelled=cancelled, timeout=timeout)
        self.filters = ""

    def set_query_filters(self, filters: str) -> ESearchOperation:
        self.filters = filters
        return self

    def build_term(self, query: Query) -> str:
        """Combine the query with the filters the way the advanced search does."""
        if not self.filters:
            return f"({query.content})"
        return f"(({query.content}) AND {self.filters})"

    def execute(self, query: Query) -> ESearchResult:
        """Search for the query; long URLs are sent as POST."""
        self.parameters["term"] = self.build_term(query)
        url = self.build_url()
        logcdl.debug("esearch url for query '%v': '%s'", query, unquote_plus(url))

        method = "POST" if len(url) > _MAX_GET_URL_LENGTH else "GET"
        body = self._do_request(method, url, self.parameters)

        parser = new_esearch_parser(self.ret_mode())
        return parser.parse_esearch(body)