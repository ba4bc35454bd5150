"""The ESummary operation: fetch document summaries from the history server."""

from __future__ import annotations

import threading
from urllib.parse import unquote_plus

import requests

from clinvardl import logcdl
from clinvardl.models import ESummaryResult
from clinvardl.operation import BASE_URL_ESUMMARY, BaseOperation, RateLimiter
from clinvardl.parsers import new_esummary_parser
from clinvardl.query import Query

_SMALL_BODY = 1024


class ESummaryOperation(BaseOperation):
    """Runs ESummary for a WebEnv and query key, buffered or streamed."""

    def __init__(
        self,
        session: requests.Session | None = None,
        rate_limiter: RateLimiter | None = None,
        *,
        cancelled: threading.Event | None = None,
        timeout: float | None = 60.0,
    ) -> None:
        super().__init__(BASE_URL_ESUMMARY, session, rate_limiter, cancelled=cancelled, timeout=timeout)

    def _prepare(self, web_env: str, query_key: str, query: Query, label: str) -> str:
        self.parameters["WebEnv"] = web_env
        self.parameters["query_key"] = query_key
        url = self.build_url()
        logcdl.debug("%s for query '%v': '%s'", label, query, unquote_plus(url))
        return url

    def execute(self, web_env: str, query_key: str, query: Query) -> ESummaryResult:
        """Fetch summaries, streaming the body if streaming is enabled."""
        if self.use_stream:
            logcdl.debug("using stream for esummary")
            return self.execute_stream(web_env, query_key, query)
        logcdl.debug("using non-stream for esummary")
        return self.execute_without_stream(web_env, query_key, query)

    def execute_stream(self, web_env: str, query_key: str, query: Query) -> ESummaryResult:
        """Fetch summaries, reading the response in chunks."""
        url = self._prepare(web_env, query_key, query, "esummary stream url")
        buffer = bytearray()
        self._do_stream_request("GET", url, self.parameters, buffer.extend)
        parser = new_esummary_parser(self.ret_mode())
        return parser.parse_esummary(bytes(buffer))

    def execute_without_stream(self, web_env: str, query_key: str, query: Query) -> ESummaryResult:
        """Fetch summaries, reading the whole response at once."""
        url = self._prepare(web_env, query_key, query, "esummary url")
        body = self._do_request("GET", url, self.parameters)

        if len(body) < _SMALL_BODY:
            logcdl.debug("response body length: %d bytes for esummary query '%v'", len(body), query)
            logcdl.debug("response body: %s", body.decode("utf-8", errors="replace"))

        parser = new_esummary_parser(self.ret_mode())
        return parser.parse_esummary(body)