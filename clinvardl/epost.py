"""The EPost operation: upload ids to the history server."""

from __future__ import annotations

import threading

import requests

from clinvardl.models import EPostResult
from clinvardl.operation import BASE_URL_EPOST, BaseOperation, RateLimiter
from clinvardl.parsers import new_epost_parser
from clinvardl.query import Query


class EPostOperation(BaseOperation):
    """Posts a list of ids and returns the WebEnv and query key that refer to them."""

    def __init__(
        self,
        session: requests.Session | None = None,
        rate_limiter: RateLimiter | None = None,
        *,
        cancelled: threading.Event | None = None,
        timeout: float | None = 60.0,
    ) -> None:
        super().__init__(BASE_URL_EPOST, session, rate_limiter, cancelled=cancelled, timeout=timeout)

    def execute(self, ids: list[str], query: Query) -> EPostResult:
        """Upload ``ids`` for ``query``."""
        self.parameters["id"] = ",".join(ids)
        url = self.build_url()
        body = self._do_request("POST", url, self.parameters)
        parser = new_epost_parser(self.ret_mode())
        return parser.parse_epost(body)