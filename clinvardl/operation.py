"""Shared request machinery for the Entrez utilities."""

from __future__ import annotations

import threading
from collections.abc import Callable
from urllib.parse import parse_qs, urlencode, urlsplit, urlunsplit

import requests

from clinvardl.errors import (
    CategorizedError,
    EmptyResultError,
    EntrezError,
    EntrezTimeoutError,
    ErrorKind,
    HTTPError,
    NetError,
)

BASE_URL = "https://eutils.ncbi.nlm.nih.gov/entrez/eutils/"
BASE_URL_ESEARCH = BASE_URL + "esearch.fcgi"
BASE_URL_EPOST = BASE_URL + "epost.fcgi"
BASE_URL_ESUMMARY = BASE_URL + "esummary.fcgi"

USER_AGENT = "clinvardl/1.0"
STREAM_CHUNK_SIZE = 128 * 1024

RateLimiter = Callable[[], None]
ChunkHandler = Callable[[bytes], None]


class BaseOperation:
    """Parameters and HTTP handling common to every Entrez operation.

    ``rate_limiter``, when given, is called before each request and blocks until
    the request may go out. ``cancelled``, when set, stops requests before they start.
    """

    def __init__(
        self,
        base_url: str,
        session: requests.Session | None = None,
        rate_limiter: RateLimiter | None = None,
        *,
        cancelled: threading.Event | None = None,
        timeout: float | None = 60.0,
    ) -> None:
        self.base_url = base_url
        self.parameters: dict[str, str] = {}
        self.session = session if session is not None else requests.Session()
        self.rate_limiter = rate_limiter
        self.cancelled = cancelled
        self.timeout = timeout
        self.use_stream = False

    def _set_or_delete(self, key: str, value: str) -> BaseOperation:
        if value:
            self.parameters[key] = value
        else:
            self.parameters.pop(key, None)
        return self

    def set_db(self, db: str) -> BaseOperation:
        self.parameters["db"] = db
        return self

    def set_ret_max(self, ret_max: int) -> BaseOperation:
        """Set how many ids a search returns; zero or less removes the limit."""
        return self._set_or_delete("retmax", str(ret_max) if ret_max > 0 else "")

    def set_ret_mode(self, ret_mode: str) -> BaseOperation:
        return self._set_or_delete("retmode", ret_mode)

    def set_use_history(self, use_history: bool) -> BaseOperation:
        return self._set_or_delete("usehistory", "y" if use_history else "")

    def set_email(self, email: str) -> BaseOperation:
        return self._set_or_delete("email", email)

    def set_api_key(self, api_key: str) -> BaseOperation:
        return self._set_or_delete("api_key", api_key)

    def set_tool_name(self, tool: str) -> BaseOperation:
        return self._set_or_delete("tool", tool)

    def set_use_stream(self, use_stream: bool) -> BaseOperation:
        self.use_stream = use_stream
        return self

    def ret_mode(self) -> str:
        """The configured response format, or an empty string."""
        return self.parameters.get("retmode", "")

    def build_url(self) -> str:
        """Return the base URL with all parameters encoded in key order."""
        try:
            parts = urlsplit(self.base_url)
            query = parse_qs(parts.query, keep_blank_values=True)
        except ValueError as exc:
            raise CategorizedError(ErrorKind.URL, f"failed to parse base url: {exc}") from exc
        for key, value in self.parameters.items():
            query[key] = [value]
        encoded = urlencode(sorted(query.items()), doseq=True)
        return urlunsplit(parts._replace(query=encoded))

    def _check_ready(self) -> None:
        if self.cancelled is not None and self.cancelled.is_set():
            raise EntrezTimeoutError("context cancelled before request")
        if self.rate_limiter is not None:
            try:
                self.rate_limiter()
            except Exception as exc:
                raise EntrezTimeoutError("rate limit wait failed", exc) from exc

    def _send(self, method: str, url: str, params: dict[str, str], stream: bool) -> requests.Response:
        self._check_ready()
        headers = {"Connection": "keep-alive", "User-Agent": USER_AGENT}
        data = None
        if method == "POST":
            data = urlencode(sorted(params.items())).encode("utf-8")
            headers["Content-Type"] = "application/x-www-form-urlencoded"
        elif method != "GET":
            raise CategorizedError(ErrorKind.INPUT, f"unsupported http method: {method}")
        try:
            return self.session.request(
                method, url, headers=headers, data=data, timeout=self.timeout, stream=stream
            )
        except requests.RequestException as exc:
            raise NetError("failed to execute request", exc) from exc

    def _do_request(self, method: str, url: str, params: dict[str, str]) -> bytes:
        """Send a request and return the whole body of a successful response."""
        with self._send(method, url, params, stream=False) as response:
            if response.status_code != 200:
                raise HTTPError.from_status(response.status_code)
            try:
                body = response.content
            except requests.RequestException as exc:
                raise NetError("failed to read response body", exc) from exc
        if not body:
            raise EmptyResultError("server returned empty response")
        return body

    def _do_stream_request(
        self, method: str, url: str, params: dict[str, str], handler: ChunkHandler
    ) -> None:
        """Send a request and pass the response body to ``handler`` chunk by chunk."""
        with self._send(method, url, params, stream=True) as response:
            if response.status_code != 200:
                raise HTTPError.from_status(response.status_code)
            chunks = response.iter_content(STREAM_CHUNK_SIZE)
            while True:
                try:
                    chunk = next(chunks)
                except StopIteration:
                    break
                except requests.RequestException as exc:
                    raise NetError("failed to read response body", exc) from exc
                if not chunk:
                    continue
                try:
                    handler(chunk)
                except Exception as exc:
                    raise EntrezError(f"failed to handle response chunk: {exc}") from exc