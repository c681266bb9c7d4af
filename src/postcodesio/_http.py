"""Internal HTTP session management."""

import threading

import httpx


class _Session:
    """
    Issues GET requests through a reusable httpx.Client.

    A client passed in by the caller is borrowed and left open on close().
    Otherwise one is created on first use, with no timeout so that an
    unconfigured call behaves like an unbounded one. Redirects are
    followed whichever client is used.
    """

    def __init__(
        self,
        client: httpx.Client | None = None,
        timeout: float | httpx.Timeout | None = None,
    ):
        self._client = client
        self._owns_client = client is None
        self._timeout = timeout
        self._lock = threading.Lock()

    def get_client(self) -> httpx.Client:
        """Return the underlying client, creating one if needed."""
        with self._lock:
            if self._client is None:
                self._client = httpx.Client(timeout=self._timeout)
            return self._client

    def get(
        self, url: str, timeout: float | httpx.Timeout | None = None
    ) -> httpx.Response:
        """
        Send a GET for *url* and return the response with its body unread.

        The caller must close the response. Transport failures propagate
        as httpx.HTTPError subclasses.
        """
        client = self.get_client()
        if timeout is None:
            request = client.build_request("GET", url)
        else:
            request = client.build_request("GET", url, timeout=timeout)
        return client.send(request, stream=True, follow_redirects=True)

    def close(self) -> None:
        """Close the client if this session created it."""
        with self._lock:
            if self._owns_client and self._client is not None:
                self._client.close()
                self._client = None
