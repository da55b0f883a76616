"""Key/value stores for visitor preferences."""

from fastapi import Request, Response

from delfina_home.application.interfaces import KeyValueStore

COOKIE_MAX_AGE = 60 * 60 * 24 * 365


class InMemoryKeyValueStore(KeyValueStore):
    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class CookieKeyValueStore(KeyValueStore):
    """Reads from the request cookies and writes back through the response."""

    def __init__(self, request: Request, response: Response):
        self._request = request
        self._response = response
        self._written: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        if key in self._written:
            return self._written[key]
        return self._request.cookies.get(key)

    def set(self, key: str, value: str) -> None:
        self._written[key] = value
        self._response.set_cookie(key, value, max_age=COOKIE_MAX_AGE, samesite="lax")
