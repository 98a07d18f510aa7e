"""Typed HTTP client for the friends API.

Requests and responses use the API's own pydantic schemas, so callers work with
``FriendCreate`` / ``FriendUpdate`` / ``FriendRead`` rather than raw dicts.
"""

from types import TracebackType

import httpx

from friendbook.core.config import settings
from friendbook.schemas.friend import FriendCreate, FriendRead, FriendUpdate


class ApiError(Exception):
    def __init__(self, status_code: int, text: str) -> None:
        super().__init__(text or f"Request failed: {status_code}")
        self.status_code = status_code
        self.text = text


class FriendsClient:
    def __init__(
        self,
        base_url: str | None = None,
        http: httpx.Client | None = None,
        api_prefix: str = settings.api_prefix,
        timeout: float = 10.0,
    ) -> None:
        self._owns_http = http is None
        self._http = http or httpx.Client(base_url=base_url or settings.api_base_url, timeout=timeout)
        self._root = f"{api_prefix}/friends"

    def __enter__(self) -> "FriendsClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def _check(self, response: httpx.Response) -> httpx.Response:
        if not response.is_success:
            raise ApiError(response.status_code, response.text)
        return response

    def list_friends(self) -> list[FriendRead]:
        response = self._check(self._http.get(self._root))
        return [FriendRead.model_validate(item) for item in response.json()]

    def get_friend(self, friend_id: int) -> FriendRead:
        response = self._check(self._http.get(f"{self._root}/{friend_id}"))
        return FriendRead.model_validate(response.json())

    def create_friend(self, payload: FriendCreate) -> FriendRead:
        response = self._check(self._http.post(self._root, json=payload.model_dump(mode="json", by_alias=True)))
        return FriendRead.model_validate(response.json())

    def update_friend(self, friend_id: int, payload: FriendUpdate) -> FriendRead:
        body = payload.model_dump(mode="json", by_alias=True, exclude_unset=True)
        response = self._check(self._http.put(f"{self._root}/{friend_id}", json=body))
        return FriendRead.model_validate(response.json())

    def delete_friend(self, friend_id: int) -> None:
        self._check(self._http.delete(f"{self._root}/{friend_id}"))
