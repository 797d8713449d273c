"""Async HTTP client for the Dribbble v1 API.

Implements AbstractDribbbleClient by executing entries of the endpoint
table: every public method forwards its arguments to ``_call``, which builds,
sends and decodes exactly one request.
"""

from collections.abc import Callable
from typing import Any

import httpx
from pydantic import SecretStr

from twobbble.clients.base import AbstractDribbbleClient
from twobbble.clients.endpoints import (
    ENDPOINTS,
    PreparedRequest,
    build_request,
    decode_payload,
)
from twobbble.clients.errors import (
    DribbbleApiError,
    DribbbleDecodeError,
    DribbbleTransportError,
    InvalidParameterError,
    MissingParameterError,
)
from twobbble.config import Settings
from twobbble.logger import get_logger
from twobbble.models.dribbble import (
    Bucket,
    Comment,
    Like,
    LikeShotResponse,
    NullResponse,
    Shot,
    ShotList,
    ShotSort,
    ShotTimeframe,
    Token,
    User,
    UserScope,
)

logger = get_logger(__name__)

_DEFAULT_BASE_URL = "https://api.dribbble.com/v1"
_DEFAULT_OAUTH_URL = "https://dribbble.com"


def _build_rate_limit_logging_hook() -> Callable[[httpx.Response], Any]:
    """Create an httpx response event hook that logs Dribbble's rate limit headers."""

    async def hook(response: httpx.Response) -> None:
        limit = response.headers.get("X-RateLimit-Limit")
        remaining = response.headers.get("X-RateLimit-Remaining")
        reset = response.headers.get("X-RateLimit-Reset")
        if remaining is None and reset is None:
            return
        logger.debug(
            "api_rate_limit",
            url=str(response.request.url.path),
            rate_limit=limit,
            rate_limit_remaining=remaining,
            rate_limit_reset=reset,
        )

    return hook


class DribbbleClient(AbstractDribbbleClient):
    """Concrete Dribbble API client over httpx.

    Pass ``http_client`` to share a caller-managed ``httpx.AsyncClient``;
    otherwise one is created on first use and closed by ``close()``.
    """

    def __init__(
        self,
        base_url: str = _DEFAULT_BASE_URL,
        oauth_url: str = _DEFAULT_OAUTH_URL,
        client_id: str = "",
        client_secret: SecretStr | None = None,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._oauth_url = oauth_url.rstrip("/")
        self._client_id = client_id
        self._client_secret = client_secret or SecretStr("")
        self._timeout = timeout
        self._client = http_client
        self._owns_client = http_client is None

    @classmethod
    def from_settings(
        cls, settings: Settings, http_client: httpx.AsyncClient | None = None
    ) -> "DribbbleClient":
        return cls(
            base_url=settings.dribbble_base_url,
            oauth_url=settings.dribbble_oauth_url,
            client_id=settings.dribbble_client_id,
            client_secret=settings.dribbble_client_secret,
            timeout=settings.request_timeout_seconds,
            http_client=http_client,
        )

    async def __aenter__(self) -> "DribbbleClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or (self._owns_client and self._client.is_closed):
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                headers={"Accept": "application/json"},
                event_hooks={"response": [_build_rate_limit_logging_hook()]},
            )
        return self._client

    def _url(self, request: PreparedRequest) -> str:
        if request.host_relative:
            return f"{self._oauth_url}{request.path}"
        return f"{self._base_url}/{request.path}"

    async def _send(self, request: PreparedRequest) -> httpx.Response:
        client = self._get_client()
        try:
            response = await client.request(
                request.method,
                self._url(request),
                params=request.params or None,
                data=request.data,
            )
        except httpx.RequestError as e:
            logger.warning(
                "api_transport_error",
                operation=request.operation,
                method=request.method,
                path=request.path,
                error=str(e),
            )
            raise DribbbleTransportError(
                f"{request.operation}: {type(e).__name__}: {e}", request.operation
            ) from e

        logger.debug(
            "api_call",
            operation=request.operation,
            method=request.method,
            path=request.path,
            status=response.status_code,
        )
        if not response.is_success:
            logger.warning(
                "api_error",
                operation=request.operation,
                method=request.method,
                path=request.path,
                status=response.status_code,
            )
            raise DribbbleApiError(request.operation, response.status_code, response.text)
        return response

    async def _call(self, operation: str, **arguments: Any) -> Any:
        endpoint = ENDPOINTS[operation]
        request = build_request(endpoint, arguments)
        response = await self._send(request)

        if endpoint.result is NullResponse:
            return NullResponse()
        if endpoint.allow_empty and (
            response.status_code == httpx.codes.NO_CONTENT or not response.content.strip()
        ):
            return None
        try:
            payload = response.json()
        except ValueError as e:
            raise DribbbleDecodeError(operation, response.text, "body is not JSON") from e
        return decode_payload(endpoint, payload, response.text)

    # --- Shots ---

    async def get_shots(
        self,
        access_token: str,
        list: ShotList | str | None = None,
        timeframe: ShotTimeframe | str | None = None,
        sort: ShotSort | str | None = None,
        page: int | None = None,
    ) -> list[Shot]:
        return await self._call(
            "get_shots",
            access_token=access_token,
            list=list,
            timeframe=timeframe,
            sort=sort,
            page=page,
        )

    async def get_user_shots(
        self,
        user: UserScope | str,
        id: int | str | None,
        access_token: str,
        page: int | None = None,
    ) -> list[Shot]:
        """List shots of the caller (``user``, no id) or of account ``id`` (``users``)."""
        if user in (None, ""):
            raise MissingParameterError("get_user_shots", "user")
        try:
            scope = UserScope(user)
        except ValueError:
            raise InvalidParameterError(
                "get_user_shots", "user", f"must be one of {[s.value for s in UserScope]}"
            ) from None
        if scope is UserScope.USERS and id in (None, ""):
            raise MissingParameterError("get_user_shots", "id")
        return await self._call(
            "get_user_shots", user=scope, id=id, access_token=access_token, page=page
        )

    # --- Comments ---

    async def get_comments(
        self,
        id: int,
        access_token: str,
        page: int | None = None,
        per_page: int | None = None,
    ) -> list[Comment]:
        return await self._call(
            "get_comments", id=id, access_token=access_token, page=page, per_page=per_page
        )

    async def create_comment(self, id: int, access_token: str, body: str) -> Comment:
        comment = await self._call("create_comment", id=id, access_token=access_token, body=body)
        logger.info("comment_created", shot_id=id, comment_id=comment.id)
        return comment

    # --- OAuth ---

    async def get_token(
        self,
        oauth_code: str,
        client_id: str | None = None,
        client_secret: str | None = None,
    ) -> Token:
        """Exchange the code returned by the authorization redirect for a token."""
        return await self._call(
            "get_token",
            client_id=client_id or self._client_id,
            client_secret=client_secret or self._client_secret.get_secret_value(),
            oauth_code=oauth_code,
        )

    # --- Profile ---

    async def get_my_info(self, access_token: str) -> User:
        return await self._call("get_my_info", access_token=access_token)

    # --- Likes ---

    async def like_shot(self, id: int, access_token: str) -> LikeShotResponse:
        return await self._call("like_shot", id=id, access_token=access_token)

    async def check_if_like_shot(self, id: int, access_token: str) -> LikeShotResponse:
        return await self._call("check_if_like_shot", id=id, access_token=access_token)

    async def unlike_shot(self, id: int, access_token: str) -> LikeShotResponse | None:
        return await self._call("unlike_shot", id=id, access_token=access_token)

    async def get_my_likes(self, access_token: str, page: int | None = None) -> list[Like]:
        return await self._call("get_my_likes", access_token=access_token, page=page)

    # --- Buckets ---

    async def get_my_buckets(self, access_token: str, page: int | None = None) -> list[Bucket]:
        return await self._call("get_my_buckets", access_token=access_token, page=page)

    async def create_bucket(
        self, access_token: str, name: str, description: str | None = None
    ) -> Bucket:
        bucket = await self._call(
            "create_bucket", access_token=access_token, name=name, description=description
        )
        logger.info("bucket_created", bucket_id=bucket.id, name=name)
        return bucket

    async def delete_bucket(self, id: int, access_token: str) -> Bucket | None:
        return await self._call("delete_bucket", id=id, access_token=access_token)

    async def modify_bucket(
        self, id: int, access_token: str, name: str, description: str | None = None
    ) -> Bucket:
        return await self._call(
            "modify_bucket", id=id, access_token=access_token, name=name, description=description
        )

    async def get_bucket_shots(
        self, id: int, access_token: str, page: int | None = None
    ) -> list[Shot]:
        return await self._call("get_bucket_shots", id=id, access_token=access_token, page=page)

    async def remove_shot_from_bucket(
        self, id: int, access_token: str, shot_id: int | None = None
    ) -> Shot | None:
        return await self._call(
            "remove_shot_from_bucket", id=id, access_token=access_token, shot_id=shot_id
        )

    async def add_shot_to_bucket(
        self, id: int, access_token: str, shot_id: int | None = None
    ) -> Shot | None:
        return await self._call(
            "add_shot_to_bucket", id=id, access_token=access_token, shot_id=shot_id
        )

    # --- Following ---

    async def check_if_following_user(self, id: int, access_token: str) -> NullResponse:
        """Succeeds when following; the API answers 404 otherwise (``DribbbleApiError``)."""
        return await self._call("check_if_following_user", id=id, access_token=access_token)

    async def follow_user(self, id: int, access_token: str) -> NullResponse:
        return await self._call("follow_user", id=id, access_token=access_token)

    async def unfollow_user(self, id: int, access_token: str) -> NullResponse:
        return await self._call("unfollow_user", id=id, access_token=access_token)

    # --- Lifecycle ---

    async def close(self) -> None:
        if self._owns_client and self._client and not self._client.is_closed:
            await self._client.aclose()
