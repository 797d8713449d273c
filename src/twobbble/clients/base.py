"""Abstract interface for the Dribbble API client.

Callers depend on this abstraction rather than on the concrete httpx
implementation, so tests and alternative transports can stand in for it.
"""

from abc import ABC, abstractmethod

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


class AbstractDribbbleClient(ABC):
    """Interface for Dribbble API operations.

    Every operation takes the acting user's ``access_token`` (except the
    OAuth exchange) and issues exactly one request.
    """

    # --- Shots ---

    @abstractmethod
    async def get_shots(
        self,
        access_token: str,
        list: ShotList | str | None = None,
        timeframe: ShotTimeframe | str | None = None,
        sort: ShotSort | str | None = None,
        page: int | None = None,
    ) -> list[Shot]: ...

    @abstractmethod
    async def get_user_shots(
        self,
        user: UserScope | str,
        id: int | str | None,
        access_token: str,
        page: int | None = None,
    ) -> list[Shot]: ...

    # --- Comments ---

    @abstractmethod
    async def get_comments(
        self,
        id: int,
        access_token: str,
        page: int | None = None,
        per_page: int | None = None,
    ) -> list[Comment]: ...

    @abstractmethod
    async def create_comment(self, id: int, access_token: str, body: str) -> Comment: ...

    # --- OAuth ---

    @abstractmethod
    async def get_token(
        self,
        oauth_code: str,
        client_id: str | None = None,
        client_secret: str | None = None,
    ) -> Token: ...

    # --- Profile ---

    @abstractmethod
    async def get_my_info(self, access_token: str) -> User: ...

    # --- Likes ---

    @abstractmethod
    async def like_shot(self, id: int, access_token: str) -> LikeShotResponse: ...

    @abstractmethod
    async def check_if_like_shot(self, id: int, access_token: str) -> LikeShotResponse: ...

    @abstractmethod
    async def unlike_shot(self, id: int, access_token: str) -> LikeShotResponse | None: ...

    @abstractmethod
    async def get_my_likes(self, access_token: str, page: int | None = None) -> list[Like]: ...

    # --- Buckets ---

    @abstractmethod
    async def get_my_buckets(
        self, access_token: str, page: int | None = None
    ) -> list[Bucket]: ...

    @abstractmethod
    async def create_bucket(
        self, access_token: str, name: str, description: str | None = None
    ) -> Bucket: ...

    @abstractmethod
    async def delete_bucket(self, id: int, access_token: str) -> Bucket | None: ...

    @abstractmethod
    async def modify_bucket(
        self, id: int, access_token: str, name: str, description: str | None = None
    ) -> Bucket: ...

    @abstractmethod
    async def get_bucket_shots(
        self, id: int, access_token: str, page: int | None = None
    ) -> list[Shot]: ...

    @abstractmethod
    async def remove_shot_from_bucket(
        self, id: int, access_token: str, shot_id: int | None = None
    ) -> Shot | None: ...

    @abstractmethod
    async def add_shot_to_bucket(
        self, id: int, access_token: str, shot_id: int | None = None
    ) -> Shot | None: ...

    # --- Following ---

    @abstractmethod
    async def check_if_following_user(self, id: int, access_token: str) -> NullResponse: ...

    @abstractmethod
    async def follow_user(self, id: int, access_token: str) -> NullResponse: ...

    @abstractmethod
    async def unfollow_user(self, id: int, access_token: str) -> NullResponse: ...

    # --- Lifecycle ---

    @abstractmethod
    async def close(self) -> None: ...
