"""Shared fixtures: API payload samples and a client wired for respx mocking."""

from collections.abc import AsyncIterator
from copy import deepcopy
from typing import Any
from urllib.parse import parse_qsl

import httpx
import pytest
from pydantic import SecretStr

from twobbble.clients.dribbble_client import DribbbleClient

BASE_URL = "https://api.dribbble.com/v1"
OAUTH_URL = "https://dribbble.com"
ACCESS_TOKEN = "user-token"

USER_PAYLOAD: dict[str, Any] = {
    "id": 1,
    "name": "Dan Cederholm",
    "username": "simplebits",
    "html_url": "https://dribbble.com/simplebits",
    "avatar_url": "https://d13yacurqjgara.cloudfront.net/users/1/avatars/normal/dc.jpg",
    "bio": "Co-founder &amp; designer of Dribbble.",
    "location": "Salem, MA",
    "links": {"web": "http://simplebits.com", "twitter": "https://twitter.com/simplebits"},
    "buckets_count": 10,
    "comments_received_count": 3395,
    "followers_count": 29262,
    "followings_count": 1728,
    "likes_count": 34954,
    "likes_received_count": 27568,
    "projects_count": 8,
    "rebounds_received_count": 504,
    "shots_count": 214,
    "teams_count": 1,
    "can_upload_shot": True,
    "type": "Player",
    "pro": True,
    "created_at": "2009-07-08T02:51:22Z",
    "updated_at": "2014-02-22T17:10:33Z",
}

SHOT_PAYLOAD: dict[str, Any] = {
    "id": 471756,
    "title": "Sasquatch",
    "description": "<p>Quick, messy, five minute sketch of something that might become a fictional something.</p>",
    "width": 400,
    "height": 300,
    "images": {
        "hidpi": None,
        "normal": "https://d13yacurqjgara.cloudfront.net/users/1/screenshots/471756/sasquatch.png",
        "teaser": "https://d13yacurqjgara.cloudfront.net/users/1/screenshots/471756/sasquatch_teaser.png",
    },
    "views_count": 4372,
    "likes_count": 149,
    "comments_count": 27,
    "attachments_count": 0,
    "rebounds_count": 2,
    "buckets_count": 8,
    "created_at": "2012-03-15T01:52:33Z",
    "updated_at": "2012-03-15T02:12:57Z",
    "html_url": "https://dribbble.com/shots/471756-Sasquatch",
    "animated": False,
    "tags": ["fiction", "sasquatch", "sketch", "wip"],
    "user": USER_PAYLOAD,
    "team": None,
}

COMMENT_PAYLOAD: dict[str, Any] = {
    "id": 1145736,
    "body": "<p>Could he somehow be made to look wet?</p>",
    "likes_count": 1,
    "likes_url": "https://api.dribbble.com/v1/shots/471756/comments/1145736/likes",
    "created_at": "2012-03-15T04:24:39Z",
    "updated_at": "2012-03-15T04:24:39Z",
    "user": USER_PAYLOAD,
}

BUCKET_PAYLOAD: dict[str, Any] = {
    "id": 2754,
    "name": "Great Marks",
    "description": "Collecting superior trademarks and logos.",
    "shots_count": 251,
    "created_at": "2011-05-20T21:05:55Z",
    "updated_at": "2014-02-21T16:37:12Z",
    "user": USER_PAYLOAD,
}

LIKE_PAYLOAD: dict[str, Any] = {
    "id": 52391238,
    "created_at": "2014-01-02T19:19:30Z",
    "shot": SHOT_PAYLOAD,
}

LIKE_SHOT_PAYLOAD: dict[str, Any] = {"id": 52391238, "created_at": "2014-01-02T19:19:30Z"}

TOKEN_PAYLOAD: dict[str, Any] = {
    "access_token": "29ed478ab86c07f1c069b1af76088f7431396b7c4a2523d06911345da82224a0",
    "token_type": "bearer",
    "scope": "public write",
}


def form_fields(request: httpx.Request) -> dict[str, str]:
    """Decode an application/x-www-form-urlencoded request body."""
    return dict(parse_qsl(request.content.decode()))


@pytest.fixture
def user_payload() -> dict[str, Any]:
    return deepcopy(USER_PAYLOAD)


@pytest.fixture
def shot_payload() -> dict[str, Any]:
    return deepcopy(SHOT_PAYLOAD)


@pytest.fixture
def comment_payload() -> dict[str, Any]:
    return deepcopy(COMMENT_PAYLOAD)


@pytest.fixture
def bucket_payload() -> dict[str, Any]:
    return deepcopy(BUCKET_PAYLOAD)


@pytest.fixture
async def dribbble_client() -> AsyncIterator[DribbbleClient]:
    """Client over a real httpx.AsyncClient so respx can intercept requests."""
    async with httpx.AsyncClient() as http_client:
        yield DribbbleClient(
            base_url=BASE_URL,
            oauth_url=OAUTH_URL,
            client_id="app-id",
            client_secret=SecretStr("app-secret"),
            http_client=http_client,
        )
