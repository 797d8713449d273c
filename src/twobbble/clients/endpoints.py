"""Endpoint contract table for the Dribbble v1 API.

Each ``Endpoint`` binds an operation name to its HTTP method, path template,
parameters and response entity. ``build_request`` turns an endpoint plus call
arguments into a ``PreparedRequest`` and ``decode_payload`` turns a parsed
JSON body into the typed result. Neither performs I/O; the client in
``dribbble_client`` executes what they describe.
"""

import re
from collections.abc import Mapping
from enum import StrEnum
from functools import cache
from typing import Any
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from twobbble.clients.errors import (
    DribbbleDecodeError,
    InvalidParameterError,
    MissingParameterError,
)
from twobbble.models.dribbble import (
    Bucket,
    Comment,
    Like,
    LikeShotResponse,
    NullResponse,
    Shot,
    Token,
    User,
)

_PLACEHOLDER = re.compile(r"\{(\w+)\}")

_INT_RANGES = {
    32: (-(2**31), 2**31 - 1),
    64: (-(2**63), 2**63 - 1),
}


class ParamLocation(StrEnum):
    PATH = "path"
    QUERY = "query"
    FORM = "form"


class Param(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    location: ParamLocation
    required: bool = False
    default: Any = None
    # Name on the wire when it differs from the argument name
    field: str | None = None
    # Identifiers are 64-bit, other integer scalars 32-bit
    bits: int = 64

    @property
    def wire_name(self) -> str:
        return self.field or self.name


class Endpoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    method: str
    path: str
    params: tuple[Param, ...]
    result: type[BaseModel]
    many: bool = False
    # A 204 or empty body is a success carrying no entity
    allow_empty: bool = False

    @property
    def form_encoded(self) -> bool:
        return any(p.location is ParamLocation.FORM for p in self.params)

    @property
    def host_relative(self) -> bool:
        """Leading-slash paths resolve against the host root, not the API base."""
        return self.path.startswith("/")


class PreparedRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    operation: str
    method: str
    path: str
    host_relative: bool = False
    params: dict[str, Any]
    data: dict[str, Any] | None = None


def _path(name: str, required: bool = True) -> Param:
    return Param(name=name, location=ParamLocation.PATH, required=required)


def _query(name: str, required: bool = False, default: Any = None, bits: int = 64) -> Param:
    return Param(
        name=name, location=ParamLocation.QUERY, required=required, default=default, bits=bits
    )


def _field(name: str, required: bool = False, field: str | None = None) -> Param:
    return Param(name=name, location=ParamLocation.FORM, required=required, field=field)


_TOKEN_QUERY = _query("access_token", required=True)
_TOKEN_FIELD = _field("access_token", required=True)
_PAGE = _query("page", bits=32)


ENDPOINTS: dict[str, Endpoint] = {
    e.name: e
    for e in (
        # --- Shots ---
        Endpoint(
            name="get_shots",
            method="GET",
            path="shots",
            params=(_TOKEN_QUERY, _query("list"), _query("timeframe"), _query("sort"), _PAGE),
            result=Shot,
            many=True,
        ),
        Endpoint(
            name="get_user_shots",
            method="GET",
            path="{user}/{id}/shots",
            params=(_path("user"), _path("id", required=False), _TOKEN_QUERY, _PAGE),
            result=Shot,
            many=True,
        ),
        # --- Comments ---
        Endpoint(
            name="get_comments",
            method="GET",
            path="shots/{id}/comments",
            params=(_path("id"), _TOKEN_QUERY, _PAGE, _query("per_page", default=100, bits=32)),
            result=Comment,
            many=True,
        ),
        Endpoint(
            name="create_comment",
            method="POST",
            path="shots/{id}/comments",
            params=(_path("id"), _TOKEN_FIELD, _field("body", required=True)),
            result=Comment,
        ),
        # --- OAuth ---
        Endpoint(
            name="get_token",
            method="POST",
            path="/oauth/token",
            params=(
                _field("client_id", required=True),
                _field("client_secret", required=True),
                _field("oauth_code", required=True, field="code"),
            ),
            result=Token,
        ),
        # --- Profile ---
        Endpoint(
            name="get_my_info",
            method="GET",
            path="user",
            params=(_TOKEN_QUERY,),
            result=User,
        ),
        # --- Likes ---
        Endpoint(
            name="like_shot",
            method="POST",
            path="shots/{id}/like",
            params=(_path("id"), _TOKEN_FIELD),
            result=LikeShotResponse,
        ),
        Endpoint(
            name="check_if_like_shot",
            method="GET",
            path="shots/{id}/like",
            params=(_path("id"), _TOKEN_QUERY),
            result=LikeShotResponse,
        ),
        Endpoint(
            name="unlike_shot",
            method="DELETE",
            path="shots/{id}/like",
            params=(_path("id"), _TOKEN_QUERY),
            result=LikeShotResponse,
            allow_empty=True,
        ),
        Endpoint(
            name="get_my_likes",
            method="GET",
            path="user/likes",
            params=(_TOKEN_QUERY, _PAGE),
            result=Like,
            many=True,
        ),
        # --- Buckets ---
        Endpoint(
            name="get_my_buckets",
            method="GET",
            path="user/buckets",
            params=(_TOKEN_QUERY, _query("page", default=100, bits=32)),
            result=Bucket,
            many=True,
        ),
        Endpoint(
            name="create_bucket",
            method="POST",
            path="buckets",
            params=(_TOKEN_FIELD, _field("name", required=True), _field("description")),
            result=Bucket,
        ),
        Endpoint(
            name="delete_bucket",
            method="DELETE",
            path="buckets/{id}",
            params=(_path("id"), _TOKEN_QUERY),
            result=Bucket,
            allow_empty=True,
        ),
        Endpoint(
            name="modify_bucket",
            method="PUT",
            path="buckets/{id}",
            params=(
                _path("id"),
                _TOKEN_FIELD,
                _field("name", required=True),
                _field("description"),
            ),
            result=Bucket,
        ),
        Endpoint(
            name="get_bucket_shots",
            method="GET",
            path="buckets/{id}/shots",
            params=(_path("id"), _TOKEN_QUERY, _PAGE),
            result=Shot,
            many=True,
        ),
        Endpoint(
            name="remove_shot_from_bucket",
            method="DELETE",
            path="buckets/{id}/shots",
            params=(_path("id"), _TOKEN_QUERY, _query("shot_id")),
            result=Shot,
            allow_empty=True,
        ),
        Endpoint(
            name="add_shot_to_bucket",
            method="PUT",
            path="buckets/{id}/shots",
            params=(_path("id"), _TOKEN_FIELD, _field("shot_id")),
            result=Shot,
            allow_empty=True,
        ),
        # --- Following ---
        Endpoint(
            name="check_if_following_user",
            method="GET",
            path="user/following/{id}",
            params=(_path("id"), _TOKEN_QUERY),
            result=NullResponse,
        ),
        Endpoint(
            name="follow_user",
            method="PUT",
            path="users/{id}/follow",
            params=(_path("id"), _TOKEN_FIELD),
            result=NullResponse,
        ),
        Endpoint(
            name="unfollow_user",
            method="DELETE",
            path="users/{id}/follow",
            params=(_path("id"), _TOKEN_QUERY),
            result=NullResponse,
        ),
    )
}


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value)


def _check_int_range(endpoint: Endpoint, param: Param, value: Any) -> None:
    if isinstance(value, int) and not isinstance(value, bool):
        low, high = _INT_RANGES[param.bits]
        if not low <= value <= high:
            raise InvalidParameterError(
                endpoint.name, param.name, f"is outside the {param.bits}-bit range"
            )


def _render_path(template: str, values: Mapping[str, Any]) -> str:
    """Substitute whole-segment placeholders; a placeholder without a value drops its segment."""
    segments = []
    for segment in template.split("/"):
        match = _PLACEHOLDER.fullmatch(segment)
        if match is None:
            segments.append(segment)
            continue
        value = values.get(match.group(1))
        if value is not None:
            segments.append(quote(str(value), safe=""))
    return "/".join(segments)


def build_request(endpoint: Endpoint, arguments: Mapping[str, Any]) -> PreparedRequest:
    """Validate ``arguments`` against ``endpoint`` and lay them out for the wire.

    Table defaults fill absent optionals, absent optionals without a default
    are left out entirely, and a missing or empty required parameter raises
    ``MissingParameterError``.
    """
    known = {p.name for p in endpoint.params}
    unknown = set(arguments) - known
    if unknown:
        raise InvalidParameterError(endpoint.name, sorted(unknown)[0], "is not accepted")

    path_values: dict[str, Any] = {}
    query: dict[str, Any] = {}
    form: dict[str, Any] = {}

    for param in endpoint.params:
        value = arguments.get(param.name)
        if value is None:
            value = param.default
        if _is_blank(value):
            if param.required:
                raise MissingParameterError(endpoint.name, param.name)
            continue
        _check_int_range(endpoint, param, value)

        if param.location is ParamLocation.PATH:
            path_values[param.name] = value
        elif param.location is ParamLocation.QUERY:
            query[param.wire_name] = value
        else:
            form[param.wire_name] = value

    return PreparedRequest(
        operation=endpoint.name,
        method=endpoint.method,
        path=_render_path(endpoint.path, path_values),
        host_relative=endpoint.host_relative,
        params=query,
        data=form if endpoint.form_encoded else None,
    )


@cache
def _adapter(result: type[BaseModel], many: bool) -> TypeAdapter:
    return TypeAdapter(list[result] if many else result)


def decode_payload(endpoint: Endpoint, payload: Any, body: str = "") -> Any:
    """Validate a parsed JSON body into the endpoint's result type."""
    if endpoint.result is NullResponse:
        return NullResponse()

    try:
        return _adapter(endpoint.result, endpoint.many).validate_python(payload)
    except ValidationError as e:
        raise DribbbleDecodeError(endpoint.name, body, f"{e.error_count()} validation errors") from e
