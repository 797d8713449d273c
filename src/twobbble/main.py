"""Command line entry point for the twobbble client.

Composition Root: loads settings, configures logging and wires the concrete
DribbbleClient. Each subcommand performs one API call and prints the decoded
result as JSON on stdout.
"""

import argparse
import asyncio
import json
import sys
from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel

from twobbble import __version__
from twobbble.clients.base import AbstractDribbbleClient
from twobbble.clients.dribbble_client import DribbbleClient
from twobbble.clients.errors import DribbbleApiError, DribbbleClientError
from twobbble.config import load_settings
from twobbble.logger import get_logger, setup_logging
from twobbble.models.dribbble import ShotList, ShotSort, ShotTimeframe, UserScope


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="twobbble", description="Query the Dribbble API.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    commands = parser.add_subparsers(dest="command", required=True)

    shots = commands.add_parser("shots", help="list shots")
    shots.add_argument("--list", choices=[v.value for v in ShotList])
    shots.add_argument("--sort", choices=[v.value for v in ShotSort])
    shots.add_argument("--timeframe", choices=[v.value for v in ShotTimeframe])
    shots.add_argument("--page", type=int)

    comments = commands.add_parser("comments", help="list comments on a shot")
    comments.add_argument("shot_id", type=int)
    comments.add_argument("--page", type=int)
    comments.add_argument("--per-page", type=int)

    commands.add_parser("me", help="show the authenticated user")

    likes = commands.add_parser("likes", help="list shots the authenticated user liked")
    likes.add_argument("--page", type=int)

    buckets = commands.add_parser("buckets", help="list the authenticated user's buckets")
    buckets.add_argument("--page", type=int)

    bucket_shots = commands.add_parser("bucket-shots", help="list shots in a bucket")
    bucket_shots.add_argument("bucket_id", type=int)
    bucket_shots.add_argument("--page", type=int)

    user_shots = commands.add_parser("user-shots", help="list a user's shots")
    user_shots.add_argument("--user-id", type=int, help="omit for the authenticated user")
    user_shots.add_argument("--page", type=int)

    token = commands.add_parser("token", help="exchange an OAuth code for an access token")
    token.add_argument("code")

    return parser


async def dispatch(
    client: AbstractDribbbleClient, args: argparse.Namespace, access_token: str
) -> Any:
    """Run the API call selected by ``args``."""
    match args.command:
        case "shots":
            return await client.get_shots(
                access_token, list=args.list, timeframe=args.timeframe, sort=args.sort, page=args.page
            )
        case "comments":
            return await client.get_comments(
                args.shot_id, access_token, page=args.page, per_page=args.per_page
            )
        case "me":
            return await client.get_my_info(access_token)
        case "likes":
            return await client.get_my_likes(access_token, page=args.page)
        case "buckets":
            return await client.get_my_buckets(access_token, page=args.page)
        case "bucket-shots":
            return await client.get_bucket_shots(args.bucket_id, access_token, page=args.page)
        case "user-shots":
            scope = UserScope.USER if args.user_id is None else UserScope.USERS
            return await client.get_user_shots(scope, args.user_id, access_token, page=args.page)
        case "token":
            return await client.get_token(args.code)
    raise ValueError(f"Unknown command: {args.command}")


def _to_jsonable(result: Any) -> Any:
    if isinstance(result, BaseModel):
        return result.model_dump(mode="json")
    if isinstance(result, list):
        return [_to_jsonable(item) for item in result]
    return result


async def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger = get_logger("twobbble.main")

    access_token = (
        settings.dribbble_access_token.get_secret_value()
        if settings.dribbble_access_token
        else ""
    )

    async with DribbbleClient.from_settings(settings) as client:
        try:
            result = await dispatch(client, args, access_token)
        except DribbbleApiError as e:
            logger.error("command_failed", command=args.command, status=e.status_code, error=str(e))
            return 1
        except DribbbleClientError as e:
            logger.error("command_failed", command=args.command, error=str(e))
            return 1

    json.dump(_to_jsonable(result), sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


def run() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
