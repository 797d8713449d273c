from twobbble.models.dribbble import (
    Bucket,
    Comment,
    Like,
    LikeShotResponse,
    NullResponse,
    Shot,
    ShotImages,
    ShotList,
    ShotSort,
    ShotTimeframe,
    Token,
    User,
    UserScope,
)

__all__ = [
    "Bucket",
    "Comment",
    "Like",
    "LikeShotResponse",
    "NullResponse",
    "Shot",
    "ShotImages",
    "ShotList",
    "ShotSort",
    "ShotTimeframe",
    "Token",
    "User",
    "UserScope",
]
