from board.db import transaction
from board.errors import Unauthorized, returns_result
from board.repositories import like_repository, post_repository


@returns_result
def toggle_like(post_id: int, caller: str | None):
    if caller is None:
        raise Unauthorized("Login required")

    with transaction():
        post_repository.find_by_id(post_id)
        like = like_repository.find(post_id, caller)
        if like:
            like_repository.remove_like(like)
        else:
            like_repository.add_like(post_id, caller)

    return {
        "like": like is None,
        "count": like_repository.count_by_post(post_id),
    }


@returns_result
def get_like_info(post_id: int, caller: str | None = None):
    post_repository.find_by_id(post_id)
    return {
        "like": caller is not None and like_repository.find(post_id, caller) is not None,
        "count": like_repository.count_by_post(post_id),
    }
