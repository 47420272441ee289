from board.db import transaction
from board.errors import NotFound, Unauthorized, ValidationError, returns_result
from board.repositories import comment_repository, member_repository, post_repository
from board.services.authorization import can_mutate


@returns_result
def add_comment(post_id: int, text, caller: str | None):
    if caller is None:
        raise Unauthorized("Login required")
    if not isinstance(text, str) or not text.strip():
        raise ValidationError("Comment text is required")

    with transaction():
        if member_repository.get_by_email(caller) is None:
            raise NotFound("Member not found")
        post_repository.find_by_id(post_id)
        comment = comment_repository.create_comment(
            post_id=post_id,
            author_email=caller,
            text=text,
        )
        comment_id = comment.id
    return comment_id


@returns_result
def get_post_comments(post_id: int):
    post_repository.find_by_id(post_id)
    return comment_repository.get_comments_by_post(post_id)


@returns_result
def delete_comment(comment_id: int, caller: str | None):
    if caller is None:
        raise Unauthorized("Login required")

    with transaction():
        comment = comment_repository.get_by_id(comment_id)
        if comment is None:
            raise NotFound("Comment not found")
        if not can_mutate(comment, caller):
            raise Unauthorized("Only the author can delete this comment")
        comment_repository.delete_comment(comment)
