import logging
import math

from board.db import transaction
from board.errors import NotFound, Unauthorized, ValidationError, returns_result
from board.models.post_model import Post
from board.models.post_views import AttachmentDescriptor, PageInfo, PostDetail, PostPage
from board.repositories import (
    attachment_repository,
    comment_repository,
    like_repository,
    member_repository,
    post_repository,
)
from board.services import attachment_service
from board.services.authorization import can_mutate


logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 50
PAGE_WINDOW_SIZE = 10


def _is_blank(value) -> bool:
    return not isinstance(value, str) or not value.strip()


def validate(title, content) -> bool:
    return not _is_blank(title) and not _is_blank(content)


def validate_for_add(title, content) -> bool:
    return validate(title, content)


def validate_for_update(title, content) -> bool:
    return validate(title, content)


def build_page_info(page_number: int, total_pages: int) -> PageInfo:
    right_page_number = math.ceil(page_number / PAGE_WINDOW_SIZE) * PAGE_WINDOW_SIZE
    left_page_number = right_page_number - (PAGE_WINDOW_SIZE - 1)

    return PageInfo(
        total_pages=total_pages,
        left_page_number=max(left_page_number, 1),
        right_page_number=min(right_page_number, total_pages),
        current_page_number=page_number,
    )


def _load_owned_post(post_id: int, caller: str | None) -> Post:
    if caller is None:
        raise Unauthorized("Login required")

    post = post_repository.find_by_id(post_id)
    if not can_mutate(post, caller):
        raise Unauthorized("Only the author can change this post")
    return post


@returns_result
def create_post(title, content, files, caller: str | None) -> int:
    if caller is None:
        raise Unauthorized("Login required")
    if not validate_for_add(title, content):
        raise ValidationError("Title and content are required")

    with transaction():
        author = member_repository.get_by_email(caller)
        if author is None:
            raise NotFound("Member not found")

        post = post_repository.save(
            Post(title=title, content=content, author_email=author.email)
        )
        post_id = post.id

        stored = sum(1 for file in files or [] if attachment_service.add(post_id, file))

    logger.info("Post %s created by %s with %d file(s)", post_id, caller, stored)
    return post_id


@returns_result
def list_posts(keyword: str | None = None, page_number: int = 1,
               page_size: int = DEFAULT_PAGE_SIZE) -> PostPage:
    page_number = max(page_number or 1, 1)
    page_size = min(max(page_size or DEFAULT_PAGE_SIZE, 1), MAX_PAGE_SIZE)

    page = post_repository.find_page(keyword, (page_number - 1) * page_size, page_size)

    return PostPage(
        posts=page.items,
        page_info=build_page_info(page_number, page.total_pages),
    )


@returns_result
def get_post(post_id: int) -> PostDetail:
    post = post_repository.find_by_id(post_id)

    files = [
        AttachmentDescriptor(
            name=attachment.name,
            path=attachment_service.public_path(post.id, attachment.name),
        )
        for attachment in attachment_repository.find_by_post_id(post.id)
    ]

    return PostDetail(
        id=post.id,
        title=post.title,
        content=post.content,
        writer=post.author.nick_name,
        author_email=post.author_email,
        inserted_at=post.inserted_at,
        files=files,
    )


@returns_result
def update_post(post_id: int, title, content, files_to_add, names_to_remove,
                caller: str | None) -> None:
    with transaction():
        post = _load_owned_post(post_id, caller)
        if not validate_for_update(title, content):
            raise ValidationError("Title and content are required")

        removed_keys = [
            key for key in (
                attachment_service.remove(post.id, name) for name in names_to_remove or []
            )
            if key
        ]

        uploaded_keys = {
            key for key in (
                attachment_service.add(post.id, file) for file in files_to_add or []
            )
            if key
        }

        post.revise(title, content)
        post_repository.save(post)

    # blobs go only after the row deletions commit; a re-uploaded name keeps its new blob
    attachment_service.delete_blobs(
        key for key in removed_keys if key not in uploaded_keys
    )

    logger.info("Post %s updated by %s", post_id, caller)


@returns_result
def delete_post(post_id: int, caller: str | None) -> None:
    with transaction():
        post = _load_owned_post(post_id, caller)

        like_repository.delete_by_post(post.id)
        failed_keys = attachment_service.purge(post.id)
        comment_repository.delete_by_post_id(post.id)
        post_repository.delete_by_id(post.id)

    if failed_keys:
        logger.warning(
            "Post %s deleted; %d blob(s) left behind: %s",
            post_id, len(failed_keys), ", ".join(failed_keys),
        )
    else:
        logger.info("Post %s deleted by %s", post_id, caller)
