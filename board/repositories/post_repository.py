import math

from sqlalchemy import func, or_, select

from board.db import db
from board.errors import NotFound
from board.models.attachment_model import Attachment
from board.models.comment_model import Comment
from board.models.like_model import Like
from board.models.member_model import Member
from board.models.post_model import Post
from board.models.post_views import Page, PostSummary


def save(post: Post) -> Post:
    db.session.add(post)
    db.session.flush()
    return post


def find_by_id(post_id: int) -> Post:
    post = db.session.get(Post, post_id)
    if post is None:
        raise NotFound("Post not found")
    return post


def delete_by_id(post_id: int):
    post = db.session.get(Post, post_id)
    if post is not None:
        db.session.delete(post)
        db.session.flush()


def _count_of(model, post_column):
    return (
        select(func.count())
        .select_from(model)
        .where(post_column == Post.id)
        .correlate(Post)
        .scalar_subquery()
    )


def find_page(keyword: str | None, offset: int, limit: int) -> Page:
    comment_count = _count_of(Comment, Comment.post_id)
    file_count = _count_of(Attachment, Attachment.post_id)
    like_count = _count_of(Like, Like.post_id)

    query = (
        db.session.query(
            Post.id,
            Post.title,
            Member.nick_name,
            Post.author_email,
            Post.inserted_at,
            comment_count.label("comment_count"),
            file_count.label("file_count"),
            like_count.label("like_count"),
        )
        .join(Member, Member.email == Post.author_email)
    )

    if keyword:
        pattern = f"%{keyword.strip()}%"
        query = query.filter(or_(Post.title.ilike(pattern), Post.content.ilike(pattern)))

    total = query.count()
    rows = query.order_by(Post.id.desc()).offset(offset).limit(limit).all()

    items = [
        PostSummary(
            id=row.id,
            title=row.title,
            writer=row.nick_name,
            author_email=row.author_email,
            inserted_at=row.inserted_at,
            comment_count=row.comment_count,
            file_count=row.file_count,
            like_count=row.like_count,
        )
        for row in rows
    ]
    return Page(items=items, total=total, total_pages=math.ceil(total / limit) if limit else 0)
