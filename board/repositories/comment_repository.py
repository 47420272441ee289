from board.db import db
from board.models.comment_model import Comment


def create_comment(post_id, author_email, text):
    comment = Comment(
        post_id=post_id,
        author_email=author_email,
        text=text.strip()
    )
    db.session.add(comment)
    db.session.flush()
    return comment


def get_by_id(comment_id: int):
    return db.session.get(Comment, comment_id)


def get_comments_by_post(post_id: int):
    return (
        Comment.query
        .filter_by(post_id=post_id)
        .order_by(Comment.id)
        .all()
    )


def delete_comment(comment):
    db.session.delete(comment)


def delete_by_post_id(post_id: int) -> int:
    return Comment.query.filter_by(post_id=post_id).delete()
