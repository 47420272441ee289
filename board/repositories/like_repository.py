from board.db import db
from board.models.like_model import Like


def find(post_id: int, member_email: str):
    return db.session.get(Like, (post_id, member_email))


def add_like(post_id: int, member_email: str):
    like = Like(post_id=post_id, member_email=member_email)
    db.session.add(like)
    return like


def remove_like(like):
    db.session.delete(like)


def count_by_post(post_id: int) -> int:
    return Like.query.filter_by(post_id=post_id).count()


def delete_by_post(post_id: int) -> int:
    return Like.query.filter_by(post_id=post_id).delete()
