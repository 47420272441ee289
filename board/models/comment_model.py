from datetime import datetime

from board.db import db


class Comment(db.Model):
    __tablename__ = "comments"

    id = db.Column(db.Integer, primary_key=True)

    post_id = db.Column(
        db.Integer,
        db.ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    author_email = db.Column(
        db.String(255),
        db.ForeignKey("members.email"),
        nullable=False
    )

    text = db.Column(db.Text, nullable=False)

    inserted_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    author = db.relationship("Member", lazy="joined")
