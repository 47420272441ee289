from datetime import datetime

from sqlalchemy.orm import validates

from board.db import db


class Post(db.Model):
    __tablename__ = "posts"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(300), nullable=False)
    content = db.Column(db.Text, nullable=False)
    author_email = db.Column(
        db.String(255),
        db.ForeignKey("members.email"),
        nullable=False
    )
    inserted_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    author = db.relationship("Member", lazy="joined")

    @validates("author_email")
    def _keep_author(self, key, value):
        if self.author_email is not None and value != self.author_email:
            raise ValueError("Post author cannot be changed")
        return value

    def revise(self, title: str, content: str):
        self.title = title
        self.content = content
