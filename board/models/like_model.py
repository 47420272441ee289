from board.db import db


class Like(db.Model):
    __tablename__ = "post_likes"

    post_id = db.Column(
        db.Integer,
        db.ForeignKey("posts.id", ondelete="CASCADE"),
        primary_key=True
    )
    member_email = db.Column(
        db.String(255),
        db.ForeignKey("members.email"),
        primary_key=True
    )
