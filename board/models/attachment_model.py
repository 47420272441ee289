from board.db import db


class Attachment(db.Model):
    """File metadata for a post; the bytes live in the blob store."""

    __tablename__ = "post_attachments"

    post_id = db.Column(
        db.Integer,
        db.ForeignKey("posts.id", ondelete="CASCADE"),
        primary_key=True
    )
    name = db.Column(db.String(255), primary_key=True)
