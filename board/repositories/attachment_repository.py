from board.db import db
from board.models.attachment_model import Attachment


def save(post_id: int, name: str):
    # merge keeps a single row when the same name is uploaded again
    return db.session.merge(Attachment(post_id=post_id, name=name))


def find_by_post_id(post_id: int):
    return (
        Attachment.query
        .filter_by(post_id=post_id)
        .order_by(Attachment.name)
        .all()
    )


def list_file_names_by_post(post_id: int) -> list[str]:
    rows = (
        db.session.query(Attachment.name)
        .filter(Attachment.post_id == post_id)
        .order_by(Attachment.name)
        .all()
    )
    return [name for (name,) in rows]


def delete_by_composite_id(post_id: int, name: str) -> bool:
    attachment = db.session.get(Attachment, (post_id, name))
    if attachment is None:
        return False
    db.session.delete(attachment)
    db.session.flush()
    return True


def delete_by_post(post_id: int) -> int:
    return Attachment.query.filter_by(post_id=post_id).delete()
