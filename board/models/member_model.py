from datetime import datetime

from board.db import db


class Member(db.Model):
    __tablename__ = "members"

    email = db.Column(db.String(255), primary_key=True)
    password_hash = db.Column(db.String(255), nullable=False)
    nick_name = db.Column(db.String(80), unique=True, nullable=False)
    inserted_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
