from board.db import db
from board.models.member_model import Member


def get_by_email(email: str):
    return db.session.get(Member, email)


def get_by_nick_name(nick_name: str):
    return Member.query.filter_by(nick_name=nick_name).first()


def create_member(email, password_hash, nick_name):
    member = Member(
        email=email,
        password_hash=password_hash,
        nick_name=nick_name
    )
    db.session.add(member)
    db.session.flush()
    return member
