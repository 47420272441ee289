from flask_jwt_extended import create_access_token, create_refresh_token
from werkzeug.security import check_password_hash, generate_password_hash

from board.db import transaction
from board.errors import Unauthorized, ValidationError, returns_result
from board.repositories import member_repository


def _require_non_empty_string(value):
    return isinstance(value, str) and value.strip()


@returns_result
def register(email, password, nick_name):
    if not _require_non_empty_string(email) or not _require_non_empty_string(password) or not _require_non_empty_string(nick_name):
        raise ValidationError("Missing fields")

    email = email.strip()
    nick_name = nick_name.strip()

    with transaction():
        if member_repository.get_by_email(email):
            raise ValidationError("Email already registered")
        if member_repository.get_by_nick_name(nick_name):
            raise ValidationError("Nick name already taken")

        member_repository.create_member(
            email=email,
            password_hash=generate_password_hash(password),
            nick_name=nick_name,
        )
    return email


@returns_result
def login(email, password):
    if not _require_non_empty_string(email) or not _require_non_empty_string(password):
        raise Unauthorized("Invalid credentials")

    email = email.strip()

    member = member_repository.get_by_email(email)
    if not member or not check_password_hash(member.password_hash, password):
        raise Unauthorized("Invalid credentials")

    return {
        "access_token": create_access_token(identity=email),
        "refresh_token": create_refresh_token(identity=email)
    }


def refresh_access_token(email):
    return {
        "access_token": create_access_token(identity=email)
    }
