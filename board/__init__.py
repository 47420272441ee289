import logging

from flask import Flask

from board.config import Config
from board.db import db
from board.extensions.extensions import jwt, ma


def _configure_logging(app):
    level = app.config.get("LOG_LEVEL", "INFO")
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logging.getLogger("board").setLevel(level)
    app.logger.setLevel(level)


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    _configure_logging(app)

    db.init_app(app)
    jwt.init_app(app)
    ma.init_app(app)

    from board.routes.comment_routes import comment_bp
    from board.routes.like_routes import like_bp
    from board.routes.member_routes import member_bp
    from board.routes.post_routes import post_bp

    app.register_blueprint(member_bp, url_prefix="/api")
    app.register_blueprint(post_bp, url_prefix="/api")
    app.register_blueprint(comment_bp, url_prefix="/api")
    app.register_blueprint(like_bp, url_prefix="/api")

    with app.app_context():
        from board.models import (  # noqa: F401
            attachment_model,
            comment_model,
            like_model,
            member_model,
            post_model,
        )
        db.create_all()

    app.logger.info("Board backend ready (bucket=%s)", app.config["MINIO_BUCKET"])
    return app
