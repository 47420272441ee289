from board.extensions.extensions import ma


class CommentResponseSchema(ma.Schema):
    id = ma.Int()
    post_id = ma.Int()
    author_email = ma.Str()
    writer = ma.Function(lambda comment: comment.author.nick_name if comment.author else None)
    text = ma.Str()
    inserted_at = ma.DateTime()
