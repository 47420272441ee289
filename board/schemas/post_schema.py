from board.extensions.extensions import ma


class AttachmentSchema(ma.Schema):
    name = ma.Str()
    path = ma.Str()


class PostSummarySchema(ma.Schema):
    id = ma.Int()
    title = ma.Str()
    writer = ma.Str()
    author_email = ma.Str()
    inserted_at = ma.DateTime()
    comment_count = ma.Int()
    file_count = ma.Int()
    like_count = ma.Int()


class PostDetailSchema(ma.Schema):
    id = ma.Int()
    title = ma.Str()
    content = ma.Str()
    writer = ma.Str()
    author_email = ma.Str()
    inserted_at = ma.DateTime()
    files = ma.List(ma.Nested(AttachmentSchema))


class PageInfoSchema(ma.Schema):
    total_pages = ma.Int()
    left_page_number = ma.Int()
    right_page_number = ma.Int()
    current_page_number = ma.Int()


class PostPageSchema(ma.Schema):
    posts = ma.List(ma.Nested(PostSummarySchema))
    page_info = ma.Nested(PageInfoSchema)
