from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class PostSummary:
    id: int
    title: str
    writer: str
    author_email: str
    inserted_at: datetime
    comment_count: int = 0
    file_count: int = 0
    like_count: int = 0


@dataclass(frozen=True)
class AttachmentDescriptor:
    name: str
    path: str


@dataclass(frozen=True)
class PostDetail:
    id: int
    title: str
    content: str
    writer: str
    author_email: str
    inserted_at: datetime
    files: list[AttachmentDescriptor] = field(default_factory=list)


@dataclass(frozen=True)
class PageInfo:
    total_pages: int
    left_page_number: int
    right_page_number: int
    current_page_number: int


@dataclass(frozen=True)
class PostPage:
    posts: list[PostSummary]
    page_info: PageInfo


@dataclass(frozen=True)
class Page:
    """One window of rows from a paged query."""

    items: list
    total: int
    total_pages: int
