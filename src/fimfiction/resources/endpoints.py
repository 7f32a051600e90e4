"""Endpoint groups, one per fetchable resource kind.

See https://www.fimfiction.net/developers/api/v2/docs
"""

from __future__ import annotations

from .base import Endpoint
from .blog_posts_types import BlogPost
from .bookshelves_types import Bookshelf
from .chapters_types import Chapter
from .groups_types import Group
from .private_messages_types import PrivateMessage
from .stories_types import Story
from .users_types import User


class BlogPosts(Endpoint):
    """``/blog-posts/:id``"""

    path = "blog-posts"
    data_type = BlogPost


class Bookshelves(Endpoint):
    """``/bookshelves/:id``"""

    path = "bookshelves"
    data_type = Bookshelf


class Chapters(Endpoint):
    """``/chapters/:id``"""

    path = "chapters"
    data_type = Chapter


class Groups(Endpoint):
    """``/groups/:id``"""

    path = "groups"
    data_type = Group


class PrivateMessages(Endpoint):
    """``/private-messages/:id``. Requires the read_pms scope."""

    path = "private-messages"
    data_type = PrivateMessage


class Stories(Endpoint):
    """``/stories/:id``"""

    path = "stories"
    data_type = Story


class Users(Endpoint):
    """``/users/:id``"""

    path = "users"
    data_type = User
