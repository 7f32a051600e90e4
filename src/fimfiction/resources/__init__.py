"""Resource module exports."""

from .endpoints import BlogPosts, Bookshelves, Chapters, Groups, PrivateMessages, Stories, Users

__all__ = [
    "BlogPosts",
    "Bookshelves",
    "Chapters",
    "Groups",
    "PrivateMessages",
    "Stories",
    "Users",
]
