"""
Aggregate statistics over an in-memory list of blogs.

Every function here is pure: it reads ``title``, ``author`` and ``likes``
from the records it is given and never mutates them. Empty input yields
``0`` for :func:`total_likes` and ``None`` for the other aggregates.

Ties are broken by input order. The favourite blog is the first record
reaching the highest like count, and the per-author aggregates pick the
author who appears first in the input among those sharing the maximum.
"""

from collections import Counter
from collections.abc import Sequence
from typing import Protocol

from bloglist.schemas.stats import AuthorBlogCount, AuthorLikes, BlogStatistics, FavouriteBlog


class BlogRecord(Protocol):
    """Read-only view of a blog as consumed by the statistics functions."""

    @property
    def title(self) -> str: ...

    @property
    def author(self) -> str: ...

    @property
    def likes(self) -> int: ...


def total_likes(blogs: Sequence[BlogRecord]) -> int:
    """Return the sum of likes across all blogs."""
    return sum(blog.likes for blog in blogs)


def favourite_blog(blogs: Sequence[BlogRecord]) -> FavouriteBlog | None:
    """
    Return the blog with the most likes.

    Args:
        blogs: Blogs in input order.

    Returns:
        FavouriteBlog | None: Title, author and likes of the first blog with
        the highest like count, or None for an empty list.
    """
    if not blogs:
        return None

    best = blogs[0]
    for blog in blogs[1:]:
        if blog.likes > best.likes:
            best = blog

    return FavouriteBlog(title=best.title, author=best.author, likes=best.likes)


def most_blogs(blogs: Sequence[BlogRecord]) -> AuthorBlogCount | None:
    """
    Return the author with the most blogs and their blog count.

    Args:
        blogs: Blogs in input order.

    Returns:
        AuthorBlogCount | None: Winning author and count, or None for an
        empty list.
    """
    if not blogs:
        return None

    counts = Counter(blog.author for blog in blogs)
    # max() keeps the first key on ties; Counter preserves first-seen order
    author = max(counts, key=counts.__getitem__)
    return AuthorBlogCount(author=author, blogs=counts[author])


def most_likes(blogs: Sequence[BlogRecord]) -> AuthorLikes | None:
    """
    Return the author whose blogs have the most likes in total.

    Args:
        blogs: Blogs in input order.

    Returns:
        AuthorLikes | None: Winning author and their summed likes, or None
        for an empty list.
    """
    if not blogs:
        return None

    likes_by_author: dict[str, int] = {}
    for blog in blogs:
        likes_by_author[blog.author] = likes_by_author.get(blog.author, 0) + blog.likes

    author = max(likes_by_author, key=likes_by_author.__getitem__)
    return AuthorLikes(author=author, likes=likes_by_author[author])


def blog_statistics(blogs: Sequence[BlogRecord]) -> BlogStatistics:
    """Compute every aggregate for one list of blogs."""
    return BlogStatistics(
        total_likes=total_likes(blogs),
        favourite_blog=favourite_blog(blogs),
        most_blogs=most_blogs(blogs),
        most_likes=most_likes(blogs),
    )
