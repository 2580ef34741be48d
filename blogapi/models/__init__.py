import asyncio
from typing import List

from .posts import Post  # noqa: F401


class PostStore:
    """Process-lifetime, ordered collection of posts.

    Callers hold ``lock`` for the whole read-modify-write of an operation.
    """

    def __init__(self):
        self.posts: List[Post] = []
        self.lock = asyncio.Lock()

    def __len__(self):
        return len(self.posts)

    def next_id(self) -> int:
        # max+1 so an id held by a live post is never handed out again
        return max((p.id for p in self.posts), default=0) + 1

    def find(self, post_id: int):
        for post in self.posts:
            if post.id == post_id:
                return post
        return None

    def index_of(self, post_id: int) -> int:
        for i, post in enumerate(self.posts):
            if post.id == post_id:
                return i
        return -1
