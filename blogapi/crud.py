from .models import PostStore
from .models.posts import Post
from .core import record_operation
import logging

logger = logging.getLogger(__name__)


class PostNotFound(Exception):
    def __init__(self, post_id: int):
        super().__init__(f'post {post_id} not found')
        self.post_id = post_id


async def list_posts(store: PostStore):
    async with store.lock:
        record_operation('list', len(store))
        return list(store.posts)

async def get_post(store: PostStore, post_id: int):
    async with store.lock:
        post = store.find(post_id)
        if post is None:
            raise PostNotFound(post_id)
        record_operation('get', len(store))
        return post

async def create_post(store: PostStore, payload):
    async with store.lock:
        post = Post(
            id=store.next_id(),
            title=payload.title,
            content=payload.content,
            author=payload.author,
        )
        store.posts.append(post)
        record_operation('create', len(store))
    logger.info({'msg': 'post_created', 'post_id': post.id})
    return post

async def update_post(store: PostStore, post_id: int, payload):
    """Overwrite the supplied fields of a post in place.

    Empty or null values are skipped, so a field cannot be cleared this way.
    ``date`` is never touched.
    """
    async with store.lock:
        post = store.find(post_id)
        if post is None:
            raise PostNotFound(post_id)
        if payload.title:
            post.title = payload.title
        if payload.content:
            post.content = payload.content
        if payload.author:
            post.author = payload.author
        record_operation('update', len(store))
    logger.info({'msg': 'post_updated', 'post_id': post_id})
    return post

async def delete_post(store: PostStore, post_id: int):
    async with store.lock:
        idx = store.index_of(post_id)
        if idx == -1:
            raise PostNotFound(post_id)
        del store.posts[idx]
        record_operation('delete', len(store))
    logger.info({'msg': 'post_deleted', 'post_id': post_id})
    return True
