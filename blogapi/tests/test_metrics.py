import pytest
from prometheus_client import REGISTRY

from blogapi.crud import create_post, delete_post
from blogapi.models import PostStore
from blogapi.schemas.posts import PostIn


def operations(name):
    return REGISTRY.get_sample_value('blogapi_post_operations_total', {'operation': name}) or 0.0


@pytest.mark.asyncio
async def test_operations_update_counters_and_gauge():
    store = PostStore()
    creates, deletes = operations('create'), operations('delete')

    for _ in range(2):
        await create_post(store, PostIn(title='A', content='B', author='C'))
    await delete_post(store, 1)

    assert operations('create') == creates + 2
    assert operations('delete') == deletes + 1
    # gauge reflects the store after the delete
    assert REGISTRY.get_sample_value('blogapi_posts') == 1
