from fastapi import APIRouter, Depends, Request
from ..schemas.posts import PostIn, PostPatch, PostOut, MessageOut
from ..crud import list_posts, get_post, create_post, update_post, delete_post
from ..models import PostStore
from typing import List, Optional

router = APIRouter()

def get_store(request: Request) -> PostStore:
    return request.app.state.store

@router.get('', response_model=List[PostOut])
async def index(store: PostStore = Depends(get_store)):
    return await list_posts(store)

@router.get('/{post_id}', response_model=PostOut)
async def show(post_id: int, store: PostStore = Depends(get_store)):
    return await get_post(store, post_id)

@router.post('', response_model=PostOut, status_code=201)
async def create(payload: PostIn, store: PostStore = Depends(get_store)):
    return await create_post(store, payload)

@router.patch('/{post_id}', response_model=PostOut)
async def update(post_id: int, payload: Optional[PostPatch] = None, store: PostStore = Depends(get_store)):
    return await update_post(store, post_id, payload or PostPatch())

@router.delete('/{post_id}', response_model=MessageOut)
async def delete(post_id: int, store: PostStore = Depends(get_store)):
    await delete_post(store, post_id)
    return {'message': 'Post deleted'}
