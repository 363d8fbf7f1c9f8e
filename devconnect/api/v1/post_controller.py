# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.post_dto import (
    PostCreateRequest,
    CommentCreateRequest,
    PostResponse,
    LikeResponse,
    CommentResponse,
    MessageResponse,
)
from ...application.use_cases.post import (
    CreatePostUseCase,
    ListPostsUseCase,
    GetPostUseCase,
    DeletePostUseCase,
    LikePostUseCase,
    UnlikePostUseCase,
    AddCommentUseCase,
    RemoveCommentUseCase,
)
from ...domain.models.caller import CallerIdentity
from ...di.container import get_container
from .dependencies import get_caller


router = APIRouter(tags=["posts"])


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: PostCreateRequest,
    caller: CallerIdentity = Depends(get_caller),
) -> PostResponse:
    """
    Publish a post as the caller
    
    Args:
        request: Post body
        caller: Authenticated caller; their name and avatar are snapshotted
        
    Returns:
        PostResponse with the stored post
    """
    container = get_container()
    create_use_case = container.get(CreatePostUseCase)
    return await create_use_case.execute(caller.user_id, request)


@router.get("", response_model=List[PostResponse])
async def list_posts(caller: CallerIdentity = Depends(get_caller)) -> List[PostResponse]:
    """List all posts, newest first"""
    container = get_container()
    list_use_case = container.get(ListPostsUseCase)
    return await list_use_case.execute()


@router.put("/like/{post_id}", response_model=List[LikeResponse])
async def like_post(post_id: str, caller: CallerIdentity = Depends(get_caller)) -> List[LikeResponse]:
    """
    Like a post
    
    Returns:
        The post's likes, newest first
    """
    container = get_container()
    like_use_case = container.get(LikePostUseCase)
    return await like_use_case.execute(caller.user_id, post_id)


@router.put("/unlike/{post_id}", response_model=List[LikeResponse])
async def unlike_post(post_id: str, caller: CallerIdentity = Depends(get_caller)) -> List[LikeResponse]:
    container = get_container()
    unlike_use_case = container.get(UnlikePostUseCase)
    return await unlike_use_case.execute(caller.user_id, post_id)


@router.post(
    "/comment/{post_id}",
    response_model=List[CommentResponse],
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    post_id: str,
    request: CommentCreateRequest,
    caller: CallerIdentity = Depends(get_caller),
) -> List[CommentResponse]:
    """
    Comment on a post
    
    Returns:
        The post's comments, newest first
    """
    container = get_container()
    add_comment_use_case = container.get(AddCommentUseCase)
    return await add_comment_use_case.execute(caller.user_id, post_id, request)


@router.delete("/comment/{post_id}/{comment_id}", response_model=List[CommentResponse])
async def remove_comment(
    post_id: str,
    comment_id: str,
    caller: CallerIdentity = Depends(get_caller),
) -> List[CommentResponse]:
    container = get_container()
    remove_comment_use_case = container.get(RemoveCommentUseCase)
    return await remove_comment_use_case.execute(caller.user_id, post_id, comment_id)


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(post_id: str, caller: CallerIdentity = Depends(get_caller)) -> PostResponse:
    container = get_container()
    get_use_case = container.get(GetPostUseCase)
    return await get_use_case.execute(post_id)


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post(post_id: str, caller: CallerIdentity = Depends(get_caller)) -> MessageResponse:
    """
    Delete a post owned by the caller
    
    Raises:
        NotFound: If the post does not exist
        Forbidden: If the caller is not the author
    """
    container = get_container()
    delete_use_case = container.get(DeletePostUseCase)
    return await delete_use_case.execute(caller.user_id, post_id)
