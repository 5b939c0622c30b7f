"""Comment routes. Reads are public; writes need any signed-in user plus the comment policy."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response
from pydantic import BaseModel, Field

from newsroom.domain.comment.command.comment import (
    CreateComment,
    CreateCommentHandler,
    DeleteComment,
    DeleteCommentHandler,
    UpdateComment,
    UpdateCommentHandler,
)
from newsroom.domain.comment.query.comment import (
    CommentDTO,
    GetComment,
    GetCommentHandler,
    ListComments,
    ListCommentsHandler,
)

router = APIRouter(prefix="/comments", tags=["Comments"], route_class=DishkaRoute)


class UpdateCommentRequest(BaseModel):
    text: str = Field(min_length=1, max_length=5000)


class CommentListResponse(BaseModel):
    comments: list[CommentDTO]


@router.post("", response_model=CommentDTO, status_code=201)
async def create_comment(
    body: CreateComment, handler: FromDishka[CreateCommentHandler]
) -> CommentDTO:
    result = await handler.run(body)
    return result.comment


@router.get("", response_model=CommentListResponse)
async def list_comments(
    handler: FromDishka[ListCommentsHandler],
    article_id: UUID | None = None,
) -> CommentListResponse:
    result = await handler.run(ListComments(article_id=article_id))
    return CommentListResponse(comments=result.comments)


@router.get("/{comment_id}", response_model=CommentDTO)
async def get_comment(comment_id: UUID, handler: FromDishka[GetCommentHandler]) -> CommentDTO:
    result = await handler.run(GetComment(comment_id=comment_id))
    return result.comment


@router.patch("/{comment_id}", response_model=CommentDTO)
async def update_comment(
    comment_id: UUID,
    body: UpdateCommentRequest,
    handler: FromDishka[UpdateCommentHandler],
) -> CommentDTO:
    result = await handler.run(UpdateComment(comment_id=comment_id, text=body.text))
    return result.comment


@router.delete("/own/{comment_id}", status_code=204)
async def delete_own_comment(
    comment_id: UUID, handler: FromDishka[DeleteCommentHandler]
) -> Response:
    """Delete one of the caller's own comments. Ownership alone decides, whatever the role."""
    await handler.run(DeleteComment(comment_id=comment_id, own_only=True))
    return Response(status_code=204)


@router.delete("/{comment_id}", status_code=204)
async def delete_comment(
    comment_id: UUID, handler: FromDishka[DeleteCommentHandler]
) -> Response:
    """Delete a comment: its author, a moderator (EDITOR/ADMIN) or the SUPER_ADMIN."""
    await handler.run(DeleteComment(comment_id=comment_id))
    return Response(status_code=204)
