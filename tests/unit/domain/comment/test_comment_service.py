"""Unit tests for CommentService moderation rules."""

from unittest.mock import AsyncMock

import pytest

from newsroom.config import JwtConfig
from newsroom.domain.article.model.value import ArticleId
from newsroom.domain.auth.model.principal import Principal
from newsroom.domain.auth.model.role import Role
from newsroom.domain.auth.model.value import UserId
from newsroom.domain.auth.service.authorization import AuthorizationGate
from newsroom.domain.auth.service.token import TokenService
from newsroom.domain.comment.model.comment import Comment
from newsroom.domain.comment.model.value import CommentId
from newsroom.domain.comment.service.comment import CommentService
from newsroom.domain.shared.error import AuthorizationError, NotFoundError


def _principal(role: Role, user_id: UserId | None = None) -> Principal:
    return Principal(user_id=user_id or UserId.generate(), role=role)


def _comment(author_id: UserId) -> Comment:
    return Comment.create(author_id=author_id, article_id=ArticleId.generate(), text="Zo'r")


@pytest.fixture
def comment_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.get.return_value = None
    return repo


@pytest.fixture
def article_repo() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def user_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.get.return_value = object()
    return repo


@pytest.fixture
def service(
    comment_repo: AsyncMock, article_repo: AsyncMock, user_repo: AsyncMock
) -> CommentService:
    gate = AuthorizationGate(
        _token_service=TokenService(_config=JwtConfig(secret="test-secret-for-unit-tests-min-32"))
    )
    return CommentService(
        _comment_repo=comment_repo,
        _article_repo=article_repo,
        _user_repo=user_repo,
        _gate=gate,
    )


@pytest.mark.asyncio
async def test_comment_on_missing_article_is_not_found(
    service: CommentService, article_repo: AsyncMock
) -> None:
    article_repo.get.return_value = None
    with pytest.raises(NotFoundError):
        await service.create(_principal(Role.USER), ArticleId.generate(), "Salom")


@pytest.mark.asyncio
async def test_comment_by_deleted_user_is_not_found(
    service: CommentService, comment_repo: AsyncMock, user_repo: AsyncMock
) -> None:
    user_repo.get.return_value = None
    with pytest.raises(NotFoundError, match="User not found"):
        await service.create(_principal(Role.USER), ArticleId.generate(), "Salom")
    comment_repo.save.assert_not_awaited()


@pytest.mark.asyncio
async def test_author_edits_own_comment(service: CommentService, comment_repo: AsyncMock) -> None:
    me = _principal(Role.USER)
    stored = _comment(me.user_id)
    comment_repo.get.return_value = stored

    updated = await service.update(me, stored.id, "Tahrirlangan")

    assert updated.text == "Tahrirlangan"
    comment_repo.update.assert_awaited_once_with(stored)


@pytest.mark.asyncio
async def test_stranger_cannot_edit(service: CommentService, comment_repo: AsyncMock) -> None:
    comment_repo.get.return_value = _comment(UserId.generate())

    with pytest.raises(AuthorizationError):
        await service.update(_principal(Role.REPORTER), CommentId.generate(), "Hack")


@pytest.mark.asyncio
@pytest.mark.parametrize("role", [Role.EDITOR, Role.ADMIN, Role.SUPER_ADMIN])
async def test_moderators_delete_any_comment(
    service: CommentService, comment_repo: AsyncMock, role: Role
) -> None:
    stored = _comment(UserId.generate())
    comment_repo.get.return_value = stored

    await service.delete(_principal(role), stored.id)

    comment_repo.delete.assert_awaited_once_with(stored.id)


@pytest.mark.asyncio
async def test_user_cannot_delete_others_comment(
    service: CommentService, comment_repo: AsyncMock
) -> None:
    comment_repo.get.return_value = _comment(UserId.generate())

    with pytest.raises(AuthorizationError):
        await service.delete(_principal(Role.USER), CommentId.generate())

    comment_repo.delete.assert_not_awaited()
