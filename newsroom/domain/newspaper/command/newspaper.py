"""Newspaper write commands (editors and above)."""

from datetime import date
from uuid import UUID

from pydantic import Field

from newsroom.domain.auth.model.identity import Identity
from newsroom.domain.auth.model.role import Role
from newsroom.domain.newspaper.model.value import NewspaperId
from newsroom.domain.newspaper.query.newspaper import NewspaperDTO
from newsroom.domain.newspaper.service.newspaper import NewspaperService
from newsroom.domain.shared.authorization.gate import at_least
from newsroom.domain.shared.command import Command, CommandHandler, Result


class NewspaperResult(Result):
    newspaper: NewspaperDTO


class CreateNewspaper(Command):
    title: str = Field(min_length=1, max_length=255)
    issue_date: date
    pdf_url: str = Field(min_length=1)
    cover_image: str | None = None


class CreateNewspaperHandler(CommandHandler[CreateNewspaper, NewspaperResult]):
    __auth__ = at_least(Role.EDITOR)
    identity: Identity
    newspaper_service: NewspaperService

    async def run(self, cmd: CreateNewspaper) -> NewspaperResult:
        newspaper = await self.newspaper_service.create(
            title=cmd.title,
            issue_date=cmd.issue_date,
            pdf_url=cmd.pdf_url,
            cover_image=cmd.cover_image,
        )
        return NewspaperResult(newspaper=NewspaperDTO.from_newspaper(newspaper))


class UpdateNewspaper(Command):
    newspaper_id: UUID
    title: str | None = Field(default=None, min_length=1, max_length=255)
    issue_date: date | None = None
    pdf_url: str | None = Field(default=None, min_length=1)
    cover_image: str | None = None


class UpdateNewspaperHandler(CommandHandler[UpdateNewspaper, NewspaperResult]):
    __auth__ = at_least(Role.EDITOR)
    identity: Identity
    newspaper_service: NewspaperService

    async def run(self, cmd: UpdateNewspaper) -> NewspaperResult:
        changes = cmd.model_dump(exclude_unset=True, exclude={"newspaper_id"})
        newspaper = await self.newspaper_service.update(NewspaperId(cmd.newspaper_id), changes)
        return NewspaperResult(newspaper=NewspaperDTO.from_newspaper(newspaper))


class DeleteNewspaper(Command):
    newspaper_id: UUID


class DeleteNewspaperResult(Result):
    deleted: bool = True


class DeleteNewspaperHandler(CommandHandler[DeleteNewspaper, DeleteNewspaperResult]):
    __auth__ = at_least(Role.EDITOR)
    identity: Identity
    newspaper_service: NewspaperService

    async def run(self, cmd: DeleteNewspaper) -> DeleteNewspaperResult:
        await self.newspaper_service.delete(NewspaperId(cmd.newspaper_id))
        return DeleteNewspaperResult()
