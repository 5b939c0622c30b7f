"""ListUsers query and handler."""

from newsroom.domain.auth.model.identity import Identity
from newsroom.domain.auth.model.role import Role, RoleName
from newsroom.domain.auth.query.get_user import UserDTO
from newsroom.domain.auth.service.user import UserService
from newsroom.domain.shared.authorization.gate import at_least
from newsroom.domain.shared.query import Query, QueryHandler
from newsroom.domain.shared.query import Result as QueryResult


class ListUsers(Query):
    role: RoleName | None = None


class ListUsersResult(QueryResult):
    users: list[UserDTO]


class ListUsersHandler(QueryHandler[ListUsers, ListUsersResult]):
    __auth__ = at_least(Role.ADMIN)
    identity: Identity
    user_service: UserService

    async def run(self, query: ListUsers) -> ListUsersResult:
        users = await self.user_service.list_users(role=query.role)
        return ListUsersResult(users=[UserDTO.from_user(u) for u in users])
