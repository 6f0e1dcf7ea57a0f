"""Permission resolver - can user U do action P?"""

from yetki.application.ports import UnitOfWorkFactory, UserDirectory
from yetki.domain.catalog import permission_ids
from yetki.domain.entities import RoleDefaults, User, UserOverrides
from yetki.domain.exceptions import NotFoundError


def _decide(
    permission_id: str,
    overrides: UserOverrides | None,
    defaults: RoleDefaults | None,
) -> bool:
    if overrides is not None and permission_id in overrides.grants:
        return overrides.grants[permission_id]
    if defaults is not None and permission_id in defaults.grants:
        return defaults.grants[permission_id]
    return False


class PermissionResolver:
    """Resolves a permission: admin, then user override, then role default, then deny.

    Never raises for unknown users, roles or permissions; those resolve to
    False. Performs no writes.
    """

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        user_directory: UserDirectory | None = None,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._users = user_directory

    async def resolve(self, user: User, permission_id: str) -> bool:
        """Check if user has permission_id."""
        if user.is_admin:
            return True

        overrides, defaults = await self._load(user)
        return _decide(permission_id, overrides, defaults)

    async def resolve_user_id(self, user_id: str, permission_id: str) -> bool:
        """Check permission for a user looked up by id. Unknown or inactive users are denied."""
        if self._users is None:
            return False
        user = await self._users.get_by_id(user_id)
        if user is None or not user.active:
            return False
        return await self.resolve(user, permission_id)

    async def effective_permissions(self, user: User) -> dict[str, bool]:
        """Resolved decision for every catalog permission plus any overridden id."""
        if user.is_admin:
            return {pid: True for pid in permission_ids()}

        overrides, defaults = await self._load(user)
        ids = list(permission_ids())
        if overrides is not None:
            ids.extend(pid for pid in overrides.grants if pid not in ids)
        return {pid: _decide(pid, overrides, defaults) for pid in ids}

    async def effective_permissions_for(self, user_id: str) -> dict[str, bool]:
        user = await self._users.get_by_id(user_id) if self._users else None
        if user is None:
            raise NotFoundError("User", user_id)
        return await self.effective_permissions(user)

    async def _load(self, user: User) -> tuple[UserOverrides | None, RoleDefaults | None]:
        async with self._uow_factory() as uow:
            overrides = await uow.overrides.get(user.id)
            defaults = await uow.role_defaults.get(user.role)
        return overrides, defaults
