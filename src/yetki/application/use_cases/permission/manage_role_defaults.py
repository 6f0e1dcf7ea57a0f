"""Role default table use case."""

import logging

from yetki.application.dto.grant_dto import GrantEntries, normalize_grants
from yetki.application.ports import Clock, UnitOfWorkFactory
from yetki.domain.catalog import permission_ids
from yetki.domain.entities import RoleDefaults
from yetki.domain.exceptions import NotFoundError
from yetki.domain.value_objects import UserRole

logger = logging.getLogger(__name__)


def parse_role(role: UserRole | str) -> UserRole:
    """Parse a role name, raising NotFoundError for unknown roles."""
    try:
        return UserRole(role)
    except ValueError:
        raise NotFoundError("Role", str(role)) from None


def default_template(role: UserRole) -> dict[str, bool]:
    """Template used before a role has a stored set: allow-all for admin, deny-all otherwise."""
    allowed = role is UserRole.ADMIN
    return {pid: allowed for pid in permission_ids()}


class ManageRoleDefaultsUseCase:
    """Read and replace per-role default grants.

    Replacing a role's set never touches user overrides; overrides keep
    taking precedence.
    """

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory, clock: Clock) -> None:
        self._uow_factory = unit_of_work_factory
        self._clock = clock

    async def get_defaults(self, role: UserRole | str) -> dict[str, bool]:
        """Stored defaults for role, or the template if none are stored."""
        parsed = parse_role(role)
        async with self._uow_factory() as uow:
            stored = await uow.role_defaults.get(parsed)
        if stored is None:
            return default_template(parsed)
        return dict(stored.grants)

    async def set_defaults(self, role: UserRole | str, entries: GrantEntries) -> dict[str, bool]:
        """Replace the whole stored set for role.

        Catalog permissions missing from entries are filled from the template.
        """
        parsed = parse_role(role)
        grants = {**default_template(parsed), **normalize_grants(entries)}
        defaults = RoleDefaults(role=parsed, grants=grants, updated_at=self._clock.now())
        async with self._uow_factory() as uow:
            await uow.role_defaults.replace(defaults)
        logger.info("Role defaults replaced for %s (%d entries)", parsed.value, len(grants))
        return grants

    async def reset_defaults(self, role: UserRole | str) -> None:
        """Drop the stored set so the template applies again."""
        parsed = parse_role(role)
        async with self._uow_factory() as uow:
            await uow.role_defaults.delete(parsed)
        logger.info("Role defaults reset for %s", parsed.value)
