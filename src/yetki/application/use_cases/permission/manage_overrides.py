"""User permission override use case."""

import logging

from yetki.application.dto.grant_dto import GrantEntries, normalize_grants
from yetki.application.ports import Clock, Scheduler, UnitOfWorkFactory
from yetki.application.use_cases.access_request.revoke_temporary_access import (
    cancel_pending_revocations,
)
from yetki.domain.entities import UserOverrides

logger = logging.getLogger(__name__)


class ManageOverridesUseCase:
    """Grant, deny and clear per-user permission overrides.

    Touching a (user, permission) pair cancels any temporary-access revocation
    still pending for it, so a stale timer cannot undo a newer grant.
    """

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        clock: Clock,
        scheduler: Scheduler,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._clock = clock
        self._scheduler = scheduler

    async def get_overrides(self, user_id: str) -> dict[str, bool]:
        async with self._uow_factory() as uow:
            overrides = await uow.overrides.get(user_id)
        return dict(overrides.grants) if overrides else {}

    async def set_overrides(self, user_id: str, entries: GrantEntries) -> dict[str, bool]:
        """Merge entries into the user's overrides; new entries win on conflict."""
        grants = normalize_grants(entries)
        async with self._uow_factory() as uow:
            current = await uow.overrides.get(user_id) or UserOverrides(user_id=user_id)
            updated = current.merged(grants, self._clock.now())
            await uow.overrides.save(updated)
            cancelled = await cancel_pending_revocations(uow, user_id, grants.keys())

        for key in cancelled:
            self._scheduler.cancel(key)
        logger.info("Overrides set for user %s: %s", user_id, sorted(grants))
        return dict(updated.grants)

    async def clear_override(self, user_id: str, permission_id: str) -> bool:
        """Remove one override so resolution falls back to role defaults."""
        async with self._uow_factory() as uow:
            current = await uow.overrides.get(user_id)
            if current is None or permission_id not in current.grants:
                return False
            await uow.overrides.save(current.without(permission_id, self._clock.now()))
            cancelled = await cancel_pending_revocations(uow, user_id, [permission_id])

        for key in cancelled:
            self._scheduler.cancel(key)
        logger.info("Override cleared for user %s: %s", user_id, permission_id)
        return True
