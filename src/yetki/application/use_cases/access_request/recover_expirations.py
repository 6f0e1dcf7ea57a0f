"""Recover pending temporary-access expirations after a restart."""

import logging
from functools import partial

from yetki.application.ports import Scheduler, UnitOfWorkFactory
from yetki.application.use_cases.access_request.revoke_temporary_access import (
    RevokeTemporaryAccessUseCase,
    revocation_key,
)

logger = logging.getLogger(__name__)


class RecoverExpirationsUseCase:
    """Re-schedule every persisted pending revocation.

    Records already past valid_until fire immediately.
    """

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        scheduler: Scheduler,
        revoke_temporary_access: RevokeTemporaryAccessUseCase,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._scheduler = scheduler
        self._revoke = revoke_temporary_access

    async def execute(self) -> int:
        async with self._uow_factory() as uow:
            pending = await uow.revocations.list_all()

        for revocation in sorted(pending, key=lambda r: r.valid_until):
            self._scheduler.schedule_at(
                revocation.valid_until,
                partial(self._revoke.execute, revocation.request_id),
                key=revocation_key(revocation.request_id),
            )
        logger.info("Recovered %d pending revocation(s)", len(pending))
        return len(pending)
