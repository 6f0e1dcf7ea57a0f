"""Deferred revocation of temporary access."""

import logging
from collections.abc import Iterable

from yetki.application.ports import Clock, NotificationSink, UnitOfWork, UnitOfWorkFactory
from yetki.domain.entities import Notification
from yetki.domain.value_objects import NotificationType

logger = logging.getLogger(__name__)


def revocation_key(request_id: str) -> str:
    """Scheduler key of the revocation belonging to a request."""
    return f"revoke:{request_id}"


async def cancel_pending_revocations(
    uow: UnitOfWork,
    user_id: str,
    permission_ids: Iterable[str],
) -> list[str]:
    """Delete pending revocation records for the given grants.

    Returns the scheduler keys the caller should cancel once the unit of
    work has committed.
    """
    keys: list[str] = []
    for permission_id in permission_ids:
        for revocation in await uow.revocations.list_for_grant(user_id, permission_id):
            await uow.revocations.delete(revocation.request_id)
            keys.append(revocation_key(revocation.request_id))
            logger.info(
                "Pending revocation cancelled for request %s (%s/%s)",
                revocation.request_id,
                user_id,
                permission_id,
            )
    return keys


class RevokeTemporaryAccessUseCase:
    """Flip a temporarily granted override to denied, at most once.

    Runs from the scheduler at valid_until. Without a pending record it is a
    no-op, which makes repeated or late invocations safe.
    """

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        notifier: NotificationSink,
        clock: Clock,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._notifier = notifier
        self._clock = clock

    async def execute(self, request_id: str) -> bool:
        """Revoke the grant of request_id. Returns True if an override was flipped."""
        async with self._uow_factory() as uow:
            revocation = await uow.revocations.get(request_id)
            if revocation is None:
                logger.debug("No pending revocation for request %s", request_id)
                return False
            await uow.revocations.delete(request_id)

            overrides = await uow.overrides.get(revocation.user_id)
            if overrides is None or overrides.grants.get(revocation.permission_id) is not True:
                logger.info(
                    "Revocation for request %s found nothing to revoke", request_id
                )
                return False

            now = self._clock.now()
            await uow.overrides.save(
                overrides.merged({revocation.permission_id: False}, now)
            )

        logger.info(
            "Temporary access expired: %s/%s (request %s)",
            revocation.user_id,
            revocation.permission_id,
            request_id,
        )
        await self._notifier.emit(
            Notification(
                type=NotificationType.SYSTEM,
                title="Access expired",
                message=(
                    f"Your temporary access to {revocation.permission_name} has expired."
                ),
                timestamp=now,
                recipient_user_id=revocation.user_id,
                payload={
                    "request_id": request_id,
                    "permission_id": revocation.permission_id,
                    "valid_until": revocation.valid_until.isoformat(),
                },
            )
        )
        return True
