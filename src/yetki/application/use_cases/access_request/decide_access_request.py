"""Decide (approve or reject) access request use case."""

import logging
from functools import partial

from yetki.application.dto.access_request_dto import access_request_to_dict
from yetki.application.ports import Clock, NotificationSink, Scheduler, UnitOfWorkFactory
from yetki.application.use_cases.access_request.revoke_temporary_access import (
    RevokeTemporaryAccessUseCase,
    cancel_pending_revocations,
    revocation_key,
)
from yetki.domain.entities import AccessRequest, Notification, ScheduledRevocation, UserOverrides
from yetki.domain.exceptions import NotFoundError, ValidationError
from yetki.domain.value_objects import Decision, NotificationType

logger = logging.getLogger(__name__)


def _parse_decision(decision: Decision | str) -> Decision:
    try:
        return Decision(decision)
    except ValueError:
        raise ValidationError(f"Unknown decision: {decision!r}") from None


class DecideAccessRequestUseCase:
    """Approve or reject a pending access request.

    Approval grants the permission as a user override. Temporary approvals
    also persist a revocation record and schedule it for valid_until.
    """

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        notifier: NotificationSink,
        clock: Clock,
        scheduler: Scheduler,
        revoke_temporary_access: RevokeTemporaryAccessUseCase,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._notifier = notifier
        self._clock = clock
        self._scheduler = scheduler
        self._revoke = revoke_temporary_access

    async def execute(
        self,
        request_id: str,
        decision: Decision | str,
        responder: str,
    ) -> AccessRequest:
        """Apply decision to request_id. Only pending requests can be decided."""
        parsed = _parse_decision(decision)
        revocation: ScheduledRevocation | None = None
        cancelled: list[str] = []

        async with self._uow_factory() as uow:
            request = await uow.access_requests.get_by_id(request_id)
            if not request:
                raise NotFoundError("Access request", request_id)

            now = self._clock.now()
            if parsed is Decision.APPROVED:
                request.approve(responder, now)
                current = await uow.overrides.get(request.user_id) or UserOverrides(
                    user_id=request.user_id
                )
                await uow.overrides.save(current.merged({request.permission_id: True}, now))
                cancelled = await cancel_pending_revocations(
                    uow, request.user_id, [request.permission_id]
                )
                if request.is_temporary:
                    revocation = ScheduledRevocation(
                        request_id=request.id,
                        user_id=request.user_id,
                        permission_id=request.permission_id,
                        permission_name=request.permission_name,
                        valid_until=request.valid_until,
                    )
                    await uow.revocations.create(revocation)
            else:
                request.reject(responder, now)
            await uow.access_requests.update(request)

        for key in cancelled:
            self._scheduler.cancel(key)
        if revocation is not None:
            self._scheduler.schedule_at(
                revocation.valid_until,
                partial(self._revoke.execute, request.id),
                key=revocation_key(request.id),
            )
            logger.info(
                "Revocation of request %s scheduled at %s",
                request.id,
                revocation.valid_until.isoformat(),
            )

        logger.info("Access request %s %s by %s", request.id, parsed.value, responder)
        outcome = "approved" if parsed is Decision.APPROVED else "rejected"
        await self._notifier.emit(
            Notification(
                type=NotificationType.ACCESS_REQUEST,
                title="Access request updated",
                message=f"Your access request for {request.permission_name} was {outcome}.",
                timestamp=now,
                recipient_user_id=request.user_id,
                payload=access_request_to_dict(request),
            )
        )
        return request
