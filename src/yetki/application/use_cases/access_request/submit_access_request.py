"""Submit access request use case."""

import logging

from yetki.application.dto.access_request_dto import access_request_to_dict
from yetki.application.ports import Clock, NotificationSink, UnitOfWorkFactory
from yetki.domain.catalog import get_permission
from yetki.domain.entities import AccessRequest, Notification, User
from yetki.domain.entities.access_request import new_request_id
from yetki.domain.exceptions import InvalidStateError, NotFoundError, ValidationError
from yetki.domain.value_objects import AccessType, DurationUnit, NotificationType

logger = logging.getLogger(__name__)


def _parse_access_type(access_type: AccessType | str) -> AccessType:
    try:
        return AccessType(access_type)
    except ValueError:
        raise ValidationError(f"Unknown access type: {access_type!r}") from None


def _parse_duration(
    duration: int | None,
    duration_unit: DurationUnit | str | None,
) -> tuple[int, DurationUnit]:
    if duration is None or duration_unit is None:
        raise ValidationError("Temporary access requires duration and duration_unit")
    if isinstance(duration, bool) or not isinstance(duration, int):
        raise ValidationError(f"Duration must be an integer, got {duration!r}")
    if duration <= 0:
        raise ValidationError("Duration must be positive")
    try:
        unit = DurationUnit(duration_unit)
    except ValueError:
        raise ValidationError(f"Unknown duration unit: {duration_unit!r}") from None
    return duration, unit


class SubmitAccessRequestUseCase:
    """Create a pending access request and notify approvers."""

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        notifier: NotificationSink,
        clock: Clock,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._notifier = notifier
        self._clock = clock

    async def execute(
        self,
        user: User,
        permission_id: str,
        access_type: AccessType | str = AccessType.PERMANENT,
        duration: int | None = None,
        duration_unit: DurationUnit | str | None = None,
        note: str | None = None,
    ) -> AccessRequest:
        """Submit a request for permission_id on behalf of user."""
        parsed_type = _parse_access_type(access_type)
        if parsed_type is AccessType.TEMPORARY:
            duration, unit = _parse_duration(duration, duration_unit)
        else:
            duration, unit = None, None

        permission = get_permission(permission_id)
        if permission is None:
            raise NotFoundError("Permission", permission_id)

        now = self._clock.now()
        async with self._uow_factory() as uow:
            existing = await uow.access_requests.find_pending(user.id, permission_id)
            if existing:
                raise InvalidStateError(
                    f"Access request {existing.id} for {permission_id} is already pending"
                )
            request = AccessRequest(
                id=new_request_id(),
                user_id=user.id,
                user_name=user.name,
                permission_id=permission.id,
                permission_name=permission.name,
                access_type=parsed_type,
                duration=duration,
                duration_unit=unit,
                requested_at=now,
                note=note,
            )
            await uow.access_requests.create(request)

        logger.info(
            "Access request %s submitted: %s -> %s (%s)",
            request.id,
            user.id,
            permission_id,
            parsed_type.value,
        )
        span = f"{duration} {unit.value}" if unit else "permanent"
        await self._notifier.emit(
            Notification(
                type=NotificationType.ACCESS_REQUEST,
                title="New access request",
                message=f"{user.name} requested {span} access to {permission.name}.",
                timestamp=now,
                payload=access_request_to_dict(request),
            )
        )
        return request
