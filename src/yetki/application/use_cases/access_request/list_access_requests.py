"""List access requests use case."""

from yetki.application.ports import UnitOfWorkFactory
from yetki.domain.entities import AccessRequest
from yetki.domain.exceptions import NotFoundError, ValidationError
from yetki.domain.value_objects import RequestStatus


class ListAccessRequestsUseCase:
    """Read-only queries over access requests, newest first."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    async def get(self, request_id: str) -> AccessRequest:
        async with self._uow_factory() as uow:
            request = await uow.access_requests.get_by_id(request_id)
        if not request:
            raise NotFoundError("Access request", request_id)
        return request

    async def all(self) -> list[AccessRequest]:
        async with self._uow_factory() as uow:
            return _newest_first(await uow.access_requests.list_all())

    async def by_status(self, status: RequestStatus | str) -> list[AccessRequest]:
        try:
            parsed = RequestStatus(status)
        except ValueError:
            raise ValidationError(f"Unknown request status: {status!r}") from None
        async with self._uow_factory() as uow:
            return _newest_first(await uow.access_requests.list_by_status(parsed))

    async def by_user(self, user_id: str) -> list[AccessRequest]:
        async with self._uow_factory() as uow:
            return _newest_first(await uow.access_requests.list_by_user(user_id))


def _newest_first(requests: list[AccessRequest]) -> list[AccessRequest]:
    return sorted(requests, key=lambda r: r.requested_at, reverse=True)
