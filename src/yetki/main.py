"""Library entry point and composition root."""

import logging
from dataclasses import dataclass

from psycopg_pool import AsyncConnectionPool

from yetki import __version__
from yetki.application.dto.grant_dto import GrantEntries
from yetki.application.ports import (
    Clock,
    KeyValueStore,
    NotificationSink,
    Scheduler,
    UserDirectory,
)
from yetki.application.use_cases.access_request.decide_access_request import (
    DecideAccessRequestUseCase,
)
from yetki.application.use_cases.access_request.list_access_requests import (
    ListAccessRequestsUseCase,
)
from yetki.application.use_cases.access_request.recover_expirations import (
    RecoverExpirationsUseCase,
)
from yetki.application.use_cases.access_request.revoke_temporary_access import (
    RevokeTemporaryAccessUseCase,
)
from yetki.application.use_cases.access_request.submit_access_request import (
    SubmitAccessRequestUseCase,
)
from yetki.application.use_cases.permission.manage_overrides import ManageOverridesUseCase
from yetki.application.use_cases.permission.manage_role_defaults import (
    ManageRoleDefaultsUseCase,
)
from yetki.application.use_cases.permission.resolve_permission import PermissionResolver
from yetki.config import Settings, get_settings
from yetki.domain.entities import AccessRequest, User
from yetki.domain.value_objects import AccessType, Decision, DurationUnit
from yetki.infrastructure.clock import SystemClock
from yetki.infrastructure.identity.user_directory import InMemoryUserDirectory
from yetki.infrastructure.notifications import LoggingNotificationSink
from yetki.infrastructure.persistence.memory import (
    InMemoryAccessState,
    InMemoryKeyValueStore,
    create_uow_factory,
)
from yetki.infrastructure.persistence.postgres.connection import create_pool
from yetki.infrastructure.persistence.postgres.key_value_store import PostgresKeyValueStore
from yetki.infrastructure.scheduling.asyncio_scheduler import AsyncioScheduler

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings."""
    level = "DEBUG" if settings.debug else settings.log_level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)


@dataclass
class AccessControl:
    """Wired access-control components."""

    settings: Settings
    state: InMemoryAccessState
    store: KeyValueStore
    scheduler: Scheduler
    users: UserDirectory
    resolver: PermissionResolver
    role_defaults: ManageRoleDefaultsUseCase
    overrides: ManageOverridesUseCase
    submit_request: SubmitAccessRequestUseCase
    decide_request: DecideAccessRequestUseCase
    list_requests: ListAccessRequestsUseCase
    revoke_temporary_access: RevokeTemporaryAccessUseCase
    recover_expirations: RecoverExpirationsUseCase
    pool: AsyncConnectionPool | None = None

    async def start(self) -> None:
        """Open storage, load persisted state and re-arm pending expirations."""
        if self.pool is not None:
            await self.pool.open()
        await self.state.load(self.store)
        if self.settings.recover_expirations_on_startup:
            await self.recover_expirations.execute()
        logger.info("Access control started (%s backend)", self.settings.storage_backend)

    async def stop(self) -> None:
        await self.scheduler.shutdown()
        if self.pool is not None:
            await self.pool.close()

    async def resolve(self, user: User, permission_id: str) -> bool:
        return await self.resolver.resolve(user, permission_id)

    async def set_overrides(self, user_id: str, entries: GrantEntries) -> dict[str, bool]:
        return await self.overrides.set_overrides(user_id, entries)

    async def submit(
        self,
        user: User,
        permission_id: str,
        access_type: AccessType | str = AccessType.PERMANENT,
        duration: int | None = None,
        duration_unit: DurationUnit | str | None = None,
        note: str | None = None,
    ) -> AccessRequest:
        return await self.submit_request.execute(
            user, permission_id, access_type, duration, duration_unit, note
        )

    async def decide(
        self, request_id: str, decision: Decision | str, responder: str
    ) -> AccessRequest:
        return await self.decide_request.execute(request_id, decision, responder)


def create_access_control(
    settings: Settings | None = None,
    *,
    clock: Clock | None = None,
    scheduler: Scheduler | None = None,
    notifier: NotificationSink | None = None,
    users: UserDirectory | None = None,
    store: KeyValueStore | None = None,
) -> AccessControl:
    """Composition root - build AccessControl with all dependencies."""
    settings = settings or get_settings()
    clock = clock or SystemClock()
    scheduler = scheduler or AsyncioScheduler(clock)
    notifier = notifier or LoggingNotificationSink()
    users = users or InMemoryUserDirectory()

    pool = None
    if store is None:
        if settings.storage_backend == "postgres":
            pool = create_pool(
                settings.database_url,
                min_size=settings.pool_min_size,
                max_size=settings.pool_max_size,
            )
            store = PostgresKeyValueStore(pool, table=settings.state_table)
        else:
            store = InMemoryKeyValueStore()

    state = InMemoryAccessState()
    uow_factory = create_uow_factory(state, store)

    revoke = RevokeTemporaryAccessUseCase(
        unit_of_work_factory=uow_factory,
        notifier=notifier,
        clock=clock,
    )
    return AccessControl(
        settings=settings,
        state=state,
        store=store,
        scheduler=scheduler,
        users=users,
        resolver=PermissionResolver(uow_factory, users),
        role_defaults=ManageRoleDefaultsUseCase(uow_factory, clock),
        overrides=ManageOverridesUseCase(uow_factory, clock, scheduler),
        submit_request=SubmitAccessRequestUseCase(
            unit_of_work_factory=uow_factory,
            notifier=notifier,
            clock=clock,
        ),
        decide_request=DecideAccessRequestUseCase(
            unit_of_work_factory=uow_factory,
            notifier=notifier,
            clock=clock,
            scheduler=scheduler,
            revoke_temporary_access=revoke,
        ),
        list_requests=ListAccessRequestsUseCase(uow_factory),
        revoke_temporary_access=revoke,
        recover_expirations=RecoverExpirationsUseCase(
            unit_of_work_factory=uow_factory,
            scheduler=scheduler,
            revoke_temporary_access=revoke,
        ),
        pool=pool,
    )


def main() -> None:
    """CLI entry point."""
    settings = get_settings()
    configure_logging(settings)
    print(f"yetki v{__version__} ({settings.storage_backend} backend)")
