# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from communion_hub.application.services.password_hashing import ScryptPasswordHasher
from communion_hub.application.use_cases.events import (
    CreateEventUseCase,
    GetEventUseCase,
    ListCategoriesUseCase,
    ListEventsUseCase,
)
from communion_hub.application.use_cases.users import (
    GetCurrentUserUseCase,
    LoginUserUseCase,
    LogoutUserUseCase,
    RegisterUserUseCase,
)
from communion_hub.domain.users.repositories import PasswordHasher
from communion_hub.infrastructure.memory import (
    EventStore,
    InMemorySessionTokenRepository,
)
from communion_hub.interfaces.http.controllers.auth_controller import AuthController
from communion_hub.interfaces.http.controllers.events_controller import EventsController
from communion_hub.interfaces.http.controllers.misc_controller import MiscController
from communion_hub.shared.config import AppConfig


class Container:
    """Object graph for one application instance.

    The store is created once here and handed to everything that needs it,
    so two apps built in the same process never share state.
    """

    def __init__(
        self,
        config: AppConfig,
        *,
        store: EventStore | None = None,
        password_hasher: PasswordHasher | None = None,
    ) -> None:
        self.config = config
        if store is not None:
            self.__dict__["store"] = store
        if password_hasher is not None:
            self.__dict__["password_hasher"] = password_hasher

    @cached_property
    def store(self) -> EventStore:
        return EventStore()

    @cached_property
    def password_hasher(self) -> PasswordHasher:
        hashing = self.config.hashing
        return ScryptPasswordHasher(n=hashing.scrypt_n, r=hashing.scrypt_r, p=hashing.scrypt_p)

    @cached_property
    def session_token_repository(self) -> InMemorySessionTokenRepository:
        return InMemorySessionTokenRepository(
            lifetime=timedelta(seconds=self.config.security.session_lifetime)
        )

    # User use cases

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.store,
            tokens=self.session_token_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.store,
            tokens=self.session_token_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def logout_user_use_case(self) -> LogoutUserUseCase:
        return LogoutUserUseCase(tokens=self.session_token_repository)

    @cached_property
    def current_user_use_case(self) -> GetCurrentUserUseCase:
        return GetCurrentUserUseCase(users=self.store)

    # Event use cases

    @cached_property
    def list_events_use_case(self) -> ListEventsUseCase:
        return ListEventsUseCase(events=self.store)

    @cached_property
    def get_event_use_case(self) -> GetEventUseCase:
        return GetEventUseCase(events=self.store)

    @cached_property
    def create_event_use_case(self) -> CreateEventUseCase:
        return CreateEventUseCase(events=self.store)

    @cached_property
    def list_categories_use_case(self) -> ListCategoriesUseCase:
        return ListCategoriesUseCase(events=self.store)

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            logout_use_case=self.logout_user_use_case,
            current_user_use_case=self.current_user_use_case,
        )

    @cached_property
    def events_controller(self) -> EventsController:
        return EventsController(
            list_events=self.list_events_use_case,
            get_event=self.get_event_use_case,
            create_event=self.create_event_use_case,
            list_categories=self.list_categories_use_case,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(
            store=self.store, session_tokens=self.session_token_repository
        )
