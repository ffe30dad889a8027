from __future__ import annotations

import logging
from typing import Optional

from app.models import RegistrationOutcome, RegistrationRequest
from app.rules.base import DuplicateUsername, InvalidInput, RuleContext
from app.rules.engine import run_field_rules
from app.settings import Settings, get_settings
from app.user_store import InMemoryUserStore, UserRecord

logger = logging.getLogger("user_registration")


class UserRegistrationService:
    """Validates new registrations and records the accepted ones.

    Checks run in a fixed order (username, password, email, then uniqueness)
    and the first failure is raised. The store is only touched once every
    check has passed, so a rejected attempt never leaves a record behind.
    """

    def __init__(self, *, settings: Settings | None = None, store: InMemoryUserStore | None = None):
        self._settings = settings or get_settings()
        self.store = store if store is not None else InMemoryUserStore()

    def register(
        self,
        username: Optional[str],
        password: Optional[str],
        email: Optional[str],
    ) -> RegistrationOutcome:
        """Register a new user.

        Raises InvalidInput when a field is rejected and DuplicateUsername
        when the username is already taken (ignoring case).
        """
        s = self._settings
        ctx = RuleContext(
            username=username or "",
            password=password or "",
            email=email or "",
            username_min_length=s.username_min_length,
            username_max_length=s.username_max_length,
            password_min_length=s.password_min_length,
        )
        try:
            run_field_rules(ctx)
        except InvalidInput as e:
            # Field values are never logged.
            logger.info("Registration rejected: %s", e, extra={"field": e.field, "rule_id": e.rule_id})
            raise

        # Duplicate check and append happen atomically inside the store.
        try:
            record = self.store.add(UserRecord(username=ctx.username, password=ctx.password, email=ctx.email))
        except DuplicateUsername:
            logger.info("Registration rejected: username already exists", extra={"rule_id": "duplicate-username"})
            raise
        logger.info("Registered user %s", record.username)
        return RegistrationOutcome(username=record.username, message="Registration successful")

    def register_request(self, req: RegistrationRequest) -> RegistrationOutcome:
        return self.register(req.username, req.password, req.email)

    def is_registered(self, username: Optional[str]) -> bool:
        return self.store.exists(username=username)
