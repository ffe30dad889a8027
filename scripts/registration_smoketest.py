from __future__ import annotations

import sys
from pathlib import Path

# Allow running as: python scripts/registration_smoketest.py
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

from app.logging_config import configure_logging
from app.registration import UserRegistrationService
from app.rules.base import DuplicateUsername, InvalidInput
from app.settings import get_settings


def main() -> int:
    settings = get_settings()
    configure_logging(settings.log_level)

    svc = UserRegistrationService(settings=settings)

    out = svc.register("validUser1", "Passw0rd!", "user@example.com")
    print("register", out.model_dump())
    if not svc.is_registered("VALIDUSER1"):
        print("expected validUser1 to be registered")
        return 1

    try:
        svc.register("validuser1", "AnotherP@ss1", "other@example.com")
    except DuplicateUsername as e:
        print("duplicate", str(e))
    else:
        print("duplicate username was accepted")
        return 1

    try:
        svc.register("anotherUser", "Passw0rd!", "useratexample.com")
    except InvalidInput as e:
        print("invalid", e.field, e.rule_id, str(e))
    else:
        print("malformed email was accepted")
        return 1

    print("stored", len(svc.store))
    return 0 if len(svc.store) == 1 else 1


if __name__ == "__main__":
    raise SystemExit(main())
