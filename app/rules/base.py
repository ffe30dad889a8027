from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Protocol

Field = Literal["username", "password", "email"]


class RegistrationError(Exception):
    """Base class for every rejected registration attempt."""


class InvalidInput(RegistrationError, ValueError):
    """A field failed one of the format rules."""

    def __init__(self, message: str, *, field: Field, rule_id: str):
        super().__init__(message)
        self.field = field
        self.rule_id = rule_id


class DuplicateUsername(RegistrationError):
    def __init__(self, username: str):
        super().__init__("Username already exists.")
        self.username = username


@dataclass(frozen=True)
class RuleContext:
    username: str
    password: str
    email: str
    username_min_length: int = 5
    username_max_length: int = 20
    password_min_length: int = 8

    def value(self, field: Field) -> str:
        return getattr(self, field)


class Rule(Protocol):
    """A single field check. Raises InvalidInput when the field is rejected."""

    rule_id: str
    field: Field
    description: str

    def run(self, ctx: RuleContext) -> None: ...


def reject(rule: Rule, message: str) -> InvalidInput:
    return InvalidInput(message, field=rule.field, rule_id=rule.rule_id)
