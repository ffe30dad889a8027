from __future__ import annotations

import re
from email.utils import getaddresses

from email_validator import EmailNotValidError, validate_email

from app.rules.base import Field, Rule, RuleContext, reject

_ALNUM_RE = re.compile(r"^[a-zA-Z0-9]+$")
_SPECIAL_RE = re.compile(r"[^a-zA-Z0-9]")


class RequiredRule:
    """Empty and whitespace-only values are treated as missing."""

    description = "Reject empty or whitespace-only values"

    def __init__(self, *, rule_id: str, field: Field, label: str):
        self.rule_id = rule_id
        self.field = field
        self.label = label

    def run(self, ctx: RuleContext) -> None:
        if not ctx.value(self.field).strip():
            raise reject(self, f"{self.label} is required.")


class UsernameLengthRule:
    rule_id = "U110-length"
    field: Field = "username"
    description = "Username length must be within the configured bounds"

    def run(self, ctx: RuleContext) -> None:
        n = len(ctx.username)
        if n < ctx.username_min_length or n > ctx.username_max_length:
            raise reject(
                self,
                f"Username must be between {ctx.username_min_length} and "
                f"{ctx.username_max_length} characters long.",
            )


class UsernameCharsetRule:
    rule_id = "U120-charset"
    field: Field = "username"
    description = "Username may only contain ASCII letters and digits"

    def run(self, ctx: RuleContext) -> None:
        # fullmatch: `$` alone would accept a trailing newline
        if not _ALNUM_RE.fullmatch(ctx.username):
            raise reject(self, "Username can only contain alphanumeric characters.")


class PasswordLengthRule:
    rule_id = "P110-length"
    field: Field = "password"
    description = "Password must meet the configured minimum length"

    def run(self, ctx: RuleContext) -> None:
        if len(ctx.password) < ctx.password_min_length:
            raise reject(self, f"Password must be at least {ctx.password_min_length} characters long.")


class PasswordSpecialCharRule:
    rule_id = "P120-special-char"
    field: Field = "password"
    description = "Password must contain at least one non-alphanumeric character"

    def run(self, ctx: RuleContext) -> None:
        if not _SPECIAL_RE.search(ctx.password):
            raise reject(self, "Password must include at least one special character.")


class EmailFormatRule:
    """Accept exactly one bare address that survives parsing unchanged.

    The header parser tolerates display names, comments, surrounding
    whitespace and address lists; any of those makes the parsed address differ
    from the input (or yields more than one address) and is rejected. What
    remains is checked for syntax by email-validator without DNS lookups.
    """

    rule_id = "E110-format"
    field: Field = "email"
    description = "Email must be a single well-formed address"

    def run(self, ctx: RuleContext) -> None:
        email = ctx.email
        parsed = getaddresses([email])
        if len(parsed) != 1:
            raise reject(self, "Invalid email format.")

        name, address = parsed[0]
        if name or address != email:
            raise reject(self, "Invalid email format.")

        try:
            validate_email(address, check_deliverability=False)
        except EmailNotValidError as e:
            raise reject(self, "Invalid email format.") from e


BUILTIN_RULES: list[Rule] = [
    RequiredRule(rule_id="U100-required", field="username", label="Username"),
    UsernameLengthRule(),
    UsernameCharsetRule(),
    RequiredRule(rule_id="P100-required", field="password", label="Password"),
    PasswordLengthRule(),
    PasswordSpecialCharRule(),
    RequiredRule(rule_id="E100-required", field="email", label="Email"),
    EmailFormatRule(),
]
