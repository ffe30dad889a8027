from __future__ import annotations

from app.rules.base import Rule, RuleContext
from app.rules.builtin import BUILTIN_RULES


def run_field_rules(ctx: RuleContext, rules: list[Rule] | None = None) -> None:
    """Run rules in order and stop at the first failure.

    The first failing rule's InvalidInput propagates unchanged.
    """
    for r in rules if rules is not None else BUILTIN_RULES:
        r.run(ctx)
