"""
AI Rule Table for the GS1-128 decoder.

Maps each supported GS1 Application Identifier to its extraction rule:
either a fixed data length or variable length terminated by FNC1 / end of
input. The table is a closed set; tags that are not in it are never emitted.

Reference: https://ref.gs1.org/ai/
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Tuple


# GS1 Function Code 1, transmitted by scanners as <GS> (ASCII 29)
FNC1 = "\x1d"

AI_GTIN = "01"
AI_BATCH_LOT = "10"
AI_EXPIRY = "17"

MIN_AI_LENGTH = 2
MAX_AI_LENGTH = 4


@dataclass(frozen=True)
class AIRule:
    """
    Extraction rule for a single Application Identifier.

    Attributes:
        ai: The Application Identifier code (2-4 digits)
        title: Human-readable title
        fixed_length: Data length for fixed-length AIs, None if variable
    """
    ai: str
    title: str
    fixed_length: Optional[int] = None

    @property
    def is_fixed(self) -> bool:
        return self.fixed_length is not None


DEFAULT_RULES: Tuple[AIRule, ...] = (
    AIRule(ai=AI_GTIN, title="GTIN", fixed_length=14),
    AIRule(ai=AI_BATCH_LOT, title="BATCH/LOT"),
    AIRule(ai=AI_EXPIRY, title="USE BY or EXPIRY", fixed_length=6),
)


def _check_rule(rule: AIRule) -> None:
    if not rule.ai.isdigit() or not MIN_AI_LENGTH <= len(rule.ai) <= MAX_AI_LENGTH:
        raise ValueError(f"AI must be {MIN_AI_LENGTH}-{MAX_AI_LENGTH} digits, got {rule.ai!r}")
    if rule.fixed_length is not None and rule.fixed_length < 1:
        raise ValueError(f"Fixed length for AI({rule.ai}) must be positive, got {rule.fixed_length}")


class AIRuleTable:
    """
    Read-only lookup of supported AIs.

    Built once and never mutated, so a single table can be shared by any
    number of parsers and threads.
    """

    def __init__(self, rules=DEFAULT_RULES):
        entries: Dict[str, AIRule] = {}
        for rule in rules:
            _check_rule(rule)
            if rule.ai in entries:
                raise ValueError(f"Duplicate AI in rule table: {rule.ai}")
            entries[rule.ai] = rule
        self._rules = entries

    def get(self, ai: str) -> Optional[AIRule]:
        """Get rule by exact AI code."""
        return self._rules.get(ai)

    def __contains__(self, ai: str) -> bool:
        return ai in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[AIRule]:
        return iter(self._rules.values())

    @property
    def tags(self) -> Tuple[str, ...]:
        return tuple(self._rules)

    def to_dict(self) -> Dict[str, dict]:
        return {
            ai: {"title": rule.title, "fixed_length": rule.fixed_length}
            for ai, rule in self._rules.items()
        }

    def to_json(self) -> str:
        """Export table to JSON."""
        return json.dumps(self.to_dict(), indent=2)

    @classmethod
    def from_dict(cls, data: Dict[str, dict]) -> "AIRuleTable":
        """
        Build a table from a mapping of AI code to rule attributes.

        Example:
            {"01": {"title": "GTIN", "fixed_length": 14},
             "21": {"title": "SERIAL"}}
        """
        rules = [
            AIRule(
                ai=str(ai),
                title=attrs.get("title", f"AI {ai}"),
                fixed_length=attrs.get("fixed_length"),
            )
            for ai, attrs in data.items()
        ]
        return cls(rules)

    @classmethod
    def from_json(cls, json_str: str) -> "AIRuleTable":
        """Import table from JSON."""
        return cls.from_dict(json.loads(json_str))


DEFAULT_TABLE = AIRuleTable(DEFAULT_RULES)


def load_rule_table() -> AIRuleTable:
    """Return the process-wide default rule table (01, 10, 17)."""
    return DEFAULT_TABLE
