"""
GS1-128 Application Identifier tokenizer.

Single left-to-right pass over a cleaned element string:
- Candidate AIs are tried shortest first (2, 3, then 4 digits); the first
  one present in the rule table wins and is never reconsidered
- Fixed-length AIs take the next N characters (fewer if input runs out)
- Variable-length AIs run up to the next FNC1 or end of input; the FNC1
  itself is consumed
- An unknown AI or an empty value stops the scan; whatever was collected
  so far is returned
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..ai_rules import (
    FNC1,
    MAX_AI_LENGTH,
    MIN_AI_LENGTH,
    AIRule,
    AIRuleTable,
    load_rule_table,
)

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ApplicationIdentifier:
    """An AI code and the value extracted for it."""
    ai: str
    value: str


def _extract_value(
    data: str,
    start: int,
    rule: AIRule,
    separator: str,
) -> Tuple[str, int]:
    """
    Extract the value for ``rule`` starting at ``start``.

    Returns:
        (value, next_position)
    """
    if start >= len(data):
        return "", start

    if rule.is_fixed:
        end = min(start + rule.fixed_length, len(data))
        return data[start:end], end

    sep_pos = data.find(separator, start)
    if sep_pos == -1:
        return data[start:], len(data)
    return data[start:sep_pos], sep_pos + len(separator)


def _match_at(
    data: str,
    pos: int,
    rules: AIRuleTable,
    separator: str,
) -> Optional[Tuple[str, str, int]]:
    """
    Find the AI starting at ``pos``.

    Returns:
        (ai, value, next_position) or None if nothing usable starts here
    """
    for ai_len in range(MIN_AI_LENGTH, MAX_AI_LENGTH + 1):
        if pos + ai_len > len(data):
            break
        candidate = data[pos:pos + ai_len]
        rule = rules.get(candidate)
        if rule is None:
            continue
        value, next_pos = _extract_value(data, pos + ai_len, rule, separator)
        if value:
            return candidate, value, next_pos
    return None


def scan_identifiers(
    data: str,
    rules: Optional[AIRuleTable] = None,
    separator: str = FNC1,
) -> Tuple[List[ApplicationIdentifier], int]:
    """
    Tokenize ``data`` and report where scanning stopped.

    Args:
        data: Cleaned element string (symbology prefix already removed)
        rules: AI rule table, defaults to the built-in (01, 10, 17) table
        separator: Variable-length terminator, FNC1 by default

    Returns:
        (identifiers in order of appearance, stop position). The stop
        position equals ``len(data)`` when the whole string was consumed.
    """
    if rules is None:
        rules = load_rule_table()
    identifiers: List[ApplicationIdentifier] = []
    pos = 0

    while pos < len(data):
        match = _match_at(data, pos, rules, separator)
        if match is None:
            LOGGER.debug("No supported AI at position %d: %r", pos, data[pos:pos + MAX_AI_LENGTH])
            break
        ai, value, pos = match
        identifiers.append(ApplicationIdentifier(ai, value))

    return identifiers, pos


def tokenize(
    data: str,
    rules: Optional[AIRuleTable] = None,
    separator: str = FNC1,
) -> List[ApplicationIdentifier]:
    """
    Split a cleaned GS1 element string into Application Identifiers.

    Examples:
        >>> ais = tokenize("011234567890123410ABC123")
        >>> print(ais[0].ai, ais[0].value)  # 01 12345678901234
        >>> print(ais[1].ai, ais[1].value)  # 10 ABC123
    """
    identifiers, _ = scan_identifiers(data, rules, separator)
    return identifiers
