"""Value checks shared by the standard slot evaluators."""
from __future__ import annotations

import re
from datetime import datetime
from typing import Optional

# Dollars and cents: optional leading 1-9, digits, '.', two digits.  Anchored at
# the start only, so "12.50xyz" passes.
CURRENCY_PATTERN = re.compile(r"^[1-9]?[0-9]*[.][0-9]{2}")

# strptime alone accepts "2020-7-6" and "2020-07- 6"
LEX_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def is_valid_lex_date(date_string: Optional[str]) -> bool:
    """Is *date_string* a real calendar date in Lex's ``YYYY-MM-DD`` form?

    Month and day must be two digits each, and the trailing day number must
    match the parsed day, so ``2020-7-6`` and roll-over dates such as
    ``2020-02-30`` are rejected.
    """
    if not date_string:
        return False

    if LEX_DATE_PATTERN.fullmatch(date_string) is None:
        return False

    posn = date_string.rfind("-")

    try:
        parsed = datetime.strptime(date_string, "%Y-%m-%d")
        day = int(date_string[posn + 1:])
    except ValueError:
        return False

    return parsed.day == day


def looks_like_currency(value: Optional[str]) -> bool:
    """Does *value* start with dollars and cents? Only the prefix is checked."""
    if not value:
        return False
    return CURRENCY_PATTERN.match(value) is not None
