"""
Shared coercion rules for engine models.

Completion-service output is loose: scores arrive as "8/10", 7.5 or
"high". These annotated types clamp numbers into their documented range
and fall back to the midpoint instead of rejecting the whole payload.
"""

import math
import re
from typing import Annotated, Any

from pydantic import AfterValidator, AliasChoices, BaseModel, BeforeValidator

MIDPOINT_SCORE = 5

_LEADING_NUMBER = re.compile(r"\s*([+-]?\d+(?:\.\d+)?)")


def to_number(value: Any) -> float | None:
    """Read a number from an int, float or numeric-prefixed string."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, str):
        match = _LEADING_NUMBER.match(value)
        if not match:
            return None
        value = match.group(1)
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def clamp_number(value: Any, low: float, high: float, default: float) -> float:
    """Clamp a loosely typed number into [low, high], or return default."""
    number = to_number(value)
    if number is None:
        return default
    return min(high, max(low, number))


def _score(value: Any) -> float:
    return clamp_number(value, 0, 10, MIDPOINT_SCORE)


def _rating(value: Any) -> int:
    return int(round(clamp_number(value, 1, 10, MIDPOINT_SCORE)))


def _percent(value: Any) -> int:
    return int(round(clamp_number(value, 0, 100, 50)))


def _positive_minutes(value: Any) -> float:
    number = to_number(value)
    if number is None or number <= 0:
        return 3.0
    return number


def _string_list(value: Any) -> Any:
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value.strip() else []
    return value


def _drop_blank(items: list[str]) -> list[str]:
    return [item.strip() for item in items if item and item.strip()]


def normalize_label(value: Any) -> Any:
    """Lower-case an enum label and join words with underscores."""
    if isinstance(value, str):
        return re.sub(r"[\s\-]+", "_", value.strip().lower())
    return value


def known_keys(model: type[BaseModel]) -> set[str]:
    """Every key a model accepts: field names, aliases and alias choices."""
    keys = set()
    for name, field in model.model_fields.items():
        keys.add(name)
        if field.alias:
            keys.add(field.alias)
        alias = field.validation_alias
        if isinstance(alias, str):
            keys.add(alias)
        elif isinstance(alias, AliasChoices):
            keys.update(choice for choice in alias.choices if isinstance(choice, str))
    return keys


def require_known_field(model: type[BaseModel], data: Any) -> Any:
    """
    Reject a mapping that carries none of the model's keys.

    Models whose fields all have defaults would otherwise accept any
    object, e.g. {"result": "..."}, as an all-default instance.
    """
    if isinstance(data, dict) and not known_keys(model).intersection(data):
        raise ValueError(f"No {model.__name__} field present in {sorted(data)}")
    return data


# 0-10 score, midpoint when unreadable
Score = Annotated[float, BeforeValidator(_score)]

# 1-10 integer rating (difficulty, clarity)
Rating = Annotated[int, BeforeValidator(_rating)]

# 0-100 integer percentage
Percent = Annotated[int, BeforeValidator(_percent)]

TimeLimitMinutes = Annotated[float, BeforeValidator(_positive_minutes)]

StringList = Annotated[list[str], BeforeValidator(_string_list), AfterValidator(_drop_blank)]

TopThree = Annotated[StringList, AfterValidator(lambda items: items[:3])]
