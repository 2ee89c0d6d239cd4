"""
Query parameter normalization for job search.

Query strings only carry text, so typed filters are coerced here before
validation. Coercion never fails: bad input is left for the validator to
reject with a proper message.
"""
import math
from typing import Any, Dict, Mapping, Union


def coerce_number(value: Any) -> Union[int, float]:
    """
    Permissive numeric coercion, matching how a JS unary plus reads text.

    "50000" -> 50000, "5e4" -> 50000, "12.5" -> 12.5, "" -> 0,
    anything unparseable (including "1_000" and repeated values) -> NaN.
    """
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        if "_" in text:
            return math.nan
        try:
            number = float(text)
        except ValueError:
            return math.nan
    else:
        return math.nan

    if isinstance(number, float) and math.isfinite(number) and number.is_integer():
        return int(number)
    return number


def _collect(query: Mapping[str, Any]) -> Dict[str, Any]:
    """Copy query params; a key given more than once keeps every value as a list."""
    if not hasattr(query, "multi_items"):
        return dict(query)

    grouped: Dict[str, list] = {}
    for key, value in query.multi_items():
        grouped.setdefault(key, []).append(value)
    return {key: values[0] if len(values) == 1 else values for key, values in grouped.items()}


def normalize_job_filters(query: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Coerce raw search parameters into typed filter values.

    - minSalary: numeric coercion when present
    - hasEquity: True only for the exact string "true"; anything else,
      including a missing key, is False (equity filtering is opt-in)

    Other keys are copied through unchanged so unknown parameters still
    reach the validator. Repeated keys arrive as lists, which the
    validator rejects.
    """
    filters = _collect(query)
    if "minSalary" in filters:
        filters["minSalary"] = coerce_number(filters["minSalary"])
    filters["hasEquity"] = filters.get("hasEquity") == "true"
    return filters
