from datetime import date, datetime
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer


def to_day(value):
    """Accept ISO date or date-time input and keep only the calendar day."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and len(value) > 10:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    return value


Day = Annotated[date, BeforeValidator(to_day)]

CENTS = Decimal("0.01")


def money_to_json(value: Decimal) -> float:
    """Round to cents and send as a JSON number; exact up to 13 integer digits."""
    return float(Decimal(value).quantize(CENTS))


# Two-decimal money, sent to the dashboard as a JSON number
Money = Annotated[Decimal, PlainSerializer(money_to_json, return_type=float, when_used="json")]


class SBase(BaseModel):
    # Python names are snake_case, the wire uses the dashboard's camelCase aliases
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
