"""Handler for datetime fields."""

from datetime import datetime, timezone
from typing import Any

from behat_endpoint.exceptions import FieldExpansionError

from .base import BaseFieldHandler

STORAGE_DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%S"
STORAGE_DATE_FORMAT = "%Y-%m-%d"


class DatetimeHandler(BaseFieldHandler):
    """
    Accepts ISO 8601 strings or unix timestamps; stores UTC without offset.
    Fields with datetime_type 'date' keep only the date part.
    """

    field_type = "datetime"

    def expand(self, values: Any) -> list[Any]:
        date_only = self.field.setting("datetime_type") == "date"
        fmt = STORAGE_DATE_FORMAT if date_only else STORAGE_DATETIME_FORMAT
        return [{"value": self._parse(v).strftime(fmt)} for v in self._as_list(values)]

    def _parse(self, value: Any) -> datetime:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return datetime.fromtimestamp(value, tz=timezone.utc)
        try:
            text = str(value).strip()
            if text.endswith(("Z", "z")):
                text = text[:-1] + "+00:00"
            parsed = datetime.fromisoformat(text)
        except ValueError as e:
            raise FieldExpansionError(
                f"Cannot parse '{value}' as a date for field {self.field.name}"
            ) from e
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(timezone.utc)
        return parsed
