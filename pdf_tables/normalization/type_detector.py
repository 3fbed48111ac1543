import math
import re
from datetime import datetime
from typing import Any, Iterable, Optional, Union

from .parsed_table import ColumnType


class TypeDetector:
    BOOL_LITERALS = {"true", "false"}

    # Finite decimal literals only: no hex, Infinity/NaN or overflowing exponents

    NUMBER_PATTERN = re.compile(r'^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$')
    INT_PATTERN = re.compile(r'^[+-]?\d+$')

    # Shorter strings are too often codes or bare numbers to trust as dates
    MIN_DATE_LENGTH = 6

    DATETIME_FORMATS = [
        "%Y-%m-%dT%H:%M:%SZ",
        "%Y-%m-%dT%H:%M:%S.%fZ",
        "%Y-%m-%d %H:%M:%S",
        "%Y-%m-%d %H:%M",
        "%Y-%m-%d",
        "%Y/%m/%d",
        "%m/%d/%Y",
        "%d/%m/%Y",
        "%m-%d-%Y",
        "%d-%m-%Y",
        "%d-%b-%Y",
        "%d %b %Y",
        "%d %B %Y",
        "%b %d %Y",
        "%B %d %Y",
        "%b %Y",
        "%B %Y",
    ]

    @classmethod
    def infer_column_type(cls, samples: Iterable[Any]) -> ColumnType:
        samples = [value for value in samples if value is not None]

        if not samples:
            return ColumnType.STRING

        if all(cls.is_boolean(value) for value in samples):
            return ColumnType.BOOLEAN

        if all(cls.is_number(value) for value in samples):
            return ColumnType.NUMBER

        if all(cls.is_date(value) for value in samples):
            return ColumnType.DATE

        return ColumnType.STRING

    @classmethod
    def is_boolean(cls, value: Any) -> bool:
        if isinstance(value, bool):
            return True
        return isinstance(value, str) and value in cls.BOOL_LITERALS

    @classmethod
    def is_number(cls, value: Any) -> bool:
        return cls.to_number(value) is not None

    @classmethod
    def is_date(cls, value: Any) -> bool:
        if not isinstance(value, str):
            return False

        value_stripped = value.strip()
        if len(value_stripped) < cls.MIN_DATE_LENGTH:
            return False

        return cls._parse_datetime(value_stripped) is not None

    @classmethod
    def to_number(cls, value: Any) -> Optional[Union[int, float]]:
        if isinstance(value, bool):
            return None

        if isinstance(value, (int, float)):
            return value if math.isfinite(value) else None

        if not isinstance(value, str):
            return None

        value_stripped = value.strip()
        if not cls.NUMBER_PATTERN.match(value_stripped):
            return None

        if cls.INT_PATTERN.match(value_stripped):
            try:
                return int(value_stripped)
            except ValueError:
                # Past the interpreter's int digit limit; float() overflows to inf below
                pass

        number = float(value_stripped)
        return number if math.isfinite(number) else None

    @classmethod
    def _parse_datetime(cls, value: str) -> Optional[datetime]:
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            pass

        for fmt in cls.DATETIME_FORMATS:
            try:
                return datetime.strptime(value, fmt)
            except ValueError:
                continue
        return None
