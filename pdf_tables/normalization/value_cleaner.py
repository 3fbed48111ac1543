import re
from typing import Any, Optional


class ValueCleaner:
    NULL_SENTINELS = {"---", "-", "NIL", "NA", ""}

    APPROX_PATTERN = re.compile(re.escape("(Approx.)"), re.IGNORECASE)

    @classmethod
    def clean(cls, value: Any) -> Optional[str]:
        if value is None:
            return None

        text = cls._to_text(value).strip()

        # Commas are only ever thousand separators in extracted tables
        text = text.replace(",", "")

        text = cls.APPROX_PATTERN.sub("", text).strip()

        if text in cls.NULL_SENTINELS:
            return None

        return text

    @classmethod
    def _to_text(cls, value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)
