import json
import re
from typing import Any, Callable, List, Optional, Tuple


class ResponseParser:
    """
    Recovers the JSON array from a model answer.

    Strategies run in order; each one returns None instead of raising,
    and the first non-None result wins. When every strategy gives up
    the parser returns None.
    """

    FENCED_PATTERN = re.compile(r'```(?:json)?\s*(\[[\s\S]*\])\s*```')
    BARE_ARRAY_PATTERN = re.compile(r'(\[[\s\S]*\])')

    def __init__(self):
        self.strategies: List[Tuple[str, Callable[[str], Optional[Any]]]] = [
            ("direct", self._parse_direct),
            ("fenced", self._parse_fenced),
            ("bare_array", self._parse_bare_array),
        ]
        self.last_strategy: Optional[str] = None

    def parse(self, text: Optional[str]) -> Optional[List[Any]]:
        self.last_strategy = None
        if not text or not text.strip():
            return None

        for name, strategy in self.strategies:
            parsed = strategy(text)
            if parsed is None:
                continue
            self.last_strategy = name
            return parsed if isinstance(parsed, list) else [parsed]

        return None

    def _parse_direct(self, text: str) -> Optional[Any]:
        return self._loads(text)

    def _parse_fenced(self, text: str) -> Optional[Any]:
        match = self.FENCED_PATTERN.search(text)
        return self._loads(match.group(1)) if match else None

    def _parse_bare_array(self, text: str) -> Optional[Any]:
        match = self.BARE_ARRAY_PATTERN.search(text)
        return self._loads(match.group(1)) if match else None

    def _loads(self, text: str) -> Optional[Any]:
        try:
            return json.loads(text)
        except ValueError:
            return None
