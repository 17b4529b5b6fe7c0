from __future__ import annotations

from typing import Final

PROG_NAME: Final[str] = 'passgen'

DEFAULT_LENGTH: Final[int] = 12
MIN_LENGTH: Final[int] = 3
MIN_SPECIAL_LENGTH: Final[int] = 4
MAX_LENGTH: Final[int] = 128

DEFAULT_COUNT: Final[int] = 1
MIN_COUNT: Final[int] = 1
MAX_COUNT: Final[int] = 100
