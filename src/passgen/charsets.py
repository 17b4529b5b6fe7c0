from __future__ import annotations

from typing import Final

# Visually similar characters (0, O, I, l, 1) are left out of every set.
UPPERCASE: Final[str] = 'ABCDEFGHJKLMNPQRSTUVWXYZ'
LOWERCASE: Final[str] = 'abcdefghijkmnpqrstuvwxyz'
NUMBERS: Final[str] = '23456789'
SPECIAL: Final[str] = '!@#$%^&*()_+-=[]{}|;:,.<>?'

EXCLUDED_CHARACTERS: Final[tuple[str, ...]] = ('0', 'O', 'I', 'l', '1')
