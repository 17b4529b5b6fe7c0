from __future__ import annotations

import logging
import random

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .charsets import LOWERCASE, NUMBERS, SPECIAL, UPPERCASE
from .config import MAX_LENGTH, MIN_LENGTH, MIN_SPECIAL_LENGTH
from .errors import PolicyError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationPolicy:
    """
    Parameters controlling the construction of one password.

    Raises:
        PolicyError: If the length is outside the supported range, or
            too short to hold a special character alongside the three
            mandatory classes.
    """

    length: int
    include_special: bool = False

    def __post_init__(self) -> None:
        if not MIN_LENGTH <= self.length <= MAX_LENGTH:
            msg = f'length must be between {MIN_LENGTH} and {MAX_LENGTH}, got {self.length}'
            raise PolicyError(msg)
        if self.include_special and self.length < MIN_SPECIAL_LENGTH:
            msg = f'length must be at least {MIN_SPECIAL_LENGTH} when using special characters'
            raise PolicyError(msg)

    @property
    def character_classes(self) -> Tuple[str, ...]:
        """Enabled classes in guaranteed-inclusion order."""
        if self.include_special:
            return (UPPERCASE, LOWERCASE, NUMBERS, SPECIAL)
        return (UPPERCASE, LOWERCASE, NUMBERS)


@dataclass
class PasswordGenerator:
    """
    Generate passwords that contain every enabled character class.

    The random source defaults to ``random.SystemRandom`` so output is
    drawn from OS entropy and never repeats between runs. Pass a seeded
    ``random.Random`` to get reproducible output.
    """

    rng: random.Random = field(default_factory=random.SystemRandom)

    def generate(self, policy: GenerationPolicy) -> str:
        """
        Return a password built according to ``policy``.

        One character from each enabled class is placed first, the
        remaining slots are filled by picking a class and then a
        character uniformly at random, and the whole buffer is shuffled.

        Raises:
            PolicyError: If ``policy`` is not a GenerationPolicy.
        """
        if not isinstance(policy, GenerationPolicy):
            msg = f'expected GenerationPolicy, got {type(policy).__name__}'
            raise PolicyError(msg)

        classes = policy.character_classes
        password: List[str] = [self.rng.choice(charset) for charset in classes]

        fill_count = policy.length - len(password)
        for _ in range(fill_count):
            charset = classes[self.rng.randrange(len(classes))]
            password.append(self.rng.choice(charset))

        self._shuffle(password)

        logger.debug(
            'Generated password: length=%d special=%s guaranteed=%d filled=%d',
            policy.length,
            policy.include_special,
            len(classes),
            fill_count,
        )
        return ''.join(password)

    def _shuffle(self, chars: List[str]) -> None:
        """Fisher-Yates shuffle in place, from the last index down to 1."""
        for i in range(len(chars) - 1, 0, -1):
            j = self.rng.randrange(i + 1)
            chars[i], chars[j] = chars[j], chars[i]


def generate_password(
    length: int,
    include_special: bool = False,
    rng: Optional[random.Random] = None,
) -> str:
    """
    Generate a single password without building the objects by hand.

    Args:
        length: Number of characters in the password.
        include_special: Whether to enable the special-character class.
        rng: Random source; ``random.SystemRandom`` when omitted.

    Returns:
        The generated password.
    """
    generator = PasswordGenerator() if rng is None else PasswordGenerator(rng=rng)
    return generator.generate(GenerationPolicy(length, include_special))
