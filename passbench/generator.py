"""
passbench.generator
Secure password generator driven by a PasswordConfig.
"""

import logging
from enum import Enum
from random import SystemRandom
from typing import List, Optional

from .errors import GenerationError
from .password_config import MAX_LENGTH, PasswordConfig

logger = logging.getLogger(__name__)


class CharacterSet(Enum):
    LATIN_LOWER = "abcdefghijklmnopqrstuvwxyz"
    LATIN_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    CYRILLIC_LOWER = "абвгдежзийклмнопрстуфхцчшщъыьэюя"
    CYRILLIC_UPPER = "АБВГДЕЖЗИЙКЛМНОПРСТУФХЦЧШЩЪЫЬЭЮЯ"
    DIGITS = "0123456789"
    SPECIAL = "!@#$%^&*()_+-=[]{}|;:,.<>?"


SPECIAL_CHARACTERS = CharacterSet.SPECIAL.value


def build_alphabet(config: PasswordConfig) -> str:
    """Concatenate the enabled character sets in their fixed order."""
    parts = []
    if config.use_latin:
        parts.append(CharacterSet.LATIN_LOWER.value + CharacterSet.LATIN_UPPER.value)
    if config.use_cyrillic:
        parts.append(CharacterSet.CYRILLIC_LOWER.value + CharacterSet.CYRILLIC_UPPER.value)
    if config.use_digits:
        parts.append(CharacterSet.DIGITS.value)
    if config.use_special:
        parts.append(CharacterSet.SPECIAL.value)
    return "".join(parts)


def validate_config(config: PasswordConfig) -> None:
    """
    Raise GenerationError for the first rule the config breaks.
    Rules are checked in order: positive length, length cap,
    required characters fit, at least one character class.
    """
    length = config.length
    if length <= 0:
        msg = f"length must be positive, got {length}"
    elif length > MAX_LENGTH:
        msg = f"length exceeds maximum of {MAX_LENGTH}, got {length}"
    elif config.required_count > length:
        msg = (
            f"required characters exceed length "
            f"({config.required_count} required, length {length})"
        )
    elif not config.any_class_enabled:
        msg = "no character class selected (latin, cyrillic, digits or special)"
    else:
        logger.debug("config valid: length=%d required=%d", length, config.required_count)
        return
    logger.error(msg)
    raise GenerationError(msg)


class PasswordGenerator:
    """
    Generates passwords from a PasswordConfig.

    Every instance owns its own SystemRandom. Instances are not meant to be
    shared between threads; give each thread its own generator.
    """

    def __init__(self, rng: Optional[SystemRandom] = None):
        self._random = rng or SystemRandom()

    def generate(self, config: PasswordConfig) -> str:
        validate_config(config)
        alphabet = build_alphabet(config)

        required = list(config.required_characters)
        logger.debug("seeding %d required characters", len(required))

        fill = self._draw(alphabet, config.length - len(required))
        password = "".join(self._scatter(fill, required))
        logger.info("password generated, length %d", len(password))
        return password

    def _draw(self, alphabet: str, count: int) -> List[str]:
        """Uniform draws with replacement, one random byte per candidate."""
        size = len(alphabet)
        # only bytes below `limit` map uniformly onto the alphabet
        limit = 256 - (256 % size)
        out: List[str] = []
        while len(out) < count:
            missing = count - len(out)
            chunk = self._random.randbytes(missing * 256 // limit + 16)
            out.extend(alphabet[b % size] for b in chunk if b < limit)
        del out[count:]
        return out

    def _scatter(self, fill: List[str], required: List[str]) -> List[str]:
        """
        Put each required character at a uniformly chosen distinct slot and
        the fill, in order, everywhere else.

        The fill is i.i.d., so the result has the same distribution as
        appending the required characters and shuffling the whole buffer.
        """
        if not required:
            return fill
        total = len(fill) + len(required)
        out: List[Optional[str]] = [None] * total
        for slot, ch in zip(self._random.sample(range(total), len(required)), required):
            out[slot] = ch
        rest = iter(fill)
        return [ch if ch is not None else next(rest) for ch in out]


def generate_password(
    length: int = 16,
    *,
    latin: bool = True,
    cyrillic: bool = False,
    digits: bool = True,
    special: bool = True,
    required: str = "",
) -> str:
    """
    Build a PasswordConfig from keyword flags and generate one password
    with a fresh generator.
    """
    config = PasswordConfig.build(
        length,
        latin=latin,
        cyrillic=cyrillic,
        digits=digits,
        special=special,
        required=required,
    )
    return PasswordGenerator().generate(config)
