"""
passbench.password_config
Declarative description of a password: length, character classes and
characters that must appear in the output.
"""

from typing import FrozenSet, Iterable, Set

from .errors import ConfigError

# Hard ceiling on length. Only the generator enforces it.
MAX_LENGTH = 1_000_000


def _check_length(length) -> int:
    # bool is an int subclass; True would otherwise pass as length 1
    if isinstance(length, bool) or not isinstance(length, int):
        raise ConfigError(f"length must be an integer, got {length!r}")
    if length <= 0:
        raise ConfigError(f"length must be positive, got {length}")
    return length


class PasswordConfig:
    """
    Generation parameters for a single password.

    The character-class flags default to off and the required set starts
    empty. ``length`` is validated on every assignment, but only for
    positivity: a config longer than MAX_LENGTH, or one whose length was
    lowered below the number of required characters, is rejected later by
    the generator.
    """

    def __init__(self, length: int):
        self._length = _check_length(length)
        self.use_latin = False
        self.use_cyrillic = False
        self.use_digits = False
        self.use_special = False
        self._required: Set[str] = set()

    @classmethod
    def build(
        cls,
        length: int,
        *,
        latin: bool = False,
        cyrillic: bool = False,
        digits: bool = False,
        special: bool = False,
        required: Iterable[str] = "",
    ) -> "PasswordConfig":
        cfg = cls(length)
        cfg.enable_latin(latin)
        cfg.enable_cyrillic(cyrillic)
        cfg.enable_digits(digits)
        cfg.enable_special(special)
        cfg.add_required_characters(required or "")
        return cfg

    @property
    def length(self) -> int:
        return self._length

    @length.setter
    def length(self, value: int) -> None:
        self._length = _check_length(value)

    def enable_latin(self, enabled: bool = True) -> None:
        self.use_latin = bool(enabled)

    def enable_cyrillic(self, enabled: bool = True) -> None:
        self.use_cyrillic = bool(enabled)

    def enable_digits(self, enabled: bool = True) -> None:
        self.use_digits = bool(enabled)

    def enable_special(self, enabled: bool = True) -> None:
        self.use_special = bool(enabled)

    def add_required_character(self, ch: str) -> None:
        """
        Add one character that must appear in the generated password.

        Re-adding a present character is a no-op. Otherwise the set may never
        grow past ``length`` characters; the call that would do so raises
        ConfigError and leaves the set untouched.
        """
        if ch is None:
            raise ConfigError("character must not be None")
        if not isinstance(ch, str) or len(ch) != 1:
            raise ConfigError(f"expected a single character, got {ch!r}")
        if ch in self._required:
            return
        if len(self._required) >= self._length:
            raise ConfigError(
                f"cannot add {ch!r}: {len(self._required)} required characters "
                f"already fill a password of length {self._length}"
            )
        self._required.add(ch)

    def add_required_characters(self, chars: Iterable[str]) -> None:
        for ch in chars:
            self.add_required_character(ch)

    @property
    def required_characters(self) -> FrozenSet[str]:
        return frozenset(self._required)

    @property
    def required_count(self) -> int:
        return len(self._required)

    @property
    def any_class_enabled(self) -> bool:
        return self.use_latin or self.use_cyrillic or self.use_digits or self.use_special

    def _key(self):
        return (
            self._length,
            self.use_latin,
            self.use_cyrillic,
            self.use_digits,
            self.use_special,
            frozenset(self._required),
        )

    def __eq__(self, other):
        if not isinstance(other, PasswordConfig):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return (
            f"PasswordConfig(length={self._length}, use_latin={self.use_latin}, "
            f"use_cyrillic={self.use_cyrillic}, use_digits={self.use_digits}, "
            f"use_special={self.use_special}, "
            f"required_characters={sorted(self._required)!r})"
        )
