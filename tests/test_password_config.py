import pytest

from passbench.errors import ConfigError
from passbench.password_config import MAX_LENGTH, PasswordConfig


def test_defaults():
    cfg = PasswordConfig(12)
    assert cfg.length == 12
    assert not (cfg.use_latin or cfg.use_cyrillic or cfg.use_digits or cfg.use_special)
    assert cfg.required_characters == frozenset()
    assert cfg.required_count == 0


def test_zero_length_rejected():
    with pytest.raises(ConfigError):
        PasswordConfig(0)


def test_negative_length_rejected():
    with pytest.raises(ConfigError):
        PasswordConfig(-5)


def test_non_integer_length_rejected():
    for bad in (1.5, "10", True, None):
        try:
            PasswordConfig(bad)
            raised = False
        except ConfigError:
            raised = True
        assert raised, bad


def test_construction_does_not_check_upper_bound():
    cfg = PasswordConfig(MAX_LENGTH + 1)
    assert cfg.length == MAX_LENGTH + 1


def test_set_length_validates():
    cfg = PasswordConfig(10)
    cfg.length = 20
    assert cfg.length == 20
    with pytest.raises(ConfigError):
        cfg.length = 0
    assert cfg.length == 20


def test_set_length_does_not_recheck_required_characters():
    cfg = PasswordConfig(3)
    cfg.add_required_characters("abc")
    cfg.length = 1
    assert cfg.length == 1
    assert cfg.required_count == 3


def test_enable_flags():
    cfg = PasswordConfig(8)
    cfg.enable_latin(True)
    cfg.enable_cyrillic()
    cfg.enable_digits(True)
    cfg.enable_special(False)
    assert cfg.use_latin and cfg.use_cyrillic and cfg.use_digits
    assert not cfg.use_special
    cfg.enable_latin(False)
    assert not cfg.use_latin


def test_required_characters_fill_up_to_length():
    cfg = PasswordConfig(5)
    for ch in "ABCDE":
        cfg.add_required_character(ch)
    assert cfg.required_count == 5
    with pytest.raises(ConfigError):
        cfg.add_required_character("F")
    assert cfg.required_characters == frozenset("ABCDE")


def test_duplicate_required_character_is_noop():
    cfg = PasswordConfig(2)
    cfg.add_required_character("x")
    cfg.add_required_character("x")
    assert cfg.required_count == 1
    cfg.add_required_character("y")
    # set is full, but re-adding a present character still succeeds
    cfg.add_required_character("y")
    assert cfg.required_count == 2


def test_none_character_rejected():
    cfg = PasswordConfig(4)
    with pytest.raises(ConfigError):
        cfg.add_required_character(None)
    assert cfg.required_count == 0


def test_multi_char_string_rejected():
    cfg = PasswordConfig(4)
    with pytest.raises(ConfigError):
        cfg.add_required_character("ab")
    with pytest.raises(ConfigError):
        cfg.add_required_character("")


def test_required_characters_is_read_only_snapshot():
    cfg = PasswordConfig(4)
    cfg.add_required_character("q")
    view = cfg.required_characters
    assert isinstance(view, frozenset)
    assert not hasattr(view, "add")
    cfg.add_required_character("w")
    assert view == frozenset("q")


def test_equality_and_hash():
    a = PasswordConfig.build(10, latin=True, digits=True, required="xyz")
    b = PasswordConfig(10)
    b.enable_digits(True)
    b.enable_latin(True)
    for ch in "zyx":
        b.add_required_character(ch)
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_inequality_on_any_field():
    base = PasswordConfig.build(10, latin=True)
    assert base != PasswordConfig.build(11, latin=True)
    assert base != PasswordConfig.build(10, latin=True, special=True)
    assert base != PasswordConfig.build(10, latin=True, required="a")
    assert base != "not a config"


def test_build_stops_at_first_bad_required_character():
    with pytest.raises(ConfigError):
        PasswordConfig.build(2, latin=True, required="abc")


def test_repr_lists_fields():
    text = repr(PasswordConfig.build(7, special=True, required="b"))
    assert "length=7" in text
    assert "use_special=True" in text
    assert "'b'" in text
