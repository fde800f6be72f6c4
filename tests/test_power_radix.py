import random

import pytest

from power_radix import PowerRadix
from radix import DEFAULT_ALPHABET, InvalidDigitError, InvalidRadixError


def canonical(digits, zero):
    digits = list(digits)
    while len(digits) > 1 and digits[0] == zero:
        digits.pop(0)
    return digits or [zero]


def test_base_10_to_base_16_and_back():
    assert PowerRadix("255", 10).to_text(16) == "FF"
    assert PowerRadix("FF", 16).to_text(10) == "255"
    assert PowerRadix(255, 10).to_symbols(16) == ["F", "F"]


@pytest.mark.parametrize("source", [2, 10, 36, 62, ["x", "y", "z"]])
@pytest.mark.parametrize("target", [2, 7, 16, 62, ["a", "b"]])
def test_zero_renders_as_one_digit(source, target):
    zero = source[0] if isinstance(source, list) else "0"
    expected = target[0] if isinstance(target, list) else "0"
    assert PowerRadix(zero, source).to_symbols(target) == [expected]
    assert PowerRadix(zero * 5, source).to_symbols(target) == [expected]


def test_large_values_are_exact():
    nines = "9" * 25
    expected = bin(10**25 - 1)[2:]
    assert PowerRadix(nines, 10).to_text(2) == expected
    assert PowerRadix(expected, 2).to_text(10) == nines
    assert int(PowerRadix(nines, 10)) == 10**25 - 1


def test_custom_alphabet():
    assert PowerRadix("yxy", ["x", "y"]).to_text(10) == "5"
    assert PowerRadix("5", 10).to_symbols(["x", "y"]) == ["y", "x", "y"]


def test_multi_character_tokens():
    words = ["zero", "one"]
    assert PowerRadix(["one", "one", "zero", "one"], words).to_text(10) == "13"
    assert PowerRadix("13", 10).to_symbols(words) == ["one", "one", "zero", "one"]
    assert PowerRadix("13", 10).to_text(words) == "oneonezeroone"


def test_radix_above_62_with_numeric_tokens():
    alphabet = list(range(1000))
    assert PowerRadix("123456789", 10).to_symbols(alphabet) == [123, 456, 789]
    assert PowerRadix(["123", "456", "789"], alphabet).to_text(10) == "123456789"


def test_invalid_digit_fails_without_partial_result():
    converter = PowerRadix("12Z", 10)
    with pytest.raises(InvalidDigitError) as excinfo:
        converter.to_symbols(16)
    assert excinfo.value.symbol == "Z"
    assert excinfo.value.position == 2
    with pytest.raises(InvalidDigitError):
        converter.to_text(2)


def test_invalid_radix_is_deferred_to_conversion():
    converter = PowerRadix("10", 1)
    with pytest.raises(InvalidRadixError):
        converter.to_symbols(10)
    with pytest.raises(InvalidRadixError):
        PowerRadix("10", "0120").to_symbols(10)
    with pytest.raises(InvalidRadixError):
        PowerRadix("10", 10).to_symbols(63)
    with pytest.raises(InvalidRadixError):
        PowerRadix("10", 10).to_symbols([])


def test_one_converter_many_targets():
    converter = PowerRadix("1000", 10)
    assert converter.to_text(2) == "1111101000"
    assert converter.to_text(16) == "3E8"
    assert converter.to_text(62) == "G8"
    assert converter.to_text(2) == "1111101000"
    assert converter.digits == ("1", "0", "0", "0")
    assert converter.source_base == 10


def test_round_trip_random():
    rng = random.Random(1234)
    for _ in range(200):
        a = rng.randint(2, 62)
        b = rng.randint(2, 62)
        digits = "".join(rng.choice(DEFAULT_ALPHABET[:a]) for _ in range(rng.randint(1, 60)))
        there = PowerRadix(digits, a).to_symbols(b)
        back = PowerRadix(there, b).to_symbols(a)
        assert back == canonical(digits, "0")


def test_repr():
    assert repr(PowerRadix("ff", 16)) == "PowerRadix(('f', 'f'), Count(16))"


def test_construction_rejects_only_wrong_shapes():
    with pytest.raises(InvalidRadixError):
        PowerRadix("10", 2.0)
    with pytest.raises(InvalidDigitError):
        PowerRadix(None, 10)
    PowerRadix("10", 1)
    PowerRadix("ZZ", 10)


def test_converter_ignores_later_default_alphabet_rebinding(monkeypatch):
    import radix

    converter = PowerRadix("FF", 16)
    monkeypatch.setattr(radix, "DEFAULT_ALPHABET", DEFAULT_ALPHABET[::-1])
    assert converter.to_text(["0", "1", "2", "3", "4", "5", "6", "7", "8", "9"]) == "255"
