"""Tests for the Base64, ROT13, XOR and Caesar transforms."""
import os

import pytest

from textcrypt.EncryptionAlgorithm import AlgorithmTag
from textcrypt.adapters import HexAdapter, RawTextAdapter
from textcrypt.algorithms import (
    DEFAULT_SHIFT,
    Base64Algorithm,
    CaesarAlgorithm,
    Rot13Algorithm,
    XorAlgorithm,
    create_caesar,
    create_xor,
    parse_shift,
    rot13,
)
from textcrypt.errors import EmptyKeyError, InvalidKeyLengthError


class TestBase64Algorithm:
    def test_encode(self) -> None:
        assert Base64Algorithm().encrypt(b"testToken") == b"dGVzdFRva2Vu"

    def test_padded(self) -> None:
        assert Base64Algorithm().encrypt(b"test") == b"dGVzdA=="

    def test_round_trip_binary(self) -> None:
        algo = Base64Algorithm()
        data = os.urandom(64)
        assert algo.decrypt(algo.encrypt(data)) == data

    @pytest.mark.parametrize("value", [b"!!!!", b"dGVzdA", b"dGVz dA=="])
    def test_malformed_returns_empty(self, value: bytes) -> None:
        assert Base64Algorithm().decrypt(value) == b""

    def test_identity_and_format(self) -> None:
        assert Base64Algorithm().identity() is AlgorithmTag.BASE64
        assert isinstance(Base64Algorithm.adapter(), RawTextAdapter)
        assert not Base64Algorithm.requires_key


class TestRot13Algorithm:
    def test_known_value(self) -> None:
        assert rot13(b"Why did the chicken cross the road?") == b"Jul qvq gur puvpxra pebff gur ebnq?"

    def test_alphabet_edges(self) -> None:
        assert rot13(b"AMNZamnz") == b"NZAMnzam"

    def test_non_letters_untouched(self) -> None:
        data = "0123 !@#[`{ é漢".encode("utf-8")
        assert rot13(data) == data

    def test_involution(self) -> None:
        data = os.urandom(256)
        assert rot13(rot13(data)) == data

    def test_encrypt_and_decrypt_are_the_same(self) -> None:
        algo = Rot13Algorithm()
        assert algo.encrypt(b"Hello") == algo.decrypt(b"Hello") == b"Uryyb"
        assert algo.identity() is AlgorithmTag.ROT13


class TestXorAlgorithm:
    def test_known_value(self) -> None:
        assert XorAlgorithm(b"key").encrypt(b"abc") == bytes([0x0A, 0x07, 0x1A])

    def test_key_repeats(self) -> None:
        assert XorAlgorithm(b"\x01").encrypt(b"\x00\x01\x02") == b"\x01\x00\x03"

    def test_involution(self) -> None:
        algo = create_xor(os.urandom(7))
        data = os.urandom(100)
        assert algo.decrypt(algo.encrypt(data)) == data
        assert algo.encrypt(algo.encrypt(data)) == data

    def test_empty_key_raises(self) -> None:
        with pytest.raises(EmptyKeyError, match="must not be empty"):
            XorAlgorithm(b"")

    def test_empty_key_is_a_key_length_error(self) -> None:
        with pytest.raises(InvalidKeyLengthError):
            create_xor(b"")

    def test_identity_and_format(self) -> None:
        assert XorAlgorithm(b"k").identity() is AlgorithmTag.XOR
        assert isinstance(XorAlgorithm.adapter(), HexAdapter)


class TestCaesarAlgorithm:
    def test_shift_three(self) -> None:
        algo = CaesarAlgorithm(3)
        assert algo.encrypt(b"abc") == b"def"
        assert algo.decrypt(b"def") == b"abc"

    def test_preserves_case_and_punctuation(self) -> None:
        assert CaesarAlgorithm(3).encrypt(b"Hello, World! 42") == b"Khoor, Zruog! 42"

    def test_wraps(self) -> None:
        algo = CaesarAlgorithm(3)
        assert algo.encrypt(b"xyzXYZ") == b"abcABC"
        assert algo.decrypt(b"abcABC") == b"xyzXYZ"

    @pytest.mark.parametrize("shift,expected", [(0, 0), (26, 0), (29, 3), (-1, 25), (-27, 25)])
    def test_shift_normalized(self, shift: int, expected: int) -> None:
        assert CaesarAlgorithm(shift).shift == expected

    def test_zero_shift_is_identity(self) -> None:
        assert CaesarAlgorithm(26).encrypt(b"Same") == b"Same"

    def test_non_ascii_untouched(self) -> None:
        data = "café 漢字".encode("utf-8")
        algo = CaesarAlgorithm(5)
        assert algo.decrypt(algo.encrypt(data)) == data
        assert algo.encrypt(data).endswith("é 漢字".encode("utf-8"))

    def test_identity(self) -> None:
        assert CaesarAlgorithm().identity() is AlgorithmTag.CAESAR
        assert CaesarAlgorithm().shift == DEFAULT_SHIFT


class TestParseShift:
    @pytest.mark.parametrize(
        "key,expected",
        [("5", 5), (" 7 ", 7), ("-2", -2), (b"10", 10), ("", 3), ("abc", 3), ("3.5", 3), (b"\xff", 3)],
    )
    def test_parse(self, key, expected: int) -> None:
        assert parse_shift(key) == expected

    def test_create_from_text(self) -> None:
        assert create_caesar("29").shift == 3
        assert create_caesar(b"not a number").shift == DEFAULT_SHIFT
        assert create_caesar(4).shift == 4
