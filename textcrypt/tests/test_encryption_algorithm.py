"""Tests for AlgorithmTag, the EncryptionAlgorithm ABC and the text adapters."""
import pytest

from textcrypt.EncryptionAlgorithm import AlgorithmTag, EncryptionAlgorithm
from textcrypt.adapters import HexAdapter, IvHexAdapter, RawTextAdapter
from textcrypt.errors import (
    DecryptionFailureError,
    InvalidFormatError,
    InvalidHexEncodingError,
    InvalidTextError,
    UnknownAlgorithmError,
)


class TestAlgorithmTag:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("aes128", AlgorithmTag.AES128),
            ("AES-128", AlgorithmTag.AES128),
            ("aes_128", AlgorithmTag.AES128),
            ("Base64", AlgorithmTag.BASE64),
            ("ROT13", AlgorithmTag.ROT13),
            (" xor ", AlgorithmTag.XOR),
            ("caesar", AlgorithmTag.CAESAR),
        ],
    )
    def test_parse(self, name: str, expected: AlgorithmTag) -> None:
        assert AlgorithmTag.parse(name) is expected

    def test_parse_unknown_raises(self) -> None:
        with pytest.raises(UnknownAlgorithmError, match="Unknown algorithm 'des'"):
            AlgorithmTag.parse("des")

    def test_closed_set(self) -> None:
        assert {t.value for t in AlgorithmTag} == {"aes128", "base64", "rot13", "xor", "caesar"}


class TestEncryptionAlgorithmABC:
    def test_cannot_instantiate_base_class(self) -> None:
        with pytest.raises(TypeError, match="abstract"):
            EncryptionAlgorithm()  # type: ignore[abstract]

    def test_subclass_must_implement_encrypt_and_decrypt(self) -> None:
        class Incomplete(EncryptionAlgorithm):
            TAG = AlgorithmTag.ROT13

        with pytest.raises(TypeError, match="abstract"):
            Incomplete()  # type: ignore[abstract]

    def test_subclass_with_both_methods_works(self) -> None:
        class Identity(EncryptionAlgorithm):
            TAG = AlgorithmTag.BASE64

            def encrypt(self, data, iv=b""):
                return data

            def decrypt(self, data, iv=b""):
                return data

        algo = Identity()
        assert algo.decrypt(algo.encrypt(b"test")) == b"test"
        assert algo.identity() is AlgorithmTag.BASE64

    def test_default_adapter_not_defined(self) -> None:
        class NoFormat(EncryptionAlgorithm):
            TAG = AlgorithmTag.BASE64

            def encrypt(self, data, iv=b""):
                return data

            def decrypt(self, data, iv=b""):
                return data

        with pytest.raises(NotImplementedError, match="NoFormat"):
            NoFormat.adapter()


class TestRawTextAdapter:
    def test_passes_text_through(self) -> None:
        adapter = RawTextAdapter()
        assert adapter.extract_encrypt_output(b"abc", b"") == "abc"
        assert adapter.prepare_decrypt_input("abc") == (b"abc", b"")

    def test_no_iv(self) -> None:
        assert RawTextAdapter().IV_SIZE == 0

    def test_invalid_utf8_is_decryption_failure(self) -> None:
        with pytest.raises(DecryptionFailureError, match="UTF-8"):
            RawTextAdapter().extract_decrypt_output(b"\xff\xfe")


class TestHexAdapter:
    def test_lowercase_hex(self) -> None:
        assert HexAdapter().extract_encrypt_output(b"\x0a\xff", b"") == "0aff"

    def test_accepts_uppercase_hex(self) -> None:
        assert HexAdapter().prepare_decrypt_input("0AFF") == (b"\x0a\xff", b"")

    @pytest.mark.parametrize("value", ["zz", "abc", "0x0a", "0a ff", " 0aff"])
    def test_invalid_hex_raises(self, value: str) -> None:
        with pytest.raises(InvalidHexEncodingError, match="payload"):
            HexAdapter().prepare_decrypt_input(value)


class TestIvHexAdapter:
    def test_format(self) -> None:
        adapter = IvHexAdapter(16)
        out = adapter.extract_encrypt_output(b"\x01\x02", b"\x00" * 16)
        assert out == "00" * 16 + ":0102"

    def test_parse(self) -> None:
        adapter = IvHexAdapter(16)
        data, iv = adapter.prepare_decrypt_input("00" * 16 + ":0102")
        assert data == b"\x01\x02"
        assert iv == b"\x00" * 16

    def test_missing_separator(self) -> None:
        with pytest.raises(InvalidFormatError, match="IV:encrypted_data"):
            IvHexAdapter(16).prepare_decrypt_input("invalidFormatWithoutColon")

    def test_extra_separator_is_invalid_format(self) -> None:
        with pytest.raises(InvalidFormatError, match="IV:encrypted_data"):
            IvHexAdapter(16).prepare_decrypt_input("00" * 16 + ":01:02")

    def test_bad_iv_hex(self) -> None:
        with pytest.raises(InvalidHexEncodingError, match="IV"):
            IvHexAdapter(16).prepare_decrypt_input("zz:0102")

    def test_wrong_iv_length(self) -> None:
        with pytest.raises(InvalidFormatError, match="16-byte IV"):
            IvHexAdapter(16).prepare_decrypt_input("00ff:0102")

    def test_whitespace_in_hex_rejected(self) -> None:
        with pytest.raises(InvalidHexEncodingError, match="encrypted data"):
            IvHexAdapter(16).prepare_decrypt_input("00" * 16 + ":01 02")


class TestUnencodableText:
    def test_encrypt_input_with_lone_surrogate(self) -> None:
        with pytest.raises(InvalidTextError, match="UTF-8"):
            RawTextAdapter().prepare_encrypt_input("\ud800")

    def test_raw_decrypt_input_with_lone_surrogate(self) -> None:
        with pytest.raises(InvalidFormatError, match="UTF-8"):
            RawTextAdapter().prepare_decrypt_input("\ud800")

    def test_hex_decrypt_input_with_lone_surrogate(self) -> None:
        with pytest.raises(InvalidHexEncodingError):
            HexAdapter().prepare_decrypt_input("\ud800")
