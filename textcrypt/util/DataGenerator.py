# textcrypt/util/DataGenerator.py
import logging
import random
import string
import time

from textcrypt.util.logger import log

# A few multi-byte code points so UTF-8 handling gets exercised
_UNICODE_SAMPLES = "éüßçñøåæ€漢字かなЖЯ✓😀"


class DataGenerator:
    """
    Utility class for generating random text for round-trip testing.
    """

    @staticmethod
    def generate_ascii_text_data(length: int, charToSymbolRatio: float = 0.05) -> str:
        """Generate random text data of specified length."""
        start_time = time.perf_counter()
        num_chars = int(length * (1 - charToSymbolRatio))
        num_symbols = length - num_chars

        chars = "".join(random.choices(string.ascii_letters + string.digits, k=num_chars))
        symbols = "".join(random.choices(string.punctuation + " ", k=num_symbols))

        result = list(chars + symbols)
        random.shuffle(result)
        elapsed_ms = (time.perf_counter() - start_time) * 1000.0
        log(
            f"Generated {length} chars; took {elapsed_ms:.0f}ms | charToSymbolRatio: {charToSymbolRatio}",
            logging.DEBUG,
        )
        return "".join(result)

    @staticmethod
    def generate_unicode_text_data(length: int, unicodeRatio: float = 0.25) -> str:
        """Generate random text mixing ASCII letters with multi-byte characters."""
        num_unicode = int(length * unicodeRatio)
        ascii_part = DataGenerator.generate_ascii_text_data(length - num_unicode)
        unicode_part = "".join(random.choices(_UNICODE_SAMPLES, k=num_unicode))

        result = list(ascii_part + unicode_part)
        random.shuffle(result)
        return "".join(result)
