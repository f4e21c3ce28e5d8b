from textcrypt.util.DataGenerator import DataGenerator
import unittest


class TestDataGenerator(unittest.TestCase):
    def test_ascii_length(self):
        """Generated ASCII text has the requested length."""
        self.assertEqual(len(DataGenerator.generate_ascii_text_data(100)), 100)

    def test_ascii_only(self):
        """Generated ASCII text stays in the ASCII range."""
        self.assertTrue(DataGenerator.generate_ascii_text_data(500).isascii())

    def test_unicode_has_multibyte(self):
        """Unicode text contains characters outside ASCII."""
        text = DataGenerator.generate_unicode_text_data(100, unicodeRatio=0.5)
        self.assertEqual(len(text), 100)
        self.assertFalse(text.isascii())


if __name__ == "__main__":
    unittest.main()
