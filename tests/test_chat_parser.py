"""Tests for chat export line parsing."""
import unittest

from desikit.chat import ParsedMessage, WhatsAppParser, parse_whatsapp_message


class TestWhatsAppParser(unittest.TestCase):
    """Test WhatsAppParser functionality."""

    def setUp(self):
        """Set up test fixtures."""
        self.parser = WhatsAppParser()

    def test_parse_funny_message(self):
        """Test the documented funny example."""
        result = parse_whatsapp_message("25/01/2025, 14:30 - Rahul: Bhai party kab hai? 😂")

        self.assertEqual(result, ParsedMessage(
            date="25/01/2025",
            time="14:30",
            sender="Rahul",
            text="Bhai party kab hai? 😂",
            word_count=5,
            sentiment="funny"
        ))

    def test_parse_love_message(self):
        """Test the documented love example."""
        result = self.parser.parse("01/12/2024, 09:15 - Priya: I love this song")

        self.assertEqual(result.sender, "Priya")
        self.assertEqual(result.word_count, 4)
        self.assertEqual(result.sentiment, "love")

    def test_to_dict(self):
        """Test camelCase export."""
        result = self.parser.parse("01/12/2024, 09:15 - Priya: hello")

        self.assertEqual(result.to_dict(), {
            "date": "01/12/2024",
            "time": "09:15",
            "sender": "Priya",
            "text": "hello",
            "wordCount": 1,
            "sentiment": "neutral"
        })

    def test_round_trip(self):
        """Test fields rebuild the original line."""
        lines = [
            "25/01/2025, 14:30 - Rahul: Bhai party kab hai? 😂",
            "1/2/25, 9:05 am - Aunty Ji: Good morning 🌸 sab log",
            "03/03/2024, 23:59 - Vikram Singh: see you: tomorrow - ok",
            "03/03/2024, 23:59 - Vikram:   spaced out   ",
        ]
        for line in lines:
            with self.subTest(line=line):
                msg = self.parser.parse(line)
                self.assertEqual(f"{msg.date}, {msg.time} - {msg.sender}: {msg.text}", line)

    def test_text_not_trimmed(self):
        """Test text is stored as exported while word count trims."""
        result = self.parser.parse("03/03/2024, 23:59 - Vikram:   spaced   out   ")

        self.assertEqual(result.text, "  spaced   out   ")
        self.assertEqual(result.word_count, 2)

    def test_whitespace_only_text_has_zero_words(self):
        """Test blank message text."""
        result = self.parser.parse("03/03/2024, 23:59 - Vikram:    \t ")

        self.assertIsNotNone(result)
        self.assertEqual(result.word_count, 0)
        self.assertEqual(result.sentiment, "neutral")

    def test_empty_text(self):
        """Test nothing after the text separator."""
        result = self.parser.parse("03/03/2024, 23:59 - Vikram: ")

        self.assertEqual(result.text, "")
        self.assertEqual(result.word_count, 0)

    def test_sentiment_rules(self):
        """Test sentiment markers and priority."""
        cases = [
            ("HAHAHA too good", "funny"),
            ("nice one :)", "funny"),
            ("I LOVE it", "love"),
            ("bahut Pyaar", "love"),
            ("dil se ❤", "love"),
            ("love you haha", "funny"),
            ("😂❤", "funny"),
            ("kal milte hai", "neutral"),
        ]
        for text, expected in cases:
            with self.subTest(text=text):
                self.assertEqual(self.parser.classify(text), expected)

    def test_sender_colon_after_dash_only(self):
        """Test the text separator is searched after the sender separator."""
        result = self.parser.parse("25/01/2025, 14:30 - Rahul: note: bring cake")

        self.assertEqual(result.sender, "Rahul")
        self.assertEqual(result.text, "note: bring cake")

    def test_invalid_lines(self):
        """Test malformed input returns None."""
        invalid = [
            None,
            123,
            b"25/01/2025, 14:30 - Rahul: hi",
            "",
            "not a valid line",
            "25/01/2025, 14:30 Rahul: hi",
            "25/01/2025 14:30 - Rahul: hi",
            "25/01/2025, 14:30 - Rahul hi",
            "note: 25/01/2025, 14:30 - Rahul",
        ]
        for line in invalid:
            with self.subTest(line=line):
                self.assertIsNone(parse_whatsapp_message(line))

    def test_date_separator_after_sender_separator(self):
        """Test a comma that only appears after the dash still parses."""
        result = self.parser.parse("Note - Rahul: hi, there")

        self.assertEqual(result.date, "Note - Rahul: hi")
        self.assertEqual(result.time, " - Rahul: hi, ")
        self.assertEqual(result.sender, "Rahul")
        self.assertEqual(result.text, "hi, there")
        self.assertEqual(result.word_count, 2)

        result = self.parser.parse("25/01/2025 - 14:30, Rahul: hi")

        self.assertEqual(result.date, "25/01/2025 - 14:30")
        self.assertEqual(result.time, " - 14:30, ")
        self.assertEqual(result.sender, "14:30, Rahul")
        self.assertEqual(result.text, "hi")


if __name__ == "__main__":
    unittest.main()
