"""Tests for token identity helpers."""

from pairscope.ingestion.models import Token
from pairscope.tokens import address_key, get_token_label


class TestAddressKey:
    def test_lowercases(self):
        assert address_key(Token(address="0xAbCdEf")) == "0xabcdef"

    def test_mixed_case_matches(self):
        assert address_key(Token(address="0xABC")) == address_key(Token(address="0xabc"))

    def test_matches_token_key(self):
        token = Token(address="0xAbC")
        assert address_key(token) == token.key


class TestGetTokenLabel:
    def test_returns_symbol_when_available(self):
        assert get_token_label(Token(address="0x1234567890abcdef", symbol="WETH")) == "WETH"

    def test_short_address_when_no_symbol(self):
        token = Token(address="0x1234567890abcdef1234")
        assert get_token_label(token) == "0x1234...1234"

    def test_blank_symbol_falls_back_to_address(self):
        token = Token(address="0xabcdef0123456789", symbol="   ")
        assert get_token_label(token) == "0xabcd...6789"

    def test_full_address_if_too_short(self):
        assert get_token_label(Token(address="0xAAA")) == "0xAAA"

    def test_exactly_ten_characters_is_shortened(self):
        assert get_token_label(Token(address="0x12345678")) == "0x1234...5678"
