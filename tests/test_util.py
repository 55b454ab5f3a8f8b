"""
Tests for the encoding, string, numeric and localization utilities.
"""

import json

import pytest

from convkit.util import (
    url_encode_component, to_url_string, encode_base64,
    trim, contains, replace, is_number, is_positive_number,
    url_encoded, localized, truncate,
    random_int, is_integer, format_float, parse_float,
    Localizer, get_default_localizer, set_default_localizer
)


@pytest.fixture(autouse=True)
def reset_localizer(monkeypatch):
    """Make every test start from a lazily built, empty localizer"""
    monkeypatch.delenv("CONVKIT_LOCALIZATION_PATH", raising=False)
    set_default_localizer(None)
    yield
    set_default_localizer(None)


class TestEncoding:
    """Tests for query strings and Base64"""

    def test_to_url_string(self):
        """Test building a query string from a mapping"""
        params = {"name": "John Smith", "city": "São Paulo"}
        assert to_url_string(params) == "name=John%20Smith&city=S%C3%A3o%20Paulo"

    def test_to_url_string_empty(self):
        """Test an empty mapping gives an empty string"""
        assert to_url_string({}) == ""

    def test_to_url_string_keeps_host_characters(self):
        """Test that host-allowed sub-delimiters are not escaped"""
        assert to_url_string({"q": "a+b:c"}) == "q=a+b:c"
        assert to_url_string({"k": "x/y?z"}) == "k=x%2Fy%3Fz"

    def test_to_url_string_requires_text(self):
        """Test that non-text values are rejected"""
        with pytest.raises(TypeError):
            to_url_string({"count": 1})

    def test_url_encode_component_custom_safe(self):
        """Test the raw encoder with a custom safe set"""
        assert url_encode_component("a/b c", safe="/") == "a/b%20c"

    def test_base64(self):
        """Test Base64 encoding"""
        assert encode_base64("hello") == "aGVsbG8="
        assert encode_base64("") == ""


class TestStrings:
    """Tests for string helpers"""

    def test_trim(self):
        """Test whitespace and newlines are removed from both ends"""
        assert trim("  hello world \n\t") == "hello world"
        assert trim("") == ""

    def test_contains(self):
        """Test substring search with optional case sensitivity"""
        assert contains("Hello World", "World")
        assert not contains("Hello World", "world")
        assert contains("Hello World", "world", case_sensitive=False)
        assert not contains("Hello World", "moon", case_sensitive=False)

    def test_replace_is_literal(self):
        """Test that targets are not interpreted as patterns"""
        assert replace("a.b.c", ".", "-") == "a-b-c"
        assert replace("1+1=2", "+", " plus ") == "1 plus 1=2"

    @pytest.mark.parametrize("text", ["12", "-3.5", "+0.5", ".5", "5.", "0"])
    def test_is_number(self, text):
        """Test plain decimal numbers are recognised"""
        assert is_number(text)

    @pytest.mark.parametrize("text", ["", "abc", "1e5", "1,000", " 12", "1.2.3", "-"])
    def test_is_not_number(self, text):
        """Test anything else is rejected"""
        assert not is_number(text)

    def test_is_positive_number(self):
        """Test only numbers above zero are positive"""
        assert is_positive_number("3")
        assert is_positive_number("0.01")
        assert not is_positive_number("0")
        assert not is_positive_number("-1")
        assert not is_positive_number("abc")

    def test_url_encoded_escapes_reserved(self):
        """Test reserved query characters are always escaped"""
        assert url_encoded("a b:c?d&e=f@g+h/i'j") == "a%20b%3Ac%3Fd%26e%3Df%40g%2Bh%2Fi%27j"

    def test_url_encoded_keeps_safe(self):
        """Test unreserved and allowed characters stay unchanged"""
        assert url_encoded("(x)!*,;-._~") == "(x)!*,;-._~"

    def test_truncate(self):
        """Test truncation with and without a trailing marker"""
        assert truncate("Hello World", 5) == "Hello..."
        assert truncate("Hello World", 5, trailing="…") == "Hello…"
        assert truncate("Hello World", 5, trailing=None) == "Hello"

    def test_truncate_short_text_unchanged(self):
        """Test that text within the limit is returned as-is"""
        assert truncate("Hi", 5) == "Hi"
        assert truncate("Hello", 5) == "Hello"

    def test_truncate_negative_length(self):
        """Test that a negative length is rejected"""
        with pytest.raises(ValueError):
            truncate("Hello", -1)


class TestLocalization:
    """Tests for localized string lookup"""

    def test_localizer_lookup(self):
        """Test known and unknown keys"""
        localizer = Localizer({"OK": "Aceptar"})
        assert localizer.get("OK") == "Aceptar"
        assert localizer.get("Cancel") == "Cancel"
        assert "OK" in localizer
        assert len(localizer) == 1

    def test_localized_uses_given_localizer(self):
        """Test the string shortcut"""
        assert localized("OK", Localizer({"OK": "D'accord"})) == "D'accord"

    def test_localized_falls_back_to_key(self):
        """Test the default localizer is empty without configuration"""
        assert localized("OK") == "OK"

    def test_from_json_file(self, tmp_path):
        """Test loading a JSON string table"""
        path = tmp_path / "strings.json"
        path.write_text(json.dumps({"OK": "Ja"}), encoding="utf-8")

        assert Localizer.from_file(str(path)).get("OK") == "Ja"

    def test_from_yaml_file(self, tmp_path):
        """Test loading a YAML string table"""
        path = tmp_path / "strings.yaml"
        path.write_text("OK: Sí\nError: Fehler\n", encoding="utf-8")

        localizer = Localizer.from_file(str(path))
        assert localizer.get("OK") == "Sí"
        assert localizer.get("Error") == "Fehler"

    def test_from_file_errors(self, tmp_path):
        """Test missing, unsupported and malformed files"""
        with pytest.raises(FileNotFoundError):
            Localizer.from_file(str(tmp_path / "missing.json"))

        txt = tmp_path / "strings.txt"
        txt.write_text("OK=Ja", encoding="utf-8")
        with pytest.raises(ValueError):
            Localizer.from_file(str(txt))

        listing = tmp_path / "list.json"
        listing.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ValueError):
            Localizer.from_file(str(listing))

    def test_default_localizer_from_env(self, tmp_path, monkeypatch):
        """Test the default localizer loads the configured table"""
        path = tmp_path / "strings.json"
        path.write_text(json.dumps({"OK": "Ja"}), encoding="utf-8")
        monkeypatch.setenv("CONVKIT_LOCALIZATION_PATH", str(path))

        assert get_default_localizer().get("OK") == "Ja"
        assert localized("OK") == "Ja"


class TestNumbers:
    """Tests for numeric helpers"""

    def test_random_int_range(self):
        """Test values stay within [0, max)"""
        values = {random_int(5) for _ in range(200)}
        assert values <= {0, 1, 2, 3, 4}

    def test_random_int_zero(self):
        """Test a zero limit yields zero"""
        assert random_int(0) == 0

    def test_random_int_negative(self):
        """Test a negative limit is rejected"""
        with pytest.raises(ValueError):
            random_int(-1)

    def test_is_integer(self):
        """Test integral float detection"""
        assert is_integer(3.0)
        assert is_integer(-2.0)
        assert not is_integer(3.5)
        assert not is_integer(float("inf"))
        assert not is_integer(float("nan"))

    def test_format_float(self):
        """Test two decimals, or none for integral values"""
        assert format_float(1.234) == "1.23"
        assert format_float(2.5) == "2.50"
        assert format_float(5.0) == "5"

    def test_parse_float(self):
        """Test reading floats from text input"""
        assert parse_float(" 3.5 ") == 3.5
        assert parse_float("-2") == -2.0
        assert parse_float("") is None
        assert parse_float("   ") is None
        assert parse_float(None) is None
        assert parse_float("abc") is None
