"""Tests for the naming module."""

from typegen.config import GeneratorOptions
from typegen.naming import ref_name, safe_enum_key, safe_key, string_literal


class TestSafeEnumKey:
    """Test enum value -> UPPER_SNAKE_CASE member names."""

    def test_hyphenated(self):
        assert safe_enum_key("user-name") == "USER_NAME"

    def test_leading_digit(self):
        assert safe_enum_key("2fa") == "_2FA"

    def test_camel_case(self):
        assert safe_enum_key("userName") == "USER_NAME"

    def test_pascal_case(self):
        assert safe_enum_key("InProgress") == "IN_PROGRESS"

    def test_spaces_collapsed(self):
        assert safe_enum_key("  timed   out ") == "TIMED_OUT"

    def test_mixed_separators_collapsed(self):
        assert safe_enum_key("a - b") == "A_B"

    def test_digit_before_upper(self):
        assert safe_enum_key("v2Beta") == "V2_BETA"

    def test_punctuation_replaced(self):
        assert safe_enum_key("application/json") == "APPLICATION_JSON"

    def test_empty_value(self):
        """Even an empty value yields a usable identifier."""
        assert safe_enum_key("") == "_"

    def test_results_are_identifiers(self):
        for value in ("user-name", "2fa", "a.b.c", "50%", "sold out", "x"):
            assert safe_enum_key(value).isidentifier(), value


class TestSafeKey:
    """Test property names -> object literal keys."""

    def test_bare_identifier(self):
        assert safe_key("userName") == "userName"

    def test_underscore_start(self):
        assert safe_key("_links") == "_links"

    def test_hyphen_quoted(self):
        assert safe_key("x-rate-limit") == "'x-rate-limit'"

    def test_leading_digit_quoted(self):
        assert safe_key("2fa") == "'2fa'"

    def test_dollar_quoted(self):
        assert safe_key("$type") == "'$type'"

    def test_quote_escaped(self):
        assert safe_key("it's") == "'it\\'s'"

    def test_trailing_newline_quoted(self):
        assert safe_key("a\n") == "'a\\u000a'"

    def test_control_characters_escaped(self):
        assert safe_key("a\tb") == "'a\\u0009b'"
        assert safe_key("line\u2028sep") == "'line\\u2028sep'"

    def test_non_ascii_identifier_quoted(self):
        assert safe_key("café") == "'café'"


class TestStringLiteral:
    """Test TypeScript string literal rendering."""

    def test_plain(self):
        assert string_literal("available") == '"available"'

    def test_double_quote_escaped(self):
        assert string_literal('say "hi"') == '"say \\"hi\\""'

    def test_non_ascii_kept(self):
        assert string_literal("café") == '"café"'

    def test_number_stringified(self):
        assert string_literal(42) == '"42"'

    def test_booleans_use_json_spelling(self):
        assert string_literal(True) == '"true"'
        assert string_literal(False) == '"false"'

    def test_null_uses_json_spelling(self):
        assert string_literal(None) == '"null"'

    def test_float(self):
        assert string_literal(1.5) == '"1.5"'


class TestRefName:
    """Test $ref -> declared type name."""

    def test_default_prefix(self):
        assert ref_name("#/components/schemas/Pet", GeneratorOptions()) == "IPet"

    def test_custom_prefix(self):
        options = GeneratorOptions(naming_prefix="T")
        assert ref_name("#/components/schemas/Pet", options) == "TPet"

    def test_empty_prefix(self):
        options = GeneratorOptions(naming_prefix="")
        assert ref_name("#/components/schemas/Pet", options) == "Pet"

    def test_foreign_ref_kept_verbatim(self):
        """Refs outside components/schemas are not rewritten."""
        assert ref_name("other.yaml#/Pet", GeneratorOptions()) == "Iother.yaml#/Pet"
