import pytest
from html_prototype.errors import InvalidOptionsError
from html_prototype.js import (
	escape_javascript,
	js_value,
	options_for_javascript,
	quote,
	ucfirst,
)


class TestText:
	def test_ucfirst(self):
		assert ucfirst("highlight") == "Highlight"
		assert ucfirst("bOTTOM") == "BOTTOM"
		assert ucfirst("") == ""

	def test_quote_does_not_escape(self):
		assert quote("it's") == "'it's'"

	def test_escape_javascript(self):
		assert escape_javascript("It's") == "It\\'s"
		assert escape_javascript('say "hi"') == 'say \\"hi\\"'
		assert escape_javascript("a\r\nb\nc") == "a\\nb\\nc"
		assert escape_javascript("<p>x</p>") == "<p>x<\\/p>"
		assert escape_javascript("back\\slash") == "back\\\\slash"

	def test_js_value(self):
		assert js_value(True) == "true"
		assert js_value(False) == "false"
		assert js_value(0.5) == "0.5"
		assert js_value("'x'") == "'x'"


class TestOptionsForJavascript:
	def test_empty(self):
		assert options_for_javascript({}) == "{}"

	def test_keys_are_sorted(self):
		result = options_for_javascript({"revert": "true", "handle": "'grip'"})
		assert result == "{ handle: 'grip', revert: true }"

	def test_sorted_by_key_not_by_text(self):
		result = options_for_javascript({"a1": "2", "a": "1"})
		assert result == "{ a: 1, a1: 2 }"

	def test_none_values_are_dropped(self):
		result = options_for_javascript({"a": True, "b": None, "c": 0.5})
		assert result == "{ a: true, c: 0.5 }"

	def test_values_are_copied_verbatim(self):
		result = options_for_javascript({"onDrop": "function(e){ broken("})
		assert result == "{ onDrop: function(e){ broken( }"


class TestNestedValues:
	def test_list(self):
		assert js_value([10, True, None, "'a'"]) == "[10, true, null, 'a']"
		assert js_value(("x", 0.5)) == "[x, 0.5]"

	def test_mapping(self):
		assert js_value({"b": False, "a": [1, 2]}) == "{ a: [1, 2], b: false }"
		assert js_value({"a": None}) == "{}"

	def test_nested_options(self):
		result = options_for_javascript({"snap": [10, True], "opts": {"a": None, "b": 1}})
		assert result == "{ opts: { b: 1 }, snap: [10, true] }"
		assert "True" not in result
		assert "None" not in result

	def test_unsupported_type(self):
		with pytest.raises(InvalidOptionsError):
			js_value({1, 2})
		with pytest.raises(TypeError):
			options_for_javascript({"when": object()})
