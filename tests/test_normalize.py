import pytest

from typolint.spelling import normalize, replace_escapes, split_words, strip_urls


def test_camel_case_splits_on_each_uppercase_letter() -> None:
    assert normalize("fooBarBaz") == "foo Bar Baz"
    assert normalize("FooBar") == "Foo Bar"


def test_underscore_buffer_is_filled_by_following_lowercase() -> None:
    assert normalize("foo_bar") == "foo bar"
    assert split_words("foo_bar") == ["foo", "bar"]


def test_underscore_before_uppercase_leaves_blank_segment() -> None:
    assert split_words("recieve_Data") == ["recieve", "", "Data"]
    assert normalize("recieve_Data") == "recieve  Data"


def test_digits_and_punctuation_are_boundaries_without_content() -> None:
    assert split_words("utf8encode") == ["utf", "encode"]
    assert split_words("a.b,c") == ["a", "b", "c"]
    # consecutive boundaries each open a fresh buffer
    assert split_words("v12") == ["v", "", ""]
    assert normalize("v12") == "v  "


def test_acronyms_split_into_single_letters() -> None:
    assert normalize("HTTPServer") == "H T T P Server"


def test_leading_lowercase_creates_buffer_on_demand() -> None:
    assert split_words("x") == ["x"]
    assert split_words("") == []
    assert normalize("") == ""


@pytest.mark.parametrize("text", ["hello", "hello world", "spell checking is fun"])
def test_lowercase_word_sequences_are_fixed_points(text: str) -> None:
    assert normalize(text) == text
    assert normalize(normalize(text)) == text


def test_normalize_is_deterministic() -> None:
    raw = "# parseHTTPResponse_v2 see https://example.com/docs"
    assert normalize(raw) == normalize(raw)


def test_urls_are_removed_before_splitting() -> None:
    normalized = normalize("see http://example.com for info")
    assert "example" not in normalized
    assert "http" not in normalized
    assert normalized == "see  for info"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("docs at https://docs.python.org/3/library/tokenize.html today", "docs at  today"),
        ("visit www.python.org now", "visit  now"),
        ("mail someone@example.org please", "mail  please"),
        ("mailto:team@example.com", ""),
        ("(see https://example.com/a).", "(see )."),
        ("hosted on github.com/owner/repo", "hosted on "),
    ],
)
def test_strip_urls(raw: str, expected: str) -> None:
    assert strip_urls(raw) == expected


def test_strip_urls_keeps_dotted_python_names() -> None:
    assert strip_urls("os.path.join and self.common") == "os.path.join and self.common"


def test_literal_escape_pairs_become_spaces() -> None:
    assert replace_escapes(r"line\nnext\tcol") == "line next col"
    assert normalize(r'"first\nsecond"') == '"first second"'


def test_real_control_characters_are_untouched() -> None:
    assert replace_escapes("line\nnext") == "line\nnext"
