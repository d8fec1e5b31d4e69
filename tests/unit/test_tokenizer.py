import pytest

from flowdock.query.tokenizer import tokenize


@pytest.mark.parametrize("text", ["", "   ", "\t\n", None])
def test_blank_text_means_main_menu(text) -> None:
    assert tokenize(text) is None


def test_keyword_is_lowercased_and_tail_rejoined() -> None:
    parsed = tokenize("  START   my   container  ")
    assert parsed is not None
    assert parsed.keyword == "start"
    assert parsed.raw_keyword == "START"
    assert parsed.args == ("my", "container")
    assert parsed.argument == "my container"
    assert parsed.has_argument


def test_single_token_has_no_argument() -> None:
    parsed = tokenize("ps")
    assert parsed is not None
    assert parsed.keyword == "ps"
    assert parsed.argument == ""
    assert not parsed.has_argument
