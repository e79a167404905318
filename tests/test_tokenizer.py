from spam_blaster.spam import Tokenizer, TokenizerConfig


def tokenize(*lines):
    return Tokenizer().tokenize(lines)


def test_document_without_blank_line_has_no_tokens():
    assert tokenize("Subject: free money", "win win win") == frozenset()


def test_empty_document_has_no_tokens():
    assert tokenize() == frozenset()


def test_header_block_is_skipped():
    tokens = tokenize("From: a@example.com", "Subject: lottery", "", "hello world")
    assert tokens == {"hello", "world"}


def test_repeated_tokens_are_deduplicated():
    assert tokenize("", "free free free") == {"free"}


def test_splits_on_runs_of_delimiters():
    tokens = tokenize("", "buy-now, cheap.pills  today", "a - b")
    assert tokens == {"buy", "now", "cheap", "pills", "today", "a", "b"}


def test_case_and_punctuation_are_preserved():
    assert tokenize("", "FREE Money! free") == {"FREE", "Money!", "free"}


def test_leading_delimiter_yields_empty_token():
    assert tokenize("", " hello") == {"", "hello"}


def test_trailing_delimiters_are_dropped():
    assert tokenize("", "hello, world. ") == {"hello", "world"}


def test_line_of_only_delimiters_yields_nothing():
    assert tokenize("", " ,. -", "x") == {"x"}


def test_empty_body_line_yields_empty_token():
    assert tokenize("header", "", "", "x") == {"", "x"}


def test_only_first_blank_line_ends_headers():
    # Later "header-looking" lines are body
    assert tokenize("", "Subject: hi") == {"Subject:", "hi"}


def test_line_terminators_are_ignored():
    assert tokenize("Subject: x\r\n", "\r\n", "win\n", "big\r\n") == {"win", "big"}


def test_custom_delimiters():
    tokenizer = Tokenizer(TokenizerConfig(delimiters=";"))
    assert tokenizer.tokenize(["", "a;;b c"]) == {"a", "b c"}


def test_split_without_delimiter_returns_line():
    tokenizer = Tokenizer()
    assert tokenizer.split("word") == ["word"]
    assert tokenizer.split("") == [""]
