import pytest

from spam_blaster.spam import (
    FrequencyLedger,
    LedgerMode,
    SpamicityEstimator,
    SpamicityTable,
    UnknownTokenError,
)


def ledger(*documents, mode=LedgerMode.REPLACE):
    result = FrequencyLedger(mode=mode)
    for tokens in documents:
        result.ingest(tokens)
    return result


def test_token_absent_from_ham_is_neutral():
    table = SpamicityEstimator().recompute(ledger({"buy"}), ledger(set()))
    assert table["buy"] == 0.0


def test_equal_frequencies_give_zero():
    table = SpamicityEstimator().recompute(ledger({"hello"}), ledger({"hello"}))
    assert table["hello"] == 0.0


def test_spamicity_is_distance_from_neutral():
    # Replace mode: "x" counted once, but over two spam documents
    spam = ledger({"x"}, {"x"})
    ham = ledger({"x"})

    table = SpamicityEstimator().recompute(spam, ham)

    # s = 0.5, h = 1.0 -> value = 1/3
    assert table["x"] == pytest.approx(0.5 - 1 / 3)


def test_accumulated_counts():
    spam = ledger({"x"}, {"x"}, mode=LedgerMode.ACCUMULATE)
    ham = ledger({"x"}, {"y"}, mode=LedgerMode.ACCUMULATE)

    table = SpamicityEstimator().recompute(spam, ham)

    # s = 1.0, h = 0.5 -> value = 2/3
    assert table["x"] == pytest.approx(2 / 3 - 0.5)
    assert "y" not in table


def test_table_holds_only_current_spam_tokens():
    spam = ledger({"old"}, {"new"})
    ham = ledger({"ham-only"})

    table = SpamicityEstimator().recompute(spam, ham)

    assert set(table) == {"new"}


def test_values_stay_within_bounds():
    spam = ledger({"a", "b", "c"}, mode=LedgerMode.ACCUMULATE)
    ham = ledger({"a"}, {"a", "b"}, {"a"}, mode=LedgerMode.ACCUMULATE)

    table = SpamicityEstimator().recompute(spam, ham)

    assert all(0.0 <= value <= 0.5 for value in table.values())


def test_zero_denominator_is_neutral():
    spam = ledger({"x"})
    ham = FrequencyLedger()
    ham.counts = {"x": 1}  # document_count left at 0

    assert SpamicityEstimator.estimate(spam, ham, "x") == 0.5
    assert SpamicityEstimator().recompute(spam, ham)["x"] == 0.0


def test_lookup_unknown_token():
    table = SpamicityTable({"known": 0.25})

    assert table.lookup("known") == 0.25
    with pytest.raises(UnknownTokenError):
        table.lookup("unknown")


def test_unknown_token_error_is_a_key_error():
    with pytest.raises(KeyError):
        SpamicityTable().lookup("x")
