from __future__ import annotations

from ternary.exceptions import ConditionTypeError, ProducerTypeError, TernaryError


def test_ternary_error_uses_docstring_as_default_message():
    err = TernaryError()
    assert "Base exception" in str(err)


def test_ternary_error_stores_keyword_context():
    err = TernaryError("failed", detail="x")
    assert str(err) == "failed"
    assert err.detail == "x"


def test_condition_type_error_without_context_uses_docstring():
    assert str(ConditionTypeError()) == "Condition must be a bool in strict mode."


def test_condition_type_error_names_received_type():
    err = ConditionTypeError(value="yes")
    assert str(err) == "Condition must be a bool in strict mode (got str)"
    assert isinstance(err, TypeError)
    assert isinstance(err, TernaryError)


def test_producer_type_error_message():
    err = ProducerTypeError(field_name="true_factory")
    assert str(err) == "true_factory must be a zero-argument callable"
