from expense_vault.parsing import FALLBACK_MERCHANT, parse


def test_parse_debit_with_thousands_and_merchant():
    c = parse("Rs. 1,250.50 debited at Starbucks on 01-01")
    assert c is not None
    assert c.amount == 125050
    assert c.is_credit is False
    assert c.merchant_hint == "Starbucks"


def test_parse_otp_is_miss():
    assert parse("Your OTP is 4521") is None


def test_parse_credit_keywords_case_insensitive():
    c = parse("INR 5000 CREDITED to your a/c XX1234")
    assert c is not None
    assert c.is_credit is True
    assert c.amount == 500000
    assert c.merchant_hint == FALLBACK_MERCHANT

    r = parse("You have Received ₹250 from Rahul")
    assert r is not None
    assert r.is_credit is True
    assert r.amount == 25000


def test_parse_rupee_symbol_without_space():
    c = parse("Paid ₹99 via UPI at Zomato.")
    assert c is not None
    assert c.amount == 9900
    assert c.merchant_hint == "Zomato"
    assert c.method_hint == "UPI"


def test_parse_indian_grouping():
    c = parse("Rs 1,25,000.00 debited from a/c")
    assert c is not None
    assert c.amount == 12500000


def test_parse_marker_without_numeral_is_miss():
    assert parse("Rs. debited, check your statement") is None
    assert parse("INR") is None
    assert parse("") is None


def test_parse_malformed_numerals_fail_instead_of_truncating():
    assert parse("Rs 1.2.3 debited") is None
    assert parse("Rs 12.345 debited") is None
    assert parse("Rs 1,2345 debited") is None


def test_parse_trailing_punctuation_after_amount():
    c = parse("Spent Rs.500. Avl bal Rs 1,000.00")
    assert c is not None
    assert c.amount == 50000
    assert c.method_hint == "Bank"


def test_parse_marker_inside_word_does_not_match():
    assert parse("HRs 40 worked this week") is None


def test_parse_overlong_numeral_is_miss():
    assert parse("Rs " + "9" * 27 + " debited at X") is None
    assert parse("INR " + "1" * 40 + ".00 credited") is None


def test_merchant_hint_needs_the_word_at():
    c = parse("Rs 300 spent on a great deal today")
    assert c is not None
    assert c.merchant_hint == FALLBACK_MERCHANT

    c = parse("Rs 300 spent AT Croma")
    assert c is not None
    assert c.merchant_hint == "Croma"
