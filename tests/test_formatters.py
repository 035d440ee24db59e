from datetime import datetime

from chartkit.formatters import (
    DEFAULT_DATE_FORMAT,
    exponential_value_formatter,
    float_value_formatter,
    float_value_formatter_with_format,
    format_time,
    int_value_formatter,
    k_value_formatter,
    percent_value_formatter,
    time_date_value_formatter,
    time_value_formatter,
    time_value_formatter_with_format,
)
from chartkit.timeutil import time_to_float


def test_time_value_formatter_with_format():
    d = datetime.now()
    df = time_to_float(d)
    di = int(df)

    s = format_time(d, DEFAULT_DATE_FORMAT)
    si = format_time(di, DEFAULT_DATE_FORMAT)
    sf = format_time(df, DEFAULT_DATE_FORMAT)
    assert s == si
    assert s == sf

    assert time_value_formatter(d) == s
    assert time_value_formatter(di) == s
    assert time_value_formatter(df) == s


def test_float_value_formatter():
    assert float_value_formatter(1234.00) == "1234.00"


def test_float_value_formatter_with_integer_input():
    assert float_value_formatter(1234) == "1234.00"


def test_float_value_formatter_with_format():
    assert float_value_formatter_with_format(123.456, "%.3f") == "123.456"
    assert float_value_formatter_with_format(123, "%.3f") == "123.000"


def test_exponential_value_formatter():
    assert exponential_value_formatter(123.456) == "1.23e+02"
    assert exponential_value_formatter(12421243.424) == "1.24e+07"
    assert exponential_value_formatter(0.45) == "4.50e-01"


def test_float_value_formatter_unsupported_type():
    assert float_value_formatter("1234") == ""
    assert float_value_formatter(None) == ""


def test_int_value_formatter_truncates():
    assert int_value_formatter(1234) == "1234"
    assert int_value_formatter(1234.9) == "1234"
    assert int_value_formatter(-2.5) == "-2"
    assert int_value_formatter("x") == ""


def test_percent_value_formatter():
    assert percent_value_formatter(0.5) == "50.00%"
    assert percent_value_formatter("0.5") == ""


def test_k_value_formatter():
    formatter = k_value_formatter(2, float_value_formatter)
    assert formatter(1.5) == "2σ 1.50"


def test_time_formatters_with_explicit_format():
    d = datetime(2021, 5, 6, 7, 8)
    assert time_date_value_formatter(d) == "2021-05-06"
    assert time_value_formatter_with_format("%Y")(d) == "2021"
    assert time_value_formatter("not a time") == ""