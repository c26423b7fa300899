import io

import pytest

from pushswap.libft.output import (
    HEX_LOWER,
    HEX_UPPER,
    format_printf,
    number_in_base,
    printf,
    putchar_fd,
    putendl_fd,
    putnbr_fd,
    putstr_fd,
)


@pytest.mark.parametrize("n", [0, 1, 9, 10, 255, 4096, 123456789])
def test_number_in_base_round_trips(n):
    assert int(number_in_base(n, HEX_LOWER), 16) == n
    assert int(number_in_base(n, "01"), 2) == n
    assert number_in_base(n, "0123456789") == str(n)


def test_number_in_base_rejects_bad_input():
    with pytest.raises(ValueError):
        number_in_base(5, "0")
    with pytest.raises(ValueError):
        number_in_base(-1, HEX_LOWER)


def test_hex_digits_value():
    assert number_in_base(255, HEX_LOWER) == "ff"


def test_format_decimal_and_text():
    assert format_printf("%d and %i", -42, 7) == "-42 and 7"
    assert format_printf("%s!", "hello") == "hello!"
    assert format_printf("%c%c", "o", ord("k")) == "ok"


def test_format_null_string():
    assert format_printf("%s", None) == "(null)"


def test_format_percent_and_unknown():
    assert format_printf("100%%") == "100%"
    assert format_printf("a%qb") == "ab"
    assert format_printf("abc%") == "abc"


def test_format_unsigned_wraps_negative():
    assert int(format_printf("%u", -1)) == 2**32 - 1
    assert int(format_printf("%x", -1), 16) == 2**32 - 1


def test_format_hex_case():
    for n in (10, 3054, 65535):
        lower = format_printf("%x", n)
        upper = format_printf("%X", n)
        assert lower.upper() == upper
        assert int(lower, 16) == n
        assert number_in_base(n, HEX_UPPER) == upper


def test_format_pointer():
    result = format_printf("%p", 48879)
    assert result.startswith("0x")
    assert int(result[2:], 16) == 48879


def test_format_int_wraps_to_32_bits():
    assert format_printf("%d", 2**31) == "-2147483648"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_printf("%d %d", 1)


def test_printf_writes_and_counts(capsys):
    count = printf("pa%s", "\n")
    assert capsys.readouterr().out == "pa\n"
    assert count == 3


def test_stream_helpers():
    stream = io.StringIO()
    putchar_fd("x", stream)
    putstr_fd("yz", stream)
    putendl_fd("Error", stream)
    putnbr_fd(-2147483648, stream)
    assert stream.getvalue() == "xyzError\n-2147483648"