import logging

import pytest

import field as field_mod
from errors import MalformedField, MalformedURL
from field import decode_field, is_valid_code, labels_of, parse_field, parse_url, validate_field
from models import Field
from tests.data import DEMO_ROWS, DEMO_URL


def test_decode_hex_digits_and_single_skip():
    f = decode_field(3, 1, "1g2")
    assert f.rows() == [[1, 0, 2]]


def test_decode_skip_wraps_to_next_row():
    # 'j' skips four cells: (0,1) .. (1,1)
    f = decode_field(3, 2, "1j2")
    assert f.rows() == [[1, 0, 0], [0, 0, 2]]


def test_decode_non_square_dimensions():
    f = decode_field(4, 2, "gg11gg22")
    assert (f.width, f.height) == (4, 2)
    assert f.rows() == [[0, 0, 1, 1], [0, 0, 2, 2]]


def test_decode_stops_when_grid_is_full():
    f = decode_field(2, 1, "1234")
    assert f.rows() == [[1, 2]]


def test_decode_short_code_leaves_rest_blank():
    f = decode_field(3, 2, "1")
    assert f.rows() == [[1, 0, 0], [0, 0, 0]]


def test_decode_uppercase_hex_digit():
    assert decode_field(2, 1, "A1").rows() == [[10, 1]]


def test_decode_stops_on_non_positive_run(caplog):
    with caplog.at_level(logging.WARNING, logger="field"):
        f = decode_field(3, 1, "1G2")
    assert f.rows() == [[1, 0, 0]]
    assert "Invalid run length" in caplog.text


@pytest.mark.parametrize("w,h", [(0, 3), (3, 0), (-1, 2)])
def test_decode_rejects_non_positive_dimensions(w, h):
    with pytest.raises(MalformedURL):
        decode_field(w, h, "1")


def test_is_valid_code():
    assert is_valid_code("1p3h9gZ")
    assert is_valid_code("")
    assert not is_valid_code("1#2")
    assert not is_valid_code("1-2")


def test_parse_url_demo_descriptor():
    f = parse_url(DEMO_URL)
    assert (f.width, f.height) == (12, 12)
    assert f.rows() == DEMO_ROWS


def test_parse_url_rejects_bad_alphabet_before_decoding(monkeypatch):
    def _fail(*a, **kw):
        raise AssertionError("decode_field must not run")

    monkeypatch.setattr(field_mod, "decode_field", _fail)
    with pytest.raises(MalformedURL):
        parse_url("http://pzv.jp/p.html?numlin/3/3/1g#")


@pytest.mark.parametrize(
    "url",
    [
        "3/11",
        "numlin/0/3/11",
        "numlin/3/-1/11",
        "numlin/x/3/11",
        "numlin/3//11",
    ],
)
def test_parse_url_malformed(url):
    with pytest.raises(MalformedURL):
        parse_url(url)


def test_malformed_url_is_a_value_error():
    with pytest.raises(ValueError):
        parse_url("bad")


def test_parse_field_roles_row_major():
    f = Field.from_rows([[1, 0, 2], [2, 0, 1]])
    sources, targets, bodies = parse_field(f)
    assert sources == [(0, 0), (0, 2)]
    assert targets == [(1, 0), (1, 2)]
    assert bodies == [(0, 1), (1, 1)]


def test_parse_field_third_occurrence():
    assert parse_field(Field.from_rows([[1, 1, 1]])) is None


def test_validate_partition_counts():
    f = parse_url(DEMO_URL)
    sources, targets, bodies = validate_field(f)
    assert len(sources) == len(targets) == 12
    assert len(sources) + len(targets) + len(bodies) == 144
    assert labels_of(f) == list(range(1, 13))


def test_validate_single_endpoint():
    with pytest.raises(MalformedField):
        validate_field(Field.from_rows([[1, 0], [0, 0]]))


def test_validate_label_appears_three_times():
    with pytest.raises(MalformedField):
        validate_field(Field.from_rows([[1, 1], [1, 0]]))


def test_validate_no_endpoints():
    with pytest.raises(MalformedField):
        validate_field(Field.from_rows([[0, 0], [0, 0]]))


def test_validate_label_out_of_range():
    with pytest.raises(MalformedField):
        validate_field(Field.from_rows([[16, 16]]))


@pytest.mark.parametrize("rows", [[], [[]], [[1, 1], [0]]])
def test_from_rows_rejects_empty_or_ragged(rows):
    with pytest.raises(MalformedField):
        Field.from_rows(rows)


def test_demo_descriptor_run_after_six_lands_on_column_seven():
    # '6' at cursor 62, 'j' skips four cells, '2' lands at cursor 67
    f = parse_url(DEMO_URL)
    assert f[(5, 2)] == 6
    assert f[(5, 7)] == 2
    assert f[(5, 8)] == 0
    assert f[(5, 9)] == 7
