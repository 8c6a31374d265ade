import pytest

from drills.lessons.conversions import (
    Color,
    IntoColorError,
    ParsePersonError,
    Person,
    color_from_array,
    color_from_slice,
    color_from_tuple,
    default_person,
    parse_person,
    person_from,
)


# Conversion with a fallback to the default person.

def test_default():
    dp = default_person()
    assert dp.name == "John"
    assert dp.age == 30


def test_good_convert():
    assert person_from("Mark,20") == Person("Mark", 20)


@pytest.mark.parametrize(
    "text", ["", "Mark,twenty", "Mark", "Mark,", ",1", ",", ",one"]
)
def test_bad_inputs_fall_back_to_default(text):
    assert person_from(text) == Person("John", 30)


def test_trailing_comma():
    assert person_from("Mike,32,") == Person("Mike", 32)


def test_trailing_comma_and_some_string():
    assert person_from("Mike,32,man") == Person("Mike", 32)


# Strict parsing that raises.

def test_empty_input():
    with pytest.raises(ParsePersonError) as info:
        parse_person("")
    assert info.value.kind == ParsePersonError.EMPTY


def test_good_input():
    p = parse_person("John,32")
    assert p.name == "John"
    assert p.age == 32


@pytest.mark.parametrize("text", ["John,", "John,twenty"])
def test_invalid_age(text):
    with pytest.raises(ParsePersonError) as info:
        parse_person(text)
    assert info.value.kind == ParsePersonError.PARSE_INT
    assert isinstance(info.value.cause, ValueError)


@pytest.mark.parametrize("text", ["John", "John,32,", "John,32,man"])
def test_bad_len(text):
    with pytest.raises(ParsePersonError) as info:
        parse_person(text)
    assert info.value.kind == ParsePersonError.BAD_LEN


def test_missing_name():
    with pytest.raises(ParsePersonError) as info:
        parse_person(",1")
    assert info.value.kind == ParsePersonError.NO_NAME


@pytest.mark.parametrize("text", [",", ",one"])
def test_missing_name_and_age(text):
    with pytest.raises(ParsePersonError) as info:
        parse_person(text)
    assert info.value.kind in (ParsePersonError.NO_NAME, ParsePersonError.PARSE_INT)


# Colours.

@pytest.mark.parametrize(
    "convert, values",
    [
        (color_from_tuple, (256, 1000, 10000)),
        (color_from_tuple, (-1, -10, -256)),
        (color_from_tuple, (-1, 255, 255)),
        (color_from_array, [1000, 10000, 256]),
        (color_from_array, [-10, -256, -1]),
        (color_from_array, [-1, 255, 255]),
        (color_from_slice, [10000, 256, 1000]),
        (color_from_slice, [-256, -1, -10]),
        (color_from_slice, [-1, 255, 255]),
    ],
)
def test_out_of_range(convert, values):
    with pytest.raises(IntoColorError) as info:
        convert(values)
    assert info.value == IntoColorError(IntoColorError.INT_CONVERSION)


@pytest.mark.parametrize(
    "convert, values",
    [
        (color_from_tuple, (183, 65, 14)),
        (color_from_array, [183, 65, 14]),
        (color_from_slice, [183, 65, 14]),
    ],
)
def test_correct(convert, values):
    assert convert(values) == Color(red=183, green=65, blue=14)


def test_slice_excess_length():
    with pytest.raises(IntoColorError) as info:
        color_from_slice([0, 0, 0, 0])
    assert info.value.kind == IntoColorError.BAD_LEN


def test_slice_insufficient_length():
    with pytest.raises(IntoColorError) as info:
        color_from_slice([0, 0])
    assert info.value.kind == IntoColorError.BAD_LEN


def test_tuple_wrong_length_is_type_error():
    with pytest.raises(TypeError):
        color_from_tuple((1, 2))