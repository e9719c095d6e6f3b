import pytest

from hydrazine.json_values import (
    Array,
    DenseArray,
    JsonError,
    Number,
    NumberType,
    Object,
    String,
    Value,
    ValueType,
)


def test_default_value_is_null():
    value = Value()
    assert value.is_null()
    assert value.type is ValueType.NULL


def test_booleans():
    assert Value(ValueType.TRUE).as_boolean() is True
    assert Value(ValueType.FALSE).as_boolean() is False


def test_boolean_cast_of_null_fails():
    with pytest.raises(JsonError, match="Invalid cast"):
        Value().as_boolean()


def test_integer_number():
    number = Number(42)
    assert number.number_type is NumberType.INTEGER
    assert number.as_integer() == 42
    assert number.as_number() == float(42)
    with pytest.raises(JsonError, match="Invalid cast"):
        number.as_real()


def test_real_number():
    number = Number(2.5)
    assert number.number_type is NumberType.REAL
    assert number.as_real() == 2.5
    assert number.as_number() == 2.5
    with pytest.raises(JsonError):
        number.as_integer()


def test_real_number_truncates_integer_part():
    assert Number(7.9).value_integer == int(7.9)


def test_number_rejects_bool_and_str():
    with pytest.raises(TypeError):
        Number(True)
    with pytest.raises(TypeError):
        Number("1")


def test_string():
    value = String("hello")
    assert value.as_string() == "hello"
    assert not value.is_null()
    with pytest.raises(JsonError):
        value.as_integer()


@pytest.mark.parametrize(
    "value",
    [Value(), String("x"), Number(1), Array([]), DenseArray([1]), Object({})],
)
def test_mismatched_casts_raise(value):
    casts = [
        value.as_string,
        value.as_array,
        value.as_dense_array,
        value.as_object,
    ]
    allowed = {
        ValueType.STRING: value.as_string,
        ValueType.ARRAY: value.as_array,
        ValueType.DENSE_ARRAY: value.as_dense_array,
        ValueType.OBJECT: value.as_object,
    }.get(value.type)
    failures = 0
    for cast in casts:
        if cast == allowed:
            continue
        with pytest.raises(JsonError):
            cast()
        failures += 1
    assert failures == len(casts) - (1 if allowed else 0)


def test_array_iteration_and_length():
    items = [Number(1), String("a"), Value(ValueType.TRUE)]
    array = Array(items)
    assert len(array) == 3
    assert list(array) == items
    assert array.as_array() == items


def test_dense_array():
    dense = DenseArray([5, 6, 7])
    assert len(dense) == 3
    assert list(dense) == [5, 6, 7]
    assert dense.as_dense_array() == [5, 6, 7]
    assert dense.number(1).as_integer() == 6
    assert dense.number(1).number_type is NumberType.INTEGER


def test_object_is_key_ordered():
    obj = Object({"zeta": Number(1), "alpha": String("a"), "mid": Value()})
    assert list(obj) == sorted(["zeta", "alpha", "mid"])
    assert [key for key, _ in obj.items()] == list(obj)
    assert obj.as_object()["alpha"].as_string() == "a"


def test_equality():
    assert Number(3) == Number(3)
    assert Number(3) != Number(3.0)
    assert String("a") == String("a")
    assert Array([Number(1)]) == Array([Number(1)])
    assert Object({"k": String("v")}) == Object({"k": String("v")})
    assert Value() != Value(ValueType.TRUE)