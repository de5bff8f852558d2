import copy
from collections.abc import MutableSequence, Sequence

import pytest

from invariant_collections import (
    EmptyError,
    NonEmptySlice,
    NonEmptySliceMut,
    NonEmptyVec,
    PositiveInt,
    non_empty_vec,
)


class TestConstruction:
    def test_one(self):
        vec = NonEmptyVec.one(10)

        assert len(vec) == 1
        assert vec.first() == 10
        assert vec.last() == 10
        assert len(vec.init()) == 0
        assert len(vec.tail()) == 0

    def test_with_capacity(self):
        vec = NonEmptyVec.with_capacity(10, 100)

        assert vec.as_slice() == [10]

    def test_with_negative_capacity(self):
        with pytest.raises(ValueError):
            NonEmptyVec.with_capacity(10, -1)

    def test_literal(self):
        one = non_empty_vec(10)

        assert len(one) == 1
        assert one.first() == 10
        assert one.last() == 10

        multiple = non_empty_vec(10, 20, 30, 40, 50)

        assert len(multiple) == 5
        assert multiple.first() == 10
        assert multiple.last() == 50
        assert multiple.init() == [10, 20, 30, 40]
        assert multiple.tail() == [20, 30, 40, 50]

    def test_literal_requires_a_value(self):
        with pytest.raises(TypeError):
            non_empty_vec()

    def test_from_iterable(self):
        assert NonEmptyVec(x * x for x in range(1, 4)).as_slice() == [1, 4, 9]

    def test_from_empty_iterable(self):
        with pytest.raises(EmptyError, match="empty vec"):
            NonEmptyVec([])
        with pytest.raises(EmptyError, match="empty vec"):
            NonEmptyVec(iter(()))

    def test_from_non_iterable(self):
        with pytest.raises(TypeError):
            NonEmptyVec(5)

    def test_try_from_list_owns_its_storage(self):
        values = [1, 2]
        vec = NonEmptyVec.try_from_list(values)
        values.clear()
        vec.push(3)

        assert vec.as_slice() == [1, 2, 3]
        assert values == []

    def test_try_from_empty_list(self):
        with pytest.raises(EmptyError, match="empty vec"):
            NonEmptyVec.try_from_list([])

    def test_try_from_list_requires_list(self):
        with pytest.raises(TypeError):
            NonEmptyVec.try_from_list((1,))

    def test_from_init_last(self):
        assert NonEmptyVec.from_init_last([1, 2], 3).as_slice() == [1, 2, 3]
        assert NonEmptyVec.from_init_last([], 3).as_slice() == [3]

    def test_from_first_tail(self):
        assert NonEmptyVec.from_first_tail(1, (2, 3)).as_slice() == [1, 2, 3]
        assert NonEmptyVec.from_first_tail(1, []).as_slice() == [1]

    @pytest.mark.parametrize("values", [[1], [1, 2, 3], ["x", None, 2.5]])
    def test_round_trip(self, values):
        vec = NonEmptyVec(values)

        assert NonEmptyVec.try_from_list(vec.into_vec()) == vec
        assert vec.into_vec() == values


class TestPush:
    def test_push(self):
        vec = NonEmptyVec.one(10)
        vec.push(20)

        assert len(vec) == 2
        assert vec.first() == 10
        assert vec.last() == 20
        assert vec.init() == [10]
        assert vec.tail() == [20]

        vec.push(30)

        assert len(vec) == 3
        assert vec.first() == 10
        assert vec.last() == 30
        assert vec.init() == [10, 20]
        assert vec.tail() == [20, 30]

    def test_append(self):
        vec = non_empty_vec(1)
        vec.append(2)

        assert vec.last() == 2

    def test_extend_from_slice(self):
        one = non_empty_vec(10)
        one.extend_from_slice([20, 30, 40, 50])

        assert one == non_empty_vec(10, 20, 30, 40, 50)

    def test_extend_from_slice_requires_sequence(self):
        with pytest.raises(TypeError):
            non_empty_vec(1).extend_from_slice(iter([2]))

    def test_extend(self):
        one = non_empty_vec(10)
        multiple = non_empty_vec(10, 20, 30, 40, 50)
        one.extend(multiple)

        assert one == non_empty_vec(10, 10, 20, 30, 40, 50)

    def test_extend_with_itself(self):
        vec = non_empty_vec(1, 2)
        vec.extend(vec)

        assert vec.as_slice() == [1, 2, 1, 2]

    def test_extend_non_iterable(self):
        with pytest.raises(TypeError):
            non_empty_vec(1).extend(2)

    def test_add(self):
        vec = non_empty_vec(1)
        result = vec + [2, 3]

        assert type(result) is NonEmptyVec
        assert result.as_slice() == [1, 2, 3]
        assert vec.as_slice() == [1]
        with pytest.raises(TypeError):
            vec + 5

    def test_iadd(self):
        vec = non_empty_vec(1)
        vec += (2, 3)

        assert vec.as_slice() == [1, 2, 3]


class TestInPlace:
    def test_reverse(self):
        multiple = non_empty_vec(10, 20, 30, 40, 50)
        multiple.reverse()

        assert multiple == non_empty_vec(50, 40, 30, 20, 10)

    def test_reverse_twice(self):
        vec = non_empty_vec(3, 1, 4, 1, 5)
        vec.reverse()
        vec.reverse()

        assert vec == non_empty_vec(3, 1, 4, 1, 5)

    def test_setitem(self):
        vec = non_empty_vec(1, 2)
        vec[-1] = 3

        assert vec.as_slice() == [1, 3]
        with pytest.raises(IndexError):
            vec[2] = 4

    def test_sort(self):
        vec = non_empty_vec("bb", "a", "ccc")
        vec.sort(key=len, reverse=True)

        assert vec.as_slice() == ["ccc", "bb", "a"]


class TestTruncate:
    @pytest.mark.parametrize(
        "values, length, expected",
        [
            ([1, 2], 1, [1]),
            ([1, 2], 2, [1, 2]),
            ([1, 2, 3], 2, [1, 2]),
            ([1, 2], 5, [1, 2]),
        ],
    )
    def test_truncate(self, values, length, expected):
        vec = NonEmptyVec(values)
        vec.truncate(PositiveInt(length))

        assert vec.as_slice() == expected

    def test_plain_int_is_rejected(self):
        vec = non_empty_vec(1, 2)

        with pytest.raises(TypeError):
            vec.truncate(1)
        assert len(vec) == 2

    def test_zero_cannot_be_expressed(self):
        with pytest.raises(ValueError):
            non_empty_vec(1, 2).truncate(PositiveInt(0))


class TestDedup:
    @pytest.mark.parametrize(
        "values, expected",
        [
            ([1, 2], [1, 2]),
            ([1, 1], [1]),
            ([1], [1]),
            ([1, 2, 1], [1, 2, 1]),
            ([1, 1, 2, 2, 2, 1], [1, 2, 1]),
        ],
    )
    def test_dedup(self, values, expected):
        vec = NonEmptyVec(values)
        vec.dedup()

        assert vec.as_slice() == expected

    def test_dedup_keeps_first_of_run(self):
        vec = non_empty_vec(1, 1.0)
        vec.dedup()

        assert type(vec.first()) is int

    def test_dedup_by_key(self):
        vec = non_empty_vec(1, 3, 2, 4, 5)
        vec.dedup_by_key(lambda x: x % 2)

        assert vec.as_slice() == [1, 2, 5]


class TestViews:
    def test_as_non_empty_slice_shares_storage(self):
        vec = non_empty_vec(1, 2, 3)
        view = vec.as_non_empty_slice()
        vec.push(4)

        assert type(view) is NonEmptySlice
        assert view.last() == 4

    def test_as_non_empty_slice_mut(self):
        vec = non_empty_vec(1, 2, 3)
        view = vec.as_non_empty_slice_mut()
        view[1] = 20

        assert type(view) is NonEmptySliceMut
        assert vec.as_slice() == [1, 20, 3]

    def test_as_vec_is_a_copy(self):
        vec = non_empty_vec(1, 2)
        plain = vec.as_vec()
        plain.clear()

        assert len(vec) == 2

    def test_into_boxed_slice(self):
        vec = non_empty_vec(1, 2)
        boxed = vec.into_boxed_slice()
        vec.push(3)

        assert type(boxed) is NonEmptySlice
        assert boxed.as_slice() == [1, 2]

    def test_is_a_sequence(self):
        vec = non_empty_vec(10, 20)

        assert isinstance(vec, Sequence)
        assert not isinstance(vec, MutableSequence)
        assert vec.index(20) == 1
        assert 10 in vec


class TestCopy:
    def test_copy(self):
        vec = non_empty_vec(1, 2)
        copied = vec.copy()
        copied.push(3)

        assert type(copied) is NonEmptyVec
        assert len(vec) == 2

    def test_deepcopy(self):
        vec = non_empty_vec([1], [2])
        copied = copy.deepcopy(vec)

        assert type(copied) is NonEmptyVec
        assert copied == vec
        assert copied.first() is not vec.first()


class TestFormatting:
    def test_repr(self):
        multiple = non_empty_vec(10, 20, 30, 40, 50)

        assert repr(multiple) == "[10, 20, 30, 40, 50]"

    def test_of_simple_objects(self):
        class Test:
            __slots__ = ("value",)

            def __init__(self, value):
                self.value = value

        vec = non_empty_vec(Test(0))

        assert vec.first().value == 0
