import pytest

from invariant_collections import EmptyError, PositiveInt


class TestPositiveInt:
    @pytest.mark.parametrize("value", [1, 2, 10**20, True])
    def test_accepts_positive_integers(self, value):
        result = PositiveInt(value)

        assert result == value
        assert isinstance(result, int)

    @pytest.mark.parametrize("value", [0, -1, False])
    def test_rejects_non_positive_integers(self, value):
        with pytest.raises(ValueError):
            PositiveInt(value)

    @pytest.mark.parametrize("value", [1.5, "1", None])
    def test_rejects_non_integers(self, value):
        with pytest.raises(TypeError):
            PositiveInt(value)

    def test_new(self):
        assert PositiveInt.new(0) is None
        assert PositiveInt.new(-5) is None
        assert PositiveInt.new(2) == 2
        assert isinstance(PositiveInt.new(2), PositiveInt)

    def test_repr(self):
        assert repr(PositiveInt(2)) == "PositiveInt(2)"


class TestEmptyError:
    def test_message(self):
        assert str(EmptyError("empty vec")) == "empty vec"
        assert str(EmptyError()) == "empty"

    def test_is_value_error(self):
        assert issubclass(EmptyError, ValueError)
