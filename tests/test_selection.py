import pytest

from foody.core.errors import InputError
from foody.services.selection import SelectionFlow


@pytest.fixture
def selection(make_recipes):
    return SelectionFlow(make_recipes(7), exit_token="n")


class TestSelectionFlow:

    @pytest.mark.parametrize("choice, index", [("1", 0), ("4", 3), ("7", 6), (" 7 ", 6)])
    def test_accepts_one_through_n(self, selection, choice, index):
        assert selection.parse_choice(choice) == index

    def test_upper_bound_is_the_last_recipe(self, selection):
        assert selection.select("7").name == "Recipe 7"

    @pytest.mark.parametrize("choice", ["0", "8", "-1", "-7", "abc", "", "2.5", "n2", "1_0", "٣", "+ 3"])
    def test_rejects_everything_else(self, selection, choice):
        with pytest.raises(InputError):
            selection.select(choice)

    def test_exit_token_returns_none(self, selection):
        assert selection.select("n") is None
        assert selection.is_exit(" n ")

    def test_custom_exit_token(self, make_recipes):
        selection = SelectionFlow(make_recipes(2), exit_token="q")

        assert selection.select("q") is None
        with pytest.raises(InputError):
            selection.select("n")
