import pytest

from io import StringIO

from recipe_summary.recipe import Ingredient, Recipe

from recipe_summary.reporter import write_summaries


PANCAKES = Recipe(
    "Pancakes",
    "Mix and cook",
    [Ingredient("flour", "2 cups"), Ingredient("eggs", "2")],
)

TOAST = Recipe("Toast", "Toast bread", [Ingredient("bread", "2 slices")])


class TestWriteSummaries:
    def test_blocks_separated_by_blank_lines(self) -> None:
        out = StringIO()
        write_summaries([PANCAKES, TOAST], out)
        assert out.getvalue() == (
            "Name: Pancakes\n"
            "Instructions: Mix and cook\n"
            "Ingredients:\n"
            "- 2 cups flour\n"
            "- 2 eggs\n"
            "\n"
            "Name: Toast\n"
            "Instructions: Toast bread\n"
            "Ingredients:\n"
            "- 2 slices bread\n"
            "\n"
        )

    def test_no_recipes(self) -> None:
        out = StringIO()
        write_summaries([], out)
        assert out.getvalue() == ""

    def test_defaults_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        write_summaries([Recipe("Water", "Pour")])
        assert capsys.readouterr().out == (
            "Name: Water\nInstructions: Pour\nIngredients:\n\n"
        )
