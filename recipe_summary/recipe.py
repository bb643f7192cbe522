r"""
The :py:mod:`recipe_summary.recipe` module defines the data structures used to
describe recipes and their ingredients.

A :py:class:`Recipe` has a name, some instructions and an ordered list of
:py:class:`RecipeItem`\ s (in practice :py:class:`Ingredient`\ s). Both
recipes and their items can produce a human readable summary. For example::

    >>> pancakes = Recipe("Pancakes", "Mix and cook")
    >>> pancakes.add_ingredient(Ingredient("flour", "2 cups"))
    >>> pancakes.add_ingredient(Ingredient("eggs", "2"))
    >>> print(pancakes.summary())
    Name: Pancakes
    Instructions: Mix and cook
    Ingredients:
    - 2 cups flour
    - 2 eggs
    <BLANKLINE>

.. autoclass:: RecipeItem
    :members:

.. autoclass:: Ingredient
    :members:

.. autoclass:: Recipe
    :members:
"""

from typing import List

from dataclasses import dataclass, field

from recipe_summary.templates import recipe_summary_template


@dataclass(frozen=True)
class RecipeItem:
    """
    Base class for entries listed in a :py:class:`Recipe`'s ingredient list.
    Every item must be able to summarise itself on a single line.
    """

    def summary(self) -> str:
        """Return a one-line, human readable summary of this item."""
        raise NotImplementedError()


@dataclass(frozen=True)
class Ingredient(RecipeItem):
    """
    An ingredient used in a recipe.
    """

    name: str
    """The name of the ingredient (e.g. 'flour')."""

    quantity: str
    """
    The amount of the ingredient required. This is a display string (e.g. '2
    cups') and is never interpreted as a number.
    """

    def summary(self) -> str:
        return f"{self.quantity} {self.name}"


@dataclass
class Recipe:
    """
    A named recipe with instructions and an ordered list of ingredients.
    """

    name: str
    """The name of the recipe. Rows are grouped into recipes by this name."""

    instructions: str
    """The instructions for preparing the recipe."""

    ingredients: List[RecipeItem] = field(default_factory=list)
    """
    The ingredients of this recipe, in the order they were added. Use
    :py:meth:`add_ingredient` to extend this list.
    """

    def __post_init__(self) -> None:
        # Take a private copy so the caller's list is never shared
        self.ingredients = list(self.ingredients)

    def add_ingredient(self, ingredient: RecipeItem) -> None:
        """Append an ingredient to the end of this recipe's ingredient list."""
        self.ingredients.append(ingredient)

    def summary(self) -> str:
        """
        Return a multi-line summary of this recipe giving its name,
        instructions and one line per ingredient. Every line, including the
        last, ends with a newline.
        """
        return recipe_summary_template.render(recipe=self)
