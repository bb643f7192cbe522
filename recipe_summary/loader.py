"""
Load recipes from a delimited (e.g. CSV) file.

The input file starts with a header row naming its columns, followed by one
row per ingredient::

    recipe_name,instructions,ingredient,quantity
    Pancakes,Mix and cook,flour,2 cups
    Pancakes,Mix and cook,eggs,2
    Toast,Toast bread,bread,2 slices

Rows sharing a recipe name are combined into a single :py:class:`Recipe`
whose ingredients appear in file order. Recipes are returned in the order
their names first appear. When rows for the same recipe give different
instructions, those of the first row are kept.

Header names are matched loosely (see :py:func:`normalise_header`) so, for
example, a column titled 'Recipe Name' is treated as ``recipe_name``.

.. autofunction:: load_recipes

.. autofunction:: read_rows

.. autofunction:: group_rows

.. autofunction:: normalise_header
"""

from typing import Dict, Iterable, List, Mapping, TextIO, Union

import logging
import re

from pathlib import Path

import pandas as pd  # type: ignore
from pandas.errors import EmptyDataError, ParserError  # type: ignore

from recipe_summary.exceptions import InputFileError, MalformedInputError

from recipe_summary.recipe import Recipe, Ingredient


logger = logging.getLogger(__name__)


DEFAULT_INPUT_FILE = "recipe_ingredients.csv"
"""The file read when no input file is specified."""


RECIPE_NAME = "recipe_name"
INSTRUCTIONS = "instructions"
INGREDIENT = "ingredient"
QUANTITY = "quantity"


non_word_pattern = re.compile(r"[^\s\w]+")
whitespace_pattern = re.compile(r"\s+")


def normalise_header(header: str) -> str:
    """
    Convert a column header into an identifier: lower case, with
    punctuation removed and runs of whitespace replaced by an underscore.

    For example ``"Recipe Name"`` becomes ``"recipe_name"``.
    """
    header = non_word_pattern.sub("", header.lower()).strip()
    return whitespace_pattern.sub("_", header)


def read_rows(csv_file: TextIO, delimiter: str = ",") -> List[Dict[str, str]]:
    """
    Read the data rows of a delimited file, returning a dictionary per row
    mapping each (normalised) header name to that row's value, in file order.

    Every value is kept as text: nothing is converted to a number or treated
    as missing, and empty or absent values become the empty string. Blank
    lines are skipped. Throws :py:exc:`MalformedInputError` if the input
    cannot be parsed or decoded.
    """
    try:
        df = pd.read_csv(
            csv_file,
            sep=delimiter,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
        )
    except (ParserError, EmptyDataError, UnicodeDecodeError) as e:
        raise MalformedInputError(str(e)) from e

    df = df.rename(columns=normalise_header).fillna("")

    return [
        {str(column): str(value) for column, value in record.items()}
        for record in df.to_dict("records")
    ]


def group_rows(rows: Iterable[Mapping[str, str]]) -> List[Recipe]:
    """
    Group rows into recipes by their ``recipe_name`` field, adding one
    :py:class:`Ingredient` per row.

    Names are compared exactly (no case folding or whitespace trimming). The
    resulting recipes are listed in order of first appearance and each takes
    its instructions from the first row with its name.
    """
    recipes: Dict[str, Recipe] = {}

    row_count = 0
    for row in rows:
        row_count += 1
        name = row.get(RECIPE_NAME, "")
        instructions = row.get(INSTRUCTIONS, "")

        recipe = recipes.get(name)
        if recipe is None:
            logger.debug("Found recipe %r", name)
            recipe = recipes[name] = Recipe(name, instructions)
        elif instructions != recipe.instructions:
            logger.debug(
                "Ignoring instructions %r given for %r in row %d (keeping %r)",
                instructions,
                name,
                row_count,
                recipe.instructions,
            )

        recipe.add_ingredient(
            Ingredient(row.get(INGREDIENT, ""), row.get(QUANTITY, ""))
        )

    logger.info("Loaded %d recipe(s) from %d row(s)", len(recipes), row_count)

    return list(recipes.values())


def load_recipes(
    input_file: Union[str, Path] = DEFAULT_INPUT_FILE,
    delimiter: str = ",",
) -> List[Recipe]:
    """
    Load all of the recipes described in a delimited file.

    Parameters
    ==========
    input_file : str or Path
        The file to read. Defaults to ``recipe_ingredients.csv`` in the
        current directory.
    delimiter : str
        The single character separating values within a row.

    Throws :py:exc:`InputFileError` if the file cannot be opened and
    :py:exc:`MalformedInputError` if its contents cannot be parsed.
    """
    path = Path(input_file)
    try:
        f = path.open("r", encoding="utf-8", newline="")
    except OSError as e:
        raise InputFileError(f"Cannot read {path}: {e.strerror}") from e

    with f:
        return group_rows(read_rows(f, delimiter=delimiter))
