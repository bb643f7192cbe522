"""
Print recipe summaries.
"""

from typing import Iterable, Optional, TextIO

import sys

from recipe_summary.recipe import Recipe


def write_summaries(recipes: Iterable[Recipe], output: Optional[TextIO] = None) -> None:
    """
    Write the summary of each recipe, in order, to ``output`` (stdout by
    default). Each summary is followed by a blank line.
    """
    if output is None:
        output = sys.stdout

    for recipe in recipes:
        output.write(recipe.summary() + "\n")
