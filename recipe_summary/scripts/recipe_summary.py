"""
The ``recipe-summary`` command prints a summary of every recipe described in
a delimited recipe/ingredient file.

.. highlight:: bash

Basic usage
===========

.. code:: text

    $ recipe-summary [CSV_FILE]

If no filename is given, ``recipe_ingredients.csv`` in the current directory
is read. The file must start with a header row naming the columns
``recipe_name``, ``instructions``, ``ingredient`` and ``quantity`` (in any
order and case). Each following row lists one ingredient of one recipe.

For each recipe, in the order it first appears in the file, its name,
instructions and ingredients are printed, followed by a blank line.

Other delimiters
================

Files separated by something other than commas can be read by passing the
delimiter using the ``--delimiter`` or ``-d`` argument, e.g. ``-d ';'``.
"""

import sys

import logging

from argparse import ArgumentParser

from pathlib import Path

from recipe_summary.exceptions import RecipeSummaryError

from recipe_summary.loader import DEFAULT_INPUT_FILE, load_recipes

from recipe_summary.reporter import write_summaries


def main() -> None:
    parser = ArgumentParser(
        description="""
            Print a summary of each recipe in a recipe ingredients CSV file.
        """,
    )

    parser.add_argument(
        "csv_file",
        type=Path,
        nargs="?",
        default=Path(DEFAULT_INPUT_FILE),
        help=f"""
            The file listing recipe ingredients, one per row. Defaults to
            {DEFAULT_INPUT_FILE}.
        """,
    )

    parser.add_argument(
        "--delimiter",
        "-d",
        default=",",
        metavar="DELIMITER",
        help="""
            The character separating values in the file. Defaults to ','.
        """,
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=False,
        help="""
            Log details of how rows were grouped into recipes to stderr.
        """,
    )

    args = parser.parse_args()

    if len(args.delimiter) != 1:
        parser.error("the delimiter must be a single character")

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        recipes = load_recipes(args.csv_file, delimiter=args.delimiter)
    except RecipeSummaryError as e:
        sys.stderr.write(f"{e}\n")
        sys.exit(1)

    write_summaries(recipes)


if __name__ == "__main__":
    main()
