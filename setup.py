from setuptools import setup, find_packages

setup(
    name="recipe_summary",
    version="1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"recipe_summary": ["templates/*.txt"]},
    description="Print summaries of recipes listed in a CSV file of ingredients.",
    install_requires=["jinja2", "pandas"],
    extras_require={"test": ["pytest", "mypy"]},
    entry_points={
        "console_scripts": [
            "recipe-summary=recipe_summary.scripts.recipe_summary:main",
        ],
    },
)
