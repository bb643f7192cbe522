from jinja2 import Environment, PackageLoader, select_autoescape

env = Environment(
    loader=PackageLoader("recipe_summary", "templates"),
    autoescape=select_autoescape(["html", "xml"]),
    trim_blocks=True,
)

recipe_summary_template = env.get_template("recipe_summary.txt")
