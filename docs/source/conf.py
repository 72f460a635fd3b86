import os
import sys

sys.path.insert(0, os.path.abspath("../../src"))

project = "ddnsurl"
author = "ddnsurl contributors"
import ddnsurl

release = ddnsurl.__version__

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
    "sphinx.ext.intersphinx",
    "myst_parser",
]

exclude_patterns = []

# MyST-Parser configuration
myst_heading_anchors = 3
myst_enable_extensions = ["colon_fence"]

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
}

# Autodoc configuration
autodoc_default_options = {
    "imported-members": False,
    "show-inheritance": True,
}
autodoc_member_order = "bysource"

html_theme = "furo"
html_title = "ddnsurl"
