# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html
import sys
from typing import Literal, Any
from pathlib import Path
from sphinx.application import Sphinx

root = Path(__file__).parents[2]
sys.path.insert(1, str(root))

# -- Project information -----------------------------------------------------

project = "colorlab"
copyright = "2026, colorlab authors"
author = "colorlab authors"
from colorlab import __version__

module_version = release = __version__

# -- General configuration ---------------------------------------------------

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.viewcode",
    "sphinx.ext.napoleon",
]

templates_path = ["_templates"]
exclude_patterns = []


# -- Options for HTML output -------------------------------------------------

html_theme = "alabaster"


def skip_component_helpers(
    app: Sphinx,
    what: Literal[
        "module", "class", "exception", "function", "method", "attribute"
    ],
    name: str,
    obj: Any,
    skip: bool,
    options: dict[str, bool],
) -> bool:
    # Skip the per-component companding helpers
    if name.startswith("_from_"):
        return True
    return skip


def setup(app: Sphinx):
    app.connect("autodoc-skip-member", skip_component_helpers)
