import importlib.util
import os
import sys

# Put project root on sys.path so autoapi/doctest can import the package
sys.path.insert(0, os.path.abspath("../.."))

project = "samplestats"
author = "samplestats developers"

extensions = [
    "autoapi.extension",
    "sphinx.ext.doctest",
    "sphinx.ext.napoleon",
    "myst_nb",
    "sphinx_copybutton",
]
templates_path = []
exclude_patterns = []

nb_execution_mode = "off"

# Book-style theme when installed; alabaster otherwise so `sphinx-build`
# still works in a minimal environment.
if importlib.util.find_spec("sphinx_book_theme") is not None:
    html_theme = "sphinx_book_theme"
    html_theme_options = {
        "path_to_docs": "docs/source",
    }
else:
    html_theme = "alabaster"
    html_theme_options = {}

myst_enable_extensions = [
    "deflist",
    "colon_fence",
]

master_doc = "index"

# ---------------------------------------------------------------------------
# sphinx-autoapi: API reference for the `samplestats` package
# ---------------------------------------------------------------------------
autoapi_type = "python"
# Only the package source, so module names stay rooted at `samplestats.*`.
autoapi_dirs = ["../../samplestats"]

autoapi_ignore = [
    "**/docs/**",
    "**/tests/**",
    "**/.venv/**",
    "**/__pycache__/**",
]

autodoc_typehints = "description"

autoapi_options = [
    "members",
    "undoc-members",
    "show-inheritance",
    "show-module-summary",
]

autoapi_python_class_content = "both"
