# Configuration file for the Sphinx documentation builder.

import os
import sys

# Make the src layout importable for autodoc
sys.path.insert(0, os.path.abspath("../src"))

from depbump import __version__  # noqa: E402

# -- Project information -----------------------------------------------------
project = "depbump"
copyright = "2025, depbump Contributors"
author = "depbump Contributors"
release = __version__

# -- General configuration ---------------------------------------------------
extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
    "myst_parser",
    "sphinxcontrib.mermaid",
]

root_doc = "index"
source_suffix = {".md": "markdown", ".rst": "restructuredtext"}

# Docstrings are Google style
napoleon_google_docstring = True
napoleon_numpy_docstring = False
napoleon_include_init_with_doc = True

myst_enable_extensions = ["colon_fence"]
myst_fence_as_directive = ["mermaid"]

exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]

# -- Options for HTML output -------------------------------------------------
html_theme = "sphinx_rtd_theme"
html_title = f"depbump {release}"

# -- Autodoc settings --------------------------------------------------------
autodoc_default_options = {
    "members": True,
    "member-order": "bysource",
    "undoc-members": True,
}
autodoc_typehints = "description"

# Frozen dataclasses document their fields twice
suppress_warnings = ["ref.python"]
