# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

import os
import sys

sys.path.insert(0, os.path.abspath("../src"))

# -- Project information -----------------------------------------------------
# https://www.sphinx-doc.org/en/master/usage/configuration.html#project-information

project = 'quantikit'
copyright = '2026, Quantikit Developers'
author = 'Quantikit Developers'
html_title = 'Quantikit Docs'

# -- General configuration ---------------------------------------------------
# https://www.sphinx-doc.org/en/master/usage/configuration.html#general-configuration

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.napoleon',
    'sphinx.ext.viewcode',
    'sphinx_copybutton',
    "myst_parser"
]

# Docstrings use the numpy section style (Attributes / Raises / Example).
napoleon_google_docstring = False
napoleon_numpy_docstring = True
autodoc_member_order = "bysource"
autodoc_typehints = "description"

templates_path = ['_templates']
exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store']


# -- Options for HTML output -------------------------------------------------
# https://www.sphinx-doc.org/en/master/usage/configuration.html#options-for-html-output

html_theme = "furo"

html_theme_options = {
    # Show project name at top of the sidebar
    "sidebar_hide_name": False,

    # Handy keyboard nav (j/k) through the sidebar
    "navigation_with_keys": True,

    # Theme colors
    "light_css_variables": {
        "color-brand-primary": "#2e7d32",
        "color-brand-content": "#1b5e20",
    },
    "dark_css_variables": {
        "color-brand-primary": "#81c784",
        "color-brand-content": "#a5d6a7",
    },
}


source_suffix = {
    ".rst": "restructuredtext",
    ".md": "markdown",
}
