import os
import sys
from datetime import datetime

sys.path.insert(0, os.path.abspath('..'))

import pfsense_api  # noqa: E402

project = 'pfsense-api'
copyright = f'{datetime.now().year}, pfsense-api contributors'
author = 'pfsense-api contributors'

release = getattr(pfsense_api, '__version__', '0.1.0')
version = '.'.join(release.split('.')[:2])

# -- General configuration ---------------------------------------------------
extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.autosummary',
    'sphinx.ext.viewcode',
    'sphinx.ext.napoleon',
    'sphinx.ext.intersphinx',
    'sphinx_autodoc_typehints',
]

autosummary_generate = True
autodoc_member_order = 'groupwise'
autoclass_content = 'both'
autodoc_typehints = 'description'
autodoc_typehints_format = 'short'
autodoc_inherit_docstrings = True

exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store', '_autosummary']


def skip_private_helpers(app, what, name, obj, skip, options):
    # service helpers such as _write_model and _static_mapping_index are internal
    if what == 'class' and name.startswith('_') and not name.startswith('__'):
        return True
    return skip


def setup(app):
    app.connect('autodoc-skip-member', skip_private_helpers)


templates_path = ['_templates']
html_theme = 'sphinx_rtd_theme'
html_title = f"{project} {release}"

intersphinx_mapping = {
    'python': ('https://docs.python.org/3', None),
    'requests': ('https://requests.readthedocs.io/en/latest/', None),
}

napoleon_google_docstring = True
napoleon_numpy_docstring = False
napoleon_include_init_with_doc = True
napoleon_include_private_with_doc = False
napoleon_use_ivar = True
napoleon_use_param = True
napoleon_use_rtype = True
