"""Function Documentation Extractor.

Scans a source file for ``fn Name: docstring`` comments, matches each
one to a registered function, and renders a reference of signatures
and descriptions.
"""

__version__ = "0.1.0"
