"""
Built-in document adapters. Importing this package registers them.
"""
from nestpath.adapters import json, table, yaml  # noqa: F401
