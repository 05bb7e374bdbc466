"""Method catalog index: distinct method ids and substring filtering."""

from methodscope.catalog.operations import all_methods, filter_methods

__all__ = [
    "all_methods",
    "filter_methods",
]
