"""datatable-filters version number."""

__version__ = "0.3.1"
