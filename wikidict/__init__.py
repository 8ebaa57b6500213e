"""Build Yomitan dictionaries from wiktextract dumps."""

__version__ = "0.4.0"
