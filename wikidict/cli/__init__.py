"""Command line interface for wikidict.

* :mod:`wikidict.cli.args` builds the sub-command parser and maps flags onto
  configuration overrides.
* :mod:`wikidict.cli.orchestrator` loads the layered configuration and
  dispatches to the single-dictionary runner, the cache importer or the
  release scheduler.
"""

from . import args, orchestrator

__all__ = ["args", "orchestrator"]
