"""Built-in exercise catalog and default routines."""

from lumbar.catalog.seed_data import BUILTIN_EXERCISES, DEFAULT_ROUTINES
from lumbar.catalog.seed import seed_catalog

__all__ = ["BUILTIN_EXERCISES", "DEFAULT_ROUTINES", "seed_catalog"]
