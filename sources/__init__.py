# Importing built-in sources registers them
from . import antler_portfolio  # noqa: F401
