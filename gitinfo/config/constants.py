"""Configuration constants for the gitinfo validator."""

# File validated when no path is given on the command line
DEFAULT_TARGET = ".gitinfo"

SCHEMA_FILENAME = "gitinfo.schema.json"

# Environment variables
SCHEMA_ENV = "GITINFO_SCHEMA"
NO_COLOR_ENV = "NO_COLOR"

COLOR_MODES = ("auto", "always", "never")

# ANSI escapes
RED = "\x1b[0;31m"
GREEN = "\x1b[0;32m"
NC = "\x1b[0m"
