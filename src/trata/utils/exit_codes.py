"""
Exit codes for the trata CLI.

Semantic exit codes so scripts wrapping the timer can tell a bad
configuration apart from an unexpected crash.
"""

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or configuration
ERROR_INVALID_ARGS = 2
