from __future__ import annotations

"""Project-wide constants used across modules.

Environment switches are read at call time, never cached at import.
"""

# Base logger name; every project logger lives under it.
LOGGER_NAME: str = 'decomment'

DEFAULT_ENCODING: str = 'utf-8'

# Suffix inserted before the extension by --formatted-copy (foo.c -> foo_formatted.c).
FORMATTED_SUFFIX: str = '_formatted'

ENV_JSON_LOGS: str = 'DECOMMENT_JSON_LOGS'
ENV_TRACE_IO: str = 'DECOMMENT_TRACE_IO'
ENV_VERSION: str = 'DECOMMENT_VERSION'
ENV_DEBUG: str = 'DEBUG'
