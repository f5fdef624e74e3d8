"""Constants shared across rolegraph modules."""

# Reserved domain used when no domain token is supplied
DEFAULT_DOMAIN = "casbin::default"

# Hop bound used when the caller does not choose one
DEFAULT_MAX_HIERARCHY_LEVEL = 10


class EnvVars:
    """Environment variable names read by :mod:`rolegraph.config`."""

    MAX_HIERARCHY_LEVEL = "ROLEGRAPH_MAX_HIERARCHY_LEVEL"
    LOG_ENABLED = "ROLEGRAPH_LOG_ENABLED"
    LOG_LEVEL = "ROLEGRAPH_LOG_LEVEL"
