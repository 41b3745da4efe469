# This module's package.
PKG = '.'.join(__name__.split('.')[:-1])

# Joins a parent's row key and a child's position
DEFAULT_ROW_KEY_SEPARATOR = "_"

# Environment variables read by config.load_tree_config_from_env
ENV_PREFIX = "TREE_NODE_MODEL_"

DEFAULT_NODE_TYPE = "default"
