import logging
import os
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from logger.logger_service import LEVELS, get_logger
from tree_node_model.consts import DEFAULT_ROW_KEY_SEPARATOR, ENV_PREFIX, PKG

logger = get_logger(__name__)


class TreeConfig(BaseModel):
    model_config = ConfigDict(extra='forbid', frozen=True)

    row_key_separator: str = Field(default=DEFAULT_ROW_KEY_SEPARATOR, min_length=1)
    # Level of the package logger, applied by set_tree_config
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    @field_validator('row_key_separator')
    @classmethod
    def check_separator_has_no_digits(cls, value):
        # keys are positions joined by the separator, digits would make them ambiguous
        if any(char.isdigit() for char in value):
            raise ValueError('row_key_separator must not contain digits')
        return value

    @field_validator('log_level', mode='before')
    @classmethod
    def normalize_log_level(cls, value):
        if isinstance(value, str):
            return value.upper()
        return value


# Private global (hidden from outside)
_TREE_CONFIG = TreeConfig()


def get_tree_config():
    """
    Accessor: Returns the process wide tree configuration.
    """
    return _TREE_CONFIG


def set_tree_config(config):
    """
    Replace the process wide tree configuration and apply its log level to the
    package logger.

    Pick the separator before building trees: keys that are already correct under
    the old separator at the first level are pruned, so their subtrees are never
    revisited.
    """
    global _TREE_CONFIG

    if not isinstance(config, TreeConfig):
        config = TreeConfig.model_validate(config)

    _TREE_CONFIG = config
    logging.getLogger(PKG).setLevel(LEVELS[config.log_level])
    return _TREE_CONFIG


def load_tree_config_from_env(environ=None):
    """
    Build a TreeConfig from TREE_NODE_MODEL_* environment variables, e.g.
    TREE_NODE_MODEL_ROW_KEY_SEPARATOR=":" or TREE_NODE_MODEL_LOG_LEVEL=debug.
    Variables that are not set keep their defaults.

    Raises:
        pydantic.ValidationError: a variable holds an invalid value
    """
    if environ is None:
        environ = os.environ

    values = {}
    for field_name in TreeConfig.model_fields:
        env_name = ENV_PREFIX + field_name.upper()
        if env_name in environ:
            values[field_name] = environ[env_name]

    try:
        return TreeConfig.model_validate(values)
    except ValidationError as e:
        logger.warning(f"Invalid tree configuration in environment: {e}")
        raise
