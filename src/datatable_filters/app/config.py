"""
Classes/functions for configuring datatable filters

Configuration covers the presentation defaults filters fall back to when a
column descriptor does not specify them, plus evaluation diagnostics.
"""
import os
from logging import getLogger
from typing import Optional

import yaml as yaml
from marshmallow import EXCLUDE, Schema, ValidationError, fields, post_load, validate

from datatable_filters.errors import BadConfigError

logger = getLogger(__name__)

DATATABLE_FILTERS_YML = ".datatable_filters.yaml"
CONFIG_ENV_VAR = "DATATABLE_FILTERS_CONFIG"

DEFAULT_DATE_FORMAT = "%Y-%m-%d"
DEFAULT_VALUE_SEPARATOR = ", "


class FilterConfig:
    """
    Config for column filters

    See also :class:`FilterConfigSchema`

    Parameters
    ----------
    date_format : str
        strftime pattern used to render dates in labels when the date column
        does not provide its own format
    value_separator : str
        Separator placed between accepted values in dropdown filter labels
    validate_parameters : bool, default=True
        Reject filters whose parameter count does not match the predicate
    verbose : bool, default=False
        If true, log every item that fails a filter test at DEBUG level
    """

    def __init__(
        self,
        date_format: str = DEFAULT_DATE_FORMAT,
        value_separator: str = DEFAULT_VALUE_SEPARATOR,
        validate_parameters: bool = True,
        verbose: bool = False,
    ):
        self.date_format = date_format
        self.value_separator = value_separator
        self.validate_parameters = validate_parameters
        self.verbose = verbose

    def __eq__(self, other):
        if not isinstance(other, FilterConfig):
            return NotImplemented
        return vars(self) == vars(other)

    def __repr__(self):
        return (
            f"FilterConfig(date_format={self.date_format!r}, value_separator={self.value_separator!r}, "
            f"validate_parameters={self.validate_parameters}, verbose={self.verbose})"
        )

    def to_yaml(self, stream=None):
        """
        Serialize this config to YAML

        Parameters
        ----------
        stream
            If None (default) return a string, else dump the yaml into this
            stream.
        """
        return yaml.dump(FilterConfigSchema().dump(self), stream)

    @staticmethod
    def from_yaml(stream):
        """
        Load config from yaml

        Parameters
        ----------
        stream : str, file-obj
            String or file-like object to load yaml from

        Returns
        -------
        config : FilterConfig
            Generated config

        Raises
        ------
        BadConfigError
            If the document does not match :class:`FilterConfigSchema`
        """
        data = yaml.safe_load(stream) or {}
        try:
            return FilterConfigSchema().load(data)
        except ValidationError as e:
            raise BadConfigError(f"Invalid filter configuration: {e.messages}") from e


class FilterConfigSchema(Schema):
    """
    Marshmallow schema for :class:`FilterConfig` class.
    """

    class Meta:
        unknown = EXCLUDE

    date_format = fields.Str(required=False, validate=validate.Length(min=1))
    value_separator = fields.Str(required=False)
    validate_parameters = fields.Bool(required=False)
    verbose = fields.Bool(required=False)

    @post_load
    def make_config(self, data, **kwargs):
        return FilterConfig(**data)


def load_config(path_to_config: str = None) -> Optional[FilterConfig]:
    """
    Load filter configuration from disk and from the environment.

    Config is loaded by attempting to load files in the following order.  The
    first valid file will be used

    1. Path set in ``DATATABLE_FILTERS_CONFIG`` environment variable
    2. Current directory's ``.datatable_filters.yaml`` file
    3. ``~/.datatable_filters.yaml`` (home directory)

    Returns
    -------
    config : FilterConfig, None
        Config for filters, if a valid config file is found, else returns
        `None`.
    """
    if path_to_config is None:
        cfg_candidates = {
            "environment": os.environ.get(CONFIG_ENV_VAR),
            "current_dir": DATATABLE_FILTERS_YML,
            "home_dir": os.path.join(os.path.expanduser("~"), DATATABLE_FILTERS_YML),
        }
    else:
        cfg_candidates = {"argument": path_to_config}

    for k, f_path in cfg_candidates.items():
        logger.debug(f"Attempting to load config file: {f_path}")
        if f_path is None or not os.path.isfile(f_path):
            logger.debug(f"Skipping: [{f_path}] is not a file")
            continue
        logger.info(f"[{f_path}] is a file, attempting to load as FilterConfig yaml")
        try:
            with open(f_path, "rt", encoding="utf-8") as f:
                config = FilterConfig.from_yaml(f)
            logger.debug(f"Loaded config from {k}: {f_path}")
            return config
        except (BadConfigError, yaml.YAMLError, OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to load config file {f_path}: {e}")
    return None


_default_config: Optional[FilterConfig] = None


def get_config() -> FilterConfig:
    """
    Return the process-wide default config, loading it on first use.
    """
    global _default_config
    if _default_config is None:
        _default_config = load_config() or FilterConfig()
    return _default_config


def set_config(config: FilterConfig) -> None:
    global _default_config
    _default_config = config


def reset_config() -> None:
    """Forget the process-wide default so the next :func:`get_config` reloads it."""
    global _default_config
    _default_config = None
