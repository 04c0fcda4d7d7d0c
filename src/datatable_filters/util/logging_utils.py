import logging
import logging.config
import sys

# Logging format example:
# 2026/10/19 12:36:37 INFO datatable_filters.app.config: Loaded config from .datatable_filters.yaml
LOGGING_LINE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOGGING_DATETIME_FORMAT = "%Y/%m/%d %H:%M:%S"

ROOT_MODULE_NAME = "datatable_filters"


def _configure_loggers(root_module_name, level="INFO"):
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "datatable_filters_formatter": {
                    "format": LOGGING_LINE_FORMAT,
                    "datefmt": LOGGING_DATETIME_FORMAT,
                },
            },
            "handlers": {
                "datatable_filters_handler": {
                    "level": level,
                    "formatter": "datatable_filters_formatter",
                    "class": "logging.StreamHandler",
                    "stream": sys.stderr,
                },
            },
            "loggers": {
                root_module_name: {
                    "handlers": ["datatable_filters_handler"],
                    "level": level,
                    "propagate": False,
                },
            },
        }
    )


def configure_logging(level="INFO"):
    """
    Send the library's log records to stderr using the standard line format.

    Applications that configure logging themselves do not need to call this.
    """
    _configure_loggers(ROOT_MODULE_NAME, level)
