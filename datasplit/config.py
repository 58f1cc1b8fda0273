#!/usr/bin/python3

# Optional YAML settings file for the splitter

import logging

import yaml

DEFAULTS = {
    "compat": False,
    "log_level": "WARNING",
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class ConfigError(Exception):
    pass


def load_config(path=None):
    config = dict(DEFAULTS)
    if path is None:
        return config

    try:
        with open(path, 'r') as stream:
            data = yaml.safe_load(stream)
    except OSError as e:
        raise ConfigError("cannot read %s: %s" % (path, e.strerror or e)) from e
    except yaml.YAMLError as e:
        raise ConfigError("cannot parse %s: %s" % (path, e)) from e

    # An empty document loads as None
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("%s: expected a mapping, got %s" % (path, type(data).__name__))

    unknown = sorted(set(data) - set(DEFAULTS))
    if unknown:
        raise ConfigError("%s: unknown keys: %s" % (path, ", ".join(str(k) for k in unknown)))

    if "compat" in data:
        if not isinstance(data["compat"], bool):
            raise ConfigError("%s: compat must be true or false" % path)
        config["compat"] = data["compat"]

    if "log_level" in data:
        level = str(data["log_level"]).upper()
        if level not in LOG_LEVELS:
            raise ConfigError("%s: log_level must be one of %s" % (path, ", ".join(LOG_LEVELS)))
        config["log_level"] = level

    return config


def log_level(config):
    return getattr(logging, config["log_level"])
