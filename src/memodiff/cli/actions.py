"""Argparse actions that read their defaults from the environment.

Every option ``--some-flag`` can be preset with ``MEMODIFF_SOME_FLAG``.
Values given on the command line always win over the environment.
"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import argparse
import logging
import os

from memodiff.constants import ENV_PREFIX

logger = logging.getLogger(__name__)

TRUE_VALUES = ("true", "1", "yes", "on")


def env_key_for(dest: str) -> str:
    """Return the environment variable consulted for an argument destination."""
    return f"{ENV_PREFIX}{dest.upper().replace('-', '_')}"


def _dest_from_options(option_strings, dest):
    if dest is not None:
        return dest
    for option in option_strings:
        if option.startswith("--"):
            return option[2:].replace("-", "_")
    for option in option_strings:
        if option.startswith("-"):
            return option[1:]
    return None


class EnvironmentAwareAction(argparse.Action):
    """Store action whose default comes from ``MEMODIFF_<DEST>`` when set."""

    def __init__(self, option_strings, dest=None, **kwargs):
        resolved = _dest_from_options(option_strings, dest)
        if resolved:
            env_key = env_key_for(resolved)
            env_value = os.environ.get(env_key)
            if env_value is not None:
                try:
                    kwargs["default"] = self._convert_env_value(env_value, kwargs)
                except (ValueError, TypeError) as e:
                    logger.warning("Invalid environment variable %s=%s: %s", env_key, env_value, e)
        super().__init__(option_strings, dest=resolved, **kwargs)

    @staticmethod
    def _convert_env_value(env_value: str, kwargs):
        converter = kwargs.get("type")
        value = converter(env_value) if converter is not None else env_value
        choices = kwargs.get("choices")
        if choices is not None and value not in choices:
            raise ValueError(f"must be one of: {', '.join(map(str, choices))}")
        return value

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)


class EnvironmentAwareBooleanAction(argparse._StoreTrueAction):
    """Store-true action whose default comes from ``MEMODIFF_<DEST>`` when set."""

    def __init__(self, option_strings, dest=None, **kwargs):
        resolved = _dest_from_options(option_strings, dest)
        env_value = os.environ.get(env_key_for(resolved)) if resolved else None
        if env_value is not None:
            kwargs["default"] = env_value.lower() in TRUE_VALUES
        super().__init__(option_strings, dest=resolved, **kwargs)


def create_env_aware_argument(parser, *args, **kwargs):
    """Add an argument to ``parser`` with environment variable support.

    ``store_true`` flags use :class:`EnvironmentAwareBooleanAction`; plain
    store arguments use :class:`EnvironmentAwareAction`. Other actions are
    passed through unchanged.
    """
    action = kwargs.get("action", "store")

    if action == "store_true":
        kwargs["action"] = EnvironmentAwareBooleanAction
    elif action in ("store", None):
        kwargs["action"] = EnvironmentAwareAction

    return parser.add_argument(*args, **kwargs)
