"""
Module containing class `Settings` and the package settings.

The package settings supply the defaults a `DateRange` uses when a
time zone, interval, or format is not given explicitly. The built-in
defaults can be overridden by a YAML settings file whose path is the
value of the `DATE_RANGE_SETTINGS_FILE` environment variable. Settings
from the file are merged over the built-in defaults, so the file need
only contain the settings it changes, for example:

    time_zone: America/Chicago
    date_format: '%m/%d/%Y'
"""


from collections.abc import Mapping
import logging

from environs import Env
import jsonschema

import date_range.yaml_utils as yaml_utils


_SETTINGS_FILE_ENV_VAR = 'DATE_RANGE_SETTINGS_FILE'

_DEFAULT_SETTINGS = yaml_utils.load('''
    time_zone: UTC
    interval: P1D
    date_format: '%Y-%m-%d'
    combine_format: '%s - %s'
''')

_SETTINGS_SCHEMA = yaml_utils.load('''
    type: object
    properties:
        time_zone:
            type: string
            minLength: 1
        interval:
            type: string
            minLength: 1
        date_format:
            type: string
        combine_format:
            type: string
    additionalProperties: false
''')


_logger = logging.getLogger(__name__)

_settings = None


class Settings:

    """
    Collection of configuration settings.

    Settings are looked up by dotted path, for example `'time_zone'`.
    """


    @staticmethod
    def create_from_yaml(s):

        """Creates a settings object from a YAML string."""

        try:
            mapping = yaml_utils.load(s)
        except Exception as e:
            raise ValueError(
                f'Settings YAML parse failed. Error message was: {e}') from e

        if mapping is None:
            mapping = {}

        elif not isinstance(mapping, Mapping):
            raise ValueError('Settings must be a YAML mapping.')

        try:
            jsonschema.validate(mapping, _SETTINGS_SCHEMA)
        except jsonschema.exceptions.ValidationError as e:
            raise ValueError(f'Bad settings: {e.message}') from e

        return Settings(mapping)


    @staticmethod
    def create_from_yaml_file(file_path):
        with open(file_path) as file:
            s = file.read()
        return Settings.create_from_yaml(s)


    def __init__(self, mapping):
        self._mapping = mapping


    @property
    def mapping(self):
        return self._mapping


    def get_required(self, path):

        s = self._mapping

        for name in path.split('.'):

            if isinstance(s, Mapping) and name in s:
                s = s[name]
            else:
                raise KeyError(f'Required setting "{path}" is missing.')

        # If we get here, the setting is present with value 's'.
        return s


def get_settings():

    """
    Gets the package settings.

    The settings are loaded the first time this function is called
    and cached thereafter. Call `reset_settings` to force them to be
    reloaded, for example after changing the settings file environment
    variable.
    """

    global _settings

    if _settings is None:
        _settings = _load_settings()

    return _settings


def reset_settings():
    global _settings
    _settings = None


def _load_settings():

    mapping = dict(_DEFAULT_SETTINGS)

    env = Env()
    file_path = env(_SETTINGS_FILE_ENV_VAR, None)

    if file_path:
        _logger.debug(f'Loading date range settings from "{file_path}".')
        settings = Settings.create_from_yaml_file(file_path)
        mapping.update(settings.mapping)

    return Settings(mapping)
