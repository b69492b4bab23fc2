#  Copyright 2025 Hathor Labs
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#  http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

import os
from typing import NamedTuple, Optional

from structlog import get_logger

from urlform.conf.settings import UrlFormSettings as Settings

logger = get_logger()

CONFIG_YAML_ENV_VAR = 'URLFORM_CONFIG_YAML'

# used as the settings source when no yaml file is configured
DEFAULTS_SOURCE = '<defaults>'


class _SettingsMetadata(NamedTuple):
    source: str
    settings: Settings


_settings_singleton: Optional[_SettingsMetadata] = None


def get_global_settings() -> Settings:
    """
    Returns the settings instance.

    Tries to get the configuration from a yaml filepath in the 'URLFORM_CONFIG_YAML' env var. If it's not set the
    default settings are returned. The settings are loaded once, asking for them again with a different source is an
    error.
    """
    settings_yaml_filepath = os.environ.get(CONFIG_YAML_ENV_VAR)
    return _load_settings_singleton(settings_yaml_filepath or DEFAULTS_SOURCE)


def get_settings_source() -> str:
    """ Returns the path of the YAML file that was loaded, or '<defaults>'.

    XXX: Will raise an assertion error if get_global_settings() wasn't used before.
    """
    assert _settings_singleton is not None, 'get_global_settings() not called before'
    return _settings_singleton.source


def _load_settings_singleton(source: str) -> Settings:
    global _settings_singleton

    if _settings_singleton is not None:
        if _settings_singleton.source != source:
            raise Exception('loading config twice with a different file')

        return _settings_singleton.settings

    if source == DEFAULTS_SOURCE:
        settings = Settings()
    else:
        settings = Settings.from_yaml(filepath=source)
    logger.debug('settings loaded', source=source)

    _settings_singleton = _SettingsMetadata(source=source, settings=settings)
    return _settings_singleton.settings


def _reset_settings_singleton() -> None:
    """Forget the loaded settings, only meant to be used by tests."""
    global _settings_singleton
    _settings_singleton = None
