'''
Library configuration.

Defaults can be overridden with a TOML file. XLIFFSYNC_CONFIG points to it;
otherwise a config.toml next to this module is used when present.
'''

# Standard Python libraries
from dataclasses import dataclass
import os

# Installed libraries
import pytoml

_config_path = os.environ.get('XLIFFSYNC_CONFIG',
                              os.path.join(os.path.dirname(__file__), 'config.toml'))

if os.path.exists(_config_path):
    with open(_config_path, 'r', encoding='utf-8') as _config_file:
        _conf = pytoml.load(_config_file)
else:
    _conf = {}

# Text put into a target that has no previous translation.
MISSING_TRANSLATION = 'NOT TRANSLATED YET'

# Keep the attribute order of the previous unit when merging.
PRESERVE_TARGET_ORDER = True

# Order in which previous units are looked up during synchronization.
MATCHING_STRATEGIES = ['id', 'meaning-source', 'meaning-description', 'meaning']

LOG_LEVEL = 'INFO'

MISSING_TRANSLATION = str(_conf.get('MISSING_TRANSLATION', MISSING_TRANSLATION))
PRESERVE_TARGET_ORDER = bool(_conf.get('PRESERVE_TARGET_ORDER', PRESERVE_TARGET_ORDER))
MATCHING_STRATEGIES = list(_conf.get('MATCHING_STRATEGIES', MATCHING_STRATEGIES))
LOG_LEVEL = _conf.get('LOG_LEVEL', LOG_LEVEL)


@dataclass
class MergeSettings:
    '''
    Settings a merge runs with.

    Args:
        missing_translation: Placeholder text for units without a previous translation.
        preserve_target_order: Whether the previous unit's attributes, in their
                               order, form the base of the merged unit.
    '''
    missing_translation: str = MISSING_TRANSLATION
    preserve_target_order: bool = PRESERVE_TARGET_ORDER

    @classmethod
    def from_config(cls):
        return cls(MISSING_TRANSLATION, PRESERVE_TARGET_ORDER)
