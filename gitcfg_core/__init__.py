"""Reading, querying, and writing git-config formatted text

The central piece is :class:`~gitcfg_core.config.ConfigStore`, see
:mod:`gitcfg_core.config` for details.
"""

__version__ = '0.1.0'
