"""Fixture setup"""

__all__ = [
    'cfgfile',
    'cfgstore',
    'cfgtext',
]


from gitcfg_core.tests.fixtures import (
    # function-scope path to a file with a standard configuration
    cfgfile,
    # function-scope loaded store with a standard configuration
    cfgstore,
    # function-scope text of a standard configuration
    cfgtext,
)
