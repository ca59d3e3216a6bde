from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Any,
)

if TYPE_CHECKING:
    from collections.abc import Callable

from datasalad.settings import Setting

from gitcfg_core.config.coercion import coerce_value
from gitcfg_core.consts import UnsetValue


class ConfigItem(Setting):
    """Configuration setting with git-config type inference

    Unless a different ``coercer`` is given, the ``value`` of an item is
    its ``pristine_value`` passed through
    :func:`~gitcfg_core.config.coercion.coerce_value`.

    >>> ConfigItem('5').value
    5
    >>> ConfigItem('5').pristine_value
    '5'
    """

    def __init__(
        self,
        value: Any | type[UnsetValue] = UnsetValue,
        *,
        coercer: Callable | None = coerce_value,
        **kwargs,
    ):
        super().__init__(value, coercer=coercer, **kwargs)
