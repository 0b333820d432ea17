# topmark:header:start
#
#   project      : Plume
#   file         : formatter.py
#   file_relpath : src/plume/api/formatter.py
#   license      : MIT
#   copyright    : (c) 2025 The Plume Authors
#
# topmark:header:end

"""Configured formatter with a compile cache.

A `Formatter` binds a frozen `plume.config.Config` snapshot: the configured
``float_precision`` becomes the default precision of float presentation types
and ``template_cache_size`` bounds an LRU cache of compiled templates.
"""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache
from typing import TYPE_CHECKING, Any, Callable

from plume.config.logging import get_logger
from plume.config.model import Config, MutableConfig
from plume.engine.template import Template
from plume.engine.values import ArgumentList

if TYPE_CHECKING:
    from typing import TextIO

    from plume.config.logging import PlumeLogger

logger: PlumeLogger = get_logger(__name__)


def resolve_config(config: Config | Mapping[str, Any] | None) -> Config:
    """Normalize a config argument into a frozen `Config`.

    Args:
        config (Config | Mapping[str, Any] | None): A frozen config, a mapping
            shaped like the TOML file (``{"format": {...}}``), or None for the
            runtime defaults.

    Returns:
        Config: The frozen configuration.

    Raises:
        ValueError: If a mapping holds out-of-range values.
    """
    if isinstance(config, Config):
        return config
    draft = MutableConfig.from_defaults()
    if config is not None:
        draft = draft.merge_with(MutableConfig.from_toml_dict(dict(config)))
    return draft.freeze()


class Formatter:
    """Compile and render format strings under one configuration.

    Args:
        config (Config | Mapping[str, Any] | None): See `resolve_config`.
    """

    def __init__(self, config: Config | Mapping[str, Any] | None = None) -> None:
        self._config: Config = resolve_config(config)
        self._compile: Callable[[str], Template]
        if self._config.template_cache_size > 0:
            self._compile = lru_cache(maxsize=self._config.template_cache_size)(
                Template.compile
            )
        else:
            self._compile = Template.compile
        logger.debug(
            "Formatter created (float_precision=%d, template_cache_size=%d)",
            self._config.float_precision,
            self._config.template_cache_size,
        )

    @property
    def config(self) -> Config:
        return self._config

    def compile(self, format_string: str) -> Template:
        """Compile ``format_string``, reusing a cached Template when possible.

        Raises:
            InvalidFormatStringError: If the format string is malformed.
        """
        return self._compile(format_string)

    def render(self, template: Template, /, *args: object, **kwargs: object) -> str:
        """Render an already compiled template with this formatter's defaults."""
        return template.render_arguments(
            ArgumentList.of(*args, **kwargs),
            default_precision=self._config.float_precision,
        )

    def format(self, format_string: str, /, *args: object, **kwargs: object) -> str:
        """Compile (or fetch) ``format_string`` and render it.

        Args:
            format_string (str): The format string.
            *args (object): Positional arguments.
            **kwargs (object): Named arguments.

        Returns:
            str: The rendered string.

        Raises:
            InvalidFormatStringError: If the format string is malformed or a
                placeholder does not apply to its argument.
            ArgumentOutOfBoundsError: If a placeholder has no matching argument.
        """
        return self.render(self.compile(format_string), *args, **kwargs)

    def write(self, stream: TextIO, format_string: str, /, *args: object, **kwargs: object) -> None:
        """Render ``format_string`` and write it to ``stream``.

        Nothing is written when rendering fails.
        """
        stream.write(self.format(format_string, *args, **kwargs))

    def clear_cache(self) -> None:
        """Drop all cached templates."""
        cache_clear = getattr(self._compile, "cache_clear", None)
        if cache_clear is not None:
            cache_clear()
