# topmark:header:start
#
#   project      : Plume
#   file         : model.py
#   file_relpath : src/plume/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 The Plume Authors
#
# topmark:header:end

"""Configuration model for Plume.

Two types split mutability the same way throughout the project:

- `MutableConfig`: a builder used while collecting settings from defaults,
  discovered TOML files, extra files and CLI overrides. Unset fields stay
  ``None`` so that merging can tell "not configured" from "configured".
- `Config`: the immutable snapshot produced by `MutableConfig.freeze`; this is
  what `plume.api.Formatter` and the CLI consume.

Layered merging (later wins): defaults -> discovered files (root-most first)
-> extra files -> CLI overrides.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from plume.config.io import load_defaults_dict, load_toml_dict
from plume.config.keys import Toml
from plume.config.logging import get_logger
from plume.constants import (
    DEFAULT_FLOAT_PRECISION,
    DEFAULT_TEMPLATE_CACHE_SIZE,
    PLUME_TOML_NAME,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_SECTION,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from plume.config.io import TomlTable
    from plume.config.logging import PlumeLogger

logger: PlumeLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for Plume.

    Attributes:
        float_precision (int): Precision used by float presentation types
            (``e``, ``f``, ``g``...) when a placeholder gives none.
        template_cache_size (int): Maximum number of compiled templates kept by
            a `plume.api.Formatter`; 0 disables caching.
        config_files (tuple[Path | str, ...]): Provenance of the merged settings.
    """

    float_precision: int
    template_cache_size: int
    config_files: tuple[Path | str, ...] = ()

    def to_toml_dict(self) -> TomlTable:
        """Convert this Config into a TOML-serializable dict."""
        return {
            Toml.SECTION_FORMAT: {
                Toml.KEY_FLOAT_PRECISION: self.float_precision,
                Toml.KEY_TEMPLATE_CACHE_SIZE: self.template_cache_size,
            },
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this Config."""
        return MutableConfig(
            float_precision=self.float_precision,
            template_cache_size=self.template_cache_size,
            config_files=list(self.config_files),
        )


# -------------------------- Mutable builder --------------------------


def _int_setting(table: Mapping[str, Any], key: str, source: Path | str) -> int | None:
    """Return ``table[key]`` if it is an int, logging and ignoring anything else."""
    if key not in table:
        return None
    value = table[key]
    # bool is an int subclass but never a valid count here.
    if isinstance(value, bool) or not isinstance(value, int):
        logger.warning("Ignoring %s = %r in %s: expected an integer", key, value, source)
        return None
    return value


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Attributes:
        float_precision (int | None): Default float precision; None = inherit.
        template_cache_size (int | None): Compile cache size; None = inherit.
        config_files (list[Path | str]): Config sources that contributed settings.
    """

    float_precision: int | None = None
    template_cache_size: int | None = None
    config_files: list[Path | str] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------

    def freeze(self) -> Config:
        """Freeze this builder into an immutable Config.

        Unset fields fall back to the runtime defaults.

        Raises:
            ValueError: If a setting is out of range.
        """
        precision = (
            DEFAULT_FLOAT_PRECISION if self.float_precision is None else self.float_precision
        )
        cache_size = (
            DEFAULT_TEMPLATE_CACHE_SIZE
            if self.template_cache_size is None
            else self.template_cache_size
        )
        if precision < 0:
            raise ValueError(f"Config invalid: `float_precision` must be >= 0 (got {precision}).")
        if cache_size < 0:
            raise ValueError(
                f"Config invalid: `template_cache_size` must be >= 0 (got {cache_size})."
            )
        return Config(
            float_precision=precision,
            template_cache_size=cache_size,
            config_files=tuple(self.config_files),
        )

    # --------------------------- Loaders/parsers --------------------------

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with Plume's runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict(), config_file="<defaults>")

    @classmethod
    def from_toml_dict(
        cls,
        data: TomlTable,
        *,
        config_file: Path | str | None = None,
    ) -> MutableConfig:
        """Build a MutableConfig from a parsed TOML table.

        Unknown sections and keys are ignored; values of the wrong type are
        logged and ignored.

        Args:
            data (TomlTable): Parsed TOML (already extracted from ``[tool.plume]``
                for pyproject files).
            config_file (Path | str | None): Provenance of ``data``.

        Returns:
            MutableConfig: The populated builder.
        """
        source: Path | str = config_file if config_file is not None else "<dict>"
        fmt_any: Any = data.get(Toml.SECTION_FORMAT, {})
        fmt: dict[str, Any] = fmt_any if isinstance(fmt_any, dict) else {}
        draft = cls(
            float_precision=_int_setting(fmt, Toml.KEY_FLOAT_PRECISION, source),
            template_cache_size=_int_setting(fmt, Toml.KEY_TEMPLATE_CACHE_SIZE, source),
        )
        if config_file is not None:
            draft.config_files = [config_file]
        return draft

    @staticmethod
    def _extract_table(path: Path) -> TomlTable | None:
        """Return the Plume table of ``path``, or None when it has none."""
        toml_data: TomlTable = load_toml_dict(path)
        if path.name == PYPROJECT_TOML_NAME:
            tool_any: Any = toml_data.get("tool", {})
            if not isinstance(tool_any, dict):
                return None
            section: Any = tool_any.get(PYPROJECT_TOOL_SECTION)
            return section if isinstance(section, dict) else None
        return toml_data

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports ``plume.toml`` and ``pyproject.toml`` (``[tool.plume]`` section).

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The builder, or None if a pyproject file has no
            ``[tool.plume]`` section.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        table = cls._extract_table(path)
        if table is None:
            logger.error(
                "[tool.%s] section missing or malformed in %s", PYPROJECT_TOOL_SECTION, path
            )
            return None
        return cls.from_toml_dict(table, config_file=path)

    @classmethod
    def discover_config_files(cls, start: Path) -> list[Path]:
        """Return config files found walking upward from ``start``.

        Files are returned root-most first so that a later merge gives the
        nearest file precedence. Within one directory ``pyproject.toml`` comes
        before ``plume.toml`` (so ``plume.toml`` wins). A file that sets
        ``root = true`` stops the upward walk.

        Args:
            start (Path): Directory (or file) to start from.

        Returns:
            list[Path]: Discovered config files, root-most first.
        """
        anchor = start.resolve()
        if not anchor.is_dir():
            anchor = anchor.parent

        found: list[Path] = []
        for directory in (anchor, *anchor.parents):
            level: list[Path] = []
            stop = False
            for name in (PYPROJECT_TOML_NAME, PLUME_TOML_NAME):
                candidate = directory / name
                if not candidate.is_file():
                    continue
                table = cls._extract_table(candidate)
                if table is None:
                    continue
                level.append(candidate)
                stop = stop or table.get(Toml.KEY_ROOT) is True
            found[:0] = level
            if stop:
                break
        logger.debug("Discovered config files: %s", found)
        return found

    @classmethod
    def load_merged(
        cls,
        *,
        start: Path | None = None,
        extra_files: Iterable[Path] = (),
        no_config: bool = False,
    ) -> MutableConfig:
        """Merge defaults, discovered files and extra files (later wins).

        Args:
            start (Path | None): Discovery anchor; defaults to the current directory.
            extra_files (Iterable[Path]): Explicit config files, applied last.
            no_config (bool): Skip discovery (extra files are still applied).

        Returns:
            MutableConfig: The merged builder.
        """
        merged = cls.from_defaults()
        discovered: list[Path] = []
        if not no_config:
            discovered = cls.discover_config_files(start or Path.cwd())
        for path in [*discovered, *extra_files]:
            draft = cls.from_toml_file(path)
            if draft is not None:
                merged = merged.merge_with(draft)
        return merged

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder where settings configured in ``other`` win."""
        return MutableConfig(
            float_precision=(
                other.float_precision
                if other.float_precision is not None
                else self.float_precision
            ),
            template_cache_size=(
                other.template_cache_size
                if other.template_cache_size is not None
                else self.template_cache_size
            ),
            config_files=[*self.config_files, *other.config_files],
        )

    def apply_cli_args(self, args: Mapping[str, Any]) -> MutableConfig:
        """Apply CLI overrides in place (``None`` values are ignored).

        Args:
            args (Mapping[str, Any]): Parsed CLI parameters.

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        precision = args.get(Toml.KEY_FLOAT_PRECISION)
        if precision is not None:
            self.float_precision = int(precision)
        cache_size = args.get(Toml.KEY_TEMPLATE_CACHE_SIZE)
        if cache_size is not None:
            self.template_cache_size = int(cache_size)
        return self
