# topmark:header:start
#
#   project      : BuildBits
#   file         : model.py
#   file_relpath : src/buildbits/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model, discovery and merge policy.

This module defines:
    - `BackendSettings`: per-backend overrides from ``[backends.<name>]``.
    - `Config`: an immutable runtime snapshot handed to the dispatcher and
      to backends.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `Config` and thawed back for edits.

Merge order (lowest → highest precedence):
    1) Built-in defaults (``buildbits-default.toml``)
    2) User config (``$XDG_CONFIG_HOME/buildbits/buildbits.toml``)
    3) Project configs discovered upward, root-most first; within a directory
       ``pyproject.toml`` is merged before ``buildbits.toml``
    4) Extra config files passed explicitly (``--config``)
    5) CLI overrides (`MutableConfig.apply_cli_args`)

Path semantics:
    - An output directory declared in a config file is anchored to that
      file's directory.
    - An output directory given on the CLI is kept as typed, so a relative
      one resolves against the invocation CWD.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from buildbits.config.io import (
    get_bool_value_or_none,
    get_list_value,
    get_table_value,
    is_toml_table,
    load_defaults_dict,
    load_defaults_text,
    load_toml_dict,
)
from buildbits.config.keys import Toml
from buildbits.config.logging import get_logger
from buildbits.config.paths import abs_path_from
from buildbits.constants import LOCAL_TOML_CONFIG_NAME
from buildbits.diagnostic import Diagnostic, DiagnosticLog
from buildbits.errors import ConfigurationError

if TYPE_CHECKING:
    from buildbits.config.io import TomlTable
    from buildbits.config.logging import BuildbitsLogger

# ArgsLike: generic mapping accepted by config loaders (CLI options or API dicts).
ArgsLike = Mapping[str, Any]

logger: BuildbitsLogger = get_logger(__name__)

PYPROJECT_NAME: str = "pyproject.toml"

_KNOWN_TOP_LEVEL_KEYS: frozenset[str] = frozenset(
    {Toml.KEY_ROOT, Toml.SECTION_OUTPUT, Toml.SECTION_BACKENDS}
)


@dataclass(frozen=True, slots=True)
class BackendSettings:
    """Overrides for one backend, keyed by backend name in configuration.

    Attributes:
        command (tuple[str, ...]): Command template; empty means "use the
            backend's built-in command".
        capture_stdout (bool | None): Write the tool's stdout to the output
            file. None means "use the backend's default".
    """

    command: tuple[str, ...] = ()
    capture_stdout: bool | None = None

    def merge_with(self, other: BackendSettings) -> BackendSettings:
        """Return settings where explicitly-set values of ``other`` win."""
        return BackendSettings(
            command=other.command or self.command,
            capture_stdout=(
                other.capture_stdout if other.capture_stdout is not None else self.capture_stdout
            ),
        )

    def to_toml_dict(self) -> TomlTable:
        """Return a TOML-serializable table; unset values are omitted."""
        table: TomlTable = {}
        if self.command:
            table[Toml.KEY_COMMAND] = list(self.command)
        if self.capture_stdout is not None:
            table[Toml.KEY_CAPTURE_STDOUT] = self.capture_stdout
        return table


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for BuildBits.

    Produced by `MutableConfig.freeze`. Use `Config.thaw` to obtain a mutable
    builder for edits.

    Attributes:
        output_dir (Path | None): Directory artifacts are written to; None
            means "next to each input file".
        backends (Mapping[str, BackendSettings]): Per-backend overrides keyed
            by backend name (read-only).
        config_files (tuple[Path | str, ...]): Config sources that contributed,
            in merge order.
        diagnostics (tuple[Diagnostic, ...]): Warnings collected while loading,
            merging and sanitizing.
    """

    output_dir: Path | None
    backends: Mapping[str, BackendSettings]
    config_files: tuple[Path | str, ...]
    diagnostics: tuple[Diagnostic, ...]

    def command_for(self, name: str) -> tuple[str, ...] | None:
        """Return the configured command template for backend ``name``, if any."""
        settings: BackendSettings | None = self.backends.get(name)
        if settings is None or not settings.command:
            return None
        return settings.command

    def capture_stdout_for(self, name: str) -> bool | None:
        """Return the configured stdout-capture flag for backend ``name``, if any."""
        settings: BackendSettings | None = self.backends.get(name)
        return None if settings is None else settings.capture_stdout

    def to_toml_dict(self, *, include_files: bool = False) -> TomlTable:
        """Convert this immutable Config into a TOML-serializable dict.

        Args:
            include_files (bool): Whether to list the contributing config files
                under a ``config_files`` key.

        Returns:
            TomlTable: the TOML-serializable dict representing the Config.
        """
        toml_dict: TomlTable = {
            Toml.SECTION_OUTPUT: {
                Toml.KEY_DIRECTORY: str(self.output_dir) if self.output_dir is not None else "",
            },
            Toml.SECTION_BACKENDS: {
                name: settings.to_toml_dict() for name, settings in sorted(self.backends.items())
            },
        }
        if include_files:
            toml_dict["config_files"] = [str(p) for p in self.config_files]
        return toml_dict

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            output_dir=self.output_dir,
            backends=dict(self.backends),
            config_files=list(self.config_files),
            diagnostics=DiagnosticLog(items=list(self.diagnostics)),
        )


# -------------------------- Mutable builder --------------------------
@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Collects config from defaults, user and project files, extra files and CLI
    overrides, then produces an immutable `Config` via `freeze`. TOML I/O is
    delegated to `buildbits.config.io`.
    """

    output_dir: Path | None = None
    backends: dict[str, BackendSettings] = field(default_factory=lambda: {})
    config_files: list[Path | str] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Sanitize this builder and freeze it into an immutable Config."""
        self.sanitize()
        return Config(
            output_dir=self.output_dir,
            backends=MappingProxyType(dict(self.backends)),
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def get_default_config_toml(cls) -> str:
        """Return the bundled default configuration as TOML text, comments included."""
        return load_defaults_text()

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Load the default configuration from the bundled buildbits-default.toml file."""
        draft: MutableConfig = cls.from_toml_dict(load_defaults_dict(), config_file=None)
        draft.config_files = ["<defaults>"]
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports ``buildbits.toml`` files and ``pyproject.toml`` files, from
        which the ``[tool.buildbits]`` table is extracted.

        Returns:
            MutableConfig | None: The draft, or None for a ``pyproject.toml``
                without a ``[tool.buildbits]`` table.

        Raises:
            ConfigurationError: If the file cannot be read or parsed.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        toml_data: TomlTable = load_toml_dict(path)

        if path.name == PYPROJECT_NAME:
            tool_section: TomlTable = get_table_value(
                get_table_value(toml_data, Toml.PYPROJECT_TOOL), Toml.PYPROJECT_SECTION
            )
            if not tool_section:
                logger.debug("No [%s] table in %s", Toml.PYPROJECT_DOTTED_SECTION, path)
                return None
            toml_data = tool_section

        draft: MutableConfig = cls.from_toml_dict(toml_data, config_file=path)
        logger.debug("Generated MutableConfig: %s", draft)
        return draft

    @classmethod
    def from_toml_dict(cls, data: TomlTable, config_file: Path | None = None) -> MutableConfig:
        """Create a draft config from a parsed TOML dict.

        Malformed values are skipped and recorded as warning diagnostics
        rather than aborting the load.

        Args:
            data (TomlTable): The parsed TOML data (the ``[tool.buildbits]`` table
                for ``pyproject.toml``).
            config_file (Path | None): Source file, used to anchor relative paths.

        Returns:
            MutableConfig: The resulting draft.
        """
        draft: MutableConfig = cls()
        source: str = str(config_file) if config_file else "defaults"
        if config_file is not None:
            draft.config_files = [config_file]

        for key in data:
            if key not in _KNOWN_TOP_LEVEL_KEYS:
                draft._warn(f"{source}: ignoring unknown key '{key}'")

        output_tbl: TomlTable = get_table_value(data, Toml.SECTION_OUTPUT)
        logger.trace("TOML [output]: %s", output_tbl)
        raw_dir: Any = output_tbl.get(Toml.KEY_DIRECTORY)
        if raw_dir is not None and not isinstance(raw_dir, str):
            draft._warn(f"{source}: [output] directory must be a string, got {raw_dir!r}")
        elif raw_dir:
            if config_file is not None:
                draft.output_dir = abs_path_from(config_file.parent.resolve(), raw_dir)
                logger.debug("Normalized output directory against %s: %s", config_file, raw_dir)
            else:
                draft.output_dir = Path(raw_dir)

        backends_tbl: TomlTable = get_table_value(data, Toml.SECTION_BACKENDS)
        logger.trace("TOML [backends]: %s", backends_tbl)
        for name, tbl in backends_tbl.items():
            if not is_toml_table(tbl):
                draft._warn(f"{source}: [backends.{name}] must be a table")
                continue
            settings: BackendSettings | None = draft._parse_backend_table(source, name, tbl)
            if settings is not None:
                draft.backends[name] = settings

        return draft

    def _parse_backend_table(
        self, source: str, name: str, tbl: TomlTable
    ) -> BackendSettings | None:
        command: tuple[str, ...] = ()
        if Toml.KEY_COMMAND in tbl:
            raw: list[Any] | None = get_list_value(tbl, Toml.KEY_COMMAND)
            if not raw or not all(isinstance(arg, str) and arg for arg in raw):
                self._warn(
                    f"{source}: [backends.{name}] command must be a non-empty list "
                    "of non-empty strings"
                )
                return None
            command = tuple(raw)

        capture: bool | None = get_bool_value_or_none(tbl, Toml.KEY_CAPTURE_STDOUT)
        if capture is None and Toml.KEY_CAPTURE_STDOUT in tbl:
            self._warn(f"{source}: [backends.{name}] capture_stdout must be a boolean")

        return BackendSettings(command=command, capture_stdout=capture)

    def _warn(self, message: str) -> None:
        logger.warning(message)
        self.diagnostics.add_warning(message)

    # ------------------------------ Discovery ------------------------------
    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files discovered by walking upward from ``start``.

        A ``pyproject.toml`` counts only when it has a ``[tool.buildbits]``
        table. The walk stops after a directory whose config sets
        ``root = true``.

        Returns:
            list[Path]: Config file paths, root-most first; within a directory
            ``pyproject.toml`` comes before ``buildbits.toml``.
        """
        per_dir: list[list[Path]] = []
        cur: Path = start.resolve()
        if cur.is_file():
            cur = cur.parent

        while True:
            root_stop_here = False
            dir_entries: list[Path] = []

            for name in (PYPROJECT_NAME, LOCAL_TOML_CONFIG_NAME):
                p: Path = cur / name
                if not p.is_file():
                    continue
                try:
                    data: TomlTable = load_toml_dict(p)
                except ConfigurationError as e:
                    # Still listed: loading it later reports the error.
                    logger.debug("Cannot inspect %s during discovery: %s", p, e)
                    dir_entries.append(p)
                    continue
                if name == PYPROJECT_NAME:
                    data = get_table_value(
                        get_table_value(data, Toml.PYPROJECT_TOOL), Toml.PYPROJECT_SECTION
                    )
                    if not data:
                        continue
                logger.debug("Discovered config file: %s", p)
                dir_entries.append(p)
                if get_bool_value_or_none(data, Toml.KEY_ROOT):
                    root_stop_here = True

            if dir_entries:
                per_dir.append(dir_entries)

            parent: Path = cur.parent
            if parent == cur:
                break
            if root_stop_here:
                logger.debug("Stopping upward config discovery at %s due to root=true", cur)
                break
            cur = parent

        ordered: list[Path] = []
        for dir_list in reversed(per_dir):
            ordered.extend(dir_list)
        return ordered

    @classmethod
    def discover_user_config_file(cls) -> Path | None:
        """Return ``$XDG_CONFIG_HOME/buildbits/buildbits.toml`` if it exists.

        ``$XDG_CONFIG_HOME`` defaults to ``~/.config``.
        """
        xdg: str | None = os.environ.get("XDG_CONFIG_HOME")
        base: Path = Path(xdg) if xdg else Path.home() / ".config"
        path: Path = base / "buildbits" / LOCAL_TOML_CONFIG_NAME
        return path if path.is_file() else None

    @classmethod
    def load_merged(
        cls,
        *,
        input_paths: Iterable[Path] | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a draft `MutableConfig`.

        Args:
            input_paths (Iterable[Path] | None): Discovery anchor(s). The first
                path (or CWD if none) is used; a non-directory anchors at its parent.
            extra_config_files (Iterable[Path] | None): Explicit config files
                merged after discovery, in the given order.
            no_config (bool): If True, skip user and project discovery.

        Returns:
            MutableConfig: A draft ready to be frozen or further edited.

        Raises:
            ConfigurationError: If a config file cannot be read or parsed.
        """
        draft: MutableConfig = cls.from_defaults()

        paths: list[Path] = [Path(p) for p in input_paths] if input_paths else []
        anchor: Path = paths[0] if paths else Path.cwd()
        if not anchor.is_dir():
            anchor = anchor.parent

        if not no_config:
            user_cfg_path: Path | None = cls.discover_user_config_file()
            if user_cfg_path is not None:
                user_cfg: MutableConfig | None = cls.from_toml_file(user_cfg_path)
                if user_cfg is not None:
                    draft = draft.merge_with(user_cfg)

            for cfg_path in cls.discover_local_config_files(anchor):
                mc: MutableConfig | None = cls.from_toml_file(cfg_path)
                if mc is not None:
                    draft = draft.merge_with(mc)

        for extra in extra_config_files or ():
            extra_path = Path(extra)
            if not extra_path.is_file():
                raise ConfigurationError(f"Config file not found: {extra_path}")
            mc = cls.from_toml_file(extra_path)
            if mc is None:
                raise ConfigurationError(
                    f"No [{Toml.PYPROJECT_DOTTED_SECTION}] table in {extra_path}"
                )
            draft = draft.merge_with(mc)

        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft.

        Backend settings merge key-wise, then field-wise within a backend.
        Diagnostics and config file lists are concatenated.
        """
        backends: dict[str, BackendSettings] = dict(self.backends)
        for name, settings in other.backends.items():
            base: BackendSettings | None = backends.get(name)
            backends[name] = settings if base is None else base.merge_with(settings)

        diagnostics = DiagnosticLog.from_iterable(self.diagnostics)
        diagnostics.extend(other.diagnostics)

        return MutableConfig(
            output_dir=other.output_dir if other.output_dir is not None else self.output_dir,
            backends=backends,
            config_files=self.config_files + other.config_files,
            diagnostics=diagnostics,
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Apply overrides from a CLI or API arguments mapping.

        Recognized keys:
            ``output_dir``: kept as typed; an empty string resets to "next to
            the input file". None leaves the current value untouched.

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        raw_dir: Any = args.get("output_dir")
        if raw_dir is not None:
            self.output_dir = Path(raw_dir) if str(raw_dir) else None
            logger.debug("CLI output directory override: %s", self.output_dir)
        return self

    def sanitize(self) -> None:
        """Validate the draft in-place, recording warnings as diagnostics.

        Current rules:
            - ``[backends.<name>]`` for a name no registered backend carries
              is kept but reported.
            - An output directory that exists as a regular file is reported.
        """
        from buildbits.backends.registry import BackendRegistry

        known: set[str] = {meta.name for meta in BackendRegistry.iter_meta()}
        seen: set[str] = {d.message for d in self.diagnostics}
        messages: list[str] = [
            f"Unknown backend '{name}' in configuration (known: {', '.join(sorted(known))})"
            for name in sorted(self.backends)
            if name not in known
        ]
        if self.output_dir is not None and self.output_dir.is_file():
            messages.append(f"Output directory is an existing file: {self.output_dir}")

        for message in messages:
            if message not in seen:
                self._warn(message)
