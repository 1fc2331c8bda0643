# topmark:header:start
#
#   project      : tgcom
#   file         : model.py
#   file_relpath : src/tgcom/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 tgcom contributors
#
# topmark:header:end

"""Run configuration for tgcom.

`MutableRunConfig` collects settings from built-in defaults, discovered config
files, explicit ``--config`` files, and CLI arguments (in that order of
precedence, last wins). `MutableRunConfig.freeze` validates the result and
produces the immutable `RunConfig` used by the batch driver.

TOML schema (``tgcom.toml`` or ``[tool.tgcom]`` in ``pyproject.toml``)::

    root = false            # stop upward discovery at this file
    [defaults]
    action = "toggle"       # comment | uncomment | toggle
    dry_run = false
    diff = false
    [languages]             # custom language name -> marker string
    jinja = "##"
    [extensions]            # extension -> language name
    ".tpl" = "html"
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Mapping

from tgcom.config.io import (
    discover_config_files,
    get_bool_or_none,
    get_string_mapping,
    get_string_or_none,
    get_table,
    get_tgcom_table,
    load_toml_dict,
)
from tgcom.config.keys import Toml
from tgcom.config.logging import get_logger
from tgcom.errors import ConfigError, TgcomError
from tgcom.languages.base import marker_from_string
from tgcom.languages.registry import LanguageRegistry, get_language_registry, resolve_marker
from tgcom.selection import LabelSection, parse_range
from tgcom.transform import Action

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tgcom.config.io import TomlTable
    from tgcom.config.logging import TgcomLogger
    from tgcom.languages.base import CommentMarker
    from tgcom.selection import Selection

ArgsLike = Mapping[str, Any]

logger: TgcomLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class RunConfig:
    """Immutable settings for one tgcom run.

    Attributes:
        action (Action): Transform applied to selected lines.
        dry_run (bool): Report instead of writing.
        diff (bool): Attach a unified diff to each file result.
        selection (Selection | None): Global selection, used by targets that carry
            no inline ``:lines`` suffix.
        language (str | None): Explicit language for every target.
        marker (str | None): Explicit marker string for every target.
        registry (LanguageRegistry): Built-in languages plus config overlays.
        config_files (tuple[Path | str, ...]): Sources merged into this config.
    """

    action: Action = Action.TOGGLE
    dry_run: bool = False
    diff: bool = False
    selection: Selection | None = None
    language: str | None = None
    marker: str | None = None
    registry: LanguageRegistry = field(default_factory=get_language_registry)
    config_files: tuple[Path | str, ...] = ()

    def resolve_marker(self, path: Path | None) -> CommentMarker:
        """Resolve the comment marker for ``path`` under this config."""
        return resolve_marker(self.language, path, marker=self.marker, registry=self.registry)


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableRunConfig:
    """Mutable configuration used during discovery and merging.

    Every scalar field is ``None`` until some layer sets it, so `merge_with` can
    tell "unset" apart from an explicit ``false``.
    """

    action: str | None = None
    dry_run: bool | None = None
    diff: bool | None = None

    line: str | None = None
    start_label: str | None = None
    end_label: str | None = None

    language: str | None = None
    marker: str | None = None

    languages: dict[str, str] = field(default_factory=lambda: {})
    extensions: dict[str, str] = field(default_factory=lambda: {})

    config_files: list[Path | str] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> RunConfig:
        """Validate this builder and return the immutable `RunConfig`.

        Raises:
            ConfigError: On an unknown action, conflicting selections or markers,
                or invalid ``[languages]``/``[extensions]`` entries.
            InvalidRangeSyntaxError: If ``line`` is malformed.
            InvalidLabelError: If a label is empty.
            InvalidMarkerError: If ``marker`` is malformed.
        """
        try:
            action = Action.from_name(self.action)
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc

        has_labels = self.start_label is not None or self.end_label is not None
        if has_labels and (self.start_label is None or self.end_label is None):
            raise ConfigError("start label and end label must be given together")
        if has_labels and self.line is not None:
            raise ConfigError("specify either a line range or labels, not both")
        if self.language and self.marker:
            raise ConfigError("specify either a language or a marker, not both")

        selection: Selection | None = None
        if self.line is not None:
            selection = parse_range(self.line)
        elif self.start_label is not None and self.end_label is not None:
            selection = LabelSection(self.start_label, self.end_label)

        if self.marker is not None:
            marker_from_string(self.marker)

        registry: LanguageRegistry = get_language_registry()
        if self.languages or self.extensions:
            try:
                registry = registry.with_overlays(
                    languages=self.languages, extensions=self.extensions
                )
            except TgcomError as exc:
                raise ConfigError(f"invalid language configuration: {exc.message}") from exc

        return RunConfig(
            action=action,
            dry_run=bool(self.dry_run),
            diff=bool(self.diff),
            selection=selection,
            language=self.language,
            marker=self.marker,
            registry=registry,
            config_files=tuple(self.config_files),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_toml_dict(cls, data: TomlTable, path: Path | None = None) -> MutableRunConfig:
        """Build a draft from a tgcom table (``tgcom.toml`` or ``[tool.tgcom]``).

        Raises:
            ConfigError: If a value has the wrong type.
        """
        defaults: TomlTable = get_table(data, Toml.SECTION_DEFAULTS, path=path)
        draft = cls(
            action=get_string_or_none(defaults, Toml.KEY_ACTION, path=path),
            dry_run=get_bool_or_none(defaults, Toml.KEY_DRY_RUN, path=path),
            diff=get_bool_or_none(defaults, Toml.KEY_DIFF, path=path),
            languages=get_string_mapping(data, Toml.SECTION_LANGUAGES, path=path),
            extensions=get_string_mapping(data, Toml.SECTION_EXTENSIONS, path=path),
        )
        if draft.action is not None:
            try:
                Action.from_name(draft.action)
            except ValueError as exc:
                raise ConfigError(str(exc), path=path) from exc
        if path is not None:
            draft.config_files.append(path)
        logger.trace("Parsed config draft from %s: %s", path or "<dict>", draft)
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableRunConfig:
        """Load a draft from a ``tgcom.toml`` or ``pyproject.toml`` file.

        A ``pyproject.toml`` without ``[tool.tgcom]`` yields an empty draft.
        """
        table: TomlTable | None = get_tgcom_table(path, load_toml_dict(path))
        if table is None:
            logger.debug("No [tool.tgcom] table in %s", path)
            return cls(config_files=[path])
        return cls.from_toml_dict(table, path)

    @classmethod
    def load_merged(
        cls,
        *,
        start: Path | None = None,
        extra_config_files: Iterable[Path] = (),
        no_config: bool = False,
    ) -> MutableRunConfig:
        """Merge built-in defaults, discovered files, and explicit files.

        Args:
            start (Path | None): Directory where discovery starts (default: CWD).
            extra_config_files (Iterable[Path]): Files given with ``--config``;
                merged last, in order.
            no_config (bool): Skip upward discovery.

        Returns:
            MutableRunConfig: The merged draft; CLI arguments still need applying.
        """
        draft = cls()
        if not no_config:
            for path in discover_config_files(start or Path.cwd()):
                draft = draft.merge_with(cls.from_toml_file(path))
        for path in extra_config_files:
            draft = draft.merge_with(cls.from_toml_file(Path(path)))
        logger.debug("Merged config from %s", [str(p) for p in draft.config_files])
        return draft

    def merge_with(self, other: MutableRunConfig) -> MutableRunConfig:
        """Return a new draft where set values of ``other`` override this one.

        Mappings are merged key by key; ``config_files`` are concatenated.
        """

        def pick(mine: Any, theirs: Any) -> Any:
            return theirs if theirs is not None else mine

        return MutableRunConfig(
            action=pick(self.action, other.action),
            dry_run=pick(self.dry_run, other.dry_run),
            diff=pick(self.diff, other.diff),
            line=pick(self.line, other.line),
            start_label=pick(self.start_label, other.start_label),
            end_label=pick(self.end_label, other.end_label),
            language=pick(self.language, other.language),
            marker=pick(self.marker, other.marker),
            languages={**self.languages, **other.languages},
            extensions={**self.extensions, **other.extensions},
            config_files=[*self.config_files, *other.config_files],
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableRunConfig:
        """Apply overrides from a parsed arguments mapping (CLI or API).

        Only keys present with a non-None value override the draft. Boolean flags
        only ever switch a setting on, so a config file's ``dry_run = true`` is
        not undone by the absence of ``--dry-run``.

        Args:
            args (ArgsLike): Mapping with any of the keys ``action``, ``dry_run``,
                ``diff``, ``line``, ``start_label``, ``end_label``, ``language``,
                ``marker``.

        Returns:
            MutableRunConfig: This draft, updated in place.
        """
        logger.debug("Applying CLI arguments to MutableRunConfig: %s", args)
        self.config_files.append("<CLI overrides>")

        for key in ("action", "line", "start_label", "end_label", "language", "marker"):
            value = args.get(key)
            if value is not None:
                setattr(self, key, value)

        # A selection or marker source given on the command line replaces the
        # configured one entirely
        if args.get("line") is not None:
            self.start_label = self.end_label = None
        elif args.get("start_label") is not None or args.get("end_label") is not None:
            self.line = None
        if args.get("language") is not None:
            self.marker = None
        elif args.get("marker") is not None:
            self.language = None

        for key in ("dry_run", "diff"):
            if args.get(key):
                setattr(self, key, True)
        return self
