# topmark:header:start
#
#   project      : tgcom
#   file         : registry.py
#   file_relpath : src/tgcom/languages/registry.py
#   license      : MIT
#   copyright    : (c) 2025 tgcom contributors
#
# topmark:header:end

"""Language registry and comment marker resolution.

The registry indexes `Language` definitions by lower-case name/alias and by
file extension. The default registry is built once from the built-in table and
cached; configuration overlays produce new registries via
`LanguageRegistry.with_overlays` and never mutate the cached one.

Resolution order in `resolve_marker`:
    1. An explicit marker string.
    2. An explicit language name (case-insensitive).
    3. The extension of the target path.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING

from tgcom.config.logging import get_logger
from tgcom.errors import UnsupportedExtensionError, UnsupportedLanguageError
from tgcom.languages.base import Language, marker_from_string
from tgcom.languages.builtins import LANGUAGES

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

    from tgcom.config.logging import TgcomLogger
    from tgcom.languages.base import CommentMarker


logger: TgcomLogger = get_logger(__name__)


class LanguageRegistry:
    """Read-only lookup of languages by name, alias, and extension.

    Later definitions win over earlier ones for the same name or extension, which
    is how configuration overlays take precedence over built-ins.
    """

    def __init__(self, languages: Iterable[Language]) -> None:
        self._languages: dict[str, Language] = {}
        self._by_name: dict[str, Language] = {}
        self._by_extension: dict[str, Language] = {}
        for lang in languages:
            self._add(lang)

    def _add(self, lang: Language) -> None:
        self._languages[lang.name] = lang
        for name in lang.names:
            self._by_name[name.lower()] = lang
        # Extensions mapped to an earlier definition of the same language follow the new one
        for ext, existing in self._by_extension.items():
            if existing.name == lang.name:
                self._by_extension[ext] = lang
        for ext in lang.extensions:
            self._by_extension[ext] = lang

    def __iter__(self) -> Iterator[Language]:
        return iter(sorted(self._languages.values(), key=lambda lang: lang.name))

    def __len__(self) -> int:
        return len(self._languages)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._by_name

    def get(self, name: str) -> Language:
        """Return the language registered under ``name`` or one of its aliases.

        Raises:
            UnsupportedLanguageError: If no language matches (case-insensitive).
        """
        lang = self._by_name.get(name.strip().lower())
        if lang is None:
            raise UnsupportedLanguageError(name)
        return lang

    def for_extension(self, extension: str) -> Language:
        """Return the language for a filename extension (``".py"``).

        Exact matches are preferred; a case-insensitive match is used as a fallback.

        Raises:
            UnsupportedExtensionError: If the extension is empty or unknown.
        """
        if extension:
            lang = self._by_extension.get(extension)
            if lang is not None:
                return lang
            folded = extension.lower()
            for ext, candidate in self._by_extension.items():
                if ext.lower() == folded:
                    return candidate
        raise UnsupportedExtensionError(extension)

    def for_path(self, path: Path) -> Language:
        """Return the language for ``path`` based on its suffix."""
        try:
            return self.for_extension(path.suffix)
        except UnsupportedExtensionError as exc:
            exc.path = path
            raise

    def extensions_by_language(self) -> dict[str, list[str]]:
        """Return the sorted extensions mapped to each language name."""
        result: dict[str, list[str]] = {}
        for ext, lang in sorted(self._by_extension.items()):
            result.setdefault(lang.name, []).append(ext)
        return result

    def with_overlays(
        self,
        *,
        languages: Mapping[str, str] | None = None,
        extensions: Mapping[str, str] | None = None,
    ) -> LanguageRegistry:
        """Return a new registry extended with custom languages and extension mappings.

        Args:
            languages (Mapping[str, str] | None): Custom language name to marker string.
                A name that already exists replaces the built-in marker.
            extensions (Mapping[str, str] | None): Extension (with or without the
                leading dot) to language name, built-in or custom.

        Returns:
            LanguageRegistry: The extended registry.

        Raises:
            UnsupportedLanguageError: If an extension maps to an unknown language.
            InvalidMarkerError: If a custom marker string is malformed.
        """
        merged = LanguageRegistry(())
        merged._languages = dict(self._languages)
        merged._by_name = dict(self._by_name)
        merged._by_extension = dict(self._by_extension)
        for name, marker_text in (languages or {}).items():
            key = name.strip().lower()
            existing = merged._by_name.get(key)
            lang = Language(
                name=existing.name if existing else key,
                marker=marker_from_string(marker_text),
                extensions=existing.extensions if existing else (),
                aliases=existing.aliases if existing else (),
                description=existing.description if existing else "Custom language",
            )
            logger.debug("Overlay language %s -> %r", lang.name, str(lang.marker))
            merged._add(lang)
        for ext, lang_name in (extensions or {}).items():
            norm = ext if ext.startswith(".") else f".{ext}"
            target = merged.get(lang_name)
            logger.debug("Overlay extension %s -> %s", norm, target.name)
            merged._by_extension[norm] = target
        return merged


@lru_cache(maxsize=1)
def get_language_registry() -> LanguageRegistry:
    """Return the process-wide registry built from the built-in table."""
    registry = LanguageRegistry(LANGUAGES)
    logger.debug("Built language registry with %d languages", len(registry))
    return registry


def resolve_marker(
    language: str | None,
    path: Path | None,
    *,
    marker: str | None = None,
    registry: LanguageRegistry | None = None,
) -> CommentMarker:
    """Resolve the comment marker for a target.

    Args:
        language (str | None): Explicit language name (case-insensitive), or None.
        path (Path | None): Target path used for extension lookup; None for stdin.
        marker (str | None): Explicit marker string; takes precedence over everything.
        registry (LanguageRegistry | None): Registry to consult; defaults to the
            built-in registry.

    Returns:
        CommentMarker: The resolved marker.

    Raises:
        UnsupportedLanguageError: If ``language`` is not known.
        UnsupportedExtensionError: If no language is given and the path has no known
            extension (or there is no path at all).
        InvalidMarkerError: If ``marker`` is malformed.
    """
    if marker is not None:
        return marker_from_string(marker)

    reg: LanguageRegistry = registry or get_language_registry()
    if language:
        try:
            return reg.get(language).marker
        except UnsupportedLanguageError as exc:
            exc.path = path
            raise

    if path is None:
        raise UnsupportedExtensionError("")

    lang: Language = reg.for_path(path)
    logger.trace("Resolved %s to language %s", path, lang.name)
    return lang.marker
