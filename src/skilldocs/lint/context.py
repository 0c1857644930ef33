"""Shared state for a lint run: discovered skills and parsed documents."""

import logging
from dataclasses import dataclass
from pathlib import Path

from skilldocs.core.config import SkillDocsConfig
from skilldocs.core.markdown import MarkdownDocument, parse_markdown
from skilldocs.skills.models import Skill

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadedDocument:
    """A markdown file read from disk.

    Exactly one of `markdown` and `error` is set.
    """

    path: Path
    content: str | None
    markdown: MarkdownDocument | None
    error: str | None


class LintContext:
    """Repository root, config and skills, plus a cache of parsed documents."""

    def __init__(self, root: Path, config: SkillDocsConfig, skills: list[Skill]) -> None:
        self.root = root.resolve()
        self.config = config
        self.skills = skills
        self._documents: dict[Path, LoadedDocument] = {}

    def document(self, path: Path) -> LoadedDocument:
        key = path.resolve()
        if key not in self._documents:
            self._documents[key] = _load_document(key)
        return self._documents[key]

    def relative(self, path: Path) -> str:
        """Path relative to the root with POSIX separators, absolute if outside."""
        resolved = path.resolve()
        if resolved.is_relative_to(self.root):
            return resolved.relative_to(self.root).as_posix()
        return resolved.as_posix()

    @property
    def documents_loaded(self) -> int:
        return len(self._documents)


def _load_document(path: Path) -> LoadedDocument:
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Cannot read %s: %s", path, e)
        error = f"Cannot read file: {e}"
        return LoadedDocument(path=path, content=None, markdown=None, error=error)
    return LoadedDocument(path=path, content=content, markdown=parse_markdown(content), error=None)
