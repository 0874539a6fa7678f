"""Edit history: document version control and a text editor with undo/redo."""

from __future__ import annotations


class VersionControl:
    """A stack of committed document versions with rollback."""

    def __init__(self) -> None:
        self._versions: list[str] = []

    def __len__(self) -> int:
        return len(self._versions)

    @property
    def content(self) -> str:
        """Content of the latest version; empty when nothing is committed."""
        return self._versions[-1] if self._versions else ""

    def commit(self, content: str) -> None:
        """Store ``content`` as a new version."""
        self._versions.append(content)

    def rollback(self) -> None:
        """Discard the latest version; does nothing when there is none."""
        if self._versions:
            self._versions.pop()


class TextEditor:
    """Appends text and supports undoing and redoing edits."""

    def __init__(self) -> None:
        self.text = ""
        self._undo: list[str] = []
        self._redo: list[str] = []

    def add_text(self, text: str) -> None:
        """Append ``text``; any pending redo history is dropped."""
        self._undo.append(self.text)
        self._redo.clear()
        self.text += text

    def can_undo(self) -> bool:
        return bool(self._undo)

    def can_redo(self) -> bool:
        return bool(self._redo)

    def undo(self) -> None:
        """Revert the last edit; does nothing when there is none."""
        if self._undo:
            self._redo.append(self.text)
            self.text = self._undo.pop()

    def redo(self) -> None:
        """Reapply the last undone edit; does nothing when there is none."""
        if self._redo:
            self._undo.append(self.text)
            self.text = self._redo.pop()