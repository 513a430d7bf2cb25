from __future__ import annotations

from abc import ABC, abstractmethod


class NoteStorage(ABC):
    def __init__(self) -> None:
        self.notes: list[str] = []

    def save(self, text: str) -> None:
        self.notes.append(text)

    @abstractmethod
    def describe(self) -> str: ...


class SQLNoteStorage(NoteStorage):
    def describe(self) -> str:
        return "sql"


class XmlFileNoteStorage(NoteStorage):
    def describe(self) -> str:
        return "xml"


class NoteWriter:
    def __init__(self, storage: NoteStorage) -> None:
        self.storage = storage

    def write(self, text: str) -> None:
        self.storage.save(text)
