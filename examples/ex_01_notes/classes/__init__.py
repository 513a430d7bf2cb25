from __future__ import annotations

from classes.note import NoteWriter


class Application:
    def __init__(self, writer: NoteWriter, view: str) -> None:
        self.writer = writer
        self.view = view

    def run(self) -> None:
        self.writer.write("Remember the milk")
        print(f"view={self.view}")
        print(f"storage={self.writer.storage.describe()}")
        print(f"notes={self.writer.storage.notes}")
