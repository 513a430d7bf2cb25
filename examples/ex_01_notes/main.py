"""Notes application: override a storage backend by appending one entry.

The base configuration wires ``Application`` to a ``NoteWriter`` that needs a
``NoteStorage``. ``NoteStorage`` itself has no definition, so the container
picks a definition of a subclass. Appending ``XmlFileNoteStorage`` after
``SQLNoteStorage`` swaps the backend without touching the base list.

Run from this directory (``python main.py``) so the ``classes`` package is
importable, or try the CLI::

    python -m wirefactory classes.Application -c config/base.json -c config/override.json --call run
"""

from __future__ import annotations

from wirefactory import Container, compose_configs

BASE = [
    {
        "name": "classes.Application",
        "args": [
            {"name": "classes.note.NoteWriter"},
            {"value": "views/write_form.php"},
        ],
    },
    {
        "name": "classes.note.NoteWriter",
        "args": [{"name": "classes.note.NoteStorage"}],
    },
    {"name": "classes.note.SQLNoteStorage"},
]

OVERRIDE = [{"name": "classes.note.XmlFileNoteStorage"}]


def main() -> None:
    base_app = Container(BASE).get_instance("classes.Application")
    print(f"base storage={base_app.writer.storage.describe()}")  # => base storage=sql

    container = Container(compose_configs(BASE, OVERRIDE))
    print(container.plan("classes.Application").render())

    application = container.get_instance("classes.Application")
    application.run()  # => storage=xml


if __name__ == "__main__":
    main()
