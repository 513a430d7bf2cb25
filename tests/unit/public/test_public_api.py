from __future__ import annotations

import wirefactory


def test_all_exports_resolve() -> None:
    for name in wirefactory.__all__:
        assert hasattr(wirefactory, name), name


def test_all_is_sorted() -> None:
    assert list(wirefactory.__all__) == sorted(wirefactory.__all__)
