import pytest

from httpc_test.domain.exceptions import NoJsonValueFoundError
from httpc_test.domain.json_pointer import resolve_pointer, split_pointer

DOC = {
    "data": {"items": [{"name": "a"}, {"name": "b"}]},
    "a/b": 1,
    "m~n": 2,
    "": "empty-key",
    "flag": None,
}


class TestSplitPointer:
    def test_whole_document(self):
        assert split_pointer("") == []

    def test_escapes(self):
        assert split_pointer("/a~1b/m~0n/~01") == ["a/b", "m~n", "~1"]

    def test_pointer_without_leading_slash(self):
        with pytest.raises(NoJsonValueFoundError):
            split_pointer("data/items")


class TestResolvePointer:
    def test_whole_document(self):
        assert resolve_pointer(DOC, "") == DOC

    def test_nested_array_member(self):
        assert resolve_pointer(DOC, "/data/items/1/name") == "b"

    def test_escaped_keys(self):
        assert resolve_pointer(DOC, "/a~1b") == 1
        assert resolve_pointer(DOC, "/m~0n") == 2

    def test_empty_key(self):
        assert resolve_pointer(DOC, "/") == "empty-key"

    def test_null_value_is_found(self):
        assert resolve_pointer(DOC, "/flag") is None

    @pytest.mark.parametrize(
        "pointer",
        [
            "/missing/path",
            "/data/items/2",
            "/data/items/-",
            "/data/items/01",
            "/data/items/x",
            "/data/items/0/name/deeper",
            "/flag/x",
        ],
    )
    def test_unresolved(self, pointer):
        with pytest.raises(NoJsonValueFoundError) as exc_info:
            resolve_pointer(DOC, pointer)
        assert exc_info.value.pointer == pointer
