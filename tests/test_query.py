"""Tests for navpath.query — query string encoding."""

from navpath.query import encode_query


class TestEncodeQuery:
    def test_empty(self) -> None:
        assert encode_query({}) == ""

    def test_insertion_order(self) -> None:
        assert encode_query({"z": "1", "a": "2", "m": "3"}) == "z=1&a=2&m=3"

    def test_percent_encoding(self) -> None:
        assert encode_query({"q": "a b&c/d"}) == "q=a%20b%26c%2Fd"

    def test_strict_encoding(self) -> None:
        assert encode_query({"q": "!'()*"}) == "q=%21%27%28%29%2A"

    def test_unreserved_kept(self) -> None:
        assert encode_query({"q": "a-b_c.d~e"}) == "q=a-b_c.d~e"

    def test_key_encoded(self) -> None:
        assert encode_query({"a key": "v"}) == "a%20key=v"

    def test_unicode(self) -> None:
        assert encode_query({"name": "José"}) == "name=Jos%C3%A9"

    def test_none_is_bare_key(self) -> None:
        assert encode_query({"a": None, "b": "1"}) == "a&b=1"

    def test_list_repeats_key(self) -> None:
        assert encode_query({"tag": ["x", "y"], "n": "1"}) == "tag=x&tag=y&n=1"

    def test_list_with_none(self) -> None:
        assert encode_query({"tag": ["x", None]}) == "tag=x&tag"

    def test_empty_list_dropped(self) -> None:
        assert encode_query({"tag": [], "n": "1"}) == "n=1"

    def test_mapping_flattened(self) -> None:
        assert encode_query({"filter": {"kind": "a"}}) == "filter%5Bkind%5D=a"

    def test_scalars_stringified(self) -> None:
        assert encode_query({"n": 3, "ok": True}) == "n=3&ok=true"
