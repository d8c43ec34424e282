"""
Unit tests for URI construction.
"""

import pytest

from elastic_driver.es_types import Endpoint
from elastic_driver.utils.uri import build_query_string, build_uri, encode_segment


class TestEncodeSegment:

    @pytest.mark.parametrize("segment, expected", [
        ("test_index", "test_index"),
        ("_doc", "_doc"),
        ("my index", "my%20index"),
        ("a/b", "a%2Fb"),
        ("a,b", "a%2Cb"),
        ("q?x#y", "q%3Fx%23y"),
        ("é", "%C3%A9"),
    ])
    def test_encoding(self, segment, expected):
        assert encode_segment(segment) == expected


class TestBuildQueryString:

    @pytest.mark.parametrize("options", [None, {}])
    def test_empty(self, options):
        assert build_query_string(options) == ""

    def test_preserves_order(self):
        assert build_query_string({"b": "1", "a": "2"}) == "b=1&a=2"

    def test_encodes_values(self):
        assert build_query_string({"q": "testField:abc def"}) == "q=testField%3Aabc+def"

    def test_booleans_are_lowercase(self):
        assert build_query_string({"refresh": True, "_source": False}) == "refresh=true&_source=false"

    def test_none_values_are_dropped(self):
        assert build_query_string({"routing": None, "refresh": "true"}) == "refresh=true"

    def test_all_none_values_give_empty_string(self):
        assert build_query_string({"routing": None}) == ""

    def test_non_string_key_rejected(self):
        with pytest.raises(TypeError, match="Option keys must be strings"):
            build_query_string({1: "x"})


class TestBuildUri:

    def test_segments_joined_in_order(self):
        uri = build_uri("http://localhost:9200", ["t", "_doc", "my id"])

        assert uri == "http://localhost:9200/t/_doc/my%20id"

    def test_options_appended(self):
        uri = build_uri("http://localhost:9200", ["_cat", "health"], {"format": "json"})

        assert uri == "http://localhost:9200/_cat/health?format=json"

    def test_empty_options_omitted(self):
        assert build_uri("http://h", ["t"], {}) == build_uri("http://h", ["t"]) == "http://h/t"

    def test_endpoint_to_uri(self):
        endpoint = Endpoint("GET", ["t", "_stats", "docs"], {"level": "indices"})

        assert endpoint.to_uri("http://h") == "http://h/t/_stats/docs?level=indices"


class TestEndpoint:

    def test_none_only_options_add_no_query_string(self):
        endpoint = Endpoint("GET", ["t", "_doc", "1"], {"routing": None})

        assert endpoint.to_uri("http://h") == "http://h/t/_doc/1"

    def test_copies_caller_collections(self):
        segments = ["t", "_search"]
        options = {"size": "1"}
        endpoint = Endpoint("GET", segments, options)

        segments.append("extra")
        options["from"] = "5"

        assert endpoint.segments == ("t", "_search")
        assert endpoint.options == (("size", "1"),)
        assert endpoint.to_uri("http://h") == "http://h/t/_search?size=1"

    def test_is_frozen(self):
        endpoint = Endpoint("GET", ["t"])

        with pytest.raises(AttributeError):
            endpoint.method = "POST"

    def test_equal_endpoints_hash_alike(self):
        first = Endpoint("POST", ["_refresh"], {"ignore_unavailable": "true"})
        second = Endpoint("POST", ("_refresh",), (("ignore_unavailable", "true"),))

        assert first == second
        assert hash(first) == hash(second)
