"""Tests for stacklog.paths — common prefix stripping."""

from stacklog.paths import join_path, split_path, strip_common_prefix


class TestSplitJoin:

    def test_split(self):
        assert split_path("/a/b/c.js") == ("/a/b", "c.js")
        assert split_path("c.js") == ("", "c.js")

    def test_join(self):
        assert join_path("a/b", "c.js") == "a/b/c.js"
        assert join_path("", "c.js") == "c.js"


class TestStripCommonPrefix:

    def test_shared_prefix_fully_stripped(self):
        assert strip_common_prefix(["/a/b/c.js", "/a/b/d.js"]) == ["c.js", "d.js"]

    def test_no_shared_prefix_unchanged(self):
        paths = ["/a/b/c.js", "/x/y/d.js"]
        assert strip_common_prefix(paths) == paths

    def test_single_input_unchanged(self):
        assert strip_common_prefix(["/a/b/c.js"]) == ["/a/b/c.js"]

    def test_empty(self):
        assert strip_common_prefix([]) == []

    def test_partial_prefix(self):
        assert strip_common_prefix(["/a/b/c.js", "/a/d.js"]) == ["b/c.js", "d.js"]

    def test_urls_use_path_component(self):
        result = strip_common_prefix([
            "https://example.com/app/js/main.js",
            "https://example.com/app/js/lib/util.js",
        ])
        assert result == ["main.js", "lib/util.js"]

    def test_url_query_and_fragment_dropped(self):
        """Only the URL path survives compaction."""
        result = strip_common_prefix([
            "https://h/static/app.js?v=3",
            "https://h/static/lib/x.js#frag",
        ])
        assert result == ["app.js", "lib/x.js"]

    def test_url_query_kept_when_nothing_stripped(self):
        paths = ["https://h/a/app.js?v=3", "https://h/b/x.js"]
        assert strip_common_prefix(paths) == paths

    def test_relative_paths(self):
        assert strip_common_prefix(["src/pkg/a.py", "src/pkg/b.py"]) == ["a.py", "b.py"]

    def test_bare_filenames_unchanged(self):
        assert strip_common_prefix(["a.js", "b.js"]) == ["a.js", "b.js"]

    def test_drive_letter_not_treated_as_scheme(self):
        assert strip_common_prefix(["C:/proj/a.py", "C:/proj/b.py"]) == ["a.py", "b.py"]

    def test_malformed_url_returns_inputs(self):
        paths = ["http://[::1/a/b.js", "/a/c.js"]
        assert strip_common_prefix(paths) == paths

    def test_length_and_basenames_preserved(self):
        paths = ["/srv/x/one.py", "/srv/x/y/two.py", "/srv/x/y/z/three.py"]
        result = strip_common_prefix(paths)
        assert len(result) == len(paths)
        assert [p.rsplit("/", 1)[-1] for p in result] == ["one.py", "two.py", "three.py"]

    def test_returns_new_list(self):
        paths = ["/a/b.js"]
        result = strip_common_prefix(paths)
        assert result == paths
        assert result is not paths
