"""Tests for cookie and header file loaders."""
from tumblget.http.cookies import load_cookies_from_file
from tumblget.http.headers import load_headers_from_file

NETSCAPE = (
    "# Netscape HTTP Cookie File\n"
    "\n"
    ".tumblr.com\tTRUE\t/\tTRUE\t1735689600\tpfg\tabc123\n"
    "#HttpOnly_www.tumblr.com\tFALSE\t/api\tFALSE\t0\tsid\txyz\n"
    "broken line\n"
)


class TestLoadCookies:
    def test_missing_file(self, tmp_path):
        assert load_cookies_from_file(str(tmp_path / "nope.txt")) == []

    def test_netscape_format(self, tmp_path):
        path = tmp_path / "cookies.txt"
        path.write_text(NETSCAPE)

        cookies = load_cookies_from_file(str(path))
        assert [c.name for c in cookies] == ["pfg", "sid"]

        first, second = cookies
        assert first.domain == ".tumblr.com"
        assert first.value == "abc123"
        assert first.secure
        assert first.expires == "1735689600"
        assert not first.http_only

        assert second.domain == "www.tumblr.com"
        assert second.path == "/api"
        assert second.http_only
        assert not second.secure
        assert second.expires is None


class TestLoadHeaders:
    def test_missing_file(self, tmp_path):
        assert load_headers_from_file(str(tmp_path / "nope.txt")) == {}

    def test_header_file(self, tmp_path):
        path = tmp_path / "headers.txt"
        path.write_text(
            "# copied from devtools\n"
            "Accept: application/json\n"
            "Referer: https://www.tumblr.com/dashboard\n"
            "not a header\n"
            "X-Tag: a\n"
            "X-Tag: b\n"
        )

        headers = load_headers_from_file(str(path))
        assert headers == {
            "Accept": "application/json",
            "Referer": "https://www.tumblr.com/dashboard",
            "X-Tag": "a, b",
        }
