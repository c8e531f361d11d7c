from tailcall.http.method import Method
from tailcall.http.request import Request


def test_header_names_are_lower_cased():
    req = Request(Method.GET, "http://localhost:3000/", {"Content-Type": "application/json"})
    assert req.headers == {"content-type": "application/json"}


def test_defaults():
    req = Request(Method.POST, "http://localhost:3000/")
    assert req.headers == {}
    assert req.body == b""
    assert req.method is Method.POST


def test_copy_is_equal():
    req = Request(Method.GET, "http://localhost:3000/foo", {"a": "1"}, b"foo")
    assert req.copy() == req


def test_copy_is_independent():
    req = Request(Method.GET, "http://localhost:3000/foo", {"a": "1"}, b"foo")
    other = req.copy()
    other.headers["b"] = "2"
    assert req.headers == {"a": "1"}
    assert "b" in other.headers