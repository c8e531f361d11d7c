from tailcall.mustache import Expression, Literal, Mustache
from tailcall.path_string import JsonPathString, PathString


def test_single_literal():
    assert Mustache.parse("hello/world") == Mustache([Literal("hello/world")])


def test_single_template():
    assert Mustache.parse("{{hello.world}}") == Mustache([Expression(["hello", "world"])])


def test_mixed():
    mustache = Mustache.parse("http://localhost:8090/{{foo.bar}}/api/{{hello.world}}/end")
    assert mustache == Mustache(
        [
            Literal("http://localhost:8090/"),
            Expression(["foo", "bar"]),
            Literal("/api/"),
            Expression(["hello", "world"]),
            Literal("/end"),
        ]
    )


def test_with_spaces():
    assert Mustache.parse("{{ foo . bar }}") == Mustache([Expression(["foo", "bar"])])


def test_parse_expression_with_valid_input():
    assert Mustache.parse("{{ foo.bar }} extra") == Mustache(
        [Expression(["foo", "bar"]), Literal(" extra")]
    )


def test_parse_expression_with_invalid_input():
    assert Mustache.parse("foo.bar }}") == Mustache([Literal("foo.bar }}")])


def test_parse_segments_mixed():
    assert Mustache.parse("prefix {{foo.bar}} middle {{baz.qux}} suffix") == Mustache(
        [
            Literal("prefix "),
            Expression(["foo", "bar"]),
            Literal(" middle "),
            Expression(["baz", "qux"]),
            Literal(" suffix"),
        ]
    )


def test_parse_segments_only_literal():
    assert Mustache.parse("just a string") == Mustache([Literal("just a string")])


def test_parse_segments_only_expression():
    assert Mustache.parse("{{foo.bar}}") == Mustache([Expression(["foo", "bar"])])


def test_unfinished_expression():
    assert Mustache.parse("{{hello.world") == Mustache([Literal("{{hello.world")])


def test_new_number():
    assert Mustache.parse("123") == Mustache([Literal("123")])


def test_query_params_template():
    mustache = Mustache.parse("/v1/templates?project-id={{value.projectId}}")
    ctx = JsonPathString({"value": {"projectId": "123"}})
    assert mustache.render(ctx) == "/v1/templates?project-id=123"


class _MixedPath(PathString):
    def path_string(self, path):
        if list(path) == ["foo", "bar"]:
            return "FOOBAR"
        if list(path) == ["baz", "qux"]:
            return "BAZQUX"
        return None


class _MissingPath(PathString):
    def path_string(self, path):
        return None


class _FooPath(PathString):
    def path_string(self, path):
        return "bar" if list(path) == ["foo"] else None


def test_render_mixed():
    mustache = Mustache(
        [
            Literal("prefix "),
            Expression(["foo", "bar"]),
            Literal(" middle "),
            Expression(["baz", "qux"]),
            Literal(" suffix"),
        ]
    )
    assert mustache.render(_MixedPath()) == "prefix FOOBAR middle BAZQUX suffix"


def test_render_with_missing_path():
    mustache = Mustache(
        [Literal("prefix "), Expression(["foo", "bar"]), Literal(" suffix")]
    )
    assert mustache.render(_MissingPath()) == "prefix  suffix"


def test_render_preserves_spaces():
    mustache = Mustache([Literal("    "), Expression(["foo"]), Literal("    ")])
    assert mustache.render(_FooPath()) == "    bar    "