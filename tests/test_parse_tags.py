"""Tests for the block tags, each parsed inside a one-line doc-block."""

from __future__ import annotations

import pytest

from docblock.errors import (
    InvalidElementError,
    InvalidEmailError,
    InvalidFileError,
    InvalidLinkError,
    InvalidMethodError,
    InvalidTypeError,
    InvalidVariableError,
    InvalidVersionError,
    UnexpectedEndError,
    UnexpectedTokenError,
)
from docblock.tags import (
    ApiTag,
    Argument,
    AuthorTag,
    CopyrightTag,
    DeprecatedTag,
    Direction,
    InheritDocTag,
    InternalTag,
    LinkTag,
    MethodTag,
    PackageTag,
    ParamTag,
    PropertyTag,
    ReturnTag,
    SeeTag,
    SinceTag,
    ThrowsTag,
    TodoTag,
    UsedByTag,
    UsesTag,
    VarTag,
    VersionTag,
)


class TestApi:
    def test_api(self, doc) -> None:
        assert doc("@api").api == ApiTag()

    def test_api_is_singleton_slot(self, doc) -> None:
        assert doc("@api @api").api == ApiTag()


class TestAuthor:
    @pytest.mark.parametrize(
        "body,expected",
        [
            ("@author Chris Köcher <ckone@example.org>", AuthorTag("Chris Köcher", "ckone@example.org")),
            ("@author Chris Köcher", AuthorTag("Chris Köcher", "")),
            ("@author <ckone@example.org>", AuthorTag("", "ckone@example.org")),
        ],
    )
    def test_good(self, doc, body: str, expected: AuthorTag) -> None:
        assert doc(body).authors == (expected,)

    def test_invalid_email(self, doc) -> None:
        with pytest.raises(InvalidEmailError):
            doc("@author Chris Köcher <no-mail>")

    def test_unclosed_email(self) -> None:
        from docblock.parser import parse

        with pytest.raises(UnexpectedEndError):
            parse("/** @author Chris Köcher <ckone@example.org */")

    def test_several_authors(self, doc) -> None:
        result = doc("@author Ann <ann@example.org> @author Bob")
        assert result.authors == (
            AuthorTag("Ann", "ann@example.org"),
            AuthorTag("Bob", ""),
        )


class TestCopyright:
    def test_plain(self, doc) -> None:
        assert doc("@copyright Example Software").copyrights == (
            CopyrightTag("Example Software"),
        )

    def test_with_inline_link(self, doc) -> None:
        result = doc("@copyright Example Software {@link https://example.org}")
        assert result.copyrights == (
            CopyrightTag(
                "Example Software {{{{0}}}}",
                (LinkTag("https://example.org"),),
            ),
        )


class TestDeprecated:
    @pytest.mark.parametrize(
        "body,expected",
        [
            ("@deprecated", DeprecatedTag("", "")),
            ("@deprecated 1.0.0", DeprecatedTag("1.0.0", "")),
            ("@deprecated Some description", DeprecatedTag("", "Some description")),
            ("@deprecated 1.0.0 Some description", DeprecatedTag("1.0.0", "Some description")),
        ],
    )
    def test_good(self, doc, body: str, expected: DeprecatedTag) -> None:
        assert doc(body).deprecated == expected


class TestInheritDoc:
    def test_block(self, doc) -> None:
        assert doc("@inheritDoc").inherit_doc == InheritDocTag()

    def test_inline(self, doc) -> None:
        result = doc("{@inheritDoc}")
        assert result.description == "{{{{0}}}}"
        assert result.inline_tags == (InheritDocTag(),)
        assert result.inherit_doc is None

    def test_inline_with_spaces(self, doc) -> None:
        result = doc("{ @inheritdoc }")
        assert result.inline_tags == (InheritDocTag(),)


class TestInternal:
    def test_block(self, doc) -> None:
        assert doc("@internal Some description").internals == (
            InternalTag("Some description"),
        )

    def test_inline(self, doc) -> None:
        result = doc("Text {@internal Some description}")
        assert result.description == "Text {{{{0}}}}"
        assert result.inline_tags == (InternalTag("Some description"),)

    def test_inline_nested_link(self, doc) -> None:
        result = doc("{@internal Some description {@link https://www.example.org Text}}")
        assert result.inline_tags == (
            InternalTag(
                "Some description {{{{0}}}}",
                (LinkTag("https://www.example.org", "Text"),),
            ),
        )

    def test_inline_unclosed_inner(self, doc) -> None:
        with pytest.raises(UnexpectedTokenError):
            doc("{@internal Some description {@link https://www.example.org Text}")

    def test_inline_unterminated(self) -> None:
        from docblock.parser import parse

        with pytest.raises(UnexpectedEndError):
            parse("/** {@internal x")


class TestLink:
    @pytest.mark.parametrize(
        "body,expected",
        [
            ("@link https://www.example.org", LinkTag("https://www.example.org")),
            (
                "@link https://www.example.org Some description",
                LinkTag("https://www.example.org", "Some description"),
            ),
            ("@link file:///etc/hosts Hosts", LinkTag("file:///etc/hosts", "Hosts")),
        ],
    )
    def test_block(self, doc, body: str, expected: LinkTag) -> None:
        assert doc(body).links == (expected,)

    @pytest.mark.parametrize(
        "body,expected",
        [
            ("{@link https://www.example.org}", LinkTag("https://www.example.org")),
            (
                "{@link https://www.example.org Some description}",
                LinkTag("https://www.example.org", "Some description"),
            ),
            ("{ @link https://www.example.org }", LinkTag("https://www.example.org")),
        ],
    )
    def test_inline(self, doc, body: str, expected: LinkTag) -> None:
        assert doc(body).inline_tags == (expected,)

    def test_not_a_url(self, doc) -> None:
        with pytest.raises(InvalidLinkError):
            doc("@link not-a-url")

    def test_inline_not_a_url(self, doc) -> None:
        with pytest.raises(InvalidLinkError):
            doc("{@link Some description}")


class TestMethod:
    @pytest.mark.parametrize(
        "body,expected",
        [
            (
                "@method \\foo\\bar myMethod() Some description",
                MethodTag("\\foo\\bar", "myMethod", (), "Some description"),
            ),
            (
                "@method myMethod() Some description",
                MethodTag("void", "myMethod", (), "Some description"),
            ),
            (
                "@method \\foo\\bar myMethod(int $test, string $test2) Some description",
                MethodTag(
                    "\\foo\\bar",
                    "myMethod",
                    (Argument("int", "$test"), Argument("string", "$test2")),
                    "Some description",
                ),
            ),
            (
                "@method \\foo\\bar myMethod(int|string[] $test) Some description",
                MethodTag(
                    "\\foo\\bar",
                    "myMethod",
                    (Argument("int|string[]", "$test"),),
                    "Some description",
                ),
            ),
            (
                "@method \\foo\\bar myMethod($test, $test2) Some description",
                MethodTag(
                    "\\foo\\bar",
                    "myMethod",
                    (Argument("mixed", "$test"), Argument("mixed", "$test2")),
                    "Some description",
                ),
            ),
            ("@method myMethod()", MethodTag("void", "myMethod")),
            (
                "@method \\foo\\bar myMethod($test, $test2,) Some description",
                MethodTag(
                    "\\foo\\bar",
                    "myMethod",
                    (Argument("mixed", "$test"), Argument("mixed", "$test2")),
                    "Some description",
                ),
            ),
            (
                "@method int myMethod( $a ) Trailing",
                MethodTag("int", "myMethod", (Argument("mixed", "$a"),), "Trailing"),
            ),
        ],
    )
    def test_good(self, doc, body: str, expected: MethodTag) -> None:
        assert doc(body).methods == (expected,)

    @pytest.mark.parametrize(
        "body,error",
        [
            ("@method \\foo\\bar", InvalidMethodError),
            ("@method \\foo\\bar myMethod", InvalidMethodError),
            ("@method \\foo\\bar 1method()", InvalidMethodError),
            ("@method \\foo\\bar myMethod(int $test", UnexpectedTokenError),
            ("@method \\foo\\bar myMethod(int test)", UnexpectedTokenError),
            ("@method \\foo\\bar myMethod(int $1test)", InvalidVariableError),
        ],
    )
    def test_bad(self, doc, body: str, error: type[Exception]) -> None:
        with pytest.raises(error):
            doc(body)


class TestPackage:
    @pytest.mark.parametrize("name", ["_foo", "\\foo\\bar", "\\foo\\bar123"])
    def test_good(self, doc, name: str) -> None:
        assert doc(f"@package {name}").package == PackageTag(name)

    @pytest.mark.parametrize("name", ["\\foo\\123bar", "foo\\\\bar"])
    def test_bad(self, doc, name: str) -> None:
        with pytest.raises(InvalidTypeError):
            doc(f"@package {name}")


class TestParam:
    @pytest.mark.parametrize(
        "body,expected",
        [
            ("@param \\foo\\bar $baz Some description", ParamTag("\\foo\\bar", "$baz", "Some description")),
            ("@param int|string[] $baz Some description", ParamTag("int|string[]", "$baz", "Some description")),
            ("@param $baz Some description", ParamTag("mixed", "$baz", "Some description")),
            ("@param $baz", ParamTag("mixed", "$baz")),
            ("@param \\foo\\bar Some description", ParamTag("\\foo\\bar", "", "Some description")),
            ("@param int $x desc", ParamTag("int", "$x", "desc")),
        ],
    )
    def test_good(self, doc, body: str, expected: ParamTag) -> None:
        assert doc(body).params == (expected,)

    def test_bad_type_falls_back_to_mixed(self, doc) -> None:
        assert doc("@param 123bad").params == (ParamTag("mixed", "", "123bad"),)

    def test_bad_variable(self, doc) -> None:
        with pytest.raises(InvalidVariableError):
            doc("@param int $1bad")

    def test_params_keep_order(self, doc) -> None:
        result = doc("@param int $a @param string $b")
        assert [p.name for p in result.params] == ["$a", "$b"]


class TestProperty:
    @pytest.mark.parametrize(
        "body,expected",
        [
            (
                "@property \\foo\\bar $baz Some description",
                PropertyTag(Direction.READ | Direction.WRITE, "\\foo\\bar", "$baz", "Some description"),
            ),
            (
                "@property-read \\foo\\bar $baz Some description",
                PropertyTag(Direction.READ, "\\foo\\bar", "$baz", "Some description"),
            ),
            (
                "@property-write \\foo\\bar $baz Some description",
                PropertyTag(Direction.WRITE, "\\foo\\bar", "$baz", "Some description"),
            ),
            (
                "@property $baz Some description",
                PropertyTag(Direction.READ | Direction.WRITE, "mixed", "$baz", "Some description"),
            ),
        ],
    )
    def test_good(self, doc, body: str, expected: PropertyTag) -> None:
        assert doc(body).properties == (expected,)

    def test_read_only(self, doc) -> None:
        (prop,) = doc("@property-read int $x").properties
        assert prop.readable
        assert not prop.writable

    def test_read_write(self, doc) -> None:
        (prop,) = doc("@property int $x").properties
        assert prop.readable
        assert prop.writable

    def test_write_only(self, doc) -> None:
        (prop,) = doc("@property-write int $x").properties
        assert not prop.readable
        assert prop.writable

    @pytest.mark.parametrize(
        "body",
        ["@property \\foo\\bar Some description", "@property foo\\\\bar $baz Some description"],
    )
    def test_bad(self, doc, body: str) -> None:
        with pytest.raises(UnexpectedTokenError):
            doc(body)


class TestReturn:
    @pytest.mark.parametrize(
        "body,expected",
        [
            ("@return \\foo\\bar Some description", ReturnTag("\\foo\\bar", "Some description")),
            ("@return int|string[] Some description", ReturnTag("int|string[]", "Some description")),
            ("@return \\foo\\bar", ReturnTag("\\foo\\bar")),
        ],
    )
    def test_good(self, doc, body: str, expected: ReturnTag) -> None:
        assert doc(body).returns == expected

    def test_bad(self, doc) -> None:
        with pytest.raises(InvalidTypeError):
            doc("@return 123test Some description")


class TestSee:
    @pytest.mark.parametrize(
        "body,expected",
        [
            ("@see \\foo\\bar::$_string", SeeTag("\\foo\\bar::$_string")),
            ("@see \\test\\myFunction() Some description", SeeTag("\\test\\myFunction()", "Some description")),
            (
                "@see https://www.example.org Some description",
                SeeTag("https://www.example.org", "Some description"),
            ),
            ("@see file:///etc/hosts", SeeTag("file:///etc/hosts")),
        ],
    )
    def test_good(self, doc, body: str, expected: SeeTag) -> None:
        assert doc(body).see == (expected,)

    @pytest.mark.parametrize(
        "body", ["@see \\123test\\foo Some description", "@see https//www.example.org"]
    )
    def test_bad(self, doc, body: str) -> None:
        with pytest.raises(InvalidElementError):
            doc(body)


class TestSince:
    @pytest.mark.parametrize(
        "body,expected",
        [
            ("@since 1.0.0 Some description", SinceTag("1.0.0", "Some description")),
            ("@since git: $123abc$ Some description", SinceTag("git: $123abc$", "Some description")),
            ("@since @package_version@ Some description", SinceTag("@package_version@", "Some description")),
            ("@since v1.0.0", SinceTag("v1.0.0")),
        ],
    )
    def test_good(self, doc, body: str, expected: SinceTag) -> None:
        assert doc(body).since == (expected,)

    def test_missing_version(self, doc) -> None:
        with pytest.raises(InvalidVersionError):
            doc("@since Some description")

    def test_vcs_without_dollar(self, doc) -> None:
        with pytest.raises(UnexpectedTokenError):
            doc("@since git: 123 Some description")


class TestThrows:
    @pytest.mark.parametrize(
        "body,expected",
        [
            ("@throws MyException Some description", ThrowsTag("MyException", "Some description")),
            ("@throws \\foo\\MyException Some description", ThrowsTag("\\foo\\MyException", "Some description")),
            ("@throws MyException", ThrowsTag("MyException")),
        ],
    )
    def test_good(self, doc, body: str, expected: ThrowsTag) -> None:
        assert doc(body).throws == (expected,)

    def test_bad(self, doc) -> None:
        with pytest.raises(InvalidTypeError):
            doc("@throws 123abc Some description")


class TestTodo:
    def test_empty(self, doc) -> None:
        assert doc("@todo").todos == (TodoTag(),)

    def test_description(self, doc) -> None:
        assert doc("@todo Some description").todos == (TodoTag("Some description"),)


class TestUsesAndUsedBy:
    @pytest.mark.parametrize(
        "reference,description",
        [
            ("/some/path/to/file.php", "Some description"),
            ("\\foo\\bar", "Some description"),
            ("foo::$_bar", "Some description"),
            ("/some/path/to/file.php", ""),
            ("https://www.example.org/api", "Docs"),
            ("file:///etc/hosts", "Hosts"),
        ],
    )
    def test_uses(self, doc, reference: str, description: str) -> None:
        result = doc(f"@uses {reference} {description}")
        assert result.uses == (UsesTag(reference, description),)

    @pytest.mark.parametrize(
        "reference,description",
        [
            ("/some/path/to/file.php", "Some description"),
            ("\\foo\\bar", "Some description"),
            ("foo::$_bar", "Some description"),
            ("/some/path/to/file.php", ""),
        ],
    )
    def test_used_by(self, doc, reference: str, description: str) -> None:
        result = doc(f"@used-by {reference} {description}")
        assert result.used_by == (UsedByTag(reference, description),)
        assert result.uses == ()

    def test_uses_bad(self, doc) -> None:
        with pytest.raises(InvalidFileError):
            doc("@uses foo::$_bar() Some description")

    def test_used_by_bad(self, doc) -> None:
        with pytest.raises(InvalidFileError):
            doc("@used-by foo::$_bar() Some description")

    def test_used_bay_is_description_text(self, doc) -> None:
        result = doc("Text @used-bay")
        assert result.used_by == ()
        assert result.description == "Text @used-bay"


class TestVar:
    @pytest.mark.parametrize(
        "body,expected",
        [
            ("@var int", VarTag("int")),
            ("@var int|string[]", VarTag("int|string[]")),
            ("@var int|string[] Some description", VarTag("int|string[]", "", "Some description")),
            ("@var int|string[] $foo", VarTag("int|string[]", "$foo")),
            ("@var int|string[] $foo Some description", VarTag("int|string[]", "$foo", "Some description")),
            ("@var $foo Some description", VarTag("mixed", "$foo", "Some description")),
            ("@var", VarTag("mixed")),
        ],
    )
    def test_good(self, doc, body: str, expected: VarTag) -> None:
        assert doc(body).var == expected


class TestVersion:
    @pytest.mark.parametrize(
        "body,expected",
        [
            ("@version 1.0.0 Some description", VersionTag("1.0.0", "Some description")),
            ("@version 1.0.0", VersionTag("1.0.0")),
            ("@version git: $123abc$ Some description", VersionTag("git: $123abc$", "Some description")),
        ],
    )
    def test_good(self, doc, body: str, expected: VersionTag) -> None:
        assert doc(body).versions == (expected,)

    def test_bad(self, doc) -> None:
        with pytest.raises(InvalidVersionError):
            doc("@version foo Some description")
