import pytest
from lark.exceptions import VisitError

from setver import EmptyVersionError, IllegalCharacterError, NonUniqueElementsError, \
    SetVerParseError, SetVersion, TooManySetsError, UnclosedBraceError, parse


# canonical forms, i.e., the smallest sets come first
CANONICAL_VERSIONS = [
    "{}",
    "{{}}",
    "{{}{{}}}",
    "{{}{{}}{{}{{}}}}",
    "{{{{{{{}}}}}}}",
    "{{}{{}}{{{}}}}",
    "{{}{{{}}{{}{{}}}}}",
]


@pytest.mark.parametrize("text", CANONICAL_VERSIONS)
def test_parse_canonical_version_round_trip(text):
    assert str(parse(text)) == text


def test_parse_empty_set():
    assert parse("{}") == SetVersion()


@pytest.mark.parametrize("text, canonical", [
    ("{{{}}{}}", "{{}{{}}}"),
    ("{{{}{{}}}{{}}{}}", "{{}{{}}{{}{{}}}}"),
    ("{{{{}}}{}{{}}}", "{{}{{}}{{{}}}}"),
])
def test_parse_non_canonical_version(text, canonical):
    version = parse(text)
    assert str(version) == canonical
    assert version == parse(canonical)
    # the canonical form is a fixed point
    assert str(parse(str(version))) == canonical


@pytest.mark.parametrize("text", ["", "{", "}"])
def test_parse_empty(text):
    with pytest.raises(EmptyVersionError):
        parse(text)


@pytest.mark.parametrize("text, char", [
    ("asd", "a"),
    ("{{b}}", "b"),
    ("}{}", "}"),
    (" {}", " "),
    ("{{} }", " "),
    ("{a", "a"),
])
def test_parse_illegal_character(text, char):
    with pytest.raises(IllegalCharacterError) as e:
        parse(text)
    assert e.value.char == char
    assert str(e.value) == f"Illegal character '{char}'"


@pytest.mark.parametrize("text", ["{{}{}", "{{", "{{{}}"])
def test_parse_unclosed_brace(text):
    with pytest.raises(UnclosedBraceError):
        parse(text)


@pytest.mark.parametrize("text", ["{}{}", "{}}", "{}a", "{{}}{", "{{}{}}{}"])
def test_parse_too_many_sets(text):
    with pytest.raises(TooManySetsError):
        parse(text)


@pytest.mark.parametrize("text", [
    "{{}{}}",
    "{{{}{}}{}}",
    "{{}{{}{{}}}{{}{{}}}}",
    "{{{}{{}}}{{{}}{}}}",
])
def test_parse_non_unique_elements(text):
    with pytest.raises(NonUniqueElementsError) as e:
        parse(text)
    assert str(e.value) == "Set contains non-unique subsets"


def test_parse_errors_share_base_class():
    for text in ["", "asd", "{{}", "{}{}", "{{}{}}"]:
        with pytest.raises(SetVerParseError):
            parse(text)


def test_illegal_character_before_unclosed_brace():
    with pytest.raises(IllegalCharacterError):
        parse("{{{x")


def test_parse_deeply_nested_version():
    depth = 3000
    version = parse("{" * depth + "}" * depth)
    for _ in range(depth - 1):
        assert len(version) == 1
        version = version.children[0]
    assert version.is_empty()


def test_deeply_nested_version_formats_and_compares():
    depth = 3000
    text = "{" * depth + "}" * depth
    version = parse(text)
    assert str(version) == text
    assert version == parse(text)
    assert hash(version) == hash(parse(text))
    shallower = parse("{" * (depth - 1) + "}" * (depth - 1))
    assert shallower != version
    # {{}} is before {{{}}}, so the shallower chain comes first
    assert shallower < version
    assert shallower in SetVersion([version, shallower])


def test_non_unique_elements_keeps_lark_error_as_cause():
    with pytest.raises(NonUniqueElementsError) as e:
        parse("{{}{}}")
    assert isinstance(e.value.__cause__, VisitError)
