from __future__ import annotations

from lark import Lark, Transformer_NonRecursive
from lark.exceptions import UnexpectedCharacters, VisitError
from logzero import logger

from setver.objects.version import SetVersion
from setver.parser.grammar import LBRACE, RBRACE, setver_grammar


class SetVerParseError(Exception):
    pass


class IllegalCharacterError(SetVerParseError):
    def __init__(self, char: str):
        self.char: str = char
        super().__init__(f"Illegal character '{char}'")


class NonUniqueElementsError(SetVerParseError):
    def __init__(self):
        super().__init__("Set contains non-unique subsets")


class UnclosedBraceError(SetVerParseError):
    def __init__(self):
        super().__init__("Unclosed set brace")


class EmptyVersionError(SetVerParseError):
    def __init__(self):
        super().__init__("Empty string")


class TooManySetsError(SetVerParseError):
    def __init__(self):
        super().__init__("Too many sets (more than one)")


class SetVersionTransformer(Transformer_NonRecursive):
    def version(self, args):
        version = SetVersion(args)
        if len(version) < len(args):
            raise NonUniqueElementsError()
        return version


# the smallest valid version is "{}"
MIN_VERSION_LENGTH = 2

setver_parser = Lark(setver_grammar, start='version', parser='lalr', lexer='basic')


def parse(text: str) -> SetVersion:
    """
    Parse a SetVer version

    The braces are checked token by token while the parser consumes them, so that
    illegal characters, unclosed braces and trailing sets are told apart the same
    way regardless of where they occur.

    :param text: the version text, e.g., "{{}{{}}}"
    :return: the parsed version
    """
    if len(text) < MIN_VERSION_LENGTH:
        raise EmptyVersionError()
    interactive = setver_parser.parse_interactive(text)
    depth = 0
    n_children = 0
    closed = False
    try:
        for token in interactive.iter_parse():
            if closed:
                raise TooManySetsError()
            if token.type == LBRACE:
                depth += 1
            elif depth == 0:
                # a version must start with an opening brace
                raise IllegalCharacterError(token.value)
            else:
                depth -= 1
                if depth == 1:
                    n_children += 1
            closed = depth == 0
    except UnexpectedCharacters as e:
        if closed:
            raise TooManySetsError() from e
        raise IllegalCharacterError(e.char) from e
    if not closed:
        raise UnclosedBraceError()
    logger.debug(f"Parsed {n_children} top-level children from {len(text)} characters")
    tree = interactive.feed_eof()
    try:
        return SetVersionTransformer().transform(tree)
    except VisitError as e:
        if isinstance(e.orig_exc, SetVerParseError):
            raise e.orig_exc from e
        raise
