"""Building the syntax tree of a command line."""

from __future__ import annotations

from typing import Iterable, List, Optional

from .lexer import tokenize
from .tokens import (
    REDIRECTIONS,
    ParseError,
    Token,
    TokenType,
    merge_word_tokens,
    token_type_name,
)

_COMMAND_TYPES = frozenset(
    {TokenType.CMD, TokenType.BUILTIN, TokenType.WORD, TokenType.VAR}
)
_ARGUMENT_TYPES = frozenset({TokenType.WORD, TokenType.ARG, TokenType.VAR})


def _last_argument(command: Token) -> Token:
    node = command
    while node.right is not None and node.right.token in _ARGUMENT_TYPES:
        node = node.right
    return node


def create_ast(tokens: Iterable[Token]) -> Optional[Token]:
    """Link a flat token list into a tree and return its root.

    Arguments hang as a right-hand chain under their command; a
    redirection takes the command segment as its left child and the
    target word as its right child; a pipe takes the segment before it as
    left child and the segment after it as right child. Returns None when
    there are no tokens and raises ParseError on a syntax error.
    """
    pending = list(tokens)
    root: Optional[Token] = None
    segment: Optional[Token] = None
    command: Optional[Token] = None

    position = 0
    while position < len(pending):
        node = pending[position]
        position += 1
        node.left = node.right = node.parent = None
        kind = node.token

        if kind in _COMMAND_TYPES:
            if segment is None:
                segment = command = node
            elif command is not None:
                attach = _last_argument(command)
                attach.right = node
                node.parent = attach
            else:
                raise ParseError(
                    f"syntax error near token `{node.string}` "
                    "(misplaced argument without command)"
                )
        elif kind in REDIRECTIONS:
            if position >= len(pending):
                raise ParseError(
                    f"syntax error near `{node.string}' (missing filename)"
                )
            target = pending[position]
            position += 1
            target.left = target.right = None
            target.parent = node
            if target.token is not TokenType.WORD:
                raise ParseError(
                    f"syntax error near `{target.string}' "
                    f"(expected filename for `{node.string}')"
                )
            node.right = target
            node.left = segment
            if segment is not None:
                segment.parent = node
            segment = node
            if node.left is not None and node.left.token in _COMMAND_TYPES:
                command = node.left
        elif kind is TokenType.PIPE:
            if segment is None:
                raise ParseError("syntax error near unexpected token `|'")
            node.left = segment
            segment.parent = node
            root = node
            segment = None
            command = None
        else:
            raise ParseError(
                f"syntax error: unexpected token type {int(kind)} [{node.string}]"
            )

    if root is not None and root.token is TokenType.PIPE and root.right is None:
        if segment is None:
            raise ParseError("syntax error: expected command after `|'")
        root.right = segment
        segment.parent = root
    elif root is None and segment is not None:
        root = segment
    return root


def parse(line: str) -> Optional[Token]:
    """Tokenize, merge adjacent words and build the tree of a command line."""
    tokens = tokenize(line)
    if not tokens:
        return None
    return create_ast(merge_word_tokens(tokens))


def format_ast(root: Optional[Token]) -> str:
    """Render the tree one node per line, children indented below parents."""
    lines: List[str] = []

    def visit(node: Optional[Token], level: int) -> None:
        if node is None:
            return
        prefix = "|   " * max(level - 1, 0) + ("|-- " if level > 0 else "")
        text = prefix + token_type_name(node.token)
        if node.string is not None:
            text += f" ({node.string})"
        lines.append(text)
        visit(node.left, level + 1)
        visit(node.right, level + 1)

    visit(root, 0)
    return "".join(line + "\n" for line in lines)