"""Token kinds and the token node shared by the lexer, parser and executor."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Iterable, Iterator, List, Optional


class TokenType(IntEnum):
    """Kinds of token produced by the lexer."""

    WORD = 0
    CMD = 1
    ARG = 3
    PIPE = 4
    REDIR_OPEN = 5
    REDIR_WRITE = 6
    REDIR_WRITE_A = 7
    DOUBLE_REDIR = 8
    HEREDOC = 10
    VAR = 11
    BUILTIN = 12


class HeredocState(Enum):
    """Progress of reading the body of a here-document."""

    NOT_PROCESSED = "not_processed"
    PROCESSING_FAILED = "processing_failed"
    PROCESSED_OK = "processed_ok"


class ParseError(Exception):
    """Raised when a command line cannot be tokenized or parsed."""


REDIRECTIONS = frozenset(
    {
        TokenType.REDIR_OPEN,
        TokenType.REDIR_WRITE,
        TokenType.REDIR_WRITE_A,
        TokenType.HEREDOC,
    }
)

OPERATORS = {
    "|": TokenType.PIPE,
    "<": TokenType.REDIR_OPEN,
    ">": TokenType.REDIR_WRITE,
    ">>": TokenType.REDIR_WRITE_A,
    "<<": TokenType.HEREDOC,
}

BUILTIN_NAMES = frozenset({"echo", "cd", "pwd", "export", "unset", "env", "exit"})

_TYPE_NAMES = {
    TokenType.WORD: "STRING",
    TokenType.CMD: "CMD",
    TokenType.PIPE: "PIPE",
    TokenType.REDIR_OPEN: "INPUT_REDIRECT",
    TokenType.REDIR_WRITE: "OUTPUT_REDIRECT",
    TokenType.REDIR_WRITE_A: "APPEND_REDIRECT",
    TokenType.HEREDOC: "HEREDOC (<<)",
    TokenType.BUILTIN: "BUILTIN",
}


@dataclass(eq=False)
class Token:
    """A token, which also serves as a node of the syntax tree."""

    string: Optional[str]
    token: TokenType
    followed_by_whitespace: bool = False
    left: Optional["Token"] = field(default=None, repr=False)
    right: Optional["Token"] = field(default=None, repr=False)
    parent: Optional["Token"] = field(default=None, repr=False)
    heredoc_fd: Optional[int] = field(default=None, repr=False)
    heredoc_state: HeredocState = field(default=HeredocState.NOT_PROCESSED, repr=False)

    def iter_arguments(self) -> Iterator["Token"]:
        """Yield the chain of WORD nodes hanging to the right of this node."""
        node = self.right
        while node is not None and node.token is TokenType.WORD:
            yield node
            node = node.right


def classify_word(text: Optional[str]) -> TokenType:
    """Return the token type of an unquoted word."""
    if text is None:
        return TokenType.WORD
    if text in OPERATORS:
        return OPERATORS[text]
    if text in BUILTIN_NAMES:
        return TokenType.BUILTIN
    return TokenType.WORD


def merge_word_tokens(tokens: Iterable[Token]) -> List[Token]:
    """Join adjacent WORD tokens that had no whitespace between them.

    A word that is the target of a redirection is never joined with what
    follows it. The surviving tokens are updated in place and returned as
    a new list.
    """
    merged: List[Token] = []
    for token in tokens:
        if merged:
            current = merged[-1]
            previous = merged[-2] if len(merged) > 1 else None
            if (
                current.token is TokenType.WORD
                and token.token is TokenType.WORD
                and not current.followed_by_whitespace
                and (previous is None or previous.token not in REDIRECTIONS)
            ):
                current.string = (current.string or "") + (token.string or "")
                current.followed_by_whitespace = token.followed_by_whitespace
                continue
        merged.append(token)
    return merged


def token_type_name(token_type: int) -> str:
    """Return the display name of a token type."""
    try:
        return _TYPE_NAMES.get(TokenType(token_type), "UNKNOWN")
    except ValueError:
        return "UNKNOWN"