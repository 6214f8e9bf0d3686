"""Splitting a command line into tokens."""

from __future__ import annotations

from typing import List

from .tokens import ParseError, Token, TokenType, classify_word

_WHITESPACE = frozenset(" \t\n\v\f\r")
_OPERATOR_CHARS = frozenset("|<>")
_QUOTES = frozenset("\"'")


def _read_operator(line: str, index: int) -> Token:
    pair = line[index : index + 2]
    if pair == ">>":
        return Token(">>", TokenType.REDIR_WRITE_A)
    if pair == "<<":
        return Token("<<", TokenType.HEREDOC)
    char = line[index]
    if char == ">":
        return Token(">", TokenType.REDIR_WRITE)
    if char == "<":
        return Token("<", TokenType.REDIR_OPEN)
    return Token("|", TokenType.PIPE)


def tokenize(line: str) -> List[Token]:
    """Split a command line into a flat list of tokens.

    Quoted text becomes a single WORD without its quotes. Unquoted words
    are classified as builtins, operators or plain words and remember
    whether whitespace follows them. An unmatched quote raises ParseError.
    """
    tokens: List[Token] = []
    length = len(line)
    i = 0
    while i < length:
        while i < length and line[i] in _WHITESPACE:
            i += 1
        if i >= length:
            break
        char = line[i]
        if char in _OPERATOR_CHARS:
            token = _read_operator(line, i)
            tokens.append(token)
            i += len(token.string)
        elif char in _QUOTES:
            end = line.find(char, i + 1)
            if end == -1:
                raise ParseError(f"unmatched quote {char}")
            tokens.append(Token(line[i + 1 : end], TokenType.WORD))
            i = end + 1
        else:
            j = i
            while (
                j < length
                and line[j] not in _WHITESPACE
                and line[j] not in _OPERATOR_CHARS
                and line[j] not in _QUOTES
            ):
                j += 1
            text = line[i:j]
            token = Token(text, classify_word(text))
            token.followed_by_whitespace = j < length and line[j] in _WHITESPACE
            tokens.append(token)
            i = j
    return tokens