import pytest

from minishell.ast import create_ast, format_ast, parse
from minishell.lexer import tokenize
from minishell.tokens import ParseError, Token, TokenType


def test_simple_command_with_arguments():
    root = parse("echo hi there")
    assert root.token == TokenType.BUILTIN
    assert [a.string for a in root.iter_arguments()] == ["hi", "there"]
    assert root.left is None


def test_empty_line_gives_none():
    assert parse("") is None
    assert create_ast([]) is None


def test_redirection_wraps_command():
    root = parse("cat > out")
    assert root.token == TokenType.REDIR_WRITE
    assert root.left.string == "cat"
    assert root.right.string == "out"
    assert root.left.parent is root


def test_arguments_after_redirection_attach_to_command():
    root = parse("cat > out x")
    assert root.right.string == "out"
    assert [a.string for a in root.left.iter_arguments()] == ["x"]


def test_chained_redirections():
    root = parse("cat < in > out")
    assert root.token == TokenType.REDIR_WRITE
    assert root.left.token == TokenType.REDIR_OPEN
    assert root.left.left.string == "cat"


def test_pipe():
    root = parse("a | b")
    assert root.token == TokenType.PIPE
    assert root.left.string == "a"
    assert root.right.string == "b"
    assert root.left.parent is root and root.right.parent is root


def test_adjacent_words_are_merged():
    root = parse("echo a'b'")
    assert [a.string for a in root.iter_arguments()] == ["ab"]


def test_redirection_target_is_not_merged():
    root = parse("cat > a'b'")
    assert root.right.string == "a"
    assert [a.string for a in root.left.iter_arguments()] == ["b"]


@pytest.mark.parametrize(
    "line",
    ["| a", "a |", "a >", "a > |", "a > echo", "< f cat"],
)
def test_syntax_errors(line):
    with pytest.raises(ParseError):
        parse(line)


def test_unexpected_token_type_raises():
    with pytest.raises(ParseError):
        create_ast([Token("x", TokenType.ARG)])


def test_create_ast_from_tokens_matches_parse_shape():
    root = create_ast(tokenize("ls -l | wc"))
    assert root.token == TokenType.PIPE
    assert [a.string for a in root.left.iter_arguments()] == ["-l"]


def test_format_ast_of_pipe():
    text = format_ast(parse("a | b"))
    assert text == "PIPE (|)\n|-- STRING (a)\n|-- STRING (b)\n"


def test_format_ast_nesting_and_empty():
    text = format_ast(parse("echo x > f"))
    lines = text.splitlines()
    assert lines[0] == "OUTPUT_REDIRECT (>)"
    assert lines[1] == "|-- BUILTIN (echo)"
    assert lines[2] == "|   |-- STRING (x)"
    assert format_ast(None) == ""