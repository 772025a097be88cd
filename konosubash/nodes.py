"""Tree nodes and tokens that the executor works on."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class NodeType(Enum):
    """Kinds of syntax tree nodes."""

    COMMAND = auto()
    PIPE = auto()
    REDIR_IN = auto()
    REDIR_OUT = auto()
    APPEND = auto()
    HEREDOC = auto()


class TokenType(Enum):
    """Kinds of tokens that can also appear as tree nodes."""

    WORD = auto()
    ASSIGNMENT = auto()


_REDIRECTIONS = frozenset(
    {NodeType.REDIR_IN, NodeType.REDIR_OUT, NodeType.APPEND, NodeType.HEREDOC}
)


@dataclass
class Token:
    """One token of a command line; literal tokens are never expanded."""

    value: str | None
    type: TokenType = TokenType.WORD
    literal: bool = False


@dataclass
class Node:
    """A syntax tree node.

    A command keeps its name in ``content`` and its argument vector in
    ``args``; a redirection keeps its target or heredoc delimiter in ``file``
    and the command it applies to in ``left``; a pipe joins ``left`` and
    ``right``.
    """

    type: NodeType | TokenType
    content: str | None = None
    args: list[str] | None = None
    file: str | None = None
    left: Node | None = None
    right: Node | None = None

    def is_redirection(self) -> bool:
        """True for input, output, append and heredoc nodes."""
        return self.type in _REDIRECTIONS