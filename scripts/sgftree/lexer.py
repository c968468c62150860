"""Character level scanner turning SGF text into a flat token list."""

from typing import NotRequired, Optional, TypedDict
from enum import Enum, auto
from dataclasses import dataclass
import logging
from scripts.sgftree.utils import resolve_config
from scripts.sgftree.logger import Logger


class TokenType(Enum):
    TREE_START = auto()
    TREE_END = auto()
    NODE = auto()
    PROPERTY_IDENT = auto()
    PROPERTY_VALUE = auto()


@dataclass(slots=True)
class Token:
    type: TokenType
    value: str
    line: int
    column: int


class LexerState(Enum):
    CONTROL = auto()
    VALUE = auto()


CONTROL_CHARS = {
    "(": TokenType.TREE_START,
    ")": TokenType.TREE_END,
    ";": TokenType.NODE,
}

WHITESPACE = {" ", "\t", "\v", "\r", "\n"}


class LexerError(Exception):
    def __init__(self, message: str, line: int, column: int):
        super().__init__(f"Error: {message} at {line}:{column}")
        self.message = message
        self.line = line
        self.column = column


class LexerConfig(TypedDict):
    enable_logger: NotRequired[bool]
    log_level: NotRequired[int]


class LexerConfigRequired(TypedDict):
    enable_logger: bool
    log_level: int


DEFAULT_CONFIG: LexerConfigRequired = {
    "enable_logger": True,
    "log_level": logging.WARNING,
}


class Lexer:
    """Two-state scanner over SGF text.

    In control state only ``(``, ``)``, ``;``, ``[``, whitespace and uppercase
    letters are legal. In value state every character is taken verbatim until an
    unescaped ``]``; a backslash makes the following character literal.

    Positions are 1-based. A CRLF pair counts as a single line break.
    """

    def __init__(self, text: str, config: Optional[LexerConfig] = None):
        self.text = text
        self.config = resolve_config(config or {}, DEFAULT_CONFIG)
        self.logger = Logger(
            config={
                "name": "sgftree.lexer",
                "is_enabled": self.config["enable_logger"],
                "level": self.config["log_level"],
            }
        ).logger
        self._reset()

    def _reset(self):
        self.tokens: list[Token] = []
        self.state = LexerState.CONTROL
        self.position = 0
        self.line = 1
        self.column = 1
        self._ident: list[str] = []
        self._value: list[str] = []
        self._escaped = False
        self._start_line = 1
        self._start_column = 1

    @property
    def has_more_chars(self) -> bool:
        return self.position < len(self.text)

    def _peek(self, ahead: int = 0) -> str:
        index = self.position + ahead
        if index >= len(self.text):
            return "\0"
        return self.text[index]

    def _advance(self) -> str:
        char = self.text[self.position]
        self.position += 1
        if char == "\n" or (char == "\r" and self._peek() != "\n"):
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return char

    def _add_token(self, token_type: TokenType, value: str, line: int, column: int):
        self.logger.debug(f"Adding token {token_type} with value '{value}' at line {line}, column {column}")
        self.tokens.append(Token(token_type, value, line, column))

    def tokenize(self) -> list[Token]:
        self._reset()
        self.logger.info("Starting tokenization")
        try:
            while self.has_more_chars:
                line, column = self.line, self.column
                char = self._advance()
                if self.state == LexerState.CONTROL:
                    self._handle_control(char, line, column)
                else:
                    self._handle_value(char)
            self._finish()
        except LexerError as e:
            self.logger.error(e)
            self.tokens = []
            raise
        self.logger.info(f"Tokenization complete, {len(self.tokens)} tokens")
        return self.tokens

    def _handle_control(self, char: str, line: int, column: int):
        if char in CONTROL_CHARS:
            self._flush_ident()
            self._add_token(CONTROL_CHARS[char], "", line, column)
        elif char == "[":
            self._flush_ident()
            self._start_line, self._start_column = line, column
            self.state = LexerState.VALUE
        elif char in WHITESPACE:
            if self._ident:
                raise LexerError(f"Invalid character {char!r} inside property ident", line, column)
        elif "A" <= char <= "Z":
            if not self._ident:
                self._start_line, self._start_column = line, column
            self._ident.append(char)
        else:
            raise LexerError(f"Invalid character {char!r}", line, column)

    def _handle_value(self, char: str):
        if self._escaped:
            self._value.append(char)
            self._escaped = False
        elif char == "\\":
            self._escaped = True
        elif char == "]":
            self._add_token(TokenType.PROPERTY_VALUE, "".join(self._value), self._start_line, self._start_column)
            self._value = []
            self.state = LexerState.CONTROL
        else:
            self._value.append(char)

    def _flush_ident(self):
        if self._ident:
            self._add_token(TokenType.PROPERTY_IDENT, "".join(self._ident), self._start_line, self._start_column)
            self._ident = []

    def _finish(self):
        if self.state == LexerState.VALUE:
            raise LexerError("value left open", self._start_line, self._start_column)
        self._flush_ident()


def tokenize(text: str, config: Optional[LexerConfig] = None) -> list[Token]:
    return Lexer(text, config=config).tokenize()


__all__ = ["Lexer", "LexerConfig", "LexerError", "LexerState", "Token", "TokenType", "tokenize"]
