"""Smart Game Format collection parsing, editing and formatting."""

from .nodes import Collection, ContractViolation, Node, Property, Tree, new_collection
from .lexer import Lexer, LexerConfig, LexerError, LexerState, Token, TokenType, tokenize
from .parser import ParseError, Parser, ParserConfig, ParserState, parse, parse_sgf
from .validator import Violation, find_violation, is_valid
from .formatter import DEFAULT_FORMAT, NO_NEWLINES_FORMAT, SgfFormat, SgfFormatter, escape_value, serialize
from .parser_manager import ParserManager, ParserManagerConfig, SgfFileError, parse_sgf_file

__all__ = [
    "Collection",
    "ContractViolation",
    "Node",
    "Property",
    "Tree",
    "new_collection",
    "Lexer",
    "LexerConfig",
    "LexerError",
    "LexerState",
    "Token",
    "TokenType",
    "tokenize",
    "ParseError",
    "Parser",
    "ParserConfig",
    "ParserState",
    "parse",
    "parse_sgf",
    "Violation",
    "find_violation",
    "is_valid",
    "DEFAULT_FORMAT",
    "NO_NEWLINES_FORMAT",
    "SgfFormat",
    "SgfFormatter",
    "escape_value",
    "serialize",
    "ParserManager",
    "ParserManagerConfig",
    "SgfFileError",
    "parse_sgf_file",
]
