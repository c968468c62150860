from typing import List, NotRequired, Optional, TypedDict
from enum import Enum, auto
import logging
from scripts.sgftree.lexer import Lexer, LexerConfig, Token, TokenType
from scripts.sgftree.nodes import Collection, Node, Property, Tree
from scripts.sgftree.utils import resolve_config
from scripts.sgftree.logger import Logger


class ParseError(Exception):
    def __init__(self, message: str, token: Optional[Token] = None):
        self.message = message
        self.token = token
        self.line = token.line if token else 0
        self.column = token.column if token else 0
        if token:
            message = f"Error: {message} at {token.line}:{token.column}"
        super().__init__(message)


class ParserState(Enum):
    COLLECTION = auto()
    TREE_BODY = auto()
    NODE = auto()
    VALUE = auto()


class ParserConfig(TypedDict):
    enable_logger: NotRequired[bool]
    log_level: NotRequired[int]


class ParserConfigRequired(TypedDict):
    enable_logger: bool
    log_level: int


DEFAULT_CONFIG: ParserConfigRequired = {"enable_logger": True, "log_level": logging.WARNING}


class Parser:
    """Deterministic state machine building a ``Collection`` from lexer tokens.

    Nested trees are tracked with an explicit stack of parent trees, so input
    nesting depth never turns into Python recursion depth.
    """

    def __init__(self, tokens: List[Token], config: Optional[ParserConfig] = None):
        self.tokens = tokens
        self.config = resolve_config(config or {}, DEFAULT_CONFIG)
        self.logger = Logger(
            config={
                "name": "sgftree.parser",
                "is_enabled": self.config["enable_logger"],
                "level": self.config["log_level"],
            }
        ).logger

    def _reset(self):
        self.collection = Collection()
        self.state = ParserState.COLLECTION
        self.stack: list[Tree] = []
        self.tree: Optional[Tree] = None
        self.node: Optional[Node] = None
        self.property: Optional[Property] = None

    def parse(self) -> Collection:
        self._reset()
        self.logger.info("Starting parse")
        try:
            for token in self.tokens:
                self.logger.debug(f"State {self.state.name}, consuming {token}")
                self._consume(token)
            if self.state != ParserState.COLLECTION:
                raise ParseError("Tree did not close", self.tokens[-1])
        except ParseError as e:
            self.logger.error(e)
            raise
        self.logger.info(f"Parse complete, {len(self.collection.trees)} root tree(s)")
        return self.collection

    def _consume(self, token: Token):
        match self.state:
            case ParserState.COLLECTION:
                self._parse_collection(token)
            case ParserState.TREE_BODY:
                self._parse_tree_body(token)
            case ParserState.NODE:
                self._parse_node(token)
            case ParserState.VALUE:
                self._parse_value(token)

    def _parse_collection(self, token: Token):
        if token.type != TokenType.TREE_START:
            raise ParseError("Collection must start with a new tree", token)
        self.tree = Tree()
        self.collection.add_tree(self.tree)
        self.state = ParserState.TREE_BODY

    def _parse_tree_body(self, token: Token):
        if token.type != TokenType.NODE:
            raise ParseError("Node must follow tree start", token)
        self.node = self.tree.new_node()
        self.state = ParserState.NODE

    def _parse_node(self, token: Token):
        match token.type:
            case TokenType.PROPERTY_IDENT:
                if self.node is None:
                    raise ParseError("Property ident without node", token)
                self.property = Property(ident=token.value)
                self.node.add_property(self.property)
                self.state = ParserState.VALUE
            case TokenType.PROPERTY_VALUE:
                if self.property is None:
                    raise ParseError("Property value without property ident", token)
                self.property.values.append(token.value)
            case TokenType.NODE:
                self.node = self.tree.new_node()
                self.property = None
            case TokenType.TREE_START:
                self.node = None
                self.property = None
                child = Tree()
                self.tree.add_tree(child)
                self.stack.append(self.tree)
                self.tree = child
                self.state = ParserState.TREE_BODY
            case TokenType.TREE_END:
                self.node = None
                self.property = None
                if self.stack:
                    self.tree = self.stack.pop()
                else:
                    self.tree = None
                    self.state = ParserState.COLLECTION

    def _parse_value(self, token: Token):
        if token.type != TokenType.PROPERTY_VALUE:
            raise ParseError("Property ident without value", token)
        self.property.values.append(token.value)
        self.state = ParserState.NODE


def parse(tokens: List[Token], config: Optional[ParserConfig] = None) -> Collection:
    return Parser(tokens, config=config).parse()


def parse_sgf(
    text: str,
    lexer_config: Optional[LexerConfig] = None,
    parser_config: Optional[ParserConfig] = None,
) -> Collection:
    """Lex and parse ``text``. Empty or whitespace-only text gives an empty collection."""
    tokens = Lexer(text, config=lexer_config).tokenize()
    return parse(tokens, config=parser_config)


__all__ = ["ParseError", "Parser", "ParserConfig", "ParserState", "parse", "parse_sgf"]
