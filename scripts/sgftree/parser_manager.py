from pathlib import Path
from typing import NotRequired, Optional, TypedDict
from scripts.sgftree.lexer import Lexer, LexerConfig
from scripts.sgftree.nodes import Collection
from scripts.sgftree.parser import Parser, ParserConfig
from scripts.sgftree.utils import resolve_config


class SgfFileError(Exception):
    """Reading an SGF file failed before lexing could start."""

    def __init__(self, path: str | Path, reason: str):
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path


class ParserManagerConfig(TypedDict):
    lexer_config: NotRequired[LexerConfig]
    parser_config: NotRequired[ParserConfig]
    encoding: NotRequired[str]


class ParserManagerConfigRequired(TypedDict):
    lexer_config: LexerConfig
    parser_config: ParserConfig
    encoding: str


DEFAULT_CONFIG: ParserManagerConfigRequired = {
    "lexer_config": {},
    "parser_config": {},
    "encoding": "utf-8",
}


class ParserManager:
    """Reads one file and runs it through the lexer and the parser."""

    def __init__(self, path: str | Path, config: Optional[ParserManagerConfig] = None):
        self.config = resolve_config(config or {}, DEFAULT_CONFIG)
        self.path = Path(path)
        self.text = self._read()
        self.lexer = Lexer(self.text, config=self.config["lexer_config"])
        self.tokens = self.lexer.tokenize()
        self.parser = Parser(self.tokens, config=self.config["parser_config"])
        self.collection: Collection = self.parser.parse()

    def _read(self) -> str:
        try:
            return self.path.read_text(encoding=self.config["encoding"])
        except (OSError, UnicodeDecodeError) as exc:
            raise SgfFileError(self.path, str(exc)) from exc


def parse_sgf_file(path: str | Path, config: Optional[ParserManagerConfig] = None) -> Collection:
    return ParserManager(path, config=config).collection


__all__ = ["ParserManager", "ParserManagerConfig", "SgfFileError", "parse_sgf_file"]
