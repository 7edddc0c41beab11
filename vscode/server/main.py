"""
Indy-lang Language Server entry point.

This server provides basic language features for Indy-lang source files
using `pygls`. It reuses the Indy-lang lexer and parser to build a simple
symbol index supporting definition lookup, hover information, document
symbols, and published diagnostics for structural errors.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from pygls.server import LanguageServer
from lsprotocol.types import (
    TEXT_DOCUMENT_DEFINITION,
    TEXT_DOCUMENT_HOVER,
    TEXT_DOCUMENT_DOCUMENT_SYMBOL,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DID_CHANGE,
    DefinitionParams,
    Diagnostic,
    DiagnosticSeverity,
    DidOpenTextDocumentParams,
    DidChangeTextDocumentParams,
    DocumentSymbol,
    DocumentSymbolParams,
    Hover,
    HoverParams,
    Location,
    MarkupContent,
    MarkupKind,
    Position,
    Range,
    SymbolKind,
)

from indylang.lexer import tokenize
from indylang.parser import Parser, clean_literal

SOURCE = "indy-ls"


@dataclass
class IndySymbol:
    """Represents a symbol in an Indy-lang file."""

    name: str
    kind: SymbolKind
    uri: str
    line: int
    detail: str


def _line_range(line: int, length: int) -> Range:
    return Range(Position(line, 0), Position(line, length))


def parse_symbols(uri: str, text: str) -> List[IndySymbol]:
    """Extract variables and blocks from ``text``.

    Only classified lines are needed, so symbols are still available while
    the document is structurally broken. Line numbers are 0-based.
    """
    symbols: List[IndySymbol] = []
    seen: set[str] = set()
    for tok in tokenize(text):
        line = tok.line - 1
        if tok.type == "ASSIGN":
            name, raw_value = tok.value
            if name not in seen:
                seen.add(name)
                detail = f'{name}="{clean_literal(raw_value)}"'
                symbols.append(IndySymbol(name, SymbolKind.Variable, uri, line, detail))
        elif tok.type == "PROMPT":
            name, sep, message = tok.value.partition("=")
            name = name.strip()
            if sep and name and name not in seen:
                seen.add(name)
                detail = f'prompt {name}="{clean_literal(message)}"'
                symbols.append(IndySymbol(name, SymbolKind.Variable, uri, line, detail))
        elif tok.type == "IF":
            symbols.append(IndySymbol(f"if {tok.value}", SymbolKind.Namespace, uri, line, "if block"))
        elif tok.type == "LOOP":
            symbols.append(IndySymbol(f"loop {tok.value}", SymbolKind.Namespace, uri, line, "simulated loop"))
    return symbols


def collect_diagnostics(text: str, uri: str = "<document>") -> List[Diagnostic]:
    """Parse ``text`` and turn problems into LSP diagnostics."""
    tokens = tokenize(text)
    parser = Parser(tokens, uri)
    diagnostics: List[Diagnostic] = []
    try:
        parser.parse()
    except SyntaxError as e:
        line = max((getattr(e, "line", None) or 1) - 1, 0)
        diagnostics.append(
            Diagnostic(
                range=_line_range(line, 0),
                message=str(e),
                severity=DiagnosticSeverity.Error,
                source=SOURCE,
            )
        )
        return diagnostics

    for tok in tokens:
        if tok.type == "UNKNOWN" and tok not in parser.ignored:
            diagnostics.append(
                Diagnostic(
                    range=_line_range(tok.line - 1, len(tok.value)),
                    message=f"Unknown command or bad syntax: '{tok.value}'",
                    severity=DiagnosticSeverity.Warning,
                    source=SOURCE,
                )
            )
    for tok in parser.ignored:
        diagnostics.append(
            Diagnostic(
                range=_line_range(tok.line - 1, 0),
                message="Line is outside start...end and will be ignored",
                severity=DiagnosticSeverity.Information,
                source=SOURCE,
            )
        )
    return diagnostics


class IndyLanguageServer(LanguageServer):
    """Language server for Indy-lang source files."""

    def __init__(self) -> None:
        super().__init__("indy-ls", "v0.1")
        self.symbols_by_uri: Dict[str, List[IndySymbol]] = {}
        self.indexed_workspace = False

    def _index_workspace(self) -> None:
        """Parse all `.indy` files under the current workspace."""
        root = self.workspace.root_path
        if not root:
            self.indexed_workspace = True
            return
        for path in Path(root).rglob("*.indy"):
            uri = path.as_uri()
            if uri in self.symbols_by_uri:
                continue
            try:
                text = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError):
                continue
            self.symbols_by_uri[uri] = parse_symbols(uri, text)
        self.indexed_workspace = True

    def update_document(self, uri: str, text: str) -> None:
        """Re-index ``uri`` and publish its diagnostics."""
        self.symbols_by_uri[uri] = parse_symbols(uri, text)
        self.publish_diagnostics(uri, collect_diagnostics(text, uri))

    def lookup(self, uri: str, word: str) -> Optional[IndySymbol]:
        """Find the first definition of ``word``, preferring ``uri``."""
        for sym in self.symbols_by_uri.get(uri, []):
            if sym.name == word:
                return sym
        if not self.indexed_workspace:
            self._index_workspace()
        for syms in self.symbols_by_uri.values():
            for sym in syms:
                if sym.name == word:
                    return sym
        return None


lang_server = IndyLanguageServer()


@lang_server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: IndyLanguageServer, params: DidOpenTextDocumentParams) -> None:
    """Index a document when it is opened."""
    ls.update_document(params.text_document.uri, params.text_document.text)


@lang_server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: IndyLanguageServer, params: DidChangeTextDocumentParams) -> None:
    """Re-index a document when it changes."""
    if params.content_changes:
        # Changes may be incremental; the workspace copy holds the full text.
        doc = ls.workspace.get_text_document(params.text_document.uri)
        ls.update_document(params.text_document.uri, doc.source)


@lang_server.feature(TEXT_DOCUMENT_DEFINITION)
def definition(ls: IndyLanguageServer, params: DefinitionParams):
    """Return where the variable under the cursor is first set."""
    doc = ls.workspace.get_text_document(params.text_document.uri)
    word = doc.word_at_position(params.position)
    if not word:
        return None
    sym = ls.lookup(params.text_document.uri, word)
    if sym is None:
        return None
    return Location(uri=sym.uri, range=_line_range(sym.line, len(sym.name)))


@lang_server.feature(TEXT_DOCUMENT_HOVER)
def hover(ls: IndyLanguageServer, params: HoverParams) -> Optional[Hover]:
    """Return hover information for the variable under the cursor."""
    doc = ls.workspace.get_text_document(params.text_document.uri)
    word = doc.word_at_position(params.position)
    if not word:
        return None
    sym = ls.lookup(params.text_document.uri, word)
    if sym is None:
        return None
    contents = MarkupContent(kind=MarkupKind.PlainText, value=sym.detail)
    return Hover(contents=contents)


@lang_server.feature(TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def document_symbols(ls: IndyLanguageServer, params: DocumentSymbolParams):
    """Return the symbols of the given document."""
    symbols = ls.symbols_by_uri.get(params.text_document.uri, [])
    result: List[DocumentSymbol] = []
    for sym in symbols:
        rng = _line_range(sym.line, len(sym.name))
        result.append(
            DocumentSymbol(
                name=sym.name,
                kind=sym.kind,
                range=rng,
                selection_range=rng,
                detail=sym.detail,
            )
        )
    return result


def main() -> None:
    """Start the language server."""
    lang_server.start_io()


if __name__ == "__main__":
    main()
