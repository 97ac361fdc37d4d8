"""Recursive descent parser for protobuf (.proto) files.

Consumes a token stream from proto_tokenizer and produces proto AST nodes.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from .proto_ast import (
    ProtoEnum,
    ProtoEnumValue,
    ProtoField,
    ProtoFile,
    ProtoMessage,
    ProtoOneof,
    ProtoRpc,
    ProtoService,
)
from .proto_tokenizer import _KEYWORDS, ProtoToken, ProtoTokenType

# Keywords are valid as field, enum value and option names.
_NAME_TOKENS = {ProtoTokenType.IDENT, *_KEYWORDS.values()}

_MAX_FIELD_NUMBER = (1 << 29) - 1
_RESERVED_RANGE = range(19000, 20000)


class ProtoParseError(Exception):
    """Raised when the parser encounters unexpected input."""

    def __init__(self, message: str, token: ProtoToken | None = None):
        if token:
            super().__init__(f"Line {token.line}:{token.col}: {message}")
        else:
            super().__init__(message)


class ProtoParser:
    """Recursive descent parser for .proto files."""

    def __init__(self, tokens: List[ProtoToken]):
        self._tokens = tokens
        self._pos = 0

    # -- public API --

    def parse(self) -> ProtoFile:
        """Parse the full token stream into a ProtoFile AST."""
        result = ProtoFile()

        while not self._at_end():
            tt = self._peek().type

            if tt == ProtoTokenType.SYNTAX:
                self._advance()
                self._expect(ProtoTokenType.EQUALS)
                result.syntax = self._expect(ProtoTokenType.STRING_LIT).value
                self._expect(ProtoTokenType.SEMICOLON)
            elif tt == ProtoTokenType.PACKAGE:
                self._advance()
                result.package = self._expect(ProtoTokenType.IDENT).value
                self._expect(ProtoTokenType.SEMICOLON)
            elif tt == ProtoTokenType.IMPORT:
                result.imports.append(self._parse_import())
            elif tt == ProtoTokenType.MESSAGE:
                result.messages.append(self._parse_message())
            elif tt == ProtoTokenType.ENUM:
                result.enums.append(self._parse_enum())
            elif tt == ProtoTokenType.SERVICE:
                result.services.append(self._parse_service())
            elif tt == ProtoTokenType.OPTION:
                self._skip_statement()
            elif tt == ProtoTokenType.EXTEND:
                self._skip_block()
            elif tt == ProtoTokenType.SEMICOLON:
                self._advance()
            else:
                tok = self._peek()
                raise ProtoParseError(f"Unexpected {tok.type.name} ({tok.value!r}) at top level", tok)

        return result

    def _parse_import(self) -> str:
        """Parse: IMPORT [public|weak] STRING_LIT SEMICOLON"""
        self._expect(ProtoTokenType.IMPORT)
        if self._peek().type == ProtoTokenType.IDENT and self._peek().value in ("public", "weak"):
            self._advance()
        path = self._expect(ProtoTokenType.STRING_LIT).value
        self._expect(ProtoTokenType.SEMICOLON)
        return path

    # -- message parsing --

    def _parse_message(self) -> ProtoMessage:
        """Parse: MESSAGE IDENT LBRACE body RBRACE"""
        self._expect(ProtoTokenType.MESSAGE)
        name_tok = self._expect(ProtoTokenType.IDENT)
        self._expect(ProtoTokenType.LBRACE)
        msg = ProtoMessage(name=name_tok.value)
        self._parse_message_body(msg)
        self._expect(ProtoTokenType.RBRACE)
        return msg

    def _parse_message_body(self, msg: ProtoMessage) -> None:
        """Parse the contents between { and } of a message."""
        while not self._at_end() and self._peek().type != ProtoTokenType.RBRACE:
            tok = self._peek()
            tt = tok.type

            if tt == ProtoTokenType.MESSAGE:
                msg.nested_messages.append(self._parse_message())
            elif tt == ProtoTokenType.ENUM:
                msg.enums.append(self._parse_enum())
            elif tt == ProtoTokenType.ONEOF:
                oneof, fields = self._parse_oneof()
                msg.oneofs.append(oneof)
                msg.fields.extend(fields)
            elif tt == ProtoTokenType.REPEATED:
                self._advance()
                msg.fields.append(self._parse_field(is_repeated=True))
            elif tt == ProtoTokenType.OPTIONAL:
                self._advance()
                msg.fields.append(self._parse_field(is_optional=True))
            elif tt == ProtoTokenType.MAP:
                raise ProtoParseError("map fields are not supported", tok)
            elif tt == ProtoTokenType.IDENT:
                if tok.value == "required":
                    self._advance()
                msg.fields.append(self._parse_field())
            elif tt in (
                ProtoTokenType.OPTION,
                ProtoTokenType.RESERVED,
                ProtoTokenType.EXTENSIONS,
            ):
                self._skip_statement()
            elif tt == ProtoTokenType.EXTEND:
                self._skip_block()
            elif tt == ProtoTokenType.SEMICOLON:
                self._advance()
            else:
                raise ProtoParseError(f"Unexpected {tt.name} ({tok.value!r}) in message {msg.name}", tok)

    def _parse_field(
        self,
        *,
        is_repeated: bool = False,
        is_optional: bool = False,
        oneof_name: Optional[str] = None,
    ) -> ProtoField:
        """Parse: IDENT(type) name EQUALS NUMBER [options] SEMICOLON

        The label keyword, if any, has already been consumed.
        """
        type_tok = self._expect(ProtoTokenType.IDENT)
        name_tok = self._expect_name()
        self._expect(ProtoTokenType.EQUALS)
        num_tok = self._expect(ProtoTokenType.NUMBER)
        number = self._to_int(num_tok)
        if not 1 <= number <= _MAX_FIELD_NUMBER or number in _RESERVED_RANGE:
            raise ProtoParseError(f"Invalid field number {number}", num_tok)
        options: Dict[str, str] = {}
        if self._peek().type == ProtoTokenType.LBRACKET:
            options = self._parse_options()
        self._expect(ProtoTokenType.SEMICOLON)

        return ProtoField(
            type_name=type_tok.value,
            field_name=name_tok.value,
            field_number=number,
            is_repeated=is_repeated,
            is_optional=is_optional,
            oneof_name=oneof_name,
            options=options,
        )

    def _parse_oneof(self) -> Tuple[ProtoOneof, List[ProtoField]]:
        """Parse: ONEOF IDENT LBRACE { field | option } RBRACE"""
        self._expect(ProtoTokenType.ONEOF)
        name = self._expect_name().value
        self._expect(ProtoTokenType.LBRACE)
        oneof = ProtoOneof(name=name)
        fields: List[ProtoField] = []
        while not self._at_end() and self._peek().type != ProtoTokenType.RBRACE:
            tt = self._peek().type
            if tt == ProtoTokenType.OPTION:
                self._skip_statement()
            elif tt == ProtoTokenType.SEMICOLON:
                self._advance()
            else:
                f = self._parse_field(oneof_name=name)
                oneof.field_names.append(f.field_name)
                fields.append(f)
        self._expect(ProtoTokenType.RBRACE)
        return oneof, fields

    def _parse_options(self) -> Dict[str, str]:
        """Parse: LBRACKET name EQUALS value { COMMA name EQUALS value } RBRACKET"""
        self._expect(ProtoTokenType.LBRACKET)
        options: Dict[str, str] = {}
        while True:
            name = self._parse_option_name()
            self._expect(ProtoTokenType.EQUALS)
            options[name] = self._parse_option_value()
            if self._peek().type == ProtoTokenType.COMMA:
                self._advance()
                continue
            break
        self._expect(ProtoTokenType.RBRACKET)
        return options

    def _parse_option_name(self) -> str:
        if self._peek().type == ProtoTokenType.LPAREN:
            self._advance()
            inner = self._expect(ProtoTokenType.IDENT).value
            self._expect(ProtoTokenType.RPAREN)
            name = f"({inner})"
            # Sub-field access such as (foo.bar).baz
            if self._peek().type == ProtoTokenType.IDENT and self._peek().value.startswith("."):
                name += self._advance().value
            return name
        return self._expect_name().value

    def _parse_option_value(self) -> str:
        tok = self._peek()
        if tok.type == ProtoTokenType.LBRACE:
            return self._skip_braces()
        if tok.type == ProtoTokenType.STRING_LIT:
            parts = []
            while self._peek().type == ProtoTokenType.STRING_LIT:
                parts.append(self._advance().value)
            return "".join(parts)
        if tok.type in (ProtoTokenType.NUMBER, *_NAME_TOKENS):
            return self._advance().value
        raise ProtoParseError(f"Unexpected {tok.type.name} in option value", tok)

    # -- enums --

    def _parse_enum(self) -> ProtoEnum:
        """Parse: ENUM IDENT LBRACE { IDENT EQUALS NUMBER [options] SEMICOLON } RBRACE"""
        self._expect(ProtoTokenType.ENUM)
        name_tok = self._expect(ProtoTokenType.IDENT)
        self._expect(ProtoTokenType.LBRACE)
        enum = ProtoEnum(name=name_tok.value)
        while not self._at_end() and self._peek().type != ProtoTokenType.RBRACE:
            tt = self._peek().type
            if tt in (ProtoTokenType.OPTION, ProtoTokenType.RESERVED):
                self._skip_statement()
            elif tt == ProtoTokenType.SEMICOLON:
                self._advance()
            else:
                value_name = self._expect_name().value
                self._expect(ProtoTokenType.EQUALS)
                number = self._to_int(self._expect(ProtoTokenType.NUMBER))
                if self._peek().type == ProtoTokenType.LBRACKET:
                    self._parse_options()
                self._expect(ProtoTokenType.SEMICOLON)
                enum.values.append(ProtoEnumValue(name=value_name, number=number))
        self._expect(ProtoTokenType.RBRACE)
        return enum

    # -- services --

    def _parse_service(self) -> ProtoService:
        """Parse: SERVICE IDENT LBRACE { rpc | option } RBRACE"""
        self._expect(ProtoTokenType.SERVICE)
        name_tok = self._expect(ProtoTokenType.IDENT)
        self._expect(ProtoTokenType.LBRACE)
        service = ProtoService(name=name_tok.value)
        while not self._at_end() and self._peek().type != ProtoTokenType.RBRACE:
            tok = self._peek()
            if tok.type == ProtoTokenType.RPC:
                service.rpcs.append(self._parse_rpc())
            elif tok.type == ProtoTokenType.OPTION:
                self._skip_statement()
            elif tok.type == ProtoTokenType.SEMICOLON:
                self._advance()
            else:
                raise ProtoParseError(f"Unexpected {tok.type.name} in service {service.name}", tok)
        self._expect(ProtoTokenType.RBRACE)
        return service

    def _parse_rpc(self) -> ProtoRpc:
        """Parse: RPC IDENT ( [STREAM] IDENT ) RETURNS ( [STREAM] IDENT ) ( ; | { options } )"""
        self._expect(ProtoTokenType.RPC)
        name = self._expect(ProtoTokenType.IDENT).value
        client_streaming, input_type = self._parse_rpc_type()
        self._expect(ProtoTokenType.RETURNS)
        server_streaming, output_type = self._parse_rpc_type()
        if self._peek().type == ProtoTokenType.LBRACE:
            self._advance()
            while not self._at_end() and self._peek().type != ProtoTokenType.RBRACE:
                if self._peek().type == ProtoTokenType.SEMICOLON:
                    self._advance()
                else:
                    self._skip_statement()
            self._expect(ProtoTokenType.RBRACE)
            if self._peek().type == ProtoTokenType.SEMICOLON:
                self._advance()
        else:
            self._expect(ProtoTokenType.SEMICOLON)
        return ProtoRpc(
            name=name,
            input_type=input_type,
            output_type=output_type,
            client_streaming=client_streaming,
            server_streaming=server_streaming,
        )

    def _parse_rpc_type(self) -> Tuple[bool, str]:
        self._expect(ProtoTokenType.LPAREN)
        streaming = False
        if self._peek().type == ProtoTokenType.STREAM and self._peek(1).type == ProtoTokenType.IDENT:
            self._advance()
            streaming = True
        type_name = self._expect(ProtoTokenType.IDENT).value
        self._expect(ProtoTokenType.RPAREN)
        return streaming, type_name

    # -- skip helpers --

    def _skip_statement(self) -> None:
        """Skip tokens until (and including) the next semicolon outside braces."""
        depth = 0
        while not self._at_end():
            tok = self._advance()
            if tok.type == ProtoTokenType.LBRACE:
                depth += 1
            elif tok.type == ProtoTokenType.RBRACE:
                depth -= 1
            elif tok.type == ProtoTokenType.SEMICOLON and depth <= 0:
                return

    def _skip_block(self) -> None:
        """Skip a keyword + IDENT + braced block (e.g. extend)."""
        self._advance()  # keyword
        # Skip until opening brace
        while not self._at_end() and self._peek().type != ProtoTokenType.LBRACE:
            self._advance()
        if not self._at_end():
            self._skip_braces()

    def _skip_braces(self) -> str:
        """Skip a balanced { ... } group and return its raw token text."""
        self._expect(ProtoTokenType.LBRACE)
        parts = ["{"]
        depth = 1
        while not self._at_end() and depth > 0:
            tok = self._advance()
            if tok.type == ProtoTokenType.LBRACE:
                depth += 1
            elif tok.type == ProtoTokenType.RBRACE:
                depth -= 1
            parts.append(tok.value)
        if depth:
            raise ProtoParseError("Unterminated block", self._peek())
        return " ".join(parts)

    # -- token helpers --

    def _peek(self, offset: int = 0) -> ProtoToken:
        idx = min(self._pos + offset, len(self._tokens) - 1)
        return self._tokens[idx]

    def _advance(self) -> ProtoToken:
        tok = self._tokens[self._pos]
        if tok.type != ProtoTokenType.EOF:
            self._pos += 1
        return tok

    def _expect(self, expected: ProtoTokenType) -> ProtoToken:
        tok = self._peek()
        if tok.type != expected:
            raise ProtoParseError(
                f"Expected {expected.name}, got {tok.type.name} ({tok.value!r})",
                tok,
            )
        return self._advance()

    def _expect_name(self) -> ProtoToken:
        tok = self._peek()
        if tok.type not in _NAME_TOKENS:
            raise ProtoParseError(f"Expected a name, got {tok.type.name} ({tok.value!r})", tok)
        return self._advance()

    @staticmethod
    def _to_int(tok: ProtoToken) -> int:
        try:
            return int(tok.value, 0)
        except ValueError:
            raise ProtoParseError(f"Invalid integer {tok.value!r}", tok) from None

    def _at_end(self) -> bool:
        return self._tokens[self._pos].type == ProtoTokenType.EOF
