from dataclasses import dataclass
from typing import Callable, ClassVar, FrozenSet

from syntax.lexer import Lexer, LexerState, Token, TokenType


@dataclass
class JavaScriptLexerState(LexerState):
    """
    State information for the JavaScript lexer.

    Attributes:
        in_block_comment: Indicates if we're currently parsing a block comment
        in_template_literal: Indicates if we're currently parsing a template literal
    """
    in_block_comment: bool = False
    in_template_literal: bool = False


class JavaScriptLexer(Lexer):
    """
    Lexer for JavaScript code.

    Handles keywords, operators, strings, template literals, regular expressions,
    comments and numeric literals.  Setting `typescript` adds the TypeScript keywords
    and reports the built-in type names as TYPE tokens.
    """

    _OPERATORS = [
        '>>>=', '>>=', '<<=', '&&=', '||=', '??=', '**=',
        '!==', '===', '>>>', '...', '!=', '==', '+=', '-=',
        '*=', '/=', '%=', '&=', '|=', '^=', '<=', '>=', '&&',
        '||', '??', '?.', '<<', '>>', '**', '++', '--', '=>',
        '+', '-', '*', '/', '%', '&', '~', '!', '|', '^', '=',
        '<', '>', '(', ')', '{', '}', '[', ']', ';', ':', '?',
        '.', ','
    ]

    _OPERATORS_MAP = Lexer.build_operator_map(_OPERATORS)

    _KEYWORDS: ClassVar[FrozenSet[str]] = frozenset({
        'async', 'await', 'break', 'case', 'catch', 'class', 'const',
        'continue', 'debugger', 'default', 'delete', 'do', 'else', 'export',
        'extends', 'false', 'finally', 'for', 'from', 'function', 'if',
        'import', 'in', 'instanceof', 'let', 'new', 'null', 'of', 'return',
        'static', 'super', 'switch', 'this', 'throw', 'true', 'try',
        'typeof', 'undefined', 'var', 'void', 'while', 'with', 'yield'
    })

    _TYPESCRIPT_KEYWORDS: ClassVar[FrozenSet[str]] = frozenset({
        'abstract', 'as', 'declare', 'enum', 'implements', 'interface',
        'keyof', 'namespace', 'private', 'protected', 'public', 'readonly',
        'satisfies', 'type'
    })

    _TYPESCRIPT_TYPES: ClassVar[FrozenSet[str]] = frozenset({
        'any', 'bigint', 'boolean', 'never', 'number', 'object', 'string',
        'symbol', 'unknown'
    })

    _NUMBER_PREFIXES: ClassVar[FrozenSet[str]] = frozenset({'x', 'b', 'o'})

    def __init__(self, typescript: bool = False) -> None:
        super().__init__()
        self._typescript = typescript
        self._in_block_comment = False
        self._in_template_literal = False

    def lex(self, prev_lexer_state: LexerState | None, input_str: str) -> JavaScriptLexerState:
        """
        Lex all the tokens in one line of input.

        Args:
            prev_lexer_state: Optional previous lexer state
            input_str: The input string to parse

        Returns:
            The updated lexer state after processing
        """
        self._input = input_str
        self._input_len = len(input_str)
        if prev_lexer_state is not None:
            assert isinstance(prev_lexer_state, JavaScriptLexerState), \
                f"Expected JavaScriptLexerState, got {type(prev_lexer_state).__name__}"
            self._in_block_comment = prev_lexer_state.in_block_comment
            self._in_template_literal = prev_lexer_state.in_template_literal

        if self._in_block_comment:
            self._read_block_comment(0)

        elif self._in_template_literal:
            self._read_template_literal(0)

        if not self._in_block_comment and not self._in_template_literal:
            self._inner_lex()

        return JavaScriptLexerState(
            in_block_comment=self._in_block_comment,
            in_template_literal=self._in_template_literal
        )

    def _get_lexing_function(self, ch: str) -> Callable[[], None]:
        """
        Get the lexing function that matches a given start character.

        Args:
            ch: The start character

        Returns:
            The appropriate lexing function for the character
        """
        if self._is_whitespace(ch):
            return self._read_whitespace

        if self._is_letter(ch) or ch in '_$':
            return self._read_identifier_or_keyword

        if self._is_digit(ch):
            return self._read_number

        if ch in '"\'':
            return self._read_string

        if ch == '`':
            return lambda: self._read_template_literal(1)

        if ch == '.':
            return self._read_dot

        if ch == '/':
            return self._read_forward_slash

        if ch == '#':
            return self._read_hash

        return self._read_operator

    def _read_forward_slash(self) -> None:
        """
        Read a forward slash, which starts a comment, an operator or a regular expression.
        """
        next_ch = self._input[self._position + 1] if self._position + 1 < self._input_len else ''
        if next_ch == '=':
            self._read_operator()
            return

        if next_ch == '/':
            self._emit(TokenType.COMMENT, self._position, self._input_len)
            return

        if next_ch == '*':
            self._read_block_comment(2)
            return

        self._read_regexp_or_divide()

    def _read_dot(self) -> None:
        """
        Read a dot operator, or a number that starts with a decimal point.
        """
        if self._position + 1 < self._input_len and self._is_digit(self._input[self._position + 1]):
            self._read_number()
            return

        self._read_operator()

    def _read_hash(self) -> None:
        """
        Read a hashbang at the very start of the input, or a private member name.
        """
        if self._position == 0 and self._input.startswith('#!'):
            self._emit(TokenType.PREPROCESSOR, 0, self._input_len)
            return

        if self._position + 1 < self._input_len and self._is_letter(self._input[self._position + 1]):
            start = self._position
            self._position += 1
            self._read_identifier_or_keyword()
            self._tokens[-1] = Token(
                type=TokenType.IDENTIFIER,
                value=self._input[start:self._position],
                start=start
            )
            return

        self._emit(TokenType.ERROR, self._position, self._position + 1)

    def _read_number(self) -> None:
        """
        Read a numeric literal: decimal, hexadecimal, binary, octal or BigInt.
        """
        start = self._position
        prefix = self._input[start + 1].lower() if start + 1 < self._input_len else ''
        if self._input[start] == '0' and prefix in self._NUMBER_PREFIXES:
            is_digit = {
                'x': self._is_hex_digit,
                'b': self._is_binary_digit,
                'o': self._is_octal_digit
            }[prefix]
            self._position += 2
            self._skip_while(lambda c: is_digit(c) or c == '_')

        else:
            self._skip_while(lambda c: self._is_digit(c) or c == '_')
            if self._position < self._input_len and self._input[self._position] == '.':
                self._position += 1
                self._skip_while(self._is_digit)

            if self._position < self._input_len and self._input[self._position] in 'eE':
                self._position += 1
                if self._position < self._input_len and self._input[self._position] in '+-':
                    self._position += 1

                self._skip_while(self._is_digit)

        if self._position < self._input_len and self._input[self._position] == 'n':
            self._position += 1

        self._emit(TokenType.NUMBER, start, self._position)

    def _read_identifier_or_keyword(self) -> None:
        """
        Read an identifier or keyword token.
        """
        start = self._position
        self._position += 1
        self._skip_while(lambda c: self._is_letter_or_digit_or_underscore(c) or c == '$')

        value = self._input[start:self._position]
        token_type = TokenType.IDENTIFIER
        if value in self._KEYWORDS:
            token_type = TokenType.KEYWORD

        elif self._typescript and value in self._TYPESCRIPT_KEYWORDS:
            token_type = TokenType.KEYWORD

        elif self._typescript and value in self._TYPESCRIPT_TYPES:
            token_type = TokenType.TYPE

        self._tokens.append(Token(type=token_type, value=value, start=start))

    def _read_block_comment(self, skip_chars: int) -> None:
        """
        Read a block comment, which may continue onto following lines.

        Args:
            skip_chars: Number of opening characters to skip (2 for "/*", 0 on a continuation line)
        """
        self._in_block_comment = True
        start = self._position
        end = self._input.find('*/', self._position + skip_chars)
        if end == -1:
            self._position = self._input_len

        else:
            self._in_block_comment = False
            self._position = end + 2

        self._emit(TokenType.COMMENT, start, self._position)

    def _read_regexp_or_divide(self) -> None:
        """
        Read a regular expression literal, or a divide operator if no closing slash follows.
        """
        start = self._position
        index = self._position + 1
        escaped = False
        in_class = False
        while index < self._input_len:
            ch = self._input[index]
            if escaped:
                escaped = False

            elif ch == '\\':
                escaped = True

            elif ch == '[':
                in_class = True

            elif ch == ']':
                in_class = False

            elif ch == '/' and not in_class:
                break

            index += 1

        if index >= self._input_len:
            self._position += 1
            self._emit(TokenType.OPERATOR, start, self._position)
            return

        index += 1
        while index < self._input_len and self._input[index] in 'dgimsuvy':
            index += 1

        self._position = index
        self._emit(TokenType.REGEXP, start, index)

    def _read_string(self) -> None:
        """
        Read a single or double quoted string.  Unterminated strings end at the end of the line.
        """
        quote = self._input[self._position]
        start = self._position
        self._position += 1
        while self._position < self._input_len and self._input[self._position] != quote:
            if self._input[self._position] == '\\':
                self._position += 1

            self._position += 1

        self._position = min(self._position + 1, self._input_len)
        self._emit(TokenType.STRING, start, self._position)

    def _read_template_literal(self, skip_chars: int) -> None:
        """
        Read a template literal, which may span several lines.

        Args:
            skip_chars: Number of opening characters to skip (1 for the backtick, 0 on a continuation line)
        """
        start = self._position
        self._position += skip_chars
        self._in_template_literal = True
        while self._position < self._input_len:
            ch = self._input[self._position]
            if ch == '\\':
                self._position += 2
                continue

            self._position += 1
            if ch == '`':
                self._in_template_literal = False
                break

        self._position = min(self._position, self._input_len)
        self._emit(TokenType.STRING, start, self._position)

    def _skip_while(self, predicate: Callable[[str], bool]) -> None:
        while self._position < self._input_len and predicate(self._input[self._position]):
            self._position += 1

    def _emit(self, token_type: TokenType, start: int, end: int) -> None:
        self._position = end
        self._tokens.append(Token(type=token_type, value=self._input[start:end], start=start))
