# lexer.py
# Analisador léxico para uma linguagem no estilo Pascal

from dataclasses import dataclass, field
from enum import Enum
import string

MAX_IDENTIFIER_LENGTH = 127

DIGITS = set(string.digits)
OCTAL_DIGITS = set("01234567")
BINARY_DIGITS = set("01")
HEX_DIGITS = set(string.digits + "abcdef")
LETTERS = set(string.ascii_lowercase + "_")
NUMBER_START = {'%', '$', '+', '-'}

COMMENT_DELIMITERS = {
    '//': '',
    '(*': '*)',
    '{': '}',
}

# Só ASCII: mantém o tamanho do texto e os offsets
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


class LexemeType(Enum):
    Symbol = 'Symbol'
    Identifier = 'Identifier'
    Comment = 'Comment'
    Number = 'Number'
    CharacterString = 'CharacterString'


@dataclass
class Lexeme:
    type: LexemeType
    begin: int
    end: int
    lexemes: list = field(default_factory=list)  # comentários aninhados

    def __str__(self):
        view = f"{self.type.value}[{self.begin},{self.end}]"
        if not self.lexemes:
            return view
        return view + ":" + ", ".join(str(l) for l in self.lexemes) + ";"

    def to_dict(self):
        return {
            'type': self.type.value,
            'begin': self.begin,
            'end': self.end,
            'lexemes': [l.to_dict() for l in self.lexemes],
        }


def view_split(lexemes):
    return "".join(str(l) for l in lexemes)


class Lexer:
    """Divide o texto em lexemas que cobrem a entrada sem lacunas.

    A classificação é feita sobre uma cópia em minúsculas; os offsets
    sempre se referem ao texto original.
    """

    def __init__(self, input_text):
        self.input = input_text
        self.text = input_text.translate(_ASCII_LOWER)
        self.pos = 0
        self.current_char = self.text[self.pos] if self.pos < len(self.text) else None
        self.tokens = []
        self.comments = {}  # (início, limite) -> (fim, aninhados) ou None

    def _advance(self, count=1):
        self.pos += count
        self.current_char = self.text[self.pos] if self.pos < len(self.text) else None

    def _peek(self, offset=1):
        pos = self.pos + offset
        return self.text[pos] if pos < len(self.text) else None

    def _add_token(self, token_type, end, lexemes=None):
        self.tokens.append(Lexeme(token_type, self.pos, end, lexemes or []))
        self._advance(end - self.pos)

    # ---------------- números ----------------
    def _run(self, pos, charset, limit=None):
        """Avança enquanto os caracteres pertencem ao conjunto."""
        limit = len(self.text) if limit is None else limit
        while pos < limit and self.text[pos] in charset:
            pos += 1
        return pos

    def _decimal(self, pos):
        end = self._run(pos, DIGITS)

        # parte fracionária
        if end < len(self.text) and self.text[end] == '.':
            end = self._run(end + 1, DIGITS)

        # fator de escala: 'e' no fim do texto não faz parte do número
        if end + 1 < len(self.text) and self.text[end] == 'e':
            end += 1
            if self.text[end] in '+-':
                end += 1
            end = self._run(end, DIGITS)

        return end if end > pos else None

    def _unsigned_number(self, pos):
        if pos >= len(self.text):
            return None

        radix = {'&': OCTAL_DIGITS, '%': BINARY_DIGITS, '$': HEX_DIGITS}
        ch = self.text[pos]
        if ch in radix:
            end = self._run(pos + 1, radix[ch])
            return end if end > pos + 1 else None
        return self._decimal(pos)

    def _make_number(self):
        if self.current_char in '+-':
            return self._unsigned_number(self.pos + 1)
        return self._unsigned_number(self.pos)

    # --------------- identificadores ---------------
    def _make_identifier(self):
        limit = min(len(self.text), self.pos + MAX_IDENTIFIER_LENGTH)
        start = self.pos + 1 if self.current_char == '&' else self.pos
        if start >= limit or self.text[start] not in LETTERS:
            return None
        return self._run(start, LETTERS | DIGITS, limit)

    # ---------------- comentários ----------------
    def _comment_opener(self, pos):
        for opener in COMMENT_DELIMITERS:
            if self.text.startswith(opener, pos):
                return opener
        return None

    def _open_comment(self, pos, limit):
        opener = self._comment_opener(pos)
        frame = {
            'key': (pos, limit),
            'begin': pos,
            'closer': COMMENT_DELIMITERS[opener],
            'limit': limit,
            'current': pos + len(opener),
            'nested': [],
        }
        if opener == '//':
            newline = self.text.find('\n', pos, limit)
            if newline != -1:
                frame['limit'] = newline
        return frame

    def _make_comment(self, pos, limit):
        """Retorna (fim, aninhados) do comentário que começa em pos, ou None.

        Os comentários aninhados ficam numa pilha explícita de quadros; o
        resultado de cada (início, limite) é guardado em self.comments para
        que uma abertura sem fechamento seja examinada uma única vez.
        """
        if (pos, limit) in self.comments:
            return self.comments[(pos, limit)]

        stack = [self._open_comment(pos, limit)]
        while stack:
            frame = stack[-1]
            current = frame['current']
            result = None

            if current >= frame['limit']:
                # só o comentário de linha termina sem delimitador
                if not frame['closer']:
                    result = (frame['limit'], frame['nested'])
            elif frame['closer'] and self.text.startswith(frame['closer'], current, frame['limit']):
                result = (current + len(frame['closer']), frame['nested'])
            elif self._comment_opener(current):
                key = (current, frame['limit'])
                if key not in self.comments:
                    stack.append(self._open_comment(*key))
                    continue
                inner = self.comments[key]
                if inner is None:
                    frame['current'] = current + 1
                else:
                    end, children = inner
                    frame['nested'].append(Lexeme(LexemeType.Comment, current, end, list(children)))
                    frame['current'] = end
                continue
            else:
                frame['current'] = current + 1
                continue

            # quadro encerrado: com ou sem sucesso
            stack.pop()
            self.comments[frame['key']] = result

        return self.comments[(pos, limit)]

    # ---------------- strings ----------------
    def _make_char_string(self):
        limit = len(self.text)
        for eol in '\n\r':
            found = self.text.find(eol, self.pos, limit)
            if found != -1:
                limit = found

        current = self.pos
        while current < limit:
            ch = self.text[current]
            if ch == "'":
                closing = self.text.find("'", current + 1, limit)
                if closing == -1:
                    break
                current = closing + 1
            elif ch == '#':
                end = self._run(current + 1, DIGITS, limit)
                if end == current + 1:
                    break
                current = end
            else:
                break

        return current

    # ---------------- seleção ----------------
    def _next_lexeme(self):
        ch = self.current_char
        nxt = self._peek()
        token_type = None
        end = None
        lexemes = None

        if ch in ("'", '#'):
            token_type = LexemeType.CharacterString
            end = self._make_char_string()

        elif self._comment_opener(self.pos):
            token_type = LexemeType.Comment
            result = self._make_comment(self.pos, len(self.text))
            if result is not None:
                end, lexemes = result

        elif ch in LETTERS or (ch == '&' and nxt is not None and nxt in LETTERS):
            token_type = LexemeType.Identifier
            end = self._make_identifier()

        elif ch in DIGITS or ch in NUMBER_START or (ch == '&' and nxt is not None and nxt in DIGITS):
            token_type = LexemeType.Number
            end = self._make_number()

        if end is None or end <= self.pos:
            self._add_token(LexemeType.Symbol, self.pos + 1)
        else:
            self._add_token(token_type, end, lexemes)

    def tokenize(self):
        while self.current_char is not None:
            self._next_lexeme()
        return self.tokens

    def line_col(self, offset):
        """Linha e coluna (a partir de 1) de um offset do texto original."""
        line = self.input.count('\n', 0, offset) + 1
        col = offset - (self.input.rfind('\n', 0, offset) + 1) + 1
        return line, col


def tokenize(text):
    return Lexer(text).tokenize()
