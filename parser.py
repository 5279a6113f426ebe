# parser.py
"""
Parser de expressões aritméticas – precedência de operadores
-------------------------------------------------------------
* Shift/reduce com duas pilhas: expressões e operadores pendentes
* Operandos de um único caractere: dígitos (Literal) e letras (Variable)
* Operadores binários  + − * /  e parênteses
* Um sentinela de fim de texto força a redução final
USO:
    from parser import parse
    parse("(1+2)*4").accept(visitor)
"""

from dataclasses import dataclass

# ───────────────── AST ─────────────────

class Expression:
    def accept(self, visitor):
        method = getattr(visitor, f"visit_{type(self).__name__}")
        return method(self)


@dataclass(frozen=True)
class Literal(Expression):
    value: str


@dataclass(frozen=True)
class Variable(Expression):
    name: str


@dataclass(frozen=True)
class BinaryExpression(Expression):
    left: Expression
    right: Expression
    operator: str


@dataclass(frozen=True)
class ParenExpression(Expression):
    inner: Expression


class ExpressionVisitor:
    """Interface de visitação: uma função por tipo de nó."""

    def visit(self, node):
        return node.accept(self)

    def visit_Literal(self, node):
        raise NotImplementedError

    def visit_Variable(self, node):
        raise NotImplementedError

    def visit_BinaryExpression(self, node):
        raise NotImplementedError

    def visit_ParenExpression(self, node):
        raise NotImplementedError


def to_dict(node):
    """Converte a árvore em dicionários (para json.dumps)."""
    if isinstance(node, Literal):
        return {"type": "Literal", "value": node.value}
    if isinstance(node, Variable):
        return {"type": "Variable", "name": node.name}
    if isinstance(node, BinaryExpression):
        return {"type": "Binary", "op": node.operator,
                "args": [to_dict(node.left), to_dict(node.right)]}
    return {"type": "Paren", "inner": to_dict(node.inner)}

# ──────────────────── PARSER ────────────────────

END_OF_TEXT = '@'

PRIORITIES = {
    '(': 10,
    '*': 2, '/': 2,
    '+': 1, '-': 1,
    ')': 0,
    END_OF_TEXT: -1,
}

BINARY_OPERATORS = {'+', '-', '*', '/'}


class InvalidExpression(SyntaxError):
    def __init__(self, message, pos=None):
        if pos is not None:
            message = f"{message} (posição {pos})"
        super().__init__(message)
        self.pos = pos


class Parser:
    """Parser shift/reduce guiado pela tabela de prioridades."""

    def __init__(self, text):
        self.text = text
        self.pos = 0
        self.expressions = []
        self.operations = []

    def curr(self):
        # o sentinela fica logo depois do último caractere
        if self.pos < len(self.text):
            return self.text[self.pos]
        if self.pos == len(self.text):
            return END_OF_TEXT
        return None

    def _pop_expression(self):
        if not self.expressions:
            raise InvalidExpression("Operandos insuficientes", self.pos)
        return self.expressions.pop()

    def _shift(self, ch):
        self.operations.append(ch)
        self.pos += 1

    def _reduce(self):
        right = self._pop_expression()
        left = self._pop_expression()
        operation = self.operations.pop()
        if operation not in BINARY_OPERATORS:
            raise InvalidExpression(f"Parêntese '{operation}' sem par", self.pos)
        self.expressions.append(BinaryExpression(left, right, operation))

    def parse(self):
        if not self.text:
            raise InvalidExpression("Expressão vazia")

        while True:
            ch = self.curr()

            if self.operations and self.operations[-1] == END_OF_TEXT:
                break

            if ch == END_OF_TEXT and self.pos < len(self.text):
                raise InvalidExpression(f"Caractere inválido '{ch}'", self.pos)

            if ch == ')' and self.operations and self.operations[-1] == '(':
                self.operations.pop()
                self.expressions.append(ParenExpression(self._pop_expression()))
                self.pos += 1
                continue

            if ch in PRIORITIES:
                top = self.operations[-1] if self.operations else None
                if top is None or top == '(' or PRIORITIES[top] < PRIORITIES[ch]:
                    self._shift(ch)
                else:
                    self._reduce()
            elif ch.isascii() and ch.isdigit():
                self.expressions.append(Literal(ch))
                self.pos += 1
            elif ch.isascii() and ch.isalpha():
                self.expressions.append(Variable(ch))
                self.pos += 1
            else:
                raise InvalidExpression(f"Caractere inválido '{ch}'", self.pos)

        self.operations.pop()
        if self.operations:
            raise InvalidExpression(f"'{self.operations[-1]}' sem fechamento", self.pos)
        if len(self.expressions) != 1:
            raise InvalidExpression("Expressão mal‑formada – sobram operandos", self.pos)
        return self.expressions.pop()


def parse(text):
    return Parser(text).parse()
