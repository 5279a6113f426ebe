import pytest

from parser import ExpressionVisitor, Literal, parse
from dump import DumpVisitor, dump
from evaluator import Evaluator, evaluate


def test_dump_visitor_accumulates():
    visitor = DumpVisitor()
    parse('1+2').accept(visitor)
    assert str(visitor) == 'Binary(Literal(1)+Literal(2))'


def test_dump_helper():
    assert dump(parse('(3)')) == 'Paren(Literal(3))'


class CountingVisitor(ExpressionVisitor):
    def visit_Literal(self, node):
        return 1

    def visit_Variable(self, node):
        return 1

    def visit_BinaryExpression(self, node):
        return self.visit(node.left) + self.visit(node.right)

    def visit_ParenExpression(self, node):
        return self.visit(node.inner)


def test_custom_visitor():
    assert CountingVisitor().visit(parse('d+(f+5)*8-(4+(f-3)/3)')) == 8


def test_base_visitor_is_abstract():
    with pytest.raises(NotImplementedError):
        Literal('1').accept(ExpressionVisitor())


@pytest.mark.parametrize('text, variables, expected', [
    ('1+2*4', {}, 9),
    ('(1+2)*4', {}, 12),
    ('s+4+d-t', {'s': 1, 'd': 2, 't': 10}, -3),
    ('8/4/2', {}, 1.0),
    ('x*x', {'x': 1.5}, 2.25),
])
def test_evaluate(text, variables, expected):
    assert evaluate(parse(text), variables) == expected


def test_evaluate_unknown_variable():
    with pytest.raises(NameError):
        evaluate(parse('a+1'))


def test_evaluate_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        Evaluator().visit(parse('s/0'))
