import pytest

from parser import (
    BinaryExpression, InvalidExpression, Literal, ParenExpression, Parser,
    Variable, parse, to_dict,
)
from dump import dump


@pytest.mark.parametrize('text, expected', [
    ('1+2', 'Binary(Literal(1)+Literal(2))'),
    ('5-2', 'Binary(Literal(5)-Literal(2))'),
    ('5*0', 'Binary(Literal(5)*Literal(0))'),
    ('s/0', 'Binary(Variable(s)/Literal(0))'),
    ('s+4+d-t', 'Binary(Binary(Binary(Variable(s)+Literal(4))+Variable(d))-Variable(t))'),
    ('s+4*d-t', 'Binary(Binary(Variable(s)+Binary(Literal(4)*Variable(d)))-Variable(t))'),
    ('(1+2)*4', 'Binary(Paren(Binary(Literal(1)+Literal(2)))*Literal(4))'),
    ('1+2*4', 'Binary(Literal(1)+Binary(Literal(2)*Literal(4)))'),
    ('1+(2*4)', 'Binary(Literal(1)+Paren(Binary(Literal(2)*Literal(4))))'),
    ('d+(f+5)*8-(4+(f-3)/3)',
     'Binary(Binary(Variable(d)+Binary(Paren(Binary(Variable(f)+Literal(5)))*Literal(8)))'
     '-Paren(Binary(Literal(4)+Binary(Paren(Binary(Variable(f)-Literal(3)))/Literal(3)))))'),
    ('(3)', 'Paren(Literal(3))'),
    ('((x))', 'Paren(Paren(Variable(x)))'),
    ('8/4/2', 'Binary(Binary(Literal(8)/Literal(4))/Literal(2))'),
    ('7', 'Literal(7)'),
    ('X', 'Variable(X)'),
])
def test_parse(text, expected):
    assert dump(parse(text)) == expected


def test_tree_structure():
    assert parse('(1+a)*4') == BinaryExpression(
        ParenExpression(BinaryExpression(Literal('1'), Variable('a'), '+')),
        Literal('4'),
        '*')


def test_nodes_are_immutable():
    node = parse('1+2')
    with pytest.raises(AttributeError):
        node.operator = '-'


def test_parser_instance():
    parser = Parser('a*b')
    tree = parser.parse()
    assert tree == BinaryExpression(Variable('a'), Variable('b'), '*')
    assert parser.operations == []
    assert parser.expressions == []


@pytest.mark.parametrize('text', [
    '',
    '(',
    ')',
    '(1+2',
    '1+2)',
    '1)+2',
    '1+',
    '+1',
    '*',
    '12',
    '1(2)',
    '()',
    '1 + 2',
    '1@2',
    '1^2',
])
def test_invalid_expressions(text):
    with pytest.raises(InvalidExpression):
        parse(text)


def test_invalid_expression_is_syntax_error():
    with pytest.raises(SyntaxError) as excinfo:
        parse('1+x?')
    assert excinfo.value.pos == 3


def test_to_dict():
    assert to_dict(parse('(a)-1')) == {
        'type': 'Binary',
        'op': '-',
        'args': [
            {'type': 'Paren', 'inner': {'type': 'Variable', 'name': 'a'}},
            {'type': 'Literal', 'value': '1'},
        ],
    }
