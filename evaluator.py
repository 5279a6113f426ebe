from parser import ExpressionVisitor


class Evaluator(ExpressionVisitor):
    def __init__(self, variables=None):
        self.symbol_table = dict(variables or {})

    def visit_Literal(self, node):
        return int(node.value)

    def visit_Variable(self, node):
        if node.name not in self.symbol_table:
            raise NameError(f"Variável '{node.name}' não definida.")
        return self.symbol_table[node.name]

    def visit_BinaryExpression(self, node):
        left = self.visit(node.left)
        right = self.visit(node.right)

        if node.operator == '+':
            return left + right
        if node.operator == '-':
            return left - right
        if node.operator == '*':
            return left * right
        # divisão sempre real
        return left / right

    def visit_ParenExpression(self, node):
        return self.visit(node.inner)


def evaluate(expression, variables=None):
    return Evaluator(variables).visit(expression)
