from parser import ExpressionVisitor


class DumpVisitor(ExpressionVisitor):
    def __init__(self):
        self.parts = []

    def visit_Literal(self, node):
        self.parts.append(f"Literal({node.value})")

    def visit_Variable(self, node):
        self.parts.append(f"Variable({node.name})")

    def visit_BinaryExpression(self, node):
        self.parts.append("Binary(")
        node.left.accept(self)
        self.parts.append(node.operator)
        node.right.accept(self)
        self.parts.append(")")

    def visit_ParenExpression(self, node):
        self.parts.append("Paren(")
        node.inner.accept(self)
        self.parts.append(")")

    def __str__(self):
        return "".join(self.parts)


def dump(expression):
    visitor = DumpVisitor()
    expression.accept(visitor)
    return str(visitor)
