import sys
import json
from lexer import Lexer
from parser import Parser, InvalidExpression, to_dict
from dump import dump
from evaluator import evaluate

USAGE = (
    "Uso: python main.py <arquivo_fonte> [--json]\n"
    "     python main.py --expr <expressao> [--ast] [nome=valor ...]"
)


def print_lexemes(lexer, lexemes):
    pending = [(lexeme, 0) for lexeme in reversed(lexemes)]
    while pending:
        lexeme, indent = pending.pop()
        line, col = lexer.line_col(lexeme.begin)
        text = lexer.input[lexeme.begin:lexeme.end]
        print(f"{'  ' * indent}{lexeme.type.value:16} [{lexeme.begin},{lexeme.end}] "
              f"{text!r:20} (Line: {line}, Col: {col})")
        pending.extend((child, indent + 1) for child in reversed(lexeme.lexemes))


def process_file(fname, as_json=False):
    with open(fname, "r", encoding="utf-8") as fp:
        source = fp.read()

    lexer = Lexer(source)
    lexemes = lexer.tokenize()

    if as_json:
        print(json.dumps([l.to_dict() for l in lexemes], indent=2))
    elif lexemes:
        print("Lexemas:")
        print_lexemes(lexer, lexemes)
    else:
        print("Nenhum lexema encontrado.")


def parse_assignments(args):
    variables = {}
    for arg in args:
        name, sep, value = arg.partition('=')
        if not sep or len(name) != 1 or not name.isalpha():
            raise ValueError(f"Atribuição inválida '{arg}' (esperado nome=valor)")
        variables[name] = float(value) if '.' in value else int(value)
    return variables


def process_expression(text, show_ast=False, assignments=()):
    expression = Parser(text).parse()
    print(dump(expression))

    if show_ast:
        print(json.dumps(to_dict(expression), indent=2))

    if assignments:
        print(evaluate(expression, parse_assignments(assignments)))


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    flags = {a for a in args if a.startswith('--')}
    positional = [a for a in args if not a.startswith('--')]
    if not positional:
        print(USAGE)
        return 1

    try:
        if '--expr' in flags:
            process_expression(positional[0], '--ast' in flags, positional[1:])
        else:
            process_file(positional[0], '--json' in flags)
    except FileNotFoundError:
        print(f"Erro: Arquivo '{positional[0]}' não encontrado.")
        return 1
    except UnicodeDecodeError as e:
        print(f"Erro: Arquivo '{positional[0]}' não está em UTF-8: {e}")
        return 1
    except OSError as e:
        print(f"Erro ao ler o arquivo '{positional[0]}': {e}")
        return 1
    except InvalidExpression as e:
        print(f"Erro de Parser: {e}")
        return 1
    except (NameError, ValueError, ZeroDivisionError) as e:
        print(f"Erro de avaliação: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
