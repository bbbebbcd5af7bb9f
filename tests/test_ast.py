import pytest

from monkey.ast import (
    ArrayLiteral,
    BlockStatement,
    BooleanLiteral,
    CallExpression,
    ExpressionStatement,
    FunctionLiteral,
    HashLiteral,
    Identifier,
    IfExpression,
    IndexExpression,
    InfixExpression,
    IntegerLiteral,
    LetStatement,
    MacroLiteral,
    NullLiteral,
    PrefixExpression,
    Program,
    ReturnStatement,
    StringLiteral,
    modify,
)


def one():
    return IntegerLiteral(1)


def two():
    return IntegerLiteral(2)


def block(*exprs):
    return BlockStatement(tuple(ExpressionStatement(e) for e in exprs))


def turn_one_into_two(node):
    if isinstance(node, IntegerLiteral) and node.value == 1:
        return two()
    return node


# -----------------------------------------------------
# Rendering
# -----------------------------------------------------

def test_let_statement_rendering():
    program = Program((LetStatement(Identifier("myVar"), Identifier("anotherVar")),))
    assert str(program) == "let myVar = anotherVar;"


@pytest.mark.parametrize(
    "node,expected",
    [
        (ReturnStatement(IntegerLiteral(5)), "return 5;"),
        (InfixExpression(Identifier("a"), "+", Identifier("b")), "(a+b)"),
        (PrefixExpression("!", BooleanLiteral(True)), "(!true)"),
        (IndexExpression(Identifier("arr"), IntegerLiteral(1)), "(arr[1])"),
        (CallExpression(Identifier("add"), (one(), two())), "add(1,2)"),
        (CallExpression(Identifier("f")), "f()"),
        (ArrayLiteral((one(), two())), "[1,2]"),
        (HashLiteral(((StringLiteral("a"), one()),)), '{"a":1}'),
        (StringLiteral("hi there"), '"hi there"'),
        (NullLiteral(), "null"),
        (
            FunctionLiteral(
                (Identifier("x"), Identifier("y")),
                block(InfixExpression(Identifier("x"), "+", Identifier("y"))),
            ),
            "fn(x,y){(x+y)}",
        ),
        (MacroLiteral((Identifier("x"),), block(Identifier("x"))), "macro(x){x}"),
        (IfExpression(Identifier("x"), block(Identifier("y"))), "if(x) {y}"),
        (
            IfExpression(
                InfixExpression(Identifier("x"), "<", Identifier("y")),
                block(Identifier("x")),
                block(Identifier("y")),
            ),
            "if(x<y) {x} else {y}",
        ),
    ],
)
def test_node_rendering(node, expected):
    assert str(node) == expected


def test_statement_lists_separate_expression_statements():
    program = Program((ExpressionStatement(Identifier("a")), ExpressionStatement(Identifier("b"))))
    assert str(program) == "a;b"

    body = BlockStatement(
        (LetStatement(Identifier("x"), one()), ExpressionStatement(Identifier("x")))
    )
    assert str(body) == "{let x = 1;x}"


def test_empty_program_renders_empty():
    assert str(Program()) == ""
    assert str(BlockStatement()) == "{}"


# -----------------------------------------------------
# modify
# -----------------------------------------------------

@pytest.mark.parametrize(
    "node,expected",
    [
        (one(), two()),
        (Program((ExpressionStatement(one()),)), Program((ExpressionStatement(two()),))),
        (InfixExpression(one(), "+", two()), InfixExpression(two(), "+", two())),
        (InfixExpression(two(), "+", one()), InfixExpression(two(), "+", two())),
        (PrefixExpression("-", one()), PrefixExpression("-", two())),
        (IndexExpression(one(), one()), IndexExpression(two(), two())),
        (
            IfExpression(one(), block(one()), block(one())),
            IfExpression(two(), block(two()), block(two())),
        ),
        (IfExpression(one(), block(one())), IfExpression(two(), block(two()))),
        (ReturnStatement(one()), ReturnStatement(two())),
        (LetStatement(Identifier("x"), one()), LetStatement(Identifier("x"), two())),
        (
            FunctionLiteral((), block(one())),
            FunctionLiteral((), block(two())),
        ),
        (
            MacroLiteral((Identifier("a"),), block(one())),
            MacroLiteral((Identifier("a"),), block(two())),
        ),
        (ArrayLiteral((one(), one())), ArrayLiteral((two(), two()))),
        (
            CallExpression(Identifier("f"), (one(), two())),
            CallExpression(Identifier("f"), (two(), two())),
        ),
        (HashLiteral(((one(), one()), (one(), one()))), HashLiteral(((two(), two()), (two(), two())))),
    ],
)
def test_modify_reaches_every_child(node, expected):
    assert modify(node, turn_one_into_two) == expected


def test_modify_does_not_mutate_input():
    original = Program((ExpressionStatement(InfixExpression(one(), "+", one())),))
    modified = modify(original, turn_one_into_two)
    assert str(original) == "(1+1)"
    assert str(modified) == "(2+2)"


def test_modify_is_bottom_up():
    seen = []

    def record(node):
        seen.append(str(node))
        return node

    modify(InfixExpression(one(), "+", PrefixExpression("-", two())), record)
    assert seen == ["1", "2", "(-2)", "(1+(-2))"]


def test_modify_rewrites_call_callee_and_parameters():
    def rename(node):
        if isinstance(node, Identifier) and node.value == "old":
            return Identifier("new")
        return node

    fn = FunctionLiteral((Identifier("old"),), block(CallExpression(Identifier("old"), (Identifier("old"),))))
    assert str(modify(fn, rename)) == "fn(new){new(new)}"
