import pytest

from monkey import errors
from monkey.ast.nodes import Program
from monkey.reader.parser import parse
from monkey.types import NULL, Integer, Macro
from monkey.types.environment import Environment
from monkey.types.macro_environment import MacroEnvironment, define_macros, expand_macros


def parse_program(source: str) -> Program:
    return parse(source).raise_for_errors()


# -------------------------
# Fixtures
# -------------------------

@pytest.fixture
def base_env():
    """Base environment for macros"""
    return Environment()


@pytest.fixture
def macro_env():
    """Macro environment fixture"""
    return MacroEnvironment()


def expand(source, macro_env, env):
    program = define_macros(parse_program(source), env, macro_env)
    return expand_macros(program, macro_env)


# -------------------------
# Definition pass
# -------------------------

def test_define_macros(macro_env, base_env):
    source = """
    let number = 1;
    let function = fn(x, y) { x + y };
    let mymacro = macro(x, y) { x + y; };
    """
    program = macro_env.define_macros(parse_program(source), base_env)

    assert len(program.statements) == 2
    assert str(program) == "let number = 1;let function = fn(x,y){(x+y)};"
    # definitions are not evaluated
    assert base_env.find("number") is None
    assert base_env.find("function") is None
    assert base_env.find("mymacro") is None

    macro = macro_env.get("mymacro")
    assert isinstance(macro, Macro)
    assert [p.value for p in macro.parameters] == ["x", "y"]
    assert str(macro.body) == "{(x+y)}"
    assert macro.env is base_env


def test_only_top_level_macros_are_defined(macro_env, base_env):
    source = "let f = fn() { let inner = macro() { quote(1) }; 1 };"
    program = macro_env.define_macros(parse_program(source), base_env)
    assert len(program.statements) == 1
    assert not macro_env.is_macro("inner")


def test_redefinition_replaces_macro(macro_env, base_env):
    source = """
    let m = macro() { quote(1) };
    let m = macro() { quote(2) };
    m();
    """
    assert str(expand(source, macro_env, base_env)) == "2"


# -------------------------
# Expansion
# -------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        (
            """
            let infixExpression = macro() { quote(1 + 2); };
            infixExpression();
            """,
            "(1 + 2)",
        ),
        (
            """
            let reverse = macro(a, b) { quote(unquote(b) - unquote(a)); };
            reverse(2 + 2, 10 - 5);
            """,
            "(10 - 5) - (2 + 2)",
        ),
        (
            """
            let unless = macro(condition, consequence, alternative) {
                quote(if (!(unquote(condition))) {
                    unquote(consequence);
                } else {
                    unquote(alternative);
                });
            };
            unless(10 > 5, puts("not greater"), puts("greater"));
            """,
            'if (!(10 > 5)) { puts("not greater") } else { puts("greater") }',
        ),
    ],
)
def test_expand_macros(macro_env, base_env, source, expected):
    expanded = expand(source, macro_env, base_env)
    assert str(expanded) == str(parse_program(expected))


def test_reverse_sub_renders_exactly(macro_env, base_env):
    source = """
    let reverse = macro(a, b) { quote(unquote(b) - unquote(a)); };
    reverse(1 + 2, 3 + 4)
    """
    assert str(expand(source, macro_env, base_env)) == "((3+4)-(1+2))"


@pytest.mark.parametrize(
    "source,expected",
    [
        # argument slots
        ("let m = macro(x) { quote(unquote(x) * 2) }; f(m(3));", "f((3*2))"),
        ("let m = macro(x) { quote(unquote(x) * 2) }; [1, m(3)];", "[1,(3*2)]"),
        ("let m = macro(x) { quote(unquote(x) * 2) }; {m(1): m(2)};", "{(1*2):(2*2)}"),
        ("let m = macro(x) { quote(unquote(x) * 2) }; a[m(1)];", "(a[(1*2)])"),
        ("let m = macro(x) { quote(unquote(x) * 2) }; -m(1);", "(-(1*2))"),
        ("let m = macro(x) { quote(unquote(x) * 2) }; let y = m(1);", "let y = (1*2);"),
        ("let m = macro(x) { quote(unquote(x) * 2) }; fn() { return m(1); };", "fn(){return (1*2);}"),
        ("let m = macro(x) { quote(unquote(x) * 2) }; if (m(1)) { m(2) } else { m(3) };",
         "if(1*2) {(2*2)} else {(3*2)}"),
        # callee slot
        ("let pick = macro() { quote(g) }; pick()(1);", "g(1)"),
    ],
)
def test_expansion_reaches_every_slot(macro_env, base_env, source, expected):
    assert str(expand(source, macro_env, base_env)) == expected


def test_nested_macro_calls_expand_innermost_first(macro_env, base_env):
    source = """
    let twice = macro(x) { quote(unquote(x) + unquote(x)) };
    twice(twice(1));
    """
    assert str(expand(source, macro_env, base_env)) == "((1+1)+(1+1))"


def test_arguments_are_not_evaluated(macro_env, base_env):
    source = """
    let ignore = macro(x) { quote(1) };
    ignore(undefined_thing());
    """
    assert str(expand(source, macro_env, base_env)) == "1"


def test_macro_body_may_return(macro_env, base_env):
    source = "let m = macro(x) { return quote(unquote(x) + 1); }; m(1);"
    assert str(expand(source, macro_env, base_env)) == "(1+1)"


def test_non_macro_calls_are_untouched(macro_env, base_env):
    source = "let m = macro() { quote(1) }; other(2);"
    assert str(expand(source, macro_env, base_env)) == "other(2)"


def test_expansion_does_not_mutate_input(macro_env, base_env):
    program = define_macros(
        parse_program("let m = macro() { quote(1) }; m();"), base_env, macro_env
    )
    expanded = expand_macros(program, macro_env)
    assert str(program) == "m()"
    assert str(expanded) == "1"


# -------------------------
# Errors
# -------------------------

def test_macro_arity_mismatch(macro_env, base_env):
    source = "let m = macro(a) { quote(unquote(a)) }; m(1, 2);"
    with pytest.raises(errors.MonkeyArityError):
        expand(source, macro_env, base_env)


def test_macro_must_return_quote(macro_env, base_env):
    source = "let m = macro() { 1 }; m();"
    with pytest.raises(errors.MonkeyMacroContractError) as excinfo:
        expand(source, macro_env, base_env)
    assert "INTEGER" in str(excinfo.value)
    assert not isinstance(excinfo.value, errors.MonkeyEvaluationError)


def test_errors_in_macro_body_propagate(macro_env, base_env):
    source = "let m = macro() { quote(unquote(1 + true)) }; m();"
    with pytest.raises(errors.MonkeyTypeError):
        expand(source, macro_env, base_env)


# -------------------------
# Through the interpreter
# -------------------------

def test_reverse_sub_evaluates(interp):
    source = """
    let reverse = macro(a, b) { quote(unquote(b) - unquote(a)); };
    reverse(1 + 2, 3 + 4)
    """
    assert str(interp.expand(source)) == "((3+4)-(1+2))"
    assert interp.eval(source) == Integer(4)


def test_unless_macro_evaluates(interp):
    source = """
    let unless = macro(cond, cons, alt) {
        quote(if (!(unquote(cond))) { unquote(cons) } else { unquote(alt) });
    };
    unless(10 > 5, "not greater", "greater");
    """
    assert interp.eval(source).inspect() == "greater"


def test_macro_inside_function_body(interp):
    source = """
    let double = macro(x) { quote(unquote(x) * 2) };
    let f = fn(y) { double(y + 1) };
    f(4);
    """
    assert interp.eval(source) == Integer(10)


def test_macros_persist_between_inputs(interp):
    assert interp.eval("let m = macro(x) { quote(unquote(x) + unquote(x)) };") is NULL
    assert interp.eval("m(21)") == Integer(42)


def test_macro_closure_environment(interp):
    interp.eval("let k = 5;")
    assert interp.eval("let m = macro() { quote(unquote(k)) }; m()") == Integer(5)


def test_nested_macro_literal_is_inert(interp):
    value = interp.eval("let f = fn() { let m = macro() { quote(1) }; m }; f()")
    assert isinstance(value, Macro)
    assert value.inspect() == "macro(){quote(1)}"
    with pytest.raises(errors.MonkeyTypeError) as excinfo:
        interp.eval("let g = fn() { let m = macro() { quote(1) }; m() }; g()")
    assert str(excinfo.value) == "MACRO is not callable"
