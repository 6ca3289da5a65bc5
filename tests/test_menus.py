import io
from types import SimpleNamespace

import pytest

from progbasics.item_ops import SumProduct
from progbasics.menus import (
    Button,
    ComputedState,
    Console,
    calculator_options,
    item_buttons,
    run_menu,
    select_option,
    state_buttons,
    text_options,
)


def make_console(*lines):
    out = io.StringIO()
    return Console(list(lines), out), out


def by_name(buttons, name):
    return next(b for b in buttons if b.name == name)


def test_console_reads_tokens_across_lines():
    console, _ = make_console("a b", "", "c")
    assert [console.read_token() for _ in range(3)] == ["a", "b", "c"]
    with pytest.raises(EOFError):
        console.read_token()


def test_console_write():
    console, out = make_console()
    console.write("xy")
    assert out.getvalue() == "xy"


def test_text_option_names():
    console, _ = make_console()
    assert [b.name for b in text_options(console)] == ['print "Hello"', "greet the user"]


def test_print_hello():
    console, out = make_console()
    by_name(text_options(console), 'print "Hello"').action()
    assert out.getvalue() == "Hello!\n"


def test_greet_user():
    console, out = make_console("Ann")
    by_name(text_options(console), "greet the user").action()
    assert out.getvalue() == "Enter your name: Hello, Ann!\n"


def test_calculator_add():
    console, out = make_console("2 3")
    by_name(calculator_options(console), "add two values").action()
    assert out.getvalue() == "Enter a: Enter b: 2 + 3 = 5\n"


def test_calculator_subtract_retries_bad_number():
    console, out = make_console("oops 7", "7")
    by_name(calculator_options(console), "subtract two values").action()
    assert out.getvalue().count("Enter a: ") == 2
    assert out.getvalue().endswith("7 - 7 = 0\n")


def test_select_option_skips_invalid():
    console, out = make_console("x 9 -1 1")
    options = text_options(console)
    chosen = select_option(options, console)
    assert chosen is options[1]
    assert '0 - print "Hello", ' in out.getvalue()


def test_select_option_eof():
    console, _ = make_console("5")
    with pytest.raises(EOFError):
        select_option(text_options(console), console)


def test_computed_state_reset():
    state = ComputedState(3.0, 4.0)
    state.reset()
    assert (state.a, state.b) == (0.0, 0.0)


def test_computed_state_recompute():
    state = ComputedState(1.5, 4.0)
    state.recompute()
    assert state.a == 1.5 * 2
    assert state.b == 4.0 + 1


def test_state_button_names():
    console, _ = make_console()
    names = [b.name for b in state_buttons(ComputedState(), SimpleNamespace(value=0.0), console)]
    assert names == [
        "Recompute",
        "Reset",
        "Print",
        "Add to a",
        "Add to b",
        "Add to other number",
        "Print hello",
    ]


def test_add_to_a_retries_until_number():
    state = ComputedState()
    console, out = make_console("abc", "4")
    by_name(state_buttons(state, SimpleNamespace(value=0.0), console), "Add to a").action()
    assert state.a == 4.0
    assert out.getvalue().count("Enter a number to add to the value:") == 2


def test_add_to_other_number():
    other = SimpleNamespace(value=1.0)
    state = ComputedState()
    console, _ = make_console("2.5")
    by_name(state_buttons(state, other, console), "Add to other number").action()
    assert other.value == 1.0 + 2.5
    assert (state.a, state.b) == (0.0, 0.0)


def test_print_state_button():
    state = ComputedState(2.0, 3.0)
    console, out = make_console()
    by_name(state_buttons(state, SimpleNamespace(value=0.0), console), "Print").action()
    assert out.getvalue() == "a: 2\nb: 3\n"


def test_run_menu_runs_until_out_of_range():
    state = ComputedState(1.0, 0.0)
    console, out = make_console("0 0 zz 3", "1", "7 0")
    buttons = state_buttons(state, SimpleNamespace(value=0.0), console)
    run_menu(buttons, console)
    assert state.a == 4.0 + 1.0
    assert state.b == 2.0
    assert "6: Print hello\n" in out.getvalue()


def test_run_menu_stops_at_eof():
    calls = []
    console, _ = make_console("0 0")
    run_menu([Button("tick", lambda: calls.append(1))], console)
    assert calls == [1, 1]


def test_item_buttons_compute_and_add_sum():
    items = [1.0, 2.0, 3.0, 4.0]
    original = list(items)
    result = SumProduct()
    console, _ = make_console()
    buttons = item_buttons(items, result, console)
    by_name(buttons, "Compute sum and product").action()
    assert result.sum == sum(original)
    by_name(buttons, "Add current sum to all items").action()
    assert items == [v + result.sum for v in original]


def test_item_buttons_print_and_reset():
    items = [1.0, 2.0]
    result = SumProduct()
    console, out = make_console("7 8")
    buttons = item_buttons(items, result, console)
    by_name(buttons, "Print all items").action()
    assert out.getvalue() == "1, 2, "
    by_name(buttons, "Reset items").action()
    assert items == [7.0, 8.0]


def test_item_buttons_print_result():
    result = SumProduct(sum=3.0, product=2.0)
    console, out = make_console()
    by_name(item_buttons([], result, console), "Print computed sum and product").action()
    assert out.getvalue() == "3, 2\n"