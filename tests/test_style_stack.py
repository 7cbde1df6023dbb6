"""Tests for mdterm.render.style_stack."""

from rich.style import Style

from mdterm.render.style_stack import StyleStack


def test_base_is_never_popped():
    stack = StyleStack(Style(color="red"))
    stack.pop()
    stack.pop()
    assert len(stack) == 1
    assert stack.current == stack.base


def test_layers_accumulate():
    stack = StyleStack(Style(color="red"))
    stack.push_layer(Style(bold=True))
    stack.push_layer(Style(italic=True))
    assert stack.current.bold
    assert stack.current.italic
    assert stack.current.color.name == "red"


def test_pop_restores_previous():
    stack = StyleStack(Style(color="red"))
    stack.push_layer(Style(bold=True))
    stack.pop()
    assert not stack.current.bold


def test_push_replaces_top():
    stack = StyleStack(Style(color="red", bold=True))
    stack.push(Style(color="blue"))
    assert stack.current.color.name == "blue"
    assert not stack.current.bold
