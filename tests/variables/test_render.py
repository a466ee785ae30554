"""
Tests for the marker renderers, including degraded token streams.
"""

from markdown_it.token import Token


def test_definition_without_table_renders_literal(md):
    tokens = md.parse("{{> v x }}\n\n{{ v }}\n", {})
    # Рендер с чужим env: таблицы нет, но ничего не падает
    html = md.renderer.render(tokens, md.options, {})
    assert html == "<p>{{&gt; v x }}</p>\n<p>x</p>\n"


def test_definition_without_name_renders_literal(md):
    token = Token("variable_definition", "", 0)
    token.markup = "{{&gt; v x }}"
    assert md.renderer.render([token], md.options, {}) == "<p>{{&gt; v x }}</p>\n"


def test_reference_without_content_renders_nothing(md):
    token = Token("variable", "", 0)
    assert md.renderer.renderInline([token], md.options, {}) == ""


def test_definition_hidden_only_when_referenced(md):
    env = {}
    tokens = md.parse("{{> a x }}\n{{> b y }}\n\n{{ a }}\n", env)
    html = md.renderer.render(tokens, md.options, env)
    assert html == "<p>{{&gt; b y }}</p>\n<p>x</p>\n"
