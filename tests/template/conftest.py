"""
Template test fixtures.

Pytest fixtures and test data for CompiledTemplate tests.
"""

import pytest


@pytest.fixture(scope="session")
def Template():
    """Get the compile() entry point from whisker."""
    from whisker import compile

    return compile


@pytest.fixture
def simple_template(Template):
    """A simple template with one variable."""
    return Template("Hello {{name}}!")


@pytest.fixture
def list_template(Template):
    """A template with a list section and an empty-list fallback."""
    return Template("{{#items}}<{{name}}>{{/items}}{{^items}}none{{/items}}")


# =============================================================================
# Test Data (shared across test modules)
# =============================================================================

# Basic variable substitution cases
BASIC_CASES = [
    ("{{x}}", {"x": "hello"}, "hello"),
    ("{{ name }}", {"name": "World"}, "World"),
    ("Hello {{name}}!", {"name": "Alice"}, "Hello Alice!"),
    ("{{a}} and {{b}}", {"a": "one", "b": "two"}, "one and two"),
    ("No variables here", {}, "No variables here"),
    ("{{missing}}", {}, ""),
]

# Number cases (zero counts as empty)
NUMBER_CASES = [
    ("{{x}}", {"x": 42}, "42"),
    ("{{x}}", {"x": 3.5}, "3.5"),
    ("{{x}}", {"x": -1}, "-1"),
    ("{{x}}", {"x": 0}, ""),
    ("{{x}}", {"x": 0.0}, ""),
]

# Section cases: (template, context, expected)
SECTION_CASES = [
    ("{{#a}}yes{{/a}}", {"a": []}, ""),
    ("{{#a}}yes{{/a}}", {"a": [1, 2]}, "yesyes"),
    ("{{#a}}yes{{/a}}", {"a": {"n": 1}}, "yes"),
    ("{{#a}}yes{{/a}}", {"a": {}}, ""),
    ("{{#a}}yes{{/a}}", {"a": True}, "yes"),
    ("{{#a}}yes{{/a}}", {"a": False}, ""),
    ("{{#a}}yes{{/a}}", {"a": None}, ""),
    ("{{#a}}yes{{/a}}", {"a": ""}, ""),
    ("{{#a}}yes{{/a}}", {"a": "text"}, "yes"),
    ("{{#a}}yes{{/a}}", {}, ""),
]

INVERTED_CASES = [
    ("{{^a}}empty{{/a}}", {"a": []}, "empty"),
    ("{{^a}}empty{{/a}}", {"a": [1]}, ""),
    ("{{^a}}empty{{/a}}", {"a": {}}, "empty"),
    ("{{^a}}empty{{/a}}", {"a": {"k": 1}}, ""),
    ("{{^a}}empty{{/a}}", {"a": 0}, "empty"),
    ("{{^a}}empty{{/a}}", {}, "empty"),
]

# Page-like template exercising every tag type
PAGE_TEMPLATE = """\
<h1>{{title}}</h1>
{{! navigation is a partial }}{{> nav}}
{{#posts}}<article>{{{body}}}<small>{{author.name}}</small></article>
{{/posts}}{{^posts}}<p>No posts</p>
{{/posts}}"""

PAGE_PARTIALS = {
    "nav": "<nav>{{#links}}<a>{{.}}</a>{{/links}}</nav>",
}
