"""
Template tests.

Tests for whisker.template module:
- test_basic.py: Compilation, interpolation and escaping
- test_sections.py: Sections, inverted sections, list iteration
- test_lookup.py: Dotted paths, callables, object contexts
- test_partials.py: Partial expansion and the nesting guard
- test_parser.py: Token trees produced by parse()
- test_errors.py: Parse errors and invalid templates
- test_values.py: Emptiness, escaping and lookup helpers
- test_environment.py: Shared partials and globals
- test_config.py: Runtime configuration
- test_concurrency.py: Thread safety

Maps to: whisker/template/
"""
