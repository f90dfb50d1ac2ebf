"""
Tree-sitter integration: language loading, parsing and JSX node conversion.
"""
