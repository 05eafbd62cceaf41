"""
Core package for the post content parser.

- markup_tree: Parsed markup nodes and the HTML parser adapter
- content_parser: Grammar-driven conversion of markup trees into content
"""
