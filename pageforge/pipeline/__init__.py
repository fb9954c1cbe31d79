"""Headless processing stages.

- `page_generator/`: configuration loading, page generation and export.
"""
