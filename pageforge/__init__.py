"""Landing page generator package.

Builds a complete landing page (markup, stylesheet, behavior script and a
self-contained preview) from a single configuration document describing a
product, a visual style and the optional sections and interactive features
to include.

Package Structure
-----------------
- `pipeline/page_generator/`:
    The generation engine plus its loader, exporter and runner.
- `cli.py`: Command-line entry point (`pageforge`, `python -m pageforge`).
- `config.py`: Configuration constants (paths, filenames, timings) as UPPER_SNAKE_CASE.
- `exceptions.py`: Project-specific exception classes.
- `i18n.py`: Localized copy for generated pages.

Examples
--------
>>> from pageforge.pipeline.page_generator import Configuration, generate_landing_page
>>> generate_landing_page(Configuration(product_name="Acme")).script != ""
True
"""
