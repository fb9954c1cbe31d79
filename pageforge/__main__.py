"""Allow ``python -m pageforge``."""

from pageforge.cli import main

raise SystemExit(main())
