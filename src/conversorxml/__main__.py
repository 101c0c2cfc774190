"""Allow ``python -m conversorxml``."""

from __future__ import annotations

from conversorxml.cli.main import main

raise SystemExit(main())
