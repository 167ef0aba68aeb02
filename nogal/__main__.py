"""Allow ``python -m nogal``."""

from .main import main

raise SystemExit(main())
