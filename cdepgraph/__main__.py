"""Allow ``python -m cdepgraph``."""

from cdepgraph.interfaces.cli.main import main

raise SystemExit(main())
