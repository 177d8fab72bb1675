"""Version information for cdepgraph."""

# Semantic versioning: MAJOR.MINOR.PATCH
__version__ = "0.2.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 0.2.0 - Module filters and private clusters in the graph writer
#         - --include / --private filters (CLI, YAML, CDEPGRAPH_* env)
#         - Edges rendered between clustered nodes, one per distinct call
#         - modules command with public/private counts
# 0.1.0 - Initial release
#         - Line lexer and call-graph parser with cross-file de-duplication
#         - Public-function subgraph rendering from templates
