import os

# Read by the CLI only; library code takes its options as arguments.
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# Provider to use when -p/--provider is not given.  Empty → pick by file
# extension.
DEFAULT_PROVIDER: str = os.getenv("DEFAULT_PROVIDER", "").lower()
