"""
Entry point: resolves the imports of one entry file.

Runs the resolver without installing the console script.  Useful when
the build tool invokes it from a checkout.

Usage:
    python main.py <root_path> <entry_file>

Installed console script:
    resolve-imports <root_path> <entry_file>
"""

import sys

from src.resolver.cli import main

if __name__ == "__main__":
    sys.exit(main())
