"""Package entry point for ``python -m wordify``.

Delegates to the CLI's main() function.
"""

from wordify.cli import main

if __name__ == "__main__":
    main()
