"""Package entry point for ``python -m radix_converter``.

Delegates to the CLI's main() function.
"""

from radix_converter.cli import main

if __name__ == "__main__":
    main()
