"""Entry point for running pyemitter as a module.

This file allows the example to be run with: python -m pyemitter
"""

from pyemitter.app import main

if __name__ == "__main__":
    main()
