"""Package entry point for the StarDate Converter.

This file enables launching the application via ``python -m stardate_converter``.

Usage
-----

.. code-block:: bash

    python -m stardate_converter              # window, or console loop when headless
    python -m stardate_converter --cli        # console loop
    python -m stardate_converter 2364-05-01   # convert and exit
"""

import sys

from .main import main


if __name__ == "__main__":
    sys.exit(main())
