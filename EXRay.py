# -*- coding: utf-8 -*-
"""
Standalone launcher for the EXRay viewer.

Lets end-users start the GUI simply by running:

    python EXRay.py [image]

The application itself lives under the `exray/` package; this is a thin
wrapper around `exray.main.main()`.
"""

from exray.main import main

if __name__ == "__main__":
    main()
