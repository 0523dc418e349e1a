#!/usr/bin/env python3
"""
Box Layout - command line launcher for running from a source checkout.
"""

import os
import sys

# Add the package directory to the path
sys.path.append(os.path.abspath(os.path.dirname(__file__)))

from box_layout.main import main

if __name__ == "__main__":
    sys.exit(main())
