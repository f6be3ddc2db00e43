#!/usr/bin/env python3
"""Version information for zimcheck."""

# PEP 440 compliant version for pip/wheel
__version__ = "1.0.0"
