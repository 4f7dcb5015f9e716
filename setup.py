#!/usr/bin/env python
"""
Setup.py for backward compatibility.
Configuration is in pyproject.toml (PEP 517/518).
"""

from setuptools import setup

setup()
