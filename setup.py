"""
FastTranslation Setup Configuration

Minimal setup.py for backward compatibility.
All configuration lives in pyproject.toml following PEP 517/518.
"""

from setuptools import setup

setup()
