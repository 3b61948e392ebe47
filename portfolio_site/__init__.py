"""
Top‑level package for the portfolio site.

This file makes ``portfolio_site`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``portfolio_site.app.main``.  Tests and the helper scripts at the
project root rely on these absolute imports.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
