"""
Version 1 of the portfolio API.

This subpackage bundles the JSON endpoints consumed by the admin page
and the public pages.  Breaking changes should go into a new version
subpackage.
"""
