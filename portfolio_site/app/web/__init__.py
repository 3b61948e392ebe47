"""
Server‑rendered pages.

``pages`` defines the public routes (home, software, games, highlight,
card detail) and the admin page; ``display`` holds the link helpers
the templates use.  Templates only ever read a card's stored
``shortDescription``.
"""
