"""
API package containing the HTTP routes.

``router.py`` exposes a top‑level ``router`` that includes each
domain router from ``endpoints``; ``main.create_app`` mounts it under
``/api``.
"""
