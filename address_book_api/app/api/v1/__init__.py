"""
Version 1 of the Address Book API.

Breaking changes belong in a new version subpackage (e.g. ``v2``).
"""
