"""
Top‑level package for the Address Book API.

Makes ``address_book_api`` a package so that modules within ``app``
can be imported using fully qualified names like
``address_book_api.app.main``.  All functionality lives in submodules
under ``app``.
"""

__all__ = []
