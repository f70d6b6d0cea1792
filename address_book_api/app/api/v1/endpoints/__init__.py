"""
Endpoint subpackage for API v1.

``address_books`` manages the books of the shared system,
``contacts`` the contacts inside one book and ``search`` looks across
all books.  The routers are aggregated in ``router.py``.
"""
