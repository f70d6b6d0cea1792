"""
Pydantic schema definitions.

``contact`` holds the validated contact record and its patch and
response shapes; ``address_book`` holds the request and response
bodies for address book endpoints.
"""
