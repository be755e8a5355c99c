"""Domain layer for securebank application.

Services live in their own modules (``securebank.domain.account``,
``securebank.domain.credentials``) and are imported from there; this package
does not import them eagerly because the database layer imports
``securebank.domain.entities``.
"""
