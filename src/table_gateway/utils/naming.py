"""
Naming convention helpers shared by table-name derivation and finder parsing.
"""

import re

_WORD_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def uncamelize(name: str) -> str:
    """
    Convert an upper- or lower-camel-case name to snake_case.

    Names that are already snake_case pass through unchanged.

    Examples:
        >>> uncamelize("UserName")
        'user_name'
        >>> uncamelize("HTTPStatus")
        'http_status'
        >>> uncamelize("user_name")
        'user_name'
    """
    return _WORD_BOUNDARY.sub("_", name).lower()
