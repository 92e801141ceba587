"""Sanitizing of application names sent to the administration interface."""

import re
from typing import Optional

# Letters, digits and underscore may start a name; '-', '.', '/', ';' and '#'
# are additionally allowed after the first character.
_VALID_NAME = re.compile(r"\w[\w\-./;#]*")
_INVALID_CHAR = re.compile(r"[^\w\-./;#]")


def sanitize_name(name: Optional[str]) -> Optional[str]:
    """Return name usable as a deployed application name.

    Valid names and None are returned unchanged. Anything else gets a leading
    underscore and every disallowed character replaced by an underscore.
    """
    if name is None or _VALID_NAME.fullmatch(name):
        return name
    return "_" + _INVALID_CHAR.sub("_", name)
