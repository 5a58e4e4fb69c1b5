"""
Dummy buffers — Placeholder buffers that stand for a purpose

When a purpose has no buffer yet, a dummy buffer gives it something
to display. The buffer name encodes the purpose:

    *pu-dummy-edit*

so the classifier can recover the purpose from the name alone,
without consulting any configuration table.

No escaping is done. A purpose name is embedded verbatim.
"""

import re
from typing import TYPE_CHECKING, Optional

from .modes import FUNDAMENTAL_MODE
from .purposes import Purpose, PurposeLike

if TYPE_CHECKING:
    from .host import Buffer, Host


DUMMY_PREFIX = "*pu-dummy-"
DUMMY_SUFFIX = "*"

_DUMMY_NAME_RE = re.compile(
    r"^" + re.escape(DUMMY_PREFIX) + r"(.+)" + re.escape(DUMMY_SUFFIX) + r"$",
    re.DOTALL,
)


def encode(purpose: PurposeLike) -> str:
    """Dummy buffer name for a purpose."""
    return f"{DUMMY_PREFIX}{Purpose(purpose).name}{DUMMY_SUFFIX}"


def decode(name: str) -> Optional[Purpose]:
    """Purpose embedded in a dummy buffer name, or None for other names."""
    match = _DUMMY_NAME_RE.match(name)
    if match is None:
        return None
    return Purpose(match.group(1))


def is_dummy_name(name: str) -> bool:
    return _DUMMY_NAME_RE.match(name) is not None


def create_dummy_buffer(host: "Host", purpose: PurposeLike) -> "Buffer":
    """Get or create the dummy buffer for a purpose."""
    return host.get_buffer_create(encode(purpose), mode=FUNDAMENTAL_MODE)
