"""
Random number generation utilities.

Every generation call gets its own random source; nothing here is shared
between calls. Pass the same seed to reproduce a skyline.
"""

import uuid
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..core.alea_prng import AleaPRNG


def new_seed() -> str:
    """Return a short random seed string."""
    return str(uuid.uuid4())[:8]


def make_prng(seed: Optional[str] = None) -> "AleaPRNG":
    """
    Create an Alea PRNG for one generation call.

    Args:
        seed: Seed string; a random one is used when omitted

    Returns:
        AleaPRNG instance
    """
    from ..core.alea_prng import AleaPRNG

    return AleaPRNG(seed if seed is not None else new_seed())
