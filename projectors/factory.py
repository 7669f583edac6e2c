"""
Projector Factory.

Builds any projection variant from its fixed name, so grid descriptions
read from files (e.g. a CMAQ ``GDTYP`` mapped to a name) can be turned into
projectors without a per-variant switch at every call site.
"""

from types import MappingProxyType
from typing import Mapping, Type

from projectors.albers import AlbersProjector
from projectors.base import Projector
from projectors.lambert import LambertProjector
from projectors.mercator import MercatorProjector
from projectors.stereographic import StereographicProjector


PROJECTORS: Mapping[str, Type[Projector]] = MappingProxyType({
    cls.variant_name.lower(): cls
    for cls in (LambertProjector, AlbersProjector, StereographicProjector, MercatorProjector)
})


def new_projector(name: str, **parameters: float) -> Projector:
    """Construct a projector by variant name.

    Parameters
    ----------
    name : str
        ``"Lambert"``, ``"Albers"``, ``"Stereographic"`` or ``"Mercator"``,
        case-insensitive.
    **parameters
        Keyword arguments of the variant's constructor.

    Raises
    ------
    ValueError
        If the name is unknown, or the parameters are invalid.
    """
    cls = PROJECTORS.get(name.strip().lower())
    if cls is None:
        known = ", ".join(c.variant_name for c in PROJECTORS.values())
        raise ValueError(f"Unknown projector '{name}'. Known: {known}")
    try:
        return cls(**parameters)
    except TypeError as error:
        raise ValueError(f"Invalid parameters for {cls.variant_name}: {error}") from error
