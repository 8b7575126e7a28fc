# sassie_nc/file_naming.py
import re

# <campaign>[_shipboard]_<platform/instrument>[_<identifier>].nc
#  _shipboard is used for instruments operated from the R/V
#  <identifier> is optional: cast number, date range, glider ID, serial number, ...

_BAD_CHARS = re.compile(r"[^A-Za-z0-9_\-]")


def _clean(part, what):
    part = str(part).strip()
    if not part:
        raise ValueError(f"{what} must not be empty")
    if _BAD_CHARS.search(part):
        raise ValueError(f"{what} {part!r} may only contain letters, digits, '_' and '-'")
    return part


def build_filename(campaign, instrument, identifier=None, shipboard=False, ext=".nc"):
    """
    Build a file name following the campaign naming convention.

    >>> build_filename("SASSIE_Fall_2022", "TSG", shipboard=True)
    'SASSIE_Fall_2022_shipboard_TSG.nc'
    """
    if ext != ".nc":
        raise ValueError(f"use the '.nc' extension, not {ext!r}")

    parts = [_clean(campaign, "campaign")]
    if shipboard:
        parts.append("shipboard")
    parts.append(_clean(instrument, "platform/instrument"))
    if identifier is not None:
        parts.append(_clean(identifier, "identifier"))

    return "_".join(parts) + ext
