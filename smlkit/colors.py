"""ANSI escape sequences for coloured terminal text."""

from __future__ import annotations

from enum import StrEnum


class Color(StrEnum):
    """ANSI colour and style escape sequences."""

    # Regular text
    BLK = "\x1b[0;30m"
    RED = "\x1b[0;31m"
    GRN = "\x1b[0;32m"
    YEL = "\x1b[0;33m"
    BLU = "\x1b[0;34m"
    MAG = "\x1b[0;35m"
    CYN = "\x1b[0;36m"
    WHT = "\x1b[0;37m"

    # Bold text
    BBLK = "\x1b[1;30m"
    BRED = "\x1b[1;31m"
    BGRN = "\x1b[1;32m"
    BYEL = "\x1b[1;33m"
    BBLU = "\x1b[1;34m"
    BMAG = "\x1b[1;35m"
    BCYN = "\x1b[1;36m"
    BWHT = "\x1b[1;37m"

    # Underlined text
    UBLK = "\x1b[4;30m"
    URED = "\x1b[4;31m"
    UGRN = "\x1b[4;32m"
    UYEL = "\x1b[4;33m"
    UBLU = "\x1b[4;34m"
    UMAG = "\x1b[4;35m"
    UCYN = "\x1b[4;36m"
    UWHT = "\x1b[4;37m"

    # Background
    BLKB = "\x1b[40m"
    REDB = "\x1b[41m"
    GRNB = "\x1b[42m"
    YELB = "\x1b[43m"
    BLUB = "\x1b[44m"
    MAGB = "\x1b[45m"
    CYNB = "\x1b[46m"
    WHTB = "\x1b[47m"

    # High-intensity background
    BLKHB = "\x1b[0;100m"
    REDHB = "\x1b[0;101m"
    GRNHB = "\x1b[0;102m"
    YELHB = "\x1b[0;103m"
    BLUHB = "\x1b[0;104m"
    MAGHB = "\x1b[0;105m"
    CYNHB = "\x1b[0;106m"
    WHTHB = "\x1b[0;107m"

    # High-intensity text
    HBLK = "\x1b[0;90m"
    HRED = "\x1b[0;91m"
    HGRN = "\x1b[0;92m"
    HYEL = "\x1b[0;93m"
    HBLU = "\x1b[0;94m"
    HMAG = "\x1b[0;95m"
    HCYN = "\x1b[0;96m"
    HWHT = "\x1b[0;97m"

    # Bold high-intensity text
    BHBLK = "\x1b[1;90m"
    BHRED = "\x1b[1;91m"
    BHGRN = "\x1b[1;92m"
    BHYEL = "\x1b[1;93m"
    BHBLU = "\x1b[1;94m"
    BHMAG = "\x1b[1;95m"
    BHCYN = "\x1b[1;96m"
    BHWHT = "\x1b[1;97m"

    RESET = "\x1b[0m"


def colorize(text: str, color: Color | str) -> str:
    """Wrap *text* in *color* and a trailing reset sequence.

    *color* may be a :class:`Color` or its escape sequence; anything else
    raises ``ValueError``.
    """
    return f"{Color(color)}{text}{Color.RESET}"