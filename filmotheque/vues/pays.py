"""Countries a film or a user can belong to."""

from __future__ import annotations

from enum import IntEnum


class Pays(IntEnum):
    """Countries, numbered as in the data files."""

    Bresil = 0
    Canada = 1
    Chine = 2
    EtatsUnis = 3
    France = 4
    Japon = 5
    RoyaumeUni = 6
    Russie = 7
    Mexique = 8

    def libelle(self) -> str:
        """Return the display name of the country."""
        return _LIBELLES[self]


_LIBELLES: dict[Pays, str] = {
    Pays.Bresil: "Brésil",
    Pays.Canada: "Canada",
    Pays.Chine: "Chine",
    Pays.EtatsUnis: "États-Unis",
    Pays.France: "France",
    Pays.Japon: "Japon",
    Pays.RoyaumeUni: "Royaume-Uni",
    Pays.Russie: "Russie",
    Pays.Mexique: "Mexique",
}