"""Films, their genres and the countries where they may be restricted."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from filmotheque.catalogue.auteur import Auteur


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


class Genre(IntEnum):
    """Film genres, numbered as in the data files."""

    Action = 0
    Aventure = 1
    Comedie = 2
    Horreur = 3
    Romance = 4


@dataclass(eq=False)
class Film:
    """A film of a library, linked to its author."""

    nom: str
    annee_de_sortie: int
    genre: Genre
    pays: Pays
    est_restreint_par_age: bool
    auteur: Auteur
    pays_restreints: list[Pays] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.genre = Genre(self.genre)
        self.pays = Pays(self.pays)
        self.pays_restreints = [Pays(p) for p in self.pays_restreints]

    def ajouter_pays_restreint(self, pays: Pays) -> None:
        """Add a country to the list where the film is restricted."""
        self.pays_restreints.append(Pays(pays))

    def supprimer_pays_restreints(self) -> None:
        """Forget every country restriction."""
        self.pays_restreints.clear()

    def est_restreint_dans_pays(self, pays: Pays) -> bool:
        """Tell whether the film is restricted in the given country."""
        return pays in self.pays_restreints

    def __str__(self) -> str:
        lignes = [
            self.nom,
            f"\tDate de sortie: {self.annee_de_sortie}",
            f"\tGenre: {self.genre.name}",
            f"\tAuteur: {self.auteur.nom}",
            f"\tPays: {self.pays.name}",
        ]
        if self.pays_restreints:
            lignes.append("\tPays restreints:")
            lignes.extend(f"\t\t{p.name}" for p in self.pays_restreints)
        else:
            lignes.append("\tAucun pays restreint.")
        return "\n".join(lignes) + "\n"