"""Films of the catalogue and their genres."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from filmotheque.vues.pays import Pays


class Genre(IntEnum):
    """Film genres, numbered as in the data files."""

    Action = 0
    Aventure = 1
    Comedie = 2
    Documentaire = 3
    Drame = 4
    Fantastique = 5
    Horreur = 6
    Romance = 7
    ScienceFiction = 8

    def libelle(self) -> str:
        """Return the display name of the genre."""
        return _LIBELLES[self]


_LIBELLES: dict[Genre, str] = {
    Genre.Action: "Action",
    Genre.Aventure: "Aventure",
    Genre.Comedie: "Comédie",
    Genre.Documentaire: "Documentaire",
    Genre.Drame: "Drame",
    Genre.Fantastique: "Fantastique",
    Genre.Horreur: "Horreur",
    Genre.Romance: "Romance",
    Genre.ScienceFiction: "Science-fiction",
}


@dataclass(frozen=True)
class Film:
    """A film with its genre, country, director and year."""

    nom: str
    genre: Genre
    pays: Pays
    realisateur: str
    annee: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "genre", Genre(self.genre))
        object.__setattr__(self, "pays", Pays(self.pays))

    def __str__(self) -> str:
        return (
            f"Nom: {self.nom} | Genre: {self.genre.libelle()}"
            f" | Pays: {self.pays.libelle()} | Réalisateur: {self.realisateur}"
            f" | Année: {self.annee}"
        )