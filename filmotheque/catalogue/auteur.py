"""Authors of the films held in a library."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Auteur:
    """An author, with the number of their films currently in a library."""

    nom: str = ""
    annee_de_naissance: int = 0
    nb_films: int = 0

    def __str__(self) -> str:
        return (
            f"Nom: {self.nom} | Date de naissance: {self.annee_de_naissance}"
            f" | Nombre de films: {self.nb_films}"
        )