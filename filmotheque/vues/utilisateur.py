"""Users of the catalogue."""

from __future__ import annotations

from dataclasses import dataclass

from filmotheque.vues.pays import Pays


@dataclass(frozen=True)
class Utilisateur:
    """A user identified by an id, with a name, an age and a country."""

    id: str
    nom: str
    age: int
    pays: Pays

    def __post_init__(self) -> None:
        object.__setattr__(self, "pays", Pays(self.pays))

    def __str__(self) -> str:
        return (
            f"Identifiant: {self.id} | Nom: {self.nom} | Âge: {self.age}"
            f" | Pays: {self.pays.libelle()}"
        )