"""A collection of users indexed by id, loadable from a text file."""

from __future__ import annotations

import os
import shlex
from collections.abc import Iterator

from filmotheque.vues.pays import Pays
from filmotheque.vues.utilisateur import Utilisateur


def _champs(ligne: str) -> list[str]:
    """Split a line into fields; double-quoted fields may hold spaces."""
    lexeur = shlex.shlex(ligne, posix=True)
    lexeur.whitespace_split = True
    lexeur.quotes = '"'
    lexeur.commenters = ""
    return list(lexeur)


def _lire_utilisateur(ligne: str) -> Utilisateur:
    champs = _champs(ligne)
    if len(champs) < 4:
        raise ValueError(f"utilisateur illisible: {ligne!r}")
    identifiant, nom, age, pays = champs[:4]
    return Utilisateur(identifiant, nom, int(age), Pays(int(pays)))


class GestionnaireUtilisateurs:
    """Holds users, at most one per id."""

    def __init__(self) -> None:
        self._utilisateurs: dict[str, Utilisateur] = {}

    def charger_depuis_fichier(self, nom_fichier: str | os.PathLike[str]) -> None:
        """Replace the users with those read from a file.

        Each line holds an id, a quoted name, an age and a country number.
        Every readable line is loaded; if some lines could not be read, a
        ValueError naming them is raised once the file has been read.
        """
        with open(nom_fichier, encoding="utf-8") as fichier:
            self._utilisateurs.clear()
            erreurs: list[str] = []
            for numero, ligne in enumerate(fichier, start=1):
                ligne = ligne.rstrip("\r\n")
                try:
                    utilisateur = _lire_utilisateur(ligne)
                except ValueError:
                    erreurs.append(f"ligne {numero}: {ligne!r}")
                    continue
                self.ajouter_utilisateur(utilisateur)
        if erreurs:
            raise ValueError("lignes d'utilisateurs illisibles: " + "; ".join(erreurs))

    def ajouter_utilisateur(self, utilisateur: Utilisateur) -> bool:
        """Add a user; return False if the id is already taken."""
        if utilisateur.id in self._utilisateurs:
            return False
        self._utilisateurs[utilisateur.id] = utilisateur
        return True

    def supprimer_utilisateur(self, id_utilisateur: str) -> bool:
        """Remove a user by id; return whether one was removed."""
        return self._utilisateurs.pop(id_utilisateur, None) is not None

    def utilisateur_par_id(self, id_utilisateur: str) -> Utilisateur | None:
        """Return the user with this id, or None."""
        return self._utilisateurs.get(id_utilisateur)

    def __iter__(self) -> Iterator[Utilisateur]:
        return iter(self._utilisateurs.values())

    def __len__(self) -> int:
        return len(self._utilisateurs)

    def __str__(self) -> str:
        entete = f"Le gestionnaire d'utilisateurs contient {len(self)} utilisateurs:\n"
        return entete + "".join(f"\t{u}\n" for u in self._utilisateurs.values())