"""A bounded collection of authors, loadable from a text file."""

from __future__ import annotations

import os
import shlex
from collections.abc import Iterator
from typing import ClassVar

from filmotheque.catalogue.auteur import Auteur


def _champs(ligne: str) -> list[str]:
    """Split a line into fields; double-quoted fields may hold spaces."""
    lexeur = shlex.shlex(ligne, posix=True)
    lexeur.whitespace_split = True
    lexeur.quotes = '"'
    lexeur.commenters = ""
    return list(lexeur)


class GestionnaireAuteurs:
    """Holds at most NB_AUTEURS_MAX authors."""

    NB_AUTEURS_MAX: ClassVar[int] = 16

    def __init__(self) -> None:
        self._auteurs: list[Auteur] = []

    def ajouter_auteur(self, auteur: Auteur) -> bool:
        """Add an author; return False when the collection is full."""
        if len(self._auteurs) >= self.NB_AUTEURS_MAX:
            return False
        self._auteurs.append(auteur)
        return True

    def chercher_auteur(self, nom_auteur: str) -> Auteur | None:
        """Return the last author with this name, or None."""
        return next((a for a in reversed(self._auteurs) if a.nom == nom_auteur), None)

    def charger_depuis_fichier(self, nom_fichier: str | os.PathLike[str]) -> None:
        """Replace the authors with those read from a file.

        Each line holds a quoted name followed by a year of birth. Loading
        stops at the first bad line with a ValueError; earlier lines stay loaded.
        """
        with open(nom_fichier, encoding="utf-8") as fichier:
            self._auteurs.clear()
            for numero, ligne in enumerate(fichier, start=1):
                self._lire_ligne_auteur(ligne.rstrip("\r\n"), numero)

    def _lire_ligne_auteur(self, ligne: str, numero: int) -> None:
        champs = _champs(ligne)
        if len(champs) < 2:
            raise ValueError(f"ligne {numero}: auteur illisible: {ligne!r}")
        nom, annee_texte = champs[0], champs[1]
        try:
            annee = int(annee_texte)
        except ValueError:
            raise ValueError(f"ligne {numero}: annee invalide: {annee_texte!r}") from None
        if annee < 0:
            raise ValueError(f"ligne {numero}: annee invalide: {annee_texte!r}")
        if not self.ajouter_auteur(Auteur(nom, annee)):
            raise ValueError(
                f"ligne {numero}: plus de place pour l'auteur {nom!r}"
                f" (maximum {self.NB_AUTEURS_MAX})"
            )

    def __iter__(self) -> Iterator[Auteur]:
        return iter(self._auteurs)

    def __len__(self) -> int:
        return len(self._auteurs)

    def __str__(self) -> str:
        return "".join(f"{auteur}\n" for auteur in self._auteurs)