"""A library owning films, with loading of films and country restrictions."""

from __future__ import annotations

import os
import shlex
from collections.abc import Iterator

from filmotheque.catalogue.film import Film, Genre, Pays
from filmotheque.catalogue.gestionnaire_auteurs import GestionnaireAuteurs


def _champs(ligne: str) -> list[str]:
    """Split a line into fields; double-quoted fields may hold spaces."""
    lexeur = shlex.shlex(ligne, posix=True)
    lexeur.whitespace_split = True
    lexeur.quotes = '"'
    lexeur.commenters = ""
    return list(lexeur)


def _entier(texte: str, numero: int) -> int:
    try:
        return int(texte)
    except ValueError:
        raise ValueError(f"ligne {numero}: entier attendu: {texte!r}") from None


class Librairie:
    """A collection of films that keeps each author's film count up to date."""

    def __init__(self) -> None:
        self._films: list[Film] = []

    def _trouver_index_film(self, nom_film: str) -> int | None:
        for index in range(len(self._films) - 1, -1, -1):
            if self._films[index].nom == nom_film:
                return index
        return None

    def ajouter_film(self, film: Film | None) -> None:
        """Add a film and count it for its author; None is ignored."""
        if film is None:
            return
        film.auteur.nb_films += 1
        self._films.append(film)

    def retirer_film(self, nom_film: str) -> None:
        """Remove a film by name; the last film takes its place. Unknown names do nothing."""
        index = self._trouver_index_film(nom_film)
        if index is None:
            return
        film = self._films[index]
        film.auteur.nb_films -= 1
        dernier = self._films.pop()
        if index < len(self._films):
            self._films[index] = dernier

    def chercher_film(self, nom_film: str) -> Film | None:
        """Return the film with this name, or None."""
        index = self._trouver_index_film(nom_film)
        return None if index is None else self._films[index]

    def _supprimer_films(self) -> None:
        for film in self._films:
            film.auteur.nb_films = 0
        self._films.clear()

    def charger_films_depuis_fichier(
        self,
        nom_fichier: str | os.PathLike[str],
        gestionnaire_auteurs: GestionnaireAuteurs,
    ) -> None:
        """Replace the films with those read from a file.

        Each line holds a quoted name, a release year, a genre number, a
        country number, 0 or 1 for the age restriction and a quoted author
        name. Loading stops at the first bad line with a ValueError.
        """
        with open(nom_fichier, encoding="utf-8") as fichier:
            self._supprimer_films()
            for numero, ligne in enumerate(fichier, start=1):
                self._lire_ligne_film(ligne.rstrip("\r\n"), numero, gestionnaire_auteurs)

    def _lire_ligne_film(
        self, ligne: str, numero: int, gestionnaire_auteurs: GestionnaireAuteurs
    ) -> None:
        champs = _champs(ligne)
        if len(champs) < 6:
            raise ValueError(f"ligne {numero}: film illisible: {ligne!r}")
        nom_film, annee_texte, genre_texte, pays_texte, age_texte, nom_auteur = champs[:6]
        annee = _entier(annee_texte, numero)
        if annee < 0:
            raise ValueError(f"ligne {numero}: annee invalide: {annee_texte!r}")
        if age_texte not in ("0", "1"):
            raise ValueError(f"ligne {numero}: restriction d'age invalide: {age_texte!r}")
        try:
            genre = Genre(_entier(genre_texte, numero))
            pays = Pays(_entier(pays_texte, numero))
        except ValueError as erreur:
            raise ValueError(f"ligne {numero}: {erreur}") from None
        auteur = gestionnaire_auteurs.chercher_auteur(nom_auteur)
        if auteur is None:
            raise ValueError(f"ligne {numero}: auteur inconnu: {nom_auteur!r}")
        if self._trouver_index_film(nom_film) is None:
            self.ajouter_film(Film(nom_film, annee, genre, pays, age_texte == "1", auteur))

    def charger_restrictions_depuis_fichier(self, nom_fichier: str | os.PathLike[str]) -> None:
        """Replace every film's country restrictions with those read from a file.

        Each line holds a quoted film name followed by country numbers.
        Loading stops at the first bad line with a ValueError.
        """
        with open(nom_fichier, encoding="utf-8") as fichier:
            for film in self._films:
                film.supprimer_pays_restreints()
            for numero, ligne in enumerate(fichier, start=1):
                self._lire_ligne_restrictions(ligne.rstrip("\r\n"), numero)

    def _lire_ligne_restrictions(self, ligne: str, numero: int) -> None:
        champs = _champs(ligne)
        if not champs:
            raise ValueError(f"ligne {numero}: restriction illisible: {ligne!r}")
        nom_film, *reste = champs
        film = self.chercher_film(nom_film)
        if film is None:
            raise ValueError(f"ligne {numero}: film inconnu: {nom_film!r}")
        pays_lus: list[Pays] = []
        for texte in reste:
            try:
                valeur = int(texte)
            except ValueError:
                break
            try:
                pays_lus.append(Pays(valeur))
            except ValueError as erreur:
                raise ValueError(f"ligne {numero}: {erreur}") from None
        if not pays_lus:
            raise ValueError(f"ligne {numero}: aucun pays pour {nom_film!r}")
        for pays in pays_lus:
            film.ajouter_pays_restreint(pays)

    def __iter__(self) -> Iterator[Film]:
        return iter(self._films)

    def __len__(self) -> int:
        return len(self._films)

    def __str__(self) -> str:
        return "".join(f"{film}\n" for film in self._films)