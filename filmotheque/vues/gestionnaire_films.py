"""A collection of films with filters by name, genre and country."""

from __future__ import annotations

import os
import shlex
from collections.abc import Iterator

from filmotheque.vues.film import Film, Genre
from filmotheque.vues.pays import Pays


def _champs(ligne: str) -> list[str]:
    """Split a line into fields; double-quoted fields may hold spaces."""
    lexeur = shlex.shlex(ligne, posix=True)
    lexeur.whitespace_split = True
    lexeur.quotes = '"'
    lexeur.commenters = ""
    return list(lexeur)


def _lire_film(ligne: str) -> Film:
    champs = _champs(ligne)
    if len(champs) < 5:
        raise ValueError(f"film illisible: {ligne!r}")
    nom, genre, pays, realisateur, annee = champs[:5]
    return Film(nom, Genre(int(genre)), Pays(int(pays)), realisateur, int(annee))


class GestionnaireFilms:
    """Holds films, at most one per name, and keeps lookup filters up to date."""

    def __init__(self) -> None:
        self._films: list[Film] = []
        self._par_nom: dict[str, Film] = {}
        self._par_genre: dict[Genre, list[Film]] = {}
        self._par_pays: dict[Pays, list[Film]] = {}

    def copy(self) -> GestionnaireFilms:
        """Return an independent manager holding the same films."""
        copie = GestionnaireFilms()
        for film in self._films:
            copie.ajouter_film(film)
        return copie

    __copy__ = copy

    def charger_depuis_fichier(self, nom_fichier: str | os.PathLike[str]) -> None:
        """Replace the films with those read from a file.

        Each line holds a quoted name, a genre number, a country number, a
        quoted director and a year. Every readable line is loaded; if some
        lines could not be read, a ValueError naming them is raised once the
        file has been read.
        """
        with open(nom_fichier, encoding="utf-8") as fichier:
            self._films.clear()
            self._par_nom.clear()
            self._par_genre.clear()
            self._par_pays.clear()
            erreurs: list[str] = []
            for numero, ligne in enumerate(fichier, start=1):
                ligne = ligne.rstrip("\r\n")
                try:
                    film = _lire_film(ligne)
                except ValueError:
                    erreurs.append(f"ligne {numero}: {ligne!r}")
                    continue
                self.ajouter_film(film)
        if erreurs:
            raise ValueError("lignes de films illisibles: " + "; ".join(erreurs))

    def ajouter_film(self, film: Film) -> bool:
        """Add a film; return False if a film with this name is already held."""
        if film.nom in self._par_nom:
            return False
        self._films.append(film)
        self._par_nom[film.nom] = film
        self._par_genre.setdefault(film.genre, []).append(film)
        self._par_pays.setdefault(film.pays, []).append(film)
        return True

    def supprimer_film(self, nom_film: str) -> bool:
        """Remove a film by name; return whether one was removed."""
        film = self._par_nom.pop(nom_film, None)
        if film is None:
            return False
        self._films = [f for f in self._films if f.nom != nom_film]
        genre = self._par_genre[film.genre]
        genre[:] = [f for f in genre if f.nom != nom_film]
        pays = self._par_pays[film.pays]
        pays[:] = [f for f in pays if f.nom != nom_film]
        return True

    def film_par_nom(self, nom: str) -> Film | None:
        """Return the film with this name, or None."""
        return self._par_nom.get(nom)

    def films_par_genre(self, genre: Genre) -> list[Film]:
        """Return the films of a genre, in the order they were added."""
        return list(self._par_genre.get(genre, ()))

    def films_par_pays(self, pays: Pays) -> list[Film]:
        """Return the films of a country, in the order they were added."""
        return list(self._par_pays.get(pays, ()))

    def films_entre_annees(self, annee_debut: int, annee_fin: int) -> list[Film]:
        """Return the films released between the two years, both included."""
        return [f for f in self._films if annee_debut <= f.annee <= annee_fin]

    def __iter__(self) -> Iterator[Film]:
        return iter(self._films)

    def __len__(self) -> int:
        return len(self._films)

    def __str__(self) -> str:
        morceaux = [
            f"Le gestionnaire de films contient {len(self)} films.\n",
            "Affichage par catégories:\n",
        ]
        for genre, films in self._par_genre.items():
            morceaux.append(f"Genre: {genre.libelle()} ({len(films)} films):\n")
            morceaux.extend(f"\t{film}\n" for film in films)
        return "".join(morceaux)