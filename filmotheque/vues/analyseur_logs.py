"""Viewing logs and the statistics drawn from them."""

from __future__ import annotations

import bisect
import os
import shlex
from dataclasses import dataclass

from filmotheque.vues.film import Film
from filmotheque.vues.gestionnaire_films import GestionnaireFilms
from filmotheque.vues.gestionnaire_utilisateurs import GestionnaireUtilisateurs
from filmotheque.vues.utilisateur import Utilisateur


def _champs(ligne: str) -> list[str]:
    """Split a line into fields; double-quoted fields may hold spaces."""
    lexeur = shlex.shlex(ligne, posix=True)
    lexeur.whitespace_split = True
    lexeur.quotes = '"'
    lexeur.commenters = ""
    return list(lexeur)


@dataclass(frozen=True)
class LigneLog:
    """One entry of the log: a user watched a film at a given time."""

    timestamp: str
    utilisateur: Utilisateur
    film: Film


class AnalyseurLogs:
    """Keeps log entries in chronological order and counts views per film."""

    def __init__(self) -> None:
        self.logs: list[LigneLog] = []
        self._vues_films: dict[Film, int] = {}

    def charger_depuis_fichier(
        self,
        nom_fichier: str | os.PathLike[str],
        gestionnaire_utilisateurs: GestionnaireUtilisateurs,
        gestionnaire_films: GestionnaireFilms,
    ) -> None:
        """Replace the log with the entries read from a file.

        Each line holds a timestamp, a user id and a quoted film name.
        Entries naming an unknown user or film are skipped. If some lines
        could not be read, a ValueError naming them is raised once the file
        has been read.
        """
        with open(nom_fichier, encoding="utf-8") as fichier:
            self.logs.clear()
            self._vues_films.clear()
            erreurs: list[str] = []
            for numero, ligne in enumerate(fichier, start=1):
                ligne = ligne.rstrip("\r\n")
                try:
                    champs = _champs(ligne)
                except ValueError:
                    champs = []
                if len(champs) < 3:
                    erreurs.append(f"ligne {numero}: {ligne!r}")
                    continue
                timestamp, id_utilisateur, nom_film = champs[:3]
                self.creer_ligne_log(
                    timestamp, id_utilisateur, nom_film, gestionnaire_utilisateurs, gestionnaire_films
                )
        if erreurs:
            raise ValueError("lignes de logs illisibles: " + "; ".join(erreurs))

    def creer_ligne_log(
        self,
        timestamp: str,
        id_utilisateur: str,
        nom_film: str,
        gestionnaire_utilisateurs: GestionnaireUtilisateurs,
        gestionnaire_films: GestionnaireFilms,
    ) -> bool:
        """Add an entry if both the user and the film are known; return whether it was added."""
        utilisateur = gestionnaire_utilisateurs.utilisateur_par_id(id_utilisateur)
        film = gestionnaire_films.film_par_nom(nom_film)
        if utilisateur is None or film is None:
            return False
        self.ajouter_ligne_log(LigneLog(timestamp, utilisateur, film))
        return True

    def ajouter_ligne_log(self, ligne_log: LigneLog) -> None:
        """Insert an entry in chronological order and count the view."""
        index = bisect.bisect_left(self.logs, ligne_log.timestamp, key=lambda log: log.timestamp)
        self.logs.insert(index, ligne_log)
        self._vues_films[ligne_log.film] = self._vues_films.get(ligne_log.film, 0) + 1

    def nombre_vues_film(self, film: Film | None) -> int:
        """Return how many times the film was watched."""
        if film is None:
            return 0
        return self._vues_films.get(film, 0)

    def film_plus_populaire(self) -> Film | None:
        """Return the most watched film, or None when the log is empty."""
        if not self.logs:
            return None
        return max(self._vues_films.items(), key=lambda paire: paire[1])[0]

    def n_films_plus_populaires(self, nombre: int) -> list[tuple[Film, int]]:
        """Return up to `nombre` (film, views) pairs, most watched first."""
        classement = sorted(self._vues_films.items(), key=lambda paire: paire[1], reverse=True)
        return classement[:nombre]

    def nombre_vues_pour_utilisateur(self, utilisateur: Utilisateur | None) -> int:
        """Return how many entries belong to the user."""
        return sum(1 for log in self.logs if log.utilisateur == utilisateur)

    def films_vus_par_utilisateur(self, utilisateur: Utilisateur | None) -> list[Film]:
        """Return each film the user watched, once."""
        return list(dict.fromkeys(log.film for log in self.logs if log.utilisateur == utilisateur))