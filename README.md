# filmotheque

A small library for managing a film catalogue. It has two independent parts:
`filmotheque.catalogue` and `filmotheque.vues`. It has no dependencies outside
the standard library.

## `filmotheque.catalogue`

A library of films with authors and per-country restrictions.

- `auteur.Auteur`: a dataclass with `nom`, `annee_de_naissance` and `nb_films`.
  `str()` gives `Nom: ... | Date de naissance: ... | Nombre de films: ...`.
- `film.Pays`, `film.Genre`: integer enums. `Pays` runs from `Bresil` (0) to
  `Mexique` (8). `Genre` is `Action` (0), `Aventure`, `Comedie`, `Horreur`,
  `Romance` (4).
- `film.Film`: a film linked to its `Auteur`. It keeps a list `pays_restreints`,
  and has the methods `ajouter_pays_restreint`, `supprimer_pays_restreints` and
  `est_restreint_dans_pays`. `str()` gives a multi-line description.
- `utilisateur.Utilisateur`: a user with `nom`, `age`, `est_premium`, `pays`
  and a count `nb_films_vus`.
  - `film_est_disponible(film)` is false when the film is restricted in the
    user's country. It is also false when the film is age-restricted and the
    user is not older than 16.
  - `nb_limite_films_atteint()` is true for a non-premium user who has watched
    `NB_FILMS_GRATUITS` (3) films.
  - `regarder_film(film)` increments the count when both checks allow it, and
    returns whether it did.
- `gestionnaire_auteurs.GestionnaireAuteurs`: holds at most `NB_AUTEURS_MAX`
  (16) authors.
  - `ajouter_auteur` returns `False` when the store is full.
  - `chercher_auteur(nom)` returns the author or `None`.
  - `charger_depuis_fichier(path)` replaces the content.
  - It supports `len()`, iteration and `str()`.
- `librairie.Librairie`: owns films and keeps each author's `nb_films` up to
  date.
  - `ajouter_film` ignores `None`.
  - `retirer_film(nom)` moves the last film into the freed place, and does
    nothing for an unknown name.
  - `chercher_film(nom)` returns the film or `None`.
  - `charger_films_depuis_fichier(path, gestionnaire_auteurs)` loads films.
  - `charger_restrictions_depuis_fichier(path)` loads restrictions.
  - It supports `len()`, iteration and `str()`.

```python
from filmotheque.catalogue.gestionnaire_auteurs import GestionnaireAuteurs
from filmotheque.catalogue.librairie import Librairie

auteurs = GestionnaireAuteurs()
auteurs.charger_depuis_fichier("auteurs.txt")

librairie = Librairie()
librairie.charger_films_depuis_fichier("films.txt", auteurs)
librairie.charger_restrictions_depuis_fichier("restrictionsPays.txt")
print(librairie)
```

Input files have one record per line. Names are in double quotes.

- authors: `"George Lucas" 1944`
- films: `"A New Hope" 1977 0 3 0 "George Lucas"`. The fields are name, year,
  genre number, country number, age-restricted flag (`0` or `1`) and author
  name. A film whose name is already loaded is skipped.
- restrictions: `"A New Hope" 2 4`. The fields are the film name, then one or
  more country numbers. Loading first clears every film's restrictions.

These loaders stop at the first bad line and raise `ValueError`. A bad line is
one with missing fields, bad numbers, an unknown author or film, a full author
store, or a restriction line with no country. Lines read before the bad one stay
loaded. A missing file raises `FileNotFoundError`.

## `filmotheque.vues`

Viewing statistics built from logs.

- `pays.Pays` and `film.Genre`: integer enums with a `libelle()` display name,
  for example `"États-Unis"` or `"Science-fiction"`. `Genre` here has nine
  values: `Action`, `Aventure`, `Comedie`, `Documentaire`, `Drame`,
  `Fantastique`, `Horreur`, `Romance` and `ScienceFiction`.
- `film.Film` and `utilisateur.Utilisateur`: frozen dataclasses, each with a
  one-line `str()`.
- `gestionnaire_films.GestionnaireFilms`: at most one film per name.
  - `ajouter_film` and `supprimer_film` return whether they changed anything.
  - `film_par_nom`, `films_par_genre` and `films_par_pays` look films up.
    Films come back in the order they were added.
  - `films_entre_annees(debut, fin)` includes both bounds.
  - `copy()` returns an independent manager.
  - It supports `len()`, iteration and `str()`. `str()` groups the films by
    genre.
- `gestionnaire_utilisateurs.GestionnaireUtilisateurs`: at most one user per id.
  - `ajouter_utilisateur` and `supprimer_utilisateur` return whether they
    changed anything.
  - `utilisateur_par_id(id)` returns the user or `None`.
  - It supports `len()`, iteration and `str()`.
- `analyseur_logs.AnalyseurLogs`: keeps `LigneLog` entries (`timestamp`,
  `utilisateur`, `film`) in timestamp order, in its `logs` list.
  - `creer_ligne_log` adds an entry only when both the user and the film are
    known.
  - Statistics: `nombre_vues_film`, `film_plus_populaire`,
    `n_films_plus_populaires(n)`, `nombre_vues_pour_utilisateur` and
    `films_vus_par_utilisateur`.

```python
from filmotheque.vues.gestionnaire_films import GestionnaireFilms
from filmotheque.vues.gestionnaire_utilisateurs import GestionnaireUtilisateurs
from filmotheque.vues.analyseur_logs import AnalyseurLogs

films = GestionnaireFilms()
films.charger_depuis_fichier("films.txt")
utilisateurs = GestionnaireUtilisateurs()
utilisateurs.charger_depuis_fichier("utilisateurs.txt")

analyseur = AnalyseurLogs()
analyseur.charger_depuis_fichier("logs.txt", utilisateurs, films)
for film, vues in analyseur.n_films_plus_populaires(5):
    print(vues, film)
```

Input file formats:

- films: `"Name" <genre> <country> "Director" <year>`
- users: `someone@example.com "First Last" <age> <country>`
- logs: `2018-01-01T00:00:00Z someone@example.com "Film name"`

These loaders load every readable line. Log entries that name an unknown user or
film are skipped. If some lines could not be read, a `ValueError` listing them
is raised once the whole file has been read.

## What it does not do

The package is a library only. It has no command-line program. It ships no data
files. It keeps everything in memory: nothing is saved back to disk.

## Tests

```
pip install -e .[test]
pytest
```