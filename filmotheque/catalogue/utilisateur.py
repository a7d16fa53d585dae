"""Users who watch films of a library."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from filmotheque.catalogue.film import Film, Pays

AGE_MINIMUM_POUR_FILMS_RESTREINTS = 16


@dataclass
class Utilisateur:
    """A user with an age, a country and a count of watched films."""

    NB_FILMS_GRATUITS: ClassVar[int] = 3

    nom: str
    age: int
    est_premium: bool
    pays: Pays
    nb_films_vus: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.pays = Pays(self.pays)

    def film_est_disponible(self, film: Film) -> bool:
        """Tell whether the film may be watched in the user's country at the user's age."""
        if film.est_restreint_dans_pays(self.pays):
            return False
        return not film.est_restreint_par_age or self.age > AGE_MINIMUM_POUR_FILMS_RESTREINTS

    def nb_limite_films_atteint(self) -> bool:
        """Tell whether a non-premium user has used up the free films."""
        return not self.est_premium and self.nb_films_vus >= self.NB_FILMS_GRATUITS

    def regarder_film(self, film: Film) -> bool:
        """Watch the film if allowed; return whether it was watched."""
        if self.nb_limite_films_atteint() or not self.film_est_disponible(film):
            return False
        self.nb_films_vus += 1
        return True