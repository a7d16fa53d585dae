import pytest

from filmotheque.catalogue.auteur import Auteur
from filmotheque.catalogue.film import Film, Genre, Pays


@pytest.fixture
def auteur():
    return Auteur("George Lucas", 1944)


def _sans_espaces(texte):
    return "".join(texte.split())


def test_valeurs_des_enums():
    assert Pays(0) is Pays.Bresil
    assert Pays(8) is Pays.Mexique
    assert Genre(1) is Genre.Aventure
    assert len(Pays) == 9
    assert len(Genre) == 5


def test_entier_invalide_refuse(auteur):
    with pytest.raises(ValueError):
        Pays(9)
    with pytest.raises(ValueError):
        Film("x", 1, Genre.Action, 42, False, auteur)


def test_conversion_depuis_entiers(auteur):
    film = Film("x", 1977, 0, 3, False, auteur)
    assert film.genre is Genre.Action
    assert film.pays is Pays.EtatsUnis


def test_ajout_et_recherche_pays_restreints(auteur):
    film = Film("film1", 1990, Genre.Comedie, Pays.Mexique, False, auteur)
    assert not film.est_restreint_dans_pays(Pays.Russie)
    for pays in Pays:
        film.ajouter_pays_restreint(pays)
    assert all(film.est_restreint_dans_pays(p) for p in Pays)
    assert film.pays_restreints == list(Pays)


def test_suppression_pays_restreints(auteur):
    film = Film("film1", 1990, Genre.Comedie, Pays.Mexique, False, auteur)
    film.ajouter_pays_restreint(Pays.Chine)
    film.supprimer_pays_restreints()
    assert film.pays_restreints == []
    assert not film.est_restreint_dans_pays(Pays.Chine)


def test_affichage_sans_restriction(auteur):
    film = Film("A New Hope", 1977, Genre.Action, Pays.EtatsUnis, False, auteur)
    assert _sans_espaces(str(film)) == (
        "ANewHopeDatedesortie:1977Genre:ActionAuteur:GeorgeLucasPays:EtatsUnisAucunpaysrestreint."
    )
    assert str(film).endswith("\n")


def test_affichage_avec_restrictions():
    auteur = Auteur("John Ronald Reuel Tolkien", 1892)
    film = Film(
        "The Lord of the Rings: The Return of the King",
        2003,
        Genre.Aventure,
        Pays.RoyaumeUni,
        False,
        auteur,
    )
    for pays in (Pays.Chine, Pays.France, Pays.Japon, Pays.Russie):
        film.ajouter_pays_restreint(pays)
    assert _sans_espaces(str(film)) == (
        "TheLordoftheRings:TheReturnoftheKingDatedesortie:2003Genre:AventureAuteur:"
        "JohnRonaldReuelTolkienPays:RoyaumeUniPaysrestreints:ChineFranceJaponRussie"
    )
    assert "\n\t\tChine" in str(film)