import pytest

from filmotheque.vues.gestionnaire_utilisateurs import GestionnaireUtilisateurs
from filmotheque.vues.pays import Pays
from filmotheque.vues.utilisateur import Utilisateur


@pytest.fixture
def utilisateurs():
    return [
        Utilisateur(f"prenom.nom.{i}@example.com", "Prénom Nom", 20, Pays.Canada)
        for i in range(1, 4)
    ]


def test_ajouter_utilisateur(utilisateurs):
    gestionnaire = GestionnaireUtilisateurs()
    u1, u2, _ = utilisateurs
    assert gestionnaire.ajouter_utilisateur(u1) is True
    assert gestionnaire.ajouter_utilisateur(u1) is False
    assert gestionnaire.ajouter_utilisateur(u2) is True


def test_supprimer_utilisateur(utilisateurs):
    gestionnaire = GestionnaireUtilisateurs()
    u1, u2, u3 = utilisateurs
    gestionnaire.ajouter_utilisateur(u1)
    gestionnaire.ajouter_utilisateur(u2)
    assert gestionnaire.supprimer_utilisateur(u1.id) is True
    assert gestionnaire.supprimer_utilisateur(u1.id) is False
    assert gestionnaire.supprimer_utilisateur(u2.id) is True
    assert gestionnaire.supprimer_utilisateur(u3.id) is False


def test_nombre_utilisateurs(utilisateurs):
    gestionnaire = GestionnaireUtilisateurs()
    assert len(gestionnaire) == 0
    for u in utilisateurs:
        gestionnaire.ajouter_utilisateur(u)
    assert len(gestionnaire) == len(utilisateurs)


def test_utilisateur_par_id(utilisateurs):
    gestionnaire = GestionnaireUtilisateurs()
    unique = Utilisateur("unique@example.com", "PrénomUnique NomUnique", 30, Pays.EtatsUnis)
    absent = Utilisateur("absent@example.com", "Prénom Nom", 20, Pays.Canada)
    gestionnaire.ajouter_utilisateur(unique)
    trouve = gestionnaire.utilisateur_par_id(unique.id)
    assert trouve == unique
    assert gestionnaire.utilisateur_par_id(absent.id) is None
    gestionnaire.supprimer_utilisateur(unique.id)
    assert gestionnaire.utilisateur_par_id(unique.id) is None


def test_str_lists_every_user(utilisateurs):
    gestionnaire = GestionnaireUtilisateurs()
    for u in utilisateurs:
        gestionnaire.ajouter_utilisateur(u)
    lignes = str(gestionnaire).splitlines()
    assert lignes[0] == f"Le gestionnaire d'utilisateurs contient {len(utilisateurs)} utilisateurs:"
    assert sorted(lignes[1:]) == sorted(f"\t{u}" for u in utilisateurs)


def test_charger_depuis_fichier(tmp_path):
    chemin = tmp_path / "utilisateurs.txt"
    chemin.write_text(
        'marnie@example.com "Marnie Melvin" 37 2\n'
        'toccara@example.com "Toccara Patino" 65 1\n',
        encoding="utf-8",
    )
    gestionnaire = GestionnaireUtilisateurs()
    gestionnaire.ajouter_utilisateur(Utilisateur("vieux@example.com", "Vieux", 1, Pays.France))
    gestionnaire.charger_depuis_fichier(chemin)
    assert len(gestionnaire) == 2
    assert gestionnaire.utilisateur_par_id("vieux@example.com") is None
    assert "\tIdentifiant: marnie@example.com | Nom: Marnie Melvin | Âge: 37 | Pays: Chine\n" in str(
        gestionnaire
    )
    toccara = gestionnaire.utilisateur_par_id("toccara@example.com")
    assert toccara == Utilisateur("toccara@example.com", "Toccara Patino", 65, Pays.Canada)


def test_loading_twice_gives_same_result(tmp_path):
    chemin = tmp_path / "utilisateurs.txt"
    chemin.write_text('a@example.com "A B" 5 4\n', encoding="utf-8")
    gestionnaire = GestionnaireUtilisateurs()
    gestionnaire.charger_depuis_fichier(chemin)
    premier = str(gestionnaire)
    gestionnaire.charger_depuis_fichier(chemin)
    assert str(gestionnaire) == premier
    assert len(gestionnaire) == 1


def test_bad_lines_are_reported_after_good_ones_are_loaded(tmp_path):
    chemin = tmp_path / "utilisateurs.txt"
    chemin.write_text(
        'a@example.com "A B" 5 4\n'
        "incomplet@example.com\n"
        'b@example.com "C D" 6 99\n'
        'c@example.com "E F" 7 0\n',
        encoding="utf-8",
    )
    gestionnaire = GestionnaireUtilisateurs()
    with pytest.raises(ValueError, match="ligne 2"):
        gestionnaire.charger_depuis_fichier(chemin)
    assert len(gestionnaire) == 2
    assert gestionnaire.utilisateur_par_id("c@example.com").pays is Pays.Bresil
    assert gestionnaire.utilisateur_par_id("b@example.com") is None


def test_missing_file_keeps_existing_users(tmp_path, utilisateurs):
    gestionnaire = GestionnaireUtilisateurs()
    gestionnaire.ajouter_utilisateur(utilisateurs[0])
    with pytest.raises(FileNotFoundError):
        gestionnaire.charger_depuis_fichier(tmp_path / "absent.txt")
    assert gestionnaire.utilisateur_par_id(utilisateurs[0].id) == utilisateurs[0]