# backend/tests/test_pipeline_service.py

import pytest
from conftest import (
    FakeGenerator,
    FakeMailer,
    FakeNotionClient,
    make_page,
    rich_text,
    select,
    status,
    title,
)

from app.notifications.service import MailDeliveryError
from app.notion.variants import RADAR, TECH, TECHNO
from app.pipeline.config import WritePolicy
from app.pipeline.service import RecordWriteError


def _techno_pages():
    return [
        make_page(
            "page-1",
            {
                "Nom_Veille": title("Premier"),
                "Source URL": {"url": "https://example.com/1"},
                "Description": rich_text("Contenu 1"),
                "Status": status("Pas commencé"),
            },
        ),
        make_page(
            "page-2",
            {"Nom_Veille": title("Déjà lu"), "Status": status("Terminé")},
        ),
        make_page(
            "page-3",
            {
                "Nom_Veille": title("Second"),
                "Description": rich_text("Contenu 3"),
                "Status": status("Pas commencé"),
            },
        ),
    ]


def _tech_pages():
    return [
        make_page("page-1", {"titre": rich_text("Un"), "Status": status("Pas commencé")}),
        make_page("page-2", {"titre": rich_text("Deux"), "Status": status("En cours")}),
        make_page("page-3", {"titre": rich_text("Trois"), "Status": status("Pas commencé")}),
    ]


def _radar_pages():
    return [
        make_page("page-1", {"Titre": title("Radar 1"), "Statut": select("Début")}),
        make_page("page-2", {"Titre": title("Radar 2"), "Statut": select("Début")}),
    ]


def test_techno_scenario_two_of_three(make_services):
    notion = FakeNotionClient(pages=_techno_pages())
    generator = FakeGenerator(report="Synthèse des articles")
    mailer = FakeMailer()
    services = make_services(notion_client=notion, generator=generator, mailer=mailer)

    response = services.pipeline.run(TECHNO, "db-1", "lecteur@example.com")

    assert response.success is True
    assert response.suggestions == "Synthèse des articles"
    assert [item.id for item in response.results] == ["page-1", "page-3"]
    assert all(item.category == "Cybersécurité" for item in response.results)
    assert all(item.status == "Terminé" for item in response.results)
    assert response.failures is None

    # Inline writes happen before the email and target only the selected pages.
    assert sorted(page_id for page_id, _ in notion.updates) == ["page-1", "page-3"]
    patch = dict(notion.updates)["page-1"]
    assert patch["Status"] == {"status": {"name": "Terminé"}}
    assert patch["Catégorie"] == {"select": {"name": "Cybersécurité"}}
    assert patch["Commentaires"]["rich_text"][0]["text"]["content"].startswith("Résumé généré")

    assert len(mailer.messages) == 1
    html = mailer.messages[0].html
    assert html.count("<li>") == 2
    assert "Synthèse des articles" in html
    assert mailer.messages[0].recipient == "lecteur@example.com"


def test_empty_database_short_circuits(make_services):
    notion = FakeNotionClient(pages=[])
    generator = FakeGenerator()
    mailer = FakeMailer()
    services = make_services(notion_client=notion, generator=generator, mailer=mailer)

    response = services.pipeline.run(TECH, "db-1", "lecteur@example.com")

    assert response.success is True
    assert response.message.startswith("Aucune donnée")
    assert generator.prompts == []
    assert notion.updates == []
    assert mailer.messages == []


def test_no_matching_status_short_circuits(make_services):
    notion = FakeNotionClient(pages=[make_page("page-1", {"Statut": select("début")})])
    generator = FakeGenerator()
    mailer = FakeMailer()
    services = make_services(notion_client=notion, generator=generator, mailer=mailer)

    response = services.pipeline.run(RADAR, "db-1", "lecteur@example.com")

    assert response.message == "Aucune donnée avec le statut 'Début'."
    assert generator.prompts == []
    assert notion.updates == []
    assert mailer.messages == []


def test_ai_failures_are_recovered_per_item(make_services):
    notion = FakeNotionClient(pages=_radar_pages())
    mailer = FakeMailer()
    services = make_services(
        notion_client=notion,
        generator=FakeGenerator(fail=True),
        mailer=mailer,
    )

    response = services.pipeline.run(RADAR, "db-1", "lecteur@example.com")

    assert response.success is True
    assert response.suggestions is None
    assert [item.category for item in response.results] == ["Autre", "Autre"]
    assert [item.comments for item in response.results] == ["Résumé non disponible."] * 2
    patch = dict(notion.updates)["page-1"]
    assert patch["Statut"] == {"select": {"name": "Terminé"}}
    assert len(mailer.messages) == 1


def test_tech_scenario_writes_statuses_after_send(make_services):
    notion = FakeNotionClient(pages=_tech_pages())
    generator = FakeGenerator(report="Analyse globale")
    mailer = FakeMailer()
    services = make_services(notion_client=notion, generator=generator, mailer=mailer)

    response = services.pipeline.run(TECH, "db-1", "lecteur@example.com")

    assert response.suggestions == "Analyse globale"
    assert response.message == "Rapport envoyé par email et statut mis à jour avec succès."
    # One synthesis call, no per-item calls.
    assert len(generator.prompts) == 1
    assert notion.updates == [
        ("page-1", {"Status": {"status": {"name": "Terminé"}}}),
        ("page-3", {"Status": {"status": {"name": "Terminé"}}}),
    ]
    assert mailer.messages[0].html.count("<li>") == 2


def test_tech_mail_failure_skips_status_writes(make_services):
    notion = FakeNotionClient(pages=_tech_pages())
    services = make_services(notion_client=notion, mailer=FakeMailer(fail=True))

    with pytest.raises(MailDeliveryError):
        services.pipeline.run(TECH, "db-1", "lecteur@example.com")

    assert notion.updates == []


def test_tech_synthesis_failure_propagates(make_services):
    notion = FakeNotionClient(pages=_tech_pages())
    mailer = FakeMailer()
    services = make_services(
        notion_client=notion,
        generator=FakeGenerator(fail_report=True),
        mailer=mailer,
    )

    with pytest.raises(RuntimeError):
        services.pipeline.run(TECH, "db-1", "lecteur@example.com")

    assert mailer.messages == []
    assert notion.updates == []


def test_tolerant_status_writes_continue_after_failure(make_services):
    notion = FakeNotionClient(pages=_tech_pages(), fail_pages={"page-1"})
    services = make_services(notion_client=notion, policy=WritePolicy.TOLERANT)

    response = services.pipeline.run(TECH, "db-1", "lecteur@example.com")

    assert response.success is True
    assert [page_id for page_id, _ in notion.updates] == ["page-1", "page-3"]
    assert [f.id for f in response.failures] == ["page-1"]
    assert "patch failed for page-1" in response.failures[0].error
    assert [item.status for item in response.results] == ["Pas commencé", "Terminé"]


def test_tolerant_enrichment_keeps_failed_item_in_email(make_services):
    notion = FakeNotionClient(pages=_radar_pages(), fail_pages={"page-2"})
    mailer = FakeMailer()
    services = make_services(notion_client=notion, mailer=mailer, policy=WritePolicy.TOLERANT)

    response = services.pipeline.run(RADAR, "db-1", "lecteur@example.com")

    assert response.success is True
    assert [f.id for f in response.failures] == ["page-2"]
    assert response.failures[0].title == "Radar 2"
    # The enriched values survive the failed write.
    assert response.results[1].category == "Cybersécurité"
    assert response.results[1].status == "Début"
    assert mailer.messages[0].html.count("<li>") == 2


def test_fail_fast_enrichment_aborts_before_email(make_services):
    notion = FakeNotionClient(pages=_radar_pages(), fail_pages={"page-1"})
    mailer = FakeMailer()
    services = make_services(notion_client=notion, mailer=mailer, policy=WritePolicy.FAIL_FAST)

    with pytest.raises(RecordWriteError) as excinfo:
        services.pipeline.run(RADAR, "db-1", "lecteur@example.com")

    assert excinfo.value.item.id == "page-1"
    assert mailer.messages == []
    # Every item settled before the failure was raised.
    assert sorted(page_id for page_id, _ in notion.updates) == ["page-1", "page-2"]


def test_fail_fast_status_writes_raise_after_all_records(make_services):
    notion = FakeNotionClient(pages=_tech_pages(), fail_pages={"page-1"})
    mailer = FakeMailer()
    services = make_services(notion_client=notion, mailer=mailer, policy=WritePolicy.FAIL_FAST)

    with pytest.raises(RecordWriteError):
        services.pipeline.run(TECH, "db-1", "lecteur@example.com")

    assert len(mailer.messages) == 1
    assert [page_id for page_id, _ in notion.updates] == ["page-1", "page-3"]
