import json
from datetime import timedelta

import pytest
from django.utils import timezone

from farms.models import Cow, Farm, Paddock

pytestmark = pytest.mark.django_db


def post_json(client, url, payload):
    return client.post(url, data=json.dumps(payload), content_type="application/json")


# ============================================================
# FARMS
# ============================================================

def test_register_farm(client, owner):
    response = post_json(client, "/api/fincas/", {
        "nombre": "La Esperanza",
        "ubicacion": "Montería",
        "usuarioId": owner.pk,
    })

    assert response.status_code == 201
    farm = Farm.objects.get()
    assert farm.owner == owner
    assert response.json()["finca"]["potreros"] == []


def test_register_farm_unknown_owner(client):
    response = post_json(client, "/api/fincas/", {"nombre": "Sin dueño", "usuarioId": 4242})

    assert response.status_code == 404
    assert not Farm.objects.exists()


def test_list_farms_of_owner(client, owner, farm, paddock, django_user_model):
    other = django_user_model.objects.create_user(username="vecino", email="vecino@example.com")
    Farm.objects.create(name="Ajena", owner=other)

    body = client.get("/api/fincas/", {"usuarioId": owner.pk}).json()

    assert [f["nombre"] for f in body["fincas"]] == ["La Esperanza"]
    assert body["fincas"][0]["potreros"] == [
        {"id": paddock.pk, "nombre": "Potrero Norte", "fincaId": farm.pk}
    ]


def test_list_farms_requires_owner(client):
    assert client.get("/api/fincas/").status_code == 400


# ============================================================
# PADDOCKS
# ============================================================

def test_register_and_list_paddocks(client, farm):
    created = post_json(client, f"/api/potreros/{farm.pk}/", {"nombre": "Potrero Sur"})

    assert created.status_code == 201
    assert Paddock.objects.filter(farm=farm, name="Potrero Sur").exists()

    listed = client.get(f"/api/potreros/{farm.pk}/").json()["potreros"]
    assert [p["nombre"] for p in listed] == ["Potrero Sur"]


def test_paddock_for_unknown_farm(client):
    assert post_json(client, "/api/potreros/9999/", {"nombre": "X"}).status_code == 404


# ============================================================
# COWS
# ============================================================

def test_register_cow_with_anchors(client, paddock):
    response = post_json(client, f"/api/vacas/nueva/{paddock.pk}/", {
        "codigo": "V-800",
        "edad": 4,
        "raza": "Brahman",
        "fechaEmbarazo": "2026-03-01T08:00:00-05:00",
    })

    assert response.status_code == 201
    cow = Cow.objects.get(code="V-800")
    assert cow.paddock == paddock
    assert cow.pregnancy_date is not None
    assert cow.deworming_date is None
    assert response.json()["vaca"]["raza"] == "Brahman"


def test_register_cow_unknown_paddock(client):
    response = post_json(client, "/api/vacas/nueva/9999/", {"codigo": "V-801"})

    assert response.status_code == 404


def test_register_cow_unknown_veterinarian(client, paddock):
    response = post_json(client, f"/api/vacas/nueva/{paddock.pk}/", {
        "codigo": "V-802",
        "veterinarioId": 4242,
    })

    assert response.status_code == 404
    assert not Cow.objects.exists()


def test_register_cow_requires_code(client, paddock):
    response = post_json(client, f"/api/vacas/nueva/{paddock.pk}/", {"edad": 3})

    assert response.status_code == 400
    assert "codigo" in response.json()["errors"]


def test_list_paddock_cows(client, make_cow, paddock, farm):
    make_cow("V-811")
    make_cow("V-810")
    elsewhere = Paddock.objects.create(name="Potrero Sur", farm=farm)
    make_cow("V-999", paddock=elsewhere)

    body = client.get(f"/api/vacas/{paddock.pk}/").json()

    assert [c["codigo"] for c in body["vacas"]] == ["V-810", "V-811"]


def test_delete_cow(client, make_cow):
    cow = make_cow("V-820")

    assert client.delete(f"/api/vacas/eliminar/{cow.pk}/").status_code == 200
    assert not Cow.objects.exists()
    assert client.delete(f"/api/vacas/eliminar/{cow.pk}/").status_code == 404


def test_herd_built_through_the_api_is_scanned(client, owner, mailoutbox):
    farm_id = post_json(client, "/api/fincas/", {
        "nombre": "El Porvenir", "usuarioId": owner.pk,
    }).json()["finca"]["id"]
    paddock_id = post_json(client, f"/api/potreros/{farm_id}/", {
        "nombre": "Potrero Alto",
    }).json()["potrero"]["id"]
    anchor = timezone.localtime(timezone.now() - timedelta(days=278))
    cow_id = post_json(client, f"/api/vacas/nueva/{paddock_id}/", {
        "codigo": "V-830", "fechaEmbarazo": anchor.isoformat(),
    }).json()["vaca"]["id"]

    body = client.get("/api/revisar-vacas/").json()

    assert body["detalles"] == ["Embarazo - Vaca V-830: Alerta enviada y fecha eliminada."]
    assert mailoutbox[0].to == [owner.email]
    assert Cow.objects.get(pk=cow_id).pregnancy_date is None
