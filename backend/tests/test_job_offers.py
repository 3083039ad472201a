from conftest import offer_payload

OFFERS = {"path": "oferta_laboral"}


def offer_url(offer_id):
    return {"path": "oferta_laboral", "id": offer_id}


def test_create_offer_applies_defaults(client, offer_id, recruiter_id):
    response = client.get("/", params=offer_url(offer_id))
    assert response.status_code == 200
    body = response.json()
    assert body["titulo"] == "Backend Developer"
    assert body["tipo_contrato"] == "Indefinido"
    assert body["estado"] == "Vigente"
    assert body["fecha_cierre"] == "2030-01-31"
    assert body["reclutador_id"] == recruiter_id


def test_create_offer_by_candidate_forbidden(client, candidate_id):
    response = client.post("/", params=OFFERS, json=offer_payload(candidate_id))
    assert response.status_code == 403
    assert response.json() == {
        "error": "Only users with the Recruiter role can create job offers"
    }
    assert client.get("/", params=OFFERS).json() == []


def test_create_offer_by_unknown_user(client):
    response = client.post("/", params=OFFERS, json=offer_payload(77))
    assert response.status_code == 404
    assert response.json() == {"error": "User 77 does not exist"}


def test_create_offer_invalid_contract_type(client, recruiter_id):
    response = client.post(
        "/", params=OFFERS, json=offer_payload(recruiter_id, tipo_contrato="Freelance")
    )
    assert response.status_code == 400
    assert "tipo_contrato" in response.json()["error"]


def test_create_offer_with_explicit_enums(client, create_offer):
    offer_id = create_offer(tipo_contrato="Práctica", estado="Cerrada")
    body = client.get("/", params=offer_url(offer_id)).json()
    assert body["tipo_contrato"] == "Práctica"
    assert body["estado"] == "Cerrada"


def test_list_open_offers(client, create_offer):
    open_id = create_offer()
    create_offer(titulo="Old role", estado="Cerrada")
    create_offer(titulo="Withdrawn role", estado="Baja")

    all_offers = client.get("/", params=OFFERS).json()
    assert len(all_offers) == 3

    response = client.get("/", params={"path": "oferta_laboral", "estado": "vigentes"})
    assert response.status_code == 200
    assert [offer["id"] for offer in response.json()] == [open_id]


def test_unknown_status_filter_is_ignored(client, create_offer):
    create_offer()
    create_offer(estado="Cerrada")
    response = client.get("/", params={"path": "oferta_laboral", "estado": "cerradas"})
    assert len(response.json()) == 2


def test_deactivate_offer(client, offer_id):
    response = client.put("/", params=offer_url(offer_id), json={"accion": "desactivar"})
    assert response.status_code == 200
    assert response.json() == {"message": "Job offer deactivated"}

    body = client.get("/", params=offer_url(offer_id)).json()
    assert body["estado"] == "Baja"
    assert body["titulo"] == "Backend Developer"


def test_replace_offer(client, offer_id):
    payload = {
        "titulo": "Senior Backend Developer",
        "descripcion": "Own the API",
        "ubicacion": "Remote",
        "salario": 2500000,
        "tipo_contrato": "Temporal",
        "fecha_cierre": "2031-02-28",
        "estado": "Vigente",
    }
    response = client.put("/", params=offer_url(offer_id), json=payload)
    assert response.status_code == 200
    assert response.json() == {"message": "Job offer updated"}

    body = client.get("/", params=offer_url(offer_id)).json()
    assert body["titulo"] == "Senior Backend Developer"
    assert body["tipo_contrato"] == "Temporal"
    assert body["salario"] == 2500000


def test_replace_offer_requires_every_field(client, offer_id):
    response = client.put("/", params=offer_url(offer_id), json={"titulo": "Only title"})
    assert response.status_code == 400


def test_replace_missing_offer(client):
    response = client.put("/", params=offer_url(31), json={"accion": "desactivar"})
    assert response.status_code == 404
    assert response.json() == {"error": "Job offer 31 does not exist"}


def test_patch_offer(client, offer_id):
    response = client.patch("/", params=offer_url(offer_id), json={"salario": 999})
    assert response.status_code == 200
    assert response.json() == {"message": "Job offer partially updated"}

    body = client.get("/", params=offer_url(offer_id)).json()
    assert body["salario"] == 999
    assert body["titulo"] == "Backend Developer"


def test_patch_offer_rejects_unknown_field(client, offer_id):
    response = client.patch("/", params=offer_url(offer_id), json={"reclutador": 1})
    assert response.status_code == 400


def test_patch_offer_invalid_status(client, offer_id):
    response = client.patch("/", params=offer_url(offer_id), json={"estado": "Abierta"})
    assert response.status_code == 400


def test_patch_offer_without_data(client, offer_id):
    response = client.patch("/", params=offer_url(offer_id))
    assert response.status_code == 400
    assert response.json() == {"error": "No data provided to update"}


def test_patch_offer_requires_id(client):
    response = client.patch("/", params=OFFERS, json={"salario": 1})
    assert response.status_code == 400
    assert response.json() == {"error": "Job offer ID is required"}


def test_delete_offer(client, offer_id):
    response = client.delete("/", params=offer_url(offer_id))
    assert response.status_code == 200
    assert response.json() == {"message": "Job offer deleted"}
    assert client.get("/", params=offer_url(offer_id)).status_code == 404


def test_delete_offer_with_applications_fails(client, offer_id, application_id):
    response = client.delete("/", params=offer_url(offer_id))
    assert response.status_code == 500
    assert "FOREIGN KEY" in response.json()["error"]
    assert client.get("/", params=offer_url(offer_id)).status_code == 200
