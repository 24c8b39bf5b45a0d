from conftest import auth_headers_for


def _send(client, requester, receiver):
    return client.post(
        "/friends/requests",
        json={"receiver_user_id": receiver},
        headers=auth_headers_for(requester),
    )


def test_friend_request_lifecycle(client):
    sent = _send(client, "u1", "u2")
    assert sent.status_code == 201
    request_id = sent.json()["friend_request_id"]
    assert sent.json()["status"] == "PENDING_SENT"

    inbox = client.get("/friends/requests", headers=auth_headers_for("u2"))
    assert inbox.status_code == 200
    assert inbox.json()["type"] == "received"
    assert [f["request_id"] for f in inbox.json()["friends"]] == [request_id]

    outbox = client.get("/friends/requests?type=sent", headers=auth_headers_for("u1"))
    assert outbox.json()["friends"][0]["user_id"] == "u2"

    accepted = client.post(
        f"/friends/requests/{request_id}/accept", headers=auth_headers_for("u2")
    )
    assert accepted.status_code == 200
    assert accepted.json()["friend_user_id"] == "u1"

    friends = client.get("/friends", headers=auth_headers_for("u1"))
    assert friends.json()["total"] == 1
    assert friends.json()["friends"][0]["name"] == "bob"

    removed = client.delete("/friends/u2", headers=auth_headers_for("u1"))
    assert removed.status_code == 200
    assert removed.json()["success"] is True

    assert client.get("/friends", headers=auth_headers_for("u2")).json()["total"] == 0


def test_duplicate_request_is_409(client):
    _send(client, "u1", "u2")
    response = _send(client, "u1", "u2")
    assert response.status_code == 409


def test_requester_cannot_accept_is_403(client):
    request_id = _send(client, "u1", "u2").json()["friend_request_id"]

    response = client.post(
        f"/friends/requests/{request_id}/accept", headers=auth_headers_for("u1")
    )

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "permission-denied"


def test_reject(client):
    request_id = _send(client, "u3", "u1").json()["friend_request_id"]

    response = client.post(
        f"/friends/requests/{request_id}/reject", headers=auth_headers_for("u1")
    )

    assert response.status_code == 200
    assert response.json()["status"] == "REJECTED"


def test_remove_non_friend_is_412(client):
    response = client.delete("/friends/u3", headers=auth_headers_for("u1"))
    assert response.status_code == 412


def test_list_paging_bounds(client):
    response = client.get("/friends?limit=0", headers=auth_headers_for("u1"))

    assert response.status_code == 400
    assert response.json()["error"]["details"]["field"] == "limit"


def test_list_status_filter(client):
    _send(client, "u1", "u2")
    response = client.get("/friends?status=pending_sent", headers=auth_headers_for("u1"))
    assert response.json()["total"] == 1


def test_metrics_endpoint(client):
    _send(client, "u1", "u2")
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "teamchat_usecase_events_total" in response.text
