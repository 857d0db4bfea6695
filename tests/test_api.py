QUESTIONS = [
    {
        "text": "Capital of France?",
        "choices": [
            {"text": "Berlin", "isCorrect": False},
            {"text": "Paris", "isCorrect": True},
        ],
    },
    {
        "text": "2 + 2?",
        "choices": [
            {"text": "4", "isCorrect": True},
            {"text": "5", "isCorrect": False},
        ],
    },
    {
        "text": "Largest planet?",
        "choices": [
            {"text": "Jupiter", "isCorrect": True},
            {"text": "Mars", "isCorrect": False},
        ],
    },
]


def _create_test(api_client, user_id, title="Quiz", questions=QUESTIONS):
    response = api_client.post(
        "/api/tests",
        json={"title": title, "questions": questions, "userId": user_id},
    )
    assert response.status_code == 201
    return response.json()["data"]


def test_health(api_client) -> None:
    response = api_client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_signup_rejects_duplicate_email(api_client, author) -> None:
    response = api_client.post(
        "/api/auth/signup",
        json={"name": "Other", "email": "ada@example.com", "password": "secret2"},
    )
    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Email already exists"}


def test_signup_validation_error_uses_envelope(api_client) -> None:
    response = api_client.post(
        "/api/auth/signup", json={"name": "X", "email": "not-an-email", "password": "secret1"}
    )
    assert response.status_code == 400
    assert response.json()["success"] is False
    assert "email" in response.json()["error"]


def test_login_with_bad_credentials(api_client, author) -> None:
    response = api_client.post(
        "/api/auth/login", json={"email": "ada@example.com", "password": "wrong-pass"}
    )
    assert response.status_code == 401
    assert response.json()["error"] == "Invalid credentials"


def test_login_returns_user_and_token(api_client, author) -> None:
    assert author["email"] == "ada@example.com"
    assert author["tokenType"] == "bearer"

    me = api_client.get(
        "/api/auth/me", headers={"Authorization": f"Bearer {author['accessToken']}"}
    )
    assert me.status_code == 200
    assert me.json()["data"]["id"] == author["id"]

    assert api_client.get("/api/auth/me").status_code == 401


def test_get_user(api_client, author) -> None:
    response = api_client.get("/api/auth/user", params={"id": author["id"]})
    assert response.status_code == 200
    assert response.json()["data"]["name"] == "Ada"

    assert api_client.get("/api/auth/user").status_code == 400
    assert api_client.get("/api/auth/user", params={"id": "nobody"}).status_code == 404


def test_create_and_get_test(api_client, author) -> None:
    created = _create_test(api_client, author["id"])
    assert created["status"] == "draft"

    response = api_client.get(f"/api/tests/{created['id']}")
    assert response.status_code == 200
    data = response.json()["data"]
    assert [q["text"] for q in data["questions"]] == [q["text"] for q in QUESTIONS]
    assert [c["text"] for c in data["questions"][0]["choices"]] == ["Berlin", "Paris"]
    assert data["questions"][0]["choices"][1]["isCorrect"] is True
    assert "examPassword" not in data


def test_create_test_requires_known_user(api_client) -> None:
    response = api_client.post(
        "/api/tests", json={"title": "Quiz", "questions": [], "userId": "nobody"}
    )
    assert response.status_code == 404
    assert response.json()["error"] == "User not found"


def test_create_test_requires_title(api_client, author) -> None:
    response = api_client.post(
        "/api/tests", json={"title": "   ", "questions": [], "userId": author["id"]}
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Title is required"


def test_create_test_rejects_unknown_status(api_client, author) -> None:
    response = api_client.post(
        "/api/tests",
        json={"title": "Quiz", "status": "archived", "questions": [], "userId": author["id"]},
    )
    assert response.status_code == 400


def test_list_tests(api_client, author) -> None:
    _create_test(api_client, author["id"], title="First")
    _create_test(api_client, author["id"], title="Second", questions=QUESTIONS[:1])

    response = api_client.get("/api/tests", params={"userId": author["id"]})
    tests = response.json()["data"]
    assert {t["title"]: t["questionCount"] for t in tests} == {"First": 3, "Second": 1}

    assert api_client.get("/api/tests").status_code == 400

    by_token = api_client.get(
        "/api/tests", headers={"Authorization": f"Bearer {author['accessToken']}"}
    )
    assert len(by_token.json()["data"]) == 2


def test_update_replaces_questions(api_client, author) -> None:
    created = _create_test(api_client, author["id"])

    response = api_client.put(
        f"/api/tests/{created['id']}",
        json={"questions": QUESTIONS[1:], "status": "published"},
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["status"] == "published"
    assert [q["text"] for q in data["questions"]] == ["2 + 2?", "Largest planet?"]

    assert api_client.put("/api/tests/missing", json={"questions": []}).status_code == 404


def test_publish_applies_configuration(api_client, author) -> None:
    created = _create_test(api_client, author["id"])

    response = api_client.put(
        f"/api/tests/{created['id']}/publish",
        json={
            "title": "Final exam",
            "useDuration": True,
            "testDuration": 45,
            "useGrade": False,
            "grade": "ignored",
            "showCorrectAnswerOption": "reach",
            "pointToShowAnswer": 80,
        },
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["status"] == "published"
    assert data["title"] == "Final exam"
    assert data["testDuration"] == 45
    assert data["grade"] is None
    assert data["pointToShowAnswer"] == 80


def test_publish_validation_errors(api_client, author) -> None:
    created = _create_test(api_client, author["id"])

    response = api_client.put(
        f"/api/tests/{created['id']}/publish",
        json={"title": "Exam", "useDuration": True, "usePassword": True},
    )
    assert response.status_code == 400
    error = response.json()["error"]
    assert "Test duration is required when enabled." in error
    assert "Exam password is required when enabled." in error


def test_delete_test(api_client, author) -> None:
    created = _create_test(api_client, author["id"])

    assert api_client.delete(f"/api/tests/{created['id']}").status_code == 200
    response = api_client.get(f"/api/tests/{created['id']}")
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Test not found"}
    assert api_client.delete(f"/api/tests/{created['id']}").status_code == 404


def test_bulk_delete(api_client, author) -> None:
    first = _create_test(api_client, author["id"])
    second = _create_test(api_client, author["id"])

    response = api_client.post(
        "/api/tests/bulk-delete", json={"testIds": [first["id"], second["id"], "missing"]}
    )
    assert response.json()["count"] == 2
    assert api_client.post("/api/tests/bulk-delete", json={"testIds": []}).status_code == 400


def test_submit_scores_and_statistics(api_client, author) -> None:
    test = api_client.get(f"/api/tests/{_create_test(api_client, author['id'])['id']}")
    questions = test.json()["data"]["questions"]
    test_id = test.json()["data"]["id"]

    def choice(question, text):
        return next(c["id"] for c in question["choices"] if c["text"] == text)

    answers = [
        {"questionId": questions[0]["id"], "chosenChoiceId": choice(questions[0], "Paris")},
        {"questionId": questions[1]["id"], "chosenChoiceId": choice(questions[1], "4")},
        {"questionId": questions[2]["id"], "chosenChoiceId": choice(questions[2], "Mars")},
    ]
    response = api_client.post(
        f"/api/tests/{test_id}/submit", json={"userId": author["id"], "answers": answers}
    )
    assert response.status_code == 200
    result = response.json()["data"]
    assert result["correctCount"] == 2
    assert result["totalQuestions"] == 3
    assert result["score"] == 67
    assert [a["isCorrect"] for a in result["detailedAnswers"]] == [True, True, False]

    api_client.post(
        f"/api/tests/{test_id}/submit",
        json={"userId": author["id"], "answers": answers[:1]},
    )

    stats = api_client.get(f"/api/tests/{test_id}/statistics").json()["data"]
    assert stats["submissionCount"] == 2
    # (67 + 33) / 2
    assert stats["averageScore"] == 50
    assert len(stats["submissions"]) == 2


def test_submit_to_missing_test(api_client, author) -> None:
    response = api_client.post(
        "/api/tests/missing/submit", json={"userId": author["id"], "answers": []}
    )
    assert response.status_code == 404


def test_deleting_test_removes_submissions(api_client, author) -> None:
    test_id = _create_test(api_client, author["id"])["id"]
    api_client.post(f"/api/tests/{test_id}/submit", json={"userId": author["id"], "answers": []})

    api_client.delete(f"/api/tests/{test_id}")

    assert api_client.get(f"/api/tests/{test_id}/statistics").status_code == 404
