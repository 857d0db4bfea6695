from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

import requests

log = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30


class TestBankAPIError(RuntimeError):
    __test__ = False

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class TestBankClient:
    """Thin wrapper over the Test Bank REST API."""

    __test__ = False

    def __init__(
        self,
        base_url: str,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        token: str | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        if token:
            self.session.headers.update({"Authorization": f"Bearer {token}"})

    def _request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            log.error("API request failed %s %s: %s", method, url, exc)
            raise TestBankAPIError(str(exc)) from exc

        if response.status_code == 204 or not response.content:
            if response.ok:
                return {"success": True}
            raise TestBankAPIError(f"HTTP error {response.status_code}", response.status_code)

        try:
            data = response.json()
        except ValueError as exc:
            log.error("Invalid JSON from %s %s", method, url)
            raise TestBankAPIError("Invalid server response", response.status_code) from exc

        if not response.ok:
            message = data.get("error") if isinstance(data, dict) else None
            raise TestBankAPIError(message or "An error occurred", response.status_code)
        return data

    @staticmethod
    def _data(result: dict[str, Any]) -> Any:
        return result.get("data")

    # ---- auth ----
    def health_check(self) -> bool:
        try:
            self._request("GET", "/api/health")
        except TestBankAPIError:
            return False
        return True

    def signup(self, name: str, email: str, password: str) -> None:
        self._request(
            "POST",
            "/api/auth/signup",
            json={"name": name, "email": email, "password": password},
        )

    def login(self, email: str, password: str) -> dict[str, Any]:
        result = self._request(
            "POST", "/api/auth/login", json={"email": email, "password": password}
        )
        data = self._data(result) or {}
        token = data.get("accessToken")
        if token:
            self.session.headers.update({"Authorization": f"Bearer {token}"})
        return data

    def get_user(self, user_id: str) -> dict[str, Any]:
        return self._data(self._request("GET", "/api/auth/user", params={"id": user_id}))

    # ---- tests ----
    def list_tests(self, user_id: str) -> list[dict[str, Any]]:
        return self._data(self._request("GET", "/api/tests", params={"userId": user_id}))

    def create_test(
        self,
        title: str,
        questions: list[dict[str, Any]],
        user_id: str,
        status: str = "draft",
    ) -> dict[str, Any]:
        body = {"title": title, "status": status, "questions": questions, "userId": user_id}
        return self._data(self._request("POST", "/api/tests", json=body))

    def get_test(self, test_id: str) -> dict[str, Any]:
        return self._data(self._request("GET", f"/api/tests/{test_id}"))

    def update_test(
        self,
        test_id: str,
        questions: list[dict[str, Any]],
        status: str | None = None,
        title: str | None = None,
    ) -> dict[str, Any]:
        body: dict[str, Any] = {"questions": questions}
        if status is not None:
            body["status"] = status
        if title is not None:
            body["title"] = title
        return self._data(self._request("PUT", f"/api/tests/{test_id}", json=body))

    def publish_test(self, test_id: str, configuration: Mapping[str, Any]) -> dict[str, Any]:
        return self._data(
            self._request("PUT", f"/api/tests/{test_id}/publish", json=dict(configuration))
        )

    def delete_test(self, test_id: str) -> None:
        self._request("DELETE", f"/api/tests/{test_id}")

    def bulk_delete(self, test_ids: Iterable[str]) -> int:
        result = self._request("POST", "/api/tests/bulk-delete", json={"testIds": list(test_ids)})
        return int(result.get("count", 0))

    # ---- taking ----
    def submit_answers(
        self, test_id: str, user_id: str, answers: Mapping[str, str | None]
    ) -> dict[str, Any]:
        payload = [
            {"questionId": question_id, "chosenChoiceId": choice_id}
            for question_id, choice_id in answers.items()
        ]
        return self._data(
            self._request(
                "POST",
                f"/api/tests/{test_id}/submit",
                json={"userId": user_id, "answers": payload},
            )
        )

    def get_statistics(self, test_id: str) -> dict[str, Any]:
        return self._data(self._request("GET", f"/api/tests/{test_id}/statistics"))
