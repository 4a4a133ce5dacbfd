from http import HTTPStatus

import pytest

from postboard.api.error_handling import ProblemDetailException, raise_status


def test_raise_status():
    with pytest.raises(ProblemDetailException) as exc_info:
        raise_status(HTTPStatus.CONFLICT, "Already there")

    assert exc_info.value.status_code == 409
    assert exc_info.value.detail == "Already there"
    assert exc_info.value.title == "Conflict"
    assert exc_info.value.type is None


def test_raise_status_without_detail():
    with pytest.raises(ProblemDetailException) as exc_info:
        raise_status(HTTPStatus.INTERNAL_SERVER_ERROR)

    assert exc_info.value.detail == "Internal Server Error"


def test_problem_detail_response(fastapi_app, test_client):
    @fastapi_app.get("/api/test-problem-detail")
    def _problem() -> None:
        raise ProblemDetailException(
            HTTPStatus.BAD_REQUEST, detail="Broken", title="Bad", type="about:blank", headers={"X-Test": "yes"}
        )

    response = test_client.get("/api/test-problem-detail")

    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert response.json() == {"detail": "Broken", "status": 400, "title": "Bad", "type": "about:blank"}
    assert response.headers["X-Test"] == "yes"
