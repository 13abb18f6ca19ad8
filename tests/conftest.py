import os

# Set environment variables BEFORE any imports that might use settings
os.environ["PROBLEM_TYPE_BASE_URL"] = "https://httpstatuses.com/"
os.environ["PROBLEM_INSTANCE_FROM_PATH"] = "true"
os.environ["PROBLEM_EXPOSE_SERVER_ERROR_DETAIL"] = "false"

import pytest
from fastapi import FastAPI, HTTPException, status
from fastapi.testclient import TestClient

from http_problem.api.exception_handlers import register_exception_handlers
from http_problem.errors import ConflictError, NotFoundError, ProblemError
from http_problem.schemas.problem import Problem


def create_app() -> FastAPI:
    """Small application whose routes fail in every way the handlers cover."""
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/orders/{order_id}")
    def get_order(order_id: int):
        raise NotFoundError(f"Order {order_id} does not exist")

    @app.post("/orders")
    def create_order():
        raise ConflictError("Order 1 already exists")

    @app.get("/account/{account_id}/withdraw")
    def withdraw(account_id: int):
        problem = (
            Problem.new("You do not have enough credit.")
            .set_type_url("https://example.com/probs/out-of-credit")
            .set_status(status.HTTP_403_FORBIDDEN)
            .set_detail("Your current balance is 30, but that costs 50.")
            .set_instance(f"/account/{account_id}/msgs/abc")
        )
        raise ProblemError(problem=problem)

    @app.get("/teapot")
    def teapot():
        raise ProblemError(
            problem=Problem.with_title_and_type_from_status(418),
            headers={"X-Brew": "coffee"},
        )

    @app.get("/untyped")
    def untyped():
        raise ProblemError(problem=Problem.new("Something odd"))

    @app.get("/unregistered")
    def unregistered():
        raise ProblemError(problem=Problem.with_title_from_status(600))

    @app.get("/http/{code}")
    def http_error(code: int, detail: str | None = None):
        raise HTTPException(status_code=code, detail=detail)

    @app.get("/orders")
    def list_orders(page: int, page_size: int):
        return []

    return app


@pytest.fixture(scope="function")
def app() -> FastAPI:
    return create_app()


@pytest.fixture(scope="function")
def client(app: FastAPI):
    """Create a test client for the problem application."""
    yield TestClient(app)
