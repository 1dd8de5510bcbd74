"""
HTTP client for the booking API.

The client object owns the current bearer token: ``login`` and ``register``
store it, ``logout`` clears it, and every other call sends it. Callers pass
the client around instead of reading a shared global token.
"""

from typing import Any, Optional

import httpx


class ApiError(Exception):
    """Non-2xx response from the API."""

    def __init__(self, status_code: int, message: str, payload: Any = None):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.payload = payload


class BookingApiClient:
    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        token: Optional[str] = None,
        http_client: Optional[httpx.Client] = None,
        timeout: float = 10.0,
    ):
        self._http = http_client or httpx.Client(base_url=base_url, timeout=timeout)
        self.token = token
        self.user: Optional[dict] = None

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    def _headers(self) -> dict:
        if self.token:
            return {"Authorization": f"Bearer {self.token}"}
        return {}

    def request(self, method: str, path: str, **kwargs) -> Any:
        headers = {**self._headers(), **kwargs.pop("headers", {})}
        response = self._http.request(method, path, headers=headers, **kwargs)

        if response.status_code == 204:
            return None

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if response.is_error:
            message = payload.get("error") if isinstance(payload, dict) else None
            raise ApiError(response.status_code, message or response.reason_phrase, payload)

        return payload

    # --- Auth ---

    def register(
        self,
        username: str,
        password: str,
        email: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> dict:
        body = {"username": username, "password": password}
        if email is not None:
            body["email"] = email
        if phone is not None:
            body["phone"] = phone
        data = self.request("POST", "/api/auth/register", json=body)
        self.token = data["token"]
        self.user = data["user"]
        return data["user"]

    def login(self, username: str, password: str) -> dict:
        data = self.request(
            "POST", "/api/auth/login", json={"username": username, "password": password}
        )
        self.token = data["token"]
        self.user = data["user"]
        return data["user"]

    def logout(self) -> None:
        """Revoke the session server-side, then forget the token locally."""
        try:
            if self.token:
                self.request("POST", "/api/auth/logout")
        finally:
            self.token = None
            self.user = None

    def me(self) -> dict:
        return self.request("GET", "/api/auth/me")["user"]

    # --- Resources ---

    def list_services(self, category: Optional[str] = None) -> list:
        if category:
            return self.request("GET", f"/api/services/category/{category}")
        return self.request("GET", "/api/services")

    def list_vehicles(self) -> list:
        return self.request("GET", "/api/vehicles")

    def add_vehicle(self, **vehicle) -> dict:
        return self.request("POST", "/api/vehicles", json=vehicle)

    def list_bookings(self) -> list:
        return self.request("GET", "/api/bookings")

    def create_booking(self, **booking) -> dict:
        return self.request("POST", "/api/bookings", json=booking)

    def cancel_booking(self, booking_id: str) -> dict:
        return self.request("POST", f"/api/bookings/{booking_id}/cancel")

    def close(self) -> None:
        self._http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
