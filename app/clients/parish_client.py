from __future__ import annotations

from typing import Any

import httpx
from loguru import logger

from .auth_session import AuthSession

DEFAULT_TIMEOUT = 30


class ApiClientError(Exception):
    """Failed API call, carrying the server's error code and message when present."""

    def __init__(self, status_code: int, message: str, errcode: str | None = None):
        self.status_code = status_code
        self.message = message
        self.errcode = errcode
        super().__init__(message)


class Resource:
    """One collection path.

    The verb mixins below add only the calls the server routes for that
    path, so an unsupported call fails as an AttributeError rather than a 404.
    """

    def __init__(self, client: ParishApiClient, path: str):
        self.client = client
        self.path = path


class Listable(Resource):
    async def list(self, **params: Any) -> list[dict[str, Any]]:
        return await self.client.request("GET", self.path, params=params)


class AdminListable(Resource):
    async def list_admin(self) -> list[dict[str, Any]]:
        return await self.client.request("GET", f"{self.path}/admin")


class Gettable(Resource):
    async def get(self, item_id: str) -> dict[str, Any]:
        return await self.client.request("GET", f"{self.path}/{item_id}")


class Creatable(Resource):
    async def create(self, data: dict[str, Any]) -> dict[str, Any]:
        return await self.client.request("POST", self.path, json=data)


class Updatable(Resource):
    async def update(self, item_id: str, data: dict[str, Any]) -> dict[str, Any]:
        return await self.client.request("PUT", f"{self.path}/{item_id}", json=data)


class Deletable(Resource):
    async def delete(self, item_id: str) -> dict[str, Any]:
        return await self.client.request("DELETE", f"{self.path}/{item_id}")


class Categorized(Resource):
    async def categories(self) -> list[str]:
        return await self.client.request("GET", f"{self.path}/categories")


class ManagedResource(Listable, Creatable, Updatable, Deletable):
    """Public list with admin create/update/delete."""


class LiveStreamResource:
    def __init__(self, client: ParishApiClient):
        self.client = client

    async def start(
        self,
        title: str,
        tag: str = "regular",
        publish_delay_hours: float | None = None,
    ) -> dict[str, Any]:
        if not title or not title.strip():
            raise ApiClientError(400, "Title is required", "E_INVALID_PARAMS")

        body: dict[str, Any] = {"title": title.strip(), "tag": tag}
        if publish_delay_hours is not None:
            body["publish_delay_hours"] = publish_delay_hours
        return await self.client.request("POST", "/live-stream/admin/start", json=body)

    async def stop(self, stream_id: str) -> dict[str, Any]:
        return await self.client.request("POST", f"/live-stream/admin/stop/{stream_id}")

    async def status(self) -> dict[str, Any]:
        return await self.client.request("GET", "/live-stream/admin/status")

    async def active(self) -> dict[str, Any]:
        return await self.client.request("GET", "/live-stream/active")

    async def videos(self) -> list[dict[str, Any]]:
        return await self.client.request("GET", "/live-stream/videos")

    async def video(self, stream_id: str) -> dict[str, Any]:
        return await self.client.request("GET", f"/live-stream/videos/{stream_id}")

    async def update_viewer_count(self, stream_id: str, viewer_count: int) -> dict[str, Any]:
        return await self.client.request(
            "PUT",
            f"/live-stream/viewer-count/{stream_id}",
            json={"viewer_count": viewer_count},
        )

    async def network_check(
        self, effective_type: str | None = None, downlink: float | None = None
    ) -> dict[str, Any]:
        params = {"effective_type": effective_type, "downlink": downlink}
        return await self.client.request("GET", "/live-stream/network-check", params=params)


class DonorResource(ManagedResource, AdminListable):
    async def search(self, blood_group: str) -> list[dict[str, Any]]:
        return await self.client.request(
            "GET", f"{self.path}/search", params={"blood_group": blood_group}
        )

    async def stats(self) -> dict[str, Any]:
        return await self.client.request("GET", f"{self.path}/stats")


class ChurchResource(ManagedResource, Gettable):
    pass


class CommitteeResource(ManagedResource, AdminListable, Gettable):
    pass


class DisplayResource(ManagedResource, AdminListable):
    """Hero slides and social links."""


class NewsResource(ManagedResource, AdminListable, Gettable):
    async def list(self, category: str | None = None, limit: int | None = None):  # type: ignore[override]
        return await super().list(category=category, limit=limit)


class GalleryResource(ManagedResource, Categorized):
    pass


class DocumentResource(Listable, Categorized, Updatable, Deletable):
    async def upload(
        self,
        file_name: str,
        content: bytes,
        title: str,
        content_type: str = "application/pdf",
        **fields: str,
    ) -> dict[str, Any]:
        return await self.client.request(
            "POST",
            self.path,
            files={"file": (file_name, content, content_type)},
            data={"title": title, **fields},
        )


class MassTimingResource(ManagedResource):
    async def for_church(self, church_id: str) -> list[dict[str, Any]]:
        return await self.client.request("GET", f"{self.path}/church/{church_id}")


class MessageResource(Listable, Deletable):
    """Contact form: public submit, admin list on the collection path."""

    async def submit(self, name: str, email: str, subject: str, message: str) -> dict[str, Any]:
        body = {"name": name, "email": email, "subject": subject, "message": message}
        return await self.client.request("POST", self.path, json=body)

    async def set_status(self, item_id: str, status: str) -> dict[str, Any]:
        return await self.client.request(
            "PATCH", f"{self.path}/{item_id}/status", json={"status": status}
        )


class ReviewedResource(Listable, AdminListable, Deletable):
    """Public submissions shown once an admin approves them."""

    async def submit(self, data: dict[str, Any]) -> dict[str, Any]:
        return await self.client.request("POST", self.path, json=data)

    async def set_status(self, item_id: str, status: str) -> dict[str, Any]:
        return await self.client.request(
            "PUT", f"{self.path}/{item_id}/status", json={"status": status}
        )


class NotificationResource(ManagedResource, AdminListable):
    pass


class EventResource(ManagedResource, Gettable):
    pass


class OfferingResource(AdminListable, Creatable, Deletable):
    async def stats(self) -> dict[str, Any]:
        return await self.client.request("GET", f"{self.path}/stats")

    async def by_receipt(self, receipt_number: str) -> dict[str, Any]:
        return await self.client.request("GET", f"{self.path}/receipt/{receipt_number}")


class FamilyResource(ManagedResource, AdminListable, Gettable):
    async def stats(self) -> dict[str, Any]:
        return await self.client.request("GET", f"{self.path}/stats")

    async def parish_units(self) -> list[str]:
        return await self.client.request("GET", f"{self.path}/parish-units")

    async def delete_member(self, family_id: str, member_id: str) -> dict[str, Any]:
        return await self.client.request("DELETE", f"{self.path}/{family_id}/members/{member_id}")


class ParishApiClient:
    """Async client for the `/api` surface.

    Every call unwraps the `{success, results}` envelope and raises
    `ApiClientError` with the server message on failure.
    """

    def __init__(
        self,
        base_url: str,
        session: AuthSession | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session or AuthSession()
        self.transport = transport
        self.timeout = timeout

        self.live_stream = LiveStreamResource(self)
        self.donors = DonorResource(self, "/blood-bank")
        self.committee = CommitteeResource(self, "/committee")
        self.documents = DocumentResource(self, "/documents")
        self.gallery = GalleryResource(self, "/gallery")
        self.news = NewsResource(self, "/news")
        self.churches = ChurchResource(self, "/churches")
        self.mass_timings = MassTimingResource(self, "/mass-timings")
        self.messages = MessageResource(self, "/contact")
        self.prayer_requests = ReviewedResource(self, "/prayer-requests")
        self.thanksgivings = ReviewedResource(self, "/thanksgivings")
        self.hero_slides = DisplayResource(self, "/hero-slides")
        self.social_links = DisplayResource(self, "/social-links")
        self.notifications = NotificationResource(self, "/notifications")
        self.events = EventResource(self, "/events")
        self.offerings = OfferingResource(self, "/venda")
        self.families = FamilyResource(self, "/family-units")

    def _build_headers(self) -> dict[str, str]:
        return self.session.auth_headers()

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
        files: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
    ) -> Any:
        url = f"{self.base_url}/api{path}"
        if params:
            params = {k: v for k, v in params.items() if v is not None}

        async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
            response = await client.request(
                method,
                url,
                json=json,
                params=params,
                files=files,
                data=data,
                headers=self._build_headers(),
            )

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if response.is_error or not isinstance(payload, dict) or not payload.get("success"):
            errcode = payload.get("errcode") if isinstance(payload, dict) else None
            message = (
                payload.get("errmesg") if isinstance(payload, dict) else None
            ) or response.reason_phrase or "Request failed"
            logger.warning(f"{method} {path} failed: {response.status_code} {errcode} {message}")
            raise ApiClientError(response.status_code, message, errcode)

        return payload.get("results")

    async def login(self, username: str, password: str) -> dict[str, Any]:
        results = await self.request(
            "POST", "/admin/login", json={"username": username, "password": password}
        )
        self.session.set(results["token"], results.get("user"))
        return results["user"]

    async def family_login(self, phone: str, password: str) -> dict[str, Any]:
        results = await self.request(
            "POST", "/family-auth/login", json={"phone": phone, "password": password}
        )
        self.session.set(results["token"], results.get("family"))
        return results["family"]

    def logout(self) -> None:
        self.session.clear()

    async def verify(self) -> dict[str, Any]:
        return await self.request("GET", "/admin/verify")

    async def dashboard(self) -> dict[str, Any]:
        return await self.request("GET", "/admin/dashboard")

    async def upload_image(
        self, file_name: str, content: bytes, content_type: str = "image/jpeg"
    ) -> dict[str, Any]:
        return await self.request(
            "POST", "/upload", files={"image": (file_name, content, content_type)}
        )

    async def youtube_auth_url(self) -> str:
        results = await self.request("GET", "/youtube/auth-url")
        return results["url"]
