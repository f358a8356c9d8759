import unittest
from unittest.mock import patch
from urllib.parse import unquote

from fastapi.testclient import TestClient

from main import app
from models.resume import ResumeRecord
from services.export import PLACEHOLDER_CONTENT, ResumeExporter
from services.export.exporter import get_resume_exporter
from services.extraction import RemoteResumeExtractor
from services.llm import LLMConfig, LLMProvider
from services.session import SessionManager, get_session_manager
from services.templates.store import TemplateStore, get_template_store

SAMPLE_RESUME = b"""John A. Smith
john.smith@email.com
(415) 555-0199
San Francisco, CA

EXPERIENCE
Senior Engineer at Acme Corp (2020-Present)

EDUCATION
B.S. Computer Science, MIT (2016-2020)
"""


class FailingProvider(LLMProvider):
    def __init__(self):
        super().__init__("test-key", LLMConfig(model="fake"))

    async def generate(self, messages):
        raise ConnectionError("network down")

    async def generate_with_usage(self, messages):
        raise ConnectionError("network down")


class ApiTestCase(unittest.TestCase):
    def setUp(self):
        self.sessions = SessionManager()
        self.store = TemplateStore()
        self.exporter = ResumeExporter(store=self.store)
        app.dependency_overrides[get_session_manager] = lambda: self.sessions
        app.dependency_overrides[get_template_store] = lambda: self.store
        app.dependency_overrides[get_resume_exporter] = lambda: self.exporter
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()

    def upload(self, filename="resume.txt", content=SAMPLE_RESUME, mode="local"):
        return self.client.post(
            "/api/resume/upload",
            params={"mode": mode},
            files={"file": (filename, content, "text/plain")},
        )

    def upload_session_id(self) -> str:
        response = self.upload()
        self.assertEqual(response.status_code, 200)
        return response.json()["session_id"]


class HealthApiTests(ApiTestCase):
    def test_health(self):
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["data"]["health"], "Server is healthy.")

    def test_root(self):
        self.assertEqual(self.client.get("/").status_code, 200)


class ResumeApiTests(ApiTestCase):
    def test_upload_parses_fields(self):
        response = self.upload()
        self.assertEqual(response.status_code, 200)
        body = response.json()

        self.assertEqual(body["filename"], "resume.txt")
        self.assertEqual(body["method"], "local")
        self.assertEqual(body["resume_data"]["name"], "John A. Smith")
        self.assertEqual(body["resume_data"]["location"], "San Francisco, CA")
        self.assertEqual(body["confidence_levels"]["name"], "HIGH")
        self.assertEqual(body["confidence"]["summary"], 0.0)
        self.assertIn("summary", body["needs_attention"])
        self.assertIsNotNone(self.sessions.get_session(body["session_id"]))

    def test_remote_failure_falls_back(self):
        extractor = RemoteResumeExtractor(FailingProvider())
        with patch("routers.resume.get_resume_extractor", return_value=extractor):
            response = self.upload(mode="remote")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["method"], "local")
        self.assertEqual(response.json()["resume_data"]["email"], "john.smith@email.com")

    def test_unsupported_format(self):
        response = self.upload(filename="resume.rtf")
        self.assertEqual(response.status_code, 415)
        self.assertIn("rtf", response.json()["detail"])

    def test_empty_file(self):
        response = self.upload(content=b"   ")
        self.assertEqual(response.status_code, 422)

    def test_invalid_mode(self):
        self.assertEqual(self.upload(mode="cloud").status_code, 422)

    def test_get_update_delete(self):
        session_id = self.upload_session_id()

        response = self.client.get(f"/api/resume/{session_id}")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["resume_data"]["email"], "john.smith@email.com")

        response = self.client.put(
            f"/api/resume/{session_id}",
            json={"phone": "", "summary": "Platform engineer."},
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["resume_data"]["phone"], "")
        self.assertEqual(body["confidence"]["phone"], 0.0)
        self.assertIn("phone", body["needs_attention"])
        self.assertNotIn("summary", body["needs_attention"])
        self.assertEqual(body["resume_data"]["name"], "John A. Smith")

        response = self.client.delete(f"/api/resume/{session_id}")
        self.assertEqual(response.json(), {"session_id": session_id, "deleted": True})
        self.assertEqual(self.client.get(f"/api/resume/{session_id}").status_code, 404)

    def test_update_validation(self):
        session_id = self.upload_session_id()
        self.assertEqual(
            self.client.put(f"/api/resume/{session_id}", json={"hobbies": "chess"}).status_code, 422
        )
        self.assertEqual(
            self.client.put(f"/api/resume/{session_id}", json={"phone": 123}).status_code, 422
        )

    def test_unknown_session(self):
        self.assertEqual(self.client.get("/api/resume/missing").status_code, 404)
        self.assertEqual(self.client.put("/api/resume/missing", json={"name": "X"}).status_code, 404)
        self.assertEqual(self.client.delete("/api/resume/missing").status_code, 404)


class TemplateApiTests(ApiTestCase):
    def test_list_builtins(self):
        response = self.client.get("/api/templates")
        self.assertEqual(response.status_code, 200)
        ids = [t["id"] for t in response.json()["templates"]]
        self.assertEqual(len(ids), 6)
        self.assertIn("modern-professional", ids)

    def test_placeholders(self):
        placeholders = self.client.get("/api/templates/placeholders").json()["placeholders"]
        self.assertEqual(placeholders[-1], "{{date}} or {date} - Current date")

    def test_upload_and_delete(self):
        response = self.client.post(
            "/api/templates",
            files={"file": ("cover.txt", b"Dear {{name}}", "text/plain")},
        )
        self.assertEqual(response.status_code, 201)
        template = response.json()
        self.assertTrue(template["id"].startswith("custom-"))
        self.assertTrue(template["is_custom"])
        self.assertEqual(template["name"], "cover")
        self.assertEqual(len(self.client.get("/api/templates").json()["templates"]), 7)

        response = self.client.delete(f"/api/templates/{template['id']}")
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.json()["deleted"])
        self.assertEqual(self.client.delete(f"/api/templates/{template['id']}").status_code, 404)

    def test_upload_unsupported(self):
        response = self.client.post(
            "/api/templates",
            files={"file": ("cover.rtf", b"{\\rtf1}", "application/rtf")},
        )
        self.assertEqual(response.status_code, 415)

    def test_builtin_cannot_be_deleted(self):
        self.assertEqual(self.client.delete("/api/templates/modern-professional").status_code, 404)


class ExportApiTests(ApiTestCase):
    def test_preview(self):
        session_id = self.upload_session_id()
        response = self.client.get(
            f"/api/export/{session_id}/preview", params={"template_id": "modern-professional"}
        )
        self.assertEqual(response.status_code, 200)
        self.assertIn("text/html", response.headers["content-type"])
        self.assertIn("John A. Smith", response.text)

    def test_download_pdf(self):
        session_id = self.upload_session_id()
        response = self.client.get(
            f"/api/export/{session_id}",
            params={"template_id": "modern-professional", "format": "pdf"},
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.content, PLACEHOLDER_CONTENT)
        self.assertEqual(
            response.headers["content-disposition"],
            "attachment; filename=John_A._Smith_Resume.pdf; filename*=UTF-8''John_A._Smith_Resume.pdf",
        )

    def test_download_with_non_latin_name(self):
        session = self.sessions.create_session(ResumeRecord(name="王伟", email="wei@example.com"))
        response = self.client.get(
            f"/api/export/{session.session_id}",
            params={"template_id": "modern-professional", "format": "pdf"},
        )
        self.assertEqual(response.status_code, 200)

        disposition = response.headers["content-disposition"]
        prefix = "attachment; filename=Resume.pdf; filename*=UTF-8''"
        self.assertTrue(disposition.startswith(prefix))
        self.assertEqual(unquote(disposition[len(prefix):]), "王伟_Resume.pdf")

    def test_download_json(self):
        session_id = self.upload_session_id()
        response = self.client.get(
            f"/api/export/{session_id}",
            params={"template_id": "tech-startup", "format": "json"},
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["resume_data"]["name"], "John A. Smith")
        self.assertIn("confidence", body)

    def test_custom_template_preview(self):
        session_id = self.upload_session_id()
        template_id = self.client.post(
            "/api/templates",
            files={"file": ("cover.txt", b"Dear {{name}},\nPhone: {{phone}}", "text/plain")},
        ).json()["id"]

        response = self.client.get(
            f"/api/export/{session_id}/preview", params={"template_id": template_id}
        )
        self.assertEqual(response.status_code, 200)
        self.assertIn("Dear John A. Smith,", response.text)
        self.assertIn("(415) 555-0199", response.text)

    def test_empty_custom_template(self):
        session_id = self.upload_session_id()
        template_id = self.client.post(
            "/api/templates",
            files={"file": ("blank.txt", b"   ", "text/plain")},
        ).json()["id"]

        response = self.client.get(
            f"/api/export/{session_id}/preview", params={"template_id": template_id}
        )
        self.assertEqual(response.status_code, 422)

    def test_errors(self):
        session_id = self.upload_session_id()
        self.assertEqual(
            self.client.get(f"/api/export/{session_id}", params={"template_id": "nope"}).status_code, 404
        )
        self.assertEqual(
            self.client.get(
                f"/api/export/{session_id}", params={"template_id": "tech-startup", "format": "xml"}
            ).status_code,
            422,
        )
        self.assertEqual(
            self.client.get("/api/export/missing", params={"template_id": "tech-startup"}).status_code, 404
        )


if __name__ == "__main__":
    unittest.main()
