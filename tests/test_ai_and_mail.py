from plantcare_social.shared.core.dependencies import get_ai_client, get_mail_client
from plantcare_social.shared.core.exceptions import APITimeoutError


class FakeAIClient:
    api_key = "gsk-test-key"
    is_configured = True

    def __init__(self, answer="Water when the top inch of soil is dry.", error=None):
        self.answer = answer
        self.error = error
        self.calls = []

    async def complete(self, messages, max_tokens):
        self.calls.append((messages, max_tokens))
        if self.error:
            raise self.error
        return f"  {self.answer}  "


class FakeMailClient:
    def __init__(self):
        self.sent = []

    async def send_email(self, to_email, subject, text):
        self.sent.append((to_email, subject, text))


class TestAIChat:

    def test_key_status_without_configuration(self, client):
        body = client.get("/ai/test").json()

        assert body["hasApiKey"] is False
        assert body["apiKeyLength"] == 0

    def test_answer_comes_from_assistant(self, app, client):
        fake = FakeAIClient()
        app.dependency_overrides[get_ai_client] = lambda: fake

        response = client.post("/ai/chat", json={"message": "How often should I water a pothos?"})

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "response": "Water when the top inch of soil is dry.",
            "source": "groq",
        }
        messages, max_tokens = fake.calls[0]
        assert messages[0]["role"] == "system"
        assert messages[-1] == {"role": "user", "content": "How often should I water a pothos?"}
        assert max_tokens == 500

    def test_blank_message_is_rejected(self, app, client):
        fake = FakeAIClient()
        app.dependency_overrides[get_ai_client] = lambda: fake

        response = client.post("/ai/chat", json={"message": "   "})

        assert response.status_code == 400
        assert response.json()["response"] == "Please provide a question about plant care."
        assert fake.calls == []

    def test_upstream_failure_apologizes(self, app, client):
        app.dependency_overrides[get_ai_client] = lambda: FakeAIClient(error=APITimeoutError("groq", 30))

        response = client.post("/ai/chat", json={"message": "Why are my leaves yellow?"})

        assert response.status_code == 500
        assert response.json()["success"] is False
        assert response.json()["response"].startswith("I apologize")

    def test_unconfigured_key_apologizes(self, client):
        response = client.post("/ai/chat", json={"message": "Why are my leaves yellow?"})

        assert response.status_code == 500
        assert response.json()["response"].startswith("I apologize")


class TestMailer:

    def test_sends_verification_code(self, app, client):
        fake = FakeMailClient()
        app.dependency_overrides[get_mail_client] = lambda: fake

        response = client.post("/mailer/send-otp", json={"email": "fern@plants.io", "message": "Your code is 123456"})

        assert response.status_code == 200
        assert fake.sent == [("fern@plants.io", "Verification Code", "Your code is 123456")]

    def test_unconfigured_mail_is_upstream_failure(self, client):
        response = client.post("/mailer/send-otp", json={"email": "fern@plants.io", "message": "123456"})

        assert response.status_code == 500
        assert response.json()["error"]["code"] == "UPSTREAM_FAILURE"
        assert response.json()["error"]["message"] == "Failed to send email. Please try again later."
