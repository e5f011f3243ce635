from src.config import Settings, settings


class TestConfigDefaults:
    def test_app_name(self) -> None:
        assert settings.app_name == "image-evaluation-client"

    def test_debug_default(self) -> None:
        assert Settings().debug is False

    def test_port_default(self) -> None:
        assert Settings().port == 8000

    def test_log_level_default(self) -> None:
        assert Settings().log_level == "info"

    def test_api_base_url_default(self) -> None:
        assert Settings().api_base_url == "http://localhost:5001/api"

    def test_evaluate_path_default(self) -> None:
        assert Settings().evaluate_path == "/evals"

    def test_default_mime_type(self) -> None:
        assert Settings().default_mime_type == "image/png"

    def test_request_timeout(self) -> None:
        assert Settings().request_timeout == 60.0

    def test_max_concurrent_evaluations(self) -> None:
        assert Settings().max_concurrent_evaluations == 5


class TestConfigOverrides:
    def test_env_override(self, monkeypatch) -> None:  # type: ignore[no-untyped-def]
        monkeypatch.setenv("DEFAULT_MIME_TYPE", "image/jpeg")
        monkeypatch.setenv("API_BASE_URL", "https://evals.example.com/api")
        s = Settings()
        assert s.default_mime_type == "image/jpeg"
        assert s.api_base_url == "https://evals.example.com/api"
