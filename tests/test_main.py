"""Tests for the application entry point."""

from unittest.mock import patch

from poke_team import main


class TestRun:
    """Tests for the run() server entry point."""

    def test_run_uses_settings(self):
        """Should serve the app on the configured host and port."""
        with patch("poke_team.main.uvicorn.run") as mock_run:
            main.run()

        mock_run.assert_called_once_with(
            "poke_team.main:app",
            host=main.settings.host,
            port=main.settings.port,
            reload=main.settings.debug,
        )
