"""
Notes API — Server Entry Point Tests
======================================

uvicorn.run and setup_logging are patched out: nothing binds a socket and
the root logger is left alone.
"""

from unittest.mock import patch

import pytest
from fastapi import FastAPI

from notes_api import server


class TestMain:

    def test_runs_app_on_configured_port(self, monkeypatch):
        monkeypatch.delenv("NOTES_API_PORT", raising=False)
        monkeypatch.delenv("NOTES_API_HOST", raising=False)
        with patch.object(server, "uvicorn") as mock_uvicorn, \
             patch.object(server, "setup_logging") as mock_setup:
            server.main()

        mock_setup.assert_called_once_with("WARNING")
        args, kwargs = mock_uvicorn.run.call_args
        assert isinstance(args[0], FastAPI)
        assert kwargs["host"] == "0.0.0.0"
        assert kwargs["port"] == 8080
        assert kwargs["log_config"] is None

    def test_invalid_config_exits(self, monkeypatch):
        monkeypatch.setenv("NOTES_API_PORT", "not-a-port")
        with patch.object(server, "uvicorn") as mock_uvicorn, \
             patch.object(server, "setup_logging"):
            with pytest.raises(SystemExit) as excinfo:
                server.main()

        assert excinfo.value.code == 1
        mock_uvicorn.run.assert_not_called()
