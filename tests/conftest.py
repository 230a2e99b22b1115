"""Shared pytest fixtures for gdocs-markup tests."""

from unittest.mock import MagicMock

import pytest


@pytest.fixture
def mock_docs_service():
    """Create a mock Google Docs service holding an almost empty document."""
    service = MagicMock()
    documents = service.documents.return_value
    documents.create.return_value.execute.return_value = {"documentId": "new_doc_123", "title": "New Doc"}
    documents.get.return_value.execute.return_value = {
        "documentId": "doc_123",
        "title": "Existing Doc",
        "body": {
            "content": [
                {"endIndex": 1, "sectionBreak": {}},
                {"startIndex": 1, "endIndex": 20, "paragraph": {}},
            ]
        },
    }
    documents.batchUpdate.return_value.execute.return_value = {"documentId": "doc_123", "replies": []}
    return service


@pytest.fixture
def sent_requests(mock_docs_service):
    """Return a helper listing the `requests` bodies of every batchUpdate call, in order."""

    def _sent():
        calls = mock_docs_service.documents.return_value.batchUpdate.call_args_list
        return [call.kwargs["body"]["requests"] for call in calls]

    return _sent


@pytest.fixture
def env_override(monkeypatch):
    """Helper to override environment variables."""

    def _override(**kwargs):
        for key, value in kwargs.items():
            if value is None:
                monkeypatch.delenv(key, raising=False)
            else:
                monkeypatch.setenv(key, value)

    return _override
