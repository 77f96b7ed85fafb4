# ============================================================================
# FILE: tests/conftest.py
# ============================================================================
"""
Pytest configuration and shared fixtures for testing.
"""

import json

import pytest

from medicine_burden.constants import OrganId
from medicine_burden.core import KnowledgeTable
from medicine_burden.resolver import BaseResolverClient, OpenRouterResolverClient


class FakeResolverClient(BaseResolverClient):
    """
    Resolver that answers from a dict instead of calling a model.

    Values are either the raw model text for a name or an exception to raise.
    Names missing from the dict answer "unknown".
    """

    def __init__(self, replies=None):
        super().__init__()
        self.replies = replies or {}
        self.calls = []

    @property
    def model_name(self) -> str:
        return "fake-model"

    async def complete(self, medicine_name: str) -> str:
        self.calls.append(medicine_name)
        reply = self.replies.get(
            medicine_name,
            '{"canonical_id": "unknown", "normalized_name": "Unknown", "confidence": 0.1}',
        )
        if isinstance(reply, Exception):
            raise reply
        return reply


def resolution_reply(canonical_id, normalized_name, confidence):
    """Model text for a well-formed resolution answer."""
    return json.dumps({
        "canonical_id": canonical_id,
        "normalized_name": normalized_name,
        "confidence": confidence,
    })


def completion_body(content):
    """OpenAI-style chat completion body carrying `content`."""
    return json.dumps({
        "id": "gen-test",
        "choices": [{"index": 0, "message": {"role": "assistant", "content": content}}],
    })


@pytest.fixture
def small_table():
    """Tiny knowledge table for injection tests"""
    return KnowledgeTable({
        "alpha": [OrganId.LIVER, OrganId.HEART],
        "Beta ": [OrganId.KIDNEY],
        "gamma": [OrganId.LIVER, OrganId.LIVER],
    })


@pytest.fixture
def fake_resolver():
    """Resolver with answers for a few common names"""
    return FakeResolverClient({
        "tylenol": resolution_reply("paracetamol", "Paracetamol (Tylenol)", 0.95),
        "ibuprofin": resolution_reply("ibuprofen", "Ibuprofen", 0.92),
        "aspirin": resolution_reply("aspirin", "Aspirin", 0.98),
        "advil maybe": resolution_reply("ibuprofen", "Ibuprofen (Advil)", 0.55),
        "vaguepill": resolution_reply("diclofenac", "Diclofenac", 0.2),
    })


@pytest.fixture
def openrouter_client():
    """OpenRouter client with a dummy key; HTTP is patched per test"""
    return OpenRouterResolverClient({
        "api_key": "test-key",
        "base_url": "https://openrouter.test/api/v1/",
        "model": "test/model",
        "timeout": 5,
    })


@pytest.fixture
def make_reply():
    return resolution_reply


@pytest.fixture
def make_completion():
    return completion_body


@pytest.fixture
def resolver_factory():
    """Build a FakeResolverClient with custom replies"""
    return FakeResolverClient
