from __future__ import annotations

import pytest

from arena_providers.base.errors import ErrorCode, NotConfiguredError
from arena_providers.base.factory import UnknownProviderError
from arena_providers.gemini.client import GeminiProvider
from arena_providers.openrouter.client import OpenRouterProvider
from arena_providers.orchestration import CredentialGate

GEMINI = "gemini-1.5-flash"
DEEPSEEK = "deepseek/deepseek-chat"


@pytest.mark.parametrize(
    "google_key, openrouter_key, expected",
    [
        ("g-real", "o-real", {GEMINI: True, DEEPSEEK: True}),
        ("g-real", None, {GEMINI: True, DEEPSEEK: False}),
        ("", "o-real", {GEMINI: False, DEEPSEEK: True}),
        ("your_google_gemini_api_key_here", "your_openrouter_api_key_here", {GEMINI: False, DEEPSEEK: False}),
    ],
)
def test_availability_tracks_usable_credentials(fake_builder, google_key, openrouter_key, expected):
    builder, _ = fake_builder
    gate = CredentialGate.from_config(
        adapter_builder=builder,
        credentials={"google": google_key, "openrouter": openrouter_key},
    )
    assert {mid: gate.has_credential(mid) for mid in expected} == expected


def test_startup_reads_environment(monkeypatch, fake_builder):
    builder, built = fake_builder
    monkeypatch.setenv("GOOGLE_API_KEY", "env-google")
    monkeypatch.setenv("OPENROUTER_API_KEY", "your_openrouter_api_key_here")
    gate = CredentialGate.from_config(adapter_builder=builder)
    assert gate.has_credential(GEMINI)
    assert not gate.has_credential(DEEPSEEK)
    assert built["google"][0].secret == "env-google"
    assert "openrouter" not in built


def test_default_builder_creates_real_adapters(monkeypatch):
    monkeypatch.setenv("GOOGLE_API_KEY", "g")
    monkeypatch.setenv("VITE_OPENROUTER_API_KEY", "o")
    gate = CredentialGate.from_config()
    assert isinstance(gate.resolve(GEMINI), GeminiProvider)
    assert isinstance(gate.resolve(DEEPSEEK), OpenRouterProvider)


def test_resolve_unconfigured_raises_not_configured(fake_builder):
    builder, _ = fake_builder
    gate = CredentialGate(adapter_builder=builder)
    with pytest.raises(NotConfiguredError) as ei:
        gate.resolve(GEMINI)
    assert ei.value.code is ErrorCode.AUTH
    assert ei.value.provider == "google"
    assert ei.value.model == GEMINI
    assert "No API key configured for model: gemini-1.5-flash" in ei.value.message


def test_set_credential_rotates_adapter(fake_builder):
    builder, built = fake_builder
    gate = CredentialGate(adapter_builder=builder)
    assert gate.set_credential("Google", "first") == (GEMINI,)
    first = gate.resolve(GEMINI)
    gate.set_credential("google", "second")
    second = gate.resolve(GEMINI)
    assert first is not second
    assert [a.secret for a in built["google"]] == ["first", "second"]


def test_set_credential_with_placeholder_unregisters(fake_builder):
    builder, built = fake_builder
    gate = CredentialGate(adapter_builder=builder)
    gate.set_credential("openrouter", "real")
    assert gate.has_credential(DEEPSEEK)
    gate.set_credential("OpenRouter", "your_openrouter_api_key_here")
    assert not gate.has_credential(DEEPSEEK)
    gate.set_credential("openrouter", "")
    assert not gate.has_credential(DEEPSEEK)
    assert len(built["openrouter"]) == 1


def test_set_credential_unknown_provider(fake_builder):
    builder, _ = fake_builder
    gate = CredentialGate(adapter_builder=builder)
    with pytest.raises(UnknownProviderError):
        gate.set_credential("Anthropic", "key")


def test_list_available_preserves_catalog_order(fake_builder):
    builder, _ = fake_builder
    gate = CredentialGate(adapter_builder=builder)
    assert gate.list_available() == ()
    assert gate.best_available() is None

    gate.set_credential("openrouter", "o")
    assert [d.id for d in gate.list_available()] == [DEEPSEEK]
    assert gate.best_available() == DEEPSEEK

    gate.set_credential("google", "g")
    assert [d.id for d in gate.list_available()] == [GEMINI, DEEPSEEK]
    assert gate.best_available() == GEMINI


def test_one_adapter_serves_all_models_of_a_provider(fake_builder):
    from arena_providers.base.models import ModelDescriptor
    from arena_providers.base.registry import ModelRegistry

    registry = ModelRegistry(
        (
            ModelDescriptor(id="a/one", display_name="One", provider_name="OpenRouter"),
            ModelDescriptor(id="b/two", display_name="Two", provider_name="OpenRouter"),
        )
    )
    builder, built = fake_builder
    gate = CredentialGate(registry=registry, adapter_builder=builder)
    assert gate.set_credential("openrouter", "k") == ("a/one", "b/two")
    assert gate.resolve("a/one") is gate.resolve("b/two")
    assert len(built["openrouter"]) == 1
