"""Unit tests for the language profile registry."""

import pytest

from learnix_gateway.config.languages import (
    LANGUAGES,
    WILDCARD_VERSION,
    LanguageProfile,
    get_language,
    get_supported_languages,
    is_shimmed_language,
    is_supported_language,
    resolve_language,
)


class TestLanguageProfile:
    """Tests for LanguageProfile dataclass."""

    def test_profile_is_frozen(self):
        """Test that LanguageProfile is immutable."""
        profile = LanguageProfile(runtime_id="cpp", runtime_version="10.2.0")

        with pytest.raises(Exception):  # FrozenInstanceError
            profile.runtime_version = "*"

    def test_name_defaults_to_empty(self):
        """Test the display name is optional."""
        profile = LanguageProfile(runtime_id="x", runtime_version="1")
        assert profile.name == ""


class TestLanguagesRegistry:
    """Tests for LANGUAGES registry."""

    def test_required_languages_present(self):
        """Test every platform language is registered."""
        for label in ["c", "c++", "csharp", "java", "rust", "go", "python", "javascript", "typescript"]:
            assert label in LANGUAGES

    def test_cpp_maps_to_runner_name(self):
        """Test the platform label differs from the Runner runtime id."""
        assert LANGUAGES["c++"].runtime_id == "cpp"
        assert LANGUAGES["c++"].runtime_version == "10.2.0"

    def test_versions_are_pinned(self):
        """Test registered languages never use the wildcard version."""
        for profile in LANGUAGES.values():
            assert profile.runtime_version != WILDCARD_VERSION

    def test_pinned_versions(self):
        """Test the pinned Runner versions."""
        assert LANGUAGES["javascript"].runtime_version == "18.15.0"
        assert LANGUAGES["typescript"].runtime_version == "5.0.3"
        assert LANGUAGES["python"].runtime_version == "3.10.0"
        assert LANGUAGES["java"].runtime_version == "15.0.2"


class TestResolveLanguage:
    """Tests for resolve_language function."""

    @pytest.mark.parametrize("label", ["c++", "C++", "JavaScript", "PYTHON", "tYpEsCrIpT"])
    def test_known_language_any_casing(self, label):
        """Test lookup is case-insensitive for known languages."""
        assert resolve_language(label) == LANGUAGES[label.lower()]

    def test_unknown_language_passes_through(self):
        """Test unknown languages resolve to a wildcard profile."""
        profile = resolve_language("brainfuck")
        assert profile.runtime_id == "brainfuck"
        assert profile.runtime_version == "*"

    def test_unknown_language_keeps_raw_input(self):
        """Test the fallback keeps the caller's casing."""
        assert resolve_language("Kotlin").runtime_id == "Kotlin"

    def test_empty_string_never_raises(self):
        """Test resolution is total."""
        profile = resolve_language("")
        assert profile.runtime_version == "*"


class TestRegistryHelpers:
    """Tests for lookup helpers."""

    def test_get_language_not_exists(self):
        """Test getting a non-existent language."""
        assert get_language("cobol") is None

    def test_get_language_uppercase(self):
        """Test case insensitivity."""
        assert get_language("RUST").runtime_id == "rust"

    def test_supported_languages_list(self):
        """Test supported list matches the registry."""
        languages = get_supported_languages()
        assert isinstance(languages, list)
        assert set(languages) == set(LANGUAGES)

    def test_is_supported_language(self):
        """Test membership helper."""
        assert is_supported_language("Go") is True
        assert is_supported_language("php") is False

    def test_only_js_and_ts_are_shimmed(self):
        """Test shimmed language membership."""
        assert is_shimmed_language("javascript")
        assert is_shimmed_language("TypeScript")
        assert not is_shimmed_language("python")
        assert not is_shimmed_language("js")
