"""Language profile registry - single source of truth.

Maps the platform's user-facing language labels ("c++", "javascript", ...)
to the runtime identifiers and pinned versions understood by the Runner.
The Runner's naming differs from ours (e.g. "c++" -> "cpp"), so the UI
never needs to change when the Runner bumps a version.
"""

from dataclasses import dataclass

WILDCARD_VERSION = "*"

# Languages that receive environment shims before execution
SHIMMED_LANGUAGES = frozenset({"javascript", "typescript"})


@dataclass(frozen=True)
class LanguageProfile:
    """Runner runtime selection for a platform language."""

    runtime_id: str  # Runner runtime: "cpp", "python", ...
    runtime_version: str  # Pinned semver, or "*" for latest
    name: str = ""  # Display name: "C++", "Python", ...


LANGUAGES: dict[str, LanguageProfile] = {
    "c++": LanguageProfile(runtime_id="cpp", runtime_version="10.2.0", name="C++"),
    "c": LanguageProfile(runtime_id="c", runtime_version="10.2.0", name="C"),
    "csharp": LanguageProfile(runtime_id="csharp", runtime_version="6.12.0", name="C#"),
    "java": LanguageProfile(runtime_id="java", runtime_version="15.0.2", name="Java"),
    "rust": LanguageProfile(runtime_id="rust", runtime_version="1.68.2", name="Rust"),
    "go": LanguageProfile(runtime_id="go", runtime_version="1.16.2", name="Go"),
    "python": LanguageProfile(runtime_id="python", runtime_version="3.10.0", name="Python"),
    "javascript": LanguageProfile(runtime_id="javascript", runtime_version="18.15.0", name="JavaScript"),
    "typescript": LanguageProfile(runtime_id="typescript", runtime_version="5.0.3", name="TypeScript"),
}


def get_language(language: str) -> LanguageProfile | None:
    """Get a registered language profile by label."""
    return LANGUAGES.get(language.lower())


def resolve_language(language: str) -> LanguageProfile:
    """Resolve a language label to a Runner profile.

    Unknown labels pass through unchanged with a wildcard version so the
    Runner itself decides whether the language exists.
    """
    profile = get_language(language)
    if profile:
        return profile
    return LanguageProfile(runtime_id=language, runtime_version=WILDCARD_VERSION)


def get_supported_languages() -> list[str]:
    """Get list of registered language labels."""
    return list(LANGUAGES.keys())


def is_supported_language(language: str) -> bool:
    """Check if a language label is registered."""
    return language.lower() in LANGUAGES


def is_shimmed_language(language: str) -> bool:
    """Check if a language gets environment shims injected."""
    return language.lower() in SHIMMED_LANGUAGES
