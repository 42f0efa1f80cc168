"""Extractor registry and factory function."""

from buildmeta.core.interfaces import InfoExtractor, IoService
from buildmeta.core.languages import TEXT_EXTRACTOR, LanguageProfile

# Registry of available extractors
_EXTRACTOR_REGISTRY: dict[str, type[InfoExtractor]] = {}


def register_extractor(name: str, extractor_class: type[InfoExtractor]) -> None:
    """Register an extractor class.

    Args:
        name: Name to register the extractor under
        extractor_class: Extractor class implementing InfoExtractor
    """
    _EXTRACTOR_REGISTRY[name] = extractor_class


def get_extractor(name: str, **kwargs) -> InfoExtractor:
    """Get an extractor instance by name.

    Args:
        name: Name of the extractor to get
        **kwargs: Configuration parameters for the extractor

    Returns:
        Configured extractor instance

    Raises:
        ValueError: If extractor name is not registered
    """
    if name not in _EXTRACTOR_REGISTRY:
        available = list(_EXTRACTOR_REGISTRY.keys())
        raise ValueError(f"Unknown extractor '{name}'. Available: {available}")

    extractor_class = _EXTRACTOR_REGISTRY[name]
    return extractor_class(**kwargs)


def list_extractors() -> list[str]:
    """List all registered extractor names."""
    return list(_EXTRACTOR_REGISTRY.keys())


def get_language_extractor(
    profile: LanguageProfile,
    io_service: IoService | None = None,
    source: str | None = None,
) -> InfoExtractor:
    """Get the extractor a language profile calls for.

    Args:
        profile: Language profile selected by the dispatcher
        io_service: I/O service handed to the extractor
        source: Optional extractor name overriding the profile's default

    Returns:
        Configured extractor instance
    """
    name = source or profile.extractor
    if name == TEXT_EXTRACTOR:
        return get_extractor(name, profile=profile, io_service=io_service)
    return get_extractor(name, io_service=io_service)
