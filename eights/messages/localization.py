"""Message catalogs for the game, compiled from Mozilla Fluent files."""

from pathlib import Path

from fluent_compiler.bundle import FluentBundle
from babel.lists import format_list


DEFAULT_LOCALES_DIR = Path(__file__).resolve().parent.parent / "locales"


class Localization:
    """
    Per-locale Fluent bundles loaded from ``<locales_dir>/<locale>/*.ftl``.

    The engine never formats text itself: it hands a message id and its
    arguments to a user, and the user renders them here in its own locale.
    """

    _bundles: dict[str, FluentBundle] = {}
    _locales_dir: Path | None = None

    @classmethod
    def init(cls, locales_dir: Path | str | None = None) -> None:
        """Point the catalogs at a locales directory and drop cached bundles."""
        cls._locales_dir = Path(locales_dir) if locales_dir else DEFAULT_LOCALES_DIR
        cls._bundles = {}

    @classmethod
    def _get_bundle(cls, locale: str) -> FluentBundle:
        if locale in cls._bundles:
            return cls._bundles[locale]

        if cls._locales_dir is None:
            raise RuntimeError(
                "Localization not initialized. Call Localization.init() first."
            )

        locale_dir = cls._locales_dir / locale
        actual_locale = locale
        if not locale_dir.exists():
            locale_dir = cls._locales_dir / "en"
            actual_locale = "en"
            if not locale_dir.exists():
                raise RuntimeError(f"No locale files found for {locale} or en")

        ftl_content = [
            ftl_file.read_text(encoding="utf-8")
            for ftl_file in sorted(locale_dir.glob("*.ftl"))
        ]
        if not ftl_content:
            raise RuntimeError(f"No .ftl files found in {locale_dir}")

        bundle = FluentBundle.from_string(actual_locale, "\n".join(ftl_content))
        cls._bundles[locale] = bundle
        return bundle

    # Fluent wraps placeables in FSI/PDI marks; terminals print them as garbage.
    _BIDI_CHARS = "\u2068\u2069"

    @classmethod
    def get(cls, locale: str, message_id: str, **kwargs) -> str:
        """
        Render a message in the given locale.

        Unknown ids, missing catalogs and formatting errors all fall back to
        returning the message id itself.
        """
        try:
            bundle = cls._get_bundle(locale)
            result, _errors = bundle.format(message_id, kwargs)
        except Exception:
            return message_id
        for char in cls._BIDI_CHARS:
            result = result.replace(char, "")
        return result

    @classmethod
    def format_list_and(cls, locale: str, items: list[str]) -> str:
        """Join items with the locale's "and" conjunction (e.g. "A, B and C")."""
        if not items:
            return ""
        return format_list(items, style="standard", locale=locale)

    @classmethod
    def available_locales(cls) -> list[str]:
        """Locale codes that have a catalog directory."""
        if cls._locales_dir is None or not cls._locales_dir.exists():
            return []
        return sorted(p.name for p in cls._locales_dir.iterdir() if p.is_dir())
