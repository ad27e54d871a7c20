import json
from pathlib import Path
from typing import Optional

import config

L10N_DIR = Path(__file__).parent.parent / "l10n"


class Localizator:
    """
    Product-name translation backed by l10n/<lang>.json catalogs.

    Catalogs are keyed by the English source text, so an unknown text or an
    unknown language translates to itself.
    """

    @staticmethod
    def get_catalog(lang: Optional[str] = None) -> dict[str, str]:
        """
        Load the product-name catalog for a language.

        Args:
            lang: Optional language code (e.g., "de", "en").
                  If None, uses config.DEFAULT_LANGUAGE.
                  Pass the request language explicitly in FastAPI routes,
                  there is no process-wide "current" language.

        Returns:
            Mapping of English source text to localized text, empty if the
            language has no catalog
        """
        language = lang if lang is not None else config.DEFAULT_LANGUAGE
        if language not in config.SUPPORTED_LANGUAGES:
            return {}

        localization_file = L10N_DIR / f"{language}.json"
        if not localization_file.is_file():
            return {}

        with open(localization_file, "r", encoding="UTF-8") as f:
            data = json.loads(f.read())
            return data.get("products", {})

    @staticmethod
    def translate(text: str, lang: Optional[str] = None, catalog: Optional[dict[str, str]] = None) -> str:
        """
        Translate a single display text.

        Args:
            text: English source text
            lang: Target language code, ignored when catalog is given
            catalog: Preloaded catalog, avoids re-reading the file per item

        Example:
            >>> Localizator.translate("Apple Juice (1000ml)", lang="de")
            'Apfelsaft (1000ml)'
            >>> Localizator.translate("Unknown thing", lang="de")
            'Unknown thing'
        """
        if not text:
            return text
        if catalog is None:
            catalog = Localizator.get_catalog(lang)
        return catalog.get(text, text)

    @staticmethod
    def resolve_language(cookie_language: Optional[str] = None, accept_language: Optional[str] = None) -> str:
        """
        Negotiate the response language for a request.

        Order: explicit `language` cookie, then the best supported match from
        the Accept-Language header (by q-value, primary subtag), then
        config.DEFAULT_LANGUAGE.

        Examples:
            >>> Localizator.resolve_language(None, "de-DE,de;q=0.9,en;q=0.8")
            'de'
            >>> Localizator.resolve_language("en", "de")
            'en'
        """
        supported = config.SUPPORTED_LANGUAGES

        if cookie_language:
            normalized = cookie_language.strip().lower()
            if normalized in supported:
                return normalized
            primary = normalized.split("-")[0]
            if primary in supported:
                return primary

        if accept_language:
            candidates: list[tuple[float, int, str]] = []
            for position, part in enumerate(accept_language.split(",")):
                tag, _, params = part.strip().partition(";")
                tag = tag.strip().lower()
                if not tag or tag == "*":
                    continue
                quality = 1.0
                try:
                    for param in params.split(";"):
                        name, _, value = param.strip().partition("=")
                        if name.strip().lower() == "q":
                            quality = float(value.strip())
                except ValueError:
                    continue
                if quality <= 0:
                    continue
                candidates.append((-quality, position, tag))

            for _, _, tag in sorted(candidates):
                if tag in supported:
                    return tag
                primary = tag.split("-")[0]
                if primary in supported:
                    return primary

        return config.DEFAULT_LANGUAGE
